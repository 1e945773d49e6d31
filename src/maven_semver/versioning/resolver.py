"""
Resolution of the next version from an ordered list of commit subjects.

Commits are applied one at a time, oldest first, each against the
version left by the commits before it. This is a left fold rather than
a "largest category wins" reduction: ``feat`` followed by ``feat!``
gives ``2.0.0`` from ``1.0.0`` while the reverse order gives ``2.1.0``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from functools import reduce
from typing import Iterable, Iterator, List

from .classifier import BumpCategory, classify, describe
from .version_model import Version, VersionParseError, bump, parse_version


logger = logging.getLogger(__name__)
# Attach a null handler so that library use without a configured root
# logger stays silent. The CLI configures logging explicitly.
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


@dataclass(frozen=True)
class ResolutionStep:
    """The effect of a single commit on the running version."""

    subject: str
    category: BumpCategory
    before: Version
    after: Version


@dataclass
class Resolution:
    """Outcome of resolving a starting version against commit subjects.

    Attributes
    ----------
    start_version : str
        The version string the resolution started from.
    final_version : str
        The resolved version. Equal to ``start_version`` when nothing
        changed or when ``start_version`` is not semantic.
    changed : bool
        True if ``final_version`` differs from ``start_version``.
    semantic : bool
        False if ``start_version`` could not be parsed; in that case no
        commit was applied.
    steps : List[ResolutionStep]
        Per-commit diagnostics in the order the commits were applied.
    """

    start_version: str
    final_version: str
    changed: bool
    semantic: bool
    steps: List[ResolutionStep] = field(default_factory=list)


def _apply(current: Version, subject: str) -> Version:
    return bump(current, classify(subject))


def resolve_version(start: Version, commits: Iterable[str]) -> Version:
    """Fold ``commits`` (oldest first) over ``start`` and return the result."""
    return reduce(_apply, commits, start)


def iter_steps(start: Version, commits: Iterable[str]) -> Iterator[ResolutionStep]:
    """Yield a :class:`ResolutionStep` for every commit, oldest first."""
    current = start
    for subject in commits:
        category = classify(subject)
        after = bump(current, category)
        yield ResolutionStep(subject=subject, category=category, before=current, after=after)
        current = after


def resolve(start_version: str, commit_subjects: Iterable[str]) -> Resolution:
    """Resolve the version that results from applying ``commit_subjects``.

    This never raises for string input. A non-semantic ``start_version``
    is reported through ``Resolution.semantic`` and leaves the version
    untouched regardless of the commits.
    """
    try:
        start = parse_version(start_version)
    except VersionParseError:
        logger.warning("Existing version %r is not semantic; it will not be incremented", start_version)
        return Resolution(
            start_version=start_version,
            final_version=start_version,
            changed=False,
            semantic=False,
        )

    steps: List[ResolutionStep] = []
    for step in iter_steps(start, commit_subjects):
        logger.debug("%s: %s (%s -> %s)", step.subject, describe(step.category), step.before, step.after)
        steps.append(step)

    final = steps[-1].after if steps else start
    if final == start:
        # Keep the caller's spelling (e.g. leading zeros) when nothing moved.
        return Resolution(start_version, start_version, False, True, steps)
    return Resolution(start_version, str(final), True, True, steps)
