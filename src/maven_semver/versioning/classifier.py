"""
Classification of commit subjects into version increment categories.

A commit subject is matched against an ordered table of Conventional
Commit patterns. The first pattern that matches decides the category,
so a breaking ``feat!:`` subject is reported as a major increment even
though it would also satisfy the plain ``feat:`` rule. Subjects that
match nothing (including conventional types such as ``docs`` or
``refactor``) yield :attr:`BumpCategory.NONE`.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import List, Pattern, Tuple


class BumpCategory(str, Enum):
    """The version component a single commit asks to increment."""

    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"
    NONE = "none"

    @property
    def severity(self) -> int:
        """Rank of the category, 3 for MAJOR down to 0 for NONE."""
        return _SEVERITY[self]


_SEVERITY = {
    BumpCategory.MAJOR: 3,
    BumpCategory.MINOR: 2,
    BumpCategory.PATCH: 1,
    BumpCategory.NONE: 0,
}

# Evaluated top to bottom; order is significant.
_RULES: List[Tuple[Pattern[str], BumpCategory]] = [
    (re.compile(r"(feat|fix)(\(.*\))?!:.*", re.IGNORECASE | re.DOTALL), BumpCategory.MAJOR),
    (re.compile(r"feat(\(.*\))?:.*", re.IGNORECASE | re.DOTALL), BumpCategory.MINOR),
    (re.compile(r"(fix|chore)(\(.*\))?:.*", re.IGNORECASE | re.DOTALL), BumpCategory.PATCH),
]


def classify(subject: str) -> BumpCategory:
    """Classify a commit subject into a :class:`BumpCategory`.

    Parameters
    ----------
    subject : str
        The first line of a commit message, e.g. ``feat(api)!: drop v1``.

    Returns
    -------
    BumpCategory
        ``MAJOR`` for a ``feat``/``fix`` subject carrying the ``!``
        breaking-change marker, ``MINOR`` for ``feat``, ``PATCH`` for
        ``fix`` or ``chore`` and ``NONE`` otherwise.
    """
    if not isinstance(subject, str):
        return BumpCategory.NONE
    for pattern, category in _RULES:
        if pattern.fullmatch(subject):
            return category
    return BumpCategory.NONE


def describe(category: BumpCategory) -> str:
    """Return the human readable diagnostic for ``category``."""
    if category is BumpCategory.NONE:
        return "Detected no version increment"
    return f"Detected {category.value} version increment"
