"""
Data model for semantic versions.

The :class:`Version` represents a plain ``major.minor.patch`` triple.
Pre-release and build metadata suffixes are not supported; a string
carrying them is treated as non-semantic.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from .classifier import BumpCategory


_VERSION_RE = re.compile(r"([0-9]+)\.([0-9]+)\.([0-9]+)")


class VersionParseError(ValueError):
    """Raised when a string is not a ``major.minor.patch`` version."""

    pass


@dataclass(frozen=True)
class Version:
    """Representation of a semantic version.

    Attributes
    ----------
    major : int
        Incremented for incompatible changes.
    minor : int
        Incremented for backwards compatible features.
    patch : int
        Incremented for fixes and maintenance.
    """

    major: int
    minor: int
    patch: int

    def __post_init__(self) -> None:
        for name in ("major", "minor", "patch"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool) or value < 0:
                raise ValueError(f"'{name}' must be a non-negative integer, got {value!r}")

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"


def parse_version(text: str) -> Version:
    """Parse ``text`` into a :class:`Version`.

    Every component must be a non-empty run of ASCII digits. Leading
    zeros are accepted and dropped (``"01.2.3"`` parses as ``1.2.3``).

    Raises
    ------
    VersionParseError
        If ``text`` is not of the form ``major.minor.patch``.
    """
    match = _VERSION_RE.fullmatch(text) if isinstance(text, str) else None
    if match is None:
        raise VersionParseError(f"Version is not semantic: {text!r}")
    major, minor, patch = (int(group) for group in match.groups())
    return Version(major, minor, patch)


def is_semantic(text: str) -> bool:
    """Return True if ``text`` parses as a semantic version."""
    try:
        parse_version(text)
    except VersionParseError:
        return False
    return True


def bump(current: Version, category: BumpCategory) -> Version:
    """Return ``current`` incremented according to ``category``.

    A major increment resets minor and patch to zero, a minor increment
    resets patch. ``NONE`` returns ``current`` itself.
    """
    if category is BumpCategory.MAJOR:
        return Version(current.major + 1, 0, 0)
    if category is BumpCategory.MINOR:
        return Version(current.major, current.minor + 1, 0)
    if category is BumpCategory.PATCH:
        return Version(current.major, current.minor, current.patch + 1)
    return current
