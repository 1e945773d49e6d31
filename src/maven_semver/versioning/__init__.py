"""
Version resolution logic.

This package classifies commit subjects into version increments and
folds an ordered list of commits into the next semantic version. See
:mod:`maven_semver.versioning.classifier`,
:mod:`maven_semver.versioning.version_model` and
:mod:`maven_semver.versioning.resolver` for details.
"""

from .classifier import BumpCategory, classify, describe  # noqa: F401
from .resolver import Resolution, ResolutionStep, iter_steps, resolve, resolve_version  # noqa: F401
from .version_model import Version, VersionParseError, bump, is_semantic, parse_version  # noqa: F401
