"""
Configuration loading for maven_semver.

Provides a loader for the environment variables that configure a
version bump run. See :mod:`maven_semver.config.loader` for
implementation details.
"""

from .loader import ActionConfig, ConfigError, load_config  # noqa: F401
