"""
Publishing of version changes.

This package persists a resolved version, commits and pushes it, and
reports the step outputs. See :mod:`maven_semver.publish.publisher`
and :mod:`maven_semver.publish.outputs` for details.
"""

from .outputs import write_outputs  # noqa: F401
from .publisher import PublishError, Publisher  # noqa: F401
