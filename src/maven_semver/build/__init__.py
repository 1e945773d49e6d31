"""
Build tool integration.

Provides the Maven client used to read and persist the project version.
See :mod:`maven_semver.build.maven_client` for details.
"""

from .maven_client import MavenClient, MavenError  # noqa: F401
