"""
Top-level package for maven_semver.

This package exposes the main CLI entry point via the
``maven_semver.cli`` module and the version resolution engine via
:mod:`maven_semver.versioning`.
"""

import logging

__all__ = ["__version__"]

__version__ = "0.1.0"

# Module loggers propagate up to this package logger. It stays detached
# from the root logger until the CLI configures logging and re-enables
# propagation, so library use never writes to a closed root stream.
logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())
    logger.propagate = False
