#!/usr/bin/env python
"""
Thin wrapper script to invoke the maven_semver CLI.

Running ``python run_action.py`` is equivalent to running the
``maven-semver`` console script installed via ``pyproject.toml``.
"""

from maven_semver.cli import main


if __name__ == "__main__":
    main(prog_name="maven-semver")
