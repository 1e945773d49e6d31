"""
Maven client implementation for maven_semver.

This module reads and writes the version declared in a Maven project's
``pom.xml`` by invoking Maven itself, so that inherited and
interpolated versions resolve exactly as Maven sees them.
"""

from __future__ import annotations

import logging
import os
import subprocess
from pathlib import Path
from typing import List, Optional


logger = logging.getLogger(__name__)
# Attach a null handler to prevent logging errors when no root handlers are
# configured. Records reach the root through the package logger.
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


class MavenError(Exception):
    """Raised when a Maven command fails."""

    pass


class MavenClient:
    """Client for reading and setting a Maven project's version."""

    def __init__(self, project_dir: Path, executable: Optional[str] = None) -> None:
        self.project_dir = project_dir
        self.executable = executable or self.find_executable(project_dir)

    @staticmethod
    def find_executable(project_dir: Path) -> str:
        """Return the Maven wrapper in ``project_dir`` if present, else ``mvn``."""
        wrapper = "mvnw.cmd" if os.name == "nt" else "mvnw"
        if (project_dir / wrapper).exists():
            return str(project_dir / wrapper)
        return "mvn"

    @staticmethod
    def is_project(path: Path) -> bool:
        """Return True if ``path`` contains a ``pom.xml``."""
        return (path / "pom.xml").exists()

    # Internal helper to run Maven commands
    def _run(self, args: List[str], check: bool = True) -> subprocess.CompletedProcess:
        full_cmd = [self.executable] + args
        logger.debug("Executing Maven command: %s", " ".join(full_cmd))
        try:
            result = subprocess.run(
                full_cmd,
                cwd=self.project_dir,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
                encoding="utf-8",
                errors="replace",
            )
        except FileNotFoundError as exc:
            raise MavenError(f"Maven executable not found: {self.executable}") from exc
        if check and result.returncode != 0:
            logger.error(
                "Maven command failed: %s\nSTDOUT: %s\nSTDERR: %s",
                " ".join(full_cmd),
                result.stdout,
                result.stderr,
            )
            raise MavenError(result.stderr.strip() or result.stdout.strip())
        return result

    def get_version(self) -> str:
        """Return the project's current version as Maven reports it.

        Raises
        ------
        MavenError
            If Maven fails or prints no version.
        """
        result = self._run(
            [
                "-q",
                "-Dexec.executable=echo",
                "-Dexec.args=${project.version}",
                "--non-recursive",
                "exec:exec",
            ]
        )
        for line in result.stdout.splitlines():
            if line.strip():
                return line.strip()
        raise MavenError("Maven did not report a project version")

    def set_version(self, version: str) -> None:
        """Set the version of the project and all of its modules."""
        self._run(
            [
                "-q",
                "versions:set",
                f"-DnewVersion={version}",
                "-DprocessAllModules",
                "-DgenerateBackupPoms=false",
            ]
        )
