"""
Publishing of a resolved version.

The :class:`Publisher` persists a new version in the Maven project,
commits the changed ``pom.xml`` files, optionally tags the commit,
pushes it and finally runs the configured deploy command.
"""

from __future__ import annotations

import logging
import shlex
import subprocess
from pathlib import Path
from typing import List

from maven_semver.build.maven_client import MavenClient, MavenError
from maven_semver.config.loader import ActionConfig, ConfigError
from maven_semver.vcs.git_client import GitClient, GitError


logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


POM_PATHSPEC = "*pom.xml"


class PublishError(Exception):
    """Raised when persisting or publishing a version fails."""

    pass


class Publisher:
    """Apply a version change to the project and its remote repository."""

    def __init__(self, git: GitClient, maven: MavenClient, config: ActionConfig) -> None:
        self.git = git
        self.maven = maven
        self.config = config

    @staticmethod
    def commit_message(version: str) -> str:
        return f"Increment version to {version}"

    def pom_pathspec(self) -> str:
        """Pathspec of the ``pom.xml`` files under the Maven project.

        Git runs from the repository root, so the pattern is anchored at
        the project directory to leave poms of sibling projects alone.
        """
        try:
            relative = Path(self.maven.project_dir).relative_to(self.git.repo_root)
        except ValueError:
            return POM_PATHSPEC
        if relative == Path("."):
            return POM_PATHSPEC
        return f"{relative.as_posix()}/{POM_PATHSPEC}"

    def publish(self, version: str) -> None:
        """Persist, commit and push ``version``.

        Raises
        ------
        PublishError
            If any step fails. Steps already performed are not rolled back.
        """
        try:
            remote = self.config.remote_url
        except ConfigError as exc:
            raise PublishError(str(exc)) from exc

        try:
            logger.info("Setting Maven project version to %s", version)
            self.maven.set_version(version)
        except MavenError as exc:
            raise PublishError(f"Failed to set Maven version: {exc}") from exc

        try:
            self.git.stage_files([self.pom_pathspec()])
            self.git.commit(
                self.commit_message(version),
                email=self.config.git_email,
                username=self.config.git_username,
            )
            if self.config.create_tag:
                self.git.tag(self.config.tag_name(version))
            self.git.push(remote, tags=self.config.create_tag)
        except GitError as exc:
            raise PublishError(f"Failed to commit/push version change: {exc}") from exc

        if self.config.deploy_action:
            self.deploy(self.config.deploy_action)

    def deploy(self, command: str) -> None:
        """Run the deploy ``command`` in the Maven project directory."""
        args: List[str] = shlex.split(command)
        logger.info("Running deploy action: %s", command)
        try:
            result = subprocess.run(args, cwd=self.maven.project_dir)
        except FileNotFoundError as exc:
            raise PublishError(f"Deploy command not found: {args[0]}") from exc
        if result.returncode != 0:
            raise PublishError(f"Deploy action exited with status {result.returncode}")
