"""
Command line interface for the maven_semver tool.

This module defines the ``main`` function which is used as the entry
point when executing the ``maven-semver`` command. It orchestrates
configuration loading, reading the current Maven version, collecting
the commits since the latest tag, resolving the next version and
publishing it. Exit codes are defined below; situations in which the
version simply does not change (no commits, non-semantic version, no
qualifying commit) are not errors and exit with ``EXIT_SUCCESS``.
"""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import List, Optional, Tuple

import click

from maven_semver import __version__
from maven_semver.build.maven_client import MavenClient, MavenError
from maven_semver.config.loader import ConfigError, load_config
from maven_semver.publish.outputs import write_outputs
from maven_semver.publish.publisher import PublishError, Publisher
from maven_semver.vcs.git_client import GitClient, GitError
from maven_semver.versioning import describe, resolve

# Create a module-level logger. Records propagate to the package logger,
# which forwards them to the root handlers once ``main`` enables it.
logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------
EXIT_SUCCESS = 0
EXIT_GENERIC_ERROR = 1
# 2 is left to click for usage errors.
EXIT_NO_PROJECT = 3
EXIT_CONFIG_ERROR = 5
EXIT_VCS_FAILURE = 6
EXIT_BUILD_FAILURE = 7
EXIT_PUBLISH_FAILURE = 8


# ---------------------------------------------------------------------------
# Progress and status display utilities
# ---------------------------------------------------------------------------

class ProgressIndicator:
    """Report the duration of a slow operation such as a Maven call."""

    def __init__(self, message: str) -> None:
        self.message = message
        self.start_time = 0.0

    def __enter__(self):
        self.start_time = time.time()
        click.echo(f"→ {self.message}...")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is None:
            elapsed = time.time() - self.start_time
            click.echo(f"  ✓ Done ({elapsed:.1f}s)")
        return False


def print_step(step_num: int, total_steps: int, message: str):
    """Print a step indicator."""
    click.echo(f"\n{'='*60}")
    click.echo(f"Step {step_num}/{total_steps}: {message}")
    click.echo(f"{'='*60}")


def print_info(message: str, indent: int = 0):
    prefix = "  " * indent
    click.echo(f"{prefix}ℹ {message}")


def print_success(message: str, indent: int = 0):
    prefix = "  " * indent
    click.echo(f"{prefix}✓ {message}")


def print_warning(message: str, indent: int = 0):
    prefix = "  " * indent
    click.echo(f"{prefix}⚠ {message}")


def print_error(message: str, indent: int = 0):
    prefix = "  " * indent
    click.echo(f"{prefix}✗ {message}", err=True)


def plural(count: int, word: str) -> str:
    return f"{count} {word}{'s' if count != 1 else ''}"


# ---------------------------------------------------------------------------
# Core functionality
# ---------------------------------------------------------------------------

def locate_project(pom_path: Path) -> Tuple[Path, Path]:
    """Locate the Maven project directory and its Git repository root.

    Parameters
    ----------
    pom_path : Path
        Directory containing the ``pom.xml``, relative to the current
        working directory or absolute.

    Returns
    -------
    Tuple[Path, Path]
        ``(project_dir, repo_root)``.

    Raises
    ------
    SystemExit
        With code EXIT_NO_PROJECT if the directory does not exist or is
        not inside a Git repository.
    """
    project_dir = (Path.cwd() / pom_path).resolve()
    if not project_dir.is_dir():
        print_error(f"Could not find the pom path: {pom_path}")
        raise SystemExit(EXIT_NO_PROJECT)
    if not MavenClient.is_project(project_dir):
        print_warning(f"No pom.xml found in {project_dir}")
    repo_root = GitClient.find_repo_root(project_dir)
    if repo_root is None:
        print_error(f"{project_dir} is not inside a Git repository.")
        raise SystemExit(EXIT_NO_PROJECT)
    return project_dir, repo_root


def report_commits(subjects: List[str], latest_tag: Optional[str]) -> None:
    """Print a summary of the commits about to be processed."""
    if latest_tag is None:
        print_info("No tags exist. Processing only the previous commit")
    else:
        print_info(f"Latest tag: {latest_tag}")
    print_info(
        f"Attempting to up-version across the {plural(len(subjects), 'commit')} "
        f"since the last tag"
    )


@click.command()
@click.option("--pom-path", type=click.Path(path_type=Path), help="Directory containing the pom.xml (overrides POM_PATH).")
@click.option("--dry-run", is_flag=True, help="Resolve and report the next version without changing anything.")
@click.option("--verbose", is_flag=True, help="Enable verbose (debug) output.")
@click.version_option(version=__version__, prog_name="maven-semver")
def main(pom_path: Optional[Path], dry_run: bool, verbose: bool) -> None:
    """Increment a Maven project's version from its Conventional Commits.

    The commits since the latest tag are applied oldest first: a
    breaking ``feat!:``/``fix!:`` bumps the major version, ``feat:`` the
    minor version and ``fix:``/``chore:`` the patch version.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
        force=True,
    )
    logging.getLogger("maven_semver").propagate = True

    ctx = click.get_current_context(silent=True)
    total_steps = 5 if not dry_run else 4
    current_step = 0

    try:
        # Step 1: Load configuration
        current_step += 1
        print_step(current_step, total_steps, "Loading Configuration")
        try:
            config = load_config()
            if pom_path is not None:
                config.pom_path = pom_path
            if not dry_run:
                config.require_publish_settings()
        except ConfigError as exc:
            print_error(f"Configuration error: {exc}")
            raise click.exceptions.Exit(EXIT_CONFIG_ERROR)

        try:
            project_dir, repo_root = locate_project(config.pom_path)
        except SystemExit:
            raise click.exceptions.Exit(EXIT_NO_PROJECT)
        print_success(f"Maven project: {project_dir}")
        logger.debug("Git repository root: %s", repo_root)

        # Step 2: Read the current version
        current_step += 1
        print_step(current_step, total_steps, "Reading Current Version")
        maven = MavenClient(project_dir)
        try:
            with ProgressIndicator("Querying Maven for the project version"):
                current_version = maven.get_version()
        except MavenError as exc:
            print_error(f"Maven error: {exc}")
            raise click.exceptions.Exit(EXIT_BUILD_FAILURE)
        print_success(f"Current version: {current_version}")
        write_outputs(config.github_output, previous_version=current_version, new_version=current_version)

        # Step 3: Collect commits
        current_step += 1
        print_step(current_step, total_steps, "Collecting Commits")
        git = GitClient(repo_root)
        try:
            git.mark_safe_directory()
            history = git.get_relevant_commits()
        except GitError as exc:
            print_error(f"Git error: {exc}")
            raise click.exceptions.Exit(EXIT_VCS_FAILURE)

        if not history.subjects:
            print_warning("No commits found since last tag. Skipping all actions")
            raise click.exceptions.Exit(EXIT_SUCCESS)
        report_commits(history.subjects, history.latest_tag)

        # Step 4: Resolve the next version
        current_step += 1
        print_step(current_step, total_steps, "Resolving Next Version")
        resolution = resolve(current_version, history.subjects)
        if not resolution.semantic:
            print_warning("Existing version is not semantic. Version will not be incremented.")
            raise click.exceptions.Exit(EXIT_SUCCESS)

        for step in resolution.steps:
            click.echo(f"Processing commit: {step.subject}")
            print_info(describe(step.category), indent=1)
            print_info(f"Version before: {step.before}", indent=1)
            print_info(f"Version after:  {step.after}", indent=1)

        print_success(f"Resolved version: {resolution.final_version}")
        write_outputs(config.github_output, new_version=resolution.final_version)

        if not resolution.changed:
            print_info("Version not incremented. Skipping deployment actions")
            raise click.exceptions.Exit(EXIT_SUCCESS)

        if dry_run:
            print_info(f"Dry run: version would change {current_version} -> {resolution.final_version}")
            raise click.exceptions.Exit(EXIT_SUCCESS)

        # Step 5: Publish
        current_step += 1
        print_step(current_step, total_steps, "Publishing Version")
        publisher = Publisher(git, maven, config)
        try:
            with ProgressIndicator(f"Setting version to {resolution.final_version}"):
                publisher.publish(resolution.final_version)
        except PublishError as exc:
            print_error(f"Publishing failed: {exc}")
            raise click.exceptions.Exit(EXIT_PUBLISH_FAILURE)

        print_success(f"Version incremented: {current_version} -> {resolution.final_version}")
        raise click.exceptions.Exit(EXIT_SUCCESS)

    except click.exceptions.Exit:
        raise
    except Exception as exc:
        logging.exception("Unhandled error: %s", exc)
        print_error(f"Unexpected error: {exc}")
        ctx.exit(EXIT_GENERIC_ERROR)
