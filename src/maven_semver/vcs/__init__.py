"""
Version control system (VCS) integration.

This package contains the Git client used to read the commit history
since the latest tag and to commit, tag and push version changes.
"""

from .git_client import CommitHistory, GitClient, GitError  # noqa: F401
