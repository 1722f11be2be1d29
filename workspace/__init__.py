"""Workspace state: project files, repo metadata and directory snapshots.

The session object lives in ``workspace.session``.
"""

from .files import snapshot_directory
from .metadata import RepoMetadataStore, derive_repo_name
from .state import ProjectWorkspaceState

__all__ = [
    "snapshot_directory",
    "RepoMetadataStore",
    "derive_repo_name",
    "ProjectWorkspaceState",
]
