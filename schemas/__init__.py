"""Schemas module for workspace publishing.

Provides Pydantic models for:
- Repo metadata and the backend project record
- Publish requests and results
- Editor bundles and repo display
"""

from .workspace import (
    DEFAULT_BRANCH,
    EditorBundle,
    OutcomeStatus,
    ProjectFileSet,
    ProjectMetadataRecord,
    PublishRequest,
    PublishResult,
    PublishState,
    RepoDisplay,
    RepoMetadata,
)

__all__ = [
    "DEFAULT_BRANCH",
    "EditorBundle",
    "OutcomeStatus",
    "ProjectFileSet",
    "ProjectMetadataRecord",
    "PublishRequest",
    "PublishResult",
    "PublishState",
    "RepoDisplay",
    "RepoMetadata",
]
