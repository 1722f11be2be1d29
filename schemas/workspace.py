"""Workspace publish schemas.

Wire and session models for publishing a project to GitHub and keeping
its repo metadata in sync with the backend project record.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_BRANCH = "main"

# path -> file content, replaced as a whole snapshot
ProjectFileSet = dict[str, str]


class PublishState(str, Enum):
    """Publish coordinator states."""

    IDLE = "idle"
    PUBLISHING = "publishing"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class OutcomeStatus(str, Enum):
    """How a single publish trigger ended."""

    SUCCEEDED = "succeeded"
    FAILED = "failed"
    SKIPPED = "skipped"  # Nothing to publish
    REJECTED = "rejected"  # Another attempt was in flight


class RepoMetadata(BaseModel):
    """Session view of where a project is published."""

    name: str | None = Field(None, description="Repository name")
    url: str | None = Field(None, description="Repository URL")
    branch: str = Field(DEFAULT_BRANCH, description="Target branch")


class ProjectMetadataRecord(BaseModel):
    """Repo fields stored on the backend project record.

    Used for both the GET response and the PATCH body. Only fields that
    are set are sent on PATCH.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    github_repo_url: str | None = Field(None, alias="githubRepoUrl")
    github_repo_name: str | None = Field(None, alias="githubRepoName")
    github_branch: str | None = Field(None, alias="githubBranch")

    def to_patch_body(self) -> dict[str, str]:
        """Serialize the set fields with their wire names."""
        return self.model_dump(by_alias=True, exclude_none=True)


class PublishRequest(BaseModel):
    """Body of a publish call. Built fresh per attempt."""

    model_config = ConfigDict(populate_by_name=True)

    repo_name: str = Field(..., min_length=1, alias="repoName")
    files: ProjectFileSet = Field(..., min_length=1)
    branch: str = Field(DEFAULT_BRANCH)

    def to_body(self) -> dict:
        return self.model_dump(by_alias=True)


class PublishResult(BaseModel):
    """Normalized publish response.

    A payload without ``success`` is read as a failed publish.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    success: bool = False
    repo_url: str | None = Field(None, alias="repoUrl")
    repo_name: str | None = Field(None, alias="repoName")
    error: str | None = None


class EditorBundle(BaseModel):
    """Everything the embedded editor needs to render the workspace."""

    template: str = "react"
    files: ProjectFileSet = Field(default_factory=dict)
    dependencies: dict[str, str] = Field(default_factory=dict)
    external_resources: list[str] = Field(default_factory=list)


class RepoDisplay(BaseModel):
    """What the repo info area shows next to the publish action."""

    label: str
    url: str | None = None
    branch: str = DEFAULT_BRANCH
    has_repo: bool = False
