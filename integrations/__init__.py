"""Remote integrations for publishing and project metadata.

Supports:
- GitHub publishing through the backend publish route
- Backend project record (repo name, URL, branch)

Usage:
    wsp publish ./my-app --project-id p1
"""

from .base import RemoteProvider
from .errors import ErrorKind, MalformedResponse, PublishError, TransportFailure
from .github_publish import GitHubPublishClient, parse_publish_result
from .project_metadata import ProjectMetadataClient

__all__ = [
    "RemoteProvider",
    "ErrorKind",
    "PublishError",
    "TransportFailure",
    "MalformedResponse",
    "GitHubPublishClient",
    "parse_publish_result",
    "ProjectMetadataClient",
]
