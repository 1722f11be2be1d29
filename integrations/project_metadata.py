"""Backend project record client for repo metadata.

Repo metadata is optional: loads and saves are best-effort and never
raise to the caller.
"""

import logging

import httpx
from pydantic import ValidationError

from schemas.workspace import ProjectMetadataRecord

from .errors import ErrorKind

logger = logging.getLogger(__name__)


class ProjectMetadataClient:
    """Reads and writes the repo fields of a backend project record.

    Routes:
        GET   {base_url}/api/projects/{id}
        PATCH {base_url}/api/projects/{id}
    """

    def __init__(
        self,
        base_url: str,
        projects_path: str = "/api/projects",
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize project metadata client.

        Args:
            base_url: Backend base URL
            projects_path: Path prefix of project records
            timeout: Request timeout in seconds
            transport: Optional httpx transport (tests use MockTransport)
        """
        self.base_url = base_url.rstrip("/")
        self.projects_path = "/" + projects_path.strip("/")
        self.timeout = timeout
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            transport=self._transport,
        )

    def _record_path(self, project_id: str) -> str:
        return f"{self.projects_path}/{project_id}"

    async def load(self, project_id: str | None) -> ProjectMetadataRecord | None:
        """Fetch stored metadata once.

        Returns:
            The record, or None on any failure (no id, network error,
            non-success status, unreadable body)
        """
        if not project_id:
            return None

        try:
            async with self._client() as client:
                response = await client.get(self._record_path(project_id))
        except (httpx.RequestError, httpx.InvalidURL) as e:
            logger.debug("Metadata load for %s failed: %s", project_id, e)
            return None

        if not response.is_success:
            logger.debug(
                "Metadata load for %s returned HTTP %d", project_id, response.status_code
            )
            return None

        try:
            return ProjectMetadataRecord.model_validate_json(response.text)
        except ValidationError as e:
            logger.debug("Metadata load for %s unreadable: %s", project_id, e)
            return None

    async def save(self, project_id: str | None, record: ProjectMetadataRecord) -> bool:
        """PATCH the set fields of ``record`` onto the project.

        The response body is ignored.

        Returns:
            True if the request completed with a success status
        """
        if not project_id:
            return False

        body = record.to_patch_body()
        try:
            async with self._client() as client:
                response = await client.patch(self._record_path(project_id), json=body)
        except (httpx.RequestError, httpx.InvalidURL) as e:
            logger.warning(
                "%s: metadata save for %s failed: %s",
                ErrorKind.PERSISTENCE_FAILURE.value,
                project_id,
                e,
            )
            return False

        if not response.is_success:
            logger.warning(
                "%s: metadata save for %s returned HTTP %d",
                ErrorKind.PERSISTENCE_FAILURE.value,
                project_id,
                response.status_code,
            )
            return False

        logger.debug("Saved metadata for %s: %s", project_id, sorted(body))
        return True

    def __repr__(self) -> str:
        return f"ProjectMetadataClient(base_url={self.base_url!r})"
