"""GitHub publish client."""

import logging

import httpx
from pydantic import ValidationError

from schemas.workspace import PublishRequest, PublishResult

from .base import RemoteProvider
from .errors import MalformedResponse, TransportFailure

logger = logging.getLogger(__name__)


def parse_publish_result(raw: str) -> PublishResult:
    """Interpret a raw response body as a PublishResult.

    Raises:
        MalformedResponse: If the body is not JSON or not an object
    """
    try:
        return PublishResult.model_validate_json(raw)
    except ValidationError as e:
        raise MalformedResponse(
            "Publish response is not a publish result",
            details=f"{e.error_count()} validation error(s)",
        ) from e


class GitHubPublishClient(RemoteProvider):
    """Client for the backend route that pushes a project to GitHub.

    The backend owns GitHub authentication; this client only sends the
    snapshot and reads back the outcome.

    Usage:
        client = GitHubPublishClient("http://localhost:3000")
        result = await client.publish(request)
    """

    def __init__(
        self,
        base_url: str,
        publish_path: str = "/api/github-publish",
        timeout: float = 60.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize GitHub publish client.

        Args:
            base_url: Backend base URL
            publish_path: Path of the publish route
            timeout: Request timeout in seconds
            transport: Optional httpx transport (tests use MockTransport)
        """
        self.base_url = base_url.rstrip("/")
        self.publish_path = "/" + publish_path.lstrip("/")
        self.timeout = timeout
        self._transport = transport

    @property
    def name(self) -> str:
        return "github"

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            transport=self._transport,
        )

    async def publish(self, request: PublishRequest) -> PublishResult:
        """POST the snapshot and normalize the reply.

        The body is read as text and interpreted regardless of the HTTP
        status; the backend reports failures inside the payload.
        """
        logger.info(
            "Publishing %d file(s) to %s on branch %s",
            len(request.files),
            request.repo_name,
            request.branch,
        )
        try:
            async with self._client() as client:
                response = await client.post(self.publish_path, json=request.to_body())
                raw = response.text
        except (httpx.RequestError, httpx.InvalidURL) as e:
            raise TransportFailure(f"Failed to reach publish endpoint: {e}") from e

        logger.debug("Publish response: status=%d bytes=%d", response.status_code, len(raw))
        return parse_publish_result(raw)

    async def validate_connection(self) -> bool:
        """Check the publish route answers at all."""
        try:
            async with self._client() as client:
                response = await client.options(self.publish_path)
                return response.status_code < 500
        except (httpx.RequestError, httpx.InvalidURL):
            return False

    def __repr__(self) -> str:
        return f"GitHubPublishClient(base_url={self.base_url!r})"
