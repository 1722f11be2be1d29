"""Base classes for remote publishing providers."""

from abc import ABC, abstractmethod

from schemas.workspace import PublishRequest, PublishResult


class RemoteProvider(ABC):
    """Base class for remote source-control publishing clients.

    Subclasses send a project snapshot to a specific host (GitHub
    through the publishing backend, for now) and normalize the reply
    to PublishResult.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Provider name (e.g., 'github')."""
        ...

    @abstractmethod
    async def publish(self, request: PublishRequest) -> PublishResult:
        """Publish a project snapshot.

        Args:
            request: Repo name, full file set and target branch

        Returns:
            Normalized PublishResult (``success`` may be False)

        Raises:
            TransportFailure: If the call never produced a response
            MalformedResponse: If the body is not a publish result
        """
        ...

    @abstractmethod
    async def validate_connection(self) -> bool:
        """Check if the publishing endpoint is reachable.

        Returns:
            True if reachable, False otherwise
        """
        ...
