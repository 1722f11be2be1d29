"""Publish coordinator: one publish attempt from trigger to notice."""

import logging
from dataclasses import dataclass
from typing import Callable

from integrations.base import RemoteProvider
from integrations.errors import ErrorKind, MalformedResponse, PublishError, TransportFailure
from schemas.workspace import (
    OutcomeStatus,
    ProjectMetadataRecord,
    PublishRequest,
    PublishState,
)
from tools.notifier import Notifier
from workspace.metadata import RepoMetadataStore
from workspace.state import ProjectWorkspaceState

from .state_machine import PublishStateMachine

logger = logging.getLogger(__name__)

NOTHING_TO_PUBLISH = "No files to publish to GitHub"
ALREADY_PUBLISHING = "Publish already in progress"
PUBLISH_FAILED = "GitHub publish failed"
PUBLISH_SUCCEEDED = "Published successfully!"
UNEXPECTED_ERROR = "Unexpected error"


@dataclass
class PublishOutcome:
    """How one publish trigger ended."""

    status: OutcomeStatus
    message: str
    repo_name: str | None = None
    repo_url: str | None = None
    error_kind: ErrorKind | None = None

    @property
    def succeeded(self) -> bool:
        return self.status == OutcomeStatus.SUCCEEDED


class PublishCoordinator:
    """Runs publish attempts for a workspace session.

    Each trigger emits exactly one notice and always ends with the busy
    flag cleared and the state machine back in Idle. Triggers that
    arrive while an attempt is in flight are rejected without I/O.
    """

    def __init__(
        self,
        workspace: ProjectWorkspaceState,
        metadata: RepoMetadataStore,
        provider: RemoteProvider,
        notifier: Notifier,
        persist: Callable[[ProjectMetadataRecord], None],
        open_url: Callable[[str], None],
        fallback_name: Callable[[], str],
    ) -> None:
        """Initialize publish coordinator.

        Args:
            workspace: File set and busy flag
            metadata: Repo metadata store to reconcile
            provider: Remote publishing client
            notifier: Receives the single notice per trigger
            persist: Schedules a best-effort metadata save (must not block)
            open_url: Opens the published repository
            fallback_name: Repo name to use when none is stored
        """
        self.workspace = workspace
        self.metadata = metadata
        self.provider = provider
        self.notifier = notifier
        self.persist = persist
        self.open_url = open_url
        self.fallback_name = fallback_name
        self.machine = PublishStateMachine()

    @property
    def state(self) -> PublishState:
        return self.machine.state

    def repo_name_to_use(self) -> str:
        return self.metadata.name or self.fallback_name()

    async def publish(self) -> PublishOutcome:
        """Run one publish attempt."""
        if not self.machine.is_idle():
            logger.info("Publish trigger ignored: attempt already %s", self.machine.state.value)
            return self._emit(PublishOutcome(OutcomeStatus.REJECTED, ALREADY_PUBLISHING))

        files = self.workspace.files
        if not files:
            return self._emit(
                PublishOutcome(
                    OutcomeStatus.SKIPPED,
                    NOTHING_TO_PUBLISH,
                    error_kind=ErrorKind.EMPTY_INPUT,
                )
            )

        repo_name = self.repo_name_to_use()
        self.machine.transition(PublishState.PUBLISHING)
        self.workspace.set_busy(True)

        try:
            outcome = await self._attempt(repo_name, files)
        except Exception as e:
            logger.exception("Publish of %s failed unexpectedly", repo_name)
            if self.machine.state == PublishState.PUBLISHING:
                self.machine.transition(PublishState.FAILED)
            outcome = PublishOutcome(
                OutcomeStatus.FAILED,
                UNEXPECTED_ERROR,
                repo_name=repo_name,
                error_kind=e.kind if isinstance(e, PublishError) else None,
            )
        finally:
            self.workspace.set_busy(False)
            self.machine.finish()

        self._emit(outcome)
        if outcome.succeeded and outcome.repo_url:
            self._open(outcome.repo_url)
        return outcome

    async def _attempt(self, repo_name: str, files: dict[str, str]) -> PublishOutcome:
        request = PublishRequest(
            repo_name=repo_name,
            files=files,
            branch=self.metadata.branch,
        )

        try:
            result = await self.provider.publish(request)
        except MalformedResponse as e:
            logger.warning("Publish of %s returned an unreadable body: %s", repo_name, e)
            self.machine.transition(PublishState.FAILED)
            return PublishOutcome(
                OutcomeStatus.FAILED,
                PUBLISH_FAILED,
                repo_name=repo_name,
                error_kind=ErrorKind.MALFORMED_RESPONSE,
            )
        except TransportFailure as e:
            logger.error("Publish of %s could not reach the provider: %s", repo_name, e)
            self.machine.transition(PublishState.FAILED)
            return PublishOutcome(
                OutcomeStatus.FAILED,
                UNEXPECTED_ERROR,
                repo_name=repo_name,
                error_kind=ErrorKind.TRANSPORT_FAILURE,
            )

        if not result.success:
            logger.info("Publish of %s rejected: %s", repo_name, result.error)
            self.machine.transition(PublishState.FAILED)
            return PublishOutcome(
                OutcomeStatus.FAILED,
                result.error or PUBLISH_FAILED,
                repo_name=repo_name,
                error_kind=ErrorKind.APPLICATION_FAILURE,
            )

        self.machine.transition(PublishState.SUCCEEDED)
        self.metadata.apply_publish_result(result, repo_name)
        self.persist(self.metadata.to_record())
        logger.info("Published %s -> %s", self.metadata.name, result.repo_url or "(no url)")
        return PublishOutcome(
            OutcomeStatus.SUCCEEDED,
            PUBLISH_SUCCEEDED,
            repo_name=self.metadata.name,
            repo_url=result.repo_url,
        )

    def _emit(self, outcome: PublishOutcome) -> PublishOutcome:
        self.notifier.notify(outcome.message)
        return outcome

    def _open(self, url: str) -> None:
        try:
            self.open_url(url)
        except Exception:
            logger.exception("Could not open %s", url)
