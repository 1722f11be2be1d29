"""Workspace session: the per-project state a user edits and publishes."""

import asyncio
import logging
import time
from typing import Callable, Coroutine

import httpx

from integrations.base import RemoteProvider
from integrations.github_publish import GitHubPublishClient
from integrations.project_metadata import ProjectMetadataClient
from orchestrator.checkpoints import ConfirmCallback
from orchestrator.coordinator import PublishCoordinator, PublishOutcome
from schemas.workspace import (
    EditorBundle,
    ProjectFileSet,
    ProjectMetadataRecord,
    RepoDisplay,
)
from settings.config import Config
from tools.browser_tool import BrowserTool
from tools.clipboard_tool import ClipboardTool
from tools.notifier import Notifier

from .metadata import RepoMetadataStore
from .state import ProjectWorkspaceState

logger = logging.getLogger(__name__)

NO_REPO_LABEL = "No repo"
NO_URL_TO_OPEN = "No repo URL available"
NO_URL_TO_COPY = "No repo URL to copy"
URL_COPIED = "Repository URL copied to clipboard"
COPY_FAILED = "Unable to copy URL"


class WorkspaceSession:
    """Owns the file set, repo metadata and busy flag of one session.

    Metadata is loaded from the backend when the session starts and
    again whenever the project id changes. Every metadata mutation is
    mirrored to the backend as a detached task; drain() waits for those.

    Usage:
        session = await WorkspaceSession.start(config, project_id="p1")
        session.replace_files({"/App.js": "..."})
        outcome = await session.publish()
        await session.drain()
    """

    def __init__(
        self,
        config: Config,
        provider: RemoteProvider,
        metadata_client: ProjectMetadataClient,
        notifier: Notifier,
        project_id: str | None = None,
        browser: BrowserTool | None = None,
        clipboard: ClipboardTool | None = None,
        initial_files: ProjectFileSet | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        """Initialize workspace session (metadata is not loaded yet).

        Args:
            config: Loaded configuration
            provider: Remote publishing client
            metadata_client: Backend project record client
            notifier: Receives user-facing notices
            project_id: Backend project identifier, if known
            browser: Opens repository URLs
            clipboard: Copies repository URLs
            initial_files: Starting file set (default: config default files)
            clock: Time source for the fallback repo name
        """
        self.config = config
        self.provider = provider
        self.metadata_client = metadata_client
        self.notifier = notifier
        self.browser = browser or BrowserTool()
        self.clipboard = clipboard or ClipboardTool()

        self._project_id = project_id or None
        self._started_ms = int(clock() * 1000)
        self._background: set[asyncio.Task] = set()

        files = config.editor.default_files if initial_files is None else initial_files
        self.workspace = ProjectWorkspaceState(files)
        self.metadata = RepoMetadataStore(config.publish.default_branch)
        self.coordinator = PublishCoordinator(
            workspace=self.workspace,
            metadata=self.metadata,
            provider=provider,
            notifier=notifier,
            persist=self._persist,
            open_url=self._open_url,
            fallback_name=self.fallback_name,
        )

    @classmethod
    async def start(
        cls,
        config: Config,
        project_id: str | None = None,
        notifier: Notifier | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        **kwargs,
    ) -> "WorkspaceSession":
        """Build a session wired to the configured backend and load metadata."""
        provider = GitHubPublishClient(
            config.api.base_url,
            publish_path=config.api.publish_path,
            timeout=config.api.timeout,
            transport=transport,
        )
        metadata_client = ProjectMetadataClient(
            config.api.base_url,
            projects_path=config.api.projects_path,
            timeout=config.api.timeout,
            transport=transport,
        )
        session = cls(
            config,
            provider=provider,
            metadata_client=metadata_client,
            notifier=notifier or Notifier(),
            project_id=project_id or config.project_id,
            **kwargs,
        )
        await session.initialize()
        return session

    @property
    def project_id(self) -> str | None:
        return self._project_id

    @property
    def busy(self) -> bool:
        return self.workspace.busy

    # ------------------------------------------------------------------
    # Lifecycle

    async def initialize(self) -> bool:
        """Load stored metadata for the current project id.

        Failures leave the metadata at its current values.

        Returns:
            True if a record was loaded and applied
        """
        record = await self.metadata_client.load(self._project_id)
        if record is None:
            return False
        self.metadata.apply_loaded(record)
        logger.debug("Loaded repo metadata for %s", self._project_id)
        return True

    async def set_project_id(self, project_id: str | None) -> bool:
        """Switch to another project id and reload its metadata.

        Returns:
            True if the id changed
        """
        project_id = project_id or None
        if project_id == self._project_id:
            return False
        self._project_id = project_id
        await self.initialize()
        return True

    async def drain(self) -> None:
        """Wait for outstanding background metadata saves."""
        while self._background:
            await asyncio.gather(*list(self._background), return_exceptions=True)

    # ------------------------------------------------------------------
    # Workspace

    def replace_files(self, snapshot: ProjectFileSet | None) -> bool:
        return self.workspace.replace_files(snapshot)

    def fallback_name(self) -> str:
        """Repo name used when none is stored; stable for the session."""
        token = self._project_id or str(self._started_ms)
        return self.config.publish.fallback_name_template.format(id=token)

    def editor_bundle(self) -> EditorBundle:
        editor = self.config.editor
        return EditorBundle(
            template=editor.template,
            files=self.workspace.files,
            dependencies=dict(editor.dependencies),
            external_resources=list(editor.external_resources),
        )

    # ------------------------------------------------------------------
    # Actions

    async def publish(self) -> PublishOutcome:
        return await self.coordinator.publish()

    async def change_branch(self, prompt: ConfirmCallback) -> bool:
        """Ask for a new branch and apply it.

        Args:
            prompt: Synchronous confirmation, pre-filled with the current branch

        Returns:
            True if the branch was changed
        """
        new_branch = prompt(self.metadata.branch or self.config.publish.default_branch)
        if not new_branch or not self.metadata.set_branch(new_branch):
            return False

        self._persist(ProjectMetadataRecord(github_branch=self.metadata.branch))
        self.notifier.notify(f"Branch set to {self.metadata.branch}")
        return True

    def open_repo(self) -> bool:
        url = self.metadata.url
        if not url:
            self.notifier.notify(NO_URL_TO_OPEN)
            return False
        self._open_url(url)
        return True

    async def copy_repo_url(self) -> bool:
        url = self.metadata.url
        if not url:
            self.notifier.notify(NO_URL_TO_COPY)
            return False

        result = await asyncio.to_thread(self.clipboard.execute, "copy", text=url)
        if not result.success:
            logger.warning("Clipboard write failed: %s", result.error)
            self.notifier.notify(COPY_FAILED)
            return False
        self.notifier.notify(URL_COPIED)
        return True

    def repo_display(self) -> RepoDisplay:
        name = self.metadata.name
        return RepoDisplay(
            label=name or NO_REPO_LABEL,
            url=self.metadata.url if name else None,
            branch=self.metadata.branch,
            has_repo=bool(name),
        )

    # ------------------------------------------------------------------
    # Helpers

    def _persist(self, record: ProjectMetadataRecord) -> None:
        if not self._project_id:
            logger.debug("No project id; skipping metadata save")
            return
        self._spawn(self.metadata_client.save(self._project_id, record))

    def _spawn(self, coro: Coroutine) -> None:
        task = asyncio.get_running_loop().create_task(coro)
        self._background.add(task)
        task.add_done_callback(self._on_background_done)

    def _on_background_done(self, task: asyncio.Task) -> None:
        self._background.discard(task)
        if task.cancelled():
            return
        error = task.exception()
        if error is not None:
            logger.warning("Background metadata save failed: %s", error)

    def _open_url(self, url: str) -> None:
        result = self.browser.execute("open", url=url)
        if not result.success:
            logger.warning("Could not open %s: %s", url, result.error)
