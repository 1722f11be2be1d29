"""Current file set and busy flag of a workspace session."""

import logging

from schemas.workspace import ProjectFileSet

logger = logging.getLogger(__name__)


class ProjectWorkspaceState:
    """Owns the project file snapshot and the advisory busy flag.

    The file set is only ever replaced whole, and an empty incoming
    snapshot is ignored so the editor never drops to an empty workspace
    because of a stale or transient upstream push.
    """

    def __init__(self, initial_files: ProjectFileSet | None = None) -> None:
        self._files: ProjectFileSet = dict(initial_files or {})
        self._busy = False

    @property
    def files(self) -> ProjectFileSet:
        """A copy of the current snapshot."""
        return dict(self._files)

    @property
    def busy(self) -> bool:
        return self._busy

    def replace_files(self, snapshot: ProjectFileSet | None) -> bool:
        """Replace the file set with ``snapshot`` unless it is empty.

        Returns:
            True if the snapshot was applied
        """
        if not snapshot:
            logger.debug("Ignoring empty file snapshot")
            return False
        self._files = dict(snapshot)
        return True

    def set_busy(self, busy: bool) -> None:
        self._busy = bool(busy)
