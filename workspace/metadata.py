"""Repo metadata store: name derivation and update precedence."""

import httpx

from schemas.workspace import (
    DEFAULT_BRANCH,
    ProjectMetadataRecord,
    PublishResult,
    RepoMetadata,
)


def _parse_url(url: str) -> httpx.URL | None:
    """Parse ``url``; None unless it has both a scheme and a host."""
    try:
        parsed = httpx.URL(url)
    except (httpx.InvalidURL, TypeError):
        return None
    if not parsed.scheme or not parsed.host:
        return None
    return parsed


def _last_segment(parsed: httpx.URL) -> str | None:
    segments = [s for s in parsed.path.split("/") if s]
    return segments[-1] if segments else None


def derive_repo_name(url: str | None) -> str | None:
    """Return the last non-empty path segment of a well-formed URL.

    Returns None for malformed URLs and for URLs with no path.

    Example:
        >>> derive_repo_name("https://github.com/acme/app")
        'app'
    """
    if not url:
        return None
    parsed = _parse_url(url)
    return _last_segment(parsed) if parsed is not None else None


class RepoMetadataStore:
    """Holds the session's {name, url, branch}.

    All writes go through apply_loaded, apply_publish_result and
    set_branch.
    """

    def __init__(self, default_branch: str = DEFAULT_BRANCH) -> None:
        self._name: str | None = None
        self._url: str | None = None
        self._branch = default_branch or DEFAULT_BRANCH

    @property
    def name(self) -> str | None:
        return self._name

    @property
    def url(self) -> str | None:
        return self._url

    @property
    def branch(self) -> str:
        return self._branch

    def _set_url(self, url: str, provided_name: str | None) -> None:
        # Well-formed url: its last segment wins over any stored name.
        # Malformed url: keep the explicitly provided name, if any.
        self._url = url
        parsed = _parse_url(url)
        if parsed is None:
            if provided_name:
                self._name = provided_name
            return
        derived = _last_segment(parsed)
        if derived:
            self._name = derived

    def apply_loaded(self, record: ProjectMetadataRecord) -> None:
        """Apply a loaded backend record. Missing fields are left untouched."""
        if record.github_repo_url:
            self._set_url(record.github_repo_url, record.github_repo_name)
        elif record.github_repo_name:
            self._name = record.github_repo_name

        if record.github_branch:
            self._branch = record.github_branch

    def apply_publish_result(self, result: PublishResult, attempted_name: str) -> None:
        """Reconcile after a successful publish.

        Precedence, exactly one path runs:
            1. result.repo_url -> set url, derive name
            2. result.repo_name -> set name, url unchanged
            3. attempted_name (the name sent in the request)
        """
        if result.repo_url:
            self._set_url(result.repo_url, result.repo_name)
        elif result.repo_name:
            self._name = result.repo_name
        else:
            self._name = attempted_name

    def set_branch(self, new_branch: str | None) -> bool:
        """Set the target branch. Blank values are rejected.

        Returns:
            True if the branch was set
        """
        if not isinstance(new_branch, str) or not new_branch.strip():
            return False
        self._branch = new_branch.strip()
        return True

    def snapshot(self) -> RepoMetadata:
        return RepoMetadata(name=self._name, url=self._url, branch=self._branch)

    def to_record(self) -> ProjectMetadataRecord:
        """Current state in the backend record shape (unset fields omitted)."""
        return ProjectMetadataRecord(
            github_repo_name=self._name or None,
            github_repo_url=self._url or None,
            github_branch=self._branch,
        )
