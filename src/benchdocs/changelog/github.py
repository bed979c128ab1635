"""
Minimal asynchronous GitHub REST client.

Only the endpoints the changelog download needs are covered: milestones,
milestone issues and commit comparison. Pagination follows ``page``/``per_page``
until a short page is returned.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import httpx

from ..logging import get_logger

logger = get_logger(__name__)

API_URL = "https://api.github.com"
PER_PAGE = 100


class ChangelogDownloadError(Exception):
    """Raised when the GitHub API cannot be queried."""


class GitHubClient:
    def __init__(
        self,
        owner: str,
        repo: str,
        token: str,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._owner = owner
        self._repo = repo
        self._client = httpx.AsyncClient(
            base_url=API_URL,
            timeout=timeout,
            transport=transport,
            headers={
                "Accept": "application/vnd.github+json",
                "Authorization": f"Bearer {token}",
                "User-Agent": "benchdocs",
            },
        )

    async def __aenter__(self) -> GitHubClient:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    @property
    def repo_path(self) -> str:
        return f"/repos/{self._owner}/{self._repo}"

    async def _get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        try:
            response = await self._client.get(path, params=params)
            response.raise_for_status()
        except httpx.HTTPError as exc:
            raise ChangelogDownloadError(f"GitHub request failed: {path}: {exc}") from exc
        return response.json()

    async def _get_paged(self, path: str, params: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
        items: List[Dict[str, Any]] = []
        page = 1
        while True:
            query = dict(params or {}, per_page=PER_PAGE, page=page)
            batch = await self._get(path, query)
            items.extend(batch)
            if len(batch) < PER_PAGE:
                return items
            page += 1

    async def find_milestone(self, title: str) -> Optional[Dict[str, Any]]:
        """Return the milestone with the given title in any state, or None."""
        milestones = await self._get_paged(f"{self.repo_path}/milestones", {"state": "all"})
        for milestone in milestones:
            if milestone.get("title") == title:
                return milestone
        return None

    async def milestone_issues(self, milestone_number: int) -> List[Dict[str, Any]]:
        """Closed issues and pull requests attached to a milestone."""
        return await self._get_paged(
            f"{self.repo_path}/issues",
            {"milestone": milestone_number, "state": "closed"},
        )

    async def compare_commits(self, base: str, head: str) -> List[Dict[str, Any]]:
        """Commits reachable from ``head`` but not from ``base``."""
        path = f"{self.repo_path}/compare/{base}...{head}"
        commits: List[Dict[str, Any]] = []
        page = 1
        while True:
            data = await self._get(path, {"per_page": PER_PAGE, "page": page})
            batch = data.get("commits", [])
            commits.extend(batch)
            total = data.get("total_commits", len(commits))
            if not batch or len(commits) >= total:
                return commits
            page += 1
