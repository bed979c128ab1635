"""
Documentation build orchestration.

The build runs in three steps, each a method of DocumentationRunner:

* ``update``  - refresh the current footer and download changelog details
* ``prepare`` - assemble release pages and generate indexes
* ``build``   - run the site generator and emit redirect stubs
"""

import asyncio
from datetime import date
from pathlib import Path
from typing import List, Optional

import httpx

from .changelog.builder import ChangelogRange, download_changelog
from .changelog.details import ensure_details_checkout
from .changelog.fragments import generate_version_page, update_last_footer
from .changelog.github import GitHubClient
from .changelog.index import generate_indexes
from .config import TOKEN_VARIABLE_NAME, Settings, get_github_token
from .layout import DocsLayout
from .logging import get_logger
from .publish.mkdocs_build import build_site
from .publish.redirects import generate_redirects
from .versions import VersionHistory

logger = get_logger(__name__)


class MissingTokenError(Exception):
    """Raised when the GitHub token needed for the download step is not set."""


def plan_changelog_downloads(history: VersionHistory, depth: int = -1) -> List[ChangelogRange]:
    """
    Select which changelogs to download.

    Args:
        history: Version history of this run
        depth: 0 for every stable version, N > 0 for the last N stable
            versions (the oldest one is never included), negative for none

    Returns:
        Ranges to download; the oldest stable version starts from the
        first commit, the current version always comes last and ends at HEAD
    """
    stable = history.stable_versions
    ranges: List[ChangelogRange] = []

    if depth == 0:
        ranges.append(ChangelogRange(stable[0], history.first_commit))
        start = 1
    elif depth > 0:
        start = max(len(stable) - depth, 1)
    else:
        start = len(stable)

    for i in range(start, len(stable)):
        ranges.append(ChangelogRange(stable[i], f"v{stable[i - 1]}"))

    ranges.append(ChangelogRange(history.current_version, f"v{history.last_stable_version}", "HEAD"))
    return ranges


class DocumentationRunner:
    def __init__(
        self,
        settings: Settings,
        history: VersionHistory,
        layout: Optional[DocsLayout] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.settings = settings
        self.history = history
        self.layout = layout or DocsLayout.from_root(settings.root_dir)
        self._transport = transport

    def ensure_changelog_details(self, force_clean: bool = False) -> Path:
        return ensure_details_checkout(
            self.layout.changelog_details_dir,
            self.settings.https_git_url,
            self.settings.changelog_details_branch,
            force_clean=force_clean,
        )

    def update(self, depth: int = -1, today: Optional[date] = None) -> List[Path]:
        """
        Refresh the current footer and download changelog details.

        Raises:
            MissingTokenError: If the GitHub token is not set
        """
        update_last_footer(
            self.layout,
            self.settings,
            self.history.current_version,
            self.history.last_stable_version,
            today=today,
        )
        self.ensure_changelog_details()

        token = get_github_token()
        if not token:
            raise MissingTokenError(f"Environment variable '{TOKEN_VARIABLE_NAME}' is not specified!")

        ranges = plan_changelog_downloads(self.history, depth)
        return asyncio.run(self._download(ranges, token))

    async def _download(self, ranges: List[ChangelogRange], token: str) -> List[Path]:
        written = []
        async with GitHubClient(
            self.settings.repo_owner,
            self.settings.repo_name,
            token,
            transport=self._transport,
        ) as client:
            for changelog_range in ranges:
                logger.info(f"Downloading changelog: {changelog_range.version}")
                written.append(await download_changelog(
                    client,
                    self.layout.changelog_details_dir,
                    changelog_range,
                    self.settings.repo_url,
                ))
        return written

    def prepare(self) -> List[Path]:
        """Assemble every release page and generate the indexes."""
        self.ensure_changelog_details()

        generated = [
            generate_version_page(self.layout, version, self.settings.project_title)
            for version in self.history.all_versions()
        ]
        generated += generate_indexes(self.layout, self.history)
        logger.info(f"Prepared {len(generated)} documentation files")
        return generated

    def build(self) -> List[Path]:
        """Build the site and emit redirect stubs into the directory MkDocs wrote."""
        site_dir = build_site(self.layout.site_config_file) or self.layout.site_dir
        return generate_redirects(self.layout.redirect_file, site_dir)
