"""
Changelog assembly for the documentation site.

Release pages are built from header/details/footer fragments; the details
fragments are downloaded from GitHub into a checkout of the changelog details
branch.
"""

from .builder import ChangelogRange, ReleaseData, download_changelog, render_release_notes
from .details import ensure_details_checkout
from .fragments import build_footer, build_version_page, generate_version_page, update_last_footer
from .github import ChangelogDownloadError, GitHubClient
from .index import build_changelog_full, build_changelog_index, build_home_index, build_toc, generate_indexes

__all__ = [
    "ChangelogRange",
    "ReleaseData",
    "download_changelog",
    "render_release_notes",
    "ensure_details_checkout",
    "build_footer",
    "build_version_page",
    "generate_version_page",
    "update_last_footer",
    "ChangelogDownloadError",
    "GitHubClient",
    "build_changelog_full",
    "build_changelog_index",
    "build_home_index",
    "build_toc",
    "generate_indexes",
]
