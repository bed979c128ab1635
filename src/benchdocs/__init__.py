"""benchdocs – changelog and documentation site builder for release builds."""

from .config import Settings, load_settings
from .layout import DocsLayout
from .runner import DocumentationRunner, MissingTokenError, plan_changelog_downloads
from .versions import VersionHistory, VersionHistoryError, load_version_history

__all__ = [
    "Settings",
    "load_settings",
    "DocsLayout",
    "DocumentationRunner",
    "MissingTokenError",
    "plan_changelog_downloads",
    "VersionHistory",
    "VersionHistoryError",
    "load_version_history",
]

__version__ = "0.1.0"
