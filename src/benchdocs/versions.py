"""
Version history of the documented project.

The history is a flat list of stable releases (oldest first) plus the version
currently being prepared. It is read once per run.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import List, Tuple

from .logging import get_logger

logger = get_logger(__name__)


class VersionHistoryError(Exception):
    """Raised when the version history is missing or inconsistent."""


@dataclass(frozen=True)
class VersionHistory:
    current_version: str
    stable_versions: Tuple[str, ...]
    first_commit: str

    def __post_init__(self) -> None:
        if not self.current_version:
            raise VersionHistoryError("Current version is not specified")
        if not self.stable_versions:
            raise VersionHistoryError("Stable version list is empty")

    @property
    def last_stable_version(self) -> str:
        return self.stable_versions[-1]

    def newest_first(self) -> List[str]:
        """Current version followed by the stable versions, newest first."""
        return [self.current_version] + list(reversed(self.stable_versions))

    def all_versions(self) -> List[str]:
        """Stable versions oldest first, then the current version."""
        return list(self.stable_versions) + [self.current_version]


def parse_versions(text: str) -> List[str]:
    """Parse one version per line, ignoring blank lines and ``#`` comments."""
    versions = []
    for line in text.splitlines():
        line = line.split('#', 1)[0].strip()
        if line:
            versions.append(line)
    return versions


def load_version_history(versions_file: Path, current_version: str, first_commit: str) -> VersionHistory:
    """
    Load the stable versions from a text file.

    Args:
        versions_file: File with one stable version per line, oldest first
        current_version: Version being prepared
        first_commit: Commit the oldest stable changelog starts from

    Returns:
        VersionHistory for this run

    Raises:
        VersionHistoryError: If the file is missing or yields no versions
    """
    if not versions_file.exists():
        raise VersionHistoryError(f"Versions file does not exist: {versions_file}")

    stable_versions = parse_versions(versions_file.read_text(encoding='utf-8'))
    logger.info(f"Loaded {len(stable_versions)} stable versions from {versions_file}")

    return VersionHistory(
        current_version=current_version,
        stable_versions=tuple(stable_versions),
        first_commit=first_commit,
    )
