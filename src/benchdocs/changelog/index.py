"""Index, full-changelog and table-of-contents generation."""

from pathlib import Path
from typing import List

import yaml

from ..layout import DocsLayout
from ..logging import get_logger
from ..versions import VersionHistory

logger = get_logger(__name__)


def build_toc(history: VersionHistory) -> str:
    """YAML table of contents: current, stable newest-first, then the full changelog."""
    entries = [{"name": f"v{version}", "href": f"v{version}.md"} for version in history.newest_first()]
    entries.append({"name": "Full ChangeLog", "href": "full.md"})
    return yaml.safe_dump(entries, sort_keys=False, default_flow_style=False, allow_unicode=True)


def build_changelog_index(history: VersionHistory) -> str:
    lines = ["---", "uid: changelog", "---", "", "# ChangeLog", ""]
    lines += [f"* @changelog.v{version}" for version in history.newest_first()]
    lines.append("* @changelog.full")
    return "\n".join(lines) + "\n"


def build_changelog_full(history: VersionHistory) -> str:
    lines = ["---", "uid: changelog.full", "---", "", "# Full ChangeLog", ""]
    lines += [f"[!include[v{version}](v{version}.md)]" for version in history.newest_first()]
    return "\n".join(lines) + "\n"


def build_home_index(readme_text: str) -> str:
    """Home page: ``title: Home`` front matter followed by the README verbatim."""
    return "---\ntitle: Home\n---\n" + readme_text


def _write(path: Path, content: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding='utf-8')
    logger.info(f"Generated {path}")
    return path


def generate_indexes(layout: DocsLayout, history: VersionHistory) -> List[Path]:
    """
    Write the home index, changelog index, full changelog and table of contents.

    Args:
        layout: Documentation layout
        history: Version history of this run

    Returns:
        Paths of the generated files
    """
    readme_text = layout.readme_file.read_text(encoding='utf-8')
    return [
        _write(layout.root_index_file, build_home_index(readme_text)),
        _write(layout.changelog_index_file, build_changelog_index(history)),
        _write(layout.changelog_full_file, build_changelog_full(history)),
        _write(layout.changelog_toc_file, build_toc(history)),
    ]
