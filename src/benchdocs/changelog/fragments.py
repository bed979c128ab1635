"""
Changelog fragment assembly.

Each release page is stitched together from up to three optional fragments
(header, details, footer) found under ``docs/_changelog``. The footer of the
version being prepared is regenerated from the settings on every update.
"""

from datetime import date
from pathlib import Path
from typing import List, Optional

from ..config import Settings
from ..layout import DocsLayout
from ..logging import get_logger

logger = get_logger(__name__)

FRAGMENT_KINDS = ("header", "details", "footer")


def _read_optional(path: Path) -> Optional[str]:
    if not path.exists():
        return None
    return path.read_text(encoding='utf-8')


def build_version_page(
    version: str,
    project_title: str,
    header: Optional[str] = None,
    details: Optional[str] = None,
    footer: Optional[str] = None,
) -> str:
    """
    Build the markdown of one release page.

    Args:
        version: Release version without the ``v`` prefix
        project_title: Project name used in the page heading
        header: Header fragment text, if any
        details: Details fragment text, if any
        footer: Footer fragment text, if any

    Returns:
        Page text with front matter, heading and the present fragments
    """
    lines = [
        "---",
        f"uid: changelog.v{version}",
        "---",
        "",
        f"# {project_title} v{version}",
        "",
        "",
    ]

    if header is not None:
        lines += [header, "", ""]

    if details is not None:
        lines += [details, "", ""]

    if footer is not None:
        lines += ["## Additional details", "", footer]

    return "\n".join(lines) + "\n"


def generate_version_page(layout: DocsLayout, version: str, project_title: str) -> Path:
    """Assemble the release page of a version from its fragments on disk."""
    fragments = {kind: _read_optional(layout.fragment_file(kind, version)) for kind in FRAGMENT_KINDS}
    missing = [kind for kind, text in fragments.items() if text is None]
    if missing:
        logger.debug(f"v{version}: no {', '.join(missing)} fragment")

    page_path = layout.version_page_file(version)
    page_path.parent.mkdir(parents=True, exist_ok=True)
    page_path.write_text(
        build_version_page(version, project_title, **fragments),
        encoding='utf-8',
    )
    return page_path


MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


def format_release_date(day: date) -> str:
    """English long date, e.g. ``March 05, 2024``, whatever the process locale."""
    return f"{MONTH_NAMES[day.month - 1]} {day.day:02d}, {day.year}"


def build_footer(
    version: str,
    previous_version: str,
    repo_url: str,
    package_urls: List[str],
    package_index_name: str = "NuGet",
    release_date: Optional[date] = None,
) -> str:
    """
    Build the footer fragment of the version being prepared.

    ``release_date`` is None until the release is stable, in which case the
    date reads ``TBA``.
    """
    date_text = format_release_date(release_date) if release_date else "TBA"

    lines = [
        f"_Date: {date_text}_",
        "",
        f"_Milestone: [v{version}]({repo_url}/issues?q=milestone%3Av{version})_",
        f"([List of commits]({repo_url}/compare/v{previous_version}...v{version}))",
        "",
        f"_{package_index_name} Packages:_",
    ]
    lines += [f"* {url}" for url in package_urls]
    return "\n".join(lines) + "\n"


def update_last_footer(
    layout: DocsLayout,
    settings: Settings,
    version: str,
    previous_version: str,
    today: Optional[date] = None,
) -> Path:
    """Regenerate the footer fragment of the current version."""
    release_date = (today or date.today()) if settings.stable else None
    content = build_footer(
        version,
        previous_version,
        settings.repo_url,
        settings.package_urls(version),
        settings.package_index_name,
        release_date,
    )

    footer_path = layout.fragment_file("footer", version)
    footer_path.parent.mkdir(parents=True, exist_ok=True)
    footer_path.write_text(content, encoding='utf-8')
    logger.info(f"Updated footer for v{version}: {footer_path}")
    return footer_path
