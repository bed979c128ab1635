"""
Static HTML redirect stubs.

The redirect table holds one ``<source-path> <target-url>`` pair per line. Each
pair becomes an HTML page at ``<site>/<source-path>`` that forwards the browser
to the target and asks crawlers not to index it.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from ..logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class Redirect:
    source: str
    target: str
    line_number: int = field(default=0, compare=False)

    @property
    def relative_path(self) -> str:
        """Source path without leading slashes or backslashes."""
        return self.source.lstrip("/\\")


def parse_redirects(text: str) -> List[Redirect]:
    """
    Parse the redirect table.

    Blank lines are skipped; columns past the second are ignored.

    Raises:
        ValueError: If a non-blank line has fewer than two columns or its
            source is only slashes
    """
    redirects = []
    for line_number, line in enumerate(text.splitlines(), start=1):
        parts = line.split()
        if not parts:
            continue
        if len(parts) < 2:
            raise ValueError(f"Redirect line {line_number} has no target: {line!r}")
        redirect = Redirect(source=parts[0], target=parts[1], line_number=line_number)
        if not redirect.relative_path:
            raise ValueError(f"Redirect line {line_number} has an empty source path: {line!r}")
        redirects.append(redirect)
    return redirects


def render_redirect_page(target: str) -> str:
    return (
        "<!doctype html>"
        "<html lang=en-us>"
        "<head>"
        f"<title>{target}</title>"
        f"<link rel=canonical href='{target}'>"
        "<meta name=robots content=\"noindex\">"
        f"<meta charset=utf-8><meta http-equiv=refresh content=\"0; url={target}\">"
        "</head>"
        "</html>"
    )


def generate_redirects(redirect_file: Path, site_dir: Path) -> List[Path]:
    """
    Write one redirect page per line of the redirect table.

    Args:
        redirect_file: Path of the redirect table
        site_dir: Generated site directory the pages are written into

    Returns:
        Paths of the written pages; empty if the redirect table is missing

    Raises:
        ValueError: If a source path resolves outside ``site_dir``; nothing
            is written in that case
    """
    if not redirect_file.exists():
        logger.error(f"Redirect file '{redirect_file}' does not exist")
        return []

    redirects = parse_redirects(redirect_file.read_text(encoding='utf-8'))
    site_dir.mkdir(parents=True, exist_ok=True)
    site_root = site_dir.resolve()

    pages = []
    for redirect in redirects:
        page_path = site_dir / redirect.relative_path
        resolved = page_path.resolve()
        if resolved == site_root or site_root not in resolved.parents:
            raise ValueError(
                f"Redirect line {redirect.line_number} points outside {site_dir}: {redirect.source!r}"
            )
        pages.append((redirect, page_path))

    written = []
    for redirect, page_path in pages:
        page_path.parent.mkdir(parents=True, exist_ok=True)
        page_path.write_text(render_redirect_page(redirect.target), encoding='utf-8')
        written.append(page_path)

    logger.info(f"Generated {len(written)} redirects in {site_dir}")
    return written
