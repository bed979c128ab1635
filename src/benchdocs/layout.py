from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class DocsLayout:
    """Fixed documentation directory layout under a repository root."""
    root_dir: Path
    docs_dir: Path
    changelog_dir: Path                 # generated changelog pages
    changelog_src_dir: Path             # header/details/footer fragments
    changelog_details_dir: Path         # checkout of the details branch
    site_dir: Path                      # generated site, redirect stubs
    site_config_file: Path
    redirect_file: Path
    readme_file: Path
    root_index_file: Path
    changelog_index_file: Path
    changelog_full_file: Path
    changelog_toc_file: Path

    @classmethod
    def from_root(cls, root_dir: Path) -> "DocsLayout":
        docs_dir = root_dir / "docs"
        changelog_dir = docs_dir / "changelog"
        changelog_src_dir = docs_dir / "_changelog"
        return cls(
            root_dir=root_dir,
            docs_dir=docs_dir,
            changelog_dir=changelog_dir,
            changelog_src_dir=changelog_src_dir,
            changelog_details_dir=changelog_src_dir / "details",
            site_dir=docs_dir / "_site",
            site_config_file=docs_dir / "mkdocs.json",
            redirect_file=docs_dir / "_redirects" / "_redirects",
            readme_file=root_dir / "README.md",
            root_index_file=docs_dir / "index.md",
            changelog_index_file=changelog_dir / "index.md",
            changelog_full_file=changelog_dir / "full.md",
            changelog_toc_file=changelog_dir / "toc.yml",
        )

    def fragment_file(self, kind: str, version: str) -> Path:
        """Path of a header, details or footer fragment for a version."""
        return self.changelog_src_dir / kind / f"v{version}.md"

    def version_page_file(self, version: str) -> Path:
        return self.changelog_dir / f"v{version}.md"
