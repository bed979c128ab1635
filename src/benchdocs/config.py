from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List, Optional
import os

import yaml

TOKEN_VARIABLE_NAME = "GITHUB_TOKEN"


@dataclass
class Settings:
    root_dir: Path = Path(".")
    project_title: str = "BenchmarkDotNet"
    repo_owner: str = "dotnet"
    repo_name: str = "BenchmarkDotNet"
    changelog_details_branch: str = "docs-changelog-details"
    versions_file: Path = Path("build/versions.txt")
    current_version: str = ""
    first_commit: str = "6eda98ab1e83a0d185d09ff8b24c795711af8db1"
    package_names: List[str] = field(default_factory=list)
    package_url_template: str = "https://www.nuget.org/packages/{name}/{version}"
    package_index_name: str = "NuGet"
    stable: bool = False

    @property
    def repo_url(self) -> str:
        return f"https://github.com/{self.repo_owner}/{self.repo_name}"

    @property
    def https_git_url(self) -> str:
        return f"{self.repo_url}.git"

    def resolve_versions_file(self) -> Path:
        """Versions file path, relative paths taken from the root directory."""
        if self.versions_file.is_absolute():
            return self.versions_file
        return self.root_dir / self.versions_file

    def package_urls(self, version: str) -> List[str]:
        return [
            self.package_url_template.format(name=name, version=version)
            for name in self.package_names
        ]


def get_github_token() -> Optional[str]:
    """Return the GitHub token from the environment, or None when unset or empty."""
    token = os.environ.get(TOKEN_VARIABLE_NAME)
    return token or None


def load_settings(config_path: Path, **overrides: Any) -> Settings:
    """
    Load settings from a YAML file.

    Keys in the file override the defaults of Settings. A relative
    ``root_dir`` is resolved against the directory holding the file; without
    one, that directory is the root.

    Args:
        config_path: Path to the YAML settings file
        **overrides: Values applied on top of the file (e.g. from CLI flags)

    Returns:
        Populated Settings object

    Raises:
        ValueError: If the file is not a mapping or names an unknown setting
    """
    with open(config_path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"Settings file must contain a mapping: {config_path}")

    values: Dict[str, Any] = dict(data)
    values.update({key: value for key, value in overrides.items() if value is not None})

    known = {f.name for f in fields(Settings)}
    unknown = sorted(set(values) - known)
    if unknown:
        raise ValueError(f"Unknown settings in {config_path}: {', '.join(unknown)}")

    if "root_dir" in values:
        root_dir = Path(values["root_dir"])
        if not root_dir.is_absolute() and overrides.get("root_dir") is None:
            root_dir = Path(os.path.normpath(config_path.parent / root_dir))
        values["root_dir"] = root_dir
    else:
        values["root_dir"] = config_path.parent

    if "versions_file" in values:
        values["versions_file"] = Path(values["versions_file"])
    if "package_names" in values:
        values["package_names"] = [str(name) for name in values["package_names"] or []]
    if "current_version" in values:
        values["current_version"] = str(values["current_version"])

    return Settings(**values)
