from pathlib import Path
import pytest
from hypothesis import given, strategies as st

from benchdocs.config import Settings, get_github_token, load_settings


class TestSettings:
    def test_default_values(self):
        """Test that Settings has sensible defaults."""
        settings = Settings()
        assert settings.root_dir == Path(".")
        assert settings.changelog_details_branch == "docs-changelog-details"
        assert settings.versions_file == Path("build/versions.txt")
        assert settings.stable is False
        assert settings.package_names == []

    def test_repo_urls(self):
        settings = Settings(repo_owner="acme", repo_name="benchlib")
        assert settings.repo_url == "https://github.com/acme/benchlib"
        assert settings.https_git_url == "https://github.com/acme/benchlib.git"

    def test_versions_file_relative_to_root(self):
        settings = Settings(root_dir=Path("/repo"))
        assert settings.resolve_versions_file() == Path("/repo/build/versions.txt")

    def test_absolute_versions_file_kept(self):
        settings = Settings(root_dir=Path("/repo"), versions_file=Path("/elsewhere/versions.txt"))
        assert settings.resolve_versions_file() == Path("/elsewhere/versions.txt")

    def test_package_urls(self):
        settings = Settings(package_names=["BenchLib", "BenchLib.Annotations"])
        assert settings.package_urls("0.3.0") == [
            "https://www.nuget.org/packages/BenchLib/0.3.0",
            "https://www.nuget.org/packages/BenchLib.Annotations/0.3.0",
        ]

    @given(names=st.lists(st.text(alphabet="abcdefghij.", min_size=1, max_size=10), max_size=8))
    def test_one_url_per_package(self, names):
        """For any package list, every package gets exactly one URL."""
        settings = Settings(package_names=names, package_url_template="https://pkg/{name}/{version}")
        urls = settings.package_urls("1.0")
        assert len(urls) == len(names)
        assert all(url.endswith("/1.0") for url in urls)


class TestLoadSettings:
    def test_file_values_override_defaults(self, tmp_path):
        config = tmp_path / "docs.yml"
        config.write_text(
            "project_title: BenchLib\n"
            "repo_owner: acme\n"
            "current_version: 0.14\n"
            "package_names: [BenchLib]\n",
            encoding="utf-8",
        )

        settings = load_settings(config)

        assert settings.project_title == "BenchLib"
        assert settings.repo_owner == "acme"
        assert settings.current_version == "0.14"
        assert settings.package_names == ["BenchLib"]
        assert settings.root_dir == tmp_path

    def test_relative_root_resolved_against_file(self, tmp_path):
        build_dir = tmp_path / "build"
        build_dir.mkdir()
        config = build_dir / "docs.yml"
        config.write_text("root_dir: ..\n", encoding="utf-8")

        settings = load_settings(config)

        assert settings.root_dir == tmp_path

    def test_overrides_win(self, tmp_path):
        config = tmp_path / "docs.yml"
        config.write_text("current_version: '1.0'\nstable: false\n", encoding="utf-8")

        settings = load_settings(config, root_dir=Path("repo"), stable=True, current_version=None)

        assert settings.stable is True
        assert settings.current_version == "1.0"
        assert settings.root_dir == Path("repo")

    def test_empty_file_gives_defaults(self, tmp_path):
        config = tmp_path / "docs.yml"
        config.write_text("", encoding="utf-8")

        settings = load_settings(config)

        assert settings.project_title == Settings().project_title

    def test_unknown_key_rejected(self, tmp_path):
        config = tmp_path / "docs.yml"
        config.write_text("project_titel: typo\n", encoding="utf-8")

        with pytest.raises(ValueError, match="project_titel"):
            load_settings(config)

    def test_non_mapping_rejected(self, tmp_path):
        config = tmp_path / "docs.yml"
        config.write_text("- a\n- b\n", encoding="utf-8")

        with pytest.raises(ValueError, match="mapping"):
            load_settings(config)


class TestGitHubToken:
    def test_token_read_from_environment(self, monkeypatch):
        monkeypatch.setenv("GITHUB_TOKEN", "secret")
        assert get_github_token() == "secret"

    def test_missing_token(self, no_github_token):
        assert get_github_token() is None

    def test_empty_token_treated_as_missing(self, monkeypatch):
        monkeypatch.setenv("GITHUB_TOKEN", "")
        assert get_github_token() is None
