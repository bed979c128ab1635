"""Tests for redirect stub generation."""

import re
import tempfile
from pathlib import Path

import pytest
from hypothesis import given, settings, strategies as st

from benchdocs.publish.redirects import (
    Redirect, generate_redirects, parse_redirects, render_redirect_page
)


class TestParseRedirects:
    def test_two_columns_per_line(self):
        redirects = parse_redirects("/old.html https://new.example/a\nguide/x.html  https://new.example/b\n")
        assert redirects == [
            Redirect("/old.html", "https://new.example/a"),
            Redirect("guide/x.html", "https://new.example/b"),
        ]

    def test_blank_lines_skipped(self):
        assert len(parse_redirects("\n/a.html https://x\n\n   \n")) == 1

    def test_single_column_line_rejected(self):
        with pytest.raises(ValueError, match="line 2"):
            parse_redirects("/a.html https://x\n/b.html\n")

    def test_leading_slash_and_backslash_stripped(self):
        assert Redirect("/a/b.html", "t").relative_path == "a/b.html"
        assert Redirect("\\a.html", "t").relative_path == "a.html"
        assert Redirect("a.html", "t").relative_path == "a.html"
        assert Redirect("//a.html", "t").relative_path == "a.html"
        assert Redirect("/\\/a.html", "t").relative_path == "a.html"

    def test_slash_only_source_rejected(self):
        with pytest.raises(ValueError, match="line 2 has an empty source path"):
            parse_redirects("/a.html https://x\n/ https://y\n")

    def test_line_number_recorded(self):
        redirects = parse_redirects("\n/a.html https://x\n")
        assert redirects[0].line_number == 2


class TestRenderRedirectPage:
    def test_exact_page(self):
        assert render_redirect_page("https://new.example/") == (
            "<!doctype html><html lang=en-us><head>"
            "<title>https://new.example/</title>"
            "<link rel=canonical href='https://new.example/'>"
            "<meta name=robots content=\"noindex\">"
            "<meta charset=utf-8><meta http-equiv=refresh content=\"0; url=https://new.example/\">"
            "</head></html>"
        )


class TestGenerateRedirects:
    def test_one_file_per_row(self, tmp_path):
        redirect_file = tmp_path / "_redirects"
        redirect_file.write_text(
            "/articles/old.html https://bench.example/articles/new.html\n"
            "guide.html https://bench.example/guide/\n",
            encoding="utf-8",
        )
        site_dir = tmp_path / "_site"

        written = generate_redirects(redirect_file, site_dir)

        assert written == [site_dir / "articles" / "old.html", site_dir / "guide.html"]
        assert "url=https://bench.example/articles/new.html" in written[0].read_text(encoding="utf-8")

    def test_missing_redirect_file_writes_nothing(self, tmp_path):
        site_dir = tmp_path / "_site"

        written = generate_redirects(tmp_path / "_redirects", site_dir)

        assert written == []
        assert not site_dir.exists()

    @settings(max_examples=25)
    @given(targets=st.lists(
        st.from_regex(r"\Ahttps://[a-z]{1,8}\.example/[a-z0-9/._-]{0,12}\Z"),
        min_size=1, max_size=10,
    ))
    def test_link_target_matches_column_two(self, targets):
        """For any redirect table, each page's canonical link is the target verbatim."""
        with tempfile.TemporaryDirectory() as temp_dir:
            root = Path(temp_dir)
            lines = [f"/page{i}.html {target}" for i, target in enumerate(targets)]
            redirect_file = root / "_redirects"
            redirect_file.write_text("\n".join(lines) + "\n", encoding="utf-8")

            written = generate_redirects(redirect_file, root / "_site")

            assert len(written) == len(targets)
            for path, target in zip(written, targets):
                html = path.read_text(encoding="utf-8")
                assert re.search(r"<link rel=canonical href='([^']*)'>", html).group(1) == target

    def test_doubled_leading_slash_stays_inside_site(self, tmp_path):
        outside = tmp_path / "outside"
        redirect_file = tmp_path / "_redirects"
        redirect_file.write_text(f"/{outside}/page.html https://bench.example/\n", encoding="utf-8")
        site_dir = tmp_path / "_site"

        written = generate_redirects(redirect_file, site_dir)

        assert not outside.exists()
        assert len(written) == 1
        assert site_dir.resolve() in written[0].resolve().parents

    def test_parent_escape_rejected_before_writing(self, tmp_path):
        redirect_file = tmp_path / "_redirects"
        redirect_file.write_text(
            "/ok.html https://bench.example/ok\n"
            "/../escaped.html https://bench.example/escaped\n",
            encoding="utf-8",
        )
        site_dir = tmp_path / "_site"

        with pytest.raises(ValueError, match="line 2 points outside"):
            generate_redirects(redirect_file, site_dir)

        assert not (tmp_path / "escaped.html").exists()
        assert not (site_dir / "ok.html").exists()

    def test_source_resolving_to_site_root_rejected(self, tmp_path):
        redirect_file = tmp_path / "_redirects"
        redirect_file.write_text("/. https://bench.example/\n", encoding="utf-8")

        with pytest.raises(ValueError, match="line 1 points outside"):
            generate_redirects(redirect_file, tmp_path / "_site")

    def test_slash_only_source_fails_with_line(self, tmp_path):
        redirect_file = tmp_path / "_redirects"
        redirect_file.write_text("/ https://bench.example/\n", encoding="utf-8")

        with pytest.raises(ValueError, match="line 1"):
            generate_redirects(redirect_file, tmp_path / "_site")
