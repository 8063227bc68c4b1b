"""Tests for routesync._cli — argument parsing and command dispatch."""

from __future__ import annotations

from pathlib import Path

import pytest

from routesync._cli import _build_parser, main
from tests.conftest import make_page


class TestBuildParser:
    """_build_parser — CLI argument parsing."""

    def test_sync_default_args(self) -> None:
        parser = _build_parser()
        args = parser.parse_args(["sync"])
        assert args.command == "sync"
        assert args.root == "."
        assert args.pages is True
        assert args.blog is False
        assert args.schemas is False
        assert args.dry_run is False

    def test_sync_no_pages(self) -> None:
        parser = _build_parser()
        args = parser.parse_args(["sync", "--no-pages", "--blog"])
        assert args.pages is False
        assert args.blog is True

    def test_sync_all_flags(self) -> None:
        parser = _build_parser()
        args = parser.parse_args(["sync", "my-site/", "--schemas", "--dry-run"])
        assert args.root == "my-site/"
        assert args.schemas is True
        assert args.dry_run is True

    def test_build_default_args(self) -> None:
        parser = _build_parser()
        args = parser.parse_args(["build"])
        assert args.command == "build"
        assert args.root == "."
        assert args.output == "public"
        assert args.base_url is None
        assert args.exclude is None
        assert args.disable_sync is None

    def test_build_all_flags(self) -> None:
        parser = _build_parser()
        args = parser.parse_args([
            "build", "my-site/",
            "--base-url", "https://example.com",
            "--output", "out",
            "--exclude", "/drafts/*",
            "--exclude", "/login",
            "--no-sync",
        ])
        assert args.root == "my-site/"
        assert args.base_url == "https://example.com"
        assert args.output == "out"
        assert args.exclude == ["/drafts/*", "/login"]
        assert args.disable_sync is True

    def test_no_command_returns_none(self) -> None:
        parser = _build_parser()
        args = parser.parse_args([])
        assert args.command is None


class TestMain:
    """main — exit codes."""

    @pytest.fixture(autouse=True)
    def _isolated(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv("UPTRADE_API_KEY", raising=False)
        monkeypatch.delenv("NEXT_PUBLIC_UPTRADE_API_KEY", raising=False)

    def test_no_command_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 0

    def test_sync_without_key_exits_one(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str],
    ) -> None:
        make_page(tmp_path / "app", "")
        with pytest.raises(SystemExit) as exc_info:
            main(["sync"])
        assert exc_info.value.code == 1
        assert "Missing UPTRADE_API_KEY" in capsys.readouterr().err

    def test_sync_dry_run_exits_zero(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        make_page(tmp_path / "app", "")
        monkeypatch.setenv("UPTRADE_API_KEY", "k")
        with pytest.raises(SystemExit) as exc_info:
            main(["sync", "--dry-run"])
        assert exc_info.value.code == 0

    def test_sync_key_from_env_file(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str],
    ) -> None:
        make_page(tmp_path / "app", "")
        (tmp_path / ".env.local").write_text("UPTRADE_API_KEY=from-file\n")
        try:
            with pytest.raises(SystemExit) as exc_info:
                main(["sync", "--dry-run"])
        finally:
            import os

            os.environ.pop("UPTRADE_API_KEY", None)
        assert exc_info.value.code == 0
        assert "Would sync 1 pages" in capsys.readouterr().err

    def test_build_writes_sitemap(self, tmp_path: Path) -> None:
        make_page(tmp_path / "app", "")
        make_page(tmp_path / "app", "about")
        with pytest.raises(SystemExit) as exc_info:
            main(["build", "--base-url", "https://example.com", "--no-sync"])
        assert exc_info.value.code == 0
        assert "https://example.com/about" in (tmp_path / "public" / "sitemap.xml").read_text()

    def test_build_without_base_url_exits_one(self, tmp_path: Path) -> None:
        make_page(tmp_path / "app", "")
        with pytest.raises(SystemExit) as exc_info:
            main(["build", "--no-sync"])
        assert exc_info.value.code == 1
