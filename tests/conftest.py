"""Shared test fixtures for routesync."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

import httpx
import pytest


def make_page(app_dir: Path, relative_dir: str, marker: str = "page.tsx") -> Path:
    """Create ``app_dir/relative_dir/marker`` and return the page file."""
    directory = app_dir / relative_dir if relative_dir else app_dir
    directory.mkdir(parents=True, exist_ok=True)
    page = directory / marker
    page.write_text("export default function Page() { return null }\n")
    return page


def fail_listing(monkeypatch: pytest.MonkeyPatch, target: Path, error: OSError) -> None:
    """Make ``Path.iterdir`` raise *error* for *target* only."""
    original = Path.iterdir

    def iterdir(self: Path) -> Any:
        if self == target:
            raise error
        return original(self)

    monkeypatch.setattr(Path, "iterdir", iterdir)


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """Project root with an ``app/`` tree covering every skip rule.

    Routable pages: ``/`` and ``/about``.  Skipped: a dynamic segment, a
    private folder, and an API folder.
    """
    app_dir = tmp_path / "app"
    make_page(app_dir, "")
    make_page(app_dir, "(marketing)/about")
    make_page(app_dir, "blog/[slug]")
    make_page(app_dir, "_internal")
    (app_dir / "api" / "health").mkdir(parents=True)
    (app_dir / "api" / "health" / "route.ts").write_text("export function GET() {}\n")
    return tmp_path


class RecordingTransport:
    """``httpx.MockTransport`` wrapper that records every request."""

    def __init__(
        self,
        handler: Callable[[httpx.Request], httpx.Response] | None = None,
    ) -> None:
        self.requests: list[httpx.Request] = []
        self._handler = handler or (
            lambda request: httpx.Response(200, json={"created": 0, "updated": 0})
        )

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._handler(request)

    @property
    def call_count(self) -> int:
        return len(self.requests)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self))


@pytest.fixture
def recorder() -> RecordingTransport:
    """Transport recording requests; answers 200 with zero counts."""
    return RecordingTransport()


def json_response(status: int, body: Any) -> Callable[[httpx.Request], httpx.Response]:
    """Handler returning a fixed JSON response."""
    return lambda request: httpx.Response(status, json=body)
