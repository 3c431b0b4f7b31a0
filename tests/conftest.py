"""Shared pytest fixtures for the reproduction runner test suite."""

from collections.abc import Iterator
from pathlib import Path
from typing import Any

import pytest
import structlog

from resend_repro.config import Settings

_ENV_VARS = (
    "RESEND_API_KEY",
    "RESEND_BASE_URL",
    "REQUEST_TIMEOUT",
    "TEST_EMAIL",
    "FROM_EMAIL",
    "TEMPLATE_PATH",
    "LOG_JSON",
)

STYLED_HTML = (
    '<p style="color:#ec4899;text-transform:uppercase;letter-spacing:2px;">Style Test</p>'
    '<h1 style="font-family:Georgia,serif;color:#ffffff;">Heading</h1>'
    '<p style="color:#d1d5db;">Body</p>'
    '<hr style="border-top:1px solid #374151;">'
)


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the caller's shell environment out of Settings."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def log_entries() -> Iterator[list[dict[str, Any]]]:
    """Capture structlog events instead of printing them to stdout."""
    with structlog.testing.capture_logs() as entries:
        yield entries


@pytest.fixture
def styled_html() -> str:
    """HTML containing every expected inline style."""
    return STYLED_HTML


@pytest.fixture
def settings() -> Settings:
    """Settings with an API key and no direct send addresses."""
    return Settings(
        _env_file=None,  # type: ignore[call-arg]
        resend_api_key="re_test_key",  # type: ignore[arg-type]
    )


@pytest.fixture
def send_settings() -> Settings:
    """Settings with an API key and both direct send addresses."""
    return Settings(
        _env_file=None,  # type: ignore[call-arg]
        resend_api_key="re_test_key",  # type: ignore[arg-type]
        test_email="you@example.com",
        from_email="sender@yourdomain.com",
    )


@pytest.fixture
def template_file(tmp_path: Path, styled_html: str) -> Path:
    """A template.html fixture on disk."""
    path = tmp_path / "template.html"
    path.write_text(styled_html, encoding="utf-8")
    return path
