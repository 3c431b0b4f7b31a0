"""Centralized, typed configuration using pydantic-settings.

Provides a single ``Settings`` class backed by ``.env`` file and environment
variables, a cached ``get_settings()`` accessor, and a ``validate_credentials()``
pre-flight gate that refuses to run without a Resend API key.

IMPORTANT: This module has ZERO imports from the ``resend_repro`` package to
prevent circular imports.  Only stdlib, pydantic, pydantic_settings, and
structlog are used.
"""

from __future__ import annotations

import sys
from functools import lru_cache
from pathlib import Path

import structlog
from pydantic import SecretStr, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = structlog.get_logger()

USAGE = "   Usage: RESEND_API_KEY=re_xxx resend-template-repro"
USAGE_WITH_SEND = (
    "          RESEND_API_KEY=re_xxx TEST_EMAIL=you@example.com "
    "FROM_EMAIL=you@yourdomain.com resend-template-repro"
)


class Settings(BaseSettings):
    """Run context loaded from environment variables and ``.env`` file.

    ``resend_api_key`` is a ``SecretStr`` so the key never leaks into logs
    or error output.  All values are read once and treated as read-only.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # -- Resend ----------------------------------------------------------------
    resend_api_key: SecretStr = SecretStr("")
    resend_base_url: str = "https://api.resend.com"
    request_timeout: float | None = None

    # -- Direct send (optional) ------------------------------------------------
    test_email: str = ""
    from_email: str = ""

    # -- Fixture ---------------------------------------------------------------
    template_path: Path = Path("template.html")

    # -- Logging ---------------------------------------------------------------
    log_json: bool = False

    @property
    def direct_send_enabled(self) -> bool:
        """Whether both addresses needed for the direct send step are set."""
        return bool(self.test_email and self.from_email)


@lru_cache
def get_settings() -> Settings:
    """Return a cached ``Settings`` instance.

    The ``@lru_cache`` decorator ensures environment variables are parsed
    exactly once.  Call ``get_settings.cache_clear()`` in tests to reset.

    Returns:
        The run ``Settings``.
    """
    try:
        return Settings()
    except ValidationError as exc:
        # Log only the structured errors list -- never the full exception
        # which may contain raw SecretStr values.
        logger.error("settings_validation_failed", errors=exc.errors())
        sys.exit(1)


def validate_credentials(settings: Settings) -> bool:
    """Check that a Resend API key is configured.

    When the key is missing, the usage text is written to stderr so the
    caller can abort before any file or network access.

    Args:
        settings: The loaded run settings.

    Returns:
        ``True`` if the API key is present, ``False`` otherwise.
    """
    if settings.resend_api_key.get_secret_value():
        return True

    logger.error("credential_missing", detail="RESEND_API_KEY is empty or not set")
    print("RESEND_API_KEY is required", file=sys.stderr)
    print(USAGE, file=sys.stderr)
    print(USAGE_WITH_SEND, file=sys.stderr)
    return False
