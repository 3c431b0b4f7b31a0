"""Async Resend HTTP API client.

Provides the ``ResendClient`` class covering the three operations the
reproduction needs: creating a template, fetching it back by id, and
sending an email directly.  Each call opens its own ``httpx.AsyncClient``
and awaits a single response; there is no retry and, unless a timeout is
configured, no client-side deadline.
"""

from __future__ import annotations

from typing import Any

import httpx
import structlog

from resend_repro.domain.errors import ResendAPIError
from resend_repro.resend.models import (
    CreatedResource,
    CreateTemplateRequest,
    SendEmailRequest,
    Template,
)

logger = structlog.get_logger()

DEFAULT_BASE_URL = "https://api.resend.com"
USER_AGENT = "resend-template-repro/0.1.0"


def _error_from_response(response: httpx.Response) -> ResendAPIError:
    """Build a ``ResendAPIError`` from a non-2xx response.

    Resend error bodies look like ``{"statusCode": 422, "name":
    "validation_error", "message": "..."}``.  Non-JSON bodies fall back to
    the raw text, then to the HTTP reason phrase.

    Args:
        response: The failed HTTP response.

    Returns:
        The error to raise.
    """
    try:
        body = response.json()
    except ValueError:
        body = None

    if isinstance(body, dict):
        message = str(body.get("message") or response.reason_phrase)
        name = body.get("name")
        return ResendAPIError(response.status_code, message, name=name)

    message = response.text.strip() or response.reason_phrase or f"HTTP {response.status_code}"
    return ResendAPIError(response.status_code, message)


class ResendClient:
    """Wrapper around the Resend REST API.

    Args:
        api_key: The Resend API key (``re_...``).
        base_url: API root, overridable for testing.
        timeout: Per-request timeout in seconds; ``None`` waits indefinitely.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float | None = None,
    ) -> None:
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout

    async def _request(
        self,
        method: str,
        path: str,
        payload: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Send one authenticated request and return the decoded JSON body.

        Raises:
            ResendAPIError: If the API returns a non-2xx status.
            httpx.HTTPError: On transport failures.
        """
        async with httpx.AsyncClient() as client:
            response = await client.request(
                method,
                f"{self._base_url}{path}",
                json=payload,
                headers={
                    "Authorization": f"Bearer {self._api_key}",
                    "User-Agent": USER_AGENT,
                },
                timeout=self._timeout,
            )

        logger.debug(
            "resend_request",
            method=method,
            path=path,
            status_code=response.status_code,
        )

        if response.is_error:
            raise _error_from_response(response)
        return dict(response.json())

    async def create_template(self, request: CreateTemplateRequest) -> CreatedResource:
        """Create a stored template via ``POST /templates``.

        Args:
            request: Template name, subject, and HTML body.

        Returns:
            The created resource (its ``id`` may be ``None``).
        """
        data = await self._request("POST", "/templates", request.model_dump())
        return CreatedResource.model_validate(data)

    async def get_template(self, template_id: str) -> Template:
        """Fetch a stored template via ``GET /templates/{id}``.

        Args:
            template_id: The id returned by ``create_template``.

        Returns:
            The stored template, including the HTML as Resend kept it.
        """
        data = await self._request("GET", f"/templates/{template_id}")
        return Template.model_validate(data)

    async def send_email(self, request: SendEmailRequest) -> CreatedResource:
        """Send an email with inline HTML via ``POST /emails``.

        Args:
            request: Sender, recipient, subject, and HTML body.

        Returns:
            The sent email resource (its ``id`` may be ``None``).
        """
        data = await self._request("POST", "/emails", request.model_dump(by_alias=True))
        return CreatedResource.model_validate(data)
