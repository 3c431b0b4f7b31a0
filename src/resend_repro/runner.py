"""Reproduction steps: store a template, read it back, check styles, send directly.

The steps run strictly in order with one request in flight at a time.
Create and fetch failures are fatal (exit code 1); a failed direct send is
reported and the run continues to the summary.
"""

from __future__ import annotations

import sys
from datetime import UTC, datetime

import structlog

from resend_repro.config import Settings
from resend_repro.domain.errors import ResendAPIError
from resend_repro.domain.styles import StyleReport, check_styles
from resend_repro.resend.client import ResendClient
from resend_repro.resend.models import CreateTemplateRequest, SendEmailRequest

logger = structlog.get_logger()

RULE = "=" * 60
TEMPLATE_SUBJECT = "Inline Style Preservation Test"

COMPARE_GUIDE = (
    "  1. Resend Dashboard -> Templates -> Preview    -> Styles missing",
    "  2. Resend Dashboard -> Send test email         -> Styles missing",
    "  3. Email from direct API send (your inbox)    -> Styles correct",
)


def run_timestamp(now: datetime | None = None) -> str:
    """Return the UTC run timestamp truncated to the minute (``YYYY-MM-DDTHH:MM``)."""
    current = now or datetime.now(tz=UTC)
    return current.astimezone(UTC).strftime("%Y-%m-%dT%H:%M")


def print_style_report(report: StyleReport) -> None:
    """Print one PASS/FAIL line per expectation followed by the verdict."""
    for result in report.results:
        status = "PASS" if result.found else "FAIL"
        print(f"   {status} {result.expectation.label}")

    if report.all_present:
        print("\n-> All inline styles are intact in Resend storage.")
        print("-> Now open the Resend dashboard, preview this template,")
        print("   and send a test email from the dashboard to see the bug.")
    else:
        print("\nWARNING: Some styles were stripped during upload/storage.")


async def send_direct(
    client: ResendClient,
    settings: Settings,
    html: str,
    timestamp: str,
) -> None:
    """Send *html* straight through ``POST /emails``.

    Errors are printed and logged but never raised.
    """
    print("\nStep 3: Sending same HTML via the direct email send API...")
    try:
        sent = await client.send_email(
            SendEmailRequest(
                from_=settings.from_email,
                to=settings.test_email,
                subject=f"[Style Test] Direct API Send ({timestamp})",
                html=html,
            )
        )
    except ResendAPIError as exc:
        logger.warning("direct_send_failed", status_code=exc.status_code, error=exc.message)
        print(f"Failed to send: {exc.message}", file=sys.stderr)
        return

    print(f"Email sent: {sent.id}")
    print(f"-> Check {settings.test_email} - this email should have all styles.")


async def reproduce(
    client: ResendClient,
    settings: Settings,
    html: str,
    now: datetime | None = None,
) -> int:
    """Run every reproduction step against the Resend API.

    Args:
        client: The Resend API client.
        settings: Run context (addresses for the optional direct send).
        html: The template HTML, used unchanged for both create and send.
        now: Override for the current time.

    Returns:
        The process exit code: 0 on completion, 1 if create or fetch failed.
    """
    timestamp = run_timestamp(now)

    print(RULE)
    print("Resend Template Inline Styles - Reproduction Script")
    print(RULE)

    # -- Step 1: Upload template --
    print("\nStep 1: Uploading template to Resend...")
    try:
        created = await client.create_template(
            CreateTemplateRequest(
                name=f"Style Test ({timestamp})",
                subject=TEMPLATE_SUBJECT,
                html=html,
            )
        )
    except ResendAPIError as exc:
        logger.error("template_create_failed", status_code=exc.status_code, error=exc.message)
        print(f"Failed to create template: {exc.message}", file=sys.stderr)
        return 1

    template_id = created.id
    print(f"Template created: {template_id}")

    # -- Step 2: Fetch it back --
    print("\nStep 2: Fetching template back from Resend API...")
    if template_id is None:
        logger.error("template_fetch_failed", error="create response had no id")
        print("Failed to fetch template: create response did not include an id", file=sys.stderr)
        return 1

    try:
        fetched = await client.get_template(template_id)
    except ResendAPIError as exc:
        logger.error("template_fetch_failed", status_code=exc.status_code, error=exc.message)
        print(f"Failed to fetch template: {exc.message}", file=sys.stderr)
        return 1

    stored_html = fetched.html or ""
    print(f"   Stored HTML size: {len(stored_html.encode('utf-8'))} bytes")

    report = check_styles(stored_html)
    print_style_report(report)
    if not report.all_present:
        logger.warning(
            "styles_stripped_in_storage",
            template_id=template_id,
            missing=[expectation.pattern for expectation in report.missing],
        )

    # -- Step 3: (Optional) Send via direct API --
    if settings.direct_send_enabled:
        await send_direct(client, settings, html, timestamp)
    else:
        print("\nStep 3: Skipped (set TEST_EMAIL and FROM_EMAIL to send)")

    # -- Summary --
    print("\n" + RULE)
    print("COMPARE:")
    for line in COMPARE_GUIDE:
        print(line)
    print(RULE)

    print(f"\nTo clean up: delete template {template_id} from the dashboard.")
    return 0
