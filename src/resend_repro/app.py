"""Command-line entry point for the Resend inline style reproduction.

Configures:
- **structlog** with JSON rendering (``--json-logs``) or colored console
  output, always on stderr so the step report on stdout stays readable
- **Settings** from environment / ``.env`` with a pre-flight API key check
- **Safety net** around the async call chain: any unexpected exception is
  logged, printed, and turned into exit status 1

Usage::

    RESEND_API_KEY=re_xxx resend-template-repro
    RESEND_API_KEY=re_xxx TEST_EMAIL=you@example.com FROM_EMAIL=you@yourdomain.com \\
        resend-template-repro --template template.html
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

import structlog

from resend_repro.config import Settings, get_settings, validate_credentials
from resend_repro.resend.client import ResendClient
from resend_repro.runner import reproduce

logger = structlog.get_logger()


def configure_logging(json_logs: bool = False, verbose: bool = False) -> None:
    """Configure structlog for JSON or console rendering on stderr.

    Args:
        json_logs: Render events as JSON lines instead of colored console output.
        verbose: Emit DEBUG events (per-request logs); otherwise WARNING and above.
    """
    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if json_logs:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    log_level = logging.DEBUG if verbose else logging.WARNING

    structlog.configure(
        processors=[*shared_processors, renderer],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )

    structlog.contextvars.bind_contextvars(service="resend-template-repro")


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the reproduction script.

    Returns:
        A configured :class:`argparse.ArgumentParser`.
    """
    parser = argparse.ArgumentParser(
        description=(
            "Upload an HTML template to Resend, fetch it back, check inline styles, "
            "and optionally send the same HTML directly for comparison"
        ),
    )
    parser.add_argument(
        "--template",
        type=Path,
        default=None,
        help="HTML file to upload (default: TEMPLATE_PATH or template.html)",
    )
    parser.add_argument(
        "--json-logs",
        action="store_true",
        default=None,
        help="Render diagnostic logs as JSON (default: LOG_JSON)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Show debug logs, including each API request",
    )
    return parser


def load_template_html(path: Path) -> str:
    """Read the template fixture as UTF-8 text.

    Read errors are not handled here; they abort the run.
    """
    return path.read_text(encoding="utf-8")


def run(settings: Settings, template_path: Path | None = None) -> int:
    """Check credentials, load the fixture, and run the reproduction.

    Args:
        settings: The loaded run settings.
        template_path: HTML fixture to upload; defaults to ``settings.template_path``.

    Returns:
        The process exit code.

    Raises:
        OSError: If the template file cannot be read.
    """
    if not validate_credentials(settings):
        return 1

    html = load_template_html(template_path or settings.template_path)

    client = ResendClient(
        api_key=settings.resend_api_key.get_secret_value(),
        base_url=settings.resend_base_url,
        timeout=settings.request_timeout,
    )

    try:
        return asyncio.run(reproduce(client, settings, html))
    except Exception as exc:
        logger.exception("reproduction_failed")
        print(f"Unexpected error: {exc!r}", file=sys.stderr)
        return 1


def main() -> None:
    """Parse arguments, configure logging, and exit with the run's status."""
    args = build_parser().parse_args()
    settings = get_settings()

    json_logs = settings.log_json if args.json_logs is None else args.json_logs
    configure_logging(json_logs=json_logs, verbose=args.verbose)

    sys.exit(run(settings, args.template))


if __name__ == "__main__":
    main()
