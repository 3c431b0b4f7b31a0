"""Domain layer: style checklist and error types."""

from resend_repro.domain.errors import ResendAPIError, ResendReproError
from resend_repro.domain.styles import (
    EXPECTED_STYLES,
    StyleCheckResult,
    StyleExpectation,
    StyleReport,
    check_styles,
)

__all__ = [
    "EXPECTED_STYLES",
    "ResendAPIError",
    "ResendReproError",
    "StyleCheckResult",
    "StyleExpectation",
    "StyleReport",
    "check_styles",
]
