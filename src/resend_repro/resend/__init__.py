"""Resend domain: async HTTP client and request/response models."""

from resend_repro.resend.client import ResendClient
from resend_repro.resend.models import (
    CreatedResource,
    CreateTemplateRequest,
    SendEmailRequest,
    Template,
)

__all__ = [
    "CreateTemplateRequest",
    "CreatedResource",
    "ResendClient",
    "SendEmailRequest",
    "Template",
]
