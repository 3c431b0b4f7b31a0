"""Pydantic v2 models for Resend API requests and responses.

Request models are frozen and serialized with ``by_alias=True`` so that
Python-safe field names (``from_``) map onto the wire names (``from``).
Response models ignore fields this program does not consume.
"""

from pydantic import BaseModel, ConfigDict, Field


class CreateTemplateRequest(BaseModel):
    """Body of ``POST /templates``."""

    model_config = ConfigDict(frozen=True)

    name: str
    subject: str
    html: str


class SendEmailRequest(BaseModel):
    """Body of ``POST /emails``."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    from_: str = Field(alias="from")
    to: str
    subject: str
    html: str


class CreatedResource(BaseModel):
    """Response of a create or send call.

    Resend returns the new resource id, but the id is optional here: a
    response without one is displayed as ``None`` rather than rejected.
    """

    id: str | None = None


class Template(BaseModel):
    """A stored template as returned by ``GET /templates/{id}``."""

    id: str | None = None
    name: str | None = None
    subject: str | None = None
    html: str | None = None
