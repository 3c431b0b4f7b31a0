"""Domain-specific exception classes for the reproduction runner."""


class ResendReproError(Exception):
    """Base class for all domain errors in the reproduction runner."""


class ResendAPIError(ResendReproError):
    """Raised when the Resend API reports an error for a request.

    Attributes:
        status_code: HTTP status code of the failed response.
        name: Machine-readable error name from the response body, if any.
        message: Human-readable error message from the response body.
    """

    def __init__(self, status_code: int, message: str, name: str | None = None) -> None:
        self.status_code = status_code
        self.name = name
        self.message = message
        super().__init__(message)
