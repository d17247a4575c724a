"""
Exception types raised by the invoice assistant.

Every error carries the HTTP status code the handlers answer with, a short
user-facing message and optional details (usually the underlying error text).
"""

from typing import Optional


class AssistantError(Exception):
    """Base class for errors surfaced to API clients."""

    status_code = 500

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_body(self) -> dict:
        body = {"message": self.message}
        if self.details:
            body["details"] = self.details
        return body


class ValidationError(AssistantError):
    status_code = 400


class AuthorizationError(AssistantError):
    status_code = 401


class NotFoundError(AssistantError):
    status_code = 404


class ExtractionError(AssistantError):
    """Model output did not contain usable JSON."""

    def __init__(self, message: str, failure):
        super().__init__(message, failure.reason)
        self.failure = failure


class CompletionError(AssistantError):
    """The text-generation provider call failed."""


class InvoiceStoreError(AssistantError):
    """The invoice API could not be reached or answered with an error."""
