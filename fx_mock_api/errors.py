from __future__ import annotations


class MockApiError(Exception):
    """Base for failures that map onto a single HTTP status + `{"error": ...}` body."""

    status_code = 500
    default_message = "Internal error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidIdentifierError(MockApiError):
    status_code = 400
    default_message = "Invalid order ID. Must be a UUID v4."


class MissingParameterError(MockApiError):
    status_code = 400
    default_message = "Missing required parameters"


class InvalidParameterError(MockApiError):
    status_code = 400
    default_message = "Invalid parameter types"


class QuoteNotFoundError(MockApiError):
    status_code = 400
    default_message = "Quote not found or expired"


class NotFoundError(MockApiError):
    status_code = 404
    default_message = "No quotes available"


class StoreError(MockApiError):
    status_code = 500
    default_message = "Store failure"


class OrderConflictError(StoreError):
    pass


class AuthMissingError(MockApiError):
    status_code = 403
    default_message = "Invalid token"
