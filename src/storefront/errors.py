"""Failure taxonomy for storefront operations.

Operations never let these escape to the caller; they are caught at the
operation boundary and reported through an `OperationResult`.
"""

from __future__ import annotations

from pydantic import BaseModel

GENERIC_ERROR_MESSAGE = "An unexpected error occurred"


class StorefrontError(Exception):
    """Base class. `reason` is a stable machine-readable tag."""

    reason = "error"
    default_message = GENERIC_ERROR_MESSAGE

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class Unauthenticated(StorefrontError):
    reason = "unauthenticated"
    default_message = "You must be logged in to checkout"


class EmptyCart(StorefrontError):
    reason = "empty_cart"
    default_message = "Your cart is empty"


class RemoteRequestFailed(StorefrontError):
    """The remote data service rejected or failed a request."""

    reason = "remote_request_failed"


class UnexpectedError(StorefrontError):
    reason = "unexpected_error"


class Forbidden(StorefrontError):
    reason = "forbidden"
    default_message = "You don't have permission to access this page."


class InvalidInput(StorefrontError):
    """Rejected on the client before any remote call."""

    reason = "invalid_input"


class OperationResult(BaseModel):
    success: bool
    error: str | None = None
    reason: str | None = None
    order_id: str | None = None

    @classmethod
    def ok(cls, **kwargs) -> OperationResult:
        return cls(success=True, **kwargs)

    @classmethod
    def failed(cls, error: StorefrontError) -> OperationResult:
        return cls(success=False, error=error.message, reason=error.reason)
