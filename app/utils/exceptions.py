"""Application error hierarchy.

Services raise these; the handlers registered in ``main.py`` turn them into
JSON responses of the form ``{"message": ..., "code": ..., **extra}``.
"""

from typing import Any

from fastapi import status


class AppError(Exception):
    """Base class for errors that map onto an HTTP response."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    code: str = "INTERNAL_ERROR"
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None, **extra: Any):
        self.message = message or self.default_message
        self.extra = extra
        super().__init__(self.message)


class ValidationError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    code = "VALIDATION_ERROR"
    default_message = "Invalid request"


class ConflictError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    code = "CONFLICT"
    default_message = "Resource already exists"


class AuthError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    code = "UNAUTHORIZED"
    default_message = "Authentication required"


class ForbiddenError(AppError):
    status_code = status.HTTP_403_FORBIDDEN
    code = "FORBIDDEN"
    default_message = "Admin access required"


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    code = "NOT_FOUND"
    default_message = "Not found"


class AccessDeniedError(AppError):
    status_code = status.HTTP_403_FORBIDDEN
    code = "ACCESS_DENIED"
    default_message = "Access denied"


class PaymentRequiredError(AppError):
    """Subscription is past due or cancelled."""

    status_code = status.HTTP_402_PAYMENT_REQUIRED
    code = "PAYMENT_REQUIRED"
    default_message = (
        "Your subscription requires payment. Please upgrade to continue using AI features."
    )

    def __init__(self, subscription: dict, message: str | None = None):
        super().__init__(message, requiresPayment=True, subscription=subscription)


class QuotaExceededError(AppError):
    """Free credits are used up and the plan is not a paid one."""

    status_code = status.HTTP_403_FORBIDDEN
    code = "QUOTA_EXCEEDED"
    default_message = "AI generation limit reached. Upgrade your plan for unlimited generations."

    def __init__(self, subscription: dict, message: str | None = None):
        super().__init__(message, requiresUpgrade=True, subscription=subscription)


class ProviderUnavailableError(AppError):
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    code = "PROVIDER_UNAVAILABLE"
    default_message = (
        "AI service temporarily unavailable. Please try again. Your credits were not used."
    )


class GenerationParseError(AppError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    code = "GENERATION_FAILED"
    default_message = "Failed to generate website. Please try again."


class InternalError(AppError):
    pass
