"""Canonical enum values for the dashboard."""

from __future__ import annotations

import enum


class InvoiceStatus(str, enum.Enum):
    PENDING = "pending"
    PAID = "paid"


class AuthErrorType(str, enum.Enum):
    """Failure categories reported by the credentials provider."""

    CREDENTIALS_SIGNIN = "CredentialsSignin"
    CALLBACK_ROUTE_ERROR = "CallbackRouteError"
    ACCESS_DENIED = "AccessDenied"
    CONFIGURATION = "Configuration"
    OTHER = "Other"

    @classmethod
    def parse(cls, value: str) -> "AuthErrorType":
        try:
            return cls(value)
        except ValueError:
            return cls.OTHER


class SubmissionStage(str, enum.Enum):
    IDLE = "Idle"
    VALIDATING = "Validating"
    INVALID = "Invalid"
    PERSISTING = "Persisting"
    FAILED = "Failed"
    SUCCEEDED = "Succeeded"
    INVALIDATED = "Invalidated"
    REDIRECTED = "Redirected"

