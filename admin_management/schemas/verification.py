"""Email confirmation schemas and converter."""

from datetime import datetime

from pydantic import BaseModel, Field

from admin_management.application.dtos.verification import Failed, Succeeded, VerificationCodeResult


class VerificationCodeConfirmationRequest(BaseModel):
    verification_code: str = Field(..., min_length=1)


class ResendConfirmationRequest(BaseModel):
    email: str = Field(..., min_length=1)


class VerificationCodeConfirmationResponse(BaseModel):
    """Outcome of confirming a code. `error` is set only when is_successful is False."""

    is_successful: bool
    error: str | None = None
    expires_at: datetime | None = None


def to_confirmation_response(result: VerificationCodeResult) -> VerificationCodeConfirmationResponse:
    if isinstance(result, Succeeded):
        return VerificationCodeConfirmationResponse(
            is_successful=True,
            expires_at=result.expires_at,
        )
    if isinstance(result, Failed):
        return VerificationCodeConfirmationResponse(
            is_successful=False,
            error=result.error.value,
        )
    raise TypeError(f"Unexpected verification result: {type(result).__name__}")
