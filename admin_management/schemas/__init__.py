"""Pydantic request/response schemas and explicit converters from application DTOs."""

from admin_management.schemas.admin_user import (
    AdminUserResponse,
    AuditEntryResponse,
    PaginatedAdminUserResponse,
    PaginationRequest,
    RegistrationRequest,
    RegistrationResponse,
    ResetPasswordRequest,
    UpdateAdminRequest,
    UpdatePermissionsRequest,
    profile_from_request,
    to_admin_user_response,
    to_audit_entry_response,
    to_paginated_response,
    to_registration_response,
)
from admin_management.schemas.autofill import (
    AutofillValuesResponse,
    SuggestedValueMapping,
    to_autofill_response,
)
from admin_management.schemas.error import ErrorResponse, to_error_response
from admin_management.schemas.verification import (
    ResendConfirmationRequest,
    VerificationCodeConfirmationRequest,
    VerificationCodeConfirmationResponse,
    to_confirmation_response,
)

__all__ = [
    "AdminUserResponse",
    "AuditEntryResponse",
    "AutofillValuesResponse",
    "ErrorResponse",
    "PaginatedAdminUserResponse",
    "PaginationRequest",
    "RegistrationRequest",
    "RegistrationResponse",
    "ResendConfirmationRequest",
    "ResetPasswordRequest",
    "SuggestedValueMapping",
    "UpdateAdminRequest",
    "UpdatePermissionsRequest",
    "VerificationCodeConfirmationRequest",
    "VerificationCodeConfirmationResponse",
    "profile_from_request",
    "to_admin_user_response",
    "to_audit_entry_response",
    "to_autofill_response",
    "to_confirmation_response",
    "to_error_response",
    "to_paginated_response",
    "to_registration_response",
]
