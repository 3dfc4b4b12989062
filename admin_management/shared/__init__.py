"""Shared utilities: enums, telemetry (logging), and cross-cutting helpers.

Used by domain, application, and infrastructure. No business logic.
"""

from admin_management.shared.enums import AuditAction
from admin_management.shared.utils import ensure_utc, generate_cuid, utc_now

__all__ = [
    "AuditAction",
    "generate_cuid",
    "utc_now",
    "ensure_utc",
]
