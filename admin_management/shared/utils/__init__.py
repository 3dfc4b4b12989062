"""Shared utilities: datetime and generators."""

from admin_management.shared.utils.datetime import ensure_utc, utc_now
from admin_management.shared.utils.generators import (
    generate_cuid,
    generate_verification_code,
)

__all__ = [
    "generate_cuid",
    "generate_verification_code",
    "utc_now",
    "ensure_utc",
]
