"""Security: password hashing."""

from admin_management.infrastructure.security.password import BcryptPasswordHasher

__all__ = ["BcryptPasswordHasher"]
