"""ID and value generators (CUID, verification codes)."""

import secrets

from cuid2 import cuid_wrapper

cuid_generator = cuid_wrapper()

# Upper-case alphanumerics without look-alikes (0/O, 1/I/L) so codes can be typed from an email.
VERIFICATION_CODE_ALPHABET = "ABCDEFGHJKMNPQRSTUVWXYZ23456789"


def generate_cuid() -> str:
    """Generate a collision-resistant unique identifier (CUID2).

    Returns:
        A new CUID string.
    """
    result = cuid_generator()
    if not isinstance(result, str):
        raise TypeError(
            f"Expected str from cuid_generator, got {type(result).__name__}"
        )
    return result


def generate_verification_code(length: int) -> str:
    """Return a cryptographically random code of `length` characters."""
    if length <= 0:
        raise ValueError("Verification code length must be positive")
    return "".join(secrets.choice(VERIFICATION_CODE_ALPHABET) for _ in range(length))
