"""Password hashing (bcrypt with SHA-256 pre-hash).

Bcrypt truncates inputs at 72 bytes; the SHA-256 pre-hash gives a
fixed-length input so long passwords are not silently truncated.
"""

import base64
import hashlib

import bcrypt


def _prehash(password: str) -> bytes:
    return base64.b64encode(hashlib.sha256(password.encode("utf-8")).digest())


class BcryptPasswordHasher:
    """IPasswordHasher backed by bcrypt. Both methods block; run them off the event loop."""

    def __init__(self, rounds: int = 12) -> None:
        self._rounds = rounds

    def hash_password(self, password: str) -> str:
        hashed = bcrypt.hashpw(_prehash(password), bcrypt.gensalt(rounds=self._rounds))
        return hashed.decode("utf-8")

    def verify_password(self, password: str, password_hash: str) -> bool:
        try:
            return bool(bcrypt.checkpw(_prehash(password), password_hash.encode("utf-8")))
        except (ValueError, TypeError):
            return False
