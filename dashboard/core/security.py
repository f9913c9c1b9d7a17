"""Password hashing primitives for the credentials provider."""

from __future__ import annotations

import hashlib
import hmac
import secrets

ALGORITHM = "pbkdf2_sha256"
ITERATIONS = 260_000


def hash_password(password: str, salt: str | None = None, iterations: int = ITERATIONS) -> str:
    """Return ``algorithm$iterations$salt$digest`` for storage."""
    salt = salt or secrets.token_hex(16)
    digest = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt.encode("utf-8"), iterations)
    return f"{ALGORITHM}${iterations}${salt}${digest.hex()}"


def verify_password(password: str, hashed_password: str) -> bool:
    """Constant-time comparison against a stored hash."""
    try:
        algorithm, iterations, salt, _digest = hashed_password.split("$", 3)
    except ValueError:
        return False
    if algorithm != ALGORITHM or not iterations.isdigit():
        return False
    candidate = hash_password(password, salt=salt, iterations=int(iterations))
    return hmac.compare_digest(candidate, hashed_password)
