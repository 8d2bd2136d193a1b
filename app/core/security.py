"""Password hashing, verification codes and session tokens."""

import hashlib
import hmac
import secrets
import string
import uuid
from functools import lru_cache

import bcrypt

from app.core.config import settings

# Verification codes: 6 characters from A-Z0-9.
VERIFICATION_CODE_LENGTH = 6
VERIFICATION_CODE_ALPHABET = string.ascii_uppercase + string.digits

# Bytes of randomness in the session cookie value.
SESSION_TOKEN_BYTES = 32

# Min/max lengths for username and password validation.
USERNAME_MIN_LEN = 3
USERNAME_MAX_LEN = 255
PASSWORD_MIN_LEN = 8
PASSWORD_MAX_LEN = 128


def hash_password(plain_password: str) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    # bcrypt has a 72-byte limit; truncate to avoid errors (validation already limits length).
    pw_bytes = plain_password.encode("utf-8")[:72]
    return bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=settings.BCRYPT_ROUNDS)).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash."""
    pw_bytes = plain_password.encode("utf-8")[:72]
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


@lru_cache
def dummy_password_hash() -> str:
    """Hash checked against when the user does not exist, so login work stays constant."""
    return hash_password(secrets.token_urlsafe(16))


def generate_verification_code() -> str:
    return "".join(
        secrets.choice(VERIFICATION_CODE_ALPHABET) for _ in range(VERIFICATION_CODE_LENGTH)
    )


def normalize_verification_code(code: str) -> str:
    return code.strip().upper()


def new_verification_id() -> str:
    return str(uuid.uuid4())


def new_session_token() -> str:
    return secrets.token_urlsafe(SESSION_TOKEN_BYTES)


def hash_session_token(token: str) -> str:
    """Keyed digest of a session token. The sessions table stores only this digest."""
    key = settings.SESSION_SECRET.get_secret_value().encode("utf-8")
    return hmac.new(key, token.encode("utf-8"), hashlib.sha256).hexdigest()
