from datetime import datetime, timedelta, timezone
from functools import lru_cache
from typing import Optional, Union
from jose import JWTError, jwt
import bcrypt

from me_portal.core.config import settings

SESSION_TOKEN_TYPE = "session"
_DUMMY_PASSWORD = "me-portal-dummy-password"


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify password against a bcrypt hash (fixed-time comparison inside bcrypt)"""
    # Bcrypt has a 72 byte limit - truncate password if necessary
    password_bytes = plain_password.encode('utf-8')[:72]
    try:
        return bcrypt.checkpw(password_bytes, hashed_password.encode('utf-8'))
    except ValueError:
        # Stored value is not a bcrypt hash
        return False


def _hash_password(password: str, rounds: int) -> str:
    # Bcrypt has a 72 byte limit - truncate password if necessary
    password_bytes = password.encode('utf-8')[:72]
    hashed = bcrypt.hashpw(password_bytes, bcrypt.gensalt(rounds=rounds))
    return hashed.decode('utf-8')


def get_password_hash(password: str) -> str:
    """Hash password with configurable rounds (BCRYPT_ROUNDS in .env)"""
    return _hash_password(password, settings.BCRYPT_ROUNDS)


@lru_cache(maxsize=None)
def dummy_password_hash(rounds: int) -> str:
    """
    Hash checked against when the submitted email has no account.

    Built at the same cost as real password hashes, so an unknown email
    takes as long to reject as a wrong password.
    """
    return _hash_password(_DUMMY_PASSWORD, rounds)


def verify_dummy_password(plain_password: str) -> bool:
    """Burn one bcrypt check at the configured cost; always False"""
    verify_password(plain_password, dummy_password_hash(settings.BCRYPT_ROUNDS))
    return False


def create_session_token(user_id: Union[int, str], expires_delta: Optional[timedelta] = None) -> str:
    """Sign a session token carrying only the user id"""
    now = datetime.now(timezone.utc)
    expire = now + (expires_delta or timedelta(seconds=settings.session_max_age_seconds))
    to_encode = {
        "sub": str(user_id),
        "type": SESSION_TOKEN_TYPE,
        "iat": now,
        "exp": expire,
    }
    return jwt.encode(to_encode, settings.effective_session_secret, algorithm=settings.SESSION_ALGORITHM)


def decode_session_token(token: Optional[str]) -> Optional[int]:
    """
    Verify a session token and return the user id it carries.

    Missing, tampered, expired or malformed tokens all give None; an
    absent session is a normal state, not an error.
    """
    if not token:
        return None
    try:
        payload = jwt.decode(
            token,
            settings.effective_session_secret,
            algorithms=[settings.SESSION_ALGORITHM],
        )
    except JWTError:
        return None

    if payload.get("type") != SESSION_TOKEN_TYPE:
        return None

    subject = payload.get("sub")
    if not isinstance(subject, str) or not subject.isdigit():
        return None
    return int(subject)
