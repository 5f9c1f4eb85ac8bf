# portfolio/core/security.py
import time
from typing import Dict, Optional
from jose import jwt, JWTError
from passlib.context import CryptContext

from portfolio.core.config import settings

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def create_session_token(user_id: int, expires_delta: Optional[int] = None) -> str:
    now = int(time.time())
    if expires_delta is None:
        expires_delta = settings.session_max_age_seconds

    to_encode = {
        "sub": str(user_id),
        "iat": now,
        "exp": now + expires_delta,
    }

    return jwt.encode(
        to_encode,
        settings.SESSION_SECRET,
        algorithm=settings.SESSION_ALGO
    )


def verify_session_token(token: str) -> Dict:
    try:
        return jwt.decode(
            token,
            settings.SESSION_SECRET,
            algorithms=[settings.SESSION_ALGO]
        )
    except JWTError as e:
        raise JWTError(f"Session verification failed: {str(e)}")


def get_session_user_id(token: Optional[str]) -> Optional[int]:
    """Return the user id carried by a session token, or None if it is unusable."""
    if not token:
        return None

    try:
        payload = verify_session_token(token)
        return int(payload["sub"])
    except (JWTError, KeyError, TypeError, ValueError):
        return None


def verify_password(plain_password: str, password_hash: str) -> bool:
    try:
        return pwd_context.verify(plain_password, password_hash)
    except (ValueError, TypeError):
        # Malformed or unknown hash format
        return False


def hash_password(plain_password: str) -> str:
    return pwd_context.hash(plain_password)


def sanitize_input(user_input: str) -> str:
    """
    Sanitize user input to prevent injection attacks.

    Args:
        user_input: Raw user input

    Returns:
        Sanitized string
    """
    if not user_input:
        return ""

    # Remove any null bytes
    sanitized = user_input.replace('\x00', '')

    # Strip leading/trailing whitespace
    sanitized = sanitized.strip()

    return sanitized
