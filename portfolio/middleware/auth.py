# portfolio/middleware/auth.py
from fastapi import Depends, Request, Response
from typing import Optional
import logging

from portfolio.core.config import settings
from portfolio.core.exceptions import AuthError
from portfolio.core.security import create_session_token, get_session_user_id
from portfolio.db.database import Database, get_database
from portfolio.models import User
from portfolio.repositories import UserRepository

logger = logging.getLogger(__name__)


class AdminLoginRequired(Exception):
    """Raised by admin page dependencies; rendered as a redirect to the 401 page."""


def set_session_cookie(response: Response, user: User) -> None:
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=create_session_token(user.id),
        httponly=True,
        secure=settings.SESSION_COOKIE_SECURE,
        samesite="lax",
        max_age=settings.session_max_age_seconds,
        path="/"
    )


def clear_session_cookie(response: Response) -> None:
    response.delete_cookie(
        key=settings.SESSION_COOKIE_NAME,
        httponly=True,
        secure=settings.SESSION_COOKIE_SECURE,
        samesite="lax",
        path="/"
    )


async def get_optional_user(
    request: Request,
    db: Database = Depends(get_database)
) -> Optional[User]:
    """
    Resolve the session cookie to a user.

    Returns None for a missing, empty, expired or tampered cookie, and for a
    token whose user no longer exists.
    """
    user_id = get_session_user_id(request.cookies.get(settings.SESSION_COOKIE_NAME))
    if user_id is None:
        return None

    user = await UserRepository(db).get_by_id(user_id)
    if user is None:
        logger.info(f"Session refers to missing user {user_id}")
    return user


async def get_current_user(
    user: Optional[User] = Depends(get_optional_user)
) -> User:
    """
    Dependency for JSON endpoints that require a session.

    Raises:
        AuthError: If there is no valid session
    """
    if user is None:
        raise AuthError("unauthorized")
    return user


async def require_admin(
    user: Optional[User] = Depends(get_optional_user)
) -> User:
    """Dependency for admin HTML pages; unauthenticated visitors are redirected."""
    if user is None:
        raise AdminLoginRequired()
    return user
