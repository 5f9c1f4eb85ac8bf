# portfolio/services/auth.py
from typing import Optional
import logging

from fastapi import Depends
from starlette.concurrency import run_in_threadpool

from portfolio.core.exceptions import AuthError
from portfolio.core.security import hash_password, verify_password
from portfolio.db.database import Database, get_database
from portfolio.models import LoginRequest, RegisterRequest, User
from portfolio.repositories import UserRepository
from portfolio.services.validation import validate_login, validate_register

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "invalid email or password"
EMAIL_TAKEN = "email already registered"


class AuthService:
    """
    Credential checks and admin account creation.

    bcrypt work runs in the threadpool so a login never stalls the event loop.
    Unknown emails and wrong passwords produce the same error.
    """

    def __init__(self, db: Database):
        self.users = UserRepository(db)

    async def login(self, req: LoginRequest) -> User:
        validate_login(req)

        user = await self.users.get_by_email(req.email.strip())
        if user is None:
            logger.info("Login failed: unknown email")
            raise AuthError(INVALID_CREDENTIALS)

        if not await run_in_threadpool(verify_password, req.password, user.password_hash):
            logger.info(f"Login failed: wrong password for user {user.id}")
            raise AuthError(INVALID_CREDENTIALS)

        logger.info(f"User {user.id} logged in")
        return user

    async def register(self, req: RegisterRequest) -> User:
        validate_register(req)
        email = req.email.strip()

        if await self.users.get_by_email(email) is not None:
            raise AuthError(EMAIL_TAKEN, status_code=409)

        password_hash = await run_in_threadpool(hash_password, req.password)
        user = await self.users.create(email=email, password_hash=password_hash, name=req.name.strip())
        logger.info(f"Registered admin user {user.id}")
        return user

    async def get_user(self, user_id: int) -> Optional[User]:
        return await self.users.get_by_id(user_id)


def get_auth_service(db: Database = Depends(get_database)) -> AuthService:
    return AuthService(db)
