# portfolio/repositories/user.py
from typing import Optional
import logging

from portfolio.db.database import Database
from portfolio.models import User
from portfolio.repositories.base import storage_errors

logger = logging.getLogger(__name__)

USER_COLUMNS = "id, email, password AS password_hash, name, role, created_at, updated_at"


class UserRepository:
    """Admin accounts. Lookups by email are exact matches."""

    def __init__(self, db: Database):
        self.db = db

    async def get_by_email(self, email: str) -> Optional[User]:
        with storage_errors("users", "get_by_email"):
            row = await self.db.fetch_one(
                f"SELECT {USER_COLUMNS} FROM users WHERE email = :email", {"email": email}
            )
        return User(**row) if row is not None else None

    async def get_by_id(self, user_id: int) -> Optional[User]:
        with storage_errors("users", "get_by_id", id=user_id):
            row = await self.db.fetch_one(
                f"SELECT {USER_COLUMNS} FROM users WHERE id = :id", {"id": user_id}
            )
        return User(**row) if row is not None else None

    async def create(self, email: str, password_hash: str, name: str, role: str = "admin") -> User:
        with storage_errors("users", "create"):
            row = await self.db.fetch_one(
                "INSERT INTO users (email, password, name, role) "
                "VALUES (:email, :password, :name, :role) "
                "RETURNING id, created_at, updated_at",
                {"email": email, "password": password_hash, "name": name, "role": role},
            )
        user = User(email=email, password_hash=password_hash, name=name, role=role, **row)
        logger.info(f"Created user {user.id}")
        return user

    async def update(self, user: User) -> None:
        with storage_errors("users", "update", id=user.id):
            await self.db.execute(
                "UPDATE users SET email = :email, password = :password, name = :name, "
                "role = :role, updated_at = CURRENT_TIMESTAMP WHERE id = :id",
                {
                    "id": user.id,
                    "email": user.email,
                    "password": user.password_hash,
                    "name": user.name,
                    "role": user.role,
                },
            )
