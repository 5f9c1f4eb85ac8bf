# portfolio/db/schema.py
"""
Table definitions used only to bootstrap an empty database.

Queries never go through these objects; repositories issue plain SQL. This is
not a migration tool: ``create_schema`` creates missing tables and leaves
existing ones untouched.
"""

from sqlalchemy import Column, DateTime, Integer, MetaData, String, Table, Text, func
import logging

from portfolio.db.database import Database

logger = logging.getLogger(__name__)

metadata = MetaData()


def _created_at() -> Column:
    return Column("created_at", DateTime, nullable=False, server_default=func.current_timestamp())


def _updated_at() -> Column:
    return Column("updated_at", DateTime, nullable=False, server_default=func.current_timestamp())


profiles = Table(
    "profiles",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String(100), nullable=False),
    Column("title", String(200)),
    Column("description", Text),
    Column("photo_url", Text),
    Column("email", String(100), nullable=False),
    Column("linkedin_url", Text),
    Column("github_url", Text),
    Column("cv_url", Text),
    _created_at(),
    _updated_at(),
)

experiences = Table(
    "experiences",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("title", String(200), nullable=False),
    Column("organization", String(200), nullable=False),
    Column("period", String(100)),
    Column("description", Text),
    Column("type", String(20), nullable=False),
    Column("color", String(20)),
    _created_at(),
)

skills = Table(
    "skills",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("category", String(100), nullable=False),
    Column("name", String(100), nullable=False),
    Column("level", String(20)),
    Column("color", String(20)),
)

projects = Table(
    "projects",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("title", String(200), nullable=False),
    Column("description", Text),
    Column("image_url", Text),
    Column("project_url", Text),
    Column("github_url", Text),
    Column("tech_stack", Text),
    Column("color", String(20)),
    # Soft reference to profiles.id; no constraint
    Column("profile_id", Integer, nullable=True),
    _created_at(),
)

publications = Table(
    "publications",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("title", String(200), nullable=False),
    Column("authors", Text),
    Column("journal", String(200)),
    Column("year", Integer),
    Column("description", Text),
    Column("image_url", Text),
    Column("publication_url", Text),
    Column("color", String(20)),
    _created_at(),
)

users = Table(
    "users",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("email", String(100), nullable=False, unique=True),
    Column("password", String(255), nullable=False),
    Column("name", String(100), nullable=False),
    Column("role", String(20), nullable=False, server_default="admin"),
    _created_at(),
    _updated_at(),
)


async def create_schema(database: Database) -> None:
    """Create any missing tables."""
    logger.info("Creating database tables")
    async with database.engine.begin() as conn:
        await conn.run_sync(metadata.create_all)
    logger.info("Database tables ready")
