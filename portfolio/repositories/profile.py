# portfolio/repositories/profile.py
from typing import Optional

from portfolio.models import Profile
from portfolio.repositories.base import EntityKind, EntityRepository, storage_errors

PROFILE = EntityKind(
    name="profile",
    table="profiles",
    model=Profile,
    columns=(
        "name", "title", "description", "photo_url", "email",
        "linkedin_url", "github_url", "cv_url",
    ),
    select_list=(
        "id, name, COALESCE(title, '') AS title, COALESCE(description, '') AS description, "
        "COALESCE(photo_url, '') AS photo_url, email, "
        "COALESCE(linkedin_url, '') AS linkedin_url, COALESCE(github_url, '') AS github_url, "
        "COALESCE(cv_url, '') AS cv_url, created_at, updated_at"
    ),
    order_by="id",
    returning="id, created_at, updated_at",
    touch_updated_at=True,
)


class ProfileRepository(EntityRepository[Profile]):
    kind = PROFILE

    async def get_profile(self) -> Optional[Profile]:
        """The authoritative profile: the row with the lowest id, if any."""
        sql = f"SELECT {PROFILE.select_list} FROM {PROFILE.table} ORDER BY id LIMIT 1"
        with storage_errors(PROFILE.table, "get_profile"):
            row = await self.db.fetch_one(sql)
        return self._build(row) if row is not None else None
