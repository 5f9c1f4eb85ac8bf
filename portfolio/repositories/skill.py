# portfolio/repositories/skill.py
from typing import List

from portfolio.models import Skill
from portfolio.repositories.base import EntityKind, EntityRepository, storage_errors

SKILL = EntityKind(
    name="skill",
    table="skills",
    model=Skill,
    columns=("category", "name", "level", "color"),
    select_list=(
        "id, category, name, COALESCE(level, 'intermediate') AS level, "
        "COALESCE(color, 'gray') AS color"
    ),
    order_by="category, name, id",
    returning="id",
)


class SkillRepository(EntityRepository[Skill]):
    kind = SKILL

    async def get_by_category(self, category: str) -> List[Skill]:
        sql = f"SELECT {SKILL.select_list} FROM {SKILL.table} WHERE category = :category ORDER BY name, id"
        with storage_errors(SKILL.table, "get_by_category", category=category):
            rows = await self.db.fetch_all(sql, {"category": category})
        return [self._build(row) for row in rows]
