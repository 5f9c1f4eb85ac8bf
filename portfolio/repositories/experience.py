# portfolio/repositories/experience.py
from portfolio.models import Experience
from portfolio.repositories.base import EntityKind, EntityRepository

EXPERIENCE = EntityKind(
    name="experience",
    table="experiences",
    model=Experience,
    columns=("title", "organization", "period", "description", "type", "color"),
    select_list=(
        "id, title, organization, COALESCE(period, '') AS period, "
        "COALESCE(description, '') AS description, type, "
        "COALESCE(color, 'cyan') AS color, created_at"
    ),
    order_by="created_at DESC, id DESC",
)


class ExperienceRepository(EntityRepository[Experience]):
    kind = EXPERIENCE
