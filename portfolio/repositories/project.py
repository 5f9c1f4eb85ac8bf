# portfolio/repositories/project.py
from portfolio.models import Project
from portfolio.repositories.base import EntityKind, EntityRepository

PROJECT = EntityKind(
    name="project",
    table="projects",
    model=Project,
    columns=(
        "title", "description", "image_url", "project_url", "github_url",
        "tech_stack", "color", "profile_id",
    ),
    select_list=(
        "id, title, COALESCE(description, '') AS description, COALESCE(image_url, '') AS image_url, "
        "COALESCE(project_url, '') AS project_url, COALESCE(github_url, '') AS github_url, "
        "COALESCE(tech_stack, '') AS tech_stack, COALESCE(color, 'cyan') AS color, "
        "COALESCE(profile_id, 0) AS profile_id, created_at"
    ),
    order_by="created_at DESC, id DESC",
)


class ProjectRepository(EntityRepository[Project]):
    kind = PROJECT
