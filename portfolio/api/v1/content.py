# portfolio/api/v1/content.py
from fastapi import Depends

from portfolio.api.response import success_response
from portfolio.api.v1.crud import build_crud_router
from portfolio.models import ExperienceRequest, ProjectRequest, PublicationRequest, SkillRequest
from portfolio.services import (
    SkillService,
    get_experience_service,
    get_project_service,
    get_publication_service,
    get_skill_service,
)

experiences_router = build_crud_router("experience", "experiences", ExperienceRequest, get_experience_service)
skills_router = build_crud_router("skill", "skills", SkillRequest, get_skill_service)
projects_router = build_crud_router("project", "projects", ProjectRequest, get_project_service)
publications_router = build_crud_router("publication", "publications", PublicationRequest, get_publication_service)


@skills_router.get("/category/{category}", summary="List skills in a category")
async def list_skills_by_category(category: str, service: SkillService = Depends(get_skill_service)):
    skills = await service.get_by_category(category)
    return success_response("Skills retrieved successfully", skills)
