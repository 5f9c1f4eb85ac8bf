# portfolio/services/content.py
"""Per-entity services and their FastAPI dependency getters."""

from typing import List, Optional

from fastapi import Depends

from portfolio.core.exceptions import NotFoundError
from portfolio.db.database import Database, get_database
from portfolio.models import Experience, Profile, Project, Publication, Skill
from portfolio.repositories import (
    ExperienceRepository,
    ProfileRepository,
    ProjectRepository,
    PublicationRepository,
    SkillRepository,
)
from portfolio.services import normalizer, validation
from portfolio.services.entity_service import EntityService


class ProfileService(EntityService[Profile]):
    repository: ProfileRepository

    def __init__(self, db: Database):
        super().__init__(ProfileRepository(db), validation.validate_profile, normalizer.normalize_profile)

    async def get_profile(self) -> Profile:
        profile = await self.repository.get_profile()
        if profile is None:
            raise NotFoundError("profile")
        return profile

    async def get_profile_or_none(self) -> Optional[Profile]:
        return await self.repository.get_profile()


class SkillService(EntityService[Skill]):
    repository: SkillRepository

    def __init__(self, db: Database):
        super().__init__(SkillRepository(db), validation.validate_skill, normalizer.normalize_skill)

    async def get_by_category(self, category: str) -> List[Skill]:
        category = validation.validate_category(category)
        return await self.repository.get_by_category(category)


def experience_service(db: Database) -> EntityService[Experience]:
    return EntityService(ExperienceRepository(db), validation.validate_experience, normalizer.normalize_experience)


def project_service(db: Database) -> EntityService[Project]:
    return EntityService(ProjectRepository(db), validation.validate_project, normalizer.normalize_project)


def publication_service(db: Database) -> EntityService[Publication]:
    return EntityService(PublicationRepository(db), validation.validate_publication, normalizer.normalize_publication)


def get_profile_service(db: Database = Depends(get_database)) -> ProfileService:
    return ProfileService(db)


def get_experience_service(db: Database = Depends(get_database)) -> EntityService[Experience]:
    return experience_service(db)


def get_skill_service(db: Database = Depends(get_database)) -> SkillService:
    return SkillService(db)


def get_project_service(db: Database = Depends(get_database)) -> EntityService[Project]:
    return project_service(db)


def get_publication_service(db: Database = Depends(get_database)) -> EntityService[Publication]:
    return publication_service(db)
