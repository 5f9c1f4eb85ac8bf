# portfolio/services/portfolio.py
"""
Read-only aggregate of everything the public page shows.

The five section reads run concurrently. Each read is wrapped in a
``FetchResult``; a failed read is logged and replaced by an empty value, so
``get_portfolio_data`` always returns a complete ``PortfolioData``.
"""

from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, Generic, List, Optional, TypeVar
import asyncio
import logging

from fastapi import Depends

from portfolio.core.metrics import portfolio_fetch_failures_total
from portfolio.db.database import Database, get_database
from portfolio.models import PortfolioData, Profile, Skill
from portfolio.repositories import (
    ExperienceRepository,
    ProfileRepository,
    ProjectRepository,
    PublicationRepository,
    SkillRepository,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class FetchResult(Generic[T]):
    """Outcome of one section read: the value, or the empty value plus the cause."""
    section: str
    value: T
    error: Optional[BaseException] = None

    @property
    def ok(self) -> bool:
        return self.error is None


async def fetch_section(section: str, fetch: Callable[[], Awaitable[T]], empty: Callable[[], T]) -> FetchResult[T]:
    try:
        return FetchResult(section, await fetch())
    except Exception as e:
        portfolio_fetch_failures_total.labels(section=section).inc()
        logger.warning(
            f"Failed to load portfolio {section}, using empty value: {str(e)}",
            extra={"extra": {"section": section, "error_type": type(e).__name__}},
        )
        return FetchResult(section, empty(), e)


def group_skills(skills: List[Skill]) -> Dict[str, List[Skill]]:
    """Group skills by category, keeping categories in first-seen order."""
    grouped: Dict[str, List[Skill]] = {}
    for skill in skills:
        grouped.setdefault(skill.category, []).append(skill)
    return grouped


class PortfolioService:
    def __init__(self, db: Database):
        self.profiles = ProfileRepository(db)
        self.experiences = ExperienceRepository(db)
        self.skills = SkillRepository(db)
        self.projects = ProjectRepository(db)
        self.publications = PublicationRepository(db)

    async def _profile_or_empty(self) -> Profile:
        profile = await self.profiles.get_profile()
        if profile is None:
            logger.info("No profile row found, rendering empty profile")
            return Profile()
        return profile

    async def _grouped_skills(self) -> Dict[str, List[Skill]]:
        return group_skills(await self.skills.get_all())

    async def get_portfolio_data(self) -> PortfolioData:
        results: List[FetchResult[Any]] = await asyncio.gather(
            fetch_section("profile", self._profile_or_empty, Profile),
            fetch_section("experiences", self.experiences.get_all, list),
            fetch_section("skills", self._grouped_skills, dict),
            fetch_section("projects", self.projects.get_all, list),
            fetch_section("publications", self.publications.get_all, list),
        )

        failed = [result.section for result in results if not result.ok]
        if failed:
            logger.warning(f"Portfolio served with empty sections: {', '.join(failed)}")

        return PortfolioData(**{result.section: result.value for result in results})


def get_portfolio_service(db: Database = Depends(get_database)) -> PortfolioService:
    return PortfolioService(db)
