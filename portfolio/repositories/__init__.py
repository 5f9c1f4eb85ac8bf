# portfolio/repositories/__init__.py
from .base import EntityKind, EntityRepository
from .profile import ProfileRepository
from .experience import ExperienceRepository
from .skill import SkillRepository
from .project import ProjectRepository
from .publication import PublicationRepository
from .user import UserRepository

__all__ = [
    "EntityKind",
    "EntityRepository",
    "ProfileRepository",
    "ExperienceRepository",
    "SkillRepository",
    "ProjectRepository",
    "PublicationRepository",
    "UserRepository",
]
