# portfolio/models/__init__.py
from .profile import Profile, ProfileRequest
from .experience import Experience, ExperienceRequest
from .skill import Skill, SkillRequest
from .project import Project, ProjectRequest
from .publication import Publication, PublicationRequest
from .user import User, UserResponse, LoginRequest, RegisterRequest
from .portfolio import PortfolioData
from .contact import ContactRequest

__all__ = [
    "Profile",
    "ProfileRequest",
    "Experience",
    "ExperienceRequest",
    "Skill",
    "SkillRequest",
    "Project",
    "ProjectRequest",
    "Publication",
    "PublicationRequest",
    "User",
    "UserResponse",
    "LoginRequest",
    "RegisterRequest",
    "PortfolioData",
    "ContactRequest",
]
