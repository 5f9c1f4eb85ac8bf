# portfolio/services/__init__.py
from .entity_service import EntityService
from .content import (
    ProfileService,
    SkillService,
    get_profile_service,
    get_experience_service,
    get_skill_service,
    get_project_service,
    get_publication_service,
)
from .portfolio import PortfolioService, get_portfolio_service
from .auth import AuthService, get_auth_service
from .contact import ContactService, get_contact_service
from .local_storage import LocalStorageService, get_local_storage_service

__all__ = [
    "EntityService",
    "ProfileService",
    "SkillService",
    "get_profile_service",
    "get_experience_service",
    "get_skill_service",
    "get_project_service",
    "get_publication_service",
    "PortfolioService",
    "get_portfolio_service",
    "AuthService",
    "get_auth_service",
    "ContactService",
    "get_contact_service",
    "LocalStorageService",
    "get_local_storage_service",
]
