# portfolio/services/validation.py
"""
Field rules for every request kind.

Each ``validate_*`` function checks its rules in order and raises
``ValidationError`` for the first one that fails. Nothing is mutated and no
storage is touched. Required and enumerated fields are checked on their
whitespace-stripped value, which is also what the normalizer stores.
"""

import re
from typing import Iterable

from portfolio.core.exceptions import ValidationError
from portfolio.models import (
    ContactRequest,
    ExperienceRequest,
    LoginRequest,
    ProfileRequest,
    ProjectRequest,
    PublicationRequest,
    RegisterRequest,
    SkillRequest,
)
from portfolio.models.experience import EXPERIENCE_TYPES
from portfolio.models.publication import MAX_PUBLICATION_YEAR, MIN_PUBLICATION_YEAR
from portfolio.models.skill import SKILL_LEVELS

NAME_MAX_LENGTH = 100
EMAIL_MAX_LENGTH = 100
TITLE_MAX_LENGTH = 200
ORGANIZATION_MAX_LENGTH = 200
CATEGORY_MAX_LENGTH = 100
MIN_PASSWORD_LENGTH = 6

EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")


def _required(value: str, field: str) -> str:
    stripped = (value or "").strip()
    if not stripped:
        raise ValidationError(f"{field} is required", field=field)
    return stripped


def _max_length(value: str, field: str, limit: int) -> None:
    if len(value) > limit:
        raise ValidationError(f"{field} must be less than {limit} characters", field=field)


def _one_of(value: str, field: str, allowed: Iterable[str]) -> None:
    allowed = tuple(allowed)
    if value not in allowed:
        raise ValidationError(f"{field} must be one of: {', '.join(allowed)}", field=field)


def validate_profile(req: ProfileRequest) -> None:
    name = _required(req.name, "name")
    _max_length(name, "name", NAME_MAX_LENGTH)
    email = _required(req.email, "email")
    _max_length(email, "email", EMAIL_MAX_LENGTH)


def validate_experience(req: ExperienceRequest) -> None:
    title = _required(req.title, "title")
    _max_length(title, "title", TITLE_MAX_LENGTH)
    organization = _required(req.organization, "organization")
    _max_length(organization, "organization", ORGANIZATION_MAX_LENGTH)
    _one_of((req.type or "").strip(), "type", EXPERIENCE_TYPES)


def validate_skill(req: SkillRequest) -> None:
    category = _required(req.category, "category")
    _max_length(category, "category", CATEGORY_MAX_LENGTH)
    name = _required(req.name, "name")
    _max_length(name, "name", NAME_MAX_LENGTH)

    # Empty level is allowed and resolves to the default color
    level = (req.level or "").strip()
    if level:
        _one_of(level, "level", SKILL_LEVELS)


def validate_project(req: ProjectRequest) -> None:
    title = _required(req.title, "title")
    _max_length(title, "title", TITLE_MAX_LENGTH)


def validate_publication(req: PublicationRequest) -> None:
    title = _required(req.title, "title")
    _max_length(title, "title", TITLE_MAX_LENGTH)
    if not MIN_PUBLICATION_YEAR <= req.year <= MAX_PUBLICATION_YEAR:
        raise ValidationError(
            f"year must be between {MIN_PUBLICATION_YEAR} and {MAX_PUBLICATION_YEAR}",
            field="year",
        )


def validate_contact(req: ContactRequest) -> None:
    _required(req.name, "name")
    email = _required(req.email, "email")
    if not EMAIL_PATTERN.match(email):
        raise ValidationError("email format is invalid", field="email")
    _required(req.message, "message")


def validate_login(req: LoginRequest) -> None:
    _required(req.email, "email")
    if not req.password:
        raise ValidationError("password is required", field="password")


def validate_register(req: RegisterRequest) -> None:
    _required(req.email, "email")
    if not req.password:
        raise ValidationError("password is required", field="password")
    if len(req.password) < MIN_PASSWORD_LENGTH:
        raise ValidationError(
            f"password must be at least {MIN_PASSWORD_LENGTH} characters", field="password"
        )
    _required(req.name, "name")


def validate_id(entity: str, entity_id: int) -> None:
    if entity_id <= 0:
        raise ValidationError(f"invalid {entity} ID", field="id")


def validate_category(category: str) -> str:
    return _required(category, "category")
