# portfolio/services/normalizer.py
"""
Turn validated requests into storage-ready records.

Every string field is trimmed. The display color is the caller's color when
one was given, otherwise a default derived from the entity's type or level.
These functions never fail.
"""

from typing import Any, Dict

from portfolio.models import (
    ExperienceRequest,
    ProfileRequest,
    ProjectRequest,
    PublicationRequest,
    SkillRequest,
)

DEFAULT_COLOR = "gray"
PROJECT_COLOR = "cyan"
PUBLICATION_COLOR = "red"

EXPERIENCE_TYPE_COLORS = {
    "work": "cyan",
    "internship": "pink",
    "campus": "yellow",
    "competition": "purple",
}

SKILL_LEVEL_COLORS = {
    "advanced": "black",
    "intermediate": "gray",
    "beginner": "white",
}


def experience_color(experience_type: str) -> str:
    return EXPERIENCE_TYPE_COLORS.get(experience_type, DEFAULT_COLOR)


def skill_color(level: str) -> str:
    return SKILL_LEVEL_COLORS.get(level, DEFAULT_COLOR)


def _trimmed(model) -> Dict[str, Any]:
    return {
        key: value.strip() if isinstance(value, str) else value
        for key, value in model.model_dump().items()
    }


def normalize_profile(req: ProfileRequest) -> Dict[str, Any]:
    return _trimmed(req)


def normalize_experience(req: ExperienceRequest) -> Dict[str, Any]:
    record = _trimmed(req)
    record["color"] = record["color"] or experience_color(record["type"])
    return record


def normalize_skill(req: SkillRequest) -> Dict[str, Any]:
    record = _trimmed(req)
    record["color"] = record["color"] or skill_color(record["level"])
    return record


def normalize_project(req: ProjectRequest) -> Dict[str, Any]:
    record = _trimmed(req)
    record["color"] = record["color"] or PROJECT_COLOR
    # 0 and None both mean "no profile"
    record["profile_id"] = record["profile_id"] or None
    return record


def normalize_publication(req: PublicationRequest) -> Dict[str, Any]:
    record = _trimmed(req)
    record["color"] = record["color"] or PUBLICATION_COLOR
    return record
