# tests/test_normalizer.py
import pytest

from portfolio.models import (
    ExperienceRequest,
    ProfileRequest,
    ProjectRequest,
    PublicationRequest,
    SkillRequest,
)
from portfolio.services.normalizer import (
    experience_color,
    normalize_experience,
    normalize_profile,
    normalize_project,
    normalize_publication,
    normalize_skill,
    skill_color,
)


@pytest.mark.parametrize("experience_type,color", [
    ("work", "cyan"),
    ("internship", "pink"),
    ("campus", "yellow"),
    ("competition", "purple"),
    ("other", "gray"),
])
def test_experience_color(experience_type, color):
    assert experience_color(experience_type) == color


@pytest.mark.parametrize("level,color", [
    ("advanced", "black"),
    ("intermediate", "gray"),
    ("beginner", "white"),
    ("", "gray"),
])
def test_skill_color(level, color):
    assert skill_color(level) == color


def test_profile_fields_trimmed():
    """Every string field is stored without surrounding whitespace"""
    record = normalize_profile(ProfileRequest(name="  John ", email=" john@example.com\n", title=" Dev "))

    assert record["name"] == "John"
    assert record["email"] == "john@example.com"
    assert record["title"] == "Dev"


def test_experience_default_color_from_type():
    record = normalize_experience(ExperienceRequest(title="Intern", organization="Acme", type=" internship "))

    assert record["type"] == "internship"
    assert record["color"] == "pink"


def test_experience_explicit_color_kept():
    record = normalize_experience(ExperienceRequest(title="T", organization="O", type="work", color="lime"))

    assert record["color"] == "lime"


def test_skill_default_color_from_level():
    assert normalize_skill(SkillRequest(category="Lang", name="Go", level="advanced"))["color"] == "black"
    assert normalize_skill(SkillRequest(category="Lang", name="Go"))["color"] == "gray"


def test_project_defaults():
    """Projects default to cyan and an unset profile becomes None"""
    record = normalize_project(ProjectRequest(title=" Site ", profile_id=0))

    assert record["title"] == "Site"
    assert record["color"] == "cyan"
    assert record["profile_id"] is None


def test_project_profile_id_kept():
    assert normalize_project(ProjectRequest(title="Site", profile_id=3))["profile_id"] == 3


def test_publication_defaults():
    record = normalize_publication(PublicationRequest(title="Paper", year=2020))

    assert record["color"] == "red"
    assert record["year"] == 2020
