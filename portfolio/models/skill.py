# portfolio/models/skill.py
from pydantic import BaseModel

SKILL_LEVELS = ("beginner", "intermediate", "advanced")


class Skill(BaseModel):
    id: int = 0
    category: str
    name: str
    level: str = ""
    color: str = ""


class SkillRequest(BaseModel):
    category: str = ""
    name: str = ""
    level: str = ""  # Empty means unspecified
    color: str = ""
