# portfolio/models/portfolio.py
from pydantic import BaseModel, Field
from typing import Dict, List

from .profile import Profile
from .experience import Experience
from .skill import Skill
from .project import Project
from .publication import Publication


class PortfolioData(BaseModel):
    """
    Everything the public page renders, read in one pass.

    Not persisted. Any section may be empty when its read failed.
    """
    profile: Profile = Field(default_factory=Profile)
    experiences: List[Experience] = Field(default_factory=list)
    skills: Dict[str, List[Skill]] = Field(default_factory=dict)  # category -> skills, first-seen order
    projects: List[Project] = Field(default_factory=list)
    publications: List[Publication] = Field(default_factory=list)
