# portfolio/models/experience.py
from pydantic import BaseModel
from typing import Optional
from datetime import datetime

EXPERIENCE_TYPES = ("work", "internship", "campus", "competition")


class Experience(BaseModel):
    """Work, internship, campus or competition entry."""
    id: int = 0
    title: str
    organization: str
    period: str = ""
    description: str = ""
    type: str
    color: str = ""
    created_at: Optional[datetime] = None


class ExperienceRequest(BaseModel):
    title: str = ""
    organization: str = ""
    period: str = ""  # Free text, e.g. "2021 - 2023"
    description: str = ""
    type: str = ""
    color: str = ""
