# portfolio/models/project.py
from pydantic import BaseModel
from typing import Optional
from datetime import datetime


class Project(BaseModel):
    id: int = 0
    title: str
    description: str = ""
    image_url: str = ""
    project_url: str = ""
    github_url: str = ""
    tech_stack: str = ""  # Comma-separated, split for display
    color: str = ""
    profile_id: int = 0  # 0 when not linked to a profile
    created_at: Optional[datetime] = None


class ProjectRequest(BaseModel):
    title: str = ""
    description: str = ""
    image_url: str = ""
    project_url: str = ""
    github_url: str = ""
    tech_stack: str = ""
    color: str = ""
    profile_id: Optional[int] = None
