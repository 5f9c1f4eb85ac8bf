# portfolio/models/profile.py
"""
Profile models.

The site shows a single owner profile. Several rows may exist, but the one
with the lowest id is the one that is shown.
"""

from pydantic import BaseModel
from typing import Optional
from datetime import datetime


class Profile(BaseModel):
    """Stored profile row."""
    id: int = 0
    name: str = ""
    title: str = ""
    description: str = ""
    photo_url: str = ""
    email: str = ""
    linkedin_url: str = ""
    github_url: str = ""
    cv_url: str = ""
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ProfileRequest(BaseModel):
    """Body of create/update profile requests."""
    name: str = ""
    title: str = ""
    description: str = ""
    photo_url: str = ""
    email: str = ""
    linkedin_url: str = ""
    github_url: str = ""
    cv_url: str = ""

    class Config:
        json_schema_extra = {
            "example": {
                "name": "John Doe",
                "title": "Backend Engineer",
                "description": "Building things for the web.",
                "email": "john@example.com",
                "github_url": "https://github.com/johndoe"
            }
        }
