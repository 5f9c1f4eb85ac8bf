# portfolio/models/publication.py
from pydantic import BaseModel
from typing import Optional
from datetime import datetime

MIN_PUBLICATION_YEAR = 1900
MAX_PUBLICATION_YEAR = 2100


class Publication(BaseModel):
    id: int = 0
    title: str
    authors: str = ""
    journal: str = ""
    year: int = 0
    description: str = ""
    image_url: str = ""
    publication_url: str = ""
    color: str = ""
    created_at: Optional[datetime] = None


class PublicationRequest(BaseModel):
    title: str = ""
    authors: str = ""
    journal: str = ""
    year: int = 0
    description: str = ""
    image_url: str = ""
    publication_url: str = ""
    color: str = ""
