# portfolio/models/contact.py
from pydantic import BaseModel


class ContactRequest(BaseModel):
    name: str = ""
    email: str = ""
    subject: str = ""
    message: str = ""
