# portfolio/api/v1/contact.py
from fastapi import APIRouter, Depends

from portfolio.api.response import success_response
from portfolio.models import ContactRequest
from portfolio.services import ContactService, get_contact_service

router = APIRouter()


@router.post("/contact")
async def submit_contact(payload: ContactRequest, service: ContactService = Depends(get_contact_service)):
    await service.submit(payload)
    return success_response("Message sent successfully")
