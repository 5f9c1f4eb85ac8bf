# portfolio/services/contact.py
import logging

from portfolio.core.security import sanitize_input
from portfolio.models import ContactRequest
from portfolio.services.validation import validate_contact

logger = logging.getLogger(__name__)


class ContactService:
    """Accepts contact form submissions. Messages are logged, not stored or mailed."""

    async def submit(self, req: ContactRequest) -> ContactRequest:
        validate_contact(req)

        message = ContactRequest(
            name=sanitize_input(req.name),
            email=sanitize_input(req.email),
            subject=sanitize_input(req.subject),
            message=sanitize_input(req.message),
        )
        logger.info(
            "Contact message received",
            extra={"extra": {
                "sender": message.email,
                "subject": message.subject,
                "message_length": len(message.message),
            }},
        )
        return message


def get_contact_service() -> ContactService:
    return ContactService()
