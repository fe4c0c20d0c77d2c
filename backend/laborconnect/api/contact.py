"""
Contact form API endpoint
"""
import logging
from fastapi import APIRouter, Depends, status
from ..core.dependencies import get_store
from ..schemas.contact import ContactMessageCreate, ContactAck
from ..storage.base import EntityStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/contact", tags=["contact"])


@router.post("", response_model=ContactAck, status_code=status.HTTP_201_CREATED)
async def submit_contact_message(
    message_data: ContactMessageCreate,
    store: EntityStore = Depends(get_store)
):
    """Store a contact form submission"""
    message = store.create_contact_message(message_data)
    logger.info(f"Contact message {message.id} received")
    return {"message": "Message sent successfully", "id": message.id}
