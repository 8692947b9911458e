from fastapi import APIRouter, Depends, status
from typing import List

from aldar.core import messages
from aldar.core.errors import NotFoundError
from aldar.dependencies.auth import require_admin
from aldar.dependencies.storage import get_storage
from aldar.schemas.common import MessageResponse
from aldar.schemas.contact import ContactMessageCreate, ContactMessageResponse
from aldar.services.storage import MemStorage

router = APIRouter(prefix="/api/contact", tags=["contact"])


@router.post("", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
async def send_message(payload: ContactMessageCreate, storage: MemStorage = Depends(get_storage)):
    storage.create_contact_message(payload.model_dump())
    return {"message": messages.MESSAGE_SENT}


@router.get("", response_model=List[ContactMessageResponse], dependencies=[Depends(require_admin)])
async def list_messages(storage: MemStorage = Depends(get_storage)):
    return storage.get_all_contact_messages()


@router.get("/{message_id}", response_model=ContactMessageResponse, dependencies=[Depends(require_admin)])
async def get_message(message_id: int, storage: MemStorage = Depends(get_storage)):
    message = storage.get_contact_message(message_id)
    if message is None:
        raise NotFoundError(messages.MESSAGE_NOT_FOUND)
    return message


@router.post("/{message_id}/read", response_model=MessageResponse, dependencies=[Depends(require_admin)])
async def mark_read(message_id: int, storage: MemStorage = Depends(get_storage)):
    if not storage.mark_contact_message_as_read(message_id):
        raise NotFoundError(messages.MESSAGE_NOT_FOUND)
    return {"message": messages.MESSAGE_MARKED_READ}
