from fastapi import APIRouter, Depends, status
from typing import List

from aldar.core import messages
from aldar.core.errors import NotFoundError
from aldar.dependencies.auth import require_admin
from aldar.dependencies.storage import get_storage
from aldar.schemas.common import MessageResponse
from aldar.schemas.testimonial import TestimonialCreate, TestimonialResponse
from aldar.services.storage import MemStorage

router = APIRouter(prefix="/api/testimonials", tags=["testimonials"])
admin_router = APIRouter(prefix="/api/admin/testimonials", tags=["testimonials"], dependencies=[Depends(require_admin)])


@router.get("", response_model=List[TestimonialResponse])
async def approved_testimonials(storage: MemStorage = Depends(get_storage)):
    return storage.get_approved_testimonials()


@router.post("", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
async def submit_testimonial(payload: TestimonialCreate, storage: MemStorage = Depends(get_storage)):
    storage.create_testimonial(payload.model_dump())
    return {"message": messages.TESTIMONIAL_SENT}


@admin_router.get("", response_model=List[TestimonialResponse])
async def all_testimonials(storage: MemStorage = Depends(get_storage)):
    return storage.get_all_testimonials()


@admin_router.post("/{testimonial_id}/approve", response_model=MessageResponse)
async def approve(testimonial_id: int, storage: MemStorage = Depends(get_storage)):
    if not storage.approve_testimonial(testimonial_id):
        raise NotFoundError(messages.TESTIMONIAL_NOT_FOUND)
    return {"message": messages.TESTIMONIAL_APPROVED}
