from fastapi import APIRouter, Depends, Query, status
from pydantic import ValidationError as PydanticValidationError
from structlog import get_logger
from typing import List, Optional

from aldar.config import Settings
from aldar.core import messages
from aldar.core.errors import NotFoundError, ValidationError, first_validation_message
from aldar.dependencies.auth import require_admin
from aldar.dependencies.storage import get_settings, get_storage
from aldar.models import User
from aldar.schemas.common import MessageResponse
from aldar.schemas.property import PropertyCreate, PropertyPatch, PropertyResponse
from aldar.schemas.search import PropertySearch
from aldar.services.storage import MemStorage

logger = get_logger()
router = APIRouter(prefix="/api/properties", tags=["properties"])


async def get_property_search(
    city: Optional[str] = Query(None),
    type: Optional[str] = Query(None),
    price_range: Optional[str] = Query(None, alias="priceRange"),
    is_rental: Optional[str] = Query(None, alias="isRental"),
    bedrooms: Optional[str] = Query(None),
    area: Optional[str] = Query(None),
    sort_by: Optional[str] = Query(None, alias="sortBy"),
) -> PropertySearch:
    raw = {
        "city": city,
        "type": type,
        "priceRange": price_range,
        "isRental": is_rental,
        "bedrooms": bedrooms,
        "area": area,
        "sortBy": sort_by,
    }
    # Empty query values mean "no filter", the way the search form submits them
    values = {key: value for key, value in raw.items() if value is not None and value.strip() != ""}
    if "isRental" in values:
        # only the literal "true" asks for rentals; any other value means sale listings
        values["isRental"] = values["isRental"] == "true"
    try:
        return PropertySearch.model_validate(values)
    except PydanticValidationError as e:
        raise ValidationError(first_validation_message(e.errors()))


@router.get("", response_model=List[PropertyResponse])
async def list_properties(storage: MemStorage = Depends(get_storage)):
    return storage.get_all_properties()


@router.get("/featured", response_model=List[PropertyResponse])
async def featured_properties(
    limit: Optional[int] = Query(None, ge=0),
    storage: MemStorage = Depends(get_storage),
    settings: Settings = Depends(get_settings),
):
    if limit is None:
        limit = settings.FEATURED_DEFAULT_LIMIT
    return storage.get_featured_properties(limit)


@router.get("/search", response_model=List[PropertyResponse])
async def search(query: PropertySearch = Depends(get_property_search), storage: MemStorage = Depends(get_storage)):
    results = storage.search_properties(query)
    logger.info("Search completed", query=query.model_dump(exclude_none=True, mode="json"), result_count=len(results))
    return results


@router.get("/code/{code}", response_model=PropertyResponse)
async def get_property_by_code(code: str, storage: MemStorage = Depends(get_storage)):
    prop = storage.get_property_by_code(code)
    if prop is None:
        raise NotFoundError(messages.PROPERTY_NOT_FOUND)
    return prop


@router.get("/{property_id}", response_model=PropertyResponse)
async def get_property(property_id: int, storage: MemStorage = Depends(get_storage)):
    prop = storage.get_property(property_id)
    if prop is None:
        raise NotFoundError(messages.PROPERTY_NOT_FOUND)
    return prop


@router.post("", response_model=PropertyResponse, status_code=status.HTTP_201_CREATED)
async def create_property(
    payload: PropertyCreate,
    admin: User = Depends(require_admin),
    storage: MemStorage = Depends(get_storage),
):
    prop = storage.create_property(payload.model_dump())
    logger.info("Property published", admin_id=admin.id, property_id=prop.id)
    return prop


@router.put("/{property_id}", response_model=PropertyResponse)
async def update_property(
    property_id: int,
    payload: PropertyPatch,
    admin: User = Depends(require_admin),
    storage: MemStorage = Depends(get_storage),
):
    updated = storage.update_property(property_id, payload.changes())
    if updated is None:
        raise NotFoundError(messages.PROPERTY_NOT_FOUND)
    return updated


@router.delete("/{property_id}", response_model=MessageResponse)
async def delete_property(
    property_id: int,
    admin: User = Depends(require_admin),
    storage: MemStorage = Depends(get_storage),
):
    if not storage.delete_property(property_id):
        raise NotFoundError(messages.PROPERTY_NOT_FOUND)
    logger.info("Property removed", admin_id=admin.id, property_id=property_id)
    return {"message": messages.PROPERTY_DELETED}
