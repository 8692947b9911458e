from datetime import datetime
from typing import List, Optional

from pydantic import Field, field_validator, model_validator

from aldar.core import messages
from aldar.models import PropertyStatus, PropertyType, RentalPeriod
from aldar.schemas.common import CamelModel


def _require_images(images):
    if images is not None and not images:
        raise ValueError(messages.IMAGES_REQUIRED)
    return images


class PropertyCreate(CamelModel):
    title: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    type: PropertyType
    price: int = Field(..., gt=0)
    currency: str = "SAR"
    is_rental: bool = False
    rental_period: Optional[RentalPeriod] = None
    city: str = Field(..., min_length=1)
    neighborhood: str = Field(..., min_length=1)
    address: str = Field(..., min_length=1)
    bedrooms: Optional[int] = Field(None, ge=0)
    bathrooms: Optional[int] = Field(None, ge=0)
    area: float = Field(..., gt=0, description="Area in square meters")
    features: List[str] = []
    images: List[str]
    status: PropertyStatus = PropertyStatus.available
    property_code: Optional[str] = Field(None, description="Generated as SA-<5 digits> when omitted")
    latitude: Optional[float] = Field(None, ge=-90, le=90)
    longitude: Optional[float] = Field(None, ge=-180, le=180)

    @field_validator("features", mode="before")
    @classmethod
    def null_features_as_empty(cls, value):
        return [] if value is None else value

    @field_validator("images")
    @classmethod
    def images_not_empty(cls, value):
        return _require_images(value)

    @field_validator("property_code")
    @classmethod
    def blank_code_as_missing(cls, value):
        if value is not None:
            value = value.strip()
        return value or None

    @model_validator(mode="after")
    def drop_rental_period_for_sale(self):
        if not self.is_rental:
            self.rental_period = None
        return self


# Fields that may be cleared with an explicit null in a patch
_NULLABLE_FIELDS = {"rental_period", "bedrooms", "bathrooms", "latitude", "longitude"}


class PropertyPatch(CamelModel):
    """Partial update. Only fields present in the request body are applied.

    ``propertyCode`` and ``createdAt`` are fixed at creation and are not part
    of the patch; unknown keys are ignored.
    """

    title: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = Field(None, min_length=1)
    type: Optional[PropertyType] = None
    price: Optional[int] = Field(None, gt=0)
    currency: Optional[str] = None
    is_rental: Optional[bool] = None
    rental_period: Optional[RentalPeriod] = None
    city: Optional[str] = Field(None, min_length=1)
    neighborhood: Optional[str] = Field(None, min_length=1)
    address: Optional[str] = Field(None, min_length=1)
    bedrooms: Optional[int] = Field(None, ge=0)
    bathrooms: Optional[int] = Field(None, ge=0)
    area: Optional[float] = Field(None, gt=0)
    features: Optional[List[str]] = None
    images: Optional[List[str]] = None
    status: Optional[PropertyStatus] = None
    latitude: Optional[float] = Field(None, ge=-90, le=90)
    longitude: Optional[float] = Field(None, ge=-180, le=180)

    @field_validator("images")
    @classmethod
    def images_not_empty(cls, value):
        return _require_images(value)

    @model_validator(mode="after")
    def required_fields_not_null(self):
        for name in sorted(self.model_fields_set - _NULLABLE_FIELDS):
            if getattr(self, name) is None:
                alias = type(self).model_fields[name].alias or name
                raise ValueError(f"{alias}: {messages.FIELD_REQUIRED}")
        return self

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True)


class PropertyResponse(CamelModel):
    id: int
    title: str
    description: str
    type: PropertyType
    price: int
    currency: str
    is_rental: bool
    rental_period: Optional[RentalPeriod] = None
    city: str
    neighborhood: str
    address: str
    bedrooms: Optional[int] = None
    bathrooms: Optional[int] = None
    area: float
    features: List[str]
    images: List[str]
    status: PropertyStatus
    property_code: str
    created_at: datetime
    latitude: Optional[float] = None
    longitude: Optional[float] = None
