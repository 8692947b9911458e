from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Tuple

from aldar.models.enums import PropertyStatus, PropertyType, RentalPeriod


@dataclass(frozen=True)
class Property:
    id: int
    title: str
    description: str
    type: PropertyType
    price: int
    city: str
    neighborhood: str
    address: str
    area: float  # square meters
    images: Tuple[str, ...]
    property_code: str  # e.g. SA-12345, unique and immutable
    created_at: datetime
    currency: str = "SAR"
    is_rental: bool = False
    rental_period: Optional[RentalPeriod] = None  # only set on rental listings
    bedrooms: Optional[int] = None
    bathrooms: Optional[int] = None
    features: Tuple[str, ...] = ()
    status: PropertyStatus = PropertyStatus.available
    latitude: Optional[float] = None
    longitude: Optional[float] = None
