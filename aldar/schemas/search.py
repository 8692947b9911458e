from pydantic import Field
from typing import Optional
from enum import Enum

from aldar.schemas.common import CamelModel

class SortByEnum(str, Enum):
    newest = "newest"
    price_low_to_high = "priceLowToHigh"
    price_high_to_low = "priceHighToLow"
    area_high_to_low = "areaHighToLow"

class PropertySearch(CamelModel):
    city: Optional[str] = None
    type: Optional[str] = Field(None, description="Exact property type; unknown types match nothing")
    price_range: Optional[str] = Field(None, description="'<min>-<max>', '<min>-', '-<max>' or '<min>+'")
    is_rental: Optional[bool] = None
    bedrooms: Optional[int] = Field(None, ge=0, description="Minimum number of bedrooms")
    area: Optional[float] = Field(None, ge=0, description="Minimum area in square meters")
    sort_by: Optional[SortByEnum] = Field(None, description="Result ordering; insertion order when omitted")

    model_config = {
        "json_schema_extra": {
            "example": {
                "city": "الرياض",
                "type": "villa",
                "priceRange": "1000000-2000000",
                "isRental": False,
                "bedrooms": 3,
                "area": 200,
                "sortBy": "priceLowToHigh"
            }
        }
    }
