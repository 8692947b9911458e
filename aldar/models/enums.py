from enum import Enum


class PropertyType(str, Enum):
    villa = "villa"
    apartment = "apartment"
    land = "land"
    commercial = "commercial"


class PropertyStatus(str, Enum):
    available = "available"
    sold = "sold"
    rented = "rented"
    pending = "pending"


class RentalPeriod(str, Enum):
    yearly = "yearly"
    monthly = "monthly"
    weekly = "weekly"
    daily = "daily"


class UserRole(str, Enum):
    admin = "admin"
    user = "user"
