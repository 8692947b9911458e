# Records held by the in-memory store. They are frozen: every change
# produces a new record that replaces the old one under the collection lock.
from aldar.models.enums import PropertyStatus, PropertyType, RentalPeriod, UserRole
from aldar.models.property import Property
from aldar.models.user import User
from aldar.models.contact import ContactMessage
from aldar.models.testimonial import Testimonial

__all__ = [
    "ContactMessage",
    "Property",
    "PropertyStatus",
    "PropertyType",
    "RentalPeriod",
    "Testimonial",
    "User",
    "UserRole",
]
