"""In-memory entity store.

Each collection keeps its own id counter and lock. Ids are handed out under
the lock and never reused, even after a delete. Records are frozen
dataclasses holding tuples rather than lists, so updates and flag flips swap
in a new record instead of mutating the stored one. A sale listing never
keeps a rental period, whichever way it was created or patched.
"""
import dataclasses
import random
import threading
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Generic, List, Mapping, Optional, TypeVar

from structlog import get_logger

from aldar.core import messages
from aldar.core.errors import ConflictError
from aldar.models import ContactMessage, Property, Testimonial, User
from aldar.schemas.search import PropertySearch
from aldar.services.search import search_properties, select_featured

logger = get_logger()

T = TypeVar("T")

# Fields the store assigns itself; callers cannot set or change them
_STORE_FIELDS = {"id", "created_at"}
_IMMUTABLE_PROPERTY_FIELDS = _STORE_FIELDS | {"property_code"}


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Collection(Generic[T]):
    """Id-keyed table with insertion order and a monotonically increasing id."""

    def __init__(self, name: str):
        self.name = name
        self._rows: Dict[int, T] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def insert(self, build: Callable[[int], T]) -> T:
        with self._lock:
            record = build(self._next_id)
            self._rows[self._next_id] = record
            self._next_id += 1
        return record

    def insert_unique(self, build: Callable[[int], T], check: Callable[[List[T]], None]) -> T:
        """Insert after ``check`` has inspected the current rows under the same lock."""
        with self._lock:
            check(list(self._rows.values()))
            record = build(self._next_id)
            self._rows[self._next_id] = record
            self._next_id += 1
        return record

    def get(self, record_id: int) -> Optional[T]:
        return self._rows.get(record_id)

    def find(self, predicate: Callable[[T], bool]) -> Optional[T]:
        for record in self.all():
            if predicate(record):
                return record
        return None

    def all(self) -> List[T]:
        with self._lock:
            return list(self._rows.values())

    def replace(self, record_id: int, change: Callable[[T], T]) -> Optional[T]:
        with self._lock:
            current = self._rows.get(record_id)
            if current is None:
                return None
            updated = change(current)
            self._rows[record_id] = updated
        return updated

    def delete(self, record_id: int) -> bool:
        with self._lock:
            return self._rows.pop(record_id, None) is not None

    def __len__(self) -> int:
        return len(self._rows)


class MemStorage:
    def __init__(self, rng: Optional[random.Random] = None, code_prefix: str = "SA-"):
        self.rng = rng or random.Random()
        self.code_prefix = code_prefix
        self.users: Collection[User] = Collection("users")
        self.properties: Collection[Property] = Collection("properties")
        self.contact_messages: Collection[ContactMessage] = Collection("contact_messages")
        self.testimonials: Collection[Testimonial] = Collection("testimonials")

    # Users

    def get_user(self, user_id: int) -> Optional[User]:
        return self.users.get(user_id)

    def get_user_by_username(self, username: str) -> Optional[User]:
        return self.users.find(lambda user: user.username == username)

    def get_user_by_email(self, email: str) -> Optional[User]:
        return self.users.find(lambda user: user.email == email)

    def create_user(self, data: Mapping[str, Any]) -> User:
        fields = _without(data, _STORE_FIELDS)

        def check(existing: List[User]):
            if any(user.username == fields["username"] for user in existing):
                raise ConflictError(messages.USERNAME_TAKEN)
            if any(user.email == fields["email"] for user in existing):
                raise ConflictError(messages.EMAIL_TAKEN)

        user = self.users.insert_unique(lambda new_id: User(id=new_id, created_at=utcnow(), **fields), check)
        logger.info("User created", user_id=user.id, username=user.username, role=user.role)
        return user

    # Properties

    def get_all_properties(self) -> List[Property]:
        return self.properties.all()

    def get_property(self, property_id: int) -> Optional[Property]:
        return self.properties.get(property_id)

    def get_property_by_code(self, code: str) -> Optional[Property]:
        return self.properties.find(lambda prop: prop.property_code == code)

    def generate_property_code(self, taken: set) -> str:
        # 90000 possible codes; re-draw until a free one comes up
        if len(taken) >= 90000:
            raise ConflictError(messages.PROPERTY_CODE_TAKEN)
        while True:
            code = f"{self.code_prefix}{self.rng.randint(10000, 99999)}"
            if code not in taken:
                return code

    def create_property(self, data: Mapping[str, Any]) -> Property:
        fields = _property_fields(_without(data, _STORE_FIELDS))
        if not fields.get("is_rental"):
            fields["rental_period"] = None

        def check(existing: List[Property]):
            taken = {prop.property_code for prop in existing}
            if fields.get("property_code"):
                if fields["property_code"] in taken:
                    raise ConflictError(messages.PROPERTY_CODE_TAKEN)
            else:
                fields["property_code"] = self.generate_property_code(taken)

        prop = self.properties.insert_unique(
            lambda new_id: Property(id=new_id, created_at=utcnow(), **fields), check
        )
        logger.info("Property created", property_id=prop.id, property_code=prop.property_code)
        return prop

    def update_property(self, property_id: int, changes: Mapping[str, Any]) -> Optional[Property]:
        patch = _property_fields(_without(changes, _IMMUTABLE_PROPERTY_FIELDS))

        def merge(prop: Property) -> Property:
            merged = dataclasses.replace(prop, **patch)
            if not merged.is_rental and merged.rental_period is not None:
                merged = dataclasses.replace(merged, rental_period=None)
            return merged

        updated = self.properties.replace(property_id, merge)
        if updated is not None:
            logger.info("Property updated", property_id=property_id, fields=sorted(patch))
        return updated

    def delete_property(self, property_id: int) -> bool:
        deleted = self.properties.delete(property_id)
        if deleted:
            logger.info("Property deleted", property_id=property_id)
        return deleted

    def search_properties(self, search: PropertySearch) -> List[Property]:
        return search_properties(self.properties.all(), search)

    def get_featured_properties(self, limit: int = 6) -> List[Property]:
        return select_featured(self.properties.all(), limit, self.rng)

    # Contact messages

    def create_contact_message(self, data: Mapping[str, Any]) -> ContactMessage:
        fields = _without(data, _STORE_FIELDS | {"is_read"})
        message = self.contact_messages.insert(
            lambda new_id: ContactMessage(id=new_id, created_at=utcnow(), is_read=False, **fields)
        )
        logger.info("Contact message received", message_id=message.id)
        return message

    def get_all_contact_messages(self) -> List[ContactMessage]:
        return self.contact_messages.all()

    def get_contact_message(self, message_id: int) -> Optional[ContactMessage]:
        return self.contact_messages.get(message_id)

    def mark_contact_message_as_read(self, message_id: int) -> bool:
        return self._set_flag(self.contact_messages, message_id, "is_read", True)

    # Testimonials

    def create_testimonial(self, data: Mapping[str, Any]) -> Testimonial:
        fields = _without(data, _STORE_FIELDS | {"is_approved"})
        testimonial = self.testimonials.insert(
            lambda new_id: Testimonial(id=new_id, created_at=utcnow(), is_approved=False, **fields)
        )
        logger.info("Testimonial received", testimonial_id=testimonial.id)
        return testimonial

    def get_approved_testimonials(self) -> List[Testimonial]:
        return [t for t in self.testimonials.all() if t.is_approved]

    def get_all_testimonials(self) -> List[Testimonial]:
        return self.testimonials.all()

    def approve_testimonial(self, testimonial_id: int) -> bool:
        return self._set_flag(self.testimonials, testimonial_id, "is_approved", True)

    def _set_flag(self, collection: Collection, record_id: int, flag: str, value: bool) -> bool:
        updated = collection.replace(record_id, lambda record: dataclasses.replace(record, **{flag: value}))
        if updated is None:
            return False
        logger.info("Flag set", collection=collection.name, record_id=record_id, flag=flag, value=value)
        return True


def _without(data: Mapping[str, Any], excluded: set) -> Dict[str, Any]:
    return {key: value for key, value in data.items() if key not in excluded}


def _property_fields(fields: Dict[str, Any]) -> Dict[str, Any]:
    # Stored records never share a list with the caller
    for name in ("features", "images"):
        if fields.get(name) is not None:
            fields[name] = tuple(fields[name])
    return fields
