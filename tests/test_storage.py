import random
import re
from concurrent.futures import ThreadPoolExecutor

import pytest

from aldar.core.errors import ConflictError
from aldar.models import PropertyStatus, RentalPeriod, UserRole
from aldar.services.storage import MemStorage


class SequenceRandom(random.Random):
    """Random source whose randint answers come from a fixed list."""

    def __init__(self, values):
        super().__init__(0)
        self._values = iter(values)

    def randint(self, a, b):
        return next(self._values)


@pytest.fixture
def empty_storage():
    return MemStorage(rng=random.Random(42))


def test_property_ids_are_never_reused_after_delete(empty_storage, property_data):
    first = empty_storage.create_property(property_data())
    second = empty_storage.create_property(property_data())
    third = empty_storage.create_property(property_data())
    assert [first.id, second.id, third.id] == [1, 2, 3]

    assert empty_storage.delete_property(2) is True
    fourth = empty_storage.create_property(property_data())

    assert fourth.id == 4
    assert [p.id for p in empty_storage.get_all_properties()] == [1, 3, 4]


def test_consecutive_inserts_differ_by_one(empty_storage, property_data):
    a = empty_storage.create_property(property_data())
    b = empty_storage.create_property(property_data())
    assert b.id - a.id == 1


def test_insert_ignores_caller_supplied_id_and_stamps_created_at(empty_storage, property_data):
    prop = empty_storage.create_property(property_data(id=99, created_at="yesterday"))
    assert prop.id == 1
    assert prop.created_at.tzinfo is not None


def test_generated_property_code_format(empty_storage, property_data):
    prop = empty_storage.create_property(property_data())
    assert re.fullmatch(r"SA-\d{5}", prop.property_code)


def test_generated_property_code_redraws_when_taken(property_data):
    storage = MemStorage(rng=SequenceRandom([12345, 54321]))
    storage.create_property(property_data(property_code="SA-12345"))

    prop = storage.create_property(property_data())

    assert prop.property_code == "SA-54321"


def test_supplied_duplicate_property_code_is_rejected(empty_storage, property_data):
    empty_storage.create_property(property_data(property_code="SA-10001"))

    with pytest.raises(ConflictError):
        empty_storage.create_property(property_data(property_code="SA-10001"))

    assert len(empty_storage.get_all_properties()) == 1
    # the failed insert did not consume an id
    assert empty_storage.create_property(property_data()).id == 2


def test_get_property_missing_returns_none(empty_storage):
    assert empty_storage.get_property(404) is None
    assert empty_storage.get_property_by_code("SA-00000") is None


def test_get_property_by_code(storage):
    prop = storage.get_property_by_code("SA-12346")
    assert prop is not None
    assert prop.city == "جدة"


def test_update_merges_only_given_fields(empty_storage, property_data):
    original = empty_storage.create_property(property_data())

    updated = empty_storage.update_property(original.id, {"price": 800000, "status": PropertyStatus.sold})

    assert updated.price == 800000
    assert updated.status == PropertyStatus.sold
    assert updated.title == original.title
    assert updated.images == original.images
    assert updated.id == original.id
    assert updated.created_at == original.created_at
    assert empty_storage.get_property(original.id) == updated


def test_update_cannot_change_identity_fields(empty_storage, property_data):
    original = empty_storage.create_property(property_data(property_code="SA-20000"))

    updated = empty_storage.update_property(
        original.id, {"id": 50, "created_at": None, "property_code": "SA-99999", "title": "عنوان جديد"}
    )

    assert updated.id == original.id
    assert updated.created_at == original.created_at
    assert updated.property_code == "SA-20000"
    assert updated.title == "عنوان جديد"


def test_update_unknown_property_returns_none(empty_storage):
    assert empty_storage.update_property(7, {"price": 1}) is None


def test_delete_unknown_property_leaves_collection_untouched(storage):
    before = storage.get_all_properties()
    assert storage.delete_property(999) is False
    assert storage.get_all_properties() == before


def test_mark_contact_message_as_read_is_idempotent(empty_storage):
    message = empty_storage.create_contact_message({
        "name": "خالد",
        "email": "khalid@example.com",
        "subject": "استفسار",
        "message": "أرغب في معرفة المزيد",
    })
    assert message.is_read is False

    assert empty_storage.mark_contact_message_as_read(message.id) is True
    assert empty_storage.get_contact_message(message.id).is_read is True
    assert empty_storage.mark_contact_message_as_read(message.id) is True
    assert empty_storage.get_contact_message(message.id).is_read is True


def test_mark_unknown_contact_message(empty_storage):
    assert empty_storage.mark_contact_message_as_read(1) is False


def test_contact_message_always_starts_unread(empty_storage):
    message = empty_storage.create_contact_message({
        "name": "خالد",
        "email": "khalid@example.com",
        "subject": "استفسار",
        "message": "نص",
        "is_read": True,
    })
    assert message.is_read is False


def test_approve_testimonial_moves_it_into_approved_list(empty_storage):
    pending = empty_storage.create_testimonial({
        "name": "نورة",
        "location": "أبها",
        "message": "خدمة ممتازة",
        "rating": 5,
        "is_approved": True,
    })
    assert pending.is_approved is False
    assert empty_storage.get_approved_testimonials() == []

    assert empty_storage.approve_testimonial(pending.id) is True

    approved = empty_storage.get_approved_testimonials()
    assert len(approved) == 1
    assert approved[0].id == pending.id
    assert approved[0].name == pending.name
    assert approved[0].message == pending.message
    assert approved[0].rating == pending.rating
    assert approved[0].created_at == pending.created_at


def test_approve_unknown_testimonial(empty_storage):
    assert empty_storage.approve_testimonial(3) is False


def test_seeded_testimonials_are_approved(storage):
    assert len(storage.get_approved_testimonials()) == 3
    assert len(storage.get_all_testimonials()) == 3


def test_user_lookup_and_uniqueness(storage, visitor):
    assert storage.get_user_by_username("admin").role == UserRole.admin
    assert storage.get_user_by_email("visitor@example.com") == visitor
    assert storage.get_user_by_username("nobody") is None

    with pytest.raises(ConflictError):
        storage.create_user({
            "username": "visitor",
            "password_hash": "x",
            "name": "مكرر",
            "email": "other@example.com",
        })
    with pytest.raises(ConflictError):
        storage.create_user({
            "username": "another",
            "password_hash": "x",
            "name": "مكرر",
            "email": "visitor@example.com",
        })


def test_seeded_admin_password_is_hashed(storage):
    admin = storage.get_user_by_username("admin")
    assert admin.password_hash != "admin123"
    assert admin.password_hash.startswith("$2")


def test_concurrent_inserts_get_distinct_ids(empty_storage, property_data):
    with ThreadPoolExecutor(max_workers=8) as pool:
        created = list(pool.map(lambda _: empty_storage.create_property(property_data()), range(200)))

    ids = sorted(prop.id for prop in created)
    assert ids == list(range(1, 201))
    assert len({prop.property_code for prop in created}) == 200


def test_stored_property_does_not_share_lists_with_caller(empty_storage, property_data):
    features = ["مسبح"]
    images = ["https://example.com/1.jpg"]
    prop = empty_storage.create_property(property_data(features=features, images=images))

    features.append("مصعد")
    images.append("https://example.com/2.jpg")

    stored = empty_storage.get_property(prop.id)
    assert stored.features == ("مسبح",)
    assert stored.images == ("https://example.com/1.jpg",)
    with pytest.raises(AttributeError):
        stored.images.append("https://example.com/3.jpg")


def test_update_does_not_share_lists_with_caller(empty_storage, property_data):
    prop = empty_storage.create_property(property_data())
    features = ["حديقة"]

    empty_storage.update_property(prop.id, {"features": features})
    features.clear()

    assert empty_storage.get_property(prop.id).features == ("حديقة",)


def test_sale_listing_never_keeps_a_rental_period(empty_storage, property_data):
    prop = empty_storage.create_property(property_data(rental_period=RentalPeriod.monthly))
    assert prop.rental_period is None

    updated = empty_storage.update_property(prop.id, {"rental_period": RentalPeriod.monthly})
    assert updated.is_rental is False
    assert updated.rental_period is None

    rental = empty_storage.update_property(prop.id, {"is_rental": True, "rental_period": RentalPeriod.weekly})
    assert rental.rental_period == RentalPeriod.weekly
    assert empty_storage.update_property(prop.id, {"is_rental": False}).rental_period is None
