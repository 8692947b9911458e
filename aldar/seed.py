"""Startup data: the admin account, the sample listings and approved testimonials."""
from structlog import get_logger

from aldar.config import Settings
from aldar.core.security import hash_password
from aldar.models import PropertyType, RentalPeriod, UserRole
from aldar.services.storage import MemStorage

logger = get_logger()

_IMAGE = "https://images.unsplash.com/{}?ixlib=rb-1.2.1&auto=format&fit=crop&w=600&h=400&q=80"

SAMPLE_PROPERTIES = [
    {
        "title": "فيلا فاخرة مع مسبح",
        "description": "فيلا فخمة تتميز بتصميم عصري وإطلالة رائعة على المدينة. تحتوي على مسبح خاص وحديقة واسعة.",
        "type": PropertyType.villa,
        "price": 2800000,
        "is_rental": False,
        "city": "الرياض",
        "neighborhood": "حي الملقا",
        "address": "شارع العليا، حي الملقا، الرياض",
        "bedrooms": 5,
        "bathrooms": 4,
        "area": 450,
        "features": ["مسبح", "حديقة", "مطبخ مفتوح", "موقف سيارات", "غرفة خادمة"],
        "images": [_IMAGE.format("photo-1600585154340-be6161a56a0c")],
        "property_code": "SA-12345",
    },
    {
        "title": "شقة فاخرة بإطلالة بحرية",
        "description": "شقة حديثة مع إطلالة بانورامية على البحر. تقع في أفضل أحياء جدة وتتميز بالتشطيبات الراقية.",
        "type": PropertyType.apartment,
        "price": 85000,
        "is_rental": True,
        "rental_period": RentalPeriod.yearly,
        "city": "جدة",
        "neighborhood": "حي الشاطئ",
        "address": "كورنيش جدة، حي الشاطئ",
        "bedrooms": 3,
        "bathrooms": 2,
        "area": 180,
        "features": ["إطلالة بحرية", "مكيفات مركزية", "مطبخ حديث", "بلكونة"],
        "images": [_IMAGE.format("photo-1560448204-e02f11c3d0e2")],
        "property_code": "SA-12346",
    },
    {
        "title": "أرض سكنية استثمارية",
        "description": "أرض سكنية استثمارية في موقع استراتيجي بالدمام، مناسبة لبناء فلل أو مجمع سكني.",
        "type": PropertyType.land,
        "price": 1200000,
        "is_rental": False,
        "city": "الدمام",
        "neighborhood": "حي الشاطئ الغربي",
        "address": "حي الشاطئ الغربي، الدمام",
        "area": 750,
        "features": ["شارع 20م", "مستوية", "منطقة خدمات متكاملة"],
        "images": [_IMAGE.format("photo-1512917774080-9991f1c4c750")],
        "property_code": "SA-12347",
    },
    {
        "title": "فيلا عصرية بتصميم فريد",
        "description": "فيلا عصرية بتصميم معماري فريد، تتميز بالمساحات الواسعة والإضاءة الطبيعية الوفيرة.",
        "type": PropertyType.villa,
        "price": 3500000,
        "is_rental": False,
        "city": "الخبر",
        "neighborhood": "حي اليرموك",
        "address": "شارع الأمير سلطان، حي اليرموك، الخبر",
        "bedrooms": 6,
        "bathrooms": 5,
        "area": 520,
        "features": ["حمام سباحة", "مصعد داخلي", "نظام أمان متطور", "حديقة خلفية"],
        "images": [_IMAGE.format("photo-1580587771525-78b9dba3b914")],
        "property_code": "SA-12348",
    },
    {
        "title": "شقة قريبة من الحرم",
        "description": "شقة فاخرة على بعد دقائق من الحرم المكي، مؤثثة بالكامل ومجهزة بأحدث التقنيات.",
        "type": PropertyType.apartment,
        "price": 95000,
        "is_rental": True,
        "rental_period": RentalPeriod.yearly,
        "city": "مكة المكرمة",
        "neighborhood": "العزيزية",
        "address": "حي العزيزية، مكة المكرمة",
        "bedrooms": 3,
        "bathrooms": 2,
        "area": 160,
        "features": ["قريبة من الحرم", "أثاث كامل", "تكييف مركزي", "مطبخ مجهز"],
        "images": [_IMAGE.format("photo-1592595896616-c37162298647")],
        "property_code": "SA-12349",
    },
    {
        "title": "عمارة استثمارية",
        "description": "عمارة استثمارية في موقع حيوي بالمدينة المنورة، مكونة من 12 شقة و4 محلات تجارية.",
        "type": PropertyType.commercial,
        "price": 4500000,
        "is_rental": False,
        "city": "المدينة المنورة",
        "neighborhood": "المنطقة المركزية",
        "address": "المنطقة المركزية، بالقرب من الحرم النبوي",
        "area": 800,
        "features": ["12 شقة", "4 محلات تجارية", "مصعد", "مواقف سيارات"],
        "images": [_IMAGE.format("photo-1546213290-e1b492ab3eee")],
        "property_code": "SA-12350",
    },
]

SAMPLE_TESTIMONIALS = [
    {
        "name": "محمد السعيد",
        "location": "الرياض",
        "message": "كانت تجربتي مع الدار العقارية ممتازة، ساعدوني في العثور على المنزل المناسب لعائلتي بسعر مناسب وخدمة احترافية.",
        "rating": 5,
    },
    {
        "name": "سارة الأحمدي",
        "location": "جدة",
        "message": "استثمرت في عقار بمساعدة فريق الدار العقارية، وقدموا لي استشارات قيمة ساعدتني في اتخاذ قرار استثماري صائب.",
        "rating": 4,
    },
    {
        "name": "عبدالله الشمري",
        "location": "الدمام",
        "message": "أشكر فريق الدار العقارية على احترافيتهم في إدارة عقاراتي وتسهيل عملية تأجيرها وصيانتها دون أي متاعب.",
        "rating": 5,
    },
]


def seed_admin(storage: MemStorage, settings: Settings):
    return storage.create_user({
        "username": settings.ADMIN_USERNAME,
        "password_hash": hash_password(settings.ADMIN_PASSWORD, rounds=settings.PASSWORD_HASH_ROUNDS),
        "name": settings.ADMIN_NAME,
        "role": UserRole.admin,
        "email": settings.ADMIN_EMAIL,
        "phone": settings.ADMIN_PHONE,
    })


def seed_storage(storage: MemStorage, settings: Settings):
    seed_admin(storage, settings)
    for data in SAMPLE_PROPERTIES:
        storage.create_property(data)
    for data in SAMPLE_TESTIMONIALS:
        testimonial = storage.create_testimonial(data)
        storage.approve_testimonial(testimonial.id)
    logger.info(
        "Sample data loaded",
        properties=len(SAMPLE_PROPERTIES),
        testimonials=len(SAMPLE_TESTIMONIALS),
    )
