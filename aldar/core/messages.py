"""Arabic response messages returned by the API."""

NOT_AUTHENTICATED = "غير مصرح بالدخول"
FORBIDDEN = "ليس لديك صلاحية للوصول"
INVALID_CREDENTIALS = "اسم المستخدم أو كلمة المرور غير صحيحة"
USERNAME_TOO_SHORT = "اسم المستخدم يجب أن يكون 3 أحرف على الأقل"
PASSWORD_TOO_SHORT = "كلمة المرور يجب أن تكون 6 أحرف على الأقل"
LOGOUT_SUCCESS = "تم تسجيل الخروج بنجاح"
USER_NOT_FOUND = "المستخدم غير موجود"

PROPERTY_NOT_FOUND = "العقار غير موجود"
PROPERTY_DELETED = "تم حذف العقار بنجاح"
PROPERTY_CODE_TAKEN = "رمز العقار مستخدم مسبقاً"
IMAGES_REQUIRED = "يجب إضافة صورة واحدة على الأقل"
FIELD_REQUIRED = "هذا الحقل مطلوب"
INVALID_VALUE = "القيمة المدخلة غير صالحة"

MESSAGE_SENT = "تم إرسال رسالتك بنجاح"
MESSAGE_NOT_FOUND = "الرسالة غير موجودة"
MESSAGE_MARKED_READ = "تم تحديث حالة الرسالة بنجاح"

TESTIMONIAL_SENT = "تم إرسال التقييم بنجاح، سيتم مراجعته قريباً"
TESTIMONIAL_NOT_FOUND = "التقييم غير موجود"
TESTIMONIAL_APPROVED = "تم اعتماد التقييم بنجاح"
RATING_OUT_OF_RANGE = "التقييم يجب أن يكون بين 1 و 5"

USERNAME_TAKEN = "اسم المستخدم مستخدم مسبقاً"
EMAIL_TAKEN = "البريد الإلكتروني مستخدم مسبقاً"

INTERNAL_ERROR = "حدث خطأ غير متوقع، يرجى المحاولة لاحقاً"
