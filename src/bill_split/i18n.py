"""Output labels in the supported languages."""

LANGUAGE_STRINGS: dict[str, dict[str, str]] = {
    "en": {
        "title": "Bill Splitting",
        "person": "Person {n}",
        "name": "Name",
        "share": "Share",
        "extra": "Extra",
        "split_result": "Split Result",
        "total": "Total",
        "totals_match": "Shares add up to the total",
        "totals_mismatch": "Shares do not add up to the total",
        "enter_name": "Enter person's name",
        "people_list": "People List",
    },
    "ar": {
        "title": "تطبيق تقسيم الفاتورة",
        "person": "الشخص {n}",
        "name": "الاسم",
        "share": "الحصة",
        "extra": "إضافي",
        "split_result": "نتيجة التقسيم",
        "total": "المجموع",
        "totals_match": "مجموع الحصص يساوي الإجمالي",
        "totals_mismatch": "مجموع الحصص لا يساوي الإجمالي",
        "enter_name": "أدخل اسم الشخص",
        "people_list": "قائمة الأشخاص",
    },
    "tr": {
        "title": "Hesap Bölme",
        "person": "Kişi {n}",
        "name": "Ad",
        "share": "Pay",
        "extra": "Ek",
        "split_result": "Bölme Sonucu",
        "total": "Toplam",
        "totals_match": "Paylar toplamla eşleşiyor",
        "totals_mismatch": "Paylar toplamla eşleşmiyor",
        "enter_name": "Kişinin adını girin",
        "people_list": "Kişi Listesi",
    },
}


def get_strings(language: str) -> dict[str, str]:
    """Labels for ``language``, falling back to English."""
    return LANGUAGE_STRINGS.get(language, LANGUAGE_STRINGS["en"])


def display_name(name: str | None, index: int, language: str = "en") -> str:
    """The participant's name, or "Person N" (1-based) for unnamed participants."""
    if name:
        return name
    return get_strings(language)["person"].format(n=index + 1)
