"""Urdu and English UI strings."""

LANGUAGES = ("ur", "en")
DEFAULT_LANGUAGE = "ur"

PRAYER_NAMES = {
    "ur": {
        "Fajr": "فجر",
        "Sunrise": "طلوعِ آفتاب",
        "Dhuhr": "ظہر",
        "Asr": "عصر",
        "Maghrib": "مغرب",
        "Isha": "عشاء",
    },
    "en": {
        "Fajr": "Fajr",
        "Sunrise": "Sunrise",
        "Dhuhr": "Dhuhr",
        "Asr": "Asr",
        "Maghrib": "Maghrib",
        "Isha": "Isha",
    },
}

STRINGS = {
    "app_title": {"ur": "نور اسلامک ہب", "en": "Noor Islamic Hub"},
    "language": {"ur": "زبان", "en": "Language"},
    "nav_dashboard": {"ur": "ڈیش بورڈ", "en": "Dashboard"},
    "nav_quran": {"ur": "قرآن مجید", "en": "Quran"},
    "nav_hadith": {"ur": "احادیث", "en": "Hadith"},
    "nav_scholar": {"ur": "اے آئی عالم", "en": "AI Scholar"},
    "nav_zakat": {"ur": "زکوٰۃ", "en": "Zakat"},
    "nav_qibla": {"ur": "قبلہ", "en": "Qibla"},
    "nav_tasbeeh": {"ur": "تسبیح", "en": "Tasbeeh"},
    "detecting_location": {"ur": "لوکیشن تلاش کی جا رہی ہے...", "en": "Detecting location..."},
    "your_location": {"ur": "آپ کا مقام", "en": "Your Location"},
    "mecca": {"ur": "مکہ مکرمہ", "en": "Mecca"},
    "prayer_times": {"ur": "نماز کے اوقات", "en": "Prayer Times"},
    "prayer_times_failed": {
        "ur": "نماز کے اوقات لوڈ نہیں ہو سکے۔",
        "en": "Could not fetch prayer times.",
    },
    "current": {"ur": "موجودہ", "en": "Current"},
    "next": {"ur": "اگلی", "en": "Next"},
    "minutes_left": {"ur": "منٹ باقی", "en": "minutes left"},
    "verse_of_day": {"ur": "آج کی آیت", "en": "Verse of the Day"},
    "daily_adhkar": {"ur": "روزانہ کے اذکار", "en": "Daily Adhkar"},
    "daily_failed": {"ur": "روزانہ کا مواد دستیاب نہیں۔", "en": "Daily content is unavailable."},
    "completed": {"ur": "مکمل", "en": "Completed"},
    "search_surah": {"ur": "سورت تلاش کریں", "en": "Search surah"},
    "surah": {"ur": "سورت", "en": "Surah"},
    "juz": {"ur": "پارہ", "en": "Para (Juz)"},
    "verses": {"ur": "آیات", "en": "verses"},
    "bookmarks": {"ur": "بک مارکس", "en": "Bookmarks"},
    "bookmark": {"ur": "بک مارک", "en": "Bookmark"},
    "listen_surah": {"ur": "مکمل سورت سنیں", "en": "Listen to full surah"},
    "verses_failed": {"ur": "معلومات لوڈ کرنے میں دشواری پیش آئی۔", "en": "Failed to load verses."},
    "juz_failed": {"ur": "پارہ لوڈ کرنے میں دشواری پیش آئی۔", "en": "Failed to load Para (Juz)."},
    "retry": {"ur": "دوبارہ کوشش کریں", "en": "Retry"},
    "hadith_search": {"ur": "حدیث تلاش کریں", "en": "Search Hadith"},
    "hadith_topic": {"ur": "موضوع", "en": "Topic"},
    "all_books": {"ur": "تمام کتب", "en": "All Books"},
    "all_status": {"ur": "تمام درجات", "en": "All Status"},
    "source": {"ur": "ماخذ", "en": "Source"},
    "narrator": {"ur": "راوی", "en": "Narrator"},
    "authenticity": {"ur": "درجہ", "en": "Authenticity"},
    "hadith_failed": {
        "ur": "تلاش کے دوران دشواری پیش آئی۔ براہ کرم اپنا انٹرنیٹ چیک کریں اور دوبارہ کوشش کریں۔",
        "en": "Hadith search failed. Please check your internet connection and try again.",
    },
    "share": {"ur": "شیئر کریں", "en": "Share"},
    "ask_scholar": {"ur": "اپنا سوال لکھیں...", "en": "Ask your question..."},
    "scholar_greeting": {
        "ur": "السلام علیکم! فقہ، حدیث، سیرت یا تفسیر کے بارے میں پوچھیں۔",
        "en": "Assalamu alaikum! Ask me about Fiqh, Hadith, Seerah or Tafseer.",
    },
    "scholar_unavailable": {
        "ur": "معذرت، میں ابھی جواب دینے سے قاصر ہوں۔",
        "en": "I am sorry, I am unable to respond at the moment.",
    },
    "scholar_error": {
        "ur": "اے پی آئی کلید (API Key) کا مسئلہ یا سروس میں عارضی دشواری۔",
        "en": "API Key issue or service temporarily unavailable.",
    },
    "clear_conversation": {"ur": "گفتگو صاف کریں", "en": "Clear Conversation"},
    "zakat_title": {"ur": "زکوٰۃ کیلکولیٹر (PKR)", "en": "Zakat Calculator (PKR)"},
    "cash": {"ur": "نقد رقم", "en": "Cash"},
    "gold": {"ur": "سونا", "en": "Gold"},
    "silver": {"ur": "چاندی", "en": "Silver"},
    "stocks": {"ur": "حصص", "en": "Stocks"},
    "business": {"ur": "کاروباری مال", "en": "Business Assets"},
    "debts": {"ur": "قرض", "en": "Debts"},
    "net_wealth": {"ur": "خالص دولت", "en": "Net Wealth"},
    "zakat_due": {"ur": "واجب الادا زکوٰۃ", "en": "Zakat Due"},
    "zakat_obligatory": {
        "ur": "آپ پر زکوٰۃ فرض ہے۔ نصاب کی حد {nisab} روپے ہے۔",
        "en": "Zakat is obligatory. Nisab threshold is Rs. {nisab}.",
    },
    "below_nisab": {
        "ur": "آپ کی دولت نصاب ({nisab} روپے) سے کم ہے۔",
        "en": "Below Nisab threshold (Rs. {nisab}).",
    },
    "qibla_title": {"ur": "پروفیشنل قبلہ فائنڈر", "en": "Professional Qibla Finder"},
    "qibla_direction": {"ur": "قبلہ کی سمت", "en": "Qibla direction"},
    "distance": {"ur": "فاصلہ", "en": "Distance"},
    "km_away": {"ur": "کلومیٹر فاصلہ", "en": "km away"},
    "calculating": {"ur": "حساب لگایا جا رہا ہے...", "en": "Calculating..."},
    "enable_compass": {"ur": "کمپاس فعال کریں", "en": "Enable Compass Sensors"},
    "compass_denied": {
        "ur": "کمپاس کی اجازت نہیں ملی۔ قبلہ کی سمت اوپر دی گئی ڈگری سے معلوم کریں۔",
        "en": "Compass access was not granted. Use the bearing shown above.",
    },
    "compass_waiting": {"ur": "کمپاس کی اجازت کا انتظار...", "en": "Waiting for compass permission..."},
    "aligned": {"ur": "آپ بالکل درست سمت میں ہیں", "en": "You are facing the Qibla"},
    "not_aligned": {"ur": "فون کو گھمائیں", "en": "Turn your device"},
    "latitude": {"ur": "عرض بلد", "en": "Latitude"},
    "longitude": {"ur": "طول بلد", "en": "Longitude"},
    "heading": {"ur": "موجودہ رخ", "en": "Current heading"},
    "tasbeeh_title": {"ur": "ڈیجیٹل تسبیح", "en": "Digital Tasbeeh"},
    "count": {"ur": "تعداد", "en": "Count"},
    "rounds": {"ur": "مکمل چکر", "en": "Rounds completed"},
    "set_target": {"ur": "ہدف مقرر کریں", "en": "Set Target"},
    "reset": {"ur": "ری سیٹ", "en": "Reset"},
    "history": {"ur": "تاریخ", "en": "History"},
    "tap": {"ur": "ذکر کریں", "en": "Tap"},
}


def t(key, lang=DEFAULT_LANGUAGE, **kwargs):
    """Translate a UI string key, falling back to English and then to the key"""
    entry = STRINGS.get(key)
    if entry is None:
        return key
    text = entry.get(lang) or entry.get("en") or key
    if kwargs:
        text = text.format(**kwargs)
    return text


def prayer_name(prayer, lang=DEFAULT_LANGUAGE):
    return PRAYER_NAMES.get(lang, PRAYER_NAMES["en"]).get(prayer, prayer)
