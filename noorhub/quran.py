"""Quran text and recitation audio from alquran.cloud and the Islamic Network CDN."""
import concurrent.futures
import logging
from dataclasses import dataclass
from typing import Optional

import requests

from . import config
from .helpers import cached, fetch_json
from .surahs import SURAHS, SURAHS_BY_ID

log = logging.getLogger(__name__)

ARABIC_EDITION = "quran-uthmani"
TRANSLATION_EDITIONS = {
    "ur": "ur.jalandhry",
    "en": "en.sahih",
}
MISSING_TRANSLATION = "Translation not available."
JUZ_COUNT = 30


class QuranServiceError(Exception):
    pass


@dataclass
class Verse:
    number: int
    global_number: int
    text: str
    translation: str
    audio: str
    surah_name: Optional[str] = None


def verse_audio_url(global_number):
    """Per-verse recitation, keyed by the verse's index across the whole Quran"""
    return f"{config.QURAN_AUDIO_URL}/{global_number}.mp3"


def surah_audio_url(surah_id):
    return f"{config.QURAN_SURAH_AUDIO_URL}/{surah_id}.mp3"


def search_surahs(query):
    """Filter the surah list by number, transliterated or English name"""
    query = (query or "").strip().lower()
    if not query:
        return list(SURAHS)
    return [
        surah for surah in SURAHS
        if query == str(surah.id)
        or query in surah.name.lower()
        or query in surah.english.lower()
    ]


def _fetch_pair(section, lang):
    """Fetch Arabic text and translation for a section in parallel"""
    edition = TRANSLATION_EDITIONS.get(lang, TRANSLATION_EDITIONS["ur"])
    urls = [
        f"{config.QURAN_API_URL}/{section}/{ARABIC_EDITION}",
        f"{config.QURAN_API_URL}/{section}/{edition}",
    ]
    with concurrent.futures.ThreadPoolExecutor(max_workers=2) as executor:
        futures = [executor.submit(fetch_json, url) for url in urls]
        try:
            arabic, translation = [future.result() for future in futures]
        except (requests.RequestException, ValueError) as e:
            raise QuranServiceError(f"Failed to fetch {section}: {e}") from e

    if not isinstance(arabic, dict) or not isinstance(translation, dict):
        raise QuranServiceError("Invalid API Response")
    if arabic.get("code") != 200 or translation.get("code") != 200:
        raise QuranServiceError("Invalid API Response")
    arabic_data = arabic.get("data")
    arabic_ayahs = arabic_data.get("ayahs") if isinstance(arabic_data, dict) else None
    if not isinstance(arabic_ayahs, list) or not arabic_ayahs:
        raise QuranServiceError("Invalid API Response")
    translation_data = translation.get("data")
    translated_ayahs = translation_data.get("ayahs") if isinstance(translation_data, dict) else None
    if not isinstance(translated_ayahs, list):
        translated_ayahs = []
    return arabic_ayahs, translated_ayahs


def _combine(arabic_ayahs, translated_ayahs, with_surah_name=False):
    verses = []
    try:
        for index, ayah in enumerate(arabic_ayahs):
            translated = translated_ayahs[index] if index < len(translated_ayahs) else {}
            surah_name = None
            if with_surah_name:
                surah_name = (ayah.get("surah") or {}).get("name") or "Unknown Surah"
            verses.append(Verse(
                number=ayah["numberInSurah"],
                global_number=ayah["number"],
                text=ayah["text"],
                translation=translated.get("text") or MISSING_TRANSLATION,
                audio=verse_audio_url(ayah["number"]),
                surah_name=surah_name,
            ))
    except (KeyError, TypeError, AttributeError) as e:
        log.error("Malformed ayah in API response: %r", e)
        raise QuranServiceError("Invalid API Response") from e
    return verses


@cached(604800)  # Cache for 1 week (Quran content doesn't change)
def fetch_surah(surah_id, lang="ur"):
    if surah_id not in SURAHS_BY_ID:
        raise ValueError(f"surah must be between 1 and {len(SURAHS)}: {surah_id!r}")
    arabic_ayahs, translated_ayahs = _fetch_pair(f"surah/{surah_id}", lang)
    return _combine(arabic_ayahs, translated_ayahs)


@cached(604800)
def fetch_juz(juz, lang="ur"):
    if not 1 <= juz <= JUZ_COUNT:
        raise ValueError(f"juz must be between 1 and {JUZ_COUNT}: {juz!r}")
    arabic_ayahs, translated_ayahs = _fetch_pair(f"juz/{juz}", lang)
    return _combine(arabic_ayahs, translated_ayahs, with_surah_name=True)
