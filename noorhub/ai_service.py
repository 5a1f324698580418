"""Client side of the AI backend: scholar chat, hadith search and daily content."""
import concurrent.futures
import json
import logging
from datetime import date
from urllib.parse import quote

import requests
from langdetect import DetectorFactory, detect
from langdetect.lang_detect_exception import LangDetectException
from openai import OpenAIError

from . import config, proxy
from .i18n import t

log = logging.getLogger(__name__)

# langdetect is randomized unless seeded
DetectorFactory.seed = 0

HADITH_SCHEMA = {
    "type": "array",
    "items": {
        "type": "object",
        "properties": {
            "text": {"type": "string"},
            "source": {"type": "string"},
            "narrator": {"type": "string"},
            "authenticity": {"type": "string"},
        },
        "required": ["text", "source", "narrator", "authenticity"],
    },
}

VERSE_SCHEMA = {
    "type": "object",
    "properties": {
        "text": {"type": "string"},
        "translation": {"type": "string"},
        "surah": {"type": "string"},
        "number": {"type": "number"},
    },
    "required": ["text", "translation", "surah", "number"],
}

ADHKAR_SCHEMA = {
    "type": "array",
    "items": {
        "type": "object",
        "properties": {
            "id": {"type": "number"},
            "arabic": {"type": "string"},
            "translation": {"type": "string"},
            "benefit": {"type": "string"},
        },
        "required": ["id", "arabic", "translation"],
    },
}

HADITH_SOURCES = ["all", "Sahih Bukhari", "Sahih Muslim", "Sunan Abi Dawud", "Sunan al-Tirmidhi"]
HADITH_AUTHENTICITIES = ["all", "Sahih", "Hasan", "Da'if"]

SHARE_PLATFORMS = ("wa", "tw", "fb")


class BackendError(Exception):
    pass


def _language_name(lang):
    return "Urdu" if lang == "ur" else "English"


def sanitize_json(text):
    """Parse JSON out of model output that may carry code fences or chatter"""
    if not text:
        return None
    cleaned = text.replace("```json", "").replace("```", "").strip()
    try:
        return json.loads(cleaned)
    except ValueError:
        pass
    pairs = [("[", "]"), ("{", "}")]
    # an object holding a list must not be cut down to the list
    if -1 < text.find("{") < text.find("[") or "[" not in text:
        pairs.reverse()
    for opener, closer in pairs:
        start = text.find(opener)
        end = text.rfind(closer)
        if start != -1 and end > start:
            try:
                return json.loads(text[start:end + 1])
            except ValueError:
                continue
    return None


def call_backend(action, payload, options):
    """Send one request to the AI backend and return its ``{text}`` body"""
    if not config.BACKEND_URL:
        if not config.OPENAI_API_KEY:
            raise BackendError("OPENAI_API_KEY is missing.")
        try:
            return {"text": proxy.generate(action, payload, options)}
        except (OpenAIError, ValueError) as e:
            log.error("API Call Error: %s", e)
            raise BackendError(str(e)) from e

    try:
        response = requests.post(
            config.BACKEND_URL,
            json={"action": action, "payload": payload, "config": options},
            timeout=config.REQUEST_TIMEOUT * 6,
        )
        data = response.json()
    except (requests.RequestException, ValueError) as e:
        log.error("API Call Error: %s", e)
        raise BackendError(str(e)) from e

    if not isinstance(data, dict):
        log.error("API Call Error: unexpected body %r (HTTP %s)", data, response.status_code)
        raise BackendError(f"Backend returned HTTP {response.status_code} with a non-object body")
    if not response.ok or "error" in data:
        log.error("API Call Error: %s", data.get("error"))
        raise BackendError(data.get("error") or "Backend call failed")
    return data


def detect_language(text, default="ur"):
    """Detect the language of the input text."""
    try:
        detected = detect(text)
    except LangDetectException:
        return default
    return detected if detected in ("ur", "en") else default


def get_scholar_response(query, lang="ur"):
    reply_lang = detect_language(query, default=lang)
    language = _language_name(reply_lang)
    style = "beautiful and precise Urdu" if reply_lang == "ur" else "clear and scholarly English"
    system_instruction = (
        "You are a world-class, highly knowledgeable, and compassionate Islamic Scholar (Mufti/Aalim). "
        "Your expertise covers Fiqh, Hadith, Seerah, and Quranic Tafseer. "
        f"Primary language is {language}. "
        "Provide deep, accurate, and evidence-based answers from the Quran and Sunnah. "
        "Be respectful and use a formal scholarly tone. "
        f"Response must be in {style}."
    )
    try:
        data = call_backend("scholar", query, {
            "systemInstruction": system_instruction,
            "temperature": 0.7,
        })
    except BackendError:
        return t("scholar_error", reply_lang)
    return data.get("text") or t("scholar_unavailable", reply_lang)


def search_hadith(topic, lang="ur", source_filter=None, authenticity_filter=None):
    """Ask the backend for five hadiths on a topic; raises BackendError on failure"""
    prompt = (
        f"Act as a Hadith Database. Provide a list of 5 reliable and distinct Hadiths related to: {topic}. "
        f"Provide text in {_language_name(lang)}. "
        "Ensure each Hadith has clear narrator, source (e.g., Bukhari, Muslim), and authenticity. "
        "Return ONLY a JSON array of objects."
    )
    if source_filter and source_filter != "all":
        prompt += f" The source must be primarily {source_filter}."
    if authenticity_filter and authenticity_filter != "all":
        prompt += f" The authenticity must be {authenticity_filter}."

    data = call_backend("hadith", prompt, {
        "responseMimeType": "application/json",
        "responseSchema": HADITH_SCHEMA,
    })
    parsed = sanitize_json(data.get("text"))
    if not isinstance(parsed, list):
        return []
    return [item for item in parsed if isinstance(item, dict)]


def get_daily_verse(lang="ur"):
    prompt = (
        "Provide one inspiring verse from the Quran in Arabic and "
        f"{_language_name(lang)} translation. Return as JSON."
    )
    try:
        data = call_backend("verse", prompt, {
            "responseMimeType": "application/json",
            "responseSchema": VERSE_SCHEMA,
        })
    except BackendError:
        return None
    parsed = sanitize_json(data.get("text"))
    return parsed if isinstance(parsed, dict) else None


def get_daily_adhkar(lang="ur", today=None):
    today = today or date.today()
    prompt = (
        f"Date: {today.strftime('%a %b %d %Y')}. "
        "Provide a list of exactly 10 morning or evening Azkar. "
        f"Arabic and {_language_name(lang)} translation. Return as JSON array."
    )
    try:
        data = call_backend("azkar", prompt, {
            "responseMimeType": "application/json",
            "responseSchema": ADHKAR_SCHEMA,
        })
    except BackendError:
        return []
    parsed = sanitize_json(data.get("text"))
    if not isinstance(parsed, list):
        return []
    return [item for item in parsed if isinstance(item, dict)]


def load_daily_content(lang="ur"):
    """Fetch the daily verse and adhkar in parallel"""
    with concurrent.futures.ThreadPoolExecutor(max_workers=2) as executor:
        verse_future = executor.submit(get_daily_verse, lang)
        adhkar_future = executor.submit(get_daily_adhkar, lang)
        return verse_future.result(), adhkar_future.result()


def share_text(hadith, lang="ur"):
    return (
        f"\"{hadith.get('text', '')}\"\n\n"
        f"{t('source', lang)}: {hadith.get('source', '')}\n"
        f"{t('narrator', lang)}: {hadith.get('narrator', '')}\n\n"
        f"Shared via Noor Islamic Hub\nRead more: {config.SHARE_LINK}"
    )


def share_url(platform, hadith, lang="ur"):
    text = quote(share_text(hadith, lang), safe="")
    if platform == "wa":
        return f"https://wa.me/?text={text}"
    if platform == "tw":
        return f"https://twitter.com/intent/tweet?text={text}"
    if platform == "fb":
        link = quote(config.SHARE_LINK, safe="")
        return f"https://www.facebook.com/sharer/sharer.php?u={link}&quote={text}"
    raise ValueError(f"unknown share platform: {platform!r}")
