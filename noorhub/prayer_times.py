"""Daily prayer times from the Aladhan API."""
import logging

from . import config
from .helpers import cached, fetch_json, retry_request

log = logging.getLogger(__name__)

PRAYER_ORDER = ["Fajr", "Sunrise", "Dhuhr", "Asr", "Maghrib", "Isha"]


def _clean_time(value):
    # Aladhan may append a zone, e.g. "05:12 (PKT)"
    return str(value).strip().split(" ")[0]


@retry_request
def _request_timings(lat, lon, method):
    return fetch_json(config.PRAYER_API_URL, params={
        "latitude": lat,
        "longitude": lon,
        "method": method,
    })


@cached(21600)  # Cache for 6 hours
def get_timings(lat, lon, method=config.PRAYER_METHOD):
    """Get today's prayer times for a coordinate, or None when unavailable"""
    data = _request_timings(lat, lon, method)
    if not data or data.get("code") != 200:
        return None
    timings = (data.get("data") or {}).get("timings")
    if not timings:
        log.warning("Prayer API response without timings: %r", data)
        return None
    try:
        return {prayer: _clean_time(timings[prayer]) for prayer in PRAYER_ORDER}
    except KeyError as e:
        log.warning("Prayer API response missing %s", e)
        return None


def to_minutes(hhmm):
    hours, minutes = hhmm.split(":")[:2]
    return int(hours) * 60 + int(minutes)


def current_and_next_prayer(timings, now):
    """Return (current, next) prayer names for a local datetime.

    Before Fajr the current prayer is the previous night's Isha; after Isha
    the next one is the following day's Fajr.
    """
    current_minutes = now.hour * 60 + now.minute
    prayer_minutes = {prayer: to_minutes(timings[prayer]) for prayer in PRAYER_ORDER}

    for i, prayer in enumerate(PRAYER_ORDER):
        if current_minutes < prayer_minutes[prayer]:
            if i == 0:
                return "Isha", prayer
            return PRAYER_ORDER[i - 1], prayer
    return "Isha", "Fajr"


def minutes_until(timings, prayer, now):
    """Minutes from now until the next occurrence of a prayer, wrapping past midnight"""
    current_minutes = now.hour * 60 + now.minute
    delta = to_minutes(timings[prayer]) - current_minutes
    if delta < 0:
        delta += 24 * 60
    return delta
