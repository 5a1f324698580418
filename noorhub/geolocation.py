"""Observer location: browser geolocation with fallback, place names and timezones."""
import logging
import time
from dataclasses import dataclass

import pytz
from geopy.exc import GeopyError
from geopy.geocoders import Nominatim
from timezonefinder import TimezoneFinder

from . import config
from .i18n import t
from .qibla import KAABA, GeoPoint

log = logging.getLogger(__name__)

FALLBACK_POINT = KAABA


@dataclass(frozen=True)
class ResolvedLocation:
    point: GeoPoint
    is_fallback: bool = False


@dataclass(frozen=True)
class PlaceName:
    city: str
    country: str = ""


class LocationRequest:
    """A one-shot geolocation request with a bounded wait.

    ``resolve`` is called with whatever the browser has reported so far; it
    returns None while the answer is still pending and the wait has not run
    out, and the fixed fallback point on error or timeout.
    """

    def __init__(self, started_at=None, timeout=config.GEOLOCATION_TIMEOUT_SECONDS):
        self.started_at = time.monotonic() if started_at is None else started_at
        self.timeout = timeout

    def remaining(self, now=None):
        """Seconds left before the fallback applies, never negative"""
        now = time.monotonic() if now is None else now
        return max(0.0, self.timeout - (now - self.started_at))

    def resolve(self, position, now=None):
        now = time.monotonic() if now is None else now
        if position:
            coords = position.get("coords")
            if coords:
                try:
                    return ResolvedLocation(GeoPoint(float(coords["latitude"]), float(coords["longitude"])))
                except (KeyError, TypeError, ValueError) as e:
                    log.warning("Unusable geolocation payload %r: %s", coords, e)
                    return ResolvedLocation(FALLBACK_POINT, is_fallback=True)
            if "error" in position:
                log.info("Geolocation unavailable: %s", position["error"])
                return ResolvedLocation(FALLBACK_POINT, is_fallback=True)
        if now - self.started_at >= self.timeout:
            log.info("Geolocation timed out after %ss, using fallback", self.timeout)
            return ResolvedLocation(FALLBACK_POINT, is_fallback=True)
        return None


def reverse_geocode(point, lang="ur", geolocator=None):
    """Look up a display name for a point, or None when the service fails"""
    geolocator = geolocator or Nominatim(user_agent=config.NOMINATIM_USER_AGENT)
    try:
        location = geolocator.reverse(
            (point.latitude, point.longitude),
            zoom=10,
            addressdetails=True,
            language=lang,
            timeout=config.REQUEST_TIMEOUT,
        )
    except GeopyError as e:
        log.error("Reverse geocoding failed: %s", e)
        return None

    if location is None:
        return None
    address = location.raw.get("address", {})
    city = (
        address.get("city")
        or address.get("town")
        or address.get("village")
        or address.get("state")
        or "Unknown"
    )
    return PlaceName(city=city, country=address.get("country", ""))


def location_label(resolved, place, lang="ur"):
    """Human readable label for the header"""
    if resolved is None:
        return t("detecting_location", lang)
    if resolved.is_fallback:
        return t("mecca", lang)
    if place is None:
        return t("your_location", lang)
    if place.country:
        return f"{place.city}, {place.country}"
    return place.city


def get_timezone(point):
    try:
        tf = TimezoneFinder()
        timezone_str = tf.timezone_at(lat=point.latitude, lng=point.longitude)
        if timezone_str:
            return pytz.timezone(timezone_str)
    except pytz.UnknownTimeZoneError as e:
        log.warning("Could not determine timezone: %s. Using UTC as fallback.", e)
    # Fallback to UTC if timezone cannot be determined
    return pytz.timezone("UTC")
