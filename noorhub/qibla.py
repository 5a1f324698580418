"""Qibla bearing, great-circle distance and compass alignment.

All functions here are pure: they read their arguments, return a fresh value
and never touch I/O. Angles are in degrees, clockwise from north.
"""
import math
from dataclasses import dataclass

EARTH_RADIUS_KM = 6371.0
ALIGNMENT_TOLERANCE_DEGREES = 5.0


@dataclass(frozen=True)
class GeoPoint:
    """A latitude/longitude pair in degrees"""
    latitude: float
    longitude: float

    def __post_init__(self):
        if not -90.0 <= self.latitude <= 90.0:
            raise ValueError(f"latitude out of range [-90, 90]: {self.latitude!r}")
        if not -180.0 <= self.longitude <= 180.0:
            raise ValueError(f"longitude out of range [-180, 180]: {self.longitude!r}")


# The Kaaba, Makkah
KAABA = GeoPoint(21.4225, 39.8262)


@dataclass(frozen=True)
class BearingResult:
    bearing_degrees: float
    distance_km: float

    @property
    def display_distance_km(self):
        return int(round(self.distance_km))


def normalize_degrees(angle):
    """Reduce an angle into [0, 360)"""
    angle = (angle + 360.0) % 360.0
    # float rounding can land exactly on 360 for tiny negative inputs
    if angle >= 360.0:
        angle = 0.0
    return angle


def compute_bearing_and_distance(observer, target=KAABA):
    """Initial great-circle bearing and haversine distance from observer to target"""
    phi_o = math.radians(observer.latitude)
    phi_t = math.radians(target.latitude)
    d_phi = phi_t - phi_o
    d_lambda = math.radians(target.longitude - observer.longitude)

    a = (
        math.sin(d_phi / 2) ** 2
        + math.cos(phi_o) * math.cos(phi_t) * math.sin(d_lambda / 2) ** 2
    )
    # clamp against rounding just above 1 for antipodal points
    a = min(1.0, a)
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    distance_km = EARTH_RADIUS_KM * c

    if observer == target or distance_km == 0.0:
        # azimuth is 0/0 at the target itself; north by convention
        return BearingResult(0.0, 0.0)

    y = math.sin(d_lambda) * math.cos(phi_t)
    x = (
        math.cos(phi_o) * math.sin(phi_t)
        - math.sin(phi_o) * math.cos(phi_t) * math.cos(d_lambda)
    )
    bearing = normalize_degrees(math.degrees(math.atan2(y, x)))
    return BearingResult(bearing, distance_km)


def circular_distance(a, b):
    """Smallest angle between two directions, in [0, 180]"""
    diff = abs(a - b) % 360.0
    return min(diff, 360.0 - diff)


def is_aligned(bearing_degrees, compass_heading_degrees, tolerance_degrees=ALIGNMENT_TOLERANCE_DEGREES):
    """True when the device faces the bearing within the tolerance"""
    return circular_distance(bearing_degrees, compass_heading_degrees) < tolerance_degrees


def needle_rotation(bearing_degrees, compass_heading_degrees):
    """Rotation of the Kaaba marker on a compass dial that turns with the device"""
    return normalize_degrees(bearing_degrees - compass_heading_degrees)
