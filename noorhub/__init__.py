"""
Noor Hub - Urdu/English Islamic companion.

Prayer times, Quran reader, Hadith search, an AI scholar, Zakat calculator,
Qibla compass and a digital Tasbeeh, served as a Streamlit app.

Usage:
    from noorhub.qibla import GeoPoint, compute_bearing_and_distance

    result = compute_bearing_and_distance(GeoPoint(24.8607, 67.0011))
    print(result.bearing_degrees, result.display_distance_km)
"""

from .qibla import KAABA, BearingResult, GeoPoint, compute_bearing_and_distance, is_aligned
from .compass import CompassSession, OrientationEvent, OrientationSource, SensorState

__version__ = "1.0.0"
__all__ = [
    "KAABA",
    "BearingResult",
    "GeoPoint",
    "compute_bearing_and_distance",
    "is_aligned",
    "CompassSession",
    "OrientationEvent",
    "OrientationSource",
    "SensorState",
]
