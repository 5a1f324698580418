"""Live compass reconciliation for the Qibla finder.

A ``CompassSession`` walks an explicit permission state machine and, once
granted, subscribes to an ``OrientationSource``. Every usable orientation
event updates the heading and recomputes alignment synchronously; closing the
session detaches it so late events have no effect.
"""
import enum
import json
import logging
from dataclasses import dataclass
from typing import Optional

from .qibla import ALIGNMENT_TOLERANCE_DEGREES, is_aligned, needle_rotation, normalize_degrees

log = logging.getLogger(__name__)

PERMISSION_BUTTON_ID = "noorhub-compass-permission"

# Browser side. Scripts run in a component iframe and talk to the top page,
# which owns the sensor and the user's tap.
_PERMISSION_JS = """
new Promise((resolve) => {
  const host = window.parent;
  const Orientation = host.DeviceOrientationEvent;
  if (typeof Orientation === 'undefined') { resolve('unsupported'); return; }
  if (typeof Orientation.requestPermission !== 'function') { resolve('granted'); return; }
  const doc = host.document;
  const stale = doc.getElementById(BUTTON_ID);
  if (stale) stale.remove();
  const button = doc.createElement('button');
  button.id = BUTTON_ID;
  button.textContent = LABEL;
  button.style.cssText = 'position:fixed;bottom:24px;left:50%;transform:translateX(-50%);'
    + 'z-index:10000;padding:12px 24px;border:none;border-radius:24px;'
    + 'background:#047857;color:white;font-size:16px;';
  button.addEventListener('click', () => {
    // iOS only honours requestPermission inside the tap itself
    Orientation.requestPermission()
      .then((state) => resolve(state))
      .catch(() => resolve('denied'))
      .finally(() => button.remove());
  }, {once: true});
  doc.body.appendChild(button);
})
"""

ORIENTATION_SAMPLE_JS = """
new Promise((resolve) => {
  const host = window.parent;
  const handler = (e) => {
    host.removeEventListener('deviceorientationabsolute', handler, true);
    host.removeEventListener('deviceorientation', handler, true);
    resolve({webkitCompassHeading: e.webkitCompassHeading ?? null, alpha: e.alpha, absolute: !!e.absolute});
  };
  host.addEventListener('deviceorientationabsolute', handler, true);
  host.addEventListener('deviceorientation', handler, true);
  setTimeout(() => resolve(null), 2000);
})
"""


def permission_script(label):
    """Script resolving to the browser's permission answer for orientation events.

    Where the browser gates the sensor behind ``requestPermission`` (iOS
    Safari) the script shows a button on the page and asks from inside its
    click handler; elsewhere it resolves to ``'granted'`` at once.
    """
    return (
        _PERMISSION_JS
        .replace("BUTTON_ID", json.dumps(PERMISSION_BUTTON_ID))
        .replace("LABEL", json.dumps(label, ensure_ascii=False))
    )


class SensorState(enum.Enum):
    UNREQUESTED = "unrequested"
    PERMISSION_REQUESTED = "permission_requested"
    GRANTED = "granted"
    DENIED = "denied"


class InvalidTransition(RuntimeError):
    pass


@dataclass(frozen=True)
class OrientationEvent:
    """One sample from the device orientation sensor.

    ``heading`` is a direct compass reading (iOS ``webkitCompassHeading``).
    ``alpha`` is the raw rotation angle, meaningful as a heading only when
    ``absolute`` is set.
    """
    heading: Optional[float] = None
    alpha: Optional[float] = None
    absolute: bool = False

    @classmethod
    def from_browser(cls, payload):
        """Build an event from the dict the browser-side script reports"""
        return cls(
            heading=payload.get("webkitCompassHeading", payload.get("heading")),
            alpha=payload.get("alpha"),
            absolute=bool(payload.get("absolute", False)),
        )


def compass_heading(event):
    """Heading in [0, 360) for an event, or None when it carries no usable reading"""
    if event.heading is not None:
        return normalize_degrees(event.heading)
    if event.absolute and event.alpha is not None:
        return normalize_degrees(360.0 - event.alpha)
    return None


@dataclass(frozen=True)
class CompassReading:
    heading: float
    aligned: bool
    needle_rotation: float


class Subscription:
    def __init__(self, source, callback):
        self._source = source
        self._callback = callback
        self.active = True

    def unsubscribe(self):
        if self.active:
            self.active = False
            self._source._remove(self)


class OrientationSource:
    """Fan-out hub for orientation events"""

    def __init__(self):
        self._subscriptions = []

    def subscribe(self, callback):
        subscription = Subscription(self, callback)
        self._subscriptions.append(subscription)
        return subscription

    def _remove(self, subscription):
        if subscription in self._subscriptions:
            self._subscriptions.remove(subscription)

    @property
    def subscriber_count(self):
        return len(self._subscriptions)

    def emit(self, event):
        for subscription in list(self._subscriptions):
            if subscription.active:
                subscription._callback(event)


class CompassSession:
    def __init__(self, bearing_degrees, tolerance_degrees=ALIGNMENT_TOLERANCE_DEGREES, on_update=None):
        self.bearing_degrees = bearing_degrees
        self.tolerance_degrees = tolerance_degrees
        self.on_update = on_update
        self.state = SensorState.UNREQUESTED
        self.heading = None
        self.aligned = False
        self._subscription = None

    def _transition(self, expected, new_state):
        if self.state is not expected:
            raise InvalidTransition(f"cannot move from {self.state.value} to {new_state.value}")
        log.debug("compass sensor %s -> %s", self.state.value, new_state.value)
        self.state = new_state

    def request_permission(self):
        """Record the user's explicit request to enable the compass"""
        self._transition(SensorState.UNREQUESTED, SensorState.PERMISSION_REQUESTED)

    def grant(self, source):
        self._transition(SensorState.PERMISSION_REQUESTED, SensorState.GRANTED)
        self._subscription = source.subscribe(self.handle_event)

    def deny(self):
        """Permission refused or sensor unsupported; static bearing remains usable"""
        self._transition(SensorState.PERMISSION_REQUESTED, SensorState.DENIED)
        log.info("compass permission denied, live alignment disabled")

    @property
    def streaming(self):
        return self._subscription is not None and self._subscription.active

    def handle_event(self, event):
        if not self.streaming:
            return None
        heading = compass_heading(event)
        if heading is None:
            return None
        self.heading = heading
        self.aligned = is_aligned(self.bearing_degrees, heading, self.tolerance_degrees)
        reading = CompassReading(
            heading=heading,
            aligned=self.aligned,
            needle_rotation=needle_rotation(self.bearing_degrees, heading),
        )
        if self.on_update is not None:
            self.on_update(reading)
        return reading

    def close(self):
        if self._subscription is not None:
            self._subscription.unsubscribe()
            self._subscription = None
