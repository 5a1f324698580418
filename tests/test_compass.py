"""Tests for the compass permission state machine and heading stream."""

from __future__ import annotations

import pytest

from noorhub.compass import (
    PERMISSION_BUTTON_ID,
    CompassSession,
    InvalidTransition,
    OrientationEvent,
    OrientationSource,
    SensorState,
    compass_heading,
    permission_script,
)


def granted_session(bearing=267.7, **kwargs):
    source = OrientationSource()
    session = CompassSession(bearing, **kwargs)
    session.request_permission()
    session.grant(source)
    return session, source


def test_direct_heading_is_preferred():
    event = OrientationEvent(heading=90.0, alpha=10.0, absolute=True)
    assert compass_heading(event) == 90.0


def test_absolute_alpha_is_converted():
    assert compass_heading(OrientationEvent(alpha=90.0, absolute=True)) == 270.0
    assert compass_heading(OrientationEvent(alpha=0.0, absolute=True)) == 0.0


def test_relative_alpha_is_ignored():
    assert compass_heading(OrientationEvent(alpha=90.0, absolute=False)) is None
    assert compass_heading(OrientationEvent()) is None


def test_from_browser_payload():
    event = OrientationEvent.from_browser({"webkitCompassHeading": None, "alpha": 45.0, "absolute": True})
    assert event.heading is None
    assert compass_heading(event) == 315.0
    event = OrientationEvent.from_browser({"webkitCompassHeading": 12.5, "alpha": 45.0})
    assert compass_heading(event) == 12.5


def test_state_machine_happy_path():
    session, source = granted_session()
    assert session.state is SensorState.GRANTED
    assert session.streaming
    assert source.subscriber_count == 1


def test_permission_must_be_requested_first():
    session = CompassSession(100.0)
    with pytest.raises(InvalidTransition):
        session.grant(OrientationSource())
    with pytest.raises(InvalidTransition):
        session.deny()


def test_permission_requested_once():
    session = CompassSession(100.0)
    session.request_permission()
    with pytest.raises(InvalidTransition):
        session.request_permission()


def test_denied_session_never_evaluates_alignment():
    updates = []
    session = CompassSession(100.0, on_update=updates.append)
    session.request_permission()
    session.deny()
    assert session.state is SensorState.DENIED
    assert session.handle_event(OrientationEvent(heading=100.0)) is None
    assert session.heading is None
    assert updates == []
    with pytest.raises(InvalidTransition):
        session.grant(OrientationSource())


def test_every_sample_recomputes_alignment():
    updates = []
    session, source = granted_session(bearing=2.0, on_update=updates.append)

    source.emit(OrientationEvent(heading=358.0))
    assert session.aligned
    source.emit(OrientationEvent(heading=90.0))
    assert not session.aligned
    source.emit(OrientationEvent(alpha=358.0, absolute=True))
    assert session.heading == pytest.approx(2.0)
    assert session.aligned

    assert [u.aligned for u in updates] == [True, False, True]
    assert updates[1].needle_rotation == pytest.approx(272.0)


def test_unusable_samples_leave_state_untouched():
    updates = []
    session, source = granted_session(on_update=updates.append)
    source.emit(OrientationEvent(heading=267.0))
    source.emit(OrientationEvent(alpha=10.0, absolute=False))
    assert session.heading == 267.0
    assert len(updates) == 1


def test_no_recomputation_after_teardown():
    updates = []
    session, source = granted_session(on_update=updates.append)
    source.emit(OrientationEvent(heading=10.0))
    handler = session.handle_event

    session.close()
    source.emit(OrientationEvent(heading=267.7))
    # delivering straight to the detached handler does nothing either
    assert handler(OrientationEvent(heading=267.7)) is None

    assert source.subscriber_count == 0
    assert session.heading == 10.0
    assert not session.aligned
    assert len(updates) == 1


def test_close_is_idempotent():
    session, _ = granted_session()
    session.close()
    session.close()
    assert not session.streaming


def test_source_fans_out_and_unsubscribes():
    source = OrientationSource()
    seen_a, seen_b = [], []
    sub_a = source.subscribe(seen_a.append)
    source.subscribe(seen_b.append)
    source.emit(OrientationEvent(heading=1.0))
    sub_a.unsubscribe()
    source.emit(OrientationEvent(heading=2.0))
    assert len(seen_a) == 1
    assert len(seen_b) == 2


def test_permission_is_requested_inside_the_tap():
    script = permission_script("کمپاس فعال کریں")
    click = script.index("addEventListener('click'")
    assert script.index("Orientation.requestPermission()") > click
    assert '"کمپاس فعال کریں"' in script
    assert f'"{PERMISSION_BUTTON_ID}"' in script
    assert "LABEL" not in script
    assert "BUTTON_ID" not in script


def test_permission_label_is_escaped():
    script = permission_script('say "salam"</script>')
    assert '"say \\"salam\\"</script>"' in script
