import pytest

from coolingecu.dem import MAX_EVENTS, Dem, EventId, EventStatus


def test_all_events_start_passed():
    dem = Dem()
    assert len(dem.events) == MAX_EVENTS
    assert all(dem.status(event) is EventStatus.PASSED for event in EventId)


def test_set_event_failed_changes_only_that_event():
    dem = Dem()
    dem.set_event_status(EventId.NO_SENSOR_SIGNAL, EventStatus.FAILED)
    assert dem.status(EventId.NO_SENSOR_SIGNAL) is EventStatus.FAILED
    others = [e for e in EventId if e is not EventId.NO_SENSOR_SIGNAL]
    assert all(dem.status(e) is EventStatus.PASSED for e in others)


def test_plain_integers_are_accepted():
    dem = Dem()
    dem.set_event_status(4, 1)
    assert dem.status(EventId.FAN_CONTROL_MALFUNCTION) is EventStatus.FAILED
    dem.set_event_status(4, 0)
    assert dem.status(4) is EventStatus.PASSED


@pytest.mark.parametrize("event_id", [0, 8, 255])
def test_unknown_event_is_rejected(event_id):
    dem = Dem()
    with pytest.raises(KeyError):
        dem.set_event_status(event_id, EventStatus.FAILED)
    assert all(s is EventStatus.PASSED for s in dem.events.values())


def test_status_of_unknown_event():
    with pytest.raises(KeyError):
        Dem().status(99)


def test_invalid_status_value():
    dem = Dem()
    with pytest.raises(ValueError):
        dem.set_event_status(EventId.MEMORY_FAILURE, 7)
    assert dem.status(EventId.MEMORY_FAILURE) is EventStatus.PASSED