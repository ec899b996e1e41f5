"""Diagnostic event manager: keeps the pass/fail status of known events."""

from __future__ import annotations

import enum

MAX_EVENTS = 7


class EventId(enum.IntEnum):
    SENSOR_CIRCUIT_MALFUNCTION = 1
    UNSTABLE_SENSOR_SIGNAL = 2
    NO_SENSOR_SIGNAL = 3
    FAN_CONTROL_MALFUNCTION = 4
    PUMP_CONTROL_MALFUNCTION = 5
    SENSOR_COMMUNICATION_LOST = 6
    MEMORY_FAILURE = 7


class EventStatus(enum.IntEnum):
    PASSED = 0x00
    FAILED = 0x01


class Dem:
    """Status table of every diagnostic event, all passed at start."""

    def __init__(self) -> None:
        self.events: dict[EventId, EventStatus] = {
            event: EventStatus.PASSED for event in EventId
        }

    @staticmethod
    def _lookup(event_id: int) -> EventId:
        try:
            return EventId(event_id)
        except ValueError:
            raise KeyError(f"unknown event id {event_id}") from None

    def set_event_status(self, event_id: int, event_status: int) -> None:
        """Set the status of a known event; unknown ids raise KeyError."""
        event = self._lookup(event_id)
        self.events[event] = EventStatus(event_status)

    def status(self, event_id: int) -> EventStatus:
        """Return the current status of a known event."""
        return self.events[self._lookup(event_id)]