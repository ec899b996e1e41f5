"""Watchdog driver, its interface layer and the watchdog manager."""

from __future__ import annotations

import enum

WDG_TIMEOUT_FAST = 50
WDG_TIMEOUT_SLOW = 200


class WdgMode(enum.IntEnum):
    OFF = 0
    SLOW = 1
    FAST = 2


class WdgStatus(enum.IntEnum):
    OK = 0
    WARNING = 1
    ERROR = 2


class Watchdog:
    """Simulated watchdog that counts checks and resets itself on timeout."""

    def __init__(self) -> None:
        self.counter = 0
        self.timeout = WDG_TIMEOUT_SLOW
        self.mode = WdgMode.SLOW
        self.resets = 0

    def init(self) -> None:
        """Restart the counter in slow mode."""
        self.counter = 0
        self.mode = WdgMode.SLOW
        self.timeout = WDG_TIMEOUT_SLOW

    def trigger(self) -> None:
        """Service the watchdog, restarting its counter."""
        self.counter = 0

    def set_mode(self, mode: int) -> None:
        """Switch mode; off mode keeps the current timeout."""
        self.mode = WdgMode(mode)
        if self.mode is WdgMode.SLOW:
            self.timeout = WDG_TIMEOUT_SLOW
        elif self.mode is WdgMode.FAST:
            self.timeout = WDG_TIMEOUT_FAST

    def check_timeout(self) -> bool:
        """Count one cycle; return True if the watchdog expired and reset."""
        self.counter += 1
        if self.counter > self.timeout:
            self.counter = 0
            self.resets += 1
            return True
        return False


class WatchdogManager:
    """Supervises system health and services the watchdog."""

    def __init__(self, watchdog: Watchdog) -> None:
        self._watchdog = watchdog
        self.simulate_error = False
        self.system_healthy = True

    def init(self) -> None:
        """Initialise the underlying watchdog."""
        self._watchdog.init()

    def check_status(self) -> WdgStatus:
        """Report an error while a fault is being simulated."""
        if self.simulate_error:
            return WdgStatus.ERROR
        return WdgStatus.OK

    def main_function(self) -> None:
        """Service the watchdog if healthy, then count one cycle."""
        if self.system_healthy:
            self._watchdog.trigger()
        self._watchdog.check_timeout()