"""Runtime-environment ports for calibration data, error storage and watchdog."""

from __future__ import annotations

from dataclasses import dataclass

from coolingecu.nvm import NVM_E_PARAM_BLOCK_ID, Nvm
from coolingecu.wdg import Watchdog, WatchdogManager, WdgStatus

_UINT16_MAX = 0xFFFF


def _check_uint16(value: int | None, name: str) -> int:
    if value is None:
        raise ValueError(f"no {name} given")
    if not 0 <= value <= _UINT16_MAX:
        raise ValueError(f"{name} {value} does not fit in 16 bits")
    return int(value)


@dataclass
class ParameterPorts:
    """Calibration thresholds for engine and air temperature."""

    engine: int = 0
    air: int = 0

    def write_calibration_data(self, engine: int | None, air: int | None) -> None:
        """Store both calibration values; nothing changes if either is invalid."""
        checked_engine = _check_uint16(engine, "engine calibration")
        checked_air = _check_uint16(air, "air calibration")
        self.engine = checked_engine
        self.air = checked_air

    def read_calibration_data(self) -> tuple[int, int]:
        """Return the engine and air calibration values."""
        return self.engine, self.air


class NvBlockPorts:
    """Holds the latest error code and forwards it to non-volatile memory."""

    def __init__(self, nvm: Nvm) -> None:
        self._nvm = nvm
        self.stored_error_code = 0

    def store_error(self, code: int) -> None:
        """Remember ``code`` as the latest error."""
        self.stored_error_code = _check_uint16(code, "error code")

    def read_error_data(self) -> int:
        """Return the latest error code."""
        return self.stored_error_code

    def store_error_to_nvm(self, code: int | None) -> None:
        """Write ``code`` to the parameter block of non-volatile memory."""
        if code is None:
            raise ValueError("no error code given")
        self._nvm.write_block(NVM_E_PARAM_BLOCK_ID, code)


class WatchdogPorts:
    """Gives components access to the watchdog manager and driver."""

    def __init__(self, manager: WatchdogManager, watchdog: Watchdog) -> None:
        self._manager = manager
        self._watchdog = watchdog

    def trigger_watchdog(self) -> WdgStatus:
        """Return the system status reported by the watchdog manager."""
        return self._manager.check_status()

    def set_mode(self, mode: int) -> None:
        """Change the watchdog mode."""
        self._watchdog.set_mode(mode)