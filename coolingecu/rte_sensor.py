"""Runtime-environment ports of the engine temperature sensor component."""

from __future__ import annotations

from typing import Protocol

_UINT16_MAX = 0xFFFF


class _Sensors(Protocol):
    def read_air_temperature(self) -> int: ...

    def read_engine_temperature(self) -> int: ...


def _check_uint16(value: int | None, name: str) -> int:
    if value is None:
        raise ValueError(f"no {name} given")
    if not 0 <= value <= _UINT16_MAX:
        raise ValueError(f"{name} {value} does not fit in 16 bits")
    return int(value)


class SensorPorts:
    """Reads the hardware sensors and holds the last published temperatures."""

    def __init__(self, sensors: _Sensors) -> None:
        self._sensors = sensors
        self.engine_temperature = 0
        self.air_temperature = 0

    def read_engine_temperature_sensor(self) -> int:
        """Read the engine temperature from the hardware abstraction."""
        return self._sensors.read_engine_temperature()

    def read_air_temperature_sensor(self) -> int:
        """Read the air temperature from the hardware abstraction."""
        return self._sensors.read_air_temperature()

    def write_engine_temperature(self, value: int | None) -> None:
        """Publish the engine temperature to other components."""
        self.engine_temperature = _check_uint16(value, "engine temperature")

    def write_air_temperature(self, value: int | None) -> None:
        """Publish the air temperature to other components."""
        self.air_temperature = _check_uint16(value, "air temperature")