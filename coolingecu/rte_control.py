"""Runtime-environment ports of the engine temperature control component."""

from __future__ import annotations

from typing import Protocol

from coolingecu.com import CombinedSignal

SPEED_SIGNAL_ID = 1

_UINT8_MAX = 0xFF
_UINT16_MAX = 0xFFFF


class _SensorPorts(Protocol):
    engine_temperature: int
    air_temperature: int


class _ParameterPorts(Protocol):
    def read_calibration_data(self) -> tuple[int, int]: ...


class _NvBlockPorts(Protocol):
    def store_error(self, code: int) -> None: ...


class _Dem(Protocol):
    def set_event_status(self, event_id: int, event_status: int) -> None: ...


class _Com(Protocol):
    def send_signal(self, signal_id: int, data: CombinedSignal | None) -> None: ...


def _check_range(value: int | None, name: str, limit: int) -> int:
    if value is None:
        raise ValueError(f"no {name} given")
    if not 0 <= value <= limit:
        raise ValueError(f"{name} {value} is out of range 0..{limit}")
    return int(value)


class ControlPorts:
    """Connects the temperature control component to sensors, services and COM."""

    def __init__(
        self,
        sensor_ports: _SensorPorts,
        parameter_ports: _ParameterPorts,
        nvblock_ports: _NvBlockPorts,
        dem: _Dem,
        com: _Com,
    ) -> None:
        self._sensor_ports = sensor_ports
        self._parameter_ports = parameter_ports
        self._nvblock_ports = nvblock_ports
        self._dem = dem
        self._com = com
        self.fan_speed = 0
        self.pump_speed = 0
        self.warning_light = 0

    def read_engine_temperature(self) -> int:
        """Return the engine temperature last published by the sensor component."""
        return self._sensor_ports.engine_temperature

    def read_air_temperature(self) -> int:
        """Return the air temperature last published by the sensor component."""
        return self._sensor_ports.air_temperature

    def write_fan_speed(self, value: int | None) -> None:
        """Publish the cooling fan speed."""
        self.fan_speed = _check_range(value, "fan speed", _UINT16_MAX)

    def write_pump_speed(self, value: int | None) -> None:
        """Publish the water pump speed."""
        self.pump_speed = _check_range(value, "pump speed", _UINT16_MAX)

    def write_warning_light(self, value: int | None) -> None:
        """Publish the temperature warning status."""
        self.warning_light = _check_range(value, "warning status", _UINT8_MAX)

    def store_error(self, code: int) -> None:
        """Hand an error code to the non-volatile block component."""
        self._nvblock_ports.store_error(code)

    def read_calibration_data(self) -> tuple[int, int]:
        """Return the engine and air calibration values."""
        return self._parameter_ports.read_calibration_data()

    def report_to_dem(self, event_id: int, event_status: int) -> bool:
        """Report an event status; return False if the event is unknown."""
        try:
            self._dem.set_event_status(event_id, event_status)
        except KeyError:
            return False
        return True

    def read_fan_speed(self) -> int:
        """Return the published fan speed."""
        return self.fan_speed

    def read_pump_speed(self) -> int:
        """Return the published pump speed."""
        return self.pump_speed

    def read_warning_light(self) -> int:
        """Return the published warning status."""
        return self.warning_light

    def send_signal_speed(self) -> CombinedSignal:
        """Send fan speed, pump speed and warning status as one signal."""
        signal = CombinedSignal(
            fan_speed=self.read_fan_speed(),
            pump_speed=self.read_pump_speed(),
            warning_status=self.read_warning_light(),
        )
        self._com.send_signal(SPEED_SIGNAL_ID, signal)
        return signal