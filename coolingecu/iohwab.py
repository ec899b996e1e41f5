"""I/O hardware abstraction for the air and engine temperature sensors."""

from __future__ import annotations

from typing import Protocol

from coolingecu.adc import AIR_TEMPERATURE_CHANNEL, ENGINE_TEMPERATURE_CHANNEL
from coolingecu.det import Det, DevelopmentError

IOHWAB_E_PARAM_POINTER = 0x01
IOHWAB_E_PARAM_CONFIG = 0x02
IOHWAB_E_NOT_INITIALIZED = 0x03
IOHWAB_E_READ_FAILED = 0x04

AIR_SENSOR_MODULE_ID = 1
ENGINE_SENSOR_MODULE_ID = 2


class _Converter(Protocol):
    def read_channel(self, channel: int) -> int | None: ...


class TemperatureSensors:
    """Reads temperatures through the ADC channels wired to each sensor."""

    def __init__(self, adc: _Converter, det: Det | None = None) -> None:
        self._adc = adc
        self._det = det if det is not None else Det()

    def _read(self, channel: int, module_id: int) -> int:
        value = self._adc.read_channel(channel)
        if value is None:
            raise DevelopmentError(
                self._det.report_error(module_id, 0, 1, IOHWAB_E_READ_FAILED)
            )
        return value

    def read_air_temperature(self) -> int:
        """Return the current air temperature."""
        return self._read(AIR_TEMPERATURE_CHANNEL, AIR_SENSOR_MODULE_ID)

    def read_engine_temperature(self) -> int:
        """Return the current engine temperature."""
        return self._read(ENGINE_TEMPERATURE_CHANNEL, ENGINE_SENSOR_MODULE_ID)