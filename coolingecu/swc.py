"""Application components: temperature control, sensor, error storage and calibration."""

from __future__ import annotations

from dataclasses import dataclass

from coolingecu.adc import MAX_ENGINE_TEMP
from coolingecu.com import CombinedSignal
from coolingecu.dem import EventId, EventStatus
from coolingecu.det import DevelopmentError
from coolingecu.nvm import Dtc
from coolingecu.rte_control import ControlPorts
from coolingecu.rte_sensor import SensorPorts
from coolingecu.rte_services import NvBlockPorts, ParameterPorts

TEMP_FAN_START = 85
TEMP_MAX_SPEED = 110
AIR_TEMP_HOT = 5
SPEED_MAX = 100
SPEED_MIN = 0
SPEED_ADJUST = 10

CALIBRATION_ENGINE = 105
CALIBRATION_AIR = 40


@dataclass
class CoolingData:
    """Temperatures read in one cycle and the cooling outputs computed from them."""

    engine_temp: int = 0
    air_temp: int = 0
    fan_speed: int = 0
    pump_speed: int = 0
    warning_light: int = 0


class CoolingSignalError(Exception):
    """Raised when the control signal could not be sent to the actuator ECU."""


class EngineTemperatureControl:
    """Computes fan and pump speeds from engine and air temperature."""

    def __init__(self, ports: ControlPorts) -> None:
        self._ports = ports

    def _report(self, event: EventId, dtc: Dtc) -> None:
        self._ports.report_to_dem(event, EventStatus.FAILED)
        self._ports.store_error(int(dtc))

    def calc_cooling_speed(self, data: CoolingData) -> CoolingData:
        """Fill ``data`` with the current temperatures and cooling outputs."""
        ports = self._ports
        engine = ports.read_engine_temperature()
        air = ports.read_air_temperature()
        calibration_engine, calibration_air = ports.read_calibration_data()

        if engine > MAX_ENGINE_TEMP:
            self._report(EventId.SENSOR_CIRCUIT_MALFUNCTION, Dtc.B1C02)
        elif engine == 0 and air == 0:
            self._report(EventId.UNSTABLE_SENSOR_SIGNAL, Dtc.B1C03)

        data.engine_temp = engine
        data.air_temp = air

        if engine >= TEMP_MAX_SPEED:
            base = SPEED_MAX
        elif engine >= TEMP_FAN_START:
            base = (engine - TEMP_FAN_START) * SPEED_MAX // (
                TEMP_MAX_SPEED - TEMP_FAN_START
            )
        else:
            base = SPEED_MIN

        hot_air = air > calibration_air + AIR_TEMP_HOT
        adjustment = SPEED_ADJUST if engine >= TEMP_FAN_START and hot_air else 0
        speed = min(base + adjustment, SPEED_MAX)
        warning = 1 if engine >= calibration_engine else 0

        data.fan_speed = speed
        data.pump_speed = speed
        data.warning_light = warning

        ports.write_fan_speed(speed)
        ports.write_pump_speed(speed)
        ports.write_warning_light(warning)
        return data

    def send_control_signal(self) -> CombinedSignal:
        """Send the published speeds; on failure record the fault and raise."""
        try:
            return self._ports.send_signal_speed()
        except (DevelopmentError, ValueError) as exc:
            self._report(EventId.FAN_CONTROL_MALFUNCTION, Dtc.U1002)
            raise CoolingSignalError("control signal could not be sent") from exc


class EngineTemperatureSensor:
    """Reads the sensors and publishes the temperatures; a failed read publishes 0."""

    def __init__(self, ports: SensorPorts) -> None:
        self._ports = ports

    def get_engine_temperature(self) -> int:
        """Read and publish the engine temperature."""
        try:
            temperature = self._ports.read_engine_temperature_sensor()
        except DevelopmentError:
            temperature = 0
        self._ports.write_engine_temperature(temperature)
        return temperature

    def get_air_temperature(self) -> int:
        """Read and publish the air temperature."""
        try:
            temperature = self._ports.read_air_temperature_sensor()
        except DevelopmentError:
            temperature = 0
        self._ports.write_air_temperature(temperature)
        return temperature


class NvBlock:
    """Moves the latest error code into non-volatile memory."""

    def __init__(self, ports: NvBlockPorts) -> None:
        self._ports = ports
        self.error_code = 0

    def handle_error_to_nvm(self) -> int:
        """Write the latest error code to memory and return it."""
        self.error_code = self._ports.read_error_data()
        self._ports.store_error_to_nvm(self.error_code)
        return self.error_code


class Parameter:
    """Provides the fixed calibration thresholds."""

    def __init__(self, ports: ParameterPorts) -> None:
        self._ports = ports

    def provide_calibration_data(self) -> tuple[int, int]:
        """Publish the engine and air calibration values and return them."""
        self._ports.write_calibration_data(CALIBRATION_ENGINE, CALIBRATION_AIR)
        return CALIBRATION_ENGINE, CALIBRATION_AIR