"""The cooling ECU: wires the software stack together and runs its tasks."""

from __future__ import annotations

import argparse
import enum
import random
import sys
from dataclasses import replace

from coolingecu.adc import Adc
from coolingecu.can import CanDriver
from coolingecu.canif import CanIf
from coolingecu.com import Com
from coolingecu.dem import Dem
from coolingecu.det import Det
from coolingecu.iohwab import TemperatureSensors
from coolingecu.nvm import Nvm
from coolingecu.pdur import PduRouter
from coolingecu.rte_control import ControlPorts
from coolingecu.rte_sensor import SensorPorts
from coolingecu.rte_services import NvBlockPorts, ParameterPorts
from coolingecu.swc import (
    CoolingData,
    CoolingSignalError,
    EngineTemperatureControl,
    EngineTemperatureSensor,
    NvBlock,
    Parameter,
)
from coolingecu.wdg import Watchdog, WatchdogManager

ERROR_SIMULATION_CYCLE = 2000


class _Event(enum.IntFlag):
    READ_SENSOR = 1 << 0
    DATA_READY = 1 << 1
    SENSOR = 1 << 2


class Ecu:
    """Cooling control unit running the sensor, processing and send tasks."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.det = Det()
        self.adc = Adc(rng)
        self.can_driver = CanDriver(self.det)
        self.canif = CanIf(self.can_driver, self.det)
        self.pdur = PduRouter(self.canif, self.det)
        self.com = Com(self.pdur, self.det)
        self.dem = Dem()
        self.nvm = Nvm()
        self.watchdog = Watchdog()
        self.watchdog_manager = WatchdogManager(self.watchdog)

        self.sensor_ports = SensorPorts(TemperatureSensors(self.adc, self.det))
        self.parameter_ports = ParameterPorts()
        self.nvblock_ports = NvBlockPorts(self.nvm)
        self.control_ports = ControlPorts(
            self.sensor_ports,
            self.parameter_ports,
            self.nvblock_ports,
            self.dem,
            self.com,
        )

        self.sensor = EngineTemperatureSensor(self.sensor_ports)
        self.control = EngineTemperatureControl(self.control_ports)
        self.nvblock = NvBlock(self.nvblock_ports)
        self.parameter = Parameter(self.parameter_ports)

        self.data = CoolingData()
        self.cycle = 0
        self.error_cycle: int | None = ERROR_SIMULATION_CYCLE
        self._pending = _Event(0)

    def _take(self, event: _Event) -> bool:
        if not self._pending & event:
            return False
        self._pending &= ~event
        return True

    def read_sensor_task(self) -> bool:
        """Read both sensors and wake the processing task; False if not due."""
        if not self._take(_Event.SENSOR):
            return False
        self.sensor.get_engine_temperature()
        self.sensor.get_air_temperature()
        self._pending |= _Event.READ_SENSOR

        if self.error_cycle is not None and self.cycle == self.error_cycle:
            self.watchdog_manager.simulate_error = True
        if self.watchdog_manager.simulate_error:
            raise RuntimeError("sensor task failed, system will reset")
        return True

    def process_data_task(self) -> bool:
        """Compute the cooling outputs and store errors; False if not due."""
        if not self._take(_Event.READ_SENSOR):
            return False
        self.parameter.provide_calibration_data()
        self.control.calc_cooling_speed(self.data)
        self.nvblock.handle_error_to_nvm()
        self._pending |= _Event.DATA_READY
        return True

    def send_data_task(self) -> bool:
        """Send the control signal; a failed send is recorded, not raised."""
        if not self._take(_Event.DATA_READY):
            return False
        try:
            self.control.send_control_signal()
        except CoolingSignalError:
            pass
        return True

    def run_cycle(self) -> CoolingData:
        """Run one sensor event through all three tasks and return the result."""
        self.cycle += 1
        self._pending |= _Event.SENSOR
        self.read_sensor_task()
        self.process_data_task()
        self.send_data_task()
        return replace(self.data)


def main(argv: list[str] | None = None) -> int:
    """Run the ECU for a number of cycles and print each result."""
    parser = argparse.ArgumentParser(description="Simulate the cooling ECU.")
    parser.add_argument("--cycles", type=int, default=10, help="cycles to run")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)

    ecu = Ecu(random.Random(args.seed))
    for _ in range(args.cycles):
        try:
            data = ecu.run_cycle()
        except RuntimeError as exc:
            print(f"cycle {ecu.cycle}: {exc}", file=sys.stderr)
            return 1
        print(
            f"cycle {ecu.cycle}: engine={data.engine_temp} air={data.air_temp} "
            f"fan={data.fan_speed} pump={data.pump_speed} "
            f"warning={data.warning_light}"
        )
    return 0


if __name__ == "__main__":
    sys.exit(main())