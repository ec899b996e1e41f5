# coolingecu

A simulation of an engine cooling control unit, organised in layers the way
automotive software usually is:

- **Drivers**: an ADC that produces random temperatures (engine 30–150 °C,
  air 0–55 °C), a CAN driver that keeps the frames written to it, and a
  watchdog (`coolingecu.adc`, `coolingecu.can`, `coolingecu.wdg`).
- **Abstraction**: temperature sensor access and a CAN interface that decodes
  the fan speed, pump speed and warning status of each PDU it passes on
  (`coolingecu.iohwab`, `coolingecu.canif`).
- **Services**: PDU routing, signal communication, diagnostic event status,
  an in-memory table of stored trouble codes, diagnostic requests and
  development error reporting (`coolingecu.pdur`, `coolingecu.com`,
  `coolingecu.dem`, `coolingecu.nvm`, `coolingecu.dcm`, `coolingecu.det`).
- **Runtime ports** that connect components to services
  (`coolingecu.rte_sensor`, `coolingecu.rte_services`, `coolingecu.rte_control`).
- **Application components**: temperature sensing, calibration parameters,
  cooling fan and pump control, and error storage (`coolingecu.swc`).
- **The ECU** that wires everything together and runs the task cycle
  (`coolingecu.ecu`).

Errors are raised as exceptions: modules of the stack record a
`coolingecu.det.ErrorRecord` with their `Det` instance and raise
`coolingecu.det.DevelopmentError`.

## Installation

```
pip install .
```

## Running the simulation

```
coolingecu --cycles 10 --seed 1
```

Options:

- `--cycles N`: number of cycles to run (default 10);
- `--seed S`: seed for the random temperatures (default: unseeded).

Each cycle prints one line with the engine and air temperatures, the fan and
pump speeds and the warning light. At cycle 2000 the ECU simulates a sensor
task fault: the command then prints the failure to standard error and exits
with status 1.

## Using it from Python

```python
import random

from coolingecu.ecu import Ecu

ecu = Ecu(random.Random(1))
data = ecu.run_cycle()
print(data.engine_temp, data.fan_speed, data.warning_light)
```

`Ecu.run_cycle` returns a copy of the cycle's `CoolingData`. Each cycle runs
the three tasks in order: `read_sensor_task`, `process_data_task` and
`send_data_task`. The parts of the stack are available as attributes of the
`Ecu`, for example `ecu.dem` (event statuses), `ecu.nvm` (stored trouble
codes), `ecu.canif.tracked` (the last signals sent) and
`ecu.can_driver.transmitted` (all frames written).

The cooling law, in `EngineTemperatureControl.calc_cooling_speed`:

- below 85 °C the fan and pump stay at 0 %;
- from 85 °C to 110 °C the speed rises linearly to 100 %;
- at 110 °C and above the speed is 100 %;
- when the engine is at 85 °C or more and the air is hotter than the air
  calibration value (40 °C by default) plus 5 °C, 10 % is added, capped at 100 %;
- the warning light is on when the engine temperature reaches the engine
  calibration value (105 °C by default);
- an engine temperature above 150 °C, or engine and air both at 0, marks a
  diagnostic event as failed and stores a trouble code.

## What it does not do

- There is no real hardware: temperatures are random, CAN frames are only
  collected in memory, and nothing is received from the bus.
- Stored trouble codes live in memory only and are lost when the process ends.
- Tasks run one after another inside `run_cycle`; there is no real-time
  scheduler. The watchdog and the diagnostic manager (`Dcm`) can be used on
  their own but are not driven by the ECU cycle.

## Tests

```
pip install .[test]
pytest
```