"""Simulated analogue-to-digital converter for the temperature sensors."""

from __future__ import annotations

import random
from typing import Protocol

MIN_ENGINE_TEMP = 30
MAX_ENGINE_TEMP = 150
MIN_AIR_TEMP = 0
MAX_AIR_TEMP = 55

AIR_TEMPERATURE_CHANNEL = 0
ENGINE_TEMPERATURE_CHANNEL = 1


class _RandomSource(Protocol):
    def randint(self, a: int, b: int) -> int: ...


class Adc:
    """ADC whose channels yield random temperatures within fixed ranges."""

    def __init__(self, rng: _RandomSource | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.engine_temperature = 0
        self.air_temperature = 0

    def read_channel(self, channel: int) -> int | None:
        """Convert one channel; channels without a sensor yield None."""
        if channel == AIR_TEMPERATURE_CHANNEL:
            return self.simulate_air_temperature()
        if channel == ENGINE_TEMPERATURE_CHANNEL:
            return self.simulate_engine_temperature()
        return None

    def simulate_engine_temperature(self) -> int:
        """Draw a new engine temperature and remember it."""
        self.engine_temperature = self._rng.randint(MIN_ENGINE_TEMP, MAX_ENGINE_TEMP)
        return self.engine_temperature

    def simulate_air_temperature(self) -> int:
        """Draw a new air temperature and remember it."""
        self.air_temperature = self._rng.randint(MIN_AIR_TEMP, MAX_AIR_TEMP)
        return self.air_temperature