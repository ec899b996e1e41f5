import random

from coolingecu import adc
from coolingecu.adc import Adc


class _RecordingRng:
    def __init__(self, value):
        self.value = value
        self.calls = []

    def randint(self, a, b):
        self.calls.append((a, b))
        return self.value


def test_engine_channel_uses_engine_range():
    rng = _RecordingRng(42)
    converter = Adc(rng)
    assert converter.read_channel(adc.ENGINE_TEMPERATURE_CHANNEL) == 42
    assert rng.calls == [(adc.MIN_ENGINE_TEMP, adc.MAX_ENGINE_TEMP)]
    assert converter.engine_temperature == 42


def test_air_channel_uses_air_range():
    rng = _RecordingRng(17)
    converter = Adc(rng)
    assert converter.read_channel(adc.AIR_TEMPERATURE_CHANNEL) == 17
    assert rng.calls == [(adc.MIN_AIR_TEMP, adc.MAX_AIR_TEMP)]
    assert converter.air_temperature == 17


def test_unknown_channel_yields_nothing():
    rng = _RecordingRng(17)
    converter = Adc(rng)
    assert converter.read_channel(7) is None
    assert rng.calls == []


def test_values_stay_in_range():
    converter = Adc(random.Random(1234))
    for _ in range(500):
        assert adc.MIN_ENGINE_TEMP <= converter.simulate_engine_temperature() <= adc.MAX_ENGINE_TEMP
        assert adc.MIN_AIR_TEMP <= converter.simulate_air_temperature() <= adc.MAX_AIR_TEMP


def test_same_seed_same_sequence():
    first = Adc(random.Random(99))
    second = Adc(random.Random(99))
    a = [first.read_channel(ch) for ch in (0, 1, 0, 1)]
    b = [second.read_channel(ch) for ch in (0, 1, 0, 1)]
    assert a == b


def test_initial_temperatures_are_zero():
    converter = Adc(random.Random(0))
    assert (converter.engine_temperature, converter.air_temperature) == (0, 0)