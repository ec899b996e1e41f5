import pytest

from coolingecu import det
from coolingecu.can import CanDriver, PduInfo
from coolingecu.canif import DEFAULT_CAN_ID, DEFAULT_HTH, CanIf, CanIfConfig, TrackedSignals
from coolingecu.det import Det, DevelopmentError, ErrorRecord


class _FailingDriver:
    def write(self, hth, pdu):
        raise DevelopmentError(ErrorRecord(1, 0, 2, det.CAN_E_PARAM_POINTER))


@pytest.fixture
def tracer():
    return Det()


@pytest.fixture
def driver(tracer):
    return CanDriver(tracer)


@pytest.fixture
def canif(driver, tracer):
    return CanIf(driver, tracer)


PAYLOAD = bytes([0x34, 0x12, 0x78, 0x56, 0x01, 0x00, 0x00, 0x00])


def test_transmit_decodes_signals(canif):
    canif.transmit(1, PduInfo(PAYLOAD))
    assert canif.tracked == TrackedSignals(
        fan_speed=0x1234, pump_speed=0x5678, warning_status=PAYLOAD[4], sdu=PAYLOAD[0]
    )


def test_transmit_hands_frame_to_driver(canif, driver, tracer):
    canif.transmit(3, PduInfo(PAYLOAD))
    assert len(driver.transmitted) == 1
    hth, frame = driver.transmitted[0]
    assert hth == DEFAULT_HTH
    assert frame.can_id == DEFAULT_CAN_ID
    assert frame.sw_pdu_handle == 3
    assert frame.length == len(PAYLOAD)
    assert frame.sdu == PAYLOAD
    assert tracer.errors == []


def test_transmit_none_reports_pointer_error(canif, driver):
    with pytest.raises(DevelopmentError) as info:
        canif.transmit(1, None)
    assert info.value.record.error_id == det.CANIF_E_PARAM_POINTER
    assert info.value.record.api_id == 1
    assert driver.transmitted == []


def test_transmit_short_payload_rejected(canif):
    with pytest.raises(ValueError):
        canif.transmit(1, PduInfo(b"\x01\x02"))


def test_driver_failure_reported_as_send_failed(tracer):
    canif = CanIf(_FailingDriver(), tracer)
    with pytest.raises(DevelopmentError) as info:
        canif.transmit(1, PduInfo(PAYLOAD))
    assert info.value.record.error_id == det.CANIF_E_SEND_FAILED
    assert tracer.errors == [info.value.record]
    assert canif.tracked.sdu == PAYLOAD[0]


def test_init_none_raises(canif):
    with pytest.raises(DevelopmentError) as info:
        canif.init(None)
    assert info.value.record.error_id == det.CANIF_E_PARAM_POINTER
    assert canif.initialized is False


def test_init_stores_config_and_deinit(canif):
    config = CanIfConfig(com_channel=0, max_pdu_count=4)
    canif.init(config)
    assert canif.config == config
    assert canif.initialized is True
    canif.deinit()
    assert canif.initialized is False


def test_deinit_before_init_raises(canif):
    with pytest.raises(DevelopmentError) as info:
        canif.deinit()
    assert info.value.record.error_id == det.CANIF_E_NOT_INITIALIZED