import pytest

from coolingecu import det as det_codes
from coolingecu.can import CanDriver, PduInfo
from coolingecu.canif import CanIf
from coolingecu.det import Det, DevelopmentError, ErrorRecord
from coolingecu.pdur import PduRConfig, PduRouter, PduRState, VersionInfo


class _FailingInterface:
    def transmit(self, tx_pdu_id, pdu):
        raise DevelopmentError(ErrorRecord(1, 0, 2, det_codes.CANIF_E_SEND_FAILED))


@pytest.fixture
def stack():
    det = Det()
    driver = CanDriver(det)
    canif = CanIf(driver, det)
    return det, driver, canif, PduRouter(canif, det)


def test_init_stores_config(stack):
    _, _, _, router = stack
    config = PduRConfig(max_pdu_router_instances=4)
    router.init(config)
    assert router.state is PduRState.INIT
    assert router.config == config


def test_init_without_config_reports_error(stack):
    det, _, _, router = stack
    with pytest.raises(DevelopmentError) as info:
        router.init(None)
    assert info.value.record.error_id == det_codes.PDUR_E_PARAM_POINTER
    assert det.errors == [info.value.record]
    assert router.state is PduRState.UNINIT


def test_version_info(stack):
    _, _, _, router = stack
    assert router.get_version_info() == VersionInfo(1, 2, 1, 0, 0)


def test_transmit_reaches_driver_without_init(stack):
    _, driver, canif, router = stack
    data = (300).to_bytes(2, "little") + (40).to_bytes(2, "little") + bytes([1, 0])
    router.transmit(9, PduInfo(data))
    assert canif.tracked.fan_speed == 300
    assert canif.tracked.pump_speed == 40
    assert canif.tracked.warning_status == 1
    assert len(driver.transmitted) == 1
    assert driver.transmitted[0][1].sw_pdu_handle == 9
    assert driver.transmitted[0][1].sdu == data


def test_transmit_none_reports_error(stack):
    det, driver, _, router = stack
    with pytest.raises(DevelopmentError) as info:
        router.transmit(1, None)
    assert info.value.record.api_id == 2
    assert info.value.record.error_id == det_codes.PDUR_E_PARAM_POINTER
    assert driver.transmitted == []


def test_transmit_failure_of_interface_is_reported():
    det = Det()
    router = PduRouter(_FailingInterface(), det)
    with pytest.raises(DevelopmentError) as info:
        router.transmit(1, PduInfo(bytes(6)))
    assert info.value.record.error_id == det_codes.PDUR_E_TRANSMIT_FAILED
    assert det.errors[-1] == info.value.record


def test_tx_confirmation_is_recorded(stack):
    _, _, _, router = stack
    router.tx_confirmation(3, True)
    router.tx_confirmation(4, False)
    assert router.confirmations == [(3, True), (4, False)]


def test_rx_indication_success_and_failure(stack):
    det, _, _, router = stack
    router.rx_indication(5, True)
    assert router.indications == [5]
    with pytest.raises(DevelopmentError) as info:
        router.rx_indication(6, False)
    assert info.value.record.api_id == 3
    assert router.indications == [5]
    assert det.errors == [info.value.record]