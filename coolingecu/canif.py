"""CAN interface: passes PDUs to the driver and tracks the last sent signals."""

from __future__ import annotations

from dataclasses import dataclass

from coolingecu import det as _det
from coolingecu.can import CanDriver, CanPdu, PduInfo
from coolingecu.det import Det, DevelopmentError

_MODULE_ID = 1
_SIGNAL_BYTES = 5

DEFAULT_HTH = 5
DEFAULT_CAN_ID = 7


@dataclass(frozen=True)
class CanIfConfig:
    """Channel and PDU limit of the CAN interface."""

    com_channel: int
    max_pdu_count: int


@dataclass(frozen=True)
class TrackedSignals:
    """Signals decoded from the last PDU handed to the interface."""

    fan_speed: int = 0
    pump_speed: int = 0
    warning_status: int = 0
    sdu: int = 0


class CanIf:
    """Upper interface of the CAN driver."""

    def __init__(self, driver: CanDriver, det: Det | None = None) -> None:
        self._driver = driver
        self._det = det if det is not None else Det()
        self.config: CanIfConfig | None = None
        self.initialized = False
        self.tracked = TrackedSignals()

    def _fail(self, api_id: int, error_id: int) -> DevelopmentError:
        return DevelopmentError(self._det.report_error(_MODULE_ID, 0, api_id, error_id))

    def init(self, config: CanIfConfig | None) -> None:
        """Store the configuration and mark the interface ready."""
        if config is None:
            raise self._fail(0, _det.CANIF_E_PARAM_POINTER)
        self.config = config
        self.initialized = True

    def transmit(self, tx_pdu_id: int, pdu: PduInfo | None) -> None:
        """Decode the signals of ``pdu`` and hand it to the CAN driver."""
        if pdu is None:
            raise self._fail(1, _det.CANIF_E_PARAM_POINTER)
        data = pdu.data
        if len(data) < _SIGNAL_BYTES:
            raise ValueError(
                f"PDU carries {len(data)} bytes, at least {_SIGNAL_BYTES} are needed"
            )

        self.tracked = TrackedSignals(
            fan_speed=int.from_bytes(data[0:2], "little"),
            pump_speed=int.from_bytes(data[2:4], "little"),
            warning_status=data[4],
            sdu=data[0],
        )

        frame = CanPdu(
            sw_pdu_handle=tx_pdu_id,
            length=pdu.length & 0xFF,  # the frame length field is 8-bit
            can_id=DEFAULT_CAN_ID,
            sdu=data,
        )
        try:
            self._driver.write(DEFAULT_HTH, frame)
        except DevelopmentError as exc:
            raise self._fail(2, _det.CANIF_E_SEND_FAILED) from exc

    def deinit(self) -> None:
        """Release the interface."""
        if not self.initialized:
            raise self._fail(2, _det.CANIF_E_NOT_INITIALIZED)
        self.initialized = False