"""Communication module: packs signals into PDUs and hands them to the router."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import Protocol, Union

from coolingecu.can import PduInfo
from coolingecu.det import Det, DevelopmentError

_MODULE_ID = 3

COM_E_PARAM_POINTER = 0x01
COM_E_PARAM_CONFIG = 0x02
COM_E_NOT_INITIALIZED = 0x03

_COMBINED_LAYOUT = struct.Struct("<HHH")


class _Router(Protocol):
    def transmit(self, tx_pdu_id: int, pdu: PduInfo | None) -> None: ...


@dataclass(frozen=True)
class ComConfig:
    """Channel, signal and enable flag of the communication module."""

    com_channel: int
    signal_id: int
    is_enabled: bool


@dataclass(frozen=True)
class ComSignal:
    """A single received signal value."""

    signal_value: int = 0
    signal_id: int = 0


@dataclass(frozen=True)
class CombinedSignal:
    """Fan speed, pump speed and warning status sent in one PDU."""

    fan_speed: int
    pump_speed: int
    warning_status: int

    def to_bytes(self) -> bytes:
        """Pack the signal as three little-endian 16-bit fields."""
        try:
            return _COMBINED_LAYOUT.pack(
                self.fan_speed, self.pump_speed, self.warning_status
            )
        except struct.error as exc:
            raise ValueError(f"signal field out of range: {exc}") from exc

    @classmethod
    def from_bytes(cls, data: bytes) -> CombinedSignal:
        """Unpack a signal from the start of ``data``."""
        if len(data) < _COMBINED_LAYOUT.size:
            raise ValueError(
                f"need {_COMBINED_LAYOUT.size} bytes, got {len(data)}"
            )
        fan, pump, warning = _COMBINED_LAYOUT.unpack_from(data)
        return cls(fan, pump, warning)


SignalData = Union[CombinedSignal, bytes, bytearray, memoryview]


class Com:
    """Sends signals through the PDU router and serves received signals."""

    def __init__(self, pdur: _Router, det: Det | None = None) -> None:
        self._pdur = pdur
        self._det = det if det is not None else Det()
        self.initialized = False
        self.shared_signal = ComSignal()

    def _fail(self, api_id: int, error_id: int) -> DevelopmentError:
        return DevelopmentError(self._det.report_error(_MODULE_ID, 0, api_id, error_id))

    def init(self, config: ComConfig | None) -> None:
        """Initialise the module; a disabled configuration is an error."""
        if config is None:
            raise self._fail(0, COM_E_PARAM_POINTER)
        self.initialized = bool(config.is_enabled)
        if not self.initialized:
            raise self._fail(0, COM_E_PARAM_CONFIG)

    def send_signal(self, signal_id: int, data: SignalData | None) -> None:
        """Send ``data`` as the PDU with id ``signal_id``."""
        if data is None:
            raise self._fail(1, COM_E_PARAM_POINTER)
        payload = data.to_bytes() if isinstance(data, CombinedSignal) else bytes(data)
        try:
            self._pdur.transmit(signal_id, PduInfo(payload))
        except DevelopmentError as exc:
            raise self._fail(3, COM_E_PARAM_CONFIG) from exc

    def receive_signal(self, signal_id: int) -> ComSignal:
        """Return the last received signal."""
        if not self.initialized:
            raise self._fail(2, COM_E_NOT_INITIALIZED)
        return ComSignal(self.shared_signal.signal_value, self.shared_signal.signal_id)