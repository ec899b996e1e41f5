"""CAN driver and the PDU descriptor shared by the communication stack."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from coolingecu import det as _det
from coolingecu.det import Det, DevelopmentError

_MODULE_ID = 1


@dataclass
class PduInfo:
    """Payload of a PDU and its declared length."""

    data: bytes
    length: int = field(default=-1)

    def __post_init__(self) -> None:
        self.data = bytes(self.data)
        if self.length < 0:
            self.length = len(self.data)


class CanState(enum.IntEnum):
    UNINITIALIZED = 0
    INITIALIZED = 1


@dataclass(frozen=True)
class CanConfig:
    """Hardware configuration of a CAN controller."""

    bitrate: int
    controller_id: int
    hardware_config: object = None


@dataclass(frozen=True)
class CanPdu:
    """A frame handed to the CAN driver."""

    sw_pdu_handle: int
    length: int
    can_id: int
    sdu: bytes


class CanDriver:
    """Simulated CAN controller; frames written are kept in ``transmitted``."""

    def __init__(self, det: Det | None = None) -> None:
        self._det = det if det is not None else Det()
        self.state = CanState.UNINITIALIZED
        self.config: CanConfig | None = None
        self.transmitted: list[tuple[int, CanPdu]] = []

    def _fail(self, api_id: int, error_id: int) -> DevelopmentError:
        return DevelopmentError(self._det.report_error(_MODULE_ID, 0, api_id, error_id))

    def init(self, config: CanConfig | None) -> None:
        """Initialise the controller with the given configuration."""
        if config is None:
            raise self._fail(0, _det.CAN_E_PARAM_CONFIG)
        self.config = config
        self.state = CanState.INITIALIZED

    def write(self, hth: int, pdu: CanPdu | None) -> None:
        """Put a frame on the bus through hardware handle ``hth``."""
        if pdu is None:
            raise self._fail(2, _det.CAN_E_PARAM_POINTER)
        self.transmitted.append((hth, pdu))

    def deinit(self) -> None:
        """Shut the controller down."""
        if self.state is not CanState.INITIALIZED:
            raise self._fail(0, _det.CAN_E_NOT_INITIALIZED)
        self.state = CanState.UNINITIALIZED