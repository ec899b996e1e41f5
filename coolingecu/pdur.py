"""PDU router: forwards PDUs from the communication layer to the CAN interface."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Protocol

from coolingecu import det as _det
from coolingecu.can import PduInfo
from coolingecu.det import Det, DevelopmentError

_MODULE_ID = 1


class _Transmitter(Protocol):
    def transmit(self, tx_pdu_id: int, pdu: PduInfo | None) -> None: ...


class PduRState(enum.IntEnum):
    UNINIT = 0
    INIT = 1


@dataclass(frozen=True)
class PduRConfig:
    """Post-build configuration of the router."""

    max_pdu_router_instances: int


@dataclass(frozen=True)
class VersionInfo:
    """Vendor, module and software version of a module."""

    vendor_id: int
    module_id: int
    sw_major_version: int
    sw_minor_version: int
    sw_patch_version: int


_VERSION = VersionInfo(
    vendor_id=1,
    module_id=2,
    sw_major_version=1,
    sw_minor_version=0,
    sw_patch_version=0,
)


class PduRouter:
    """Routes PDUs to the lower interface and collects lower-layer notifications."""

    def __init__(self, canif: _Transmitter, det: Det | None = None) -> None:
        self._canif = canif
        self._det = det if det is not None else Det()
        self.state = PduRState.UNINIT
        self.config: PduRConfig | None = None
        self.confirmations: list[tuple[int, bool]] = []
        self.indications: list[int] = []

    def _fail(self, api_id: int, error_id: int) -> DevelopmentError:
        return DevelopmentError(self._det.report_error(_MODULE_ID, 0, api_id, error_id))

    def init(self, config: PduRConfig | None) -> None:
        """Store the configuration and mark the router initialised."""
        if config is None:
            raise self._fail(0, _det.PDUR_E_PARAM_POINTER)
        self.config = config
        self.state = PduRState.INIT

    def get_version_info(self) -> VersionInfo:
        """Return the version information of the router."""
        return _VERSION

    def transmit(self, tx_pdu_id: int, pdu: PduInfo | None) -> None:
        """Request transmission of ``pdu`` through the CAN interface."""
        if pdu is None:
            raise self._fail(2, _det.PDUR_E_PARAM_POINTER)
        try:
            self._canif.transmit(tx_pdu_id, pdu)
        except DevelopmentError as exc:
            raise self._fail(2, _det.PDUR_E_TRANSMIT_FAILED) from exc

    def tx_confirmation(self, pdu_id: int, result: bool) -> None:
        """Record the outcome of a finished transmission."""
        self.confirmations.append((pdu_id, bool(result)))

    def rx_indication(self, pdu_id: int, result: bool) -> None:
        """Record a received PDU; a failed reception is reported and raised."""
        if not result:
            raise self._fail(3, _det.PDUR_E_PARAM_POINTER)
        self.indications.append(pdu_id)