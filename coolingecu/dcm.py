"""Diagnostic communication manager answering diagnostic requests."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import TextIO

from coolingecu.det import Det, DevelopmentError

_MODULE_ID = 4
_POSITIVE_RESPONSE_OFFSET = 0x40
_RESPONSE_DATA = b"\x01\x00"

DCM_E_PARAM_POINTER = 0x01
DCM_E_PARAM_CONFIG = 0x02
DCM_E_NOT_INITIALIZED = 0x03


@dataclass(frozen=True)
class DcmConfig:
    """Session, protocol and enable flag of the diagnostic manager."""

    session_id: int
    protocol: int
    is_enabled: bool


@dataclass(frozen=True)
class DcmRequest:
    """A diagnostic service request."""

    request_id: int
    data: bytes = b""


@dataclass(frozen=True)
class DcmResponse:
    """A positive response to a diagnostic request."""

    response_id: int
    data: bytes


def _hex_bytes(data: bytes) -> str:
    return "".join(f"0x{b:02X} " for b in data)


class Dcm:
    """Processes diagnostic requests and logs them to a text stream."""

    def __init__(self, det: Det | None = None, out: TextIO | None = None) -> None:
        self._det = det if det is not None else Det()
        self._out = out
        self.initialized = False
        self.current_session = 0

    @property
    def _stream(self) -> TextIO:
        return self._out if self._out is not None else sys.stdout

    def _fail(self, api_id: int, error_id: int) -> DevelopmentError:
        return DevelopmentError(self._det.report_error(_MODULE_ID, 0, api_id, error_id))

    def init(self, config: DcmConfig | None) -> None:
        """Start the session given by ``config``; a disabled config is an error."""
        if config is None:
            raise self._fail(0, DCM_E_PARAM_POINTER)
        if not config.is_enabled:
            self.initialized = False
            raise self._fail(0, DCM_E_PARAM_CONFIG)
        self.initialized = True
        self.current_session = config.session_id
        print(
            f"Dcm Module Initialized (Session ID {config.session_id}, "
            f"Protocol {config.protocol})",
            file=self._stream,
        )

    def process_request(self, request: DcmRequest | None) -> DcmResponse:
        """Answer ``request`` with a positive response."""
        if not self.initialized:
            raise self._fail(1, DCM_E_NOT_INITIALIZED)
        if request is None:
            raise self._fail(1, DCM_E_PARAM_POINTER)

        stream = self._stream
        print(
            f"Dcm: Processing Request - ID = 0x{request.request_id:02X}, "
            f"Length = {len(request.data)}, Data = {_hex_bytes(request.data)}",
            file=stream,
        )
        response = DcmResponse(
            response_id=request.request_id + _POSITIVE_RESPONSE_OFFSET,
            data=_RESPONSE_DATA,
        )
        print(
            f"Dcm: Response - ID = 0x{response.response_id:02X}, "
            f"Length = {len(response.data)}, Data = {_hex_bytes(response.data)}",
            file=stream,
        )
        return response