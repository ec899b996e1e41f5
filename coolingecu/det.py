"""Development error tracer: collects errors reported by the basic software."""

from __future__ import annotations

from dataclasses import dataclass

PDUR_E_PARAM_POINTER = 0x09
PDUR_E_NOT_INITIALIZED = 0x0A
PDUR_E_TRANSMIT_FAILED = 0x0B
CANIF_E_PARAM_POINTER = 0x11
CANIF_E_NOT_INITIALIZED = 0x12
CAN_E_PARAM_POINTER = 0x21
CAN_E_NOT_INITIALIZED = 0x22
CAN_E_PARAM_CONFIG = 0x01
CANIF_E_SEND_FAILED = 0x02

RTE_E_PARAM_POINTER = 0x01
RTE_E_PARAM_CONFIG = 0x02
RTE_E_NOT_INITIALIZED = 0x03
RTE_E_READ_FAILED = 0x04
RTE_E_SEND_FAILED = 0x05


@dataclass(frozen=True)
class ErrorRecord:
    """One reported development error."""

    module_id: int
    instance_id: int
    api_id: int
    error_id: int


class DevelopmentError(Exception):
    """Raised by a module after it has reported an error to the tracer."""

    def __init__(self, record: ErrorRecord) -> None:
        super().__init__(
            f"module {record.module_id}, instance {record.instance_id}, "
            f"api {record.api_id}: error 0x{record.error_id:02X}"
        )
        self.record = record


class Det:
    """Keeps every reported development error in order of arrival."""

    def __init__(self) -> None:
        self.errors: list[ErrorRecord] = []

    def report_error(
        self, module_id: int, instance_id: int, api_id: int, error_id: int
    ) -> ErrorRecord:
        """Record an error and return its record."""
        record = ErrorRecord(module_id, instance_id, api_id, error_id)
        self.errors.append(record)
        return record

    def clear(self) -> None:
        """Forget all recorded errors."""
        self.errors.clear()