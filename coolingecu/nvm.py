"""Non-volatile memory manager holding a small table of stored error codes."""

from __future__ import annotations

import enum
from dataclasses import dataclass

NVM_E_PARAM_BLOCK_ID = 0x01
MAX_ERRORS = 5
_UINT16_MAX = 0xFFFF


class Dtc(enum.IntEnum):
    """Diagnostic trouble codes written to memory."""

    B1C02 = 0x1C02  # engine temperature sensor signal out of range
    B1C03 = 0x1C03  # engine temperature sensor no response
    U1001 = 0x1001  # lost communication with engine temperature sensor
    U1002 = 0x1002  # lost communication with actuator ECU
    C1E01 = 0x1E01  # cooling system ECU memory failure


@dataclass
class NvmEntry:
    """One slot of the error table."""

    block_id: int
    data: int = 0


class Nvm:
    """Error table of ``MAX_ERRORS`` slots, all bound to the parameter block."""

    def __init__(self) -> None:
        self.entries = [NvmEntry(NVM_E_PARAM_BLOCK_ID) for _ in range(MAX_ERRORS)]

    @staticmethod
    def _check_block(block_id: int) -> None:
        if block_id == 0:
            raise ValueError("block id 0 is not a valid block")

    def _find(self, block_id: int) -> NvmEntry | None:
        return next((e for e in self.entries if e.block_id == block_id), None)

    def read_block(self, block_id: int) -> int | None:
        """Return the data of the first slot of ``block_id``, or None if it has none."""
        self._check_block(block_id)
        entry = self._find(block_id)
        return entry.data if entry is not None else None

    def write_block(self, block_id: int, data: int | None) -> None:
        """Store ``data`` in the first slot of ``block_id``; other blocks are ignored."""
        self._check_block(block_id)
        if data is None:
            raise ValueError("no data to write")
        if not 0 <= data <= _UINT16_MAX:
            raise ValueError(f"data {data} does not fit in 16 bits")
        entry = self._find(block_id)
        if entry is not None:
            entry.data = int(data)