"""Time-ordered 64-bit identifiers: timestamp, machine id and sequence."""

from __future__ import annotations

import threading
import time

MACHINE_BITS = 10
SEQUENCE_BITS = 12
MAX_SEQUENCE = (1 << SEQUENCE_BITS) - 1
MACHINE_MASK = 0x3FF
TIMESTAMP_MASK = 0x1FFFFFFFFFF

_uid_lock = threading.Lock()


def _current_millis() -> int:
    return time.time_ns() // 1_000_000


class UIDGenerator:
    """Generates unique, increasing identifiers for one machine id."""

    def __init__(self, machine_id: int = 0) -> None:
        self.last_timestamp = 0
        self.sequence = 0
        self.machine_id = machine_id & MACHINE_MASK

    def next(self) -> int:
        """Return the next identifier."""
        with _uid_lock:
            timestamp = _current_millis()
            if timestamp == self.last_timestamp:
                self.sequence += 1
                if self.sequence > MAX_SEQUENCE:
                    while (timestamp := _current_millis()) <= self.last_timestamp:
                        pass
                    self.sequence = 0
                    self.last_timestamp = timestamp
            else:
                self.sequence = 0
                self.last_timestamp = timestamp

            return (
                ((timestamp & TIMESTAMP_MASK) << (MACHINE_BITS + SEQUENCE_BITS))
                | ((self.machine_id & MACHINE_MASK) << SEQUENCE_BITS)
                | (self.sequence & MAX_SEQUENCE)
            )

    def next_hex(self) -> str:
        """Return the next identifier as upper-case hex with a 0x prefix."""
        return f"0x{self.next():X}"


global_uid_generator = UIDGenerator()