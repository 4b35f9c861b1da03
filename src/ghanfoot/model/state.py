"""
Log Book (Data Model)
=====================
This module defines the central data structure for the running application.

Why is this file needed?
------------------------
1. State Management: It holds the ordered list of logs being edited in one
   place. The view reads from it and writes to it through an explicit API.
2. Decoupling: The volume functions stay pure. They receive the entries as
   input and never mutate them.

Classes:
    LogEntry: One row of the form (raw text + selected units).
    LogBook: The never-empty, ordered container of LogEntry rows.
"""
from __future__ import annotations

from dataclasses import dataclass, fields
import logging
from typing import Any, Iterator

from ghanfoot.config import DEFAULT_LENGTH_UNIT, DEFAULT_CIRCUMFERENCE_UNIT
from ghanfoot.model.volume import VolumeResult, compute_detailed, aggregate_total

logger = logging.getLogger(__name__)

# Accept the record's documented camelCase field names (lengthUnit, circumferenceUnit)
FIELD_ALIASES: dict[str, str] = {
    "lengthUnit": "length_unit",
    "circumferenceUnit": "circumference_unit",
}


@dataclass
class LogEntry:
    """
    One log as typed by the user.
    `length` and `circumference` are kept as text; they are parsed only when
    a volume is computed.
    """
    length: str = ""
    circumference: str = ""
    length_unit: str = DEFAULT_LENGTH_UNIT
    circumference_unit: str = DEFAULT_CIRCUMFERENCE_UNIT


class LogBook:
    """
    Ordered list of logs. Always holds at least one entry.
    Entries are addressed by index only.
    """

    def __init__(self) -> None:
        self._entries: list[LogEntry] = [LogEntry()]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[LogEntry]:
        return iter(self._entries)

    def __getitem__(self, index: int) -> LogEntry:
        return self._entries[index]

    @property
    def entries(self) -> tuple[LogEntry, ...]:
        return tuple(self._entries)

    def add_log(self) -> int:
        """Append an empty log with default units and return its index."""
        self._entries.append(LogEntry())
        index = len(self._entries) - 1
        logger.debug(f"Added log #{index + 1}.")
        return index

    def update_log(self, index: int, field: str, value: Any) -> None:
        """Set a single field of the log at `index`."""
        name = FIELD_ALIASES.get(field, field)
        if name not in {f.name for f in fields(LogEntry)}:
            raise ValueError(f"LogEntry has no field '{field}'.")

        entry = self._entries[index]
        setattr(entry, name, value)
        logger.debug(f"Log #{index + 1}: {name} = {value!r}")

    def remove_log(self, index: int) -> bool:
        """
        Remove the log at `index`.
        Does nothing and returns False when it is the only log left.
        """
        if not -len(self._entries) <= index < len(self._entries):
            raise IndexError(f"No log at index {index}.")
        if len(self._entries) == 1:
            logger.debug("Refusing to remove the last remaining log.")
            return False

        del self._entries[index]
        logger.debug(f"Removed log #{index + 1}, {len(self._entries)} left.")
        return True

    def reset(self) -> None:
        """Clear all logs, leaving one empty row."""
        self._entries = [LogEntry()]
        logger.info("Log book has been reset.")

    def volume_of(self, index: int) -> VolumeResult:
        entry = self._entries[index]
        return compute_detailed(
            entry.length,
            entry.circumference,
            entry.length_unit,
            entry.circumference_unit,
        )

    def total(self) -> str:
        return aggregate_total(self._entries)
