"""History of appointment changes kept as a comma-separated text file."""

from __future__ import annotations

import re
from dataclasses import dataclass
from os import PathLike
from typing import Iterator, Union

MAX_HISTORIAL = 1000

_LINE_RE = re.compile(
    r"\s*([+-]?\d+),\s*([+-]?\d+),\s*([+-]?\d+),([^,]{1,19}),([^,]{1,19}),([^,]{1,99}),(\S.*?)\s*"
)


@dataclass
class HistoryEntry:
    id: int
    patient_id: int
    doctor_id: int
    date: str
    status: str
    reason: str
    modified_at: str


def parse_history_line(line: str) -> HistoryEntry:
    """Parse one stored history line; raises ``ValueError`` if it is malformed."""
    match = _LINE_RE.fullmatch(line)
    if not match:
        raise ValueError(f"malformed history line: {line!r}")
    entry_id, patient, doctor, date, status, reason, modified = match.groups()
    return HistoryEntry(int(entry_id), int(patient), int(doctor), date, status, reason, modified)


def format_history_line(entry: HistoryEntry) -> str:
    """Render an entry as a stored line, newline included."""
    return (
        f"{entry.id},{entry.patient_id},{entry.doctor_id},{entry.date},"
        f"{entry.status},{entry.reason},{entry.modified_at}\n"
    )


class History:
    """The recorded history of appointments."""

    DEFAULT_PATH = "data/historial_citas.txt"

    def __init__(self, path: Union[str, "PathLike[str]"] = DEFAULT_PATH) -> None:
        self.path = path
        self.entries: list[HistoryEntry] = []

    def load(self) -> None:
        """Replace the entries with those in the file, stopping at the first bad line."""
        self.entries = []
        with open(self.path, encoding="utf-8") as handle:
            for line in handle:
                if not line.strip():
                    continue
                try:
                    self.entries.append(parse_history_line(line))
                except ValueError:
                    break
                if len(self.entries) >= MAX_HISTORIAL:
                    break

    def save(self) -> None:
        with open(self.path, "w", encoding="utf-8") as handle:
            handle.writelines(format_history_line(entry) for entry in self.entries)

    def add(self, entry: HistoryEntry) -> None:
        """Append an entry; raises ``ValueError`` when the history is full."""
        if len(self.entries) >= MAX_HISTORIAL:
            raise ValueError("history is full")
        self.entries.append(entry)

    def for_doctor(self, doctor_id: int) -> list[HistoryEntry]:
        return [entry for entry in self.entries if entry.doctor_id == doctor_id]

    def format_doctor_listing(self, doctor_id: int) -> str:
        parts = ["\n======= HISTORIAL DE CITAS =======\n"]
        for entry in self.for_doctor(doctor_id):
            parts.append(
                f"ID Historial: {entry.id}\n"
                f"Paciente ID: {entry.patient_id}\n"
                f"Fecha: {entry.date}\n"
                f"Estado: {entry.status}\n"
                f"Motivo: {entry.reason}\n"
                "-------------------------------\n"
            )
        return "".join(parts)

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[HistoryEntry]:
        return iter(self.entries)