"""Medical appointments kept as a comma-separated text file."""

from __future__ import annotations

import re
from dataclasses import dataclass
from os import PathLike
from typing import Iterator, Union

MAX_CITAS = 1000

SCHEDULED = "Programada"
CANCELLED = "Cancelada"
COMPLETED = "Completada"

_TIME_MAX = 19
_STATUS_MAX = 19
_REASON_MAX = 99

_INT = r"\s*([+-]?\d+)"
_LINE_RE = re.compile(
    ",".join([_INT] * 6)
    + rf",([^,]{{1,{_TIME_MAX}}}),([^,]{{1,{_STATUS_MAX}}}),([^\n]{{1,{_REASON_MAX}}})"
)


class AppointmentNotFoundError(LookupError):
    """Raised when no appointment matches the request."""


@dataclass
class Appointment:
    id: int
    patient_id: int
    doctor_id: int
    day: int
    month: int
    year: int
    time: str
    status: str
    reason: str


def parse_appointment_line(line: str) -> Appointment:
    """Parse one stored appointment line; raises ``ValueError`` if it is malformed."""
    match = _LINE_RE.fullmatch(line.rstrip("\n"))
    if not match:
        raise ValueError(f"malformed appointment line: {line!r}")
    *numbers, time, status, reason = match.groups()
    return Appointment(*(int(number) for number in numbers), time, status, reason)


def format_appointment_line(appointment: Appointment) -> str:
    """Render an appointment as a stored line, newline included."""
    a = appointment
    return (
        f"{a.id},{a.patient_id},{a.doctor_id},{a.day},{a.month},{a.year},"
        f"{a.time},{a.status},{a.reason}\n"
    )


class AppointmentBook:
    """All appointments of the system."""

    DEFAULT_PATH = "data/citas.txt"

    def __init__(self, path: Union[str, "PathLike[str]"] = DEFAULT_PATH) -> None:
        self.path = path
        self.appointments: list[Appointment] = []

    def load(self) -> None:
        """Replace the appointments with those in the file, stopping at the first bad line."""
        self.appointments = []
        with open(self.path, encoding="utf-8") as handle:
            for line in handle:
                if not line.strip():
                    continue
                try:
                    self.appointments.append(parse_appointment_line(line))
                except ValueError:
                    break
                if len(self.appointments) >= MAX_CITAS:
                    break

    def save(self) -> None:
        with open(self.path, "w", encoding="utf-8") as handle:
            handle.writelines(format_appointment_line(a) for a in self.appointments)

    def add(self, appointment: Appointment) -> None:
        """Append an appointment; raises ``ValueError`` when the book is full."""
        if len(self.appointments) >= MAX_CITAS:
            raise ValueError("appointment book is full")
        self.appointments.append(appointment)

    def next_id(self) -> int:
        return len(self.appointments) + 1

    def scheduled(self) -> list[Appointment]:
        return [a for a in self.appointments if a.status == SCHEDULED]

    def for_doctor(self, doctor_id: int) -> list[Appointment]:
        return [a for a in self.appointments if a.doctor_id == doctor_id]

    def cancel(self, appointment_id: int) -> Appointment:
        """Cancel a scheduled appointment and save the book."""
        for appointment in self.appointments:
            if appointment.id == appointment_id and appointment.status == SCHEDULED:
                appointment.status = CANCELLED
                self.save()
                return appointment
        raise AppointmentNotFoundError(
            f"no scheduled appointment with id {appointment_id}"
        )

    def reschedule(self, appointment_id: int, new_time: str) -> Appointment:
        """Change the time of an appointment (not saved)."""
        for appointment in self.appointments:
            if appointment.id == appointment_id:
                appointment.time = new_time[:_TIME_MAX]
                return appointment
        raise AppointmentNotFoundError(f"no appointment with id {appointment_id}")

    def update_status(self, appointment_id: int, doctor_id: int, status: str) -> Appointment:
        """Set the status of one of a doctor's appointments (not saved)."""
        for appointment in self.appointments:
            if appointment.id == appointment_id and appointment.doctor_id == doctor_id:
                appointment.status = status[:_STATUS_MAX]
                return appointment
        raise AppointmentNotFoundError(
            f"no appointment with id {appointment_id} for doctor {doctor_id}"
        )

    def is_slot_taken(self, day: int, month: int, year: int, time: str) -> bool:
        return any(
            a.day == day and a.month == month and a.year == year
            and a.time == time and a.status == SCHEDULED
            for a in self.appointments
        )

    def has_booking_on(self, day: int, month: int, year: int) -> bool:
        return any(
            a.day == day and a.month == month and a.year == year and a.status == SCHEDULED
            for a in self.appointments
        )

    def format_scheduled(self) -> str:
        parts = ["\n======= CITAS PROGRAMADAS =======\n"]
        parts.extend(
            f"ID: {a.id} - Fecha: {a.day}-{a.month}-{a.year} {a.time} - Motivo: {a.reason}\n"
            for a in self.scheduled()
        )
        return "".join(parts)

    def format_history(self) -> str:
        parts = ["\n======= HISTORIAL DE CITAS =======\n"]
        parts.extend(
            f"ID: {a.id} - Fecha: {a.day}-{a.month}-{a.year} {a.time} - "
            f"Estado: {a.status} - Motivo: {a.reason}\n"
            for a in self.appointments
        )
        return "".join(parts)

    def format_doctor_listing(self, doctor_id: int) -> str:
        parts = ["\n======= CITAS ASIGNADAS =======\n"]
        for a in self.for_doctor(doctor_id):
            parts.append(
                f"ID Cita: {a.id}\n"
                f"Paciente ID: {a.patient_id}\n"
                f"Fecha: {a.time}\n"
                f"Estado: {a.status}\n"
                f"Motivo: {a.reason}\n"
                "-------------------------------\n"
            )
        return "".join(parts)

    def __len__(self) -> int:
        return len(self.appointments)

    def __iter__(self) -> Iterator[Appointment]:
        return iter(self.appointments)