"""Month calendars and bookable half-hour slots."""

from __future__ import annotations

import calendar
from datetime import date

from srcm.citas import SCHEDULED, Appointment, AppointmentBook

HOURS = (
    "08:00", "08:30", "09:00", "09:30", "10:00", "10:30", "11:00", "11:30",
    "12:00", "12:30", "13:00", "13:30", "14:00", "14:30", "15:00", "15:30",
    "16:00", "16:30", "17:00", "17:30", "18:00", "18:30", "19:00", "19:30",
)
MAX_MONTHS = 6
_REASON_MAX = 99


def days_in_month(month: int, year: int) -> int:
    if month == 2:
        return 29 if calendar.isleap(year) else 28
    return 30 if month in (4, 6, 9, 11) else 31


def upcoming_months(month: int, year: int, count: int = MAX_MONTHS) -> list[tuple[int, int]]:
    """``count`` consecutive (month, year) pairs starting at the given month."""
    months = []
    for _ in range(count):
        months.append((month, year))
        month += 1
        if month > 12:
            month = 1
            year += 1
    return months


def render_available_hours(book: AppointmentBook, day: int, month: int, year: int) -> str:
    lines = [f"\nHoras disponibles para {day}-{month}-{year}:\n"]
    for hour in HOURS:
        taken = book.is_slot_taken(day, month, year, hour)
        lines.append(f"{hour} (Reservado)\n" if taken else f"{hour}\n")
    return "".join(lines)


def render_month(book: AppointmentBook, month: int, year: int) -> str:
    """A month grid, Monday first, with booked days in brackets."""
    parts = [f"\nCalendario para {month}-{year}\n", "  Lu Ma Mi Ju Vi Sa Do\n"]
    start = date(year, month, 1).isoweekday()
    total = days_in_month(month, year)
    parts.append("   " * (start - 1))
    for day in range(1, total + 1):
        parts.append(f"[{day:2d}]" if book.has_booking_on(day, month, year) else f" {day:2d} ")
        if (day + start - 1) % 7 == 0 or day == total:
            parts.append("\n")
    return "".join(parts)


def render_upcoming(book: AppointmentBook, today: date) -> str:
    return "".join(
        render_month(book, month, year)
        for month, year in upcoming_months(today.month, today.year, MAX_MONTHS)
    )


def reserve(
    book: AppointmentBook,
    patient_id: int,
    day: int,
    month: int,
    year: int,
    slot_index: int,
    doctor_id: int,
    reason: str,
) -> Appointment:
    """Book a scheduled appointment and save the book."""
    if not 1 <= month <= MAX_MONTHS:
        raise ValueError(f"invalid month: {month}")
    if not 0 <= slot_index < len(HOURS):
        raise ValueError(f"invalid hour index: {slot_index}")
    appointment = Appointment(
        id=book.next_id(),
        patient_id=patient_id,
        doctor_id=doctor_id,
        day=day,
        month=month,
        year=year,
        time=HOURS[slot_index],
        status=SCHEDULED,
        reason=reason[:_REASON_MAX],
    )
    book.add(appointment)
    book.save()
    return appointment