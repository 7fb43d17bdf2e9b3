# srcm

A library for booking medical appointments. It keeps users, appointments and
appointment history in plain comma-separated text files. It draws six-month
calendars with half-hour slots from 08:00 to 19:30. It also reads and writes
`key=value` configuration files and opens an SQLite database.

## Installation

```
pip install .
```

## Modules

| Module            | What it holds                                                        |
|-------------------|----------------------------------------------------------------------|
| `srcm.usuarios`   | `User`, `UserRegistry`, `parse_user_line`, `format_user_line`         |
| `srcm.citas`      | `Appointment`, `AppointmentBook`, `parse_appointment_line`, `format_appointment_line` |
| `srcm.calendario` | `HOURS`, `days_in_month`, `upcoming_months`, `render_month`, `render_upcoming`, `render_available_hours`, `reserve` |
| `srcm.historial`  | `HistoryEntry`, `History`, `parse_history_line`, `format_history_line` |
| `srcm.config`     | `Config` with `load`, `save` and `apply_line`                         |
| `srcm.database`   | `Database`, `DatabaseError`                                           |

### Files

Each store takes the path of its file. The defaults are:

| Class             | Default path                  |
|-------------------|-------------------------------|
| `UserRegistry`    | `data/usuarios.txt`           |
| `AppointmentBook` | `data/citas.txt`              |
| `History`         | `data/historial_citas.txt`    |
| `Database`        | `data/citas_medicas.db`       |

`load()` replaces the contents with those of the file. It stops at the first
malformed line, and it raises `OSError` if the file cannot be opened.
`save()` writes the whole file again.

## Examples

Booking an appointment and drawing its month:

```python
from srcm.citas import AppointmentBook
from srcm.calendario import reserve, render_month

book = AppointmentBook("data/citas.txt")
book.load()
reserve(book, patient_id=1, day=15, month=3, year=2025,
        slot_index=4, doctor_id=2, reason="Revisión")
print(render_month(book, 3, 2025))
```

`reserve` raises `ValueError` when the month is outside 1–6 or the slot index is
outside 0–23. It saves the book after booking. `AppointmentBook.cancel` cancels
a scheduled appointment and saves. `reschedule` and `update_status` change the
appointment in memory only, so call `save()` afterwards. An unknown id raises
`AppointmentNotFoundError`.

Users:

```python
from srcm.usuarios import UserRegistry

registry = UserRegistry("data/usuarios.txt")
password = "password"
registry.register(name="ana", password=password, kind="Paciente",
                  email="ana@example.com", phone="0", address="Calle 1",
                  registered_on="2025-01-01")
user = registry.authenticate("ana", password)   # None if no match
print(registry.format_listing())
```

`register`, `update` and `remove` save the registry. `register` raises
`UserLimitError` once 100 users are stored. `get`, `update` and `remove` raise
`UserNotFoundError` for an unknown id.

Configuration and database:

```python
from srcm.config import Config
from srcm.database import Database

config = Config.load("config.txt")
config.server_port = 8080
config.save("config.txt")

with Database("data/citas_medicas.db") as db:
    print(db.table_names())
```

## What this package does not do

There is no interactive console and no command to start one. There are no login
or per-role menus, and no activity log. The package gives the storage,
calendar and booking pieces. A program that uses them supplies its own user
interface.

## Tests

```
pip install .[test]
pytest
```