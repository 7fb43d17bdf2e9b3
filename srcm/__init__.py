"""Medical appointment booking: users, appointments, calendars, history, configuration and SQLite access."""

__version__ = "0.1.0"