"""Thin wrapper around the SQLite database file."""

from __future__ import annotations

import sqlite3
from os import PathLike
from typing import Optional, Union


class DatabaseError(Exception):
    """Raised when the database cannot be opened or a statement fails."""


class Database:
    """An SQLite database that is opened explicitly or used as a context manager."""

    DEFAULT_PATH = "data/citas_medicas.db"

    def __init__(self, path: Union[str, "PathLike[str]"] = DEFAULT_PATH) -> None:
        self.path = path
        self._connection: Optional[sqlite3.Connection] = None

    @property
    def is_open(self) -> bool:
        return self._connection is not None

    def open(self) -> None:
        """Open the database file."""
        try:
            self._connection = sqlite3.connect(self.path)
        except sqlite3.Error as exc:
            raise DatabaseError(f"could not open database: {exc}") from exc

    def close(self) -> bool:
        """Close the database; return False if it was not open."""
        if self._connection is None:
            return False
        self._connection.close()
        self._connection = None
        return True

    def _require(self) -> sqlite3.Connection:
        if self._connection is None:
            raise DatabaseError("database is not open")
        return self._connection

    def execute(self, sql: str) -> None:
        """Run one or more SQL statements."""
        connection = self._require()
        try:
            connection.executescript(sql)
            connection.commit()
        except sqlite3.Error as exc:
            raise DatabaseError(f"error executing query: {exc}") from exc

    def table_names(self) -> list[str]:
        """Names of the tables in the database."""
        connection = self._require()
        try:
            rows = connection.execute("SELECT name FROM sqlite_master WHERE type='table';").fetchall()
        except sqlite3.Error as exc:
            raise DatabaseError(f"error listing tables: {exc}") from exc
        return [name for (name,) in rows]

    def __enter__(self) -> "Database":
        self.open()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()