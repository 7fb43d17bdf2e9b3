"""System configuration stored as ``key=value`` lines."""

from __future__ import annotations

import re
from dataclasses import dataclass
from os import PathLike
from typing import Union

PathType = Union[str, "PathLike[str]"]

_LINE_RE = re.compile(r"([^=]+)=\s*(\S+)")
_INT_RE = re.compile(r"\s*([+-]?\d+)")


def _atoi(text: str) -> int:
    match = _INT_RE.match(text)
    return int(match.group(1)) if match else 0


_FIELDS = {
    "nombre_base_datos": ("database_name", str),
    "puerto_servidor": ("server_port", _atoi),
    "log_path": ("log_path", str),
    "max_conexiones": ("max_connections", _atoi),
    "modo_debug": ("debug_mode", _atoi),
}


@dataclass
class Config:
    """Settings of the appointment server."""

    database_name: str = ""
    server_port: int = 0
    log_path: str = ""
    max_connections: int = 0
    debug_mode: int = 0

    def apply_line(self, line: str) -> None:
        """Apply one ``key=value`` line; unknown keys and malformed lines are ignored."""
        match = _LINE_RE.match(line)
        if not match:
            return
        key, value = match.groups()
        field = _FIELDS.get(key)
        if field is None:
            return
        name, convert = field
        setattr(self, name, convert(value))

    @classmethod
    def load(cls, path: PathType) -> "Config":
        """Read a configuration file; raises ``OSError`` if it cannot be opened."""
        config = cls()
        with open(path, encoding="utf-8") as handle:
            for line in handle:
                config.apply_line(line)
        return config

    def save(self, path: PathType) -> None:
        """Write the configuration in the same ``key=value`` form."""
        with open(path, "w", encoding="utf-8") as handle:
            handle.write(f"nombre_base_datos={self.database_name}\n")
            handle.write(f"puerto_servidor={self.server_port}\n")
            handle.write(f"log_path={self.log_path}\n")
            handle.write(f"max_conexiones={self.max_connections}\n")
            handle.write(f"modo_debug={self.debug_mode}\n")