"""Registered users kept as a comma-separated text file."""

from __future__ import annotations

import re
from dataclasses import dataclass
from os import PathLike
from typing import Iterator, Optional, Union

MAX_USUARIOS = 100

PATIENT = "Paciente"
DOCTOR = "Medico"
ADMIN = "Admin"

# Longest stored length of each text field.
_NAME_MAX = 49
_KIND_MAX = 19
_PASSWORD_MAX = 49
_EMAIL_MAX = 49
_PHONE_MAX = 14
_ADDRESS_MAX = 99
_DATE_MAX = 19

_LINE_RE = re.compile(
    rf"\s*([+-]?\d+),([^,]{{1,{_NAME_MAX}}}),([^,]{{1,{_KIND_MAX}}}),([^,]{{1,{_PASSWORD_MAX}}}),"
    rf"([^,]{{1,{_EMAIL_MAX}}}),([^,]{{1,{_PHONE_MAX}}}),([^,]{{1,{_ADDRESS_MAX}}}),(\S{{1,{_DATE_MAX}}})\s*"
)


class UserLimitError(Exception):
    """Raised when the registry already holds the maximum number of users."""


class UserNotFoundError(LookupError):
    """Raised when no user has the requested id."""


@dataclass
class User:
    id: int
    name: str
    kind: str
    password: str
    email: str
    phone: str
    address: str
    registered_on: str


def parse_user_line(line: str) -> User:
    """Parse one stored user line; raises ``ValueError`` if it is malformed."""
    match = _LINE_RE.fullmatch(line)
    if not match:
        raise ValueError(f"malformed user line: {line!r}")
    user_id, *fields = match.groups()
    return User(int(user_id), *fields)


def format_user_line(user: User) -> str:
    """Render a user as a stored line, newline included."""
    return (
        f"{user.id},{user.name},{user.kind},{user.password},{user.email},"
        f"{user.phone},{user.address},{user.registered_on}\n"
    )


class UserRegistry:
    """The users of the system, persisted after every change."""

    DEFAULT_PATH = "data/usuarios.txt"

    def __init__(self, path: Union[str, "PathLike[str]"] = DEFAULT_PATH) -> None:
        self.path = path
        self.users: list[User] = []

    def load(self) -> None:
        """Replace the users with those in the file, stopping at the first bad line."""
        self.users = []
        with open(self.path, encoding="utf-8") as handle:
            for line in handle:
                if not line.strip():
                    continue
                try:
                    self.users.append(parse_user_line(line))
                except ValueError:
                    break
                if len(self.users) >= MAX_USUARIOS:
                    break

    def save(self) -> None:
        with open(self.path, "w", encoding="utf-8") as handle:
            handle.writelines(format_user_line(user) for user in self.users)

    def register(
        self,
        name: str,
        password: str,
        kind: str,
        email: str,
        phone: str,
        address: str,
        registered_on: str,
    ) -> User:
        """Add a new user with the next id and save the registry."""
        if len(self.users) >= MAX_USUARIOS:
            raise UserLimitError("maximum number of users reached")
        user = User(
            id=len(self.users) + 1,
            name=name[:_NAME_MAX],
            kind=kind[:_KIND_MAX],
            password=password[:_PASSWORD_MAX],
            email=email[:_EMAIL_MAX],
            phone=phone[:_PHONE_MAX],
            address=address[:_ADDRESS_MAX],
            registered_on=registered_on[:_DATE_MAX],
        )
        self.users.append(user)
        self.save()
        return user

    def authenticate(self, name: str, password: str) -> Optional[User]:
        """Return the first user with this name and password, or None."""
        return next(
            (user for user in self.users if user.name == name and user.password == password),
            None,
        )

    def get(self, user_id: int) -> User:
        for user in self.users:
            if user.id == user_id:
                return user
        raise UserNotFoundError(f"no user with id {user_id}")

    def update(
        self,
        user_id: int,
        name: str,
        kind: str,
        email: str,
        phone: str,
        address: str,
        password: str,
    ) -> User:
        """Replace a user's details and save the registry."""
        user = self.get(user_id)
        user.name = name[:_NAME_MAX]
        user.kind = kind[:_KIND_MAX]
        user.email = email[:_EMAIL_MAX]
        user.phone = phone[:_PHONE_MAX]
        user.address = address[:_ADDRESS_MAX]
        user.password = password[:_PASSWORD_MAX]
        self.save()
        return user

    def remove(self, user_id: int) -> User:
        """Delete a user and save the registry."""
        user = self.get(user_id)
        self.users.remove(user)
        self.save()
        return user

    def doctors(self) -> list[User]:
        return [user for user in self.users if user.kind == DOCTOR]

    def format_listing(self) -> str:
        if not self.users:
            return "No hay usuarios registrados.\n"
        parts = ["======= LISTADO DE USUARIOS =======\n"]
        for user in self.users:
            parts.append(
                f"ID: {user.id}\n"
                f"Nombre: {user.name}\n"
                f"Tipo: {user.kind}\n"
                f"Email: {user.email}\n"
                f"Telefono: {user.phone}\n"
                f"Direccion: {user.address}\n"
                f"Fecha de Registro: {user.registered_on}\n"
                "-------------------------------\n"
            )
        return "".join(parts)

    def format_doctors(self) -> str:
        parts = ["\n======= LISTA DE MÉDICOS =======\n"]
        parts.extend(f"ID: {user.id}, Nombre: {user.name}\n" for user in self.doctors())
        parts.append("--------------------------------\n")
        return "".join(parts)

    def __len__(self) -> int:
        return len(self.users)

    def __iter__(self) -> Iterator[User]:
        return iter(self.users)