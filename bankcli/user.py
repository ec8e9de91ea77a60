"""System users, their permissions and their line-based storage file."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from pathlib import Path
from typing import Iterator

from .client import SEPARATOR, Mode
from .person import Person
from .textutil import split

DEFAULT_PATH = "Users.txt"
_FIELD_COUNT = 7


class Permission(IntEnum):
    """Access rights a user may hold, as bits of an integer mask."""

    ALL = -1
    LIST_CLIENTS = 1
    ADD_NEW_CLIENT = 2
    DELETE_CLIENT = 4
    UPDATE_CLIENTS = 8
    FIND_CLIENT = 16
    TRANSACTIONS = 32
    MANAGE_USERS = 64


class UserRecordError(Exception):
    """A stored user record could not be read or saved."""


class EmptyUserError(UserRecordError):
    """An empty user object cannot be saved."""


class DuplicateUserError(UserRecordError):
    """A user with this user name already exists."""


@dataclass
class User(Person):
    """A person allowed to log in, with a password and a permission mask."""

    user_name: str = ""
    password: str = ""
    permissions: int = 0
    mode: Mode = field(default=Mode.ADD_NEW, compare=False)

    def is_empty(self) -> bool:
        """Tell whether this object stands for no user at all."""
        return self.mode is Mode.EMPTY

    def has_permission(self, permission: Permission) -> bool:
        """Tell whether the user's mask holds every bit of ``permission``."""
        if permission == Permission.ALL:
            return True
        return (self.permissions & permission) == permission


def parse_user_line(line: str, separator: str = SEPARATOR) -> User:
    """Build a stored user from one line of the users file."""
    fields = split(line, separator)
    if len(fields) < _FIELD_COUNT:
        raise UserRecordError(f"expected {_FIELD_COUNT} fields, got {len(fields)}: {line!r}")
    first, last, email, phone, user_name, secret, permissions_text = fields[:_FIELD_COUNT]
    try:
        permissions = int(permissions_text)
    except ValueError as exc:
        raise UserRecordError(f"bad permissions {permissions_text!r} in {line!r}") from exc
    return User(first, last, email, phone, user_name, secret, permissions, Mode.UPDATE)


def format_user_line(user: User, separator: str = SEPARATOR) -> str:
    """Render a user as one line of the users file."""
    return separator.join(
        [
            user.first_name,
            user.last_name,
            user.email,
            user.phone,
            user.user_name,
            user.password,
            str(user.permissions),
        ]
    )


def new_user(user_name: str) -> User:
    """A blank user ready to be filled in and added."""
    return User(user_name=user_name, mode=Mode.ADD_NEW)


def empty_user() -> User:
    """The user that stands for nobody, as when no one is logged in."""
    return User(mode=Mode.EMPTY)


class UserRepository:
    """Users kept one per line in a text file."""

    def __init__(self, path: str | Path = DEFAULT_PATH) -> None:
        self.path = Path(path)

    def _iter_users(self) -> Iterator[User]:
        try:
            handle = self.path.open(encoding="utf-8")
        except FileNotFoundError:
            return
        with handle:
            for line in handle:
                line = line.rstrip("\r\n")
                if line:
                    yield parse_user_line(line)

    def _write(self, users: list[User]) -> None:
        with self.path.open("w", encoding="utf-8") as handle:
            handle.writelines(format_user_line(user) + "\n" for user in users)

    def _update(self, user: User) -> bool:
        users = self.all()
        for position, stored in enumerate(users):
            if stored.user_name == user.user_name:
                users[position] = user
                self._write(users)
                return True
        return False

    def _add(self, user: User) -> None:
        with self.path.open("a", encoding="utf-8") as handle:
            handle.write(format_user_line(user) + "\n")

    def all(self) -> list[User]:
        """Every stored user, in file order."""
        return list(self._iter_users())

    def find(self, user_name: str, password: str | None = None) -> User | None:
        """The first user with this name (and password, if given)."""
        for user in self._iter_users():
            if user.user_name == user_name and (password is None or user.password == password):
                return user
        return None

    def exists(self, user_name: str) -> bool:
        """Tell whether a user with this name is stored."""
        return self.find(user_name) is not None

    def save(self, user: User) -> None:
        """Store a new user or update an existing one, as its mode says."""
        if user.mode is Mode.EMPTY:
            raise EmptyUserError("cannot save an empty user")
        if user.mode is Mode.UPDATE:
            self._update(user)
            return
        if self.exists(user.user_name):
            raise DuplicateUserError(f"user {user.user_name!r} already exists")
        self._add(user)
        user.mode = Mode.UPDATE

    def delete(self, user_name: str) -> bool:
        """Remove the user with this name; False if there is none."""
        users = self.all()
        for position, stored in enumerate(users):
            if stored.user_name == user_name:
                del users[position]
                self._write(users)
                return True
        return False