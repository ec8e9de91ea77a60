"""Bank client records and their line-based storage file."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Iterator

from .person import Person
from .textutil import split

SEPARATOR = "#//#"
DEFAULT_PATH = "Yarb.txt"
_FIELD_COUNT = 7


class RecordError(Exception):
    """A stored client record could not be read or saved."""


class EmptyRecordError(RecordError):
    """An empty client object cannot be saved."""


class DuplicateAccountError(RecordError):
    """A client with this account number already exists."""


class Mode(Enum):
    EMPTY = 1
    UPDATE = 2
    ADD_NEW = 3


@dataclass
class Client(Person):
    """A bank client with an account, a PIN code and a balance."""

    account_number: str = ""
    pin_code: str = ""
    balance: float = 0.0
    mode: Mode = field(default=Mode.ADD_NEW, compare=False)

    def is_empty(self) -> bool:
        """Tell whether this object stands for no client at all."""
        return self.mode is Mode.EMPTY


def parse_client_line(line: str, separator: str = SEPARATOR) -> Client:
    """Build a stored client from one line of the clients file."""
    fields = split(line, separator)
    if len(fields) < _FIELD_COUNT:
        raise RecordError(f"expected {_FIELD_COUNT} fields, got {len(fields)}: {line!r}")
    first, last, email, phone, account, pin, balance_text = fields[:_FIELD_COUNT]
    try:
        balance = float(balance_text)
    except ValueError as exc:
        raise RecordError(f"bad balance {balance_text!r} in {line!r}") from exc
    return Client(first, last, email, phone, account, pin, balance, Mode.UPDATE)


def format_client_line(client: Client) -> str:
    """Render a client as one line of the clients file."""
    return SEPARATOR.join(
        [
            client.first_name,
            client.last_name,
            client.email,
            client.phone,
            client.account_number,
            client.pin_code,
            f"{client.balance:.6f}",
        ]
    )


def new_client(account_number: str) -> Client:
    """A blank client ready to be filled in and added."""
    return Client(account_number=account_number, mode=Mode.ADD_NEW)


class ClientRepository:
    """Clients kept one per line in a text file."""

    def __init__(self, path: str | Path = DEFAULT_PATH) -> None:
        self.path = Path(path)

    def _iter_clients(self) -> Iterator[Client]:
        try:
            handle = self.path.open(encoding="utf-8")
        except FileNotFoundError:
            return
        with handle:
            for line in handle:
                line = line.rstrip("\r\n")
                if line:
                    yield parse_client_line(line)

    def _write(self, clients: list[Client]) -> None:
        with self.path.open("w", encoding="utf-8") as handle:
            handle.writelines(format_client_line(client) + "\n" for client in clients)

    def all(self) -> list[Client]:
        """Every stored client, in file order."""
        return list(self._iter_clients())

    def find(self, account_number: str, pin_code: str | None = None) -> Client | None:
        """The first client with this account number (and PIN, if given)."""
        for client in self._iter_clients():
            if client.account_number == account_number and (
                pin_code is None or client.pin_code == pin_code
            ):
                return client
        return None

    def exists(self, account_number: str) -> bool:
        """Tell whether a client with this account number is stored."""
        return self.find(account_number) is not None

    def update(self, client: Client) -> bool:
        """Overwrite the stored client with the same account number."""
        clients = self.all()
        for position, stored in enumerate(clients):
            if stored.account_number == client.account_number:
                clients[position] = client
                self._write(clients)
                return True
        return False

    def add(self, client: Client) -> None:
        """Append the client to the file."""
        with self.path.open("a", encoding="utf-8") as handle:
            handle.write(format_client_line(client) + "\n")

    def save(self, client: Client) -> None:
        """Store a new client or update an existing one, as its mode says."""
        if client.mode is Mode.EMPTY:
            raise EmptyRecordError("cannot save an empty client")
        if client.mode is Mode.UPDATE:
            self.update(client)
            return
        if self.exists(client.account_number):
            raise DuplicateAccountError(f"account {client.account_number!r} already exists")
        self.add(client)
        client.mode = Mode.UPDATE

    def delete(self, account_number: str) -> bool:
        """Remove the client with this account number; False if there is none."""
        clients = self.all()
        for position, stored in enumerate(clients):
            if stored.account_number == account_number:
                del clients[position]
                self._write(clients)
                return True
        return False

    def total_balances(self) -> float:
        """Sum of the balances of all stored clients."""
        return sum(client.balance for client in self._iter_clients())