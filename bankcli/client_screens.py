"""Console screens that list, add, change, find and move money for bank clients."""

from __future__ import annotations

from typing import Iterable

from .client import (
    Client,
    DuplicateAccountError,
    EmptyRecordError,
    new_client,
)
from .session import Session

_CARD_RULE = "_" * 19
_TABLE_RULE = "_" * 119
_NOT_FOUND = "Enter AccountNumber is not found\n"


def _number(value: float) -> str:
    """Render a number the way a default console stream does (six significant digits)."""
    return f"{value:g}"


def client_card(client: Client) -> str:
    """The text block that shows one client's details."""
    return (
        "\nClient Card:"
        f"\n{_CARD_RULE}"
        f"\nFirstName   : {client.first_name}"
        f"\nLastName    : {client.last_name}"
        f"\nFull Name   : {client.full_name()}"
        f"\nEmail       : {client.email}"
        f"\nPhone       : {client.phone}"
        f"\nAcc. Number : {client.account_number}"
        f"\nPassword    : {client.pin_code}"
        f"\nBalance     : {_number(client.balance)}"
        f"\n{_CARD_RULE}\n"
    )


def client_table(clients: Iterable[Client], total: float) -> str:
    """A table of clients followed by the total of their balances."""
    clients = list(clients)
    parts = [
        f"{_TABLE_RULE}\n",
        f"{'AccountNumber':<20}",
        f"{' ClientName':<20}",
        f"{' Phone':<15}",
        f"{' Email':<20}",
        f"{' PinCode':<10}",
        f"{' AccountBalance':<15}",
        f"\n{_TABLE_RULE}\n",
    ]
    if not clients:
        parts.append("No client Exist In The System")
        return "".join(parts)
    for client in clients:
        parts.append(
            f"{client.account_number:<20}"
            f"{client.full_name():<20}"
            f"{client.phone:<15}"
            f"{client.email:<20}"
            f"{client.pin_code:<10}"
            f"{_number(client.balance):<15}\n"
        )
    parts.append(f"TotalBalance Is  {_number(total)}\n")
    parts.append(f"\n{_TABLE_RULE}\n")
    return "".join(parts)


def read_client_info(session: Session, client: Client) -> Client:
    """Ask for the client's details and fill them in."""
    prompter = session.prompter
    prompter.say("Enter Frist Name\n")
    client.first_name = prompter.read_string()
    prompter.say("Enter Last Name\n")
    client.last_name = prompter.read_line()
    prompter.say("Enter Phone\n")
    client.phone = prompter.read_line()
    prompter.say("Enter Email\n")
    client.email = prompter.read_line()
    prompter.say("Enter PinCode\n")
    client.pin_code = prompter.read_line()
    prompter.say("Enter Balance\n")
    client.balance = prompter.read_float()
    return client


def _ask_existing_client(session: Session, prompt: str) -> Client:
    """Ask for an account number until one that is stored is given."""
    prompter = session.prompter
    prompter.say(prompt)
    while True:
        client = session.clients.find(prompter.read_token())
        if client is not None:
            return client
        prompter.say(_NOT_FOUND)


def add_new_client_screen(session: Session) -> Client:
    """Ask for a fresh account number and details, then store the new client."""
    session.header("AddNewClientScrean")
    prompter = session.prompter
    prompter.say("Please enter your Account Number\n")
    account_number = prompter.read_token()
    while session.clients.exists(account_number):
        prompter.say("Please enter Another Account Number,This Account Exist Already\n")
        account_number = prompter.read_token()

    client = read_client_info(session, new_client(account_number))
    try:
        session.clients.save(client)
    except EmptyRecordError:
        prompter.say("\nEror,this Client isEmpty\n")
    except DuplicateAccountError:
        prompter.say("\nError,Client already Exist\n")
    else:
        prompter.say("\nThis Client Add Successfuly\n")
    prompter.say(client_card(client))
    return client


def client_list_screen(session: Session) -> list[Client]:
    """Show every stored client with the total of their balances."""
    clients = session.clients.all()
    session.header("ClientScrean", f"Number Of Client Is{len(clients)}")
    session.prompter.say(client_table(clients, session.clients.total_balances()))
    return clients


def delete_client_screen(session: Session) -> bool:
    """Ask for a client and remove it once confirmed with 1; tell whether it was removed."""
    session.header("DeletClientScrean")
    prompter = session.prompter
    prompter.say("Hey This is a DeletFunction\n")
    client = _ask_existing_client(session, "Enter AccountNumber's u Want Delet it\n")
    prompter.say(client_card(client))
    prompter.say("Do u Want Delelt?\n")
    if prompter.read_token() != "1":
        return False
    session.clients.delete(client.account_number)
    prompter.say("Deleted Successfuly")
    return True


def deposit_screen(session: Session) -> Client:
    """Add an amount to a client's balance and store it."""
    session.header("DepositeClientScrean")
    prompter = session.prompter
    client = _ask_existing_client(session, "Enter AccountNumber's u Want Deposite to it\n")
    prompter.say(client_card(client))
    prompter.say("How much Do u want to Deposite it\n")
    client.balance += prompter.read_int()
    prompter.say(f"yoir Total Balance Now Is: {_number(client.balance)}")
    session.clients.update(client)
    return client


def withdraw_screen(session: Session) -> Client:
    """Take an amount from a client's balance and store it."""
    session.header("WithDrawScreen")
    prompter = session.prompter
    client = _ask_existing_client(session, "Enter AccountNumber's u Want WithDraw to it\n")
    prompter.say(client_card(client))
    prompter.say("How much Do u want toWithDraw it\n")
    client.balance -= prompter.read_int()
    prompter.say(f"yoir Total Balance Now After With Draw Is: {_number(client.balance)}")
    session.clients.update(client)
    return client


def find_client_screen(session: Session) -> Client:
    """Ask for an account number and show that client."""
    session.header("updatedClientScrean")
    client = _ask_existing_client(session, "Enter AccountNumber's u Want Find it\n")
    session.prompter.say(client_card(client))
    return client


def update_client_screen(session: Session) -> Client:
    """Ask for a client, read new details and store them."""
    session.header("updatedClientScrean")
    client = _ask_existing_client(session, "Enter AccountNumber's u Want Update it\n")
    session.prompter.say(client_card(client))
    read_client_info(session, client)
    session.clients.update(client)
    return client