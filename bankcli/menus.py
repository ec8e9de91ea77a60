"""Login, the main menu and the transaction and user-management sub-menus."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Callable, NamedTuple, Sequence

from .client import DEFAULT_PATH as DEFAULT_CLIENTS_PATH
from .client import SEPARATOR, ClientRepository
from .client_screens import (
    add_new_client_screen,
    client_list_screen,
    delete_client_screen,
    deposit_screen,
    find_client_screen,
    update_client_screen,
    withdraw_screen,
)
from .dates import system_time_string
from .session import Session
from .user import DEFAULT_PATH as DEFAULT_USERS_PATH
from .user import Permission, UserRepository, empty_user
from .user_screens import (
    add_new_user_screen,
    delete_user_screen,
    find_user_screen,
    update_user_screen,
    users_list_screen,
)

DEFAULT_LOG_PATH = "RejesterFile.txt"

_MAIN_OPTIONS = (
    "\t\t\t\t[1] Show Client List\n"
    "\t\t\t\t[2] Add New Client \n"
    "\t\t\t\t[3] Delet Client\n"
    "\t\t\t\t[4] Update Client Info\n"
    "\t\t\t\t[5] Find Client\n"
    "\t\t\t\t[6] Trancaction\n"
    "\t\t\t\t[7] Manage Users\n"
    "\t\t\t\t[8] LogOut\n"
)
_TRANSACTION_OPTIONS = (
    "[1] Deposite\n"
    "[2] withDraw\n"
    "[3] Total Balance\n"
    "[4] Main Menue\n"
)
_MANAGE_USERS_OPTIONS = (
    "[1] List Users\n"
    "[2] Add New Yousers\n"
    "[3] DeletUsers\n"
    "[4] Update Users\n"
    "[5] Find User\n"
    "[6] Main Menue\n"
)
_ASK_CHOICE = "enter Number you Want It\n"
_BACK_TO_TRANSACTIONS = "Enter 1 to go to TransactionMenue\n"
_BACK_TO_MANAGE_USERS = "Enter 1 to go to ManageUsers Screen\n"
_RETURN_TO_MAIN = "\nEnter 1 to return to Main Menue\n"
_GO_TO_MAIN = "Enter 1 to go to Main Menue\n"
_LOGOUT = 8


class _MainEntry(NamedTuple):
    permission: Permission
    action: Callable[[Session], object]
    back_prompt: str | None


def record_login(session: Session, path: str | Path = DEFAULT_LOG_PATH) -> None:
    """Append a time-stamped line about the logged-in user to the login log."""
    user = session.current_user
    line = (
        f"{system_time_string()}{user.user_name}{SEPARATOR}"
        f"{user.password}{SEPARATOR}{user.permissions}\n"
    )
    with Path(path).open("a", encoding="utf-8") as handle:
        handle.write(line)


def _read_choice(session: Session) -> int | None:
    """Read one word as a menu number; None when it is not a number."""
    token = session.prompter.read_token()
    try:
        return int(token)
    except ValueError:
        return None


def _go_back(session: Session, prompt: str) -> bool:
    """Ask whether to show the menu again; only an answer of 1 says yes."""
    session.prompter.say(prompt)
    if _read_choice(session) == 1:
        session.clear_screen()
        return True
    return False


def transaction_menu(session: Session) -> None:
    """Offer deposits and withdrawals until the user goes back."""
    prompter = session.prompter
    while True:
        session.header("TransactionScreen")
        prompter.say(_TRANSACTION_OPTIONS)
        prompter.say(_ASK_CHOICE)
        choice = _read_choice(session)
        if choice == 1:
            session.clear_screen()
            deposit_screen(session)
        elif choice == 2:
            session.clear_screen()
            withdraw_screen(session)
        elif choice == 3:
            session.clear_screen()
            prompter.say("This Is Total Balance Screen\n")
        else:
            if choice == 4:
                session.clear_screen()
            return
        if not _go_back(session, _BACK_TO_TRANSACTIONS):
            return


_MANAGE_USERS_SCREENS: dict[int, Callable[[Session], object]] = {
    1: users_list_screen,
    2: add_new_user_screen,
    3: delete_user_screen,
    4: update_user_screen,
    5: find_user_screen,
}


def manage_users_menu(session: Session) -> None:
    """Offer the user-management screens until the user goes back."""
    prompter = session.prompter
    while True:
        session.header("ManageUsers Screen")
        prompter.say(_MANAGE_USERS_OPTIONS)
        prompter.say(_ASK_CHOICE)
        choice = _read_choice(session)
        screen = _MANAGE_USERS_SCREENS.get(choice) if choice is not None else None
        if screen is None:
            if choice == 6:
                session.clear_screen()
            return
        session.clear_screen()
        screen(session)
        if not _go_back(session, _BACK_TO_MANAGE_USERS):
            return


_MAIN_ENTRIES: dict[int, _MainEntry] = {
    1: _MainEntry(Permission.LIST_CLIENTS, client_list_screen, _RETURN_TO_MAIN),
    2: _MainEntry(Permission.ADD_NEW_CLIENT, add_new_client_screen, "\n" + _GO_TO_MAIN),
    3: _MainEntry(Permission.DELETE_CLIENT, delete_client_screen, _GO_TO_MAIN),
    4: _MainEntry(Permission.UPDATE_CLIENTS, update_client_screen, _GO_TO_MAIN),
    5: _MainEntry(Permission.FIND_CLIENT, find_client_screen, _GO_TO_MAIN),
    6: _MainEntry(Permission.TRANSACTIONS, transaction_menu, None),
    7: _MainEntry(Permission.MANAGE_USERS, manage_users_menu, None),
}


def main_menu(session: Session) -> None:
    """Show the main menu and run the chosen screens until logout or leaving."""
    prompter = session.prompter
    while True:
        session.header("Main Screan")
        prompter.say(_MAIN_OPTIONS)
        record_login(session)
        prompter.say("Choise What you Need\n")
        choice = prompter.read_int_between(1, _LOGOUT)
        session.clear_screen()
        if choice == _LOGOUT:
            session.log_out()
            return

        entry = _MAIN_ENTRIES[choice]
        if not session.current_user.has_permission(entry.permission):
            session.access_denied()
            if _go_back(session, _RETURN_TO_MAIN):
                continue
            return

        entry.action(session)
        if entry.back_prompt is None:
            continue
        if not _go_back(session, entry.back_prompt):
            return


def login_screen(session: Session) -> None:
    """Ask for credentials over and over; return once too many attempts failed."""
    prompter = session.prompter
    session.clear_screen()
    session.header("Welcome To You In Login Screen")
    while True:
        prompter.say("Enter UserName And Passowrd\n")
        prompter.say("Enter UsserName")
        user_name = prompter.read_token()
        prompter.say("Enter Password")
        secret = prompter.read_token()

        user = session.users.find(user_name, secret)
        if user is None:
            session.current_user = empty_user()
            prompter.say("This Is Invalid UserName Or Passowrd")
            session.failed_logins += 1
            if session.failed_logins > 3:
                break
        else:
            session.current_user = user
            main_menu(session)

    prompter.say("You Are Blocked Becaudse U Enter Password Three Time Wrong")
    prompter.say("enter Enty thing to end")
    try:
        prompter.read_line()
    except EOFError:
        pass


def run(session: Session | None = None) -> int:
    """Run the login loop; 1 when the user got blocked, 0 when input ran out."""
    session = session if session is not None else Session()
    try:
        login_screen(session)
    except EOFError:
        return 0
    return 1


def main(argv: Sequence[str] | None = None) -> int:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(prog="bankcli", description="Console bank system.")
    parser.add_argument("--clients", default=DEFAULT_CLIENTS_PATH, help="clients file")
    parser.add_argument("--users", default=DEFAULT_USERS_PATH, help="users file")
    args = parser.parse_args(argv)
    session = Session(
        clients=ClientRepository(args.clients),
        users=UserRepository(args.users),
    )
    return run(session)