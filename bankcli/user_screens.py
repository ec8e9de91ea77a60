"""Console screens that list, add, change, find and remove system users."""

from __future__ import annotations

from typing import Iterable

from .session import Session
from .user import (
    DuplicateUserError,
    EmptyUserError,
    Permission,
    User,
    empty_user,
    new_user,
)

_CARD_RULE = "_" * 19
_TABLE_RULE = "_" * 101
_INDENT = " " * 8
_NOT_FOUND = "\nUser is not found, choose another one: "

_PERMISSION_QUESTIONS = (
    ("\nShow Client List? y/n? ", Permission.LIST_CLIENTS),
    ("\nAdd New Client? y/n? ", Permission.ADD_NEW_CLIENT),
    ("\nDelete Client? y/n? ", Permission.DELETE_CLIENT),
    ("\nUpdate Client? y/n? ", Permission.UPDATE_CLIENTS),
    ("\nFind Client? y/n? ", Permission.FIND_CLIENT),
    ("\nTransactions? y/n? ", Permission.TRANSACTIONS),
    ("\nManage Users? y/n? ", Permission.MANAGE_USERS),
)


def user_card(user: User) -> str:
    """The text block that shows one user's details."""
    return (
        "\nUser Card:"
        f"\n{_CARD_RULE}"
        f"\nFirstName   : {user.first_name}"
        f"\nLastName    : {user.last_name}"
        f"\nFull Name   : {user.full_name()}"
        f"\nEmail       : {user.email}"
        f"\nPhone       : {user.phone}"
        f"\nUser Name   : {user.user_name}"
        f"\nPassword    : {user.password}"
        f"\nPermissions : {user.permissions}"
        f"\n{_CARD_RULE}\n"
    )


def _rule_line() -> str:
    return f"{_INDENT}\n\t{_TABLE_RULE}\n\n"


def _record_line(user: User) -> str:
    return (
        f"{_INDENT}| {user.user_name:<12}"
        f"| {user.full_name():<25}"
        f"| {user.phone:<12}"
        f"| {user.email:<20}"
        f"| {user.password:<10}"
        f"| {str(user.permissions):<12}"
    )


def user_table(users: Iterable[User]) -> str:
    """A table with one row per user."""
    users = list(users)
    parts = [
        _rule_line(),
        f"{_INDENT}| {'UserName':<12}",
        f"| {'Full Name':<25}",
        f"| {'Phone':<12}",
        f"| {'Email':<20}",
        f"| {'Password':<10}",
        f"| {'Permissions':<12}",
        _rule_line(),
    ]
    if not users:
        parts.append("\t\t\t\tNo Users Available In the System!")
    else:
        parts.extend(_record_line(user) + "\n" for user in users)
    parts.append(_rule_line())
    return "".join(parts)


def read_permissions(session: Session) -> int:
    """Ask which rights to grant and return the permission mask; -1 is full access."""
    prompter = session.prompter
    prompter.say("\nDo you want to give full access? y/n? ")
    if prompter.read_yes():
        return int(Permission.ALL)
    prompter.say("\nDo you want to give access to : \n ")
    mask = 0
    for question, permission in _PERMISSION_QUESTIONS:
        prompter.say(question)
        if prompter.read_yes():
            mask |= permission
    return mask


def read_user_info(session: Session, user: User) -> User:
    """Ask for the user's details and permissions and fill them in."""
    prompter = session.prompter
    prompter.say("\nEnter FirstName: ")
    user.first_name = prompter.read_string()
    prompter.say("\nEnter LastName: ")
    user.last_name = prompter.read_string()
    prompter.say("\nEnter Email: ")
    user.email = prompter.read_string()
    prompter.say("\nEnter Phone: ")
    user.phone = prompter.read_string()
    prompter.say("\nEnter Password: ")
    user.password = prompter.read_string()
    prompter.say("\nEnter Permission: ")
    user.permissions = read_permissions(session)
    return user


def _ask_existing_user(session: Session, prompt: str, not_found: str = _NOT_FOUND) -> User:
    """Ask for a user name until one that is stored is given."""
    prompter = session.prompter
    prompter.say(prompt)
    while True:
        user = session.users.find(prompter.read_string())
        if user is not None:
            return user
        prompter.say(not_found)


def users_list_screen(session: Session) -> list[User]:
    """Show every stored user."""
    users = session.users.all()
    session.header("\t  User List Screen", f"\t    ({len(users)}) User(s).")
    session.prompter.say(user_table(users))
    return users


def add_new_user_screen(session: Session) -> User:
    """Ask for a fresh user name and details, then store the new user."""
    session.header("\t  Add New User Screen")
    prompter = session.prompter
    prompter.say("\nPlease Enter UserName: ")
    user_name = prompter.read_string()
    while session.users.exists(user_name):
        prompter.say("\nUserName Is Already Used, Choose another one: ")
        user_name = prompter.read_string()

    user = read_user_info(session, new_user(user_name))
    try:
        session.users.save(user)
    except EmptyUserError:
        prompter.say("\nError User was not saved because it's Empty")
    except DuplicateUserError:
        prompter.say("\nError User was not saved because UserName is used!\n")
    else:
        prompter.say("\nUser Addeded Successfully :-)\n")
        prompter.say(user_card(user))
    return user


def delete_user_screen(session: Session) -> bool:
    """Ask for a user and remove it once confirmed; tell whether it was removed."""
    session.header("\tDelete User Screen")
    prompter = session.prompter
    user = _ask_existing_user(session, "\nPlease Enter UserName: ")
    prompter.say(user_card(user))
    prompter.say("\nAre you sure you want to delete this User y/n? ")
    if not prompter.read_yes():
        return False
    if session.users.delete(user.user_name):
        prompter.say("\nUser Deleted Successfully :-)\n")
        prompter.say(user_card(empty_user()))
        return True
    prompter.say("\nError User Was not Deleted\n")
    return False


def update_user_screen(session: Session) -> User:
    """Ask for a user and, once confirmed, read new details and store them."""
    session.header("\tUpdate User Screen")
    prompter = session.prompter
    user = _ask_existing_user(
        session,
        "\nPlease Enter User UserName: ",
        "\nAccount number is not found, choose another one: ",
    )
    prompter.say(user_card(user))
    prompter.say("\nAre you sure you want to update this User y/n? ")
    if not prompter.read_yes():
        return user

    prompter.say("\n\nUpdate User Info:")
    prompter.say("\n____________________\n")
    read_user_info(session, user)
    try:
        session.users.save(user)
    except EmptyUserError:
        prompter.say("\nError User was not saved because it's Empty")
    else:
        prompter.say("\nUser Updated Successfully :-)\n")
        prompter.say(user_card(user))
    return user


def find_user_screen(session: Session) -> User:
    """Ask for a user name and show that user."""
    session.header("\t  Find User Screen")
    user = _ask_existing_user(session, "\nPlease Enter UserName: ")
    session.prompter.say("\nUser Found :-)\n")
    session.prompter.say(user_card(user))
    return user