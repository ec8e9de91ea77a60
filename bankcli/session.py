"""State shared by every screen: storage, console and the logged-in user."""

from __future__ import annotations

from dataclasses import dataclass, field

from .client import ClientRepository
from .dates import Date
from .user import User, UserRepository, empty_user
from .validate import Prompter

_RULE = "_" * 75
_DENIED_RULE = "_" * 52
_CLEAR = "\033[2J\033[H"


@dataclass
class Session:
    """The repositories, the console and who is logged in."""

    clients: ClientRepository = field(default_factory=ClientRepository)
    users: UserRepository = field(default_factory=UserRepository)
    prompter: Prompter = field(default_factory=Prompter)
    current_user: User = field(default_factory=empty_user)
    failed_logins: int = 0

    def header(self, title: str, subtitle: str = "") -> None:
        """Print a screen title with the current user and today's date."""
        parts = [f"\n{_RULE}\n", f"\t\t\t\t{title}\t\t\t\t"]
        if subtitle:
            parts.append(f"\n\t\t\t\t{subtitle}")
        parts.append(f"\n{_RULE}\n")
        parts.append(f"\t\t\t\t this Is User :{self.current_user.user_name}\t\t\t\t\n")
        parts.append(f"\t\t\t\t Time Now Is :{Date.today()}\n")
        self.prompter.say("".join(parts))

    def access_denied(self) -> None:
        """Tell the user the screen needs a permission they lack."""
        self.prompter.say(
            f"\n{_DENIED_RULE}\n"
            "DisAllowed To Enter To This File ,Don't Have Permisin\n"
            f"{_DENIED_RULE}\n"
        )

    def clear_screen(self) -> None:
        """Clear the terminal when output goes to one."""
        isatty = getattr(self.prompter.stdout, "isatty", None)
        if isatty is not None and isatty():
            self.prompter.say(_CLEAR)

    def log_out(self) -> None:
        """Forget the logged-in user."""
        self.current_user = empty_user()