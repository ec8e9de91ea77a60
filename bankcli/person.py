"""Contact details shared by bank clients and system users."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Person:
    """A named person with an e-mail address and a phone number."""

    first_name: str = ""
    last_name: str = ""
    email: str = ""
    phone: str = ""

    def full_name(self) -> str:
        """First and last name separated by a space."""
        return f"{self.first_name} {self.last_name}"