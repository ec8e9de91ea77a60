"""Range checks and console input that keeps asking until it gets a valid answer."""

from __future__ import annotations

import sys
from typing import TextIO

from .dates import Date

_INVALID_NUMBER = "Invalid Number, Enter again\n"
_OUT_OF_RANGE = "Number is not within range, Enter again:\n"


def is_number_between(number: float, low: float, high: float) -> bool:
    """Tell whether ``low <= number <= high``."""
    return low <= number <= high


def is_date_between(date: Date, start: Date, end: Date) -> bool:
    """Tell whether the date lies between the two bounds, inclusive, in either order."""
    if not date.is_before(start) and not date.is_after(end):
        return True
    return not date.is_before(end) and not date.is_after(start)


class Prompter:
    """Reads whitespace-separated tokens and lines from a text stream and writes prompts."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self._buffer = ""

    def say(self, text: str) -> None:
        """Write text without adding a newline."""
        self.stdout.write(text)
        self.stdout.flush()

    def _fill(self) -> None:
        line = self.stdin.readline()
        if not line:
            raise EOFError("end of input")
        self._buffer += line

    def _skip_whitespace(self) -> None:
        while True:
            self._buffer = self._buffer.lstrip()
            if self._buffer:
                return
            self._fill()

    def _discard_line(self) -> None:
        newline = self._buffer.find("\n")
        self._buffer = self._buffer[newline + 1:] if newline >= 0 else ""

    def read_token(self) -> str:
        """The next whitespace-separated word, reading more lines as needed."""
        self._skip_whitespace()
        parts = self._buffer.split(maxsplit=1)
        token = parts[0]
        self._buffer = self._buffer[len(token):]
        return token

    def read_line(self) -> str:
        """The rest of the current line, or the next line if nothing is pending."""
        if not self._buffer:
            self._fill()
        newline = self._buffer.find("\n")
        if newline < 0:
            line, self._buffer = self._buffer, ""
        else:
            line, self._buffer = self._buffer[:newline], self._buffer[newline + 1:]
        return line.rstrip("\r")

    def read_string(self) -> str:
        """Skip leading whitespace, blank lines included, then read the rest of the line."""
        self._skip_whitespace()
        return self.read_line()

    def read_int(self, error_message: str = _INVALID_NUMBER) -> int:
        """Read an integer, discarding the line and asking again on bad input."""
        while True:
            token = self.read_token()
            try:
                return int(token)
            except ValueError:
                self._discard_line()
                self.say(error_message)

    def read_int_between(self, low: int, high: int, error_message: str = _OUT_OF_RANGE) -> int:
        """Read an integer until one within ``low..high`` is given."""
        number = self.read_int()
        while not is_number_between(number, low, high):
            self.say(error_message)
            number = self.read_int()
        return number

    def read_float(self, error_message: str = _INVALID_NUMBER) -> float:
        """Read a number, discarding the line and asking again on bad input."""
        while True:
            token = self.read_token()
            try:
                return float(token)
            except ValueError:
                self._discard_line()
                self.say(error_message)

    def read_float_between(
        self, low: float, high: float, error_message: str = _OUT_OF_RANGE
    ) -> float:
        """Read a number until one within ``low..high`` is given."""
        number = self.read_float()
        while not is_number_between(number, low, high):
            self.say(error_message)
            number = self.read_float()
        return number

    def read_yes(self) -> bool:
        """Read one non-blank character and tell whether it is y or Y."""
        self._skip_whitespace()
        answer, self._buffer = self._buffer[0], self._buffer[1:]
        return answer in "yY"