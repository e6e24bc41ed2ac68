"""Menu-driven console front end for a `CourseTable`.

`dispatch` holds all of the behaviour and never touches the console; the
`CatalogShell` loop only reads input, prompts and writes out what `dispatch`
returns.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from enum import IntEnum
from typing import List, Optional, TextIO

from .loader import CatalogLoader
from .table import CourseTable

LOGGER = logging.getLogger(__name__)

WELCOME = "Welcome to the course planner."
FAREWELL = "Thank you for using the course planner!"
MENU = (
    "1. Load Data Structure.",
    "2. Print Course List.",
    "3. Print Course.",
    "9. Exit",
)


class Command(IntEnum):
    LOAD = 1
    PRINT_ALL = 2
    PRINT_ONE = 3
    EXIT = 9

    @property
    def prompt(self) -> Optional[str]:
        """Question asked before dispatching, for commands that take an argument."""
        if self is Command.LOAD:
            return "Enter file name: "
        if self is Command.PRINT_ONE:
            return "What course do you want to know about? "
        return None


_MENU_KEYS = {str(command.value): command for command in Command}


@dataclass(slots=True)
class ShellResult:
    """Console output produced by one dispatched command."""

    lines: List[str] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)
    exit: bool = False


def parse_command(text: str) -> Optional[Command]:
    """Match `text` against the menu keys exactly; anything else is `None`."""
    return _MENU_KEYS.get(text.strip())


def dispatch(
    table: CourseTable,
    command: Command,
    argument: Optional[str] = None,
    loader: Optional[CatalogLoader] = None,
) -> ShellResult:
    """Run `command` against `table` and describe what the user should see."""
    result = ShellResult()

    if command is Command.LOAD:
        loader = loader or CatalogLoader()
        try:
            loader.load(argument or "", table)
        except (OSError, ValueError) as exc:
            LOGGER.warning("Load failed: %s", exc)
            result.errors.append(f"Could not open {argument}.")
        else:
            result.lines.append("Data loaded successfully.")
    elif command is Command.PRINT_ALL:
        result.lines.extend(f"{number}, {title}" for number, title in table.items())
    elif command is Command.PRINT_ONE:
        course = table.search(argument or "")
        if course is None:
            result.errors.append("Course not found.")
        else:
            result.lines.extend(course.describe())
    elif command is Command.EXIT:
        result.lines.append(FAREWELL)
        result.exit = True

    return result


class CatalogShell:
    """Interactive loop over `dispatch`, reading from and writing to text streams."""

    def __init__(
        self,
        table: CourseTable,
        *,
        loader: Optional[CatalogLoader] = None,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
        banner: bool = True,
    ) -> None:
        self.table = table
        self.loader = loader or CatalogLoader()
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self.stderr = stderr or sys.stderr
        self.banner = banner

    def run(self) -> None:
        if self.banner:
            self._emit(self.stdout, [WELCOME])

        while True:
            self._emit(self.stdout, MENU)
            raw = self._read()
            if raw is None:
                break

            command = parse_command(raw)
            if command is None:
                self._emit(self.stderr, [f"{raw} is not a valid option."])
                continue

            argument = None
            if command.prompt is not None:
                self.stdout.write(command.prompt)
                self.stdout.flush()
                argument = self._read()
                if argument is None:
                    break

            result = dispatch(self.table, command, argument, loader=self.loader)
            self._emit(self.stdout, result.lines)
            self._emit(self.stderr, result.errors)
            if result.exit:
                break

    def _read(self) -> Optional[str]:
        line = self.stdin.readline()
        if not line:
            return None
        return line.strip()

    @staticmethod
    def _emit(stream: TextIO, lines) -> None:
        for line in lines:
            stream.write(line + "\n")
        stream.flush()
