"""Console commands: declaration, lookup by name or prefix, and command-line parsing."""

import bisect
import math
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Iterator, List, Optional, Tuple

__all__ = [
    "MAX_PARAMS",
    "ParamType",
    "Param",
    "Command",
    "CommandError",
    "CommandRegistry",
    "format_command_help_message",
]

MAX_PARAMS = 8

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_SEPARATOR_SCAN_LIMIT = 64

_BOOL_RE = re.compile(r"true|false")
_INT_RE = re.compile(r"[+-]?\d+")
_FLOAT_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


class ParamType(Enum):
    """Parameter types; the value is the label used in help messages."""

    NONE = "NONE"
    BOOL = "BOOL"
    INT = "INT"
    FLOAT = "FLOAT"
    STRING = "STRING"
    VECTOR2F = "VEC2F"


@dataclass(frozen=True)
class Param:
    type: ParamType = ParamType.NONE
    name: str = ""
    desc: str = ""


@dataclass(frozen=True)
class Command:
    """A named console command; the callback receives one value per parameter."""

    name: str
    desc: str = ""
    params: Tuple[Param, ...] = ()
    callback: Optional[Callable[..., Any]] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "params", tuple(self.params))
        if len(self.params) > MAX_PARAMS:
            raise ValueError(
                f"command {self.name!r} has {len(self.params)} parameters; "
                f"at most {MAX_PARAMS} are allowed"
            )

    @property
    def active_params(self) -> Tuple[Param, ...]:
        """The parameters before the first one of type NONE."""
        active = []
        for param in self.params:
            if param.type is ParamType.NONE:
                break
            active.append(param)
        return tuple(active)


class CommandError(Exception):
    """A command line could not be resolved or its arguments could not be parsed."""


def _format_param(param: Param) -> str:
    return f"{param.type.value} {param.name}"


def format_command_help_message(command: Command) -> str:
    params = command.active_params
    lines = [command.name + "".join(f" [{_format_param(p)}]" for p in params)]
    lines.append(f"- {command.desc}")
    lines.extend(f"- {p.name}: {p.desc}" for p in params)
    return "\n".join(lines)


class _ParseFailure(Exception):
    pass


class _ArgReader:
    """Reads whitespace-separated values from a command line."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def _skip_whitespace(self) -> None:
        while self.pos < len(self.text) and self.text[self.pos].isspace():
            self.pos += 1

    def read_word(self) -> str:
        self._skip_whitespace()
        start = self.pos
        while self.pos < len(self.text) and not self.text[self.pos].isspace():
            self.pos += 1
        return self.text[start:self.pos]

    def skip_separator(self) -> bool:
        """Consume input up to and including one space; False if input ran out."""
        for _ in range(_SEPARATOR_SCAN_LIMIT):
            if self.pos >= len(self.text):
                return False
            ch = self.text[self.pos]
            self.pos += 1
            if ch == " ":
                break
        return True

    def _match(self, pattern: "re.Pattern[str]") -> str:
        self._skip_whitespace()
        match = pattern.match(self.text, self.pos)
        if not match:
            raise _ParseFailure
        self.pos = match.end()
        return match.group()

    def read_bool(self) -> bool:
        return self._match(_BOOL_RE) == "true"

    def read_int(self) -> int:
        value = int(self._match(_INT_RE))
        if not _INT_MIN <= value <= _INT_MAX:
            raise _ParseFailure
        return value

    def read_float(self) -> float:
        value = float(self._match(_FLOAT_RE))
        if math.isinf(value):
            raise _ParseFailure
        return value

    def read_string(self) -> str:
        if self.pos < len(self.text) and self.text[self.pos] == '"':
            self.pos += 1
            end = self.text.find('"', self.pos)
            if end == -1:
                if self.pos >= len(self.text):
                    raise _ParseFailure
                value = self.text[self.pos:]
                self.pos = len(self.text)
                return value
            value = self.text[self.pos:end]
            self.pos = end + 1
            return value
        word = self.read_word()
        if not word:
            raise _ParseFailure
        return word

    def read(self, param_type: ParamType) -> Any:
        if param_type is ParamType.BOOL:
            return self.read_bool()
        if param_type is ParamType.INT:
            return self.read_int()
        if param_type is ParamType.FLOAT:
            return self.read_float()
        if param_type is ParamType.STRING:
            return self.read_string()
        if param_type is ParamType.VECTOR2F:
            return (self.read_float(), self.read_float())
        return None


class CommandRegistry:
    """Commands kept sorted by name."""

    def __init__(self) -> None:
        self._commands: List[Command] = []

    def __len__(self) -> int:
        return len(self._commands)

    def __iter__(self) -> Iterator[Command]:
        return iter(list(self._commands))

    def clear(self) -> None:
        self._commands.clear()

    def add(self, command: Command) -> None:
        bisect.insort_right(self._commands, command, key=lambda c: c.name)

    def find(self, name: str) -> Optional[Command]:
        index = bisect.bisect_left(self._commands, name, key=lambda c: c.name)
        if index < len(self._commands) and self._commands[index].name == name:
            return self._commands[index]
        return None

    def find_by_prefix(self, prefix: str) -> List[Command]:
        return [c for c in self._commands if c.name.startswith(prefix)]

    def parse_and_execute(self, command_line: str) -> None:
        """Parse a command line and run the command; raise CommandError on failure."""
        reader = _ArgReader(command_line)
        name = reader.read_word()
        if not name:
            return
        command = self.find(name)
        if command is None:
            raise CommandError(f"Unknown command: {name}")
        if command.callback is None:
            raise CommandError(f"Command is missing a callback: {name}")
        args = []
        for param in command.active_params:
            if not reader.skip_separator():
                raise CommandError(f"Missing argument: {_format_param(param)}")
            try:
                args.append(reader.read(param.type))
            except _ParseFailure:
                raise CommandError(f"Invalid argument: {_format_param(param)}") from None
        command.callback(*args)