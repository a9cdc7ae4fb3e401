"""An in-game command console with log history, deferred commands and key bindings."""

import os
from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Deque, Dict, Iterable, Optional, Sequence, Set, Tuple, Union

from .commands import (
    Command,
    CommandError,
    CommandRegistry,
    Param,
    ParamType,
    format_command_help_message,
)

__all__ = ["MAX_HISTORY", "LogKind", "LogEntry", "Console"]

MAX_HISTORY = 512


class LogKind(Enum):
    """Kinds of history lines; the value is the RGBA colour they are shown in."""

    COMMAND = (230, 230, 230, 255)
    LOG = (252, 191, 73, 255)
    ERROR = (220, 50, 47, 255)

    @property
    def color(self) -> Tuple[int, int, int, int]:
        return self.value


@dataclass(frozen=True)
class LogEntry:
    text: str
    kind: LogKind


class Console:
    """Executes command lines, keeps a bounded history and maps keys to commands."""

    def __init__(
        self,
        commands: Optional[CommandRegistry] = None,
        valid_keys: Optional[Iterable[str]] = None,
    ) -> None:
        self.commands = commands if commands is not None else CommandRegistry()
        self._valid_keys: Optional[Set[str]] = (
            None if valid_keys is None else {k.lower() for k in valid_keys}
        )
        self._visible = False
        self.has_focus = False
        self.reclaim_focus = False
        self._sleep_timer = 0.0
        self._queue: Deque[str] = deque()
        self._command_history: Deque[str] = deque(maxlen=MAX_HISTORY)
        self._history_cursor = 0
        self._history: Deque[LogEntry] = deque(maxlen=MAX_HISTORY)
        self._bindings: Dict[str, str] = {}
        self._register_builtin_commands()

    # State

    @property
    def visible(self) -> bool:
        return self._visible

    @visible.setter
    def visible(self, visible: bool) -> None:
        self._visible = visible
        if visible:
            self.reclaim_focus = True
        else:
            self.has_focus = False

    @property
    def history(self) -> Tuple[LogEntry, ...]:
        return tuple(self._history)

    @property
    def command_history(self) -> Tuple[str, ...]:
        return tuple(self._command_history)

    @property
    def pending(self) -> Tuple[str, ...]:
        """Deferred command lines waiting to run."""
        return tuple(self._queue)

    @property
    def sleep_time_left(self) -> float:
        return self._sleep_timer

    @property
    def bindings(self) -> Dict[str, str]:
        return dict(self._bindings)

    def toggle_visible(self) -> None:
        self.visible = not self._visible

    # Frame update

    def update(self, dt: float) -> None:
        if self._sleep_timer > 0.0:
            self._sleep_timer = max(0.0, self._sleep_timer - dt)
        while not self._sleep_timer and self._queue:
            self.execute(self._queue.popleft())

    # Logging

    def clear(self) -> None:
        self._history.clear()

    def sleep(self, seconds: float) -> None:
        """Hold back deferred commands for the given number of seconds."""
        self._sleep_timer = max(0.0, seconds)

    def log(self, message: str) -> None:
        self._history.append(LogEntry(message, LogKind.LOG))

    def log_error(self, message: str, show_console: bool = True) -> None:
        self._history.append(LogEntry(message, LogKind.ERROR))
        if show_console:
            self._visible = True

    # Execution

    def execute(self, command_line: str, defer: bool = False) -> None:
        """Run a command line now, or queue it for the next update when deferred.

        Lines starting with ``//`` are comments and are ignored. Errors are
        written to the history rather than raised.
        """
        if command_line.startswith("//"):
            return
        if defer:
            self._queue.append(command_line)
            return
        self._command_history.append(command_line)
        self._history_cursor = len(self._command_history)
        self._history.append(LogEntry(command_line, LogKind.COMMAND))
        try:
            self.commands.parse_and_execute(command_line)
        except CommandError as error:
            self.log_error(str(error))

    def execute_argv(self, argv: Sequence[str]) -> None:
        """Join program arguments (after the program name) into one command line."""
        if len(argv) == 1:
            return
        self.execute(" ".join(argv[1:]))

    def execute_script_from_file(self, path: Union[str, "os.PathLike[str]"]) -> None:
        """Queue every line of a script file as a deferred command."""
        with open(path, encoding="utf-8") as script:
            lines = script.read().split("\n")
        if lines and lines[-1] == "":
            lines.pop()
        for line in lines:
            self.execute(line, defer=True)

    # Key bindings

    def _normalize_key(self, key: str, action: str) -> str:
        normalized = key.lower()
        if not normalized or (
            self._valid_keys is not None and normalized not in self._valid_keys
        ):
            raise ValueError(f"Failed to {action} key: {key}")
        return normalized

    def bind(self, key: str, command_line: str) -> None:
        self._bindings[self._normalize_key(key, "bind")] = command_line

    def unbind(self, key: str) -> None:
        self._bindings.pop(self._normalize_key(key, "unbind"), None)

    def process_key_press(self, key: str) -> None:
        command_line = self._bindings.get(key.lower())
        if command_line is not None:
            self.execute(command_line)

    # Command-line editing

    def complete(self, prefix: str) -> str:
        """Complete a unique command name; list the candidates when there are several."""
        matches = self.commands.find_by_prefix(prefix)
        if len(matches) == 1:
            return matches[0].name
        for command in matches:
            self.log(command.name)
        return prefix

    def previous_command(self) -> Optional[str]:
        if self._history_cursor > 0 and self._command_history:
            self._history_cursor -= 1
            return self._command_history[self._history_cursor]
        return None

    def next_command(self) -> Optional[str]:
        if self._history_cursor < len(self._command_history) - 1:
            self._history_cursor += 1
            return self._command_history[self._history_cursor]
        return None

    # Built-in commands

    def _help_command(self, name: str) -> None:
        command = self.commands.find(name)
        if command is not None:
            self.log(format_command_help_message(command))

    def _script_command(self, path: str) -> None:
        try:
            self.execute_script_from_file(path)
        except OSError:
            raise CommandError(f"Failed to open console script: {path}") from None

    def _bind_command(self, key: str, command_line: str) -> None:
        try:
            self.bind(key, command_line)
        except ValueError as error:
            raise CommandError(str(error)) from None

    def _unbind_command(self, key: str) -> None:
        try:
            self.unbind(key)
        except ValueError as error:
            raise CommandError(str(error)) from None

    def _register_builtin_commands(self) -> None:
        string = ParamType.STRING
        add = self.commands.add
        add(Command(
            "help", "Shows help for a command",
            (Param(string, "command", "The command to show help for"),),
            self._help_command,
        ))
        add(Command("clear", "Clears the console", (), self.clear))
        add(Command(
            "sleep", "Defers incoming commands, executing them later",
            (Param(ParamType.FLOAT, "seconds", "The number of seconds to sleep"),),
            self.sleep,
        ))
        add(Command(
            "log", "Logs a message to the console",
            (Param(string, "message", "The message to log"),),
            self.log,
        ))
        add(Command(
            "log_error", "Logs an error message to the console",
            (Param(string, "message", "The message to log"),),
            self.log_error,
        ))
        add(Command(
            "execute", "Executes a console command",
            (Param(string, "command_line", "The command to execute"),),
            self.execute,
        ))
        add(Command(
            "execute_script", "Executes a console script",
            (Param(string, "script_name", "The name of the script"),),
            self._script_command,
        ))
        add(Command(
            "bind", "Binds a console command to a key",
            (
                Param(string, "key", "The key to bind"),
                Param(string, "command_line", "The command to execute"),
            ),
            self._bind_command,
        ))
        add(Command(
            "unbind", "Unbinds a key",
            (Param(string, "key", "The key to unbind"),),
            self._unbind_command,
        ))