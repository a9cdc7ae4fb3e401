import pytest

from tilequest.commands import format_command_help_message
from tilequest.console import MAX_HISTORY, Console, LogEntry, LogKind


def _texts(console, kind):
    return [entry.text for entry in console.history if entry.kind is kind]


def test_log_appends_entry():
    console = Console()
    console.log("hello")
    assert console.history == (LogEntry("hello", LogKind.LOG),)
    assert console.visible is False


def test_log_error_shows_console_unless_told_not_to():
    console = Console()
    console.log_error("quiet", show_console=False)
    assert console.visible is False
    console.log_error("loud")
    assert console.visible is True
    assert _texts(console, LogKind.ERROR) == ["quiet", "loud"]


def test_log_kind_colors():
    console = Console()
    console.log_error("bad", show_console=False)
    console.log("fine")
    error_entry, log_entry = console.history
    assert error_entry.kind.color == (220, 50, 47, 255)
    assert log_entry.kind.color == (252, 191, 73, 255)


def test_history_is_bounded():
    console = Console()
    for i in range(MAX_HISTORY + 88):
        console.log(str(i))
    assert len(console.history) == MAX_HISTORY
    assert console.history[-1].text == str(MAX_HISTORY + 87)


def test_execute_records_command_and_runs_it():
    console = Console()
    console.execute('log "hi there"')
    assert console.history == (
        LogEntry('log "hi there"', LogKind.COMMAND),
        LogEntry("hi there", LogKind.LOG),
    )
    assert console.command_history == ('log "hi there"',)


def test_unknown_command_is_logged_as_error():
    console = Console()
    console.execute("foo")
    assert console.history[-1] == LogEntry("Unknown command: foo", LogKind.ERROR)
    assert console.visible is True


def test_comments_are_ignored():
    console = Console()
    console.execute("// log nothing")
    console.execute("// log nothing", defer=True)
    assert console.history == ()
    assert console.pending == ()


def test_deferred_commands_run_on_update():
    console = Console()
    console.execute("log later", defer=True)
    assert _texts(console, LogKind.LOG) == []
    console.update(0.0)
    assert _texts(console, LogKind.LOG) == ["later"]
    assert console.pending == ()


def test_sleep_holds_back_queue():
    console = Console()
    console.execute("sleep 1", defer=True)
    console.execute("log hi", defer=True)
    console.update(0.0)
    assert console.pending == ("log hi",)
    console.update(0.5)
    assert _texts(console, LogKind.LOG) == []
    console.update(0.6)
    assert _texts(console, LogKind.LOG) == ["hi"]
    assert console.sleep_time_left == 0.0


def test_sleep_never_negative():
    console = Console()
    console.sleep(-3.0)
    assert console.sleep_time_left == 0.0


def test_visibility_and_focus():
    console = Console()
    console.toggle_visible()
    assert console.visible is True
    assert console.reclaim_focus is True
    console.has_focus = True
    console.toggle_visible()
    assert console.visible is False
    assert console.has_focus is False


def test_clear_command_empties_history():
    console = Console()
    console.log("x")
    console.execute("clear")
    assert console.history == ()


def test_help_command_logs_help_message():
    console = Console()
    console.execute("help log")
    expected = format_command_help_message(console.commands.find("log"))
    assert console.history[-1] == LogEntry(expected, LogKind.LOG)


def test_help_for_unknown_command_logs_nothing():
    console = Console()
    console.execute("help nothing_here")
    assert [e.kind for e in console.history] == [LogKind.COMMAND]


def test_log_error_and_execute_commands():
    console = Console()
    console.execute('log_error "bad thing"')
    assert console.history[-1] == LogEntry("bad thing", LogKind.ERROR)
    console.execute('execute "log nested"')
    assert console.history[-1] == LogEntry("nested", LogKind.LOG)


def test_missing_argument_is_logged():
    console = Console()
    console.execute("log")
    assert console.history[-1] == LogEntry("Missing argument: STRING message", LogKind.ERROR)


def test_key_bindings_are_case_insensitive():
    console = Console()
    console.bind("F1", "log pressed")
    console.process_key_press("f1")
    console.process_key_press("f2")
    assert _texts(console, LogKind.LOG) == ["pressed"]
    assert console.bindings == {"f1": "log pressed"}
    console.unbind("F1")
    console.process_key_press("F1")
    assert _texts(console, LogKind.LOG) == ["pressed"]


def test_bind_command_via_command_line():
    console = Console(valid_keys=["Space", "Escape"])
    console.execute('bind space "log jump"')
    console.process_key_press("SPACE")
    assert _texts(console, LogKind.LOG) == ["jump"]
    console.execute("unbind space")
    assert console.bindings == {}


def test_bind_unknown_key_raises_or_logs():
    console = Console(valid_keys=["Space"])
    with pytest.raises(ValueError, match="Failed to bind key: nokey"):
        console.bind("nokey", "log x")
    console.execute('bind nokey "log x"')
    assert console.history[-1] == LogEntry("Failed to bind key: nokey", LogKind.ERROR)
    console.execute("unbind nokey")
    assert console.history[-1] == LogEntry("Failed to unbind key: nokey", LogKind.ERROR)


def test_execute_argv_joins_arguments():
    console = Console()
    console.execute_argv(["game", "log", "hi"])
    console.execute_argv(["game"])
    assert console.command_history == ("log hi",)
    assert _texts(console, LogKind.LOG) == ["hi"]


def test_script_file_lines_are_deferred(tmp_path):
    script = tmp_path / "startup.txt"
    script.write_text("log one\n// a comment\nlog two\n", encoding="utf-8")
    console = Console()
    console.execute_script_from_file(script)
    assert console.pending == ("log one", "log two")
    console.update(0.0)
    assert _texts(console, LogKind.LOG) == ["one", "two"]


def test_missing_script_raises_and_command_logs(tmp_path):
    missing = tmp_path / "missing.txt"
    console = Console()
    with pytest.raises(OSError):
        console.execute_script_from_file(missing)
    console.execute(f'execute_script "{missing}"')
    assert console.history[-1] == LogEntry(
        f"Failed to open console script: {missing}", LogKind.ERROR
    )


def test_complete_unique_and_ambiguous():
    console = Console()
    assert console.complete("sle") == "sleep"
    assert console.complete("log") == "log"
    assert _texts(console, LogKind.LOG) == ["log", "log_error"]
    assert console.complete("zzz") == "zzz"


def test_command_history_navigation():
    console = Console()
    assert console.previous_command() is None
    console.execute("log a")
    console.execute("log b")
    assert console.previous_command() == "log b"
    assert console.previous_command() == "log a"
    assert console.previous_command() is None
    assert console.next_command() == "log b"
    assert console.next_command() is None