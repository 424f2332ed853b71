from __future__ import annotations

from collections.abc import Callable

from chassis_shell.completion import CompletionTable
from chassis_shell.config import Config
from chassis_shell.constants import LOCAL_COMMANDS
from chassis_shell.debug_log import DebugLogger
from chassis_shell.editor import LineEditor
from chassis_shell.history import CommandHistory
from chassis_shell.ui import ConsoleUI

Executor = Callable[[str], "str | None"]


def make_offline_executor(table: CompletionTable) -> Executor:
    """Executor used when no chassis manager is attached: reports, runs nothing."""

    def execute(line: str) -> str:
        words = line.split()
        known = [w for w in words if w in table]
        if not known:
            return f"{words[0]}: unknown command (Tab lists commands)"
        return f"{' '.join(known)}: no chassis manager connection, command not sent"

    return execute


def _show_history(ui: ConsoleUI, editor: LineEditor):
    entries = editor.submitted()
    if not entries:
        ui.add_system_message("History is empty")
        return
    width = len(str(len(entries)))
    for i, entry in enumerate(entries, start=1):
        ui.add_output(f"  {i:>{width}}  {entry}")


def _show_help(ui: ConsoleUI):
    ui.add_output("Shell commands:")
    for name, desc in LOCAL_COMMANDS.items():
        ui.add_output(f"  {name:<10} {desc}")
    ui.add_output("Keys: Up/Down recall, Tab complete, Esc discard line, Ctrl+C quit")


def handle_line(ui: ConsoleUI, line: str, logger: DebugLogger, executor: Executor) -> bool:
    """Act on one submitted line. Returns False when the shell should exit."""
    line = line.strip()
    if not line:
        return True
    ui.echo_command(line)
    cmd = line.lower()

    if cmd in ("exit", "quit"):
        return False
    if cmd in ("help", "-h", "?"):
        _show_help(ui)
    elif cmd in ("clear", "-clear"):
        ui.editor.history.clear()
        ui.clear()
    elif cmd == "history":
        _show_history(ui, ui.editor)
    elif cmd == "debug":
        state = logger.toggle()
        ui.add_system_message(f"Debug logging {'ON' if state else 'OFF'}")
    else:
        try:
            result = executor(line)
        except Exception as e:
            ui.add_system_message(f"Command failed: {e}")
        else:
            if result:
                ui.add_output(result)
    return True


def build_editor(config: Config, logger: DebugLogger | None = None) -> LineEditor:
    # One extra slot for the draft of the line being typed
    history = CommandHistory(config.history.size + 1)
    table = CompletionTable(config.completion.commands).with_extra(config.completion.extra)
    return LineEditor(history, table, logger=logger)


def run_shell(
    stdscr,
    config: Config,
    debug: bool = False,
    executor: Executor | None = None,
):
    logger = DebugLogger(config.debug.log_dir)
    if debug:
        logger.start()

    editor = build_editor(config, logger)
    if executor is None:
        executor = make_offline_executor(editor.completer)
    ui = ConsoleUI(
        stdscr,
        editor,
        prompt=config.prompt,
        max_output_lines=config.ui.max_output_lines,
        debug_logger=logger,
    )
    ui.add_system_message("Type help for shell commands, exit to quit.")
    editor.begin()
    ui.draw()

    try:
        while True:
            ch = ui.stdscr.getch()
            line = ui.handle_key(ch)
            if line is not None and not handle_line(ui, line, logger, executor):
                return
            ui.draw()
    except KeyboardInterrupt:
        editor.abort()
    finally:
        logger.stop()
