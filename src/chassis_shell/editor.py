from __future__ import annotations

import curses
import time

from chassis_shell.completion import CompletionTable
from chassis_shell.constants import (
    BACKSPACE_KEYS,
    CTRL_A,
    CTRL_E,
    CTRL_K,
    CTRL_U,
    ENTER_KEYS,
    ESC,
    KEY_NAMES,
    TAB,
)
from chassis_shell.debug_log import DebugLogger
from chassis_shell.history import CommandHistory
from chassis_shell.input_buffer import LineBuffer
from chassis_shell.types import HistoryEvent, key_label

_CURSES_KEY_NAMES = {
    curses.KEY_UP: "UP",
    curses.KEY_DOWN: "DOWN",
    curses.KEY_LEFT: "LEFT",
    curses.KEY_RIGHT: "RIGHT",
    curses.KEY_HOME: "HOME",
    curses.KEY_END: "END",
    curses.KEY_DC: "DEL",
    curses.KEY_BACKSPACE: "BS",
    curses.KEY_ENTER: "ENTER",
}


class LineEditor:
    """Edits one command line at a time on top of a CommandHistory.

    Each line owns a draft slot in the history: ``begin`` appends an empty
    entry and ``finish`` either accepts the submitted text into it or
    retracts it. While the line is open the draft behaves like any other
    entry, so text typed before pressing Up is still there after coming
    back down.
    """

    def __init__(
        self,
        history: CommandHistory,
        completer: CompletionTable | None = None,
        logger: DebugLogger | None = None,
    ):
        self.history = history
        self.completer = completer if completer is not None else CompletionTable()
        self.logger = logger
        self.buffer = LineBuffer()
        self.active = False
        self.pending_options: list[str] = []
        self._key_names = {**KEY_NAMES, **_CURSES_KEY_NAMES}

    @property
    def recall_limit(self) -> int:
        """Submitted lines kept for recall; one history slot holds the draft."""
        return self.history.capacity - 1

    def submitted(self) -> list[str]:
        """Recallable lines, oldest first, without the open draft."""
        entries = self.history.entries()
        if self.active:
            entries = entries[:-1]
        return entries[-self.recall_limit:] if self.recall_limit else []

    @property
    def recorded(self) -> int:
        return len(self.submitted())

    def _log(self, op: str, line: str | None = None):
        if self.logger:
            self.logger.log_history(HistoryEvent(op, time.time(), line, repr(self.history)))

    # --- Line lifecycle ---

    def begin(self):
        """Open a new line: park the history cursor and add a draft slot."""
        self.buffer.take()
        self.pending_options = []
        self.history.cursor_to_end()
        self.history.append("")
        self.active = True
        self._log("begin")

    def finish(self, line: str) -> str:
        """Close the open line, keeping it in history unless it is blank."""
        if not self.active:
            return line
        if line.strip():
            self.history.accept(line)
            self._log("accept", line)
        else:
            self.history.remove_last()
            self._log("remove_last")
        self.active = False
        return line

    def abort(self):
        """Drop the open line (Ctrl+C) without recording anything."""
        self.buffer.take()
        self.finish("")

    # --- Key handling ---

    def handle_key(self, ch: int) -> str | None:
        """Apply one getch() code. Returns the line when it is submitted."""
        if ch == -1:
            return None
        if not self.active:
            self.begin()
        if self.logger:
            self.logger.log_key(key_label(ch, self._key_names), self.buffer.text)

        if ch in ENTER_KEYS or ch == curses.KEY_ENTER:
            return self.finish(self.buffer.take())

        if ch == ESC:
            self.buffer.take()
            return self.finish("")

        if ch == curses.KEY_UP:
            self.recall_previous()
            return None

        if ch == curses.KEY_DOWN:
            self.recall_next()
            return None

        if ch == TAB:
            self.complete()
            return None

        if ch in BACKSPACE_KEYS or ch == curses.KEY_BACKSPACE:
            self.buffer.backspace()
        elif ch == curses.KEY_DC:
            self.buffer.delete()
        elif ch == curses.KEY_LEFT:
            self.buffer.left()
        elif ch == curses.KEY_RIGHT:
            self.buffer.right()
        elif ch in (curses.KEY_HOME, CTRL_A):
            self.buffer.home()
        elif ch in (curses.KEY_END, CTRL_E):
            self.buffer.end()
        elif ch == CTRL_U:
            self.buffer.kill_to_start()
        elif ch == CTRL_K:
            self.buffer.kill_to_end()
        elif 0 <= ch < 256 and chr(ch).isprintable():
            self.buffer.insert(chr(ch))
        return None

    def recall_previous(self) -> bool:
        """Up arrow: save the edit in place, then show the older entry."""
        if not self.history.previous_available():
            return False
        self.history.update(self.buffer.text)
        value = self.history.previous()
        self._log("previous", value)
        if value is None:
            return False
        self.buffer.replace(value)
        return True

    def recall_next(self) -> bool:
        """Down arrow: save the edit in place, then show the newer entry."""
        if not self.history.next_available():
            return False
        self.history.update(self.buffer.text)
        value = self.history.next()
        self._log("next", value)
        if value is None:
            return False
        self.buffer.replace(value)
        return True

    def complete(self):
        """Tab: extend the last word and remember ambiguous candidates."""
        result = self.completer.complete(self.buffer.last_word())
        self.buffer.end()
        if result.insert:
            self.buffer.insert(result.insert)
        self.pending_options = list(result.options)
