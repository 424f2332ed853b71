from __future__ import annotations

import curses
from typing import TYPE_CHECKING

from chassis_shell.constants import DEFAULT_MAX_OUTPUT_LINES, DEFAULT_PROMPT

if TYPE_CHECKING:
    from chassis_shell.debug_log import DebugLogger
    from chassis_shell.editor import LineEditor


class ConsoleUI:
    """Curses front end: scrolling output pane, prompt line, status line."""

    OPTIONS_PER_LINE = 3

    def __init__(self, stdscr, editor: "LineEditor", prompt: str = DEFAULT_PROMPT,
                 max_output_lines: int = DEFAULT_MAX_OUTPUT_LINES,
                 debug_logger: "DebugLogger | None" = None):
        self.stdscr = stdscr
        self.editor = editor
        self.prompt = prompt
        self.max_output_lines = max_output_lines
        self.debug_logger = debug_logger
        self.output_lines: list[str] = []

        # 0 = pinned to bottom, >0 = lines scrolled back
        self._output_scroll = 0
        self._output_h = 1

        self.status = "Up/Down history | Tab complete | PgUp/PgDn scroll | help, exit"

        try:
            curses.curs_set(1)
        except curses.error:
            pass
        self.stdscr.timeout(25)
        self.stdscr.keypad(True)

    # --- Output pane ---

    def add_output(self, text: str):
        for line in text.split("\n"):
            self.output_lines.append(line)
        if len(self.output_lines) > self.max_output_lines:
            self.output_lines = self.output_lines[-self.max_output_lines :]
        if self.debug_logger:
            self.debug_logger.log_output(text)

    def add_system_message(self, text: str):
        self.add_output(f"-- {text} --")

    def echo_command(self, line: str):
        """Leave the submitted line in the output pane, prompt included."""
        self.add_output(self.prompt + line)

    def show_options(self, options: list[str]):
        """List ambiguous completions a few per row."""
        if not options:
            return
        self.add_output(self.prompt + self.editor.buffer.text)
        width = max(len(o) for o in options) + 2
        n = self.OPTIONS_PER_LINE
        for i in range(0, len(options), n):
            self.add_output("".join(o.ljust(width) for o in options[i:i + n]).rstrip())

    def clear(self):
        self.output_lines = []
        self._output_scroll = 0

    def _scroll_up(self):
        page = max(1, self._output_h - 1)
        max_off = max(0, len(self.output_lines) - self._output_h)
        self._output_scroll = min(self._output_scroll + page, max_off)

    def _scroll_down(self):
        page = max(1, self._output_h - 1)
        self._output_scroll = max(0, self._output_scroll - page)

    # --- Input ---

    def handle_key(self, ch: int) -> str | None:
        """Route a key to scrolling or the line editor. Returns a submitted line."""
        if ch == curses.KEY_PPAGE:
            self._scroll_up()
            return None
        if ch == curses.KEY_NPAGE:
            self._scroll_down()
            return None

        line = self.editor.handle_key(ch)
        if self.editor.pending_options:
            self.show_options(self.editor.pending_options)
            self.editor.pending_options = []
        if line is not None:
            self._output_scroll = 0
        return line

    # --- Drawing ---

    def draw(self):
        self.stdscr.erase()
        h, w = self.stdscr.getmaxyx()
        self._output_h = max(1, h - 2)

        end = len(self.output_lines) - self._output_scroll
        start = max(0, end - self._output_h)
        for row, line in enumerate(self.output_lines[start:end]):
            try:
                self.stdscr.addnstr(row, 0, line, w - 1)
            except curses.error:
                pass

        # Prompt line, scrolled horizontally so the caret stays visible
        buf = self.editor.buffer
        full = self.prompt + buf.text
        caret_in_full = len(self.prompt) + buf.caret
        max_visible = max(1, w - 1)
        if len(full) <= max_visible or caret_in_full < max_visible:
            scroll_off = 0
        else:
            scroll_off = caret_in_full - max_visible + 1
        try:
            self.stdscr.addnstr(h - 2, 0, full[scroll_off:scroll_off + max_visible], max_visible)
        except curses.error:
            pass

        status_text = self.status
        status_text += f" | hist {self.editor.recorded}/{self.editor.recall_limit}"
        if self.debug_logger and self.debug_logger.enabled:
            status_text += " | DBG"
        if self._output_scroll > 0:
            status_text += f" | SCROLL +{self._output_scroll}"
        try:
            self.stdscr.addnstr(h - 1, 0, status_text, w - 1, curses.A_REVERSE)
        except curses.error:
            pass

        try:
            self.stdscr.move(h - 2, caret_in_full - scroll_off)
        except curses.error:
            pass
        self.stdscr.refresh()
