class LineBuffer:
    """Text of the command line being typed, with a caret.

    The caret is an insertion point between characters:
    ``0 <= caret <= len(text)``. Moves past either end are ignored.
    """

    def __init__(self, text: str = ""):
        self._text = text
        self._caret = len(text)

    @property
    def text(self) -> str:
        return self._text

    @property
    def caret(self) -> int:
        return self._caret

    def __len__(self) -> int:
        return len(self._text)

    def insert(self, text: str):
        """Insert ``text`` at the caret and move the caret after it."""
        before, after = self._text[: self._caret], self._text[self._caret :]
        self._text = before + text + after
        self._caret += len(text)

    def backspace(self):
        if self._caret == 0:
            return
        self._text = self._text[: self._caret - 1] + self._text[self._caret :]
        self._caret -= 1

    def delete(self):
        if self._caret >= len(self._text):
            return
        self._text = self._text[: self._caret] + self._text[self._caret + 1 :]

    def left(self):
        self._caret = max(0, self._caret - 1)

    def right(self):
        self._caret = min(len(self._text), self._caret + 1)

    def home(self):
        self._caret = 0

    def end(self):
        self._caret = len(self._text)

    def kill_to_start(self):
        """Ctrl+U: drop everything before the caret."""
        self._text = self._text[self._caret :]
        self._caret = 0

    def kill_to_end(self):
        """Ctrl+K: drop everything after the caret."""
        self._text = self._text[: self._caret]

    def replace(self, text: str):
        """Swap in a whole new line (e.g. a recalled command), caret at end."""
        self._text = text
        self._caret = len(text)

    def take(self) -> str:
        """Return the line and leave the buffer empty."""
        text = self._text
        self.replace("")
        return text

    def last_word(self) -> str:
        """The word tab completion works on: text after the last space."""
        return self._text.rsplit(" ", 1)[-1]
