from __future__ import annotations

from collections.abc import Iterator

from chassis_shell.constants import DEFAULT_HISTORY_SIZE


class HistoryError(Exception):
    """Base class for command history misuse."""


class EmptyHistoryError(HistoryError, IndexError):
    """Raised when an operation needs an entry but the history is empty."""


class CommandHistory:
    """Fixed-capacity ring of submitted command lines with a browse cursor.

    Three markers address the ring: ``head`` (next slot to write), ``tail``
    (oldest live entry) and ``cursor`` (entry being recalled). They are kept
    as ever-increasing positions and mapped onto slots modulo ``capacity``,
    so a full ring (``head`` one lap ahead of ``tail``) is never confused
    with an empty one. ``cursor == head`` is the live-edit position, i.e.
    nothing recalled.

    When the ring is full, ``append`` drops the oldest entry. The dropped
    line is remembered until the next append so ``remove_last`` can put it
    back and undo the append exactly.
    """

    def __init__(self, capacity: int = DEFAULT_HISTORY_SIZE):
        if isinstance(capacity, bool) or not isinstance(capacity, int):
            raise TypeError(f"history capacity must be an int, got {capacity!r}")
        if capacity <= 0:
            raise ValueError(f"history capacity must be positive, got {capacity}")
        self._capacity = capacity
        self._slots: list[str | None] = [None] * capacity
        self._head = 0
        self._tail = 0
        self._cursor = 0
        self._evicted: str | None = None

    def _slot(self, pos: int) -> int:
        return pos % self._capacity

    # --- Introspection ---

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def count(self) -> int:
        return self._head - self._tail

    @property
    def head(self) -> int:
        """Slot index the next append writes to."""
        return self._slot(self._head)

    @property
    def tail(self) -> int:
        """Slot index of the oldest entry."""
        return self._slot(self._tail)

    @property
    def cursor(self) -> int:
        """Slot index of the browse cursor (equals ``head`` when not browsing)."""
        return self._slot(self._cursor)

    @property
    def is_full(self) -> bool:
        return self.count == self._capacity

    @property
    def is_browsing(self) -> bool:
        """True while the cursor sits on a stored entry rather than at the end."""
        return self._tail <= self._cursor < self._head

    def current(self) -> str | None:
        """Return the entry under the cursor, or None at the live-edit position."""
        if not self.is_browsing:
            return None
        return self._slots[self._slot(self._cursor)]

    def entries(self) -> list[str]:
        """Return live entries, oldest first."""
        return [self._slots[self._slot(pos)] for pos in range(self._tail, self._head)]

    def __len__(self) -> int:
        return self.count

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries())

    def __repr__(self) -> str:
        return (
            f"CommandHistory(capacity={self._capacity}, count={self.count}, "
            f"head={self.head}, tail={self.tail}, cursor={self.cursor})"
        )

    # --- Writing ---

    def append(self, line: str):
        """Record ``line`` as the newest entry, evicting the oldest when full.

        The cursor is not moved to the end; callers that want to stop
        browsing call ``cursor_to_end`` afterwards.
        """
        evicted = None
        if self.is_full:
            evicted = self._slots[self._slot(self._tail)]
            self._tail += 1
        self._slots[self._slot(self._head)] = line
        self._head += 1
        self._evicted = evicted
        if self._cursor < self._tail:
            self._cursor = self._tail

    def remove_last(self):
        """Retract the newest entry, undoing the preceding ``append``."""
        if self.count == 0:
            raise EmptyHistoryError("remove_last() on empty history")
        self._head -= 1
        self._slots[self._slot(self._head)] = None
        if self._evicted is not None:
            self._tail -= 1
            self._slots[self._slot(self._tail)] = self._evicted
            self._evicted = None
        if self._cursor > self._head:
            self._cursor = self._head

    def accept(self, line: str):
        """Overwrite the newest entry (typically the draft) with ``line``."""
        if self.count == 0:
            raise EmptyHistoryError("accept() on empty history")
        self._slots[self._slot(self._head - 1)] = line

    def update(self, line: str):
        """Store in-progress edits at the cursor.

        At the live-edit position there is no slot to write to, so a
        non-blank ``line`` is appended instead and the cursor is left
        addressing it. Blank lines are dropped there.
        """
        if self.is_browsing:
            self._slots[self._slot(self._cursor)] = line
        elif line.strip():
            self.append(line)

    # --- Navigation ---

    def cursor_to_end(self):
        """Stop browsing: park the cursor at the live-edit position."""
        if self.count == 0:
            return
        self._cursor = self._head

    def previous_available(self) -> bool:
        return self.count > 0 and self._cursor != self._tail

    def next_available(self) -> bool:
        return self.count > 0 and self._cursor + 1 < self._head

    def previous(self) -> str | None:
        """Step toward older entries. Returns None when there is none."""
        if not self.previous_available():
            return None
        self._cursor -= 1
        return self._slots[self._slot(self._cursor)]

    def next(self) -> str | None:
        """Step toward newer entries. Returns None when there is none."""
        if not self.next_available():
            return None
        self._cursor += 1
        return self._slots[self._slot(self._cursor)]

    def increment_cursor(self):
        """Advance the cursor one position without availability checks.

        Stepping past the live-edit position wraps around to the oldest entry.
        """
        self._cursor += 1
        if self._cursor > self._head:
            self._cursor = self._tail

    def clear(self):
        """Erase every entry and reset all markers."""
        self._slots = [None] * self._capacity
        self._head = self._tail = self._cursor = 0
        self._evicted = None
