"""Tab completion over a fixed table of command words."""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from chassis_shell.constants import DEFAULT_COMMANDS


@dataclass(frozen=True)
class Completion:
    """Result of completing one word.

    ``insert`` is the text to add after the typed word; ``options`` lists the
    full candidate words when the match is ambiguous (empty otherwise).
    """

    insert: str = ""
    options: list[str] = field(default_factory=list)


class CompletionTable:
    """Immutable set of command words used for tab completion.

    Matching is case-insensitive; suffixes keep the candidate's own spelling.
    """

    def __init__(self, words: Iterable[str] = DEFAULT_COMMANDS):
        seen: dict[str, str] = {}
        for word in words:
            word = str(word).strip()
            if word and word.casefold() not in seen:
                seen[word.casefold()] = word
        self._words: tuple[str, ...] = tuple(seen.values())

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, str):
            return False
        return any(w.casefold() == word.casefold() for w in self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __len__(self) -> int:
        return len(self._words)

    def with_extra(self, words: Iterable[str]) -> CompletionTable:
        """Return a new table with ``words`` added."""
        return CompletionTable((*self._words, *words))

    def matches(self, prefix: str) -> list[str]:
        """Candidate words starting with ``prefix``, sorted case-insensitively."""
        folded = prefix.casefold()
        found = [w for w in self._words if w.casefold().startswith(folded)]
        return sorted(found, key=lambda w: (w.casefold(), w))

    def suffixes(self, prefix: str) -> list[str]:
        """Remaining characters of every candidate that starts with ``prefix``."""
        return [w[len(prefix):] for w in self.matches(prefix)]

    def complete(self, word: str) -> Completion:
        """Work out what a Tab press on ``word`` should insert or list."""
        rest = self.suffixes(word)
        if not rest:
            return Completion()
        if len(rest) == 1:
            return Completion(insert=rest[0])
        common = os.path.commonprefix([s.casefold() for s in rest])
        # Take the spelling from the first candidate
        return Completion(insert=rest[0][:len(common)], options=self.matches(word))
