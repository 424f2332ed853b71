import time
from dataclasses import dataclass


@dataclass
class HistoryEvent:
    op: str  # "append", "update", "previous", ...
    ts: float
    line: str | None
    state: str  # repr() of the history after the operation


def ts_str(t: float) -> str:
    lt = time.localtime(t)
    return time.strftime("%H:%M:%S", lt)


def key_label(ch: int, names: dict[int, str]) -> str:
    """Readable name for a getch() code, for the key log."""
    if ch in names:
        return names[ch]
    if 32 <= ch < 127:
        return repr(chr(ch))
    return f"#{ch}"
