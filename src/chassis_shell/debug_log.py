import time
from pathlib import Path

from chassis_shell.types import HistoryEvent, ts_str

KEYS_LOG = "chassis_keys.log"
HISTORY_LOG = "chassis_history.log"


class DebugLogger:
    """Manages optional debug log files for key presses and history operations."""

    def __init__(self, log_dir: str | Path = "."):
        self.enabled = False
        self.log_dir = Path(log_dir)
        self._keys_fh = None
        self._history_fh = None

    def start(self):
        self.log_dir.mkdir(parents=True, exist_ok=True)
        self._keys_fh = open(self.log_dir / KEYS_LOG, "a", encoding="utf-8")
        self._history_fh = open(self.log_dir / HISTORY_LOG, "a", encoding="utf-8")
        self.enabled = True
        sep = f"\n{'='*60}\n  Session started: {time.strftime('%Y-%m-%d %H:%M:%S')}\n{'='*60}\n"
        for fh in (self._keys_fh, self._history_fh):
            fh.write(sep)
            fh.flush()

    def stop(self):
        self.enabled = False
        for fh in (self._keys_fh, self._history_fh):
            if fh:
                try:
                    fh.close()
                except OSError:
                    pass
        self._keys_fh = self._history_fh = None

    def toggle(self) -> bool:
        if self.enabled:
            self.stop()
        else:
            self.start()
        return self.enabled

    def log_key(self, label: str, text: str):
        if not self.enabled or not self._keys_fh:
            return
        self._keys_fh.write(f"{ts_str(time.time())} | {label:>8} | {text}\n")
        self._keys_fh.flush()

    def log_history(self, ev: HistoryEvent):
        if not self.enabled or not self._history_fh:
            return
        line = "" if ev.line is None else f" {ev.line!r}"
        self._history_fh.write(f"{ts_str(ev.ts)} {ev.op:>10}{line} | {ev.state}\n")
        self._history_fh.flush()

    def log_output(self, text: str):
        """Record shell output (command results, messages) in the history log."""
        if not self.enabled or not self._history_fh:
            return
        for line in text.split("\n"):
            self._history_fh.write(f"{ts_str(time.time())}        out | {line}\n")
        self._history_fh.flush()
