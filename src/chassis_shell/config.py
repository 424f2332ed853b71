"""Shell configuration and the small YAML reader behind it.

Config files use a YAML subset (no external dependencies):
- Scalars (strings, numbers, booleans, null)
- Nested mappings by indentation
- Lists of scalars (- item)
- Comments (# ...) and quoted strings
"""

from __future__ import annotations

from dataclasses import dataclass, field
from importlib.resources import as_file, files
from pathlib import Path

from chassis_shell.constants import (
    DEFAULT_COMMANDS,
    DEFAULT_HISTORY_SIZE,
    DEFAULT_MAX_OUTPUT_LINES,
    DEFAULT_PROMPT,
)

# --- YAML subset reader ---


def parse_simple_yaml(text: str) -> dict:
    """Parse a YAML subset document into a dict."""
    lines = [ln for ln in text.split("\n") if ln.strip() and not ln.lstrip().startswith("#")]
    result, _ = _parse_block(lines, 0, 0)
    return result if isinstance(result, dict) else {}


def _indent_of(line: str) -> int:
    return len(line) - len(line.lstrip())


def _parse_block(lines: list[str], start: int, indent: int) -> tuple[dict | list, int]:
    """Parse consecutive lines at ``indent``; returns (value, next line index)."""
    result: dict | list | None = None
    i = start
    while i < len(lines):
        line = lines[i]
        cur = _indent_of(line)
        if cur < indent:
            break
        stripped = _remove_inline_comment(line.strip())

        if _is_list_item(stripped):
            if result is None:
                result = []
            if isinstance(result, list):
                result.append(_parse_value(stripped[1:]))
            i += 1
            continue

        if isinstance(result, list):
            # A list at its key's indent ends at the next key
            break
        colon = _find_unquoted_colon(stripped)
        if colon <= 0:
            i += 1
            continue
        if result is None:
            result = {}
        key = stripped[:colon].strip()
        value = stripped[colon + 1 :].strip()
        if value:
            result[key] = _parse_value(value)
            i += 1
        elif i + 1 < len(lines) and _indent_of(lines[i + 1]) > cur:
            result[key], i = _parse_block(lines, i + 1, _indent_of(lines[i + 1]))
        elif (
            i + 1 < len(lines)
            and _indent_of(lines[i + 1]) == cur
            and _is_list_item(lines[i + 1].strip())
        ):
            result[key], i = _parse_block(lines, i + 1, cur)
        else:
            result[key] = None
            i += 1
    return (result if result is not None else {}), i


def _is_list_item(stripped: str) -> bool:
    return stripped == "-" or stripped.startswith("- ")


def _find_unquoted_colon(s: str) -> int:
    """Position of the first ':' outside quotes, or -1."""
    quote = None
    for i, c in enumerate(s):
        if quote:
            if c == quote:
                quote = None
        elif c in ("'", '"'):
            quote = c
        elif c == ":":
            return i
    return -1


def _remove_inline_comment(s: str) -> str:
    """Strip a trailing ' # comment' that is not inside quotes."""
    quote = None
    for i, c in enumerate(s):
        if quote:
            if c == quote:
                quote = None
        elif c in ("'", '"'):
            quote = c
        elif c == "#" and i > 0 and s[i - 1] == " ":
            return s[:i].rstrip()
    return s


_ESCAPES = {"n": "\n", "t": "\t", "\\": "\\", '"': '"'}


def _parse_value(s: str) -> str | int | float | bool | None:
    """Parse a scalar YAML value."""
    s = s.strip()
    if not s or s.lower() in ("null", "~", "none"):
        return None
    if s.lower() in ("true", "yes", "on"):
        return True
    if s.lower() in ("false", "no", "off"):
        return False
    if len(s) >= 2 and s[0] == s[-1] == '"':
        out = []
        chars = iter(s[1:-1])
        for c in chars:
            if c == "\\":
                nxt = next(chars, "")
                out.append(_ESCAPES.get(nxt, c + nxt))
            else:
                out.append(c)
        return "".join(out)
    if len(s) >= 2 and s[0] == s[-1] == "'":
        return s[1:-1].replace("''", "'")
    try:
        return float(s) if "." in s else int(s)
    except ValueError:
        return s


# --- Configuration Dataclasses ---


@dataclass
class HistoryConfig:
    """Command history settings."""

    size: int = DEFAULT_HISTORY_SIZE


@dataclass
class CompletionConfig:
    """Tab completion word list."""

    commands: list[str] = field(default_factory=lambda: list(DEFAULT_COMMANDS))
    extra: list[str] = field(default_factory=list)


@dataclass
class UIConfig:
    """Console layout settings."""

    max_output_lines: int = DEFAULT_MAX_OUTPUT_LINES


@dataclass
class DebugConfig:
    """Where debug logs go when enabled."""

    log_dir: str = "."


@dataclass
class Config:
    """Complete shell configuration."""

    prompt: str = DEFAULT_PROMPT
    history: HistoryConfig = field(default_factory=HistoryConfig)
    completion: CompletionConfig = field(default_factory=CompletionConfig)
    ui: UIConfig = field(default_factory=UIConfig)
    debug: DebugConfig = field(default_factory=DebugConfig)


# --- Config Loading ---


def _get_user_data_dir() -> Path:
    """Get the user's data directory ($HOME/.chassis-shell)."""
    return Path.home() / ".chassis-shell"


def _looks_like_path(name: str) -> bool:
    return "/" in name or "\\" in name or name.endswith((".yml", ".yaml"))


def _find_config_file(config_name_or_path: str) -> Path | None:
    """Find a config file by name or path.

    Search order:
    1. If it looks like a path, use it as given
    2. $HOME/.chassis-shell/configs/<name>.yml
    3. ./configs/<name>.yml
    4. Bundled chassis_shell/configs/<name>.yml
    """
    if _looks_like_path(config_name_or_path):
        path = Path(config_name_or_path).expanduser()
        return path if path.is_file() else None

    filename = f"{config_name_or_path}.yml"
    for candidate in (
        _get_user_data_dir() / "configs" / filename,
        Path.cwd() / "configs" / filename,
    ):
        if candidate.is_file():
            return candidate

    try:
        ref = files("chassis_shell.configs").joinpath(filename)
        with as_file(ref) as p:
            if p.is_file():
                return Path(p)
    except (ModuleNotFoundError, FileNotFoundError, TypeError):
        pass
    return None


def _get_config_search_paths(config_name: str) -> list[str]:
    filename = f"{config_name}.yml"
    return [
        str(_get_user_data_dir() / "configs" / filename),
        str(Path.cwd() / "configs" / filename),
        f"chassis_shell.configs/{filename} (bundled)",
    ]


def load_config(config_name_or_path: str | None = None) -> Config:
    """Load configuration from a YAML file merged over the defaults.

    Raises:
        FileNotFoundError: If a non-default config is named but not found.
        ValueError: If the file holds invalid values.
    """
    if not config_name_or_path:
        config_name_or_path = "default"

    config = Config()
    config_path = _find_config_file(config_name_or_path)

    if config_path is None:
        if config_name_or_path == "default":
            return config
        if _looks_like_path(config_name_or_path):
            raise FileNotFoundError(f"Config file not found: {config_name_or_path}")
        paths_str = "\n  - ".join(_get_config_search_paths(config_name_or_path))
        raise FileNotFoundError(
            f"Config '{config_name_or_path}' not found. Searched:\n  - {paths_str}"
        )

    with open(config_path, encoding="utf-8") as f:
        data = parse_simple_yaml(f.read())
    _merge_config(config, data)
    return config


def _positive_int(value, name: str) -> int:
    if isinstance(value, bool) or (isinstance(value, float) and not value.is_integer()):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ValueError(f"{name} must be an integer, got {value!r}") from None
    if number <= 0:
        raise ValueError(f"{name} must be positive, got {number}")
    return number


def _merge_config(config: Config, data: dict):
    """Merge parsed YAML data into a Config object."""
    if not isinstance(data, dict):
        return

    if data.get("prompt") is not None:
        config.prompt = str(data["prompt"])

    history = data.get("history")
    if isinstance(history, dict) and "size" in history:
        config.history.size = _positive_int(history["size"], "history.size")

    completion = data.get("completion")
    if isinstance(completion, dict):
        if isinstance(completion.get("commands"), list):
            config.completion.commands = [str(w) for w in completion["commands"] if w is not None]
        if isinstance(completion.get("extra"), list):
            config.completion.extra = [str(w) for w in completion["extra"] if w is not None]

    ui = data.get("ui")
    if isinstance(ui, dict) and "max_output_lines" in ui:
        config.ui.max_output_lines = _positive_int(ui["max_output_lines"], "ui.max_output_lines")

    debug = data.get("debug")
    if isinstance(debug, dict) and debug.get("log_dir"):
        config.debug.log_dir = str(debug["log_dir"])


def get_default_config() -> Config:
    """Return a Config with all default values."""
    return Config()
