"""Tests for configuration loading and YAML parsing."""

import pytest

from chassis_shell import config as config_mod
from chassis_shell.config import (
    Config,
    _merge_config,
    get_default_config,
    load_config,
    parse_simple_yaml,
)
from chassis_shell.constants import DEFAULT_COMMANDS


@pytest.fixture
def isolated(tmp_path, monkeypatch):
    """Keep user and working-directory configs out of the search path."""
    monkeypatch.setattr(config_mod, "_get_user_data_dir", lambda: tmp_path / "home")
    monkeypatch.chdir(tmp_path)
    return tmp_path


class TestParseSimpleYaml:
    """Tests for the minimal YAML parser."""

    def test_empty_document(self):
        assert parse_simple_yaml("") == {}

    def test_simple_key_value(self):
        assert parse_simple_yaml("key: value") == {"key": "value"}

    def test_integer_value(self):
        assert parse_simple_yaml("size: 50") == {"size": 50}

    def test_float_value(self):
        assert parse_simple_yaml("ratio: 0.40") == {"ratio": 0.40}

    def test_booleans(self):
        assert parse_simple_yaml("a: true\nb: false") == {"a": True, "b": False}

    def test_null_value(self):
        assert parse_simple_yaml("log_dir: null") == {"log_dir": None}

    def test_quoted_strings_keep_trailing_space(self):
        assert parse_simple_yaml('prompt: "WcsCli# "') == {"prompt": "WcsCli# "}
        assert parse_simple_yaml("prompt: 'cm> '") == {"prompt": "cm> "}

    def test_double_quote_escapes(self):
        assert parse_simple_yaml(r'text: "a\tb"') == {"text": "a\tb"}

    def test_comments_ignored(self):
        yaml = """
# This is a comment
key: value  # inline comment
# Another comment
other: data
"""
        assert parse_simple_yaml(yaml) == {"key": "value", "other": "data"}

    def test_hash_inside_quotes_kept(self):
        assert parse_simple_yaml('prompt: "cm # "') == {"prompt": "cm # "}

    def test_nested_dict(self):
        yaml = """
history:
  size: 30
ui:
  max_output_lines: 100
"""
        assert parse_simple_yaml(yaml) == {
            "history": {"size": 30},
            "ui": {"max_output_lines": 100},
        }

    def test_simple_list(self):
        yaml = """
extra:
  - -getnic
  - help
  - exit
"""
        assert parse_simple_yaml(yaml) == {"extra": ["-getnic", "help", "exit"]}

    def test_deeply_nested(self):
        yaml = """
level1:
  level2:
    level3:
      value: deep
"""
        assert parse_simple_yaml(yaml) == {"level1": {"level2": {"level3": {"value": "deep"}}}}

    def test_colon_in_quoted_value(self):
        assert parse_simple_yaml("log_dir: 'C:\\logs'") == {"log_dir": "C:\\logs"}

    def test_comments_before_nested_content(self):
        yaml = """
completion:
  # chassis extras
  extra:
    - history
    - clear
"""
        assert parse_simple_yaml(yaml) == {"completion": {"extra": ["history", "clear"]}}

    def test_key_without_value(self):
        assert parse_simple_yaml("debug:\nprompt: x") == {"debug": None, "prompt": "x"}

    def test_list_at_key_indent(self):
        yaml = """
completion:
  extra:
  - help
  - exit
  commands:
  - wcscli
ui:
  max_output_lines: 10
"""
        assert parse_simple_yaml(yaml) == {
            "completion": {"extra": ["help", "exit"], "commands": ["wcscli"]},
            "ui": {"max_output_lines": 10},
        }

    def test_top_level_list_at_key_indent(self):
        assert parse_simple_yaml("extra:\n- help\nprompt: x") == {"extra": ["help"], "prompt": "x"}


class TestDefaults:
    def test_default_config_has_all_sections(self):
        config = get_default_config()
        assert isinstance(config, Config)
        assert config.prompt == "WcsCli# "
        assert config.history.size == 20
        assert config.ui.max_output_lines == 2000
        assert config.debug.log_dir == "."

    def test_default_completion_words(self):
        config = get_default_config()
        assert config.completion.commands == list(DEFAULT_COMMANDS)
        assert config.completion.extra == []


class TestConfigMerging:
    def test_overrides_applied(self):
        config = get_default_config()
        data = parse_simple_yaml(
            """
prompt: "cm> "
history:
  size: 5
completion:
  commands:
    - wcscli
    - -getnic
  extra:
    - exit
ui:
  max_output_lines: 50
debug:
  log_dir: /tmp/chassis
"""
        )
        _merge_config(config, data)
        assert config.prompt == "cm> "
        assert config.history.size == 5
        assert config.completion.commands == ["wcscli", "-getnic"]
        assert config.completion.extra == ["exit"]
        assert config.ui.max_output_lines == 50
        assert config.debug.log_dir == "/tmp/chassis"

    def test_partial_data_keeps_defaults(self):
        config = get_default_config()
        _merge_config(config, {"history": {"size": 7}})
        assert config.history.size == 7
        assert config.prompt == "WcsCli# "

    def test_non_dict_ignored(self):
        config = get_default_config()
        _merge_config(config, ["not", "a", "mapping"])
        assert config == get_default_config()

    @pytest.mark.parametrize("size", [0, -3, "many", None])
    def test_invalid_history_size_rejected(self, size):
        with pytest.raises(ValueError, match="history.size"):
            _merge_config(get_default_config(), {"history": {"size": size}})

    def test_invalid_output_limit_rejected(self):
        with pytest.raises(ValueError, match="ui.max_output_lines"):
            _merge_config(get_default_config(), {"ui": {"max_output_lines": 0}})

    @pytest.mark.parametrize("size", [True, False, 2.5])
    def test_bool_and_fractional_size_rejected(self, size):
        with pytest.raises(ValueError, match="must be an integer"):
            _merge_config(get_default_config(), {"history": {"size": size}})

    def test_integral_float_size_accepted(self):
        config = get_default_config()
        _merge_config(config, {"history": {"size": 4.0}})
        assert config.history.size == 4


class TestLoadConfig:
    def test_bundled_default_loads(self, isolated):
        config = load_config()
        assert config.prompt == "WcsCli# "
        assert config.history.size == 20
        assert config.completion.extra == ["help", "history", "clear", "exit"]

    def test_load_from_path(self, isolated):
        path = isolated / "lab.yml"
        path.write_text("history:\n  size: 3\n", encoding="utf-8")
        config = load_config(str(path))
        assert config.history.size == 3

    def test_named_config_from_working_directory(self, isolated):
        (isolated / "configs").mkdir()
        (isolated / "configs" / "lab.yml").write_text("prompt: 'lab> '\n", encoding="utf-8")
        assert load_config("lab").prompt == "lab> "

    def test_user_config_preferred(self, isolated):
        user = isolated / "home" / "configs"
        user.mkdir(parents=True)
        (user / "lab.yml").write_text("prompt: user\n", encoding="utf-8")
        (isolated / "configs").mkdir()
        (isolated / "configs" / "lab.yml").write_text("prompt: local\n", encoding="utf-8")
        assert load_config("lab").prompt == "user"

    def test_missing_named_config_raises(self, isolated):
        with pytest.raises(FileNotFoundError, match="Searched"):
            load_config("no-such-config")

    def test_missing_path_raises(self, isolated):
        with pytest.raises(FileNotFoundError):
            load_config(str(isolated / "missing.yml"))

    def test_invalid_value_in_file_raises(self, isolated):
        path = isolated / "bad.yml"
        path.write_text("history:\n  size: 0\n", encoding="utf-8")
        with pytest.raises(ValueError):
            load_config(str(path))
