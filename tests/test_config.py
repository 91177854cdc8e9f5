# tests/test_config.py
from pathlib import Path

import pytest
import yaml

from civra.core.config import (
    CONFIG_FILE,
    CivraConfig,
    build_context_manager,
    default_config_yaml,
    load_config,
)
from civracontext import CORE_FILES, KEYWORD_RULES, ContextRequest


def test_missing_config_gives_defaults(isolated_filesystem):
    config = load_config()
    assert config.core_files == CORE_FILES
    assert config.history_window == 5
    assert config.keyword_rules == KEYWORD_RULES


def test_empty_config_gives_defaults(isolated_filesystem):
    CONFIG_FILE.parent.mkdir()
    CONFIG_FILE.write_text("", encoding="utf-8")
    assert load_config() == CivraConfig()


def test_config_overrides(isolated_filesystem):
    CONFIG_FILE.parent.mkdir()
    CONFIG_FILE.write_text(yaml.safe_dump({
        "core_files": ["package.json"],
        "history_window": 2,
        "keyword_rules": [{"keywords": ["Chart"], "paths": ["components/Chart.tsx"]}],
    }), encoding="utf-8")

    config = load_config()
    assert config.core_files == ("package.json",)
    assert config.history_window == 2
    assert config.keyword_rules == ((("chart",), ("components/Chart.tsx",)),)


def test_partial_config_keeps_other_defaults(isolated_filesystem):
    CONFIG_FILE.parent.mkdir()
    CONFIG_FILE.write_text("history_window: 0\n", encoding="utf-8")
    config = load_config()
    assert config.history_window == 0
    assert config.core_files == CORE_FILES


def test_yaml_syntax_error_raises_runtime_error(tmp_path: Path):
    config_file = tmp_path / "config.yaml"
    config_file.write_text("core_files: [unclosed\n", encoding="utf-8")
    with pytest.raises(RuntimeError):
        load_config(config_file)


@pytest.mark.parametrize("document", [
    "- just\n- a list\n",
    "core_files: package.json\n",
    "history_window: -1\n",
    "history_window: five\n",
    "keyword_rules: {keywords: [a]}\n",
    "keyword_rules:\n  - keywords: [a]\n",
])
def test_wrong_shape_raises_value_error(tmp_path: Path, document: str):
    config_file = tmp_path / "config.yaml"
    config_file.write_text(document, encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(config_file)


def test_default_config_yaml_round_trips(tmp_path: Path):
    config_file = tmp_path / "config.yaml"
    config_file.write_text(default_config_yaml(), encoding="utf-8")
    assert load_config(config_file) == CivraConfig()


def test_build_context_manager_uses_config():
    config = CivraConfig(core_files=("package.json",), keyword_rules=((("chart",), ("components/Chart.tsx",)),))
    selection = build_context_manager(config).get_context(ContextRequest(message="a chart"))
    assert selection.paths == ["package.json", "components/Chart.tsx"]
