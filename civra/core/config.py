# civra/core/config.py
"""
Configuration loading: .civra/config.yaml overrides the context selector
defaults (core files, history window, keyword rules).
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Tuple
import yaml

from civracontext import CORE_FILES, DEFAULT_HISTORY_WINDOW, KEYWORD_RULES, KeywordRule, create_default_manager
from civracontext.core.manager import ContextManager

CONFIG_DIR = Path(".civra")
CONFIG_FILE = CONFIG_DIR / "config.yaml"


@dataclass
class CivraConfig:
    core_files: Tuple[str, ...] = CORE_FILES
    history_window: int = DEFAULT_HISTORY_WINDOW
    keyword_rules: Tuple[KeywordRule, ...] = field(default_factory=lambda: KEYWORD_RULES)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "core_files": list(self.core_files),
            "history_window": self.history_window,
            "keyword_rules": [
                {"keywords": list(keywords), "paths": list(paths)}
                for keywords, paths in self.keyword_rules
            ],
        }


def _string_list(value: Any, key: str) -> List[str]:
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ValueError(f"'{key}' must be a list of strings")
    return value


def _parse_keyword_rules(value: Any) -> Tuple[KeywordRule, ...]:
    if not isinstance(value, list):
        raise ValueError("'keyword_rules' must be a list")
    rules = []
    for index, rule in enumerate(value):
        if not isinstance(rule, dict):
            raise ValueError(f"keyword_rules[{index}] must be a mapping with 'keywords' and 'paths'")
        keywords = _string_list(rule.get("keywords"), f"keyword_rules[{index}].keywords")
        paths = _string_list(rule.get("paths"), f"keyword_rules[{index}].paths")
        # Messages are lower-cased before matching
        rules.append((tuple(k.lower() for k in keywords), tuple(paths)))
    return tuple(rules)


def load_config(config_file: Path = CONFIG_FILE) -> CivraConfig:
    """
    Load config.yaml. A missing or empty file gives the defaults.
    """
    if not config_file.exists():
        return CivraConfig()
    try:
        with open(config_file, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise RuntimeError(f"YAML syntax error in {config_file}: {e}")

    if data is None:
        return CivraConfig()
    if not isinstance(data, dict):
        raise ValueError(f"Config file must be a YAML mapping, got: {type(data).__name__}")

    config = CivraConfig()
    if "core_files" in data:
        config.core_files = tuple(_string_list(data["core_files"], "core_files"))
    if "history_window" in data:
        window = data["history_window"]
        if not isinstance(window, int) or isinstance(window, bool) or window < 0:
            raise ValueError("'history_window' must be a non-negative integer")
        config.history_window = window
    if "keyword_rules" in data:
        config.keyword_rules = _parse_keyword_rules(data["keyword_rules"])
    return config


def build_context_manager(config: CivraConfig) -> ContextManager:
    return create_default_manager(core_files=config.core_files, keyword_rules=config.keyword_rules)


def default_config_yaml() -> str:
    return yaml.safe_dump(CivraConfig().to_dict(), sort_keys=False, allow_unicode=True)
