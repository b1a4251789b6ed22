"""
/**
 * @file llm_translator/config/settings.py
 * @description 后端配置加载与合并（config.json + config.local.json），环境变量优先。
 */
"""

from __future__ import annotations

import json
import logging
import os
import threading
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional


PACKAGE_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
CONFIG_PATH = os.path.join(PACKAGE_ROOT, "config.json")
CONFIG_LOCAL_PATH = os.path.join(PACKAGE_ROOT, "config.local.json")
CONFIG_EXAMPLE_PATH = os.path.join(PACKAGE_ROOT, "config.example.json")

logger = logging.getLogger("config_loader")


def _load_json(path: str) -> Dict[str, Any]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            value = json.load(f)
            return value if isinstance(value, dict) else {}
    except FileNotFoundError:
        return {}


def _merge_dicts(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            base[key] = _merge_dicts(base[key], value)
        else:
            base[key] = value
    return base


@dataclass(frozen=True)
class Settings:
    raw: Dict[str, Any]

    @property
    def llm(self) -> Dict[str, Any]:
        value = self.raw.get("llm", {})
        return value if isinstance(value, dict) else {}

    @property
    def custom(self) -> Dict[str, Any]:
        value = self.llm.get("custom", {})
        return value if isinstance(value, dict) else {}

    def resolve_provider(self, environ: Optional[Mapping[str, str]] = None) -> Optional[str]:
        env = os.environ if environ is None else environ
        value = env.get("LLM_PROVIDER") or self.llm.get("provider")
        return value if isinstance(value, str) and value.strip() else None

    def resolve_custom(self, key: str, env_name: str, environ: Optional[Mapping[str, str]] = None) -> Optional[str]:
        """环境变量优先，其次是配置文件中的 llm.custom.<key>。"""
        env = os.environ if environ is None else environ
        value = env.get(env_name)
        if value:
            return value
        file_value = self.custom.get(key)
        if file_value is None or isinstance(file_value, (dict, list)):
            return None
        return str(file_value)


_CACHED_SETTINGS: Optional[Settings] = None
_SETTINGS_LOCK = threading.Lock()


def reload_settings(
    base_path: str = CONFIG_PATH,
    local_path: str = CONFIG_LOCAL_PATH,
    example_path: str = CONFIG_EXAMPLE_PATH,
) -> Settings:
    global _CACHED_SETTINGS

    with _SETTINGS_LOCK:
        try:
            base_cfg = _load_json(base_path)
            if not base_cfg.get("llm") and os.path.exists(example_path):
                base_cfg = _load_json(example_path)

            local_cfg = _load_json(local_path)
            merged = _merge_dicts(base_cfg, local_cfg)
            _CACHED_SETTINGS = Settings(raw=merged)
        except (OSError, ValueError) as e:
            logger.error(f"Failed to load config: {e}. Using environment only.")
            _CACHED_SETTINGS = Settings(raw={})

    return _CACHED_SETTINGS


def load_settings() -> Settings:
    """
    Get current settings. Lazy loads on first call; the value is kept for the
    lifetime of the process.
    """
    if _CACHED_SETTINGS is None:
        return reload_settings()
    return _CACHED_SETTINGS
