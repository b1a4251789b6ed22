"""
/**
 * @file llm_translator/config/__init__.py
 * @description 配置模块导出。
 */
"""

from .settings import Settings, load_settings, reload_settings, CONFIG_PATH, CONFIG_LOCAL_PATH
from .model_config import (
    DEFAULT_PROVIDER,
    MODEL_PRESETS,
    ModelConfig,
    available_providers,
    get_model_config,
    reset_model_config,
    resolve_model_config,
)

__all__ = [
    "Settings",
    "load_settings",
    "reload_settings",
    "CONFIG_PATH",
    "CONFIG_LOCAL_PATH",
    "DEFAULT_PROVIDER",
    "MODEL_PRESETS",
    "ModelConfig",
    "available_providers",
    "get_model_config",
    "reset_model_config",
    "resolve_model_config",
]
