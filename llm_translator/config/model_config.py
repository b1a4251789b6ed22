"""
/**
 * @file llm_translator/config/model_config.py
 * @description 本地 LLM 预设与当前模型配置解析。
 */
"""

from __future__ import annotations

import logging
import math
import threading
from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional

from .settings import Settings, load_settings


logger = logging.getLogger("model_config")

DEFAULT_PROVIDER = "ollama"
DEFAULT_MAX_TOKENS = 2000
DEFAULT_TEMPERATURE = 0.3


@dataclass(frozen=True)
class ModelConfig:
    name: str
    base_url: str
    api_key: str
    model_name: str
    max_tokens: int = DEFAULT_MAX_TOKENS
    temperature: float = DEFAULT_TEMPERATURE

    def to_public_dict(self) -> Dict[str, str]:
        # api_key 不对外暴露
        return {"provider": self.name, "model": self.model_name, "baseURL": self.base_url}


MODEL_PRESETS: Dict[str, ModelConfig] = {
    "ollama": ModelConfig(
        name="Ollama",
        base_url="http://localhost:11434/v1",
        api_key="ollama",
        model_name="qwen2.5:7b",
    ),
    "lmstudio": ModelConfig(
        name="LM Studio",
        base_url="http://localhost:1234/v1",
        api_key="lm-studio",
        model_name="llama-3.2-1b",
    ),
    "vllm": ModelConfig(
        name="vLLM",
        base_url="http://localhost:8000/v1",
        api_key="vllm",
        model_name="Qwen/Qwen2.5-7B-Instruct",
    ),
    "webui": ModelConfig(
        name="Text Generation WebUI",
        base_url="http://localhost:5000/v1",
        api_key="webui",
        model_name="custom-model",
    ),
}

CUSTOM_PROVIDER = "custom"


def _parse_max_tokens(value: Optional[str]) -> int:
    try:
        parsed = int(str(value).strip())
    except (TypeError, ValueError):
        return DEFAULT_MAX_TOKENS
    return parsed if parsed > 0 else DEFAULT_MAX_TOKENS


def _parse_temperature(value: Optional[str]) -> float:
    try:
        parsed = float(str(value).strip())
    except (TypeError, ValueError):
        return DEFAULT_TEMPERATURE
    # nan / inf cannot be sent as JSON
    return parsed if math.isfinite(parsed) else DEFAULT_TEMPERATURE


def build_custom_config(settings: Settings, environ: Optional[Mapping[str, str]] = None) -> ModelConfig:
    fallback = MODEL_PRESETS[DEFAULT_PROVIDER]
    return ModelConfig(
        name="Custom",
        base_url=settings.resolve_custom("base_url", "LLM_API_BASE_URL", environ) or fallback.base_url,
        api_key=settings.resolve_custom("api_key", "LLM_API_KEY", environ) or fallback.api_key,
        model_name=settings.resolve_custom("model_name", "LLM_MODEL_NAME", environ) or fallback.model_name,
        max_tokens=_parse_max_tokens(settings.resolve_custom("max_tokens", "LLM_MAX_TOKENS", environ)),
        temperature=_parse_temperature(settings.resolve_custom("temperature", "LLM_TEMPERATURE", environ)),
    )


def available_providers() -> List[str]:
    return list(MODEL_PRESETS.keys()) + [CUSTOM_PROVIDER]


def resolve_model_config(
    provider: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None,
    settings: Optional[Settings] = None,
) -> ModelConfig:
    """
    Pick the preset named by ``provider`` (or LLM_PROVIDER / llm.provider).
    Unknown or missing selectors fall back to the ollama preset.
    """
    cfg = settings or load_settings()
    key = (provider or cfg.resolve_provider(environ) or DEFAULT_PROVIDER).strip().lower()

    if key == CUSTOM_PROVIDER:
        return build_custom_config(cfg, environ)
    preset = MODEL_PRESETS.get(key)
    if preset is None:
        logger.warning(
            f"Unknown LLM provider '{key}' (expected one of {', '.join(available_providers())}), "
            f"falling back to '{DEFAULT_PROVIDER}'"
        )
        return MODEL_PRESETS[DEFAULT_PROVIDER]
    return preset


_ACTIVE_CONFIG: Optional[ModelConfig] = None
_CONFIG_LOCK = threading.Lock()


def get_model_config() -> ModelConfig:
    """Resolve the active configuration once per process."""
    global _ACTIVE_CONFIG
    if _ACTIVE_CONFIG is None:
        with _CONFIG_LOCK:
            if _ACTIVE_CONFIG is None:
                _ACTIVE_CONFIG = resolve_model_config()
    return _ACTIVE_CONFIG


def reset_model_config() -> None:
    global _ACTIVE_CONFIG
    with _CONFIG_LOCK:
        _ACTIVE_CONFIG = None
