"""
/**
 * @file llm_translator/services/translation_service.py
 * @description 翻译服务：构建提示词，调用本地 LLM，并对错误分类。
 */
"""

from __future__ import annotations

import logging
from typing import Dict, Optional, Tuple

from llm_translator.config import ModelConfig, get_model_config
from llm_translator.services.llm_client_service import LLMClientError, LLMErrorKind, OpenAICompatibleClient


logger = logging.getLogger("translation_service")

LANGUAGE_NAMES: Dict[str, str] = {
    "zh": "中文",
    "en": "英语",
    "ja": "日语",
    "ko": "韩语",
    "fr": "法语",
    "de": "德语",
    "es": "西班牙语",
    "ru": "俄语",
    "ar": "阿拉伯语",
    "pt": "葡萄牙语",
    "it": "意大利语",
    "nl": "荷兰语",
    "sv": "瑞典语",
    "da": "丹麦语",
    "no": "挪威语",
    "fi": "芬兰语",
    "pl": "波兰语",
    "cs": "捷克语",
    "hu": "匈牙利语",
    "ro": "罗马尼亚语",
}

CONNECTION_ERROR_MESSAGE = "无法连接到翻译服务，请检查本地LLM服务是否正常运行"
TIMEOUT_ERROR_MESSAGE = "翻译请求超时，请稍后重试"
SERVICE_ERROR_PREFIX = "翻译服务错误: "
FALLBACK_ERROR_MESSAGE = "翻译服务出错，请稍后重试"


class TranslationError(Exception):
    def __init__(self, kind: LLMErrorKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message


def language_name(code: str) -> str:
    return LANGUAGE_NAMES.get(code, code)


def build_translation_prompt(text: str, source_name: str, target_name: str) -> str:
    return (
        f"你是一个专业的翻译专家。请将以下{source_name}文本准确翻译成{target_name}。\n"
        "\n"
        "要求：\n"
        "1. 保持原文的意思、语气和风格\n"
        "2. 确保翻译自然流畅，符合目标语言的表达习惯\n"
        "3. 对于专业术语，请使用准确的对应词汇\n"
        "4. 只返回翻译结果，不要包含任何解释或额外内容\n"
        "\n"
        "原文：\n"
        f"{text}"
    )


def _classify(error: LLMClientError) -> TranslationError:
    if error.kind == LLMErrorKind.CONNECTION:
        return TranslationError(error.kind, CONNECTION_ERROR_MESSAGE)
    if error.kind == LLMErrorKind.TIMEOUT:
        return TranslationError(error.kind, TIMEOUT_ERROR_MESSAGE)
    return TranslationError(error.kind, f"{SERVICE_ERROR_PREFIX}{error.message}")


def translate_text(
    text: str,
    source_language: str,
    target_language: str,
    config: Optional[ModelConfig] = None,
    client: Optional[OpenAICompatibleClient] = None,
) -> str:
    """
    Translate ``text`` with the active model preset.

    Exactly one completion request is made. Failures are raised as
    TranslationError with a user-facing message.
    """
    cfg = config or get_model_config()
    prompt = build_translation_prompt(text, language_name(source_language), language_name(target_language))
    h = client or OpenAICompatibleClient(cfg)

    try:
        translated = h.complete(
            prompt,
            model=cfg.model_name,
            max_tokens=cfg.max_tokens,
            temperature=cfg.temperature,
        )
    except LLMClientError as e:
        logger.error(f"Translation error ({e.kind.value}) via {cfg.name}: {e.message}")
        raise _classify(e) from e
    except Exception as e:
        logger.exception(f"Unexpected translation error via {cfg.name}: {e}")
        raise TranslationError(LLMErrorKind.OTHER, FALLBACK_ERROR_MESSAGE) from e

    return translated.strip()


def get_model_info(config: Optional[ModelConfig] = None) -> Dict[str, str]:
    return (config or get_model_config()).to_public_dict()


def swap_languages(
    source_language: str,
    target_language: str,
    source_text: str,
    translated_text: str,
) -> Tuple[str, str, str, str]:
    """Swap direction: the previous translation becomes the new source text."""
    return target_language, source_language, translated_text, source_text
