"""
/**
 * @file llm_translator/services/__init__.py
 * @description 业务服务层导出。
 */
"""

from .llm_client_service import LLMClientError, LLMErrorKind, OpenAICompatibleClient
from .translation_service import TranslationError, get_model_info, translate_text
from .extraction_service import FileTooLargeError, UnsupportedFileTypeError, extract_text

__all__ = [
    "LLMClientError",
    "LLMErrorKind",
    "OpenAICompatibleClient",
    "TranslationError",
    "get_model_info",
    "translate_text",
    "FileTooLargeError",
    "UnsupportedFileTypeError",
    "extract_text",
]
