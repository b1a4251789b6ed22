"""
/**
 * @file llm_translator/models/__init__.py
 * @description 请求模型导出。
 */
"""

from .translate_request_model import TranslateRequest

__all__ = ["TranslateRequest"]
