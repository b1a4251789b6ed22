"""
/**
 * @file llm_translator/__init__.py
 * @description 本地 LLM 翻译后端。
 */
"""
