"""
/**
 * @file llm_translator/models/translate_request_model.py
 * @description 翻译请求模型（Pydantic）。
 */
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel


class TranslateRequest(BaseModel):
    # 字段在此处可选，缺失时由控制器返回 400
    text: Optional[str] = None
    sourceLanguage: Optional[str] = None
    targetLanguage: Optional[str] = None

    def is_complete(self) -> bool:
        return all((v or "").strip() for v in (self.text, self.sourceLanguage, self.targetLanguage))
