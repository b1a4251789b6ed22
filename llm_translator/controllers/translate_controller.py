"""
/**
 * @file llm_translator/controllers/translate_controller.py
 * @description 翻译控制器。
 */
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from llm_translator.config import ModelConfig, get_model_config
from llm_translator.models.translate_request_model import TranslateRequest
from llm_translator.services import TranslationError, translate_text


router = APIRouter()
logger = logging.getLogger("translate_controller")


@router.post("/api/translate")
def translate(req: TranslateRequest, config: ModelConfig = Depends(get_model_config)):
    if not req.is_complete():
        return JSONResponse(status_code=400, content={"error": "Missing required fields"})

    try:
        translated = translate_text(req.text, req.sourceLanguage, req.targetLanguage, config=config)
    except TranslationError as e:
        logger.error(f"Translation failed ({e.kind.value}): {e.message}")
        return JSONResponse(status_code=500, content={"error": "Translation service error"})

    return {"translatedText": translated}
