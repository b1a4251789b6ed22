"""
/**
 * @file llm_translator/controllers/model_info_controller.py
 * @description 当前模型信息控制器（供前端显示）。
 */
"""

from fastapi import APIRouter, Depends

from llm_translator.config import ModelConfig, get_model_config
from llm_translator.services import get_model_info


router = APIRouter()


@router.get("/api/model-info")
def model_info(config: ModelConfig = Depends(get_model_config)):
    return get_model_info(config)
