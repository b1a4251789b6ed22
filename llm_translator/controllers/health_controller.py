"""
/**
 * @file llm_translator/controllers/health_controller.py
 * @description 健康检查控制器。
 */
"""

from fastapi import APIRouter, Depends

from llm_translator.config import ModelConfig, get_model_config


router = APIRouter()


@router.get("/health")
def health(config: ModelConfig = Depends(get_model_config)):
    # 不探测下游 LLM，只报告当前使用的预设
    return {
        "status": "ok",
        "provider": config.name,
        "model": config.model_name,
    }
