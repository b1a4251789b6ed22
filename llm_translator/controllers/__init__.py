"""
/**
 * @file llm_translator/controllers/__init__.py
 * @description 控制器（路由）导出。
 */
"""

from .health_controller import router as health_router
from .translate_controller import router as translate_router
from .model_info_controller import router as model_info_router
from .extract_controller import router as extract_router

__all__ = [
    "health_router",
    "translate_router",
    "model_info_router",
    "extract_router",
]
