"""
/**
 * @file llm_translator/main.py
 * @description FastAPI 应用入口（MVC：仅装配路由与中间件）。
 */
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from llm_translator.config import get_model_config
from llm_translator.controllers import extract_router, health_router, model_info_router, translate_router

logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
logger = logging.getLogger("llm_translator")

app = FastAPI(title="Local LLM Translator")


@app.on_event("startup")
async def startup_event():
    config = get_model_config()
    logger.info(f"Using LLM provider {config.name}: model={config.model_name} baseURL={config.base_url}")


app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health_router)
app.include_router(translate_router)
app.include_router(model_info_router)
app.include_router(extract_router)
