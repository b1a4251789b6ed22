"""
/**
 * @file llm_translator/controllers/extract_controller.py
 * @description 文件文本提取控制器。
 */
"""

import logging
from typing import Optional

from fastapi import APIRouter, File, UploadFile
from fastapi.responses import JSONResponse

from llm_translator.services import FileTooLargeError, UnsupportedFileTypeError, extract_text
from llm_translator.utils import MAX_FILE_SIZE_BYTES


router = APIRouter()
logger = logging.getLogger("extract_controller")


@router.post("/api/extract-text")
def extract(file: Optional[UploadFile] = File(None)):
    if file is None or not file.filename:
        return JSONResponse(status_code=400, content={"error": "No file provided"})

    try:
        content = extract_text(file.filename, file.file.read(MAX_FILE_SIZE_BYTES + 1))
    except UnsupportedFileTypeError:
        return JSONResponse(status_code=400, content={"error": "Unsupported file type"})
    except FileTooLargeError as e:
        logger.warning(str(e))
        return JSONResponse(status_code=400, content={"error": "File exceeds 10MB limit"})
    except Exception as e:
        logger.exception(f"Text extraction error: {e}")
        return JSONResponse(status_code=500, content={"error": "Failed to extract text from file"})
    finally:
        if file is not None:
            file.file.close()

    return {"content": content}
