"""
/**
 * @file llm_translator/services/extraction_service.py
 * @description 上传文件的文本提取（txt / md / rtf，pdf 与 Word 返回提示文本）。
 */
"""

from __future__ import annotations

import logging
import re

from llm_translator.utils import (
    MAX_FILE_SIZE_MB,
    file_extension,
    format_file_size,
    validate_file_size,
    validate_file_type,
)


logger = logging.getLogger("extraction_service")

PDF_PLACEHOLDER = "PDF文件解析功能需要在服务端实现。请将PDF内容复制到文本翻译区域。"
WORD_PLACEHOLDER = "Word文档解析功能需要在服务端实现。请将文档内容复制到文本翻译区域。"

RTF_CONTROL_WORD_RE = re.compile(r"\\[a-z]+\d*\s?")
RTF_BRACES_RE = re.compile(r"[{}]")


class UnsupportedFileTypeError(ValueError):
    pass


class FileTooLargeError(ValueError):
    pass


def _decode(data: bytes) -> str:
    return data.decode("utf-8-sig", errors="replace")


def strip_rtf(content: str) -> str:
    return RTF_BRACES_RE.sub("", RTF_CONTROL_WORD_RE.sub("", content))


def extract_text(filename: str, data: bytes) -> str:
    if not validate_file_type(filename):
        raise UnsupportedFileTypeError(f"Unsupported file type: {filename}")
    if not validate_file_size(len(data)):
        raise FileTooLargeError(f"{filename} is {format_file_size(len(data))}, limit is {MAX_FILE_SIZE_MB} MB")

    ext = file_extension(filename)
    if ext in ("txt", "md"):
        content = _decode(data)
    elif ext == "pdf":
        content = PDF_PLACEHOLDER
    elif ext in ("doc", "docx"):
        content = WORD_PLACEHOLDER
    else:
        # rtf
        content = strip_rtf(_decode(data))

    logger.info(f"Extracted {len(content)} chars from {filename} ({format_file_size(len(data))})")
    return content.strip()
