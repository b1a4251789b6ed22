"""
/**
 * @file llm_translator/utils/file_utils.py
 * @description 文件处理工具：扩展名、类型与大小校验、大小格式化。
 */
"""

from __future__ import annotations

from typing import Iterable, Optional


SUPPORTED_FILE_TYPES = (".txt", ".md", ".pdf", ".doc", ".docx", ".rtf")
MAX_FILE_SIZE_MB = 10
MAX_FILE_SIZE_BYTES = MAX_FILE_SIZE_MB * 1024 * 1024


def file_extension(file_name: Optional[str]) -> str:
    value = (file_name or "").strip()
    if "." not in value:
        return ""
    return value.rsplit(".", 1)[-1].lower()


def validate_file_type(file_name: str, allowed_types: Iterable[str] = SUPPORTED_FILE_TYPES) -> bool:
    return "." + file_extension(file_name) in set(allowed_types)


def validate_file_size(file_size: int, max_size_mb: float = MAX_FILE_SIZE_MB) -> bool:
    return file_size <= max_size_mb * 1024 * 1024


def format_file_size(num_bytes: int) -> str:
    if num_bytes <= 0:
        return "0 Bytes"
    k = 1024
    sizes = ["Bytes", "KB", "MB", "GB"]
    i = 0
    while num_bytes >= k ** (i + 1) and i < len(sizes) - 1:
        i += 1
    value = round(num_bytes / (k ** i), 2)
    # 去掉多余的小数位：2.0 -> 2
    text = f"{value:g}" if value == int(value) else f"{value}"
    return f"{text} {sizes[i]}"
