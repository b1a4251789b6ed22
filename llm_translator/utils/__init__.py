"""
/**
 * @file llm_translator/utils/__init__.py
 * @description 工具函数导出。
 */
"""

from .file_utils import (
    MAX_FILE_SIZE_BYTES,
    MAX_FILE_SIZE_MB,
    SUPPORTED_FILE_TYPES,
    file_extension,
    format_file_size,
    validate_file_size,
    validate_file_type,
)

__all__ = [
    "MAX_FILE_SIZE_BYTES",
    "MAX_FILE_SIZE_MB",
    "SUPPORTED_FILE_TYPES",
    "file_extension",
    "format_file_size",
    "validate_file_size",
    "validate_file_type",
]
