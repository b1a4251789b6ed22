"""
/**
 * @file llm_translator/services/llm_client_service.py
 * @description OpenAI 兼容接口调用封装（Ollama / LM Studio / vLLM / WebUI）。
 */
"""

from __future__ import annotations

import enum
import logging
from typing import Any, Dict, Optional

import requests

from llm_translator.config import ModelConfig


logger = logging.getLogger("llm_client")


class LLMErrorKind(str, enum.Enum):
    CONNECTION = "connection"
    TIMEOUT = "timeout"
    PROTOCOL = "protocol"
    OTHER = "other"


class LLMClientError(Exception):
    def __init__(self, kind: LLMErrorKind, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.status_code = status_code


class OpenAICompatibleClient:
    def __init__(
        self,
        config: ModelConfig,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ):
        self.config = config
        self._session = session
        self._timeout = timeout

    @property
    def completions_url(self) -> str:
        return f"{self.config.base_url.rstrip('/')}/chat/completions"

    def _get_headers(self) -> Dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.config.api_key:
            headers["Authorization"] = f"Bearer {self.config.api_key}"
        return headers

    def _post(self, payload: Dict[str, Any]) -> requests.Response:
        poster = self._session.post if self._session is not None else requests.post
        return poster(self.completions_url, headers=self._get_headers(), json=payload, timeout=self._timeout)

    def complete(
        self,
        prompt: str,
        model: Optional[str] = None,
        max_tokens: Optional[int] = None,
        temperature: Optional[float] = None,
    ) -> str:
        """
        Send a single chat completion request and return the message content.
        Raises LLMClientError with the failure kind; never retries.
        """
        payload = {
            "model": model or self.config.model_name,
            "messages": [{"role": "user", "content": prompt}],
            "max_tokens": self.config.max_tokens if max_tokens is None else max_tokens,
            "temperature": self.config.temperature if temperature is None else temperature,
        }
        try:
            response = self._post(payload)
        # ConnectTimeout is both a Timeout and a ConnectionError; report it as a timeout
        except requests.Timeout as e:
            raise LLMClientError(LLMErrorKind.TIMEOUT, f"timeout: {e}") from e
        except requests.ConnectionError as e:
            raise LLMClientError(LLMErrorKind.CONNECTION, f"connection failed: {e}") from e
        except requests.RequestException as e:
            raise LLMClientError(LLMErrorKind.OTHER, str(e)) from e

        if not 200 <= response.status_code < 300:
            raise LLMClientError(
                LLMErrorKind.PROTOCOL,
                f"HTTP {response.status_code}: {response.text}",
                status_code=response.status_code,
            )

        try:
            data = response.json()
            content = data["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError) as e:
            raise LLMClientError(
                LLMErrorKind.PROTOCOL,
                f"unexpected response body: {response.text[:200]}",
                status_code=response.status_code,
            ) from e

        if not isinstance(content, str):
            raise LLMClientError(LLMErrorKind.PROTOCOL, "response content is not text", status_code=response.status_code)
        return content
