"""Probe clients used to check that a model exists on the remote service."""

import logging
from typing import Any, Dict, List, Optional, Protocol

import httpx
from openai import AsyncOpenAI

logger = logging.getLogger(__name__)

# Smallest payload the countTokens endpoint accepts
PROBE_CONTENTS: List[Dict[str, Any]] = [{"role": "user", "parts": [{"text": "hi"}]}]


class ProbeError(Exception):
    """Remote service rejected a probe."""

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status = status


class ProbeClient(Protocol):
    async def count_tokens(self, *, model: str, contents: List[Dict[str, Any]]) -> Any:
        ...

    async def close(self) -> None:
        ...


class GeminiProbeClient:
    """Probe models through the Gemini REST countTokens endpoint."""

    def __init__(
        self,
        api_key: str,
        base_url: str = "https://generativelanguage.googleapis.com/v1beta",
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.client = client or httpx.AsyncClient(timeout=httpx.Timeout(10.0))

    async def close(self):
        """Close HTTP client."""
        await self.client.aclose()

    async def count_tokens(
        self, *, model: str, contents: List[Dict[str, Any]]
    ) -> Dict[str, Any]:
        """
        Count tokens for contents with the given model.

        Args:
            model: Model name, with or without the "models/" prefix
            contents: Gemini contents payload

        Returns:
            Decoded JSON response

        Raises:
            ProbeError: On any non-2xx response
        """
        name = model if model.startswith("models/") else f"models/{model}"
        response = await self.client.post(
            f"{self.base_url}/{name}:countTokens",
            json={"contents": contents},
            headers={"x-goog-api-key": self.api_key},
        )
        if response.status_code >= 300:
            message = _error_message(response)
            logger.debug(f"countTokens for {model} failed: {response.status_code}")
            raise ProbeError(message, status=response.status_code)
        return response.json()


class OpenAIProbeClient:
    """Probe models on an OpenAI-compatible endpoint via models.retrieve."""

    def __init__(
        self,
        api_key: str,
        base_url: Optional[str] = None,
        client: Optional[AsyncOpenAI] = None,
    ):
        self.client = client or AsyncOpenAI(api_key=api_key, base_url=base_url)

    async def close(self):
        """Close API client."""
        await self.client.close()

    async def count_tokens(self, *, model: str, contents: List[Dict[str, Any]]) -> Any:
        # The models endpoint has no token counting; existence is what matters.
        return await self.client.models.retrieve(model)


def _error_message(response: httpx.Response) -> str:
    try:
        payload = response.json()
    except ValueError:
        return response.text or f"HTTP {response.status_code}"
    if isinstance(payload, dict) and isinstance(payload.get("error"), dict):
        return str(payload["error"].get("message") or f"HTTP {response.status_code}")
    return f"HTTP {response.status_code}"


def build_probe_client(
    backend: str,
    api_key: str,
    base_url: Optional[str] = None,
) -> ProbeClient:
    """Create a probe client for the named backend ("gemini" or "openai")."""
    if backend == "gemini":
        if base_url:
            return GeminiProbeClient(api_key=api_key, base_url=base_url)
        return GeminiProbeClient(api_key=api_key)
    if backend == "openai":
        return OpenAIProbeClient(api_key=api_key, base_url=base_url)
    raise ValueError(f"Unknown probe backend: {backend}")
