"""Model selection for command-line tools."""

from .models import (
    DEFAULT_GEMINI_EMBEDDING_MODEL,
    DEFAULT_GEMINI_FLASH_LITE_MODEL,
    DEFAULT_GEMINI_FLASH_MODEL,
    DEFAULT_GEMINI_MODEL,
    SUPPORTED_GEMINI_MODELS,
    is_supported_model,
)
from .selection import select_model
from .timeout import ProbeTimeoutError, with_timeout
from .verification import classify_probe_error, verify_model

__all__ = [
    "DEFAULT_GEMINI_EMBEDDING_MODEL",
    "DEFAULT_GEMINI_FLASH_LITE_MODEL",
    "DEFAULT_GEMINI_FLASH_MODEL",
    "DEFAULT_GEMINI_MODEL",
    "SUPPORTED_GEMINI_MODELS",
    "ProbeTimeoutError",
    "classify_probe_error",
    "is_supported_model",
    "select_model",
    "verify_model",
    "with_timeout",
]
