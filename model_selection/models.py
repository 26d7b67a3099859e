"""Model registry and defaults."""

from typing import List, Optional, Tuple


DEFAULT_GEMINI_MODEL = "gemini-2.5-pro"
DEFAULT_GEMINI_FLASH_MODEL = "gemini-2.5-flash"
DEFAULT_GEMINI_FLASH_LITE_MODEL = "gemini-2.5-flash-lite"

DEFAULT_GEMINI_EMBEDDING_MODEL = "gemini-embedding-001"

# Single source of truth for statically valid model names
SUPPORTED_GEMINI_MODELS: Tuple[str, ...] = (
    "gemini-2.5-pro",
    "gemini-2.5-flash",
    "gemini-2.5-flash-lite",
    "gemini-1.5-pro",
    "gemini-1.5-flash",
)


def get_supported_models() -> List[str]:
    """Get the supported model names in registry order."""
    return list(SUPPORTED_GEMINI_MODELS)


def is_supported_model(model: Optional[str]) -> bool:
    """Return True if the model name is non-empty and in the registry."""
    return bool(model) and model in SUPPORTED_GEMINI_MODELS
