"""Settings and configuration."""

import json
import logging
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic_settings import BaseSettings

from .verification import DEFAULT_PROBE_TIMEOUT_MS

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Process configuration read from the environment and .env."""

    model_config = ConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Model preference ($GEMINI_MODEL)
    gemini_model: Optional[str] = None

    # Probing
    gemini_api_key: Optional[str] = None
    gemini_base_url: str = "https://generativelanguage.googleapis.com/v1beta"
    openai_api_key: Optional[str] = None
    openai_base_url: Optional[str] = None
    verify_timeout_ms: int = DEFAULT_PROBE_TIMEOUT_MS

    settings_path: str = "~/.gemini/settings.json"
    log_level: str = "INFO"


# Global settings instance
settings = Settings()


class UserSettings(BaseModel):
    """Persisted user settings; only the model preference is consumed."""

    model_config = ConfigDict(extra="ignore")

    model: Optional[str] = None


class CLIArgs(BaseModel):
    """CLI arguments."""

    model: Optional[str] = None
    settings_path: Optional[str] = None
    default_model: Optional[str] = None
    verify: bool = False
    probe_backend: str = "gemini"
    timeout_ms: Optional[int] = None
    list_models: bool = False
    log_level: str = "INFO"


def load_user_settings(path: str) -> UserSettings:
    """
    Load settings.json.

    A missing file yields empty settings. An unreadable or malformed file is
    reported as a warning and also yields empty settings.
    """
    settings_file = Path(path).expanduser()
    if not settings_file.exists():
        logger.debug(f"No settings file at {settings_file}")
        return UserSettings()

    try:
        data = json.loads(settings_file.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError("top-level value is not an object")
        return UserSettings(**data)
    except (OSError, ValueError, ValidationError) as e:
        logger.warning(f"Ignoring settings file {settings_file}: {e}")
        return UserSettings()
