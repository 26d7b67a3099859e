"""Pytest configuration and fixtures for model selection tests."""

import os
from unittest.mock import AsyncMock, MagicMock

import pytest


class MockProbeError(Exception):
    """Error shaped like the ones real probe clients raise."""

    def __init__(self, message: str = "Model not available", status=None):
        super().__init__(message)
        self.message = message
        self.status = status


_ERROR_STATUSES = {
    "forbidden": 403,
    "unauthorized": 401,
    "invalid": 400,
    "rate_limited": 429,
    "server_error": 500,
}


@pytest.fixture
def make_probe_client():
    """Factory for probe clients that only know a fixed set of models."""

    def factory(available_models=(), error_type=None):
        available = set(available_models)

        async def count_tokens(*, model, contents):
            if model in available:
                return {"totalTokens": 1}
            if error_type == "timeout":
                raise MockProbeError("timeout")
            raise MockProbeError(status=_ERROR_STATUSES.get(error_type, 404))

        client = MagicMock()
        client.count_tokens = AsyncMock(side_effect=count_tokens)
        client.close = AsyncMock()
        return client

    return factory


@pytest.fixture(autouse=True)
def clean_environment():
    """Clean environment variables before each test."""
    original_env = {}
    env_vars_to_clean = [
        "GEMINI_MODEL",
        "GEMINI_API_KEY",
        "OPENAI_API_KEY",
        "SETTINGS_PATH",
    ]

    for var in env_vars_to_clean:
        if var in os.environ:
            original_env[var] = os.environ[var]
            del os.environ[var]

    yield

    for var, value in original_env.items():
        os.environ[var] = value
