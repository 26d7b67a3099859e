"""Static model selection against the model registry."""

import logging
from typing import List, Optional

from .models import DEFAULT_GEMINI_MODEL, is_supported_model
from .schemas import CandidateSource, ModelSelection

logger = logging.getLogger(__name__)


def candidate_sources(
    cli_model: Optional[str],
    settings_model: Optional[str],
    env_model: Optional[str],
) -> List[CandidateSource]:
    """Build the candidate sources in priority order: cli, settings, env."""
    return [
        CandidateSource(label="--model", hint="model name", value=cli_model),
        CandidateSource(
            label="settings.json", hint="settings.json", value=settings_model
        ),
        CandidateSource(
            label="$GEMINI_MODEL", hint="environment variable", value=env_model
        ),
    ]


def select_model(
    cli_model: Optional[str] = None,
    settings_model: Optional[str] = None,
    env_model: Optional[str] = None,
    default_model: str = DEFAULT_GEMINI_MODEL,
) -> ModelSelection:
    """
    Pick the first supported model name from the candidate sources.

    Absent or blank candidates are skipped silently. A present candidate that
    is not in the registry produces a rejection line and the next source is
    tried. When nothing is supported the default model is used.

    Args:
        cli_model: Value of the --model flag
        settings_model: Model from settings.json
        env_model: Value of $GEMINI_MODEL
        default_model: Model used when no candidate is supported

    Returns:
        ModelSelection with the chosen model, log lines and failure flag
    """
    logs: List[str] = []
    had_failure = False
    chosen = default_model

    for source in candidate_sources(cli_model, settings_model, env_model):
        candidate = source.candidate
        if candidate is None:
            continue
        if is_supported_model(candidate):
            chosen = candidate
            break
        had_failure = True
        logs.append(
            f'Loading {source.label} "{candidate}" failed, not a valid model name.'
        )

    logs.append(f"Using model {chosen}")
    logger.debug(f"Selected model {chosen} (had_failure={had_failure})")
    return ModelSelection(model=chosen, logs=logs, had_failure=had_failure)
