"""Dynamic model verification against the remote service."""

import logging
from typing import Any, List, Optional

from .models import DEFAULT_GEMINI_MODEL
from .probe import PROBE_CONTENTS, ProbeClient
from .schemas import ProbeFailureReason, ProbeOutcome, VerifiedModel
from .selection import candidate_sources
from .timeout import ProbeTimeoutError, with_timeout

logger = logging.getLogger(__name__)

DEFAULT_PROBE_TIMEOUT_MS = 800

_STATUS_REASONS = {
    404: ProbeFailureReason.UNKNOWN,
    403: ProbeFailureReason.FORBIDDEN,
    401: ProbeFailureReason.UNAUTHORIZED,
    400: ProbeFailureReason.INVALID,
    429: ProbeFailureReason.RATE_LIMITED,
}


def _status_of(error: Any) -> Optional[int]:
    """Find a numeric status on the error or one level down on its response."""
    for holder in (error, getattr(error, "response", None)):
        if holder is None:
            continue
        for attr in ("status", "code", "status_code"):
            value = getattr(holder, attr, None)
            if isinstance(value, int) and not isinstance(value, bool):
                return value
    return None


def classify_probe_error(error: Any) -> ProbeFailureReason:
    """Map a failed probe to a failure reason."""
    status = _status_of(error)
    if status is not None:
        if status in _STATUS_REASONS:
            return _STATUS_REASONS[status]
        if status >= 500:
            return ProbeFailureReason.SERVER_ERROR

    message = getattr(error, "message", None)
    if message is None and isinstance(error, BaseException) and error.args:
        message = error.args[0]
    if isinstance(error, ProbeTimeoutError) or message == "timeout":
        return ProbeFailureReason.TIMEOUT
    return ProbeFailureReason.ERROR


async def verify_model(
    cli_model: Optional[str],
    settings_model: Optional[str],
    env_model: Optional[str],
    client: ProbeClient,
    default_model: str = DEFAULT_GEMINI_MODEL,
    timeout_ms: float = DEFAULT_PROBE_TIMEOUT_MS,
) -> VerifiedModel:
    """
    Probe candidates in priority order and keep the first one that exists.

    Each present candidate is probed exactly once. Probing stops at the first
    success, so lower-priority candidates are never contacted. Every probe
    failure is absorbed into a log line; nothing is raised to the caller.

    Args:
        cli_model: Value of the --model flag
        settings_model: Model from settings.json
        env_model: Value of $GEMINI_MODEL
        client: Probe client exposing count_tokens
        default_model: Model used when no candidate is confirmed
        timeout_ms: Deadline for each individual probe

    Returns:
        VerifiedModel with the chosen model, log lines and probe outcomes
    """
    logs: List[str] = []
    attempts: List[ProbeOutcome] = []

    for source in candidate_sources(cli_model, settings_model, env_model):
        candidate = source.candidate
        if candidate is None:
            continue

        try:
            await with_timeout(
                client.count_tokens(model=candidate, contents=PROBE_CONTENTS),
                timeout_ms,
            )
        except Exception as e:
            reason = classify_probe_error(e)
            logger.warning(
                f"Probe for {source.label} model {candidate} failed ({reason.value}): {e}"
            )
            attempts.append(
                ProbeOutcome(
                    model=candidate, source=source.label, exists=False, reason=reason
                )
            )
            logs.append(f'Model "{candidate}" not found. Check your {source.hint}.')
            continue

        logger.info(f"Verified model {candidate} from {source.label}")
        attempts.append(ProbeOutcome(model=candidate, source=source.label, exists=True))
        return VerifiedModel(model=candidate, logs=logs, attempts=attempts)

    logs.append(f'No model found. Falling back to default model "{default_model}"')
    return VerifiedModel(model=default_model, logs=logs, attempts=attempts)
