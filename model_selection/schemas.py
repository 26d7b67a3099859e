"""Result and outcome models for model resolution."""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class ProbeFailureReason(str, Enum):
    """Why a probed model could not be confirmed."""

    UNKNOWN = "unknown"
    FORBIDDEN = "forbidden"
    UNAUTHORIZED = "unauthorized"
    INVALID = "invalid"
    RATE_LIMITED = "rate_limited"
    SERVER_ERROR = "server_error"
    TIMEOUT = "timeout"
    ERROR = "error"


class CandidateSource(BaseModel):
    """One provenance of a candidate model name."""

    label: str  # shown in static rejection lines, e.g. "--model"
    hint: str  # shown in dynamic not-found lines, e.g. "settings.json"
    value: Optional[str] = None

    @property
    def candidate(self) -> Optional[str]:
        """Stripped value, or None when the source holds nothing usable."""
        if self.value is None:
            return None
        stripped = self.value.strip()
        return stripped or None


class ModelSelection(BaseModel):
    """Outcome of static model selection."""

    model: str
    logs: List[str] = Field(default_factory=list)
    had_failure: bool = False


class ProbeOutcome(BaseModel):
    """Result of probing one candidate against the remote service."""

    model: str
    source: str
    exists: bool
    reason: Optional[ProbeFailureReason] = None


class VerifiedModel(BaseModel):
    """Outcome of dynamic model verification."""

    model: str
    logs: List[str] = Field(default_factory=list)
    attempts: List[ProbeOutcome] = Field(default_factory=list)
