"""Domain models, value objects and errors."""

from script_automation.domain.errors import (
    InvalidRequest,
    InvalidResponseShape,
    MissingCredential,
    RetriesExhausted,
    ScriptGenerationError,
    TransportError,
)
from script_automation.domain.models import (
    CompletionRequest,
    GenerationRequest,
    GenerationResponse,
    ReferenceMaterial,
    ResultRow,
    RetryState,
    ScriptResult,
    WorkItem,
)

__all__ = [
    "CompletionRequest",
    "GenerationRequest",
    "GenerationResponse",
    "ReferenceMaterial",
    "ResultRow",
    "RetryState",
    "ScriptResult",
    "WorkItem",
    "InvalidRequest",
    "InvalidResponseShape",
    "MissingCredential",
    "RetriesExhausted",
    "ScriptGenerationError",
    "TransportError",
]
