"""Error taxonomy for script generation.

Malformed model output has no error type here: it becomes the
single-script fallback.
"""

from typing import Any, Optional


class ScriptGenerationError(Exception):
    """Base class for every failure a caller should record against a unit of work."""


class InvalidRequest(ScriptGenerationError, ValueError):
    """A request violates its own invariants (empty source, bad counts...)."""


class MissingCredential(ScriptGenerationError):
    """No API key configured. Fatal, never retried."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"No API key configured ({name})")


class TransportError(ScriptGenerationError):
    """Network failure, timeout or non-2xx status. Retryable."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


class InvalidResponseShape(ScriptGenerationError):
    """The HTTP call succeeded but the payload has no usable choices[0]."""

    def __init__(self, message: str = "Invalid API response", payload: Any = None):
        self.payload = payload
        super().__init__(message)


class RetriesExhausted(ScriptGenerationError):
    """Raised after max_attempts consecutive transport failures."""

    def __init__(self, attempts: int, last_error: Exception):
        self.attempts = attempts
        self.last_error = last_error
        super().__init__(f"Failed after {attempts} attempts: {last_error}")
