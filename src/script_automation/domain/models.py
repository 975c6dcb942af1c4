"""Domain models – plain dataclasses shared by prompting, llm and application layers."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from script_automation.domain.errors import InvalidRequest


@dataclass(frozen=True)
class ReferenceMaterial:
    """Background material attached to a request (never copied verbatim)."""
    title: str
    content: str
    purpose: str = ""


@dataclass(frozen=True)
class GenerationRequest:
    """Everything needed to turn one long-form article into short-video scripts."""
    source_content: str
    script_count: int = 3
    word_count_range: str = ""  # e.g. "300-500"; empty -> platform default
    style: Optional[str] = None  # 'conversational' | 'storytelling' | 'educational' | 'controversial'
    platform: Optional[str] = None  # 'douyin' | 'xiaohongshu' | 'bilibili'
    reference_materials: Tuple[ReferenceMaterial, ...] = ()
    system_prompt: Optional[str] = None

    def __post_init__(self):
        if not isinstance(self.source_content, str):
            raise InvalidRequest(f"source_content must be text, got {type(self.source_content).__name__}")
        if not self.source_content.strip():
            raise InvalidRequest("source_content must not be empty")
        if isinstance(self.script_count, bool) or not isinstance(self.script_count, int):
            raise InvalidRequest(f"script_count must be an integer, got {self.script_count!r}")
        if self.script_count < 1:
            raise InvalidRequest(f"script_count must be >= 1, got {self.script_count}")
        # Accept any iterable of materials but store an immutable tuple
        object.__setattr__(self, "reference_materials", tuple(self.reference_materials))

    @property
    def uses_enhanced_template(self) -> bool:
        return self.style is not None or self.platform is not None


@dataclass(frozen=True)
class CompletionRequest:
    """One chat-completion call. Owned by the client for the duration of the call."""
    model: str
    system_prompt: str
    user_prompt: str
    temperature: float = 0.7
    max_tokens: int = 4000

    def __post_init__(self):
        try:
            temperature = float(self.temperature)
            max_tokens = int(self.max_tokens)
        except (TypeError, ValueError) as e:
            raise InvalidRequest(f"temperature and max_tokens must be numbers: {e}") from e
        if not 0.0 <= temperature <= 2.0:
            raise InvalidRequest(f"temperature must be in [0, 2], got {self.temperature}")
        if max_tokens < 1:
            raise InvalidRequest(f"max_tokens must be positive, got {self.max_tokens}")

    def to_payload(self) -> Dict[str, Any]:
        """Chat-completion body: system message first, then user."""
        return {
            "model": self.model,
            "messages": [
                {"role": "system", "content": self.system_prompt},
                {"role": "user", "content": self.user_prompt},
            ],
            "temperature": self.temperature,
            "max_tokens": self.max_tokens,
        }


@dataclass(frozen=True)
class ScriptResult:
    """A single generated short-video script."""
    theme: str
    content: str
    hook: Optional[str] = None

    @property
    def word_count(self) -> int:
        # Chinese scripts are measured in characters
        return len(self.content)

    def as_dict(self) -> Dict[str, Any]:
        data = {"theme": self.theme, "content": self.content}
        if self.hook:
            data["hook"] = self.hook
        return data


GenerationResponse = List[ScriptResult]


@dataclass
class RetryState:
    """Per-call retry bookkeeping; discarded after success or exhaustion."""
    max_attempts: int
    attempt: int = 0
    last_error: Optional[Exception] = None
    delays: List[float] = field(default_factory=list)

    @property
    def exhausted(self) -> bool:
        return self.attempt >= self.max_attempts


@dataclass
class WorkItem:
    """One pending row of the work queue (a form submission)."""
    request_id: Any
    request: Optional[GenerationRequest]
    status: str = ""
    timestamp: str = ""
    recipient: Optional[str] = None
    error: Optional[str] = None  # set when the row could not be turned into a request


@dataclass(frozen=True)
class ResultRow:
    """A stored script, keyed back to its originating request."""
    request_id: Any
    script_number: int
    theme: str
    content: str
    word_count: int
    timestamp: str = ""

    @classmethod
    def from_script(cls, request_id: Any, number: int, script: ScriptResult, timestamp: str = "") -> "ResultRow":
        return cls(
            request_id=request_id,
            script_number=number,
            theme=script.theme or f"Theme {number}",
            content=script.content or "No content generated",
            word_count=script.word_count,
            timestamp=timestamp,
        )
