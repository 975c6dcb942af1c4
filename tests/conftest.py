import json
from typing import Any, Dict, Iterable, List, Optional

import pytest

from script_automation.domain.models import ResultRow, WorkItem
from script_automation.llm.client import CompletionClient
from script_automation.llm.providers import DeepSeekProvider
from script_automation.llm.retry import RetryPolicy
from script_automation.llm.transport import Transport
from script_automation.ports.interfaces import IWorkQueue


def completion(content: str) -> Dict[str, Any]:
    """OpenAI-shaped chat-completion body."""
    return {
        "choices": [{"index": 0, "message": {"role": "assistant", "content": content}}],
        "model": "deepseek-chat",
        "usage": {"prompt_tokens": 10, "completion_tokens": 20},
    }


def scripts_json(*themes: str) -> str:
    return json.dumps([{"theme": t, "content": f"{t}的脚本内容"} for t in themes], ensure_ascii=False)


class FakeTransport(Transport):
    """Replays queued responses (dicts are returned, exceptions raised) and records calls."""

    def __init__(self, responses: Iterable[Any]):
        self.responses = list(responses)
        self.calls: List[Dict[str, Any]] = []

    def post_json(self, url, headers, payload, timeout):
        self.calls.append({"url": url, "headers": headers, "payload": payload, "timeout": timeout})
        if not self.responses:
            raise AssertionError("FakeTransport ran out of responses")
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


class InMemoryQueue(IWorkQueue):
    def __init__(self, entries: List[WorkItem]):
        self.entries = entries
        self.statuses: Dict[Any, List[str]] = {}
        self.rows: List[ResultRow] = []

    def items(self) -> List[WorkItem]:
        return list(self.entries)

    def mark(self, request_id, status: str, completed_at: Optional[str] = None) -> None:
        self.statuses.setdefault(request_id, []).append(status)
        for entry in self.entries:
            if entry.request_id == request_id:
                entry.status = status

    def append_results(self, rows) -> int:
        rows = list(rows)
        self.rows.extend(rows)
        return len(rows)

    def results(self) -> List[ResultRow]:
        return list(self.rows)


class SleepRecorder:
    def __init__(self):
        self.delays: List[float] = []

    def __call__(self, seconds: float) -> None:
        self.delays.append(seconds)


@pytest.fixture
def sleeper() -> SleepRecorder:
    return SleepRecorder()


@pytest.fixture
def make_client(sleeper):
    def _make(responses, max_attempts: int = 3, base_delay: float = 2.0) -> CompletionClient:
        return CompletionClient(
            DeepSeekProvider(),
            api_key="sk-test",
            transport=FakeTransport(responses),
            retry_policy=RetryPolicy(max_attempts=max_attempts, base_delay=base_delay, sleep=sleeper),
        )
    return _make
