"""LLM access – providers, transport, retry policy, extraction and the completion client."""

from script_automation.llm.client import CompletionClient, extract_message_content
from script_automation.llm.extraction import (
    FALLBACK_THEME,
    MissingContentPolicy,
    extract_scripts,
    find_json_array,
)
from script_automation.llm.providers import PROVIDERS, CompletionProvider, get_provider
from script_automation.llm.retry import RetryPolicy
from script_automation.llm.transport import RequestsTransport, Transport

__all__ = [
    "CompletionClient",
    "CompletionProvider",
    "FALLBACK_THEME",
    "MissingContentPolicy",
    "PROVIDERS",
    "RequestsTransport",
    "RetryPolicy",
    "Transport",
    "extract_message_content",
    "extract_scripts",
    "find_json_array",
    "get_provider",
]
