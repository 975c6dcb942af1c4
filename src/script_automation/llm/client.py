"""
Completion client – send a chat-completion request, retry transient failures,
and turn the reply into scripts.
All keys come from a credential source (environment / .env), never from code.
"""

import logging
from typing import Any, Dict, List, Optional

from script_automation.domain.errors import InvalidResponseShape, MissingCredential
from script_automation.domain.models import CompletionRequest, ScriptResult
from script_automation.llm.extraction import MissingContentPolicy, extract_scripts
from script_automation.llm.providers import CompletionProvider, get_provider
from script_automation.llm.retry import RetryPolicy
from script_automation.llm.transport import RequestsTransport, Transport

logger = logging.getLogger(__name__)

CONNECTION_TEST_PROMPT = 'Say "API connection successful" in Chinese'


def extract_message_content(payload: Any) -> str:
    """Return choices[0].message.content or raise InvalidResponseShape."""
    if not isinstance(payload, dict):
        raise InvalidResponseShape("Invalid API response: body is not an object", payload=payload)
    choices = payload.get("choices")
    if not isinstance(choices, list) or not choices or not isinstance(choices[0], dict):
        raise InvalidResponseShape("Invalid API response: missing choices[0]", payload=payload)
    message = choices[0].get("message")
    if not isinstance(message, dict):
        raise InvalidResponseShape("Invalid API response: choices[0] has no message", payload=payload)
    content = message.get("content")
    return content if isinstance(content, str) else ("" if content is None else str(content))


class CompletionClient:
    """Stateless between calls; each call owns its request and retry state."""

    def __init__(
        self,
        provider: CompletionProvider,
        api_key: Optional[str] = None,
        transport: Optional[Transport] = None,
        retry_policy: Optional[RetryPolicy] = None,
        timeout: float = 60,
    ):
        if provider.requires_key and not (api_key or "").strip():
            raise MissingCredential(provider.credential_name)
        self.provider = provider
        self._api_key = (api_key or "").strip() or None
        self.transport = transport or RequestsTransport()
        self.retry_policy = retry_policy or RetryPolicy()
        self.timeout = timeout

    @classmethod
    def from_config(cls, credentials=None, transport: Optional[Transport] = None) -> "CompletionClient":
        """Build a client from config settings; raises MissingCredential if the key is absent."""
        from script_automation import config
        from script_automation.adapters.credentials import EnvCredentialSource

        credentials = credentials or EnvCredentialSource()
        kwargs = {}
        if config.LLM_PROVIDER == "ollama":
            kwargs["base_url"] = credentials.get("OLLAMA_BASE_URL") or "http://localhost:11434"
        provider = get_provider(config.LLM_PROVIDER, **kwargs)

        api_key = None
        if provider.requires_key:
            api_key = credentials.get(provider.credential_name)
            if not (api_key or "").strip():
                raise MissingCredential(provider.credential_name)

        return cls(
            provider,
            api_key=api_key,
            transport=transport,
            retry_policy=RetryPolicy(
                max_attempts=config.LLM_MAX_ATTEMPTS,
                base_delay=config.LLM_RETRY_BASE_DELAY,
            ),
            timeout=config.LLM_TIMEOUT,
        )

    def _post(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        return self.transport.post_json(
            self.provider.endpoint,
            self.provider.build_headers(self._api_key),
            payload,
            self.timeout,
        )

    def complete(self, request: CompletionRequest) -> str:
        """Raw completion text. TransportError is retried; InvalidResponseShape is not."""
        payload = request.to_payload()
        logger.info("Requesting completion from %s (model=%s)", self.provider.name, request.model)
        body = self.retry_policy.run(lambda: self._post(payload))
        text = extract_message_content(body)
        logger.info("Got completion (%d characters)", len(text))
        return text

    def generate_scripts(
        self,
        request: CompletionRequest,
        policy: MissingContentPolicy = MissingContentPolicy.DISCARD,
    ) -> List[ScriptResult]:
        return extract_scripts(self.complete(request), policy)

    def test_connection(self, model: Optional[str] = None) -> str:
        """Single short round-trip without retries; returns the model's reply."""
        payload = {
            "model": model or self.provider.default_model,
            "messages": [{"role": "user", "content": CONNECTION_TEST_PROMPT}],
            "max_tokens": 50,
        }
        return extract_message_content(self._post(payload))
