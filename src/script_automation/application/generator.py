"""Script generator use case: build prompt → call LLM → parse scripts."""

import logging
from typing import List, Optional

from script_automation.domain.models import GenerationRequest, ScriptResult
from script_automation.llm.client import CompletionClient
from script_automation.llm.extraction import MissingContentPolicy
from script_automation.prompting.builder import PromptBuilder

logger = logging.getLogger(__name__)


class ScriptGenerator:
    """One sequential chain per call; no state is shared between generations."""

    def __init__(
        self,
        client: CompletionClient,
        builder: Optional[PromptBuilder] = None,
        model: Optional[str] = None,
        temperature: float = 0.7,
        max_tokens: int = 4000,
        policy: MissingContentPolicy = MissingContentPolicy.DISCARD,
    ):
        self.client = client
        self.builder = builder or PromptBuilder()
        self.model = model or client.provider.default_model
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.policy = policy

    @classmethod
    def from_config(cls, credentials=None, transport=None) -> "ScriptGenerator":
        from script_automation import config

        client = CompletionClient.from_config(credentials=credentials, transport=transport)
        return cls(
            client,
            builder=PromptBuilder(max_source_chars=config.MAX_SOURCE_CHARS),
            model=config.LLM_MODEL or None,
            temperature=config.LLM_TEMPERATURE,
            max_tokens=config.LLM_MAX_TOKENS,
        )

    def generate(self, request: GenerationRequest) -> List[ScriptResult]:
        completion_request = self.builder.build_completion_request(
            request,
            model=self.model,
            temperature=self.temperature,
            max_tokens=self.max_tokens,
        )
        scripts = self.client.generate_scripts(completion_request, self.policy)
        if len(scripts) != request.script_count:
            logger.info("Requested %d scripts, model returned %d", request.script_count, len(scripts))
        return scripts
