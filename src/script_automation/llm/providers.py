"""
LLM providers – one variant per vendor, selected by configuration.
All speak the OpenAI chat-completions wire format; they differ in endpoint,
headers, default model and whether a key is required.
"""

from typing import Dict, Mapping, Optional, Tuple


class CompletionProvider:
    """Capability description of a chat-completion vendor."""

    name: str = ""
    endpoint: str = ""
    default_model: str = ""
    supported_models: Tuple[str, ...] = ()
    credential_name: Optional[str] = None  # env/property key holding the API key

    @property
    def requires_key(self) -> bool:
        return self.credential_name is not None

    def build_headers(self, api_key: Optional[str]) -> Dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if api_key:
            headers["Authorization"] = f"Bearer {api_key}"
        return headers

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.endpoint}>"


class DeepSeekProvider(CompletionProvider):
    name = "deepseek"
    endpoint = "https://api.deepseek.com/v1/chat/completions"
    default_model = "deepseek-chat"
    supported_models = ("deepseek-chat", "deepseek-reasoner")
    credential_name = "DEEPSEEK_API_KEY"


class OpenAIProvider(CompletionProvider):
    name = "openai"
    endpoint = "https://api.openai.com/v1/chat/completions"
    default_model = "gpt-4o-mini"
    supported_models = ("gpt-4o-mini", "gpt-4o", "gpt-4.1", "gpt-4.1-mini")
    credential_name = "OPENAI_API_KEY"


class OpenRouterProvider(CompletionProvider):
    name = "openrouter"
    endpoint = "https://openrouter.ai/api/v1/chat/completions"
    default_model = "deepseek/deepseek-chat"
    supported_models = ("deepseek/deepseek-chat", "tngtech/deepseek-r1t2-chimera:free")
    credential_name = "OPENROUTER_API_KEY"

    def build_headers(self, api_key: Optional[str]) -> Dict[str, str]:
        headers = super().build_headers(api_key)
        headers["X-Title"] = "script-automation"
        return headers


class GeminiProvider(CompletionProvider):
    """Gemini through Google's OpenAI-compatible endpoint."""
    name = "gemini"
    endpoint = "https://generativelanguage.googleapis.com/v1beta/openai/chat/completions"
    default_model = "gemini-2.5-flash"
    supported_models = ("gemini-2.5-flash", "gemini-2.5-pro")
    credential_name = "GEMINI_API_KEY"


class OllamaProvider(CompletionProvider):
    """Local Ollama server (no key)."""
    name = "ollama"
    default_model = "llama3.1:8b"
    supported_models = ("llama3.1:8b", "qwen2.5:7b")
    credential_name = None

    def __init__(self, base_url: str = "http://localhost:11434"):
        self.endpoint = f"{base_url.rstrip('/')}/v1/chat/completions"


PROVIDERS: Mapping[str, type] = {
    cls.name: cls
    for cls in (DeepSeekProvider, OpenAIProvider, OpenRouterProvider, GeminiProvider, OllamaProvider)
}


def get_provider(name: str, **kwargs) -> CompletionProvider:
    """Instantiate the provider registered under *name* (case-insensitive)."""
    key = (name or "").strip().lower()
    if key not in PROVIDERS:
        raise KeyError(f"Unknown LLM provider '{name}'. Known providers: {', '.join(sorted(PROVIDERS))}")
    return PROVIDERS[key](**kwargs)
