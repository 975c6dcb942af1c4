import os
from dotenv import load_dotenv

load_dotenv()

# LLM provider configuration
# Providers: deepseek (default), openai, openrouter, gemini, ollama
LLM_PROVIDER = os.getenv("LLM_PROVIDER", "deepseek").lower()
LLM_MODEL = os.getenv("LLM_MODEL", "")  # Empty = provider default (deepseek-chat for DeepSeek)
LLM_TEMPERATURE = min(2.0, max(0.0, float(os.getenv("LLM_TEMPERATURE", "0.7"))))
LLM_MAX_TOKENS = int(os.getenv("LLM_MAX_TOKENS", "4000"))
LLM_TIMEOUT = float(os.getenv("LLM_TIMEOUT", "60"))  # seconds

# Retry policy: linear backoff, base * attempt
LLM_MAX_ATTEMPTS = int(os.getenv("LLM_MAX_ATTEMPTS", "3"))
LLM_RETRY_BASE_DELAY = float(os.getenv("LLM_RETRY_BASE_DELAY", "2.0"))  # seconds

# Batch processing: pause between sequential generations to avoid provider throttling
BATCH_DELAY = float(os.getenv("BATCH_DELAY", "2.0"))  # seconds

# Prompt size bound (characters of source content sent to the model)
MAX_SOURCE_CHARS = int(os.getenv("MAX_SOURCE_CHARS", "3000"))

# Notifications (chat bot webhook, e.g. Feishu custom bot). Empty = print to console
NOTIFY_WEBHOOK_URL = os.getenv("NOTIFY_WEBHOOK_URL", "")

# Output directory for exported documents
OUTPUT_DIR = os.getenv("OUTPUT_DIR", "output")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# API keys are looked up by name through a credential source, never stored here:
#   DEEPSEEK_API_KEY, OPENAI_API_KEY, OPENROUTER_API_KEY, GEMINI_API_KEY
