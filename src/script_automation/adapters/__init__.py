"""
Adapters – concrete implementations of ports.
CSV files stand in for the Input/Results sheets, Markdown files for exported
documents. To target a real spreadsheet or chat SDK, implement the port and
pass it as an override.
"""

from script_automation.adapters.credentials import EnvCredentialSource
from script_automation.adapters.document import MarkdownExporter
from script_automation.adapters.notify import ConsoleNotifier, WebhookNotifier
from script_automation.adapters.sheet import CsvWorkQueue


def default_adapters(**overrides):
    """
    Build default exporter/notifier instances from config.
    Overrides: exporter=..., notifier=... for testing or other services.
    """
    from script_automation.config import NOTIFY_WEBHOOK_URL, OUTPUT_DIR

    defaults = {
        "exporter": MarkdownExporter(OUTPUT_DIR),
        "notifier": WebhookNotifier(NOTIFY_WEBHOOK_URL) if NOTIFY_WEBHOOK_URL else ConsoleNotifier(),
    }
    defaults.update(overrides)
    return defaults


__all__ = [
    "ConsoleNotifier",
    "CsvWorkQueue",
    "EnvCredentialSource",
    "MarkdownExporter",
    "WebhookNotifier",
    "default_adapters",
]
