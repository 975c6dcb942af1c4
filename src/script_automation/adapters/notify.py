"""INotifier adapters – chat bot webhook or console."""

import logging
from typing import Optional

import requests

from script_automation.ports.interfaces import INotifier

logger = logging.getLogger(__name__)


def format_notification(reference: str) -> str:
    return f"您的短视频脚本已生成！\n点击查看文档：{reference}"


class WebhookNotifier(INotifier):
    """Posts a text message to a chat bot webhook (Feishu custom-bot format)."""

    def __init__(self, url: str, session: Optional[requests.Session] = None, timeout: float = 10):
        if not url:
            raise ValueError("Webhook URL is required")
        self.url = url
        self.timeout = timeout
        self._session = session or requests.Session()

    def notify(self, recipient: Optional[str], reference: str) -> None:
        text = format_notification(reference)
        if recipient:
            text = f'<at user_id="{recipient}"></at> {text}'
        response = self._session.post(
            self.url,
            json={"msg_type": "text", "content": {"text": text}},
            timeout=self.timeout,
        )
        response.raise_for_status()
        try:
            body = response.json()
        except ValueError:
            body = {}
        if isinstance(body, dict) and body.get("code", 0) != 0:
            logger.warning("Webhook rejected message: %s", body.get("msg", body))


class ConsoleNotifier(INotifier):
    """Prints the notification; used when no webhook is configured."""

    def notify(self, recipient: Optional[str], reference: str) -> None:
        prefix = f"@{recipient}: " if recipient else ""
        print(f"  📨 {prefix}{format_notification(reference)}")
