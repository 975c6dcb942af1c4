"""
Cloud-function style handler for chat-platform form submissions.

Event shape (body may be a JSON string or an already-decoded dict)::

    {"body": {"event": {"sender": {"sender_id": {"user_id": "ou_xxx"}},
                        "form_content": {"content": "...", "script_count": "3",
                                         "word_count": "300-500",
                                         "style": "storytelling", "platform": "douyin"}}}}
"""

import json
import logging
from datetime import datetime
from typing import Any, Dict, Tuple

import requests

from script_automation.adapters.document import MarkdownExporter
from script_automation.application.generator import ScriptGenerator
from script_automation.domain.errors import InvalidRequest, ScriptGenerationError
from script_automation.domain.models import GenerationRequest, ResultRow
from script_automation.ports.interfaces import IDocumentExporter, INotifier

logger = logging.getLogger(__name__)


def parse_form_event(event: Dict[str, Any]) -> Tuple[str, GenerationRequest]:
    """Return (user_id, request); raise InvalidRequest on a malformed event."""
    body = event.get("body", event)
    if isinstance(body, (str, bytes)):
        try:
            body = json.loads(body)
        except ValueError as e:
            raise InvalidRequest(f"Event body is not JSON: {e}") from e
    try:
        inner = body["event"]
        user_id = inner["sender"]["sender_id"]["user_id"]
        form = inner["form_content"]
        content = form["content"]
        script_count = int(form.get("script_count") or 0)
    except (KeyError, TypeError, ValueError) as e:
        raise InvalidRequest(f"Malformed form event: {e}") from e

    request = GenerationRequest(
        source_content=content,
        script_count=script_count,
        word_count_range=str(form.get("word_count") or ""),
        style=str(form["style"]) if form.get("style") else None,
        platform=str(form["platform"]) if form.get("platform") else None,
    )
    return user_id, request


def handle_form_event(
    event: Dict[str, Any],
    generator: ScriptGenerator,
    exporter: IDocumentExporter = None,
    notifier: INotifier = None,
) -> Dict[str, Any]:
    """Generate, export a document, notify the sender. Never raises."""
    try:
        user_id, request = parse_form_event(event)
        scripts = generator.generate(request)

        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        rows = [ResultRow.from_script(user_id, n, s, timestamp) for n, s in enumerate(scripts, 1)]
        exporter = exporter or MarkdownExporter()
        title = f"短视频脚本 - {datetime.now().strftime('%Y-%m-%d')}"
        doc_url = exporter.export({user_id: rows}, title)

        if notifier is not None:
            notifier.notify(user_id, doc_url)
        return {"success": True, "doc_url": doc_url, "scripts": len(scripts)}
    except (ScriptGenerationError, requests.exceptions.RequestException, OSError) as e:
        logger.error("Processing error: %s", e)
        return {"success": False, "error": str(e)}
