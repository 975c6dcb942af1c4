"""
Recover ScriptResult objects from free-form completion text.

Models often wrap the requested JSON array in prose or markdown fences, so the
extractor takes everything from the first '[' to the last ']' and parses that.
When nothing usable comes out, the whole text becomes one fallback script so
callers always get at least one result.
"""

import json
import logging
from enum import Enum
from typing import Any, List, Optional

from script_automation.domain.models import ScriptResult

logger = logging.getLogger(__name__)

FALLBACK_THEME = "Generated Script"
MISSING_CONTENT = "No content generated"


class MissingContentPolicy(Enum):
    DISCARD = "discard"
    DEFAULT = "default"


def find_json_array(text: str) -> Optional[str]:
    """Slice from the first '[' to the last ']', or None if there is no such span."""
    start = text.find("[")
    end = text.rfind("]")
    if start == -1 or end <= start:
        return None
    return text[start:end + 1]


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _to_script(item: dict, index: int, policy: MissingContentPolicy) -> Optional[ScriptResult]:
    content = _as_text(item.get("content"))
    if not content.strip():
        if policy is MissingContentPolicy.DISCARD:
            logger.debug("Dropping script %d without content", index)
            return None
        content = MISSING_CONTENT
    theme = _as_text(item.get("theme")).strip() or f"Theme {index}"
    hook = _as_text(item.get("hook")).strip() or None
    return ScriptResult(theme=theme, content=content, hook=hook)


def extract_scripts(
    raw_text: str,
    policy: MissingContentPolicy = MissingContentPolicy.DISCARD,
) -> List[ScriptResult]:
    """Parse the completion text into scripts; never raises on malformed output."""
    raw_text = raw_text or ""
    candidate = find_json_array(raw_text)
    data = None
    if candidate is not None:
        try:
            data = json.loads(candidate)
        except (ValueError, RecursionError) as e:
            logger.warning("Failed to parse JSON response: %s", e)
    else:
        logger.warning("No JSON array found in completion (%d chars)", len(raw_text))

    scripts: List[ScriptResult] = []
    if isinstance(data, list):
        for index, item in enumerate(data, 1):
            if not isinstance(item, dict):
                continue
            script = _to_script(item, index, policy)
            if script is not None:
                scripts.append(script)

    if not scripts:
        logger.warning("Using single-script fallback for unparseable completion")
        return [ScriptResult(theme=FALLBACK_THEME, content=raw_text)]
    return scripts
