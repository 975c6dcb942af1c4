"""Platform-specific formatting of finished scripts, plus quick source analysis."""

import re
from collections import Counter
from dataclasses import dataclass
from typing import List

from script_automation.domain.models import ScriptResult

EMOJI_MAP = {
    "重要": "⚠️",
    "注意": "📌",
    "第一": "1️⃣",
    "第二": "2️⃣",
    "第三": "3️⃣",
    "钱": "💰",
    "想法": "💡",
    "秘密": "🤫",
}

CHAPTER_MARKERS = ["🎬 开场", "📖 正文", "🎯 重点", "💡 总结"]

STOP_WORDS = frozenset(["的", "了", "和", "是", "在", "我", "有", "个", "不", "这", "为", "之", "与", "也", "到"])


def add_emojis(text: str) -> str:
    for word, emoji in EMOJI_MAP.items():
        text = text.replace(word, word + emoji)
    return text


def add_chapter_markers(text: str) -> str:
    paragraphs = text.split("\n\n")
    marked = [
        f"【{CHAPTER_MARKERS[i]}】\n{para}" if i < len(CHAPTER_MARKERS) else para
        for i, para in enumerate(paragraphs)
    ]
    return "\n\n".join(marked)


def format_for_platform(script: ScriptResult, platform: str) -> str:
    """douyin: one sentence per line (teleprompter); xiaohongshu: emoji; bilibili: chapters."""
    if platform == "douyin":
        return script.content.replace("。", "。\n")
    if platform == "xiaohongshu":
        return add_emojis(script.content)
    if platform == "bilibili":
        return add_chapter_markers(script.content)
    return script.content


@dataclass(frozen=True)
class ContentAnalysis:
    length: int
    paragraphs: int
    has_numbers: bool
    has_quotes: bool
    keywords: List[str]


def extract_keywords(text: str, limit: int = 10) -> List[str]:
    """Most frequent CJK runs (2+ chars, not stop words); ties keep first-seen order."""
    words = re.findall(r"[一-龥]+", text)
    counts = Counter(w for w in words if len(w) >= 2 and w not in STOP_WORDS)
    return [word for word, _ in counts.most_common(limit)]


def analyze_content(text: str) -> ContentAnalysis:
    return ContentAnalysis(
        length=len(text),
        paragraphs=len(text.split("\n\n")),
        has_numbers=bool(re.search(r"\d", text)),
        has_quotes=bool(re.search(r"[\"'“”‘’]", text)),
        keywords=extract_keywords(text),
    )
