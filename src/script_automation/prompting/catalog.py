"""Style templates and platform settings.

Read-only lookup tables passed to the prompt builder. Unknown tags resolve to an
empty instruction rather than an error.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional


@dataclass(frozen=True)
class StyleTemplate:
    name: str
    instruction: str


@dataclass(frozen=True)
class PlatformSetting:
    name: str
    word_count: str
    style: str


STYLE_TEMPLATES: Mapping[str, StyleTemplate] = MappingProxyType({
    "conversational": StyleTemplate(
        name="对话式 Conversational",
        instruction="用'兄弟'或'朋友们'开头，像朋友聊天一样自然",
    ),
    "storytelling": StyleTemplate(
        name="故事式 Story-based",
        instruction="从一个具体的故事或案例开始，有画面感",
    ),
    "educational": StyleTemplate(
        name="科普式 Educational",
        instruction="用数据和事实说话，逻辑清晰，适合知识分享",
    ),
    "controversial": StyleTemplate(
        name="观点式 Opinion",
        instruction="提出犀利观点，引发思考和讨论",
    ),
})

PLATFORM_SETTINGS: Mapping[str, PlatformSetting] = MappingProxyType({
    "douyin": PlatformSetting(
        name="抖音 Douyin",
        word_count="300-500",
        style="强钩子，快节奏，情绪化",
    ),
    "xiaohongshu": PlatformSetting(
        name="小红书 XiaoHongShu",
        word_count="500-800",
        style="干货分享，个人经验，生活化",
    ),
    "bilibili": PlatformSetting(
        name="B站 Bilibili",
        word_count="800-1200",
        style="深度内容，知识密度高，可以有梗",
    ),
})

DEFAULT_WORD_COUNT = "300-500"


@dataclass(frozen=True)
class PromptCatalog:
    """Bundle of lookup tables; swap in custom tables for tests or new platforms."""
    styles: Mapping[str, StyleTemplate] = field(default_factory=lambda: STYLE_TEMPLATES)
    platforms: Mapping[str, PlatformSetting] = field(default_factory=lambda: PLATFORM_SETTINGS)
    default_word_count: str = DEFAULT_WORD_COUNT

    def style_instruction(self, style: Optional[str]) -> str:
        template = self.styles.get(style) if style else None
        return template.instruction if template else ""

    def platform_guide(self, platform: Optional[str]) -> str:
        setting = self.platforms.get(platform) if platform else None
        return setting.style if setting else ""

    def word_count_for(self, word_count_range: str, platform: Optional[str]) -> str:
        """Explicit range wins, then the platform convention, then the default."""
        if word_count_range and str(word_count_range).strip():
            return str(word_count_range).strip()
        setting = self.platforms.get(platform) if platform else None
        return setting.word_count if setting else self.default_word_count


DEFAULT_CATALOG = PromptCatalog()
