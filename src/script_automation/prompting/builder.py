"""
Prompt builder – renders a GenerationRequest into (system, user) prompt strings.

The output is deterministic: no timestamps, no randomness. Identical requests
produce byte-identical prompts, which keeps generations comparable across runs.
"""

from dataclasses import dataclass
from typing import List, Optional

from script_automation.domain.models import CompletionRequest, GenerationRequest
from script_automation.prompting.catalog import DEFAULT_CATALOG, PromptCatalog

MAX_SOURCE_CHARS = 3000
TRUNCATION_MARKER = "...(内容已截断)"

DEFAULT_SYSTEM_PROMPT = (
    "You are an expert short video script writer specializing in viral content creation. "
    "You understand narrative hooks, engagement patterns, and how to adapt long-form content "
    "into compelling short scripts."
)

_BASE_REQUIREMENTS = [
    "提取的主题要有差异性，覆盖不同角度",
    "每个脚本要适合口播，语言要口语化、接地气",
    "开头必须有强钩子，能在3秒内吸引观众",
    "结构：钩子→故事/观点→转折→结论",
    "多用短句，避免长难句",
    "每个脚本控制在{word_count}字",
]
_GENERAL_PLATFORM_REQUIREMENT = "适合在抖音、小红书等平台发布"
_TAILORED_PLATFORM_REQUIREMENT = "融入平台特色和目标用户喜好"

_JSON_FORMAT = """请严格按以下JSON格式返回：
[
  {{
    "theme": "主题名称（10字以内）",{hook_line}
    "content": "完整的脚本内容"
  }}
]"""
_HOOK_LINE = '\n    "hook": "开头钩子（一句话）",'
_JSON_ONLY = "只返回JSON，不要有其他说明文字。"
_REFERENCE_NOTICE = "注意：参考资料仅作为背景信息，不要直接照搬原文内容。"


@dataclass(frozen=True)
class PromptPair:
    system: str
    user: str


def truncate_source(content: str, limit: int = MAX_SOURCE_CHARS) -> str:
    """First *limit* characters followed by a space and, when cut, the truncation marker."""
    marker = TRUNCATION_MARKER if len(content) > limit else ""
    return f"{content[:limit]} {marker}"


class PromptBuilder:
    """Builds the instruction strings that make the model answer with a JSON array of scripts."""

    def __init__(self, catalog: Optional[PromptCatalog] = None, max_source_chars: int = MAX_SOURCE_CHARS):
        self.catalog = catalog or DEFAULT_CATALOG
        self.max_source_chars = max_source_chars

    def build(self, request: GenerationRequest) -> PromptPair:
        return PromptPair(
            system=self.build_system_prompt(request),
            user=self.build_user_prompt(request),
        )

    def build_system_prompt(self, request: GenerationRequest) -> str:
        if request.system_prompt and request.system_prompt.strip():
            return request.system_prompt
        return DEFAULT_SYSTEM_PROMPT

    def build_user_prompt(self, request: GenerationRequest) -> str:
        word_count = self.catalog.word_count_for(request.word_count_range, request.platform)
        enhanced = request.uses_enhanced_template

        sections = [
            f"你是一个短视频脚本创作专家。请根据以下内容，提取{request.script_count}个不同的主题，"
            f"并为每个主题生成一个{word_count}字的短视频脚本。",
            "源内容：\n" + truncate_source(request.source_content, self.max_source_chars),
        ]
        if request.reference_materials:
            sections.append(self._render_references(request))
        if enhanced:
            sections.append(
                f"风格要求：{self.catalog.style_instruction(request.style)}\n"
                f"平台特点：{self.catalog.platform_guide(request.platform)}"
            )
        sections.append(self._render_requirements(word_count, enhanced))
        sections.append(_JSON_FORMAT.format(hook_line=_HOOK_LINE if enhanced else ""))
        sections.append(_JSON_ONLY)
        return "\n\n".join(sections)

    def build_completion_request(
        self,
        request: GenerationRequest,
        model: str,
        temperature: float = 0.7,
        max_tokens: int = 4000,
    ) -> CompletionRequest:
        prompts = self.build(request)
        return CompletionRequest(
            model=model,
            system_prompt=prompts.system,
            user_prompt=prompts.user,
            temperature=temperature,
            max_tokens=max_tokens,
        )

    def _render_requirements(self, word_count: str, enhanced: bool) -> str:
        items: List[str] = [r.format(word_count=word_count) for r in _BASE_REQUIREMENTS]
        items.append(_TAILORED_PLATFORM_REQUIREMENT if enhanced else _GENERAL_PLATFORM_REQUIREMENT)
        lines = [f"{i}. {item}" for i, item in enumerate(items, 1)]
        return "要求：\n" + "\n".join(lines)

    def _render_references(self, request: GenerationRequest) -> str:
        blocks = ["参考资料："]
        for i, material in enumerate(request.reference_materials, 1):
            block = f"【参考资料{i}：{material.title}】"
            if material.purpose:
                block += f"\n用途：{material.purpose}"
            block += f"\n{material.content}"
            blocks.append(block)
        blocks.append(_REFERENCE_NOTICE)
        return "\n\n".join(blocks)
