from script_automation.domain.models import GenerationRequest, ReferenceMaterial
from script_automation.prompting.builder import (
    DEFAULT_SYSTEM_PROMPT,
    TRUNCATION_MARKER,
    PromptBuilder,
    truncate_source,
)
from script_automation.prompting.catalog import PLATFORM_SETTINGS, STYLE_TEMPLATES, PlatformSetting, PromptCatalog

ARTICLE = "第一段：远程办公正在改变城市格局。\n\n第二段：年轻人开始回流小城市，生活成本和幸福感都在变化。"


def test_prompt_is_deterministic():
    request = GenerationRequest(ARTICLE, script_count=2, word_count_range="300-500", style="storytelling")
    builder = PromptBuilder()
    first = builder.build(request)
    second = PromptBuilder().build(GenerationRequest(ARTICLE, 2, "300-500", style="storytelling"))
    assert first == second
    assert first.user.encode("utf-8") == second.user.encode("utf-8")


def test_count_and_word_range_appear_verbatim():
    prompt = PromptBuilder().build(GenerationRequest(ARTICLE, script_count=2, word_count_range="300-500")).user
    assert "2个不同的主题" in prompt
    assert "300-500字" in prompt
    assert "6. 每个脚本控制在300-500字" in prompt


def test_long_source_is_truncated_with_marker():
    content = "长" * 2999 + "尾" + "多余的内容" * 200
    prompt = PromptBuilder().build_user_prompt(GenerationRequest(content, 1, "300-500"))
    assert content[:3000] + " " + TRUNCATION_MARKER in prompt
    assert content[:3001] not in prompt


def test_short_source_is_kept_whole_without_marker():
    prompt = PromptBuilder().build_user_prompt(GenerationRequest(ARTICLE, 1, "300-500"))
    assert ARTICLE in prompt
    assert TRUNCATION_MARKER not in prompt


def test_truncate_source_boundary():
    exactly = "a" * 3000
    assert truncate_source(exactly) == exactly + " "
    assert truncate_source(exactly + "b") == exactly + " " + TRUNCATION_MARKER
    assert truncate_source("abcdef", limit=3) == "abc " + TRUNCATION_MARKER


def test_base_template_asks_for_json_array_without_hook():
    prompt = PromptBuilder().build_user_prompt(GenerationRequest(ARTICLE, 3, "300-500"))
    assert '"theme": "主题名称（10字以内）"' in prompt
    assert '"content": "完整的脚本内容"' in prompt
    assert '"hook"' not in prompt
    assert "风格要求" not in prompt
    assert "7. 适合在抖音、小红书等平台发布" in prompt
    assert prompt.endswith("只返回JSON，不要有其他说明文字。")


def test_structure_requirements_are_listed():
    prompt = PromptBuilder().build_user_prompt(GenerationRequest(ARTICLE, 3, "300-500"))
    assert "3. 开头必须有强钩子，能在3秒内吸引观众" in prompt
    assert "4. 结构：钩子→故事/观点→转折→结论" in prompt
    assert "5. 多用短句，避免长难句" in prompt


def test_style_and_platform_inject_guidance_and_hook():
    request = GenerationRequest(ARTICLE, 2, "300-500", style="conversational", platform="douyin")
    prompt = PromptBuilder().build_user_prompt(request)
    assert f"风格要求：{STYLE_TEMPLATES['conversational'].instruction}" in prompt
    assert f"平台特点：{PLATFORM_SETTINGS['douyin'].style}" in prompt
    assert '"hook": "开头钩子（一句话）"' in prompt
    assert "7. 融入平台特色和目标用户喜好" in prompt


def test_unknown_tags_degrade_to_empty_instruction():
    request = GenerationRequest(ARTICLE, 2, "300-500", style="shouting", platform="myspace")
    prompt = PromptBuilder().build_user_prompt(request)
    assert "风格要求：\n平台特点：\n" in prompt


def test_platform_supplies_word_count_when_range_is_empty():
    prompt = PromptBuilder().build_user_prompt(GenerationRequest(ARTICLE, 2, "", platform="bilibili"))
    assert "800-1200字" in prompt


def test_empty_range_without_platform_uses_default():
    prompt = PromptBuilder().build_user_prompt(GenerationRequest(ARTICLE, 2))
    assert "300-500字" in prompt


def test_reference_materials_are_rendered_as_background():
    request = GenerationRequest(
        ARTICLE,
        2,
        "300-500",
        reference_materials=[
            ReferenceMaterial(title="统计公报", content="2023年返乡人数增长12%", purpose="提供数据"),
            ReferenceMaterial(title="采访记录", content="小王说回老家更自在"),
        ],
    )
    prompt = PromptBuilder().build_user_prompt(request)
    assert "【参考资料1：统计公报】\n用途：提供数据\n2023年返乡人数增长12%" in prompt
    assert "【参考资料2：采访记录】\n小王说回老家更自在" in prompt
    assert "不要直接照搬原文" in prompt
    assert prompt.index("源内容：") < prompt.index("参考资料：") < prompt.index("要求：")


def test_system_prompt_default_and_override():
    builder = PromptBuilder()
    assert builder.build(GenerationRequest(ARTICLE)).system == DEFAULT_SYSTEM_PROMPT
    custom = GenerationRequest(ARTICLE, system_prompt="你是一名财经博主")
    assert builder.build(custom).system == "你是一名财经博主"


def test_completion_request_payload_orders_system_first():
    completion = PromptBuilder().build_completion_request(
        GenerationRequest(ARTICLE, 2, "300-500"), model="deepseek-chat", temperature=0.7, max_tokens=4000
    )
    payload = completion.to_payload()
    assert payload["model"] == "deepseek-chat"
    assert [m["role"] for m in payload["messages"]] == ["system", "user"]
    assert payload["temperature"] == 0.7
    assert payload["max_tokens"] == 4000


def test_catalog_defaults_and_custom_tables():
    default = PromptCatalog()
    assert default.styles is STYLE_TEMPLATES
    assert default.platforms is PLATFORM_SETTINGS
    assert default.word_count_for("", "bilibili") == "800-1200"

    custom = PromptCatalog(platforms={"kuaishou": PlatformSetting("快手", "200-400", "接地气")})
    assert custom.word_count_for("", "kuaishou") == "200-400"
    assert custom.platform_guide("douyin") == ""
    assert custom.style_instruction("storytelling") == default.style_instruction("storytelling")
