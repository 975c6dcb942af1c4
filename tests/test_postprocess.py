from script_automation.domain.models import ScriptResult
from script_automation.postprocess import (
    add_chapter_markers,
    analyze_content,
    extract_keywords,
    format_for_platform,
)


def test_douyin_breaks_after_each_sentence():
    script = ScriptResult("t", "第一句。第二句。")
    assert format_for_platform(script, "douyin") == "第一句。\n第二句。\n"


def test_xiaohongshu_adds_emoji_after_keywords():
    script = ScriptResult("t", "注意：存钱的秘密")
    assert format_for_platform(script, "xiaohongshu") == "注意📌：存钱💰的秘密🤫"


def test_bilibili_marks_first_four_paragraphs():
    text = "\n\n".join(["开头", "展开", "重点", "总结", "彩蛋"])
    marked = add_chapter_markers(text).split("\n\n")
    assert marked[0] == "【🎬 开场】\n开头"
    assert marked[3] == "【💡 总结】\n总结"
    assert marked[4] == "彩蛋"
    assert format_for_platform(ScriptResult("t", text), "bilibili") == add_chapter_markers(text)


def test_unknown_platform_returns_content():
    assert format_for_platform(ScriptResult("t", "原文。"), "youtube") == "原文。"


def test_keywords_ranked_by_frequency():
    text = "远程办公 远程办公 小城市 远程办公 小城市 的 房价"
    assert extract_keywords(text) == ["远程办公", "小城市", "房价"]


def test_analyze_content():
    analysis = analyze_content("第一段有2个数字。\n\n第二段说“你好”。")
    assert analysis.paragraphs == 2
    assert analysis.has_numbers
    assert analysis.has_quotes
    assert analysis.length == len("第一段有2个数字。\n\n第二段说“你好”。")
