"""Prompt templating – style/platform catalog and the prompt builder."""

from script_automation.prompting.builder import (
    DEFAULT_SYSTEM_PROMPT,
    MAX_SOURCE_CHARS,
    TRUNCATION_MARKER,
    PromptBuilder,
    PromptPair,
    truncate_source,
)
from script_automation.prompting.catalog import (
    DEFAULT_CATALOG,
    PLATFORM_SETTINGS,
    STYLE_TEMPLATES,
    PlatformSetting,
    PromptCatalog,
    StyleTemplate,
)

__all__ = [
    "DEFAULT_CATALOG",
    "DEFAULT_SYSTEM_PROMPT",
    "MAX_SOURCE_CHARS",
    "PLATFORM_SETTINGS",
    "STYLE_TEMPLATES",
    "TRUNCATION_MARKER",
    "PlatformSetting",
    "PromptBuilder",
    "PromptCatalog",
    "PromptPair",
    "StyleTemplate",
    "truncate_source",
]
