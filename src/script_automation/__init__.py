"""
Script Automation – repurpose long-form articles into short-video scripts.

  from script_automation.application import ScriptGenerator
  from script_automation.domain import GenerationRequest
  generator = ScriptGenerator.from_config()
  scripts = generator.generate(GenerationRequest(article, script_count=3, word_count_range="300-500"))

Spreadsheets, documents and chat platforms are reached through ports
(see script_automation.ports); inject your own adapters.
"""

__version__ = "0.2.0"
