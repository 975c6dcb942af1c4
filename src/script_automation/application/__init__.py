"""Application layer – use cases and pipeline orchestration."""

from script_automation.application.generator import ScriptGenerator
from script_automation.application.handler import handle_form_event, parse_form_event
from script_automation.application.pipeline import BatchPipeline, BatchReport, ItemOutcome

__all__ = [
    "BatchPipeline",
    "BatchReport",
    "ItemOutcome",
    "ScriptGenerator",
    "handle_form_event",
    "parse_form_event",
]
