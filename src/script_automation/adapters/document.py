"""IDocumentExporter adapter writing Markdown files."""

from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional

from script_automation.domain.models import ResultRow
from script_automation.ports.interfaces import IDocumentExporter


def render_markdown(groups: Dict[str, List[ResultRow]], title: str, generated_at: str) -> str:
    lines = [f"# {title}", "", f"Generated on: {generated_at}", ""]
    for request_id, rows in groups.items():
        lines += [f"## Request #{request_id}", ""]
        for row in rows:
            lines += [
                f"### Script {row.script_number}: {row.theme}",
                "",
                row.content,
                "",
                f"Word count: {row.word_count}",
                "",
                "---",
                "",
            ]
    return "\n".join(lines)


class MarkdownExporter(IDocumentExporter):
    """Writes one document per export into output_dir and returns its path."""

    def __init__(self, output_dir: Optional[str] = None):
        if output_dir is None:
            from script_automation.config import OUTPUT_DIR
            output_dir = OUTPUT_DIR
        self.output_dir = Path(output_dir)

    def export(self, groups: Dict[str, List[ResultRow]], title: Optional[str] = None) -> str:
        now = datetime.now()
        title = title or f"Script Generation Results - {now.strftime('%Y-%m-%d %H:%M')}"
        self.output_dir.mkdir(parents=True, exist_ok=True)
        path = self.output_dir / f"scripts_{now.strftime('%Y%m%d_%H%M%S')}.md"
        path.write_text(render_markdown(groups, title, now.strftime("%Y-%m-%d %H:%M:%S")), encoding="utf-8")
        return str(path)
