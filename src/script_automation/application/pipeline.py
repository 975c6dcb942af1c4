"""
Batch pipeline – single responsibility: drain the pending-work queue
(generate → store rows → mark status), then optionally export and notify.
Depends only on port interfaces (SOLID – Dependency Inversion).
"""

import time
from collections import OrderedDict
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, Dict, List, Optional

import requests

from script_automation.application.generator import ScriptGenerator
from script_automation.domain.errors import ScriptGenerationError
from script_automation.domain.models import ResultRow, WorkItem
from script_automation.ports.interfaces import IDocumentExporter, INotifier, IWorkQueue

STATUS_PROCESSING = "Processing..."


@dataclass
class ItemOutcome:
    request_id: object
    success: bool
    saved: int = 0
    error: Optional[str] = None


@dataclass
class BatchReport:
    outcomes: List[ItemOutcome] = field(default_factory=list)
    duration: float = 0.0

    @property
    def processed(self) -> int:
        return sum(1 for o in self.outcomes if o.success)

    @property
    def failed(self) -> int:
        return sum(1 for o in self.outcomes if not o.success)


def _now() -> str:
    return datetime.now().strftime("%Y-%m-%d %H:%M:%S")


class BatchPipeline:
    """
    Processes queued submissions one at a time.
    A failing entry is marked 'Error: ...' and the batch moves on.
    """

    def __init__(
        self,
        *,
        generator: ScriptGenerator,
        queue: IWorkQueue,
        exporter: Optional[IDocumentExporter] = None,
        notifier: Optional[INotifier] = None,
        delay: float = 2.0,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self._generator = generator
        self._queue = queue
        self._exporter = exporter
        self._notifier = notifier
        self._delay = delay
        self._sleep = sleep

    def process(self, item: WorkItem) -> ItemOutcome:
        """Generate scripts for one entry and record the outcome against it."""
        if item.request is None:
            error = item.error or "Invalid request"
            self._queue.mark(item.request_id, f"Error: {error}")
            print(f"  ⚠️  Row {item.request_id}: {error}")
            return ItemOutcome(item.request_id, success=False, error=error)

        self._queue.mark(item.request_id, STATUS_PROCESSING)
        try:
            scripts = self._generator.generate(item.request)
            rows = [
                ResultRow.from_script(item.request_id, number, script, item.timestamp)
                for number, script in enumerate(scripts, 1)
            ]
            saved = self._queue.append_results(rows)
            self._queue.mark(item.request_id, f"Completed ({saved} scripts)", completed_at=_now())
        except (ScriptGenerationError, OSError) as e:
            self._queue.mark(item.request_id, f"Error: {e}")
            print(f"  ❌ Row {item.request_id} failed: {e}")
            return ItemOutcome(item.request_id, success=False, error=str(e))

        print(f"  ✅ Row {item.request_id}: {saved} scripts")
        return ItemOutcome(item.request_id, success=True, saved=saved)

    def process_latest(self) -> Optional[ItemOutcome]:
        item = self._queue.latest()
        if item is None:
            print("No entries to process.")
            return None
        return self.process(item)

    def process_pending(self) -> BatchReport:
        """Run every pending entry in order, pausing between sequential generations."""
        print("=" * 60)
        print("Processing pending entries...")
        print("=" * 60)

        started = time.monotonic()
        pending = self._queue.pending()
        report = BatchReport()
        print(f"\nFound {len(pending)} pending entries")

        for i, item in enumerate(pending, 1):
            print(f"\n[{i}/{len(pending)}] Row {item.request_id}")
            report.outcomes.append(self.process(item))
            if i < len(pending) and item.request is not None:
                self._sleep(self._delay)

        report.duration = time.monotonic() - started
        print(f"\nProcessed: {report.processed} entries, failed: {report.failed} "
              f"({report.duration / 60:.1f} minutes)")
        return report

    def grouped_results(self) -> Dict[str, List[ResultRow]]:
        groups: Dict[str, List[ResultRow]] = OrderedDict()
        for row in self._queue.results():
            groups.setdefault(str(row.request_id), []).append(row)
        return groups

    def export(self, title: Optional[str] = None) -> Optional[str]:
        """Export all stored results; None when there is nothing to export."""
        if self._exporter is None:
            raise RuntimeError("No document exporter configured")
        groups = self.grouped_results()
        if not groups:
            print("No results to export")
            return None
        reference = self._exporter.export(groups, title)
        print(f"\n📄 Document created: {reference}")
        return reference

    def notify(self, recipient: Optional[str], reference: str) -> bool:
        if self._notifier is None:
            return False
        try:
            self._notifier.notify(recipient, reference)
            return True
        except requests.exceptions.RequestException as e:
            print(f"\n⚠️  Notification failed: {e}\n   Document is saved at {reference}")
            return False
