"""
Port interfaces (SOLID – Dependency Inversion).
Implement these in adapters; the application layer depends only on these abstractions.
A real spreadsheet, document service or chat SDK plugs in by implementing one port.
"""

from abc import ABC, abstractmethod
from typing import Dict, Iterable, List, Optional

from script_automation.domain.models import ResultRow, WorkItem


class IWorkQueue(ABC):
    """Pending-work sheet: form submissions in, generated script rows out."""

    @abstractmethod
    def items(self) -> List[WorkItem]:
        """All submitted entries in submission order."""
        pass

    def pending(self) -> List[WorkItem]:
        """Entries whose status is blank or 'Pending'."""
        return [item for item in self.items() if item.status in ("", "Pending")]

    def latest(self) -> Optional[WorkItem]:
        entries = self.items()
        return entries[-1] if entries else None

    @abstractmethod
    def mark(self, request_id, status: str, completed_at: Optional[str] = None) -> None:
        """Record a status ('Processing...', 'Completed (n scripts)', 'Error: ...')."""
        pass

    @abstractmethod
    def append_results(self, rows: Iterable[ResultRow]) -> int:
        """Persist result rows; return how many were saved."""
        pass

    @abstractmethod
    def results(self) -> List[ResultRow]:
        """Every stored result row."""
        pass


class IDocumentExporter(ABC):
    """Render grouped results as a document and return its reference (URL or path)."""

    @abstractmethod
    def export(self, groups: Dict[str, List[ResultRow]], title: Optional[str] = None) -> str:
        pass


class INotifier(ABC):
    """Tell a user where their generated scripts live."""

    @abstractmethod
    def notify(self, recipient: Optional[str], reference: str) -> None:
        pass


class ICredentialSource(ABC):
    """Key/value store holding API keys (environment, properties store...)."""

    @abstractmethod
    def get(self, name: str) -> Optional[str]:
        pass
