"""Ports (interfaces) – depend on these, implement in adapters."""

from script_automation.ports.interfaces import (
    ICredentialSource,
    IDocumentExporter,
    INotifier,
    IWorkQueue,
)

__all__ = [
    "ICredentialSource",
    "IDocumentExporter",
    "INotifier",
    "IWorkQueue",
]
