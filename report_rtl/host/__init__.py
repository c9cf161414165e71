"""In-memory reference host implementing the engine contract."""

from .elements import Band, Binding, Label, Parameter, SubReport, Table, TableCell
from .hooks import Hook, HookSubscription
from .report import RenderedDocument, RenderedText, Report, snapshot_texts

__all__ = [
    "Band",
    "Binding",
    "Hook",
    "HookSubscription",
    "Label",
    "Parameter",
    "RenderedDocument",
    "RenderedText",
    "Report",
    "SubReport",
    "Table",
    "TableCell",
    "snapshot_texts",
]
