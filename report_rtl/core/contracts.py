"""What the fixer needs from the host reporting engine."""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Iterable, Optional, Protocol, Sequence, Tuple, runtime_checkable

Handler = Callable[[Any], None]


class ElementKind(str, Enum):
    """Element kinds the fixer enumerates."""

    LABEL = "label"
    TABLE_CELL = "table_cell"
    SUB_REPORT = "sub_report"


@runtime_checkable
class Subscription(Protocol):
    """Handle for a registered hook handler."""

    def cancel(self) -> None: ...


@runtime_checkable
class RenderHook(Protocol):
    """An "about to render" hook. Handlers may cancel themselves while it fires."""

    def subscribe(self, handler: Handler) -> Subscription: ...

    @property
    def handlers(self) -> Tuple[Handler, ...]: ...


@runtime_checkable
class BindingLike(Protocol):
    property_name: str
    data_member: str


@runtime_checkable
class ParameterLike(Protocol):
    name: str


@runtime_checkable
class TextElement(Protocol):
    """Label or table cell."""

    text: Optional[str]
    bindings: Sequence[BindingLike]
    before_render: RenderHook


@runtime_checkable
class SubReportElement(Protocol):
    report_source: Optional["ReportLike"]


@runtime_checkable
class ReportLike(Protocol):
    """Root document of a report tree."""

    before_render: RenderHook

    @property
    def parameters(self) -> Sequence[ParameterLike]: ...

    def all_controls(self, kind: ElementKind) -> Iterable[Any]: ...

    def get_current_column_value(self, data_member: str) -> Any: ...
