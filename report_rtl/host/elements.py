"""Printable elements of the in-memory report model."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, ClassVar, Iterator, List, Optional

from ..core.contracts import ElementKind
from .hooks import Hook

if TYPE_CHECKING:
    from .report import Report


@dataclass(frozen=True)
class Binding:
    """Binds an element property to a data member or report parameter."""

    property_name: str
    data_member: str


@dataclass(frozen=True)
class Parameter:
    name: str
    value: Any = None


@dataclass(eq=False)
class Label:
    name: str = ""
    text: Optional[str] = ""
    bindings: List[Binding] = field(default_factory=list)
    before_render: Hook = field(default_factory=Hook, repr=False)

    kind: ClassVar[ElementKind] = ElementKind.LABEL

    def bind(self, data_member: str, property_name: str = "Text") -> "Label":
        self.bindings.append(Binding(property_name, data_member))
        return self

    @property
    def text_binding(self) -> Optional[Binding]:
        for binding in self.bindings:
            if binding.property_name == "Text":
                return binding
        return None


@dataclass(eq=False)
class TableCell(Label):
    kind: ClassVar[ElementKind] = ElementKind.TABLE_CELL


@dataclass(eq=False)
class SubReport:
    name: str = ""
    report_source: Optional["Report"] = None

    kind: ClassVar[ElementKind] = ElementKind.SUB_REPORT


@dataclass(eq=False)
class Band:
    """Container of controls; may hold nested bands."""

    name: str = ""
    controls: List[Any] = field(default_factory=list)

    def iter_controls(self) -> Iterator[Any]:
        for control in self.controls:
            yield control
            if isinstance(control, Band):
                yield from control.iter_controls()


@dataclass(eq=False)
class Table(Band):
    """Band whose controls are table cells laid out in rows."""

    columns: int = 1

    @property
    def rows(self) -> List[List[Any]]:
        step = max(self.columns, 1)
        return [self.controls[i:i + step] for i in range(0, len(self.controls), step)]
