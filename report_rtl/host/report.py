"""In-memory report with a sequential render pass."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Sequence

from ..core.contracts import ElementKind
from ..utils.errors import ValueResolutionError
from .elements import Band, Label, Parameter, SubReport
from .hooks import Hook


@dataclass
class RenderedText:
    element: str
    text: Optional[str]


@dataclass
class RenderedDocument:
    """Text values in the order they were committed to the output."""

    report: str = ""
    entries: List[RenderedText] = field(default_factory=list)

    @property
    def texts(self) -> List[Optional[str]]:
        return [entry.text for entry in self.entries]

    def commit(self, element: str, text: Optional[str]) -> None:
        self.entries.append(RenderedText(element, text))

    def extend(self, other: "RenderedDocument") -> None:
        self.entries.extend(other.entries)


class Report:
    """
    Root document of the in-memory model.

    Rendering fires ``before_render`` once, then walks the controls for each
    record of the data source: Text bindings are applied, the element's own
    ``before_render`` fires and its text is committed. Sub-reports render their
    source in place. A report without a data source renders its controls once.
    """

    def __init__(
        self,
        name: str = "",
        controls: Optional[Iterable[Any]] = None,
        parameters: Optional[Iterable[Parameter]] = None,
        data_source: Optional[Sequence[Mapping[str, Any]]] = None,
    ):
        self.name = name
        self.controls: List[Any] = list(controls or [])
        self._parameters: List[Parameter] = list(parameters or [])
        self.data_source: List[Mapping[str, Any]] = list(data_source or [])
        self.before_render = Hook()
        self._current: Optional[Mapping[str, Any]] = None

    def __repr__(self) -> str:
        return f"Report(name={self.name!r}, controls={len(self.controls)})"

    @property
    def parameters(self) -> List[Parameter]:
        return list(self._parameters)

    def add(self, *controls: Any) -> "Report":
        self.controls.extend(controls)
        return self

    def add_parameter(self, name: str, value: Any = None) -> Parameter:
        parameter = Parameter(name, value)
        self._parameters.append(parameter)
        return parameter

    def get_parameter(self, name: str) -> Optional[Parameter]:
        for parameter in self._parameters:
            if parameter.name == name:
                return parameter
        return None

    def iter_controls(self) -> Iterator[Any]:
        """All controls of this report, bands flattened; sub-report contents excluded."""
        for control in self.controls:
            yield control
            if isinstance(control, Band):
                yield from control.iter_controls()

    def all_controls(self, kind: ElementKind) -> List[Any]:
        return [c for c in self.iter_controls() if getattr(c, "kind", None) is kind]

    def get_current_column_value(self, data_member: str) -> Any:
        if self._current is None:
            raise ValueResolutionError(f"No current record while resolving '{data_member}'")
        if data_member not in self._current:
            raise ValueResolutionError(f"Unknown data member '{data_member}'")
        return self._current[data_member]

    def render(self) -> RenderedDocument:
        document = RenderedDocument(report=self.name)
        self.before_render.fire(self)
        records: List[Mapping[str, Any]] = self.data_source or [{}]
        try:
            for record in records:
                self._current = record
                for control in self.iter_controls():
                    self._render_control(control, document)
        finally:
            self._current = None
        return document

    def _render_control(self, control: Any, document: RenderedDocument) -> None:
        if isinstance(control, SubReport):
            if control.report_source is not None:
                document.extend(control.report_source.render())
            return
        if not isinstance(control, Label):
            return

        binding = control.text_binding
        if binding is not None:
            control.text = self._bound_text(binding.data_member)
        control.before_render.fire(control)
        document.commit(control.name, control.text)

    def _bound_text(self, data_member: str) -> str:
        parameter = self.get_parameter(data_member)
        if parameter is not None:
            value = parameter.value
        else:
            value = (self._current or {}).get(data_member)
        return "" if value is None else str(value)


def snapshot_texts(report: Report) -> Dict[str, Optional[str]]:
    """Current text of every named label and cell, keyed by element name."""
    return {
        c.name: c.text
        for c in report.iter_controls()
        if isinstance(c, Label) and c.name
    }
