"""Walks a report tree and applies the RTL fix to every label and table cell."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional

from ..settings import FixerSettings
from ..text import ensure_direction, fix_direction
from .classifier import find_text_binding
from .contracts import ElementKind, ReportLike
from .interceptor import InterceptorRegistry

logger = logging.getLogger(__name__)


@dataclass
class WalkSummary:
    """Counts of what a single walk did."""

    static_fixed: int = 0
    interceptors_attached: int = 0
    sub_reports_registered: int = 0
    sub_reports_skipped: int = 0
    failures: int = 0


class TreeWalker:
    """Applies the fix to one report; nested sub-reports go through ``register``."""

    def __init__(
        self,
        report: ReportLike,
        registry: InterceptorRegistry,
        settings: FixerSettings,
        register: Optional[Callable[[ReportLike], None]] = None,
    ):
        self.report = report
        self.registry = registry
        self.settings = settings
        self.register = register

    def walk(self) -> WalkSummary:
        summary = WalkSummary()
        if self.settings.fix_table_cells:
            self._fix_elements(ElementKind.TABLE_CELL, summary)
        if self.settings.fix_labels:
            self._fix_elements(ElementKind.LABEL, summary)
        if self.settings.fix_sub_reports and self.register is not None:
            self._register_sub_reports(summary)
        logger.debug("RTL walk of %s finished: %s", type(self.report).__name__, summary)
        return summary

    def _fix_elements(self, kind: ElementKind, summary: WalkSummary) -> None:
        for element in self.report.all_controls(kind):
            try:
                self._fix_element(element, summary)
            except Exception as e:
                summary.failures += 1
                logger.warning("Skipping %s element after RTL fix failure: %s", kind.value, e)

    def _fix_element(self, element: Any, summary: WalkSummary) -> None:
        binding = find_text_binding(element, self.settings.text_property)
        if binding is None:
            wrap = ensure_direction if self.settings.skip_wrapped else fix_direction
            element.text = wrap(element.text)
            summary.static_fixed += 1
            return

        interceptor = self.registry.attach(
            self.report, element, binding, skip_wrapped=self.settings.skip_wrapped
        )
        if interceptor is not None:
            summary.interceptors_attached += 1

    def _register_sub_reports(self, summary: WalkSummary) -> None:
        for sub_report in self.report.all_controls(ElementKind.SUB_REPORT):
            source = getattr(sub_report, "report_source", None)
            if source is None:
                summary.sub_reports_skipped += 1
                logger.debug("Sub-report without a report source skipped")
                continue
            try:
                self.register(source)
                summary.sub_reports_registered += 1
            except Exception as e:
                summary.failures += 1
                logger.warning("Could not register RTL fix for sub-report: %s", e)
