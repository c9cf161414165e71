"""Entry point: fix RTL text for a report and all of its sub-reports."""

from __future__ import annotations

import logging
from typing import Any, Optional

from ..settings import FixerSettings
from ..utils.errors import HostContractError
from .contracts import ReportLike, Subscription
from .interceptor import InterceptorRegistry
from .walker import TreeWalker, WalkSummary

logger = logging.getLogger(__name__)


class ReportRenderHandler:
    """Before-render handler of one report; walks the tree each time the report renders."""

    def __init__(self, fixer: "RTLTextFixer", report: ReportLike):
        self.fixer = fixer
        self.report = report
        self.registry = InterceptorRegistry()
        self.subscription: Optional[Subscription] = None
        self.last_summary: Optional[WalkSummary] = None

    def __call__(self, sender: Any = None) -> None:
        walker = TreeWalker(self.report, self.registry, self.fixer.settings, register=self.fixer.fix)
        try:
            self.last_summary = walker.walk()
        except Exception as e:
            logger.warning("RTL fix of %s aborted: %s", type(self.report).__name__, e)


class RTLTextFixer:
    """
    Injects directional marks into the labels and table cells of a report.

    Nothing happens at registration time beyond subscribing to the report's
    before-render hook. When rendering starts, static text is wrapped once and
    data-bound text gets a per-element interceptor. Sub-reports are registered
    the same way as their parent renders, so nested documents of any depth are
    covered. A report is registered at most once, which also stops cycles of
    sub-reports referencing each other.
    """

    def __init__(self, settings: Optional[FixerSettings] = None):
        self.settings = settings or FixerSettings()

    @staticmethod
    def handler_for(report: ReportLike) -> Optional[ReportRenderHandler]:
        hook = getattr(report, "before_render", None)
        for handler in getattr(hook, "handlers", None) or ():
            if isinstance(handler, ReportRenderHandler):
                return handler
        return None

    def is_registered(self, report: ReportLike) -> bool:
        return self.handler_for(report) is not None

    def fix(self, report: ReportLike) -> None:
        hook = getattr(report, "before_render", None)
        if hook is None or not callable(getattr(hook, "subscribe", None)):
            raise HostContractError("Report has no before-render hook", target=report, missing="before_render")

        if self.is_registered(report):
            logger.debug("RTL fix already registered for %s", type(report).__name__)
            return

        handler = ReportRenderHandler(self, report)
        handler.subscription = hook.subscribe(handler)
        logger.info("Registered RTL fix for %s", type(report).__name__)


def fix_rtl_text(report: ReportLike, settings: Optional[FixerSettings] = None) -> None:
    """Fix RTL text direction of every label and table cell in the report, including sub-reports."""
    RTLTextFixer(settings).fix(report)
