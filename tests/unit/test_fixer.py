"""Unit tests for the report fixer entry point."""

import pytest
from types import SimpleNamespace

from report_rtl import fix_rtl_text
from report_rtl.core.fixer import ReportRenderHandler, RTLTextFixer
from report_rtl.host import Label, Report, SubReport
from report_rtl.utils.errors import HostContractError


@pytest.mark.unit
class TestRTLTextFixer:
    def test_fix_only_registers(self, settings):
        label = Label(text="Price")
        report = Report(controls=[label])

        assert fix_rtl_text(report, settings) is None

        assert label.text == "Price"
        assert len(report.before_render) == 1
        assert isinstance(report.before_render.handlers[0], ReportRenderHandler)

    def test_handler_runs_walk(self, settings):
        label = Label(text="Price")
        report = Report(controls=[label])
        fix_rtl_text(report, settings)

        report.before_render.fire(report)

        assert label.text == "\u202BPrice\u202C\u200F"
        handler = RTLTextFixer.handler_for(report)
        assert handler.last_summary.static_fixed == 1

    def test_repeated_fix_registers_once(self, settings):
        report = Report(controls=[Label(text="Price")])
        fixer = RTLTextFixer(settings)

        fixer.fix(report)
        fixer.fix(report)
        fix_rtl_text(report, settings)

        assert len(report.before_render) == 1
        assert fixer.is_registered(report)

    def test_missing_hook_raises(self, settings):
        with pytest.raises(HostContractError, match="before-render hook"):
            fix_rtl_text(SimpleNamespace(), settings)

    def test_hook_without_subscribe_raises(self, settings):
        with pytest.raises(HostContractError, match="missing=before_render"):
            fix_rtl_text(SimpleNamespace(before_render=object()), settings)

    def test_sub_reports_registered_on_render_only(self, settings):
        inner = Report(controls=[Label(text="Total")])
        report = Report(controls=[SubReport(report_source=inner)])
        fix_rtl_text(report, settings)

        assert len(inner.before_render) == 0
        report.before_render.fire(report)
        assert len(inner.before_render) == 1

    def test_walk_failure_is_contained(self, settings, mock_report):
        mock_report.all_controls.side_effect = RuntimeError("engine gone")
        fix_rtl_text(mock_report, settings)

        mock_report.before_render.fire(mock_report)

        assert RTLTextFixer.handler_for(mock_report).last_summary is None

    def test_default_settings(self, monkeypatch):
        monkeypatch.setenv("REPORT_RTL_FIX_LABELS", "false")
        label = Label(text="L")
        report = Report(controls=[label])

        RTLTextFixer().fix(report)
        report.before_render.fire(report)

        assert label.text == "L"
