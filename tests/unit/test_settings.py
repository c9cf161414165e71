"""Unit tests for fixer settings."""

import pytest

from report_rtl.settings import FixerSettings


@pytest.mark.unit
class TestFixerSettings:
    def test_defaults(self, settings):
        assert settings.text_property == "Text"
        assert settings.fix_labels is True
        assert settings.fix_table_cells is True
        assert settings.fix_sub_reports is True
        assert settings.skip_wrapped is True
        assert settings.log_level == "WARNING"

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("REPORT_RTL_TEXT_PROPERTY", "Caption")
        monkeypatch.setenv("REPORT_RTL_FIX_TABLE_CELLS", "0")
        monkeypatch.setenv("REPORT_RTL_LOG_LEVEL", " debug ")
        settings = FixerSettings(_env_file=None)
        assert settings.text_property == "Caption"
        assert settings.fix_table_cells is False
        assert settings.log_level == "DEBUG"

    def test_env_file(self, tmp_path, monkeypatch):
        monkeypatch.delenv("REPORT_RTL_SKIP_WRAPPED", raising=False)
        env = tmp_path / ".env"
        env.write_text("REPORT_RTL_SKIP_WRAPPED=false\nUNRELATED=1\n", encoding="utf-8")
        assert FixerSettings(_env_file=str(env)).skip_wrapped is False
