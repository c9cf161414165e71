import pytest
from unittest.mock import MagicMock

from report_rtl.host import Hook
from report_rtl.settings import FixerSettings


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast isolated tests")
    config.addinivalue_line("markers", "integration: fix and render full report trees")


@pytest.fixture
def settings(monkeypatch):
    for name in (
        "REPORT_RTL_TEXT_PROPERTY",
        "REPORT_RTL_FIX_LABELS",
        "REPORT_RTL_FIX_TABLE_CELLS",
        "REPORT_RTL_FIX_SUB_REPORTS",
        "REPORT_RTL_SKIP_WRAPPED",
        "REPORT_RTL_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    return FixerSettings(_env_file=None)


@pytest.fixture
def mock_report():
    """Host report double with a real hook and no parameters."""
    report = MagicMock()
    report.before_render = Hook()
    report.parameters = []
    report.all_controls.return_value = []
    return report


@pytest.fixture
def mock_element():
    element = MagicMock()
    element.before_render = Hook()
    element.text = ""
    element.bindings = []
    return element
