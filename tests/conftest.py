"""
Pytest Configuration and Shared Fixtures

Provides common test fixtures and configuration for the entire test suite.
"""

import tempfile
from pathlib import Path

import pytest

from finance_reports.core.config import reload_config
from finance_reports.core.models import Transaction, UserProfile
from tests.fixtures.report_data import october_profile, october_transactions


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as temp_path:
        yield Path(temp_path)


@pytest.fixture
def sample_transactions() -> list[Transaction]:
    """October 2023 transactions: one salary payment and five expenses."""
    return october_transactions()


@pytest.fixture
def sample_profile() -> UserProfile:
    """Profile with a $2500 salary and a 20% savings goal."""
    return october_profile()


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch, tmp_path):
    """Set up test environment variables."""
    # Ensure tests never touch a real ledger
    monkeypatch.setenv("FINANCE_REPORTS_ENV", "test")
    monkeypatch.setenv("FINANCE_REPORTS_DATA_DIR", str(tmp_path / "finance_reports_data"))
    monkeypatch.delenv("FINANCE_REPORTS_LEDGER_DIR", raising=False)
    monkeypatch.delenv("REPORT_RANGE_DAYS", raising=False)
    monkeypatch.delenv("REPORT_FORMAT", raising=False)
    monkeypatch.setenv("LOG_LEVEL", "INFO")
    reload_config()
    yield
    import finance_reports.core.config as config_module

    config_module._config = None


# Test markers for categorizing tests
def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests for individual components")
    config.addinivalue_line("markers", "integration: Integration tests for complete workflows")
    config.addinivalue_line("markers", "currency: Tests for currency handling and precision")
    config.addinivalue_line("markers", "reports: Tests for report generation")
