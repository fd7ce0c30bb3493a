import pytest
from fastapi.testclient import TestClient

from utils.ui_helpers import OUTPUT_MODE_ENV


@pytest.fixture(autouse=True)
def plain_output(monkeypatch):
    # CLI --output writes to os.environ; start every test from plain mode and restore afterwards
    monkeypatch.setenv(OUTPUT_MODE_ENV, "plain")


@pytest.fixture
def client():
    import api as api_module
    with TestClient(api_module.app) as test_client:
        yield test_client


@pytest.fixture
def messages():
    """Collects what a host would display."""
    return []
