from unittest.mock import MagicMock

import pytest

from rest_framework.test import APIClient

from modules.gateway.interfaces import IDataGateway

VIEW_MODULES = (
    "modules.core.views",
    "modules.products.views",
    "modules.categories.views",
    "modules.inventory.views",
)


@pytest.fixture()
def mock_gateway():
    """A gateway double honouring the ``IDataGateway`` contract."""
    return MagicMock(spec=IDataGateway)


@pytest.fixture()
def stub_gateway(monkeypatch, mock_gateway):
    """Make every view build ``mock_gateway`` instead of the HTTP gateway."""
    for module in VIEW_MODULES:
        monkeypatch.setattr(f"{module}.get_gateway", lambda: mock_gateway)
    return mock_gateway


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def api_client_with_correlation(api_client):
    """APIClient pre-configured with a known correlation ID header."""
    cid = "test-correlation-id-fixture"
    api_client.defaults["HTTP_X_REQUEST_ID"] = cid
    return api_client, cid
