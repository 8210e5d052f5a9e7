import pytest

from yachtquote.schemas.yacht import Yacht
from yachtquote.core.config import settings


def _yacht(**overrides) -> Yacht:
    data = {
        "id": "yacht_1",
        "tenantId": "tenant_1",
        "name": "Sea Breeze",
        "builder": "Benetti",
        "type": "Motor",
        "length": 40.0,
        "area": "Mediterranean",
        "cabins": 5,
        "guests": 10,
        "weeklyRate": 10000,
        "currency": "EUR",
        "createdAt": "2024-01-01T00:00:00Z",
        "updatedAt": "2024-01-01T00:00:00Z",
    }
    data.update(overrides)
    return Yacht.model_validate(data)


@pytest.fixture
def yacht_factory():
    return _yacht


@pytest.fixture
def med_yacht():
    return _yacht()


@pytest.fixture
def caribbean_yacht():
    return _yacht(id="yacht_2", name="Island Time", area="Caribbean", weeklyRate=25000, currency="USD")


@pytest.fixture
def bahamas_yacht():
    return _yacht(id="yacht_3", name="Blue Cay", area="Bahamas", weeklyRate=18000, currency="USD")


@pytest.fixture
def valid_yacht_data():
    return _yacht().model_dump(by_alias=True)


@pytest.fixture
def valid_lead_data():
    return {
        "id": "lead_1",
        "tenantId": "tenant_1",
        "email": "john@example.com",
        "name": "John Doe",
        "notes": "Family of six, July, Greek islands",
        "partySize": 6,
        "location": "Greece",
        "dates": "2024-07-06 to 2024-07-13",
        "budget": 60000,
        "status": "new",
        "createdAt": "2024-01-01T00:00:00Z",
        "updatedAt": "2024-01-01T00:00:00Z",
    }


@pytest.fixture
def valid_quote_request_data():
    return {
        "yachtId": "yacht_1",
        "weeks": "2",
        "apaPct": "30",
        "gratuityPct": 10,
        "deliveryFee": 500,
        "extras": [{"label": "Chef", "amount": "1200"}],
    }


@pytest.fixture
def app_settings():
    """Return application settings"""
    return settings


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
    config.addinivalue_line(
        "markers", "pricing: marks tests related to pricing"
    )
    config.addinivalue_line(
        "markers", "schemas: marks tests related to data contracts"
    )
    config.addinivalue_line(
        "markers", "formatting: marks tests related to quote rendering"
    )
    config.addinivalue_line(
        "markers", "metrics: marks tests related to metrics"
    )
