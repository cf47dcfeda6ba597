"""Pytest configuration and fixtures for Amadeus MCP server tests."""

import pytest
from unittest.mock import MagicMock

from amadeus import ResponseError

from mcp_server_travel_amadeus.client import AmadeusClientProvider
from mcp_server_travel_amadeus.dispatch import Dispatcher


class MockResponse:
    """Stand-in for amadeus.Response; only `data` and `result` are read."""
    def __init__(self, data):
        self.data = data
        self.result = {"data": data}
        self.status_code = 200


class MockResponseError(ResponseError):
    """ResponseError that skips parsing a real HTTP response."""
    def __init__(self, code="ClientError", description="[400]\nINVALID FORMAT"):
        RuntimeError.__init__(self, description)
        self.response = None
        self.code = code
        self._description = description

    def description(self):
        return self._description


@pytest.fixture
def mock_response():
    """Factory for SDK responses carrying the given data payload."""
    return MockResponse


@pytest.fixture
def mock_client():
    """MagicMock standing in for amadeus.Client."""
    return MagicMock(name="amadeus.Client")


@pytest.fixture
def mock_provider(mock_client):
    """Client provider that always hands out mock_client."""
    provider = MagicMock(spec=AmadeusClientProvider)
    provider.get.return_value = mock_client
    return provider


@pytest.fixture
def dispatcher(mock_provider):
    return Dispatcher(mock_provider)


@pytest.fixture
def amadeus_env(monkeypatch):
    """Test credentials in the environment."""
    monkeypatch.setenv("AMADEUS_CLIENT_ID", "test_client_id_12345")
    monkeypatch.setenv("AMADEUS_CLIENT_SECRET", "test_client_secret")
    monkeypatch.setenv("AMADEUS_HOSTNAME", "test")


@pytest.fixture
def no_amadeus_env(monkeypatch):
    """Environment with no Amadeus configuration at all."""
    for name in ("AMADEUS_CLIENT_ID", "AMADEUS_CLIENT_SECRET", "AMADEUS_HOSTNAME"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def sample_flight_offer():
    """Trimmed flight offer as returned by flight_offers_search."""
    return {
        "type": "flight-offer",
        "id": "1",
        "source": "GDS",
        "itineraries": [
            {
                "duration": "PT7H10M",
                "segments": [
                    {
                        "id": "1",
                        "departure": {"iataCode": "JFK", "at": "2025-12-15T18:30:00"},
                        "arrival": {"iataCode": "LHR", "at": "2025-12-16T06:40:00"},
                        "carrierCode": "BA",
                        "number": "112",
                    }
                ],
            }
        ],
        "price": {"currency": "EUR", "total": "546.70", "base": "184.00"},
        "travelerPricings": [{"travelerId": "1", "travelerType": "ADULT"}],
    }


@pytest.fixture
def sample_traveler():
    return {
        "id": "1",
        "dateOfBirth": "1982-01-16",
        "name": {"firstName": "JORGE", "lastName": "GONZALES"},
        "gender": "MALE",
        "contact": {"emailAddress": "jorge.gonzales833@telefonica.es"},
    }
