import pytest

from agents.catalog_search_agent import CatalogSearchAgent
from clients.mock_catalog_client import MockCatalogClient
from models.booking import GuestDetails
from utils.config import AppConfig


@pytest.fixture
def instant_config():
    return AppConfig.instant()


@pytest.fixture
def catalog(instant_config):
    return CatalogSearchAgent(MockCatalogClient(instant_config))


@pytest.fixture
def guest():
    return GuestDetails(
        first_name="Priya",
        last_name="Nair",
        email="priya.nair@example.com",
        phone="9876543210",
        address="221 Marine Drive",
        city="Mumbai",
        zip_code="400020",
    )
