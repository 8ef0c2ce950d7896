# tests/conftest.py
from unittest.mock import create_autospec

import pytest

from apps.accounts.session import CUSTOMER_ACCESS_TOKEN_SESSION_KEY
from apps.storefront.client import StorefrontClient
from apps.storefront.records import AddressBook, AddressRecord

FIRST_ADDRESS_ID = (
    "gid://shopify/MailingAddress/1?model_name=CustomerAddress&customer_access_token=fresh"
)
SECOND_ADDRESS_ID = (
    "gid://shopify/MailingAddress/2?model_name=CustomerAddress&customer_access_token=fresh"
)


# ---------- Global test tweaks ----------
@pytest.fixture(autouse=True)
def _storefront_settings(settings):
    settings.STOREFRONT_DOMAIN = "demo-store.example.com"
    settings.STOREFRONT_ACCESS_TOKEN = "test-storefront-token"
    return settings


# ---------- Factories / Fixtures ----------
@pytest.fixture
def address_book():
    return AddressBook(
        addresses=[
            AddressRecord(
                id=FIRST_ADDRESS_ID,
                firstName="Ada",
                lastName="Lovelace",
                address1="12 Analytical Row",
                city="London",
                province="Greater London",
                zip="N1 9GU",
                country="United Kingdom",
                formatted=["12 Analytical Row", "London N1 9GU", "United Kingdom"],
            ),
            AddressRecord(
                id=SECOND_ADDRESS_ID,
                firstName="Grace",
                lastName="Hopper",
                company="Navy",
                address1="1 Harbor Way",
                city="Arlington",
                province="VA",
                zip="22202",
                country="United States",
                formatted=["1 Harbor Way", "Arlington VA 22202", "United States"],
            ),
        ],
        default_address_id=SECOND_ADDRESS_ID,
    )


@pytest.fixture
def storefront(monkeypatch, address_book):
    """Autospec'd StorefrontClient returned by every view's client factory."""
    client = create_autospec(StorefrontClient, instance=True)
    client.get_address_book.return_value = address_book
    client.create_address.return_value = "gid://shopify/MailingAddress/3?model_name=CustomerAddress"
    client.create_access_token.return_value = "customer-token"

    factory = lambda: client  # noqa: E731
    monkeypatch.setattr("apps.customers.views.get_storefront_client", factory)
    monkeypatch.setattr("apps.accounts.views.get_storefront_client", factory)
    return client


@pytest.fixture
def customer_client(db, client):
    """Test client whose session holds a customer access token."""
    session = client.session
    session[CUSTOMER_ACCESS_TOKEN_SESSION_KEY] = "customer-token"
    session.save()
    return client
