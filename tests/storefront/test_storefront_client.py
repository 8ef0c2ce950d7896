from unittest.mock import Mock, patch

import pytest
import requests

from apps.storefront.client import (
    CustomerNotFound,
    StorefrontClient,
    StorefrontError,
    get_storefront_client,
)


def _response(payload):
    resp = Mock(spec=requests.Response)
    resp.json.return_value = payload
    return resp


@pytest.fixture
def session():
    return requests.Session()


@pytest.fixture
def sf(session):
    return StorefrontClient("shop.example.com", "public-token", session=session)


def test_client_targets_versioned_graphql_endpoint(sf, session):
    assert sf.endpoint == "https://shop.example.com/api/2023-04/graphql.json"
    assert session.headers["X-Shopify-Storefront-Access-Token"] == "public-token"


def test_get_address_book_parses_edges_and_default(sf, session):
    payload = {
        "data": {
            "customer": {
                "defaultAddress": {"id": "gid://shopify/MailingAddress/2?t=x"},
                "addresses": {
                    "edges": [
                        {"node": {"id": "gid://shopify/MailingAddress/1?t=x", "city": "Oslo"}},
                        {
                            "node": {
                                "id": "gid://shopify/MailingAddress/2?t=x",
                                "city": "Bergen",
                                "formatted": ["Bergen", "Norway"],
                            }
                        },
                    ]
                },
            }
        }
    }
    with patch.object(session, "post", return_value=_response(payload)) as post:
        book = sf.get_address_book("customer-token")

    assert [a.city for a in book] == ["Oslo", "Bergen"]
    assert book.default_address.city == "Bergen"
    assert book.addresses[1].formatted == ["Bergen", "Norway"]
    variables = post.call_args.kwargs["json"]["variables"]
    assert variables == {"customerAccessToken": "customer-token", "first": 30}
    assert post.call_args.kwargs["timeout"] == 10


def test_get_address_book_without_customer(sf, session):
    with patch.object(session, "post", return_value=_response({"data": {"customer": None}})):
        with pytest.raises(CustomerNotFound):
            sf.get_address_book("expired")


def test_create_address_returns_new_id(sf, session):
    payload = {
        "data": {
            "customerAddressCreate": {
                "customerAddress": {"id": "gid://shopify/MailingAddress/9"},
                "customerUserErrors": [],
            }
        }
    }
    with patch.object(session, "post", return_value=_response(payload)) as post:
        new_id = sf.create_address("customer-token", {"city": "Oslo"})

    assert new_id == "gid://shopify/MailingAddress/9"
    variables = post.call_args.kwargs["json"]["variables"]
    assert variables == {"customerAccessToken": "customer-token", "address": {"city": "Oslo"}}
    assert "id" not in variables


def test_user_errors_become_storefront_error(sf, session):
    payload = {
        "data": {
            "customerAddressUpdate": {
                "customerUserErrors": [{"code": "INVALID", "field": ["zip"], "message": "Invalid zip"}]
            }
        }
    }
    with patch.object(session, "post", return_value=_response(payload)):
        with pytest.raises(StorefrontError) as exc_info:
            sf.update_address("customer-token", "gid://shopify/MailingAddress/1", {"zip": "x"})

    assert exc_info.value.message == "Invalid zip"


def test_set_default_sends_address_id(sf, session):
    payload = {"data": {"customerDefaultAddressUpdate": {"customerUserErrors": []}}}
    with patch.object(session, "post", return_value=_response(payload)) as post:
        sf.set_default_address("customer-token", "gid://shopify/MailingAddress/1")

    variables = post.call_args.kwargs["json"]["variables"]
    assert variables["addressId"] == "gid://shopify/MailingAddress/1"


def test_graphql_errors_become_storefront_error(sf, session):
    payload = {"errors": [{"message": "Throttled"}]}
    with patch.object(session, "post", return_value=_response(payload)):
        with pytest.raises(StorefrontError, match="Throttled"):
            sf.delete_address("customer-token", "gid://shopify/MailingAddress/1")


def test_network_failure_becomes_storefront_error(sf, session):
    with patch.object(session, "post", side_effect=requests.ConnectionError("connection refused")):
        with pytest.raises(StorefrontError, match="connection refused"):
            sf.delete_address("customer-token", "gid://shopify/MailingAddress/1")


def test_non_object_body_becomes_storefront_error(sf, session):
    with patch.object(session, "post", return_value=_response(["unexpected"])):
        with pytest.raises(StorefrontError, match="Invalid response"):
            sf.get_address_book("customer-token")


def test_string_graphql_error_becomes_storefront_error(sf, session):
    with patch.object(session, "post", return_value=_response({"errors": ["Throttled"]})):
        with pytest.raises(StorefrontError, match="Throttled"):
            sf.delete_address("customer-token", "gid://shopify/MailingAddress/1")


def test_string_user_error_becomes_storefront_error(sf, session):
    payload = {"data": {"customerAddressDelete": {"customerUserErrors": ["Not allowed"]}}}
    with patch.object(session, "post", return_value=_response(payload)):
        with pytest.raises(StorefrontError, match="Not allowed"):
            sf.delete_address("customer-token", "gid://shopify/MailingAddress/1")


def test_http_error_becomes_storefront_error(sf, session):
    resp = _response({})
    resp.raise_for_status.side_effect = requests.HTTPError("502 Server Error")
    with patch.object(session, "post", return_value=resp):
        with pytest.raises(StorefrontError, match="502"):
            sf.get_address_book("customer-token")


def test_create_access_token(sf, session):
    payload = {
        "data": {
            "customerAccessTokenCreate": {
                "customerUserErrors": [],
                "customerAccessToken": {"accessToken": "tok-1", "expiresAt": "2030-01-01"},
            }
        }
    }
    with patch.object(session, "post", return_value=_response(payload)) as post:
        assert sf.create_access_token("a@example.com", "pw") == "tok-1"

    assert post.call_args.kwargs["json"]["variables"] == {
        "input": {"email": "a@example.com", "password": "pw"}
    }


def test_create_access_token_without_token(sf, session):
    payload = {
        "data": {
            "customerAccessTokenCreate": {"customerUserErrors": [], "customerAccessToken": None}
        }
    }
    with patch.object(session, "post", return_value=_response(payload)):
        with pytest.raises(StorefrontError):
            sf.create_access_token("a@example.com", "pw")


def test_factory_reads_settings(settings):
    settings.STOREFRONT_API_VERSION = "2024-01"
    settings.STOREFRONT_TIMEOUT = 3

    client = get_storefront_client()

    assert client.endpoint == "https://demo-store.example.com/api/2024-01/graphql.json"
    assert client.timeout == 3
