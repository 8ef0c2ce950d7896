# apps/storefront/client.py
from __future__ import annotations

import logging
from typing import Any

import requests
from django.conf import settings

from . import queries
from .records import AddressBook, AddressRecord

logger = logging.getLogger(__name__)


class StorefrontError(Exception):
    """A failed Storefront call. ``message`` is safe to show to the customer."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class CustomerNotFound(StorefrontError):
    """The customer access token no longer maps to a customer."""


def _first_message(errors) -> str:
    """Message of the first GraphQL/user error, whatever shape it came in."""
    first = errors[0] if isinstance(errors, list) else errors
    if isinstance(first, dict):
        message = first.get("message")
    else:
        message = first
    if isinstance(message, str) and message:
        return message
    return "Unknown storefront error."


class StorefrontClient:
    """Thin GraphQL client for the customer part of the Storefront API."""

    def __init__(
        self,
        domain: str,
        access_token: str,
        api_version: str = "2023-04",
        timeout: float = 10,
        address_page_size: int = 30,
        session: requests.Session | None = None,
    ):
        self.endpoint = f"https://{domain}/api/{api_version}/graphql.json"
        self.timeout = timeout
        self.address_page_size = address_page_size
        self.session = session or requests.Session()
        self.session.headers.update(
            {
                "Content-Type": "application/json",
                "Accept": "application/json",
                "X-Shopify-Storefront-Access-Token": access_token,
            }
        )

    # -----------------------------------------------------------------
    # Transport
    # -----------------------------------------------------------------
    def execute(self, document: str, variables: dict[str, Any]) -> dict:
        """POST a GraphQL document and return its ``data`` object."""
        try:
            response = self.session.post(
                self.endpoint,
                json={"query": document, "variables": variables},
                timeout=self.timeout,
            )
            response.raise_for_status()
            payload = response.json()
        except requests.RequestException as exc:
            logger.warning("Storefront request failed: %s", exc)
            raise StorefrontError(str(exc)) from exc
        except ValueError as exc:
            logger.warning("Storefront returned invalid JSON: %s", exc)
            raise StorefrontError("Invalid response from the storefront.") from exc

        if not isinstance(payload, dict):
            logger.warning("Storefront returned a non-object body: %r", type(payload))
            raise StorefrontError("Invalid response from the storefront.")

        errors = payload.get("errors") or []
        if errors:
            message = _first_message(errors)
            logger.warning("Storefront GraphQL error: %s", message)
            raise StorefrontError(message)
        data = payload.get("data")
        return data if isinstance(data, dict) else {}

    def _mutate(self, document: str, root: str, variables: dict[str, Any]) -> dict:
        data = self.execute(document, variables)
        result = data.get(root)
        if not isinstance(result, dict):
            result = {}
        user_errors = result.get("customerUserErrors") or result.get("userErrors") or []
        if user_errors:
            message = _first_message(user_errors)
            logger.warning("%s rejected: %s", root, message)
            raise StorefrontError(message)
        return result

    # -----------------------------------------------------------------
    # Customer addresses
    # -----------------------------------------------------------------
    def get_address_book(self, customer_access_token: str) -> AddressBook:
        data = self.execute(
            queries.CUSTOMER_ADDRESSES_QUERY,
            {"customerAccessToken": customer_access_token, "first": self.address_page_size},
        )
        customer = data.get("customer")
        if not customer:
            raise CustomerNotFound("Customer not found")

        edges = (customer.get("addresses") or {}).get("edges") or []
        default = customer.get("defaultAddress") or {}
        return AddressBook(
            addresses=[AddressRecord.from_node(edge["node"]) for edge in edges],
            default_address_id=default.get("id"),
        )

    def create_address(self, customer_access_token: str, address: dict[str, str]) -> str:
        result = self._mutate(
            queries.CUSTOMER_ADDRESS_CREATE_MUTATION,
            "customerAddressCreate",
            {"customerAccessToken": customer_access_token, "address": address},
        )
        created = result.get("customerAddress") or {}
        if not created.get("id"):
            raise StorefrontError("Expected customer address to be created")
        return created["id"]

    def update_address(
        self, customer_access_token: str, address_id: str, address: dict[str, str]
    ) -> None:
        self._mutate(
            queries.CUSTOMER_ADDRESS_UPDATE_MUTATION,
            "customerAddressUpdate",
            {"customerAccessToken": customer_access_token, "id": address_id, "address": address},
        )

    def delete_address(self, customer_access_token: str, address_id: str) -> None:
        self._mutate(
            queries.CUSTOMER_ADDRESS_DELETE_MUTATION,
            "customerAddressDelete",
            {"customerAccessToken": customer_access_token, "id": address_id},
        )

    def set_default_address(self, customer_access_token: str, address_id: str) -> None:
        self._mutate(
            queries.CUSTOMER_DEFAULT_ADDRESS_UPDATE_MUTATION,
            "customerDefaultAddressUpdate",
            {"customerAccessToken": customer_access_token, "addressId": address_id},
        )

    # -----------------------------------------------------------------
    # Access tokens
    # -----------------------------------------------------------------
    def create_access_token(self, email: str, password: str) -> str:
        result = self._mutate(
            queries.CUSTOMER_ACCESS_TOKEN_CREATE_MUTATION,
            "customerAccessTokenCreate",
            {"input": {"email": email, "password": password}},
        )
        token = (result.get("customerAccessToken") or {}).get("accessToken")
        if not token:
            raise StorefrontError("Sorry. We could not find an account with this email.")
        return token

    def delete_access_token(self, customer_access_token: str) -> None:
        self._mutate(
            queries.CUSTOMER_ACCESS_TOKEN_DELETE_MUTATION,
            "customerAccessTokenDelete",
            {"customerAccessToken": customer_access_token},
        )


def get_storefront_client() -> StorefrontClient:
    """Build a client from the STOREFRONT_* settings."""
    return StorefrontClient(
        domain=settings.STOREFRONT_DOMAIN,
        access_token=settings.STOREFRONT_ACCESS_TOKEN,
        api_version=getattr(settings, "STOREFRONT_API_VERSION", "2023-04"),
        timeout=getattr(settings, "STOREFRONT_TIMEOUT", 10),
        address_page_size=getattr(settings, "STOREFRONT_ADDRESS_PAGE_SIZE", 30),
    )
