# apps/customers/services.py
from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from urllib.parse import unquote

from django.core.exceptions import PermissionDenied, SuspiciousOperation
from django.urls import reverse

from apps.storefront.client import StorefrontClient, StorefrontError
from apps.storefront.records import ADDRESS_FIELDS

logger = logging.getLogger(__name__)

NEW_ADDRESS_ID = "add"


class Unauthenticated(PermissionDenied):
    """Raised when a mutation is attempted without a customer access token."""


class MissingAddressId(SuspiciousOperation):
    """Raised when the submitted form carries no string ``addressId``."""


@dataclass(frozen=True)
class MutationOutcome:
    redirect_to: str | None = None
    form_error: str | None = None

    @property
    def ok(self) -> bool:
        return self.form_error is None

    @classmethod
    def redirect(cls, url: str) -> MutationOutcome:
        return cls(redirect_to=url)

    @classmethod
    def failure(cls, message: str) -> MutationOutcome:
        return cls(form_error=message)


def account_root_url(lang: str | None = None) -> str:
    if lang:
        return reverse("accounts:dashboard", kwargs={"lang": lang})
    return reverse("accounts:dashboard")


def project_fields(field_names: Iterable[str], data: Mapping) -> dict[str, str]:
    """Copy only the allow-listed keys present in ``data`` with string values."""
    projected = {}
    for key in field_names:
        value = data.get(key)
        if isinstance(value, str):
            projected[key] = value
    return projected


def extract_address(submission: Mapping) -> dict[str, str]:
    return project_fields(ADDRESS_FIELDS, submission)


# --------------------------------------------------------------------
# Address mutations
# --------------------------------------------------------------------
def dispatch_address_mutation(
    client: StorefrontClient,
    submission: Mapping,
    customer_access_token: str | None,
    *,
    delete: bool = False,
    lang: str | None = None,
) -> MutationOutcome:
    """
    Apply one submitted address form to the customer's account.

    - delete intent -> deleteAddress with the raw ``addressId``
    - ``addressId == "add"`` -> createAddress
    - anything else -> updateAddress with the URL-decoded ``addressId``

    A truthy ``defaultAddress`` marker is followed by setDefaultAddress once the
    create/update has succeeded. If that second call fails the address stays
    saved and the failure is still reported.
    """
    if not customer_access_token:
        raise Unauthenticated("You must be logged in to edit your account.")

    address_id = submission.get("addressId")
    if not isinstance(address_id, str):
        raise MissingAddressId("You must provide an address id.")

    success = MutationOutcome.redirect(account_root_url(lang))

    if delete:
        logger.info("Deleting customer address %s", address_id)
        try:
            client.delete_address(customer_access_token, address_id)
        except StorefrontError as exc:
            logger.warning("Address delete failed for %s: %s", address_id, exc.message)
            return MutationOutcome.failure(exc.message)
        return success

    address = extract_address(submission)
    make_default = bool(submission.get("defaultAddress"))

    try:
        if address_id == NEW_ADDRESS_ID:
            logger.info("Creating customer address (default=%s)", make_default)
            target_id = client.create_address(customer_access_token, address)
        else:
            target_id = unquote(address_id)
            logger.info("Updating customer address %s (default=%s)", target_id, make_default)
            client.update_address(customer_access_token, target_id, address)
    except StorefrontError as exc:
        logger.warning("Address save failed for %s: %s", address_id, exc.message)
        return MutationOutcome.failure(exc.message)

    if make_default:
        try:
            client.set_default_address(customer_access_token, target_id)
        except StorefrontError as exc:
            # the address itself is already saved remotely
            logger.warning(
                "Address %s saved but default assignment failed: %s", target_id, exc.message
            )
            return MutationOutcome.failure(exc.message)

    return success
