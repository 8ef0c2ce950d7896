from __future__ import annotations

from collections.abc import Iterable
from urllib.parse import unquote

from apps.storefront.records import AddressRecord


def normalize_address_id(raw_id: str) -> str:
    """URL-decode ``raw_id`` and drop everything from the first ``?`` onward."""
    return unquote(raw_id or "").split("?", 1)[0]


def resolve_address(raw_id: str, addresses: Iterable[AddressRecord]) -> AddressRecord | None:
    """
    Find the address a (possibly stale) identifier points to.

    Links carry a transient token after ``?`` which changes between page loads,
    so only the permanent prefix is compared. First match in collection order wins.
    """
    prefix = normalize_address_id(raw_id)
    return next((a for a in addresses if a.id.startswith(prefix)), None)
