from __future__ import annotations

from dataclasses import dataclass, field

# Mailing address input fields accepted by the Storefront API.
ADDRESS_FIELDS = (
    "lastName",
    "firstName",
    "address1",
    "address2",
    "city",
    "province",
    "country",
    "zip",
    "phone",
    "company",
)


@dataclass
class AddressRecord:
    """A customer mailing address as returned by the Storefront API."""

    id: str
    firstName: str | None = None
    lastName: str | None = None
    company: str | None = None
    address1: str | None = None
    address2: str | None = None
    city: str | None = None
    province: str | None = None
    zip: str | None = None
    country: str | None = None
    phone: str | None = None
    formatted: list[str] = field(default_factory=list)

    @classmethod
    def from_node(cls, node: dict) -> AddressRecord:
        values = {key: node.get(key) for key in ADDRESS_FIELDS}
        return cls(id=node["id"], formatted=list(node.get("formatted") or []), **values)

    def as_initial(self) -> dict:
        """Form initial data: every address field, missing ones as empty strings."""
        return {key: getattr(self, key) or "" for key in ADDRESS_FIELDS}


@dataclass
class AddressBook:
    """Ordered addresses of one customer plus the id of the default one."""

    addresses: list[AddressRecord] = field(default_factory=list)
    default_address_id: str | None = None

    @property
    def default_address(self) -> AddressRecord | None:
        if not self.default_address_id:
            return None
        return next((a for a in self.addresses if a.id == self.default_address_id), None)

    def is_default(self, address: AddressRecord | None) -> bool:
        return address is not None and address.id == self.default_address_id

    def __iter__(self):
        return iter(self.addresses)

    def __len__(self):
        return len(self.addresses)
