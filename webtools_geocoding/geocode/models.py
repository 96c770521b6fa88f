# webtools_geocoding/geocode/models.py
from dataclasses import dataclass, asdict
from typing import Any, Dict, Iterable, Iterator, Optional, Sequence, Tuple

from .exceptions import CollectionIsEmpty, InvalidArgument

PROVIDER_NAME = "webtools_geocoding"
DEFAULT_LIMIT = 5


@dataclass(frozen=True)
class GeocodeQuery:
    """Free-text address lookup."""
    text: str
    limit: int = DEFAULT_LIMIT
    locale: Optional[str] = None

    def __post_init__(self):
        if self.limit < 1:
            raise InvalidArgument("Limit must be a positive integer.")


@dataclass(frozen=True)
class ReverseQuery:
    latitude: float
    longitude: float
    limit: int = DEFAULT_LIMIT
    locale: Optional[str] = None


@dataclass(frozen=True)
class AdminLevel:
    name: str
    level: int

    def __post_init__(self):
        if self.level < 1:
            raise InvalidArgument(f"Admin level must be >= 1, got {self.level}.")


@dataclass(frozen=True)
class Bounds:
    south: float
    west: float
    north: float
    east: float


@dataclass(frozen=True)
class Address:
    """One normalized geocoding match."""
    latitude: float
    longitude: float
    street_number: Optional[str] = None
    street_name: Optional[str] = None
    locality: Optional[str] = None
    sub_locality: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[str] = None
    country_code: Optional[str] = None
    admin_levels: Tuple[AdminLevel, ...] = ()
    bounds: Optional[Bounds] = None
    provided_by: str = PROVIDER_NAME

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Address":
        """Build an address from the camelCase dict produced by the field mapper.

        Admin levels are de-duplicated by level (first one wins) and sorted
        ascending.
        """
        levels: Dict[int, AdminLevel] = {}
        for entry in data.get("adminLevels") or []:
            level = int(entry["level"])
            if level not in levels:
                levels[level] = AdminLevel(name=entry["name"], level=level)

        bounds = data.get("bounds")
        return cls(
            latitude=float(data["latitude"]),
            longitude=float(data["longitude"]),
            street_number=_opt_str(data.get("streetNumber")),
            street_name=_opt_str(data.get("streetName")),
            locality=_opt_str(data.get("locality")),
            sub_locality=_opt_str(data.get("subLocality")),
            postal_code=_opt_str(data.get("postalCode")),
            country=_opt_str(data.get("country")),
            country_code=_opt_str(data.get("countryCode")),
            admin_levels=tuple(levels[k] for k in sorted(levels)),
            bounds=Bounds(**bounds) if bounds else None,
            provided_by=data.get("providedBy") or PROVIDER_NAME,
        )

    def admin_level(self, level: int) -> Optional[AdminLevel]:
        for admin in self.admin_levels:
            if admin.level == level:
                return admin
        return None

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["admin_levels"] = [asdict(a) for a in self.admin_levels]
        return data


def _opt_str(value) -> Optional[str]:
    # the service is not consistent about housenumber / postcode types
    if value is None:
        return None
    return str(value)


@dataclass(frozen=True)
class AddressCollection(Sequence):
    """Ordered, immutable result set. Order is the service response order."""
    addresses: Tuple[Address, ...]

    def __init__(self, addresses: Iterable[Address] = ()):
        object.__setattr__(self, "addresses", tuple(addresses))

    def __getitem__(self, index):
        return self.addresses[index]

    def __len__(self) -> int:
        return len(self.addresses)

    def __iter__(self) -> Iterator[Address]:
        return iter(self.addresses)

    def first(self) -> Address:
        if not self.addresses:
            raise CollectionIsEmpty("Collection is empty")
        return self.addresses[0]

    def is_empty(self) -> bool:
        return not self.addresses
