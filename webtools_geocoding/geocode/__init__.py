# webtools_geocoding/geocode/__init__.py
from .exceptions import (
    CollectionIsEmpty,
    GeocodeError,
    InvalidArgument,
    InvalidCredentials,
    InvalidServerResponse,
    QuotaExceeded,
    TransportError,
    UnsupportedOperation,
)
from .models import (
    PROVIDER_NAME,
    AdminLevel,
    Address,
    AddressCollection,
    Bounds,
    GeocodeQuery,
    ReverseQuery,
)
from .provider import WebtoolsGeocoding
from .transport import HttpxTransport, Transport

__all__ = [
    "PROVIDER_NAME",
    "WebtoolsGeocoding",
    "HttpxTransport",
    "Transport",
    "GeocodeQuery",
    "ReverseQuery",
    "Address",
    "AddressCollection",
    "AdminLevel",
    "Bounds",
    "GeocodeError",
    "UnsupportedOperation",
    "InvalidArgument",
    "InvalidServerResponse",
    "TransportError",
    "InvalidCredentials",
    "QuotaExceeded",
    "CollectionIsEmpty",
]
