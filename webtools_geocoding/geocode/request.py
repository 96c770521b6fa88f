# webtools_geocoding/geocode/request.py
import ipaddress
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional
from urllib.parse import quote_plus

from .exceptions import InvalidArgument, UnsupportedOperation
from .models import GeocodeQuery

IP_NOT_SUPPORTED = "The WebtoolsGeocoding provider does not support IP addresses, only street addresses."
EMPTY_ADDRESS = "Address cannot be empty."


@dataclass(frozen=True)
class Request:
    url: str
    headers: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))


def is_ip_address(text: str) -> bool:
    # scoped IPv6 literals ("fe80::1%eth0") count as IP addresses too
    try:
        ipaddress.ip_address(text.strip())
    except ValueError:
        return False
    return True


def validate_address(text: str) -> str:
    if text and is_ip_address(text):
        raise UnsupportedOperation(IP_NOT_SUPPORTED)
    if not text or not text.strip():
        raise InvalidArgument(EMPTY_ADDRESS)
    return text


def language(locale: str) -> str:
    """'fr_FR' / 'fr-FR' -> 'fr'"""
    return locale.replace("-", "_").split("_")[0].lower()


def build_url(endpoint_url: str, query: GeocodeQuery) -> str:
    url = endpoint_url.format(query=quote_plus(query.text), limit=query.limit)
    if query.locale:
        url += "&lang=" + quote_plus(language(query.locale))
    return url


def build_request(
    query: GeocodeQuery,
    endpoint_url: str,
    referer: Optional[str] = None,
    user_agent: Optional[str] = None,
) -> Request:
    validate_address(query.text)
    headers = {}
    if user_agent:
        headers["User-Agent"] = user_agent
    if referer:
        headers["Referer"] = referer
    return Request(build_url(endpoint_url, query), MappingProxyType(headers))
