# webtools_geocoding/geocode/shapes.py
"""
Response layouts used by the Webtools geocoding service over time.

Each layout is a small class that knows how to pull the feature nodes out of
a decoded response body. Adding support for a new layout means adding a class
and registering it in SHAPES.
"""
import json
import logging
from typing import Any, Dict, Iterator, List, Protocol

from .exceptions import InvalidArgument, InvalidServerResponse

logger = logging.getLogger(__name__)


def _items(node: Dict[str, Any], key: str) -> List[Any]:
    """The list stored under `key`; missing or null means empty."""
    value = node.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise TypeError(f"expected a list under '{key}', got {type(value).__name__}")
    return value


class ResponseShape(Protocol):
    name: str

    def features(self, body: Dict[str, Any]) -> Iterator[Any]: ...


class FeatureCollectionShape:
    """Current layout: {"features": [...]}"""
    name = "features"

    def features(self, body):
        yield from _items(body, "features")


class LocationsShape:
    """{"locations": [{"feature": {...}}, ...]}"""
    name = "locations"

    def features(self, body):
        for location in _items(body, "locations"):
            if isinstance(location, dict) and location.get("feature"):
                yield location["feature"]


class RequestsCollectionShape:
    """
    {"geocodingRequestsCollection": [{"foundCount": 1, "responseMessage": "OK",
      "responseCode": 200, "result": {"features": [...]}}, ...]}

    Only successful sub-requests that found something are read.
    """
    name = "requests_collection"

    def features(self, body):
        for request in _items(body, "geocodingRequestsCollection"):
            if not isinstance(request, dict):
                continue
            if not self._succeeded(request):
                logger.debug(
                    "skipping sub-request code=%s message=%s",
                    request.get("responseCode"), request.get("responseMessage"),
                )
                continue
            result = request.get("result") or {}
            if not isinstance(result, dict):
                raise TypeError(f"expected an object under 'result', got {type(result).__name__}")
            yield from _items(result, "features")

    @staticmethod
    def _succeeded(request: Dict[str, Any]) -> bool:
        found = request.get("foundCount")
        return (
            isinstance(found, int) and found > 0
            and request.get("responseMessage") == "OK"
            and request.get("responseCode") == 200
        )


class AutoShape:
    """Picks a layout from the top-level keys. Handy for replaying recorded responses."""
    name = "auto"

    def features(self, body):
        if "geocodingRequestsCollection" in body:
            shape = SHAPES["requests_collection"]
        elif "locations" in body:
            shape = SHAPES["locations"]
        else:
            shape = SHAPES["features"]
        return shape.features(body)


SHAPES: Dict[str, ResponseShape] = {
    shape.name: shape
    for shape in (FeatureCollectionShape(), LocationsShape(), RequestsCollectionShape(), AutoShape())
}


def get_shape(name: str) -> ResponseShape:
    try:
        return SHAPES[name]
    except KeyError:
        raise InvalidArgument(
            f"Unknown response shape '{name}', expected one of: {', '.join(sorted(SHAPES))}"
        ) from None


def decode_body(content: bytes, url: str) -> Dict[str, Any]:
    """Decode a response body, raising InvalidServerResponse for anything unusable."""
    try:
        body = json.loads(content)
    except ValueError:
        raise InvalidServerResponse.create(url) from None
    if not body or not isinstance(body, dict):
        raise InvalidServerResponse.create(url)
    return body
