# webtools_geocoding/geocode/mapper.py
from numbers import Real
from types import MappingProxyType
from typing import Any, Dict, Optional

from .formatted_address import parse_formatted_address
from .models import PROVIDER_NAME

# address field -> feature property
PROPERTY_MAPPING = MappingProxyType({
    "streetName": "street",
    "streetNumber": "housenumber",
    "locality": "city",
    "subLocality": "locality",
    "postalCode": "postcode",
    "countryCode": "countrycode",
    "country": "country",
})

# feature property -> admin level, broadest first
ADMIN_LEVELS = MappingProxyType({
    "state": 1,
    "county": 2,
    "city": 3,
    "district": 4,
    "locality": 5,
})

FORMATTED_ADDRESS_PROPERTY = "formattedAddress"


def _is_number(value) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def _coordinates(feature: Dict[str, Any]) -> Optional[tuple]:
    geometry = feature.get("geometry")
    if not isinstance(geometry, dict):
        return None
    coords = geometry.get("coordinates")
    if not isinstance(coords, (list, tuple)) or len(coords) < 2:
        return None
    lon, lat = coords[0], coords[1]
    if not (_is_number(lon) and _is_number(lat)):
        return None
    return float(lon), float(lat)


def _bounds(properties: Dict[str, Any]) -> Optional[Dict[str, float]]:
    extent = properties.get("extent")
    if not isinstance(extent, (list, tuple)) or len(extent) != 4:
        return None
    if not all(_is_number(v) for v in extent):
        return None
    # Photon sends [west, north, east, south]; older docs say [west, south, east, north]
    west, y1, east, y2 = (float(v) for v in extent)
    return {"south": min(y1, y2), "west": west, "north": max(y1, y2), "east": east}


def _has_discrete_fields(properties: Dict[str, Any]) -> bool:
    keys = set(PROPERTY_MAPPING.values()) | set(ADMIN_LEVELS)
    return any(properties.get(k) not in (None, "") for k in keys)


def map_feature(feature: Any) -> Optional[Dict[str, Any]]:
    """
    Turn one feature node of the service response into address data, or None
    when the feature has no usable coordinates.

    The returned dict uses the keys understood by Address.from_dict:
      providedBy, latitude, longitude, bounds (optional), streetName,
      streetNumber, locality, subLocality, postalCode, countryCode, country,
      adminLevels (list of {"name", "level"}).
    """
    if not isinstance(feature, dict):
        return None
    coords = _coordinates(feature)
    if coords is None:
        return None

    properties = feature.get("properties")
    if not isinstance(properties, dict):
        properties = {}

    formatted = properties.get(FORMATTED_ADDRESS_PROPERTY)
    if isinstance(formatted, str) and not _has_discrete_fields(properties):
        data = parse_formatted_address(formatted, coords)
    else:
        data = {"providedBy": PROVIDER_NAME, "longitude": coords[0], "latitude": coords[1]}
        for field, prop in PROPERTY_MAPPING.items():
            data[field] = properties.get(prop)
        data["adminLevels"] = [
            {"name": str(properties[prop]), "level": level}
            for prop, level in ADMIN_LEVELS.items()
            if properties.get(prop) not in (None, "")
        ]

    bounds = _bounds(properties)
    if bounds is not None:
        data["bounds"] = bounds
    return data
