# tests/test_shapes.py
import pytest

from conftest import fixture_json
from webtools_geocoding.geocode.exceptions import InvalidArgument, InvalidServerResponse
from webtools_geocoding.geocode.shapes import SHAPES, decode_body, get_shape


def coords(features):
    return [f["geometry"]["coordinates"] for f in features]


def test_registry_names():
    assert sorted(SHAPES) == ["auto", "features", "locations", "requests_collection"]
    assert get_shape("features").name == "features"
    with pytest.raises(InvalidArgument):
        get_shape("nope")


def test_features_shape_keeps_order():
    body = fixture_json("features_london.json")
    assert coords(get_shape("features").features(body)) == [
        [-0.1276474, 51.5073219],
        [-81.2291529, 42.9537654],
    ]


def test_locations_shape_skips_entries_without_feature():
    body = fixture_json("locations.json")
    assert coords(get_shape("locations").features(body)) == [[4.3699552, 50.8428321]]


def test_requests_collection_shape_filters_sub_requests():
    body = fixture_json("requests_collection.json")
    assert coords(get_shape("requests_collection").features(body)) == [[6.1295513, 49.6112768]]


@pytest.mark.parametrize("name, body", [
    ("features", {"type": "FeatureCollection"}),
    ("locations", {"features": [{"geometry": {"coordinates": [1.0, 2.0]}}]}),
    ("requests_collection", {"geocodingRequestsCollection": []}),
    ("requests_collection", {"geocodingRequestsCollection": [{"foundCount": 1, "responseMessage": "OK", "responseCode": 200}]}),
])
def test_missing_sub_structure_yields_nothing(name, body):
    assert list(get_shape(name).features(body)) == []


@pytest.mark.parametrize("fixture, expected", [
    ("features_london.json", 2),
    ("locations.json", 1),
    ("requests_collection.json", 1),
])
def test_auto_shape(fixture, expected):
    assert len(list(get_shape("auto").features(fixture_json(fixture)))) == expected


def test_decode_body():
    assert decode_body(b'{"features": []}', "http://x") == {"features": []}
    with pytest.raises(InvalidServerResponse) as exc:
        decode_body(b"null", "http://x/?q=a")
    assert exc.value.url == "http://x/?q=a"


@pytest.mark.parametrize("name, body", [
    ("features", {"features": 5}),
    ("features", {"features": {"type": "Feature"}}),
    ("locations", {"locations": 7}),
    ("requests_collection", {"geocodingRequestsCollection": "OK"}),
    ("requests_collection", {"geocodingRequestsCollection": [
        {"foundCount": 1, "responseMessage": "OK", "responseCode": 200, "result": [1]},
    ]}),
    ("requests_collection", {"geocodingRequestsCollection": [
        {"foundCount": 1, "responseMessage": "OK", "responseCode": 200, "result": {"features": 3}},
    ]}),
])
def test_wrong_structure_raises_type_error(name, body):
    with pytest.raises(TypeError):
        list(get_shape(name).features(body))
