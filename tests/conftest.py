# tests/conftest.py
import json
import sys
from pathlib import Path

import pytest

# add repo root to sys.path so tests can import the package without installing it
repo_root = Path(__file__).resolve().parents[1]
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

FIXTURES = Path(__file__).resolve().parent / "fixtures"


class FixtureTransport:
    """Returns a canned body and records every call instead of hitting the network."""
    def __init__(self, body: bytes = b'{"features": []}'):
        self.body = body
        self.calls = []

    def fetch(self, url, headers):
        self.calls.append((url, dict(headers)))
        return self.body

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        pass


def fixture_bytes(name: str) -> bytes:
    return (FIXTURES / name).read_bytes()


def fixture_json(name: str):
    return json.loads(fixture_bytes(name))


@pytest.fixture
def transport_for():
    """transport_for("file.json") -> FixtureTransport replaying that recorded response."""
    def _make(name: str) -> FixtureTransport:
        return FixtureTransport(fixture_bytes(name))
    return _make
