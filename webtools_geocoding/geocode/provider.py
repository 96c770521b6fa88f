# webtools_geocoding/geocode/provider.py
import asyncio
import logging
from typing import Optional

from webtools_geocoding.core.config import settings
from .exceptions import InvalidServerResponse, UnsupportedOperation
from .mapper import map_feature
from .models import PROVIDER_NAME, Address, AddressCollection, GeocodeQuery, ReverseQuery
from .request import Request, build_request
from .shapes import ResponseShape, decode_body, get_shape
from .transport import HttpxTransport, Transport

logger = logging.getLogger(__name__)

REVERSE_NOT_SUPPORTED = "The Webtools Geocoding provider does not support reverse geocoding."


class WebtoolsGeocoding:
    """
    Geocoding provider for the European Commission Webtools geocoding service.

    The provider holds only immutable configuration; every call is independent.
    Pass a `transport` (anything with `fetch(url, headers) -> bytes`) to avoid
    the network, e.g. in tests.
    """
    name = PROVIDER_NAME

    def __init__(
        self,
        transport: Optional[Transport] = None,
        referer: Optional[str] = None,
        *,
        endpoint_url: Optional[str] = None,
        shape: Optional[str] = None,
        user_agent: Optional[str] = None,
    ):
        self._owns_transport = transport is None
        self.transport = transport if transport is not None else HttpxTransport()
        self.referer = referer if referer is not None else settings.referer
        self.endpoint_url = endpoint_url or settings.endpoint_url
        self.user_agent = user_agent if user_agent is not None else settings.user_agent
        self.shape: ResponseShape = get_shape(shape or settings.response_shape)

    def get_name(self) -> str:
        return self.name

    def build_request(self, query: GeocodeQuery) -> Request:
        return build_request(
            query, self.endpoint_url, referer=self.referer, user_agent=self.user_agent
        )

    def geocode_query(self, query: GeocodeQuery) -> AddressCollection:
        request = self.build_request(query)
        logger.debug("GET %s", request.url)
        body = decode_body(self.transport.fetch(request.url, request.headers), request.url)

        results = []
        walked = 0
        try:
            for feature in self.shape.features(body):
                walked += 1
                data = map_feature(feature)
                if data is None:
                    logger.debug("skipping feature without coordinates: %r", feature)
                    continue
                results.append(Address.from_dict(data))
        except TypeError as e:
            logger.warning("malformed response from %s: %s", request.url, e)
            raise InvalidServerResponse.create(request.url) from e

        logger.debug("%s: %d features, %d addresses for %r", self.name, walked, len(results), query.text)
        return AddressCollection(results)

    def geocode(self, text: str, limit: Optional[int] = None, locale: Optional[str] = None) -> AddressCollection:
        return self.geocode_query(GeocodeQuery(text, settings.default_limit if limit is None else limit, locale))

    async def geocode_async(self, text: str, limit: Optional[int] = None, locale: Optional[str] = None) -> AddressCollection:
        # run the blocking lookup in a worker thread so async callers can await it
        return await asyncio.to_thread(self.geocode, text, limit, locale)

    def reverse_query(self, query: ReverseQuery) -> AddressCollection:
        raise UnsupportedOperation(REVERSE_NOT_SUPPORTED)

    def close(self):
        """Close the transport if this provider created it."""
        if self._owns_transport:
            self.transport.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
