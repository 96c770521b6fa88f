# webtools_geocoding/geocode/exceptions.py
from typing import Optional


class GeocodeError(RuntimeError):
    pass


class UnsupportedOperation(GeocodeError):
    pass


class InvalidArgument(GeocodeError):
    pass


class CollectionIsEmpty(GeocodeError):
    pass


class InvalidServerResponse(GeocodeError):
    """The service answered with something we cannot use."""

    def __init__(self, message: str, url: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code

    @classmethod
    def create(cls, url: str, status_code: Optional[int] = None) -> "InvalidServerResponse":
        if status_code is None:
            return cls(f'The geocoder server returned an invalid response for query "{url}".', url)
        return cls(
            f'The geocoder server returned an invalid response ({status_code}) for query "{url}".',
            url,
            status_code,
        )

    @classmethod
    def empty_response(cls, url: str) -> "InvalidServerResponse":
        return cls(f'The geocoder server returned an empty response for query "{url}".', url)


class TransportError(GeocodeError):
    """Network level failure while talking to the service."""

    def __init__(self, message: str, url: str):
        super().__init__(message)
        self.url = url


class InvalidCredentials(TransportError):
    pass


class QuotaExceeded(TransportError):
    pass
