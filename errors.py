"""Error kinds raised by the service and surfaced as plain-text 500s."""


class WhereAmIError(Exception):
    """Base error for the service."""


class GeoLookupError(WhereAmIError):
    """Base error for server geolocation lookup failures."""


class NetworkError(GeoLookupError):
    """Raised when the outbound lookup request cannot be completed."""


class ParseError(GeoLookupError):
    """Raised when the upstream payload is not valid JSON of the expected shape."""


class UpstreamError(GeoLookupError):
    """Raised when the upstream reports a non-success status."""


class AssetNotFoundError(WhereAmIError):
    """Raised when the bundled static page cannot be located."""
