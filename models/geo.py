from dataclasses import dataclass, asdict
from datetime import datetime
from typing import Optional

from errors import ParseError


@dataclass(frozen=True)
class GeoRecord:
    """Last known public IP and location of the server host."""

    ip: str = ''
    city: str = ''
    country: str = ''
    last_updated: Optional[datetime] = None

    @classmethod
    def empty(cls):
        """Record held before any lookup has completed."""
        return cls()

    def to_dict(self):
        data = asdict(self)
        if self.last_updated is not None:
            data['last_updated'] = self.last_updated.isoformat()
        return data


@dataclass(frozen=True)
class GeoAPIResponse:
    """Raw payload returned by the geolocation upstream."""

    query: str = ''
    city: str = ''
    country: str = ''
    status: str = ''
    message: str = ''

    SUCCESS = 'success'

    @classmethod
    def from_payload(cls, payload):
        """
        Validate a decoded JSON body and build a response from it.

        Missing fields default to the empty string; unknown fields are ignored.

        Raises:
            ParseError: if the payload is not an object or a field is not a string
        """
        if not isinstance(payload, dict):
            raise ParseError('failed to parse JSON: expected an object')

        values = {}
        for name in ('query', 'city', 'country', 'status', 'message'):
            value = payload.get(name)
            if value is None:
                continue
            if not isinstance(value, str):
                raise ParseError(f'failed to parse JSON: field {name!r} is not a string')
            values[name] = value
        return cls(**values)

    @property
    def ok(self):
        return self.status == self.SUCCESS
