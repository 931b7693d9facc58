"""Geolocation lookup of the server's public IP."""

import logging
from datetime import datetime, timezone

import requests

from errors import NetworkError, ParseError, UpstreamError
from models.geo import GeoAPIResponse, GeoRecord

logger = logging.getLogger(__name__)

DEFAULT_URL = 'http://ip-api.com/json/'
DEFAULT_TIMEOUT = 5.0


class GeoLookupClient:
    """
    Resolves the public IP of this host to a city and country.
    Uses ip-api.com free service (no API key required) by default.
    """

    def __init__(self, url=DEFAULT_URL, timeout=DEFAULT_TIMEOUT):
        self.url = url
        self.timeout = timeout

    def fetch_server_geo(self) -> GeoRecord:
        """
        Look up the public IP of the machine running the server.

        A single attempt is made; failures propagate to the caller.

        Returns:
            GeoRecord stamped with the current UTC time

        Raises:
            NetworkError: the request could not be completed
            ParseError: the body is not JSON of the expected shape
            UpstreamError: the upstream reported a non-success status
        """
        try:
            response = requests.get(self.url, timeout=self.timeout)
        except requests.RequestException as e:
            raise NetworkError(f'failed to fetch IP: {e}') from e

        try:
            payload = response.json()
        except ValueError as e:
            raise ParseError(f'failed to parse JSON: {e}') from e

        api_response = GeoAPIResponse.from_payload(payload)
        if not api_response.ok:
            message = 'API returned error status'
            if api_response.message:
                message = f'{message}: {api_response.message}'
            raise UpstreamError(message)

        record = GeoRecord(
            ip=api_response.query,
            city=api_response.city,
            country=api_response.country,
            last_updated=datetime.now(timezone.utc),
        )

        logger.info('IP fetched: %s (%s, %s)', record.ip, record.city, record.country)
        return record
