"""
vNAS data API client for fetching the ARTCC facility dataset.
"""

import requests
import logging
from config import ARTCC_API_URL

logger = logging.getLogger(__name__)


class UpstreamFetchError(Exception):
    """Raised when the upstream API can't be reached or returns a non-200 status."""


class ArtccClient:
    """Client for the vNAS ARTCC endpoint. One request per call, no caching."""

    def __init__(self, api_url: str = ARTCC_API_URL):
        self.api_url = api_url

    def fetch_artccs(self):
        """
        Fetch the raw ARTCC list from the vNAS data API.

        Returns:
            Decoded JSON body, unmodified.

        Raises:
            UpstreamFetchError: on a transport error, a non-200 status,
                or a body that isn't JSON.
        """
        try:
            response = requests.get(self.api_url)
        except requests.exceptions.RequestException as e:
            logger.error(f"Error fetching data from vNAS API: {e}")
            raise UpstreamFetchError(str(e)) from e

        if response.status_code != 200:
            logger.error(f"vNAS API returned status {response.status_code}")
            raise UpstreamFetchError('Failed to fetch data')

        try:
            data = response.json()
        except ValueError as e:
            logger.error(f"vNAS API returned invalid JSON: {e}")
            raise UpstreamFetchError(str(e)) from e

        count = len(data) if isinstance(data, list) else 0
        logger.info(f"Fetched {count} ARTCCs")
        return data
