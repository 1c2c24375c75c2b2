"""HTTP client posting reservation requests to SpotHopper."""

import json
import logging
from typing import Optional

import httpx

from core.venue_config import DEFAULT_BASE_URL, VenueConfig, build_request_url
from domain.errors import ReservationSubmissionError
from domain.models import ReservationPayload


logger = logging.getLogger(__name__)

# The endpoint reads a JSON body sent under the form content type.
REQUEST_HEADERS = {"Content-Type": "application/x-www-form-urlencoded"}


class SpotHopperClient:
    """Submits one reservation request per call. No retries."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 10.0,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """
        Initialize the client.

        Args:
            base_url: SpotHopper API base URL
            timeout: Request timeout in seconds
            transport: Optional httpx transport (tests pass httpx.MockTransport)
        """
        self.base_url = base_url
        self.timeout = timeout
        self.transport = transport

    def submit(self, payload: ReservationPayload, venue: VenueConfig) -> httpx.Response:
        """
        Post the payload to the venue's reservation endpoint.

        Returns:
            The successful response

        Raises:
            ReservationSubmissionError: On a network error or a non-2xx status
        """
        url = build_request_url(venue, self.base_url)
        body = json.dumps(payload.to_document())

        logger.info("Submitting reservation request to %s", url)
        try:
            with httpx.Client(timeout=self.timeout, transport=self.transport) as client:
                response = client.post(url, content=body, headers=REQUEST_HEADERS)
        except httpx.HTTPError as e:
            logger.error("Reservation request to %s failed: %s", url, e)
            raise ReservationSubmissionError(f"Failed to make reservation: {e}") from e

        if not response.is_success:
            logger.warning("Reservation rejected with HTTP %d", response.status_code)
            raise ReservationSubmissionError(
                f"Failed to make reservation: {response.text}",
                status_code=response.status_code,
                body=response.text,
            )

        logger.info("Reservation accepted with HTTP %d", response.status_code)
        return response
