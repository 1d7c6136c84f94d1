"""BrandMeister repeater API client.

Issues a single GET against the repeater endpoint and returns the
``last_updated`` timestamp string. Every failure mode (network, HTTP status,
body decoding, missing field) is reported as one ``FetchError``, since the
API answers unknown repeater ids with an empty or garbage body.

Usage:
    from check_brandmeister.brandmeister_client import BrandMeisterClient

    client = BrandMeisterClient("http://api.brandmeister.network/v1.0")
    last_updated = client.fetch_last_updated(270107)
"""

from __future__ import annotations

import httpx
from pydantic import BaseModel, ValidationError

from check_brandmeister.log import get_logger

logger = get_logger("brandmeister-client")

DEFAULT_API_URL = "http://api.brandmeister.network/v1.0"
FETCH_ERROR_MESSAGE = "error parsing API result, ensure repeater id is valid"


class FetchError(Exception):
    """Raised when the repeater status could not be retrieved."""

    def __init__(self, repeater_id: int, message: str = FETCH_ERROR_MESSAGE) -> None:
        super().__init__(message)
        self.repeater_id = repeater_id


class RepeaterStatus(BaseModel):
    """The part of the repeater API response the check relies on."""

    last_updated: str


class BrandMeisterClient:
    """Synchronous BrandMeister REST API client."""

    def __init__(
        self,
        url: str = DEFAULT_API_URL,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.url = url.rstrip("/")
        self._transport = transport

    def fetch_last_updated(self, repeater_id: int) -> str:
        """Return the raw ``last_updated`` string for a repeater.

        Raises:
            FetchError: on any transport, HTTP or decoding failure.
        """
        params = {"action": "get", "q": str(repeater_id)}
        try:
            with httpx.Client(
                base_url=self.url,
                transport=self._transport,
                follow_redirects=True,
            ) as client:
                resp = client.get("/repeater/", params=params)
                resp.raise_for_status()
                status = RepeaterStatus.model_validate(resp.json())
        except (httpx.HTTPError, ValidationError, ValueError) as e:
            logger.warning(
                "repeater_status_failed",
                repeater_id=repeater_id,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise FetchError(repeater_id) from e

        logger.debug(
            "repeater_status_fetched",
            repeater_id=repeater_id,
            last_updated=status.last_updated,
        )
        return status.last_updated
