"""
Mailing‑list subscription through Mailchimp.

``SubscriptionService.subscribe`` forwards one e‑mail address to the
Mailchimp "batch subscribe or unsubscribe" endpoint of the configured
audience, marking the member as subscribed and updating them if they
already exist.  Exactly one request is made per call; there is no
retry.

Any 2xx answer counts as success.  Other statuses are raised as
:class:`ExternalServiceError` carrying Mailchimp's status code and
response body; network failures are raised with status 502.
"""

import logging
from typing import Any, Dict, Optional

import httpx

from ..core.config import Settings
from ..core.errors import ExternalServiceError, ValidationError


logger = logging.getLogger(__name__)

DEFAULT_SERVER_PREFIX = "us21"


class SubscriptionService:
    """Forward newsletter sign‑ups to Mailchimp."""

    def __init__(self, settings: Settings, client: Optional[httpx.AsyncClient] = None) -> None:
        self.api_key = settings.mailchimp_api_key
        self.audience_id = settings.mailchimp_audience_id
        self.server_prefix = settings.mailchimp_server_prefix
        self.timeout = settings.mailchimp_timeout
        self._client = client

    @property
    def data_center(self) -> str:
        """Mailchimp data center, e.g. ``us21``.

        Taken from ``MAILCHIMP_SERVER_PREFIX`` if set, otherwise from the
        suffix of the API key (keys look like ``<hex>-us21``).
        """
        if self.server_prefix:
            return self.server_prefix
        if "-" in self.api_key:
            return self.api_key.rsplit("-", 1)[1]
        return DEFAULT_SERVER_PREFIX

    @property
    def endpoint(self) -> str:
        return f"https://{self.data_center}.api.mailchimp.com/3.0/lists/{self.audience_id}"

    @staticmethod
    def build_payload(email: str) -> Dict[str, Any]:
        return {
            "members": [{"email_address": email, "status": "subscribed"}],
            "update_existing": True,
        }

    async def subscribe(self, email: Optional[str]) -> None:
        """Subscribe ``email`` to the audience.

        Raises
        ------
        ValidationError
            If ``email`` is missing or blank; Mailchimp is not contacted.
        ExternalServiceError
            If Mailchimp is not configured, answers with a non‑2xx
            status or cannot be reached.
        """
        email = (email or "").strip()
        if not email:
            raise ValidationError("Email is required")
        if not self.api_key or not self.audience_id:
            raise ExternalServiceError(
                "Mailing list is not configured",
                status_code=500,
            )

        headers = {
            "Authorization": f"apikey {self.api_key}",
            "Content-Type": "application/json",
        }
        payload = self.build_payload(email)
        try:
            if self._client is not None:
                response = await self._client.post(self.endpoint, json=payload, headers=headers)
            else:
                async with httpx.AsyncClient(timeout=self.timeout) as client:
                    response = await client.post(self.endpoint, json=payload, headers=headers)
        except httpx.HTTPError as exc:
            logger.error("Error subscribing %s to Mailchimp: %s", email, exc)
            raise ExternalServiceError("Error subscribing to Mailchimp", detail=str(exc)) from exc

        if not response.is_success:
            logger.warning("Mailchimp rejected %s with status %s", email, response.status_code)
            raise ExternalServiceError(
                "Error subscribing to Mailchimp",
                detail=_response_body(response),
                status_code=response.status_code,
            )

        body = _response_body(response)
        if isinstance(body, dict) and body.get("error_count"):
            # The batch call succeeds as a whole even when a member is
            # refused; the reasons are only reported in the body.
            logger.warning("Mailchimp reported member errors for %s: %s", email, body.get("errors"))
        logger.info("Subscribed %s to audience %s", email, self.audience_id)


def _response_body(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text
