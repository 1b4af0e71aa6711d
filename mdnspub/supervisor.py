from __future__ import annotations

from typing import Any

import httpx
from pydantic import ValidationError

from .api_models import DeviceDetails, DeviceNameResponse


class ProviderError(Exception):
    """The Supervisor could not be reached or returned something unusable."""


class SupervisorClient:
    """Reads the device identity and address from the Supervisor API.

    Each call is a single attempt; callers decide whether to retry.
    """

    def __init__(
        self,
        base_url: str,
        api_key: str,
        timeout_s: float = 10.0,
        transport: httpx.BaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self._api_key = api_key
        self.timeout_s = timeout_s
        self._transport = transport

    def _get_json(self, path: str) -> Any:
        url = f"{self.base_url}{path}"
        try:
            with httpx.Client(timeout=self.timeout_s, follow_redirects=False, transport=self._transport) as client:
                resp = client.get(url, params={"apikey": self._api_key})
        except httpx.HTTPError as e:
            # Keep the apikey out of the message; e may carry the full request URL.
            raise ProviderError(f"GET {path}: {type(e).__name__}") from e
        if not resp.is_success:
            raise ProviderError(f"GET {path}: HTTP {resp.status_code}")
        try:
            return resp.json()
        except ValueError as e:
            raise ProviderError(f"GET {path}: invalid JSON") from e

    def device_address(self) -> str:
        """Primary IPv4 address of the device."""
        data = self._get_json("/v1/device")
        try:
            return DeviceDetails.model_validate(data).primary_address
        except ValidationError as e:
            raise ProviderError(f"GET /v1/device: unexpected payload ({e.error_count()} errors)") from e

    def device_name(self) -> str:
        data = self._get_json("/v2/device/name")
        try:
            return DeviceNameResponse.model_validate(data).device_name
        except ValidationError as e:
            raise ProviderError(f"GET /v2/device/name: unexpected payload ({e.error_count()} errors)") from e
