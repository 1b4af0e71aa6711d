from __future__ import annotations

import ipaddress

from pydantic import BaseModel, ConfigDict, Field, field_validator


class DeviceDetails(BaseModel):
    """Payload of ``GET /v1/device``. Only ``ip_address`` is used."""

    model_config = ConfigDict(extra="ignore")

    ip_address: str = Field(..., description="Space-separated IPv4 addresses, primary route first")
    api_port: int | str | None = None
    os_version: str | None = None
    supervisor_version: str | None = None
    status: str | None = None
    commit: str | None = None

    @field_validator("ip_address")
    @classmethod
    def _first_address_is_ipv4(cls, value: str) -> str:
        parts = value.split()
        if not parts:
            raise ValueError("ip_address is empty")
        ipaddress.IPv4Address(parts[0])
        return value

    @property
    def primary_address(self) -> str:
        # Only the first route; we never announce on more than one subnet.
        return self.ip_address.split()[0]


class DeviceNameResponse(BaseModel):
    """Payload of ``GET /v2/device/name``."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    status: str | None = None
    device_name: str = Field(..., alias="deviceName", min_length=1)

    @field_validator("device_name")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("deviceName is blank")
        return value
