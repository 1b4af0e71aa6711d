from __future__ import annotations

import os
from dataclasses import dataclass


class ConfigurationError(Exception):
    """Static misconfiguration. Retrying cannot fix it."""


def _env_str(name: str) -> str | None:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    return raw.strip()


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


@dataclass(frozen=True)
class Settings:
    # Address source: a fixed interface when set, the Supervisor otherwise.
    interface: str | None = _env_str("INTERFACE")

    # Supervisor (identity/address provider)
    supervisor_address: str | None = _env_str("BALENA_SUPERVISOR_ADDRESS")
    supervisor_api_key: str | None = _env_str("BALENA_SUPERVISOR_API_KEY")
    request_timeout_s: int = _env_int("MDNS_REQUEST_TIMEOUT_S", 10)
    retry_delay_s: int = _env_int("MDNS_RETRY_DELAY_S", 10)

    # Core
    poll_interval_s: int = _env_int("MDNS_POLL_INTERVAL_S", 10)
    local_domain: str = os.getenv("MDNS_LOCAL_DOMAIN", "local")
    log_level: str = os.getenv("MDNS_LOG_LEVEL", "INFO").upper()

    @property
    def fixed_interface_mode(self) -> bool:
        return self.interface is not None

    def validate(self) -> None:
        # The hostname always comes from the Supervisor, even in fixed-interface mode.
        missing = [
            env
            for env, value in (
                ("BALENA_SUPERVISOR_ADDRESS", self.supervisor_address),
                ("BALENA_SUPERVISOR_API_KEY", self.supervisor_api_key),
            )
            if not value
        ]
        if missing:
            raise ConfigurationError(f"Missing required environment: {', '.join(missing)}")
        if not self.local_domain.strip("."):
            raise ConfigurationError("MDNS_LOCAL_DOMAIN must not be empty.")


settings = Settings()
