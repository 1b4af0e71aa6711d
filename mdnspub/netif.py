from __future__ import annotations

import socket

import psutil

from .settings import ConfigurationError


class InterfaceError(ConfigurationError):
    """The configured interface is missing or has no IPv4 address."""


def interface_ipv4(name: str) -> str:
    """Return the first IPv4 address bound to the named interface."""
    addrs = psutil.net_if_addrs().get(name)
    if addrs is None:
        raise InterfaceError(f"The configured interface '{name}' is not present")
    for addr in addrs:
        if addr.family == socket.AF_INET:
            return addr.address
    raise InterfaceError(f"The configured interface '{name}' has no IPv4 address")
