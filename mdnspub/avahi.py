from __future__ import annotations

import logging
from typing import Any

import dbus

from .publisher import NamePublisher, PublishError

logger = logging.getLogger(__name__)

AVAHI_BUS = "org.freedesktop.Avahi"
AVAHI_PATH = "/"
SERVER_IFACE = "org.freedesktop.Avahi.Server"
ENTRY_GROUP_IFACE = "org.freedesktop.Avahi.EntryGroup"

IF_UNSPEC = -1  # all interfaces
PROTO_UNSPEC = -1
# Fixed AddAddress flags (AVAHI_PUBLISH_NO_REVERSE). Avahi sets cache-flush on
# the announced A record, so listeners drop stale addresses for the name.
ADDRESS_FLAGS = 0x10


class AvahiPublisher(NamePublisher):
    """Publishes address records through avahi-daemon's D-Bus API.

    Groups belong to this bus connection. If the process dies, avahi frees them
    when it notices the disconnect, which is best effort.
    """

    def __init__(self, bus: Any = None):
        self._bus = bus if bus is not None else dbus.SystemBus()

    def _server(self) -> dbus.Interface:
        return dbus.Interface(self._bus.get_object(AVAHI_BUS, AVAHI_PATH), SERVER_IFACE)

    def _group(self, group: str) -> dbus.Interface:
        return dbus.Interface(self._bus.get_object(AVAHI_BUS, group), ENTRY_GROUP_IFACE)

    def new_group(self) -> str:
        try:
            path = self._server().EntryGroupNew()
        except dbus.exceptions.DBusException as e:
            raise PublishError(f"EntryGroupNew failed: {e}") from e
        logger.debug("Created entry group %s", path)
        return str(path)

    def add_address(self, group: str, hostname: str, address: str) -> None:
        try:
            self._group(group).AddAddress(
                dbus.Int32(IF_UNSPEC),
                dbus.Int32(PROTO_UNSPEC),
                dbus.UInt32(ADDRESS_FLAGS),
                hostname,
                address,
            )
        except dbus.exceptions.DBusException as e:
            raise PublishError(f"AddAddress {hostname} -> {address} on {group} failed: {e}") from e

    def commit(self, group: str) -> None:
        try:
            self._group(group).Commit()
        except dbus.exceptions.DBusException as e:
            raise PublishError(f"Commit of {group} failed: {e}") from e

    def free(self, group: str) -> None:
        try:
            self._group(group).Free()
        except dbus.exceptions.DBusException as e:
            raise PublishError(f"Free of {group} failed: {e}") from e
