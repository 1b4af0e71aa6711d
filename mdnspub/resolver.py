from __future__ import annotations

import logging
import time
from typing import Callable, TypeVar

from .ledger import DesiredBinding
from .netif import interface_ipv4
from .supervisor import ProviderError, SupervisorClient

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Resolver:
    """Works out which hostname/address pair should be published right now."""

    def __init__(
        self,
        supervisor: SupervisorClient,
        interface: str | None = None,
        local_domain: str = "local",
        retry_delay_s: float = 10,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.supervisor = supervisor
        self.interface = interface
        self.local_domain = local_domain.strip(".")
        self.retry_delay_s = retry_delay_s
        self._sleep = sleep

    def resolve(self) -> DesiredBinding:
        """Return the desired binding for this tick.

        Blocks until the Supervisor answers both questions; a missing fixed
        interface raises ``InterfaceError`` before any network call.
        """
        address = self._address()
        name = self._until_success(self.supervisor.device_name, "device name")
        return DesiredBinding(hostname=f"{name}.{self.local_domain}", address=address)

    def _address(self) -> str:
        if self.interface is not None:
            return interface_ipv4(self.interface)
        return self._until_success(self.supervisor.device_address, "IP address")

    def _until_success(self, fetch: Callable[[], T], what: str) -> T:
        # The rest of the system is useless without the Supervisor, so never give up.
        while True:
            try:
                return fetch()
            except ProviderError as e:
                logger.warning(
                    "Could not acquire %s from Supervisor (%s), retrying in %s seconds",
                    what,
                    e,
                    self.retry_delay_s,
                )
                self._sleep(self.retry_delay_s)
