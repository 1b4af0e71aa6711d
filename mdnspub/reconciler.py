from __future__ import annotations

import logging
import time
from typing import Callable, Protocol

from .ledger import DesiredBinding, PublicationLedger, PublishedBinding
from .publisher import NamePublisher, PublishError

logger = logging.getLogger(__name__)


class BindingSource(Protocol):
    def resolve(self) -> DesiredBinding: ...


class Reconciler:
    """Continuously converges what Avahi publishes onto the desired binding.

    Each tick is either Converged (the ledger already holds the desired
    binding, nothing to do) or Diverged (retract everything, then publish).
    Publish and retract failures are not caught here: a half-built or
    half-freed group cannot be reasoned about, so the process must exit.
    """

    def __init__(
        self,
        resolver: BindingSource,
        publisher: NamePublisher,
        ledger: PublicationLedger | None = None,
        poll_interval_s: float = 10,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.resolver = resolver
        self.publisher = publisher
        self.ledger = ledger if ledger is not None else PublicationLedger()
        self.poll_interval_s = poll_interval_s
        self._sleep = sleep
        self._stop = False

    @property
    def published(self) -> list[PublishedBinding]:
        return self.ledger.bindings()

    def stop(self) -> None:
        """Ask run() to return after the current tick. Ticks are never interrupted."""
        self._stop = True

    def run(self) -> None:
        logger.info("Reconciler started")
        while not self._stop:
            self.tick()
            if self._stop:
                break
            self._sleep(self.poll_interval_s)
        logger.info("Reconciler stopped")

    def tick(self) -> bool:
        """Run one reconciliation pass. Returns True if publication changed."""
        desired = self.resolver.resolve()
        if self.ledger.find(desired.hostname, desired.address) is not None:
            return False

        # Retract fully before publishing so two addresses are never live at once.
        for binding in self.ledger.bindings():
            self._retract(binding)
        self._publish(desired)
        return True

    def _retract(self, binding: PublishedBinding) -> None:
        logger.info("Removing %s at address %s from local mDNS pool", binding.hostname, binding.address)
        try:
            self.publisher.free(binding.handle)
        except PublishError:
            logger.error("Retract of %s at address %s failed", binding.hostname, binding.address)
            raise
        self.ledger.remove(binding.hostname)

    def _publish(self, desired: DesiredBinding) -> None:
        logger.info("Adding %s at address %s to local mDNS pool", desired.hostname, desired.address)
        try:
            # One group per address. If a later step fails the group leaks until avahi reaps it.
            group = self.publisher.new_group()
            self.publisher.add_address(group, desired.hostname, desired.address)
            self.publisher.commit(group)
        except PublishError:
            logger.error("Publish of %s at address %s failed", desired.hostname, desired.address)
            raise
        self.ledger.insert(PublishedBinding(handle=group, hostname=desired.hostname, address=desired.address))
