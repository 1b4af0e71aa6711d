"""Process entry point for the mDNS device publisher.

Runs the reconciler forever. Any error that escapes it is fatal: it is logged
to stderr and the process exits with status 1, leaving restarts to the
process supervisor.
"""
from __future__ import annotations

import logging
import sys

from mdnspub.ledger import PublicationLedger
from mdnspub.publisher import NamePublisher
from mdnspub.reconciler import Reconciler
from mdnspub.resolver import Resolver
from mdnspub.settings import Settings, settings
from mdnspub.supervisor import SupervisorClient

logger = logging.getLogger("mdnspub")


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def build_publisher() -> NamePublisher:
    # Imported here: dbus-python needs libdbus and a system bus.
    from mdnspub.avahi import AvahiPublisher

    return AvahiPublisher()


def build_reconciler(cfg: Settings, publisher: NamePublisher | None = None) -> Reconciler:
    cfg.validate()
    supervisor = SupervisorClient(
        cfg.supervisor_address or "",
        cfg.supervisor_api_key or "",
        timeout_s=cfg.request_timeout_s,
    )
    resolver = Resolver(
        supervisor,
        interface=cfg.interface,
        local_domain=cfg.local_domain,
        retry_delay_s=cfg.retry_delay_s,
    )
    if cfg.fixed_interface_mode:
        logger.info("Publishing the address of interface %s", cfg.interface)
    else:
        logger.info("Publishing the Supervisor-reported primary address")
    return Reconciler(
        resolver,
        publisher if publisher is not None else build_publisher(),
        ledger=PublicationLedger(),
        poll_interval_s=max(1, cfg.poll_interval_s),
    )


def main(cfg: Settings = settings) -> int:
    configure_logging(cfg.log_level)
    try:
        build_reconciler(cfg).run()
    except Exception as e:
        logger.error("mDNS publisher error: %s: %s", type(e).__name__, e)
        return 1
    # Only reached if something called stop(); the loop is otherwise infinite.
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
