from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DesiredBinding:
    hostname: str
    address: str


@dataclass(frozen=True)
class PublishedBinding:
    handle: str  # Avahi entry group object path
    hostname: str
    address: str


class PublicationLedger:
    """In-memory record of what is live in Avahi right now.

    Only the reconciler touches it, from a single thread, so there is no lock.
    The reconciler, not the ledger, keeps it to a single entry.
    """

    def __init__(self) -> None:
        self._entries: list[PublishedBinding] = []

    def find(self, hostname: str, address: str) -> PublishedBinding | None:
        for b in self._entries:
            if b.hostname == hostname and b.address == address:
                return b
        return None

    def insert(self, binding: PublishedBinding) -> None:
        self._entries.append(binding)

    def remove(self, hostname: str) -> None:
        """Drop the entry for hostname whatever its address. No-op if absent."""
        self._entries = [b for b in self._entries if b.hostname != hostname]

    def bindings(self) -> list[PublishedBinding]:
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)
