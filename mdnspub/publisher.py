"""Interface to the local name publishing service."""

from __future__ import annotations

from abc import ABC, abstractmethod


class PublishError(Exception):
    """A publish or retract call failed. Group state is unknown afterwards."""


class NamePublisher(ABC):
    """Entry-group style publishing: create, add a record, commit, free.

    Every method raises ``PublishError`` on failure and never retries.
    """

    @abstractmethod
    def new_group(self) -> str:
        """Create an empty publication group and return its handle."""

    @abstractmethod
    def add_address(self, group: str, hostname: str, address: str) -> None:
        """Attach a hostname -> address record to an uncommitted group."""

    @abstractmethod
    def commit(self, group: str) -> None:
        pass

    @abstractmethod
    def free(self, group: str) -> None:
        """Release the group, withdrawing everything it published."""
