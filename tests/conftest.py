import os
import sys

import pytest

# Ensure project root is importable (so `import mdnspub...` works without an install)
_project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from mdnspub.ledger import DesiredBinding  # noqa: E402
from mdnspub.publisher import NamePublisher, PublishError  # noqa: E402


class RecordingPublisher(NamePublisher):
    """NamePublisher fake that logs every call in order.

    `fail_on` names a method that raises PublishError when called.
    """

    def __init__(self, fail_on: str | None = None):
        self.calls: list[tuple] = []
        self.fail_on = fail_on
        self._n = 0

    def _record(self, *call):
        self.calls.append(call)
        if call[0] == self.fail_on:
            raise PublishError(f"{call[0]} refused")

    def new_group(self) -> str:
        self._n += 1
        group = f"/Client1/EntryGroup{self._n}"
        self._record("new_group")
        return group

    def add_address(self, group, hostname, address):
        self._record("add_address", group, hostname, address)

    def commit(self, group):
        self._record("commit", group)

    def free(self, group):
        self._record("free", group)


class ScriptedResolver:
    """Returns the queued bindings one per resolve() call."""

    def __init__(self, *bindings: DesiredBinding):
        self._bindings = list(bindings)

    def resolve(self) -> DesiredBinding:
        return self._bindings.pop(0)


class FakeSleep:
    def __init__(self):
        self.calls: list[float] = []

    def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)

    @property
    def total(self) -> float:
        return sum(self.calls)


@pytest.fixture
def publisher():
    return RecordingPublisher()


@pytest.fixture
def fake_sleep():
    return FakeSleep()
