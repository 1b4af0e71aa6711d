from mdnspub.ledger import DesiredBinding, PublicationLedger, PublishedBinding


def test_find_requires_hostname_and_address_to_match():
    ledger = PublicationLedger()
    b = PublishedBinding(handle="/g1", hostname="foo.local", address="10.0.0.5")
    ledger.insert(b)

    assert ledger.find("foo.local", "10.0.0.5") == b
    assert ledger.find("foo.local", "10.0.0.9") is None
    assert ledger.find("bar.local", "10.0.0.5") is None


def test_remove_ignores_address_and_missing_hostnames():
    ledger = PublicationLedger()
    ledger.insert(PublishedBinding(handle="/g1", hostname="foo.local", address="10.0.0.5"))

    ledger.remove("bar.local")
    assert len(ledger) == 1

    ledger.remove("foo.local")
    assert len(ledger) == 0
    assert ledger.bindings() == []


def test_bindings_is_a_snapshot():
    ledger = PublicationLedger()
    ledger.insert(PublishedBinding(handle="/g1", hostname="foo.local", address="10.0.0.5"))

    snapshot = ledger.bindings()
    ledger.remove("foo.local")

    assert [b.handle for b in snapshot] == ["/g1"]


def test_desired_binding_compares_by_value():
    assert DesiredBinding("foo.local", "10.0.0.5") == DesiredBinding("foo.local", "10.0.0.5")
    assert DesiredBinding("foo.local", "10.0.0.5") != DesiredBinding("foo.local", "10.0.0.9")
