"""mDNS device publisher.

Long-running, single-threaded daemon that keeps one Avahi address record
(``<device-name>.local -> <IPv4>``) in sync with the device's current name and
address:
 - resolves the desired binding from the device Supervisor API (or a fixed
   network interface)
 - tracks what is currently published in an in-memory ledger
 - retracts the stale record before publishing a new one

The implementation is intentionally small so it can be audited and explained.
"""
