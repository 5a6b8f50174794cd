"""Cooperative cancellation for the periodic cycles.

Cycles receive an optional ``threading.Event`` and check it between aggregate
operations. Raising ``CycleCancelled`` inside a unit of work rolls it back.
"""

import threading


class CycleCancelled(Exception):
    """The running cycle was asked to stop."""


def raise_if_cancelled(cancellation: threading.Event | None, cycle: str) -> None:
    if cancellation is not None and cancellation.is_set():
        raise CycleCancelled(f"{cycle} cancelled")
