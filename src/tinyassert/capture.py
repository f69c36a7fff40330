"""Capturing exceptions raised by a callable."""

from collections.abc import Callable
from typing import Any


def capture_panic(f: Callable[[], Any]) -> Exception | None:
    """Call ``f`` and return the exception it raised, or ``None``.

    Only ``Exception`` subclasses are captured. ``KeyboardInterrupt``,
    ``SystemExit`` and test framework outcomes still propagate.
    """
    try:
        f()
    except Exception as exc:
        return exc
    return None
