"""Emptiness assertions for sequences and mappings.

``None`` counts as an empty container everywhere.
"""

from collections.abc import Mapping, Sequence
from typing import Any

from tinyassert._base import TB
from tinyassert.messages import format_prefix


def empty_slice(t: TB, a: Sequence[Any] | None, *message_and_args: Any) -> bool:
    """Assert that the given sequence is ``None`` or empty."""
    if a is not None and len(a) > 0:
        t.helper()
        t.errorf("** %sgot %s, wanted empty slice", format_prefix(message_and_args), a)
        return False
    return True


def non_empty_slice(t: TB, a: Sequence[Any] | None, *message_and_args: Any) -> bool:
    """Assert that the given sequence has at least one element."""
    if a is None or len(a) == 0:
        t.helper()
        t.errorf("** %sgot empty %s, wanted non-empty", format_prefix(message_and_args), type(a).__name__)
        return False
    return True


def empty_map(t: TB, a: Mapping[Any, Any] | None, *message_and_args: Any) -> bool:
    """Assert that the given mapping is ``None`` or empty."""
    if a is not None and len(a) > 0:
        t.helper()
        t.errorf("** %sgot %s, wanted empty map", format_prefix(message_and_args), a)
        return False
    return True


def non_empty_map(t: TB, a: Mapping[Any, Any] | None, *message_and_args: Any) -> bool:
    """Assert that the given mapping has at least one entry."""
    if a is None or len(a) == 0:
        t.helper()
        t.errorf("** %sgot empty %s, wanted non-empty", format_prefix(message_and_args), type(a).__name__)
        return False
    return True
