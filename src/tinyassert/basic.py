"""Truth and equality assertions.

All assertions accept optional extra ``%``-style arguments after their
operands. If passed, the first such argument must be a format string; it
is rendered in front of the failure message.

All assertions return ``True`` on success and ``False`` on failure, so they
can guard further checks::

    if nil(t, err):
        eq(t, user.name, "alice")
"""

from typing import Any, TypeVar

from tinyassert._base import TB, SupportsEquals
from tinyassert.compare import structurally_equal
from tinyassert.messages import format_prefix


E = TypeVar("E", bound=SupportsEquals)


def ok(t: TB, a: bool, *message_and_args: Any) -> bool:
    """Assert that the value is true."""
    if not a:
        t.helper()
        t.errorf("** %sgot false, wanted true", format_prefix(message_and_args))
        return False
    return True


def false(t: TB, a: bool, *message_and_args: Any) -> bool:
    """Assert that the value is false."""
    if a:
        t.helper()
        t.errorf("** %sgot true, wanted false", format_prefix(message_and_args))
        return False
    return True


def eq(t: TB, a: Any, e: Any, *message_and_args: Any) -> bool:
    """Assert that two values are equal via the ``==`` operator."""
    if a != e:
        t.helper()
        t.errorf("** %sgot %s, wanted %s", format_prefix(message_and_args), a, e)
        return False
    return True


def not_eq(t: TB, a: Any, e: Any, *message_and_args: Any) -> bool:
    """Assert that two values are not equal via the ``==`` operator."""
    if a == e:
        t.helper()
        t.errorf("** %sgot %s, wanted anything else", format_prefix(message_and_args), a)
        return False
    return True


def deep_equal(t: TB, a: Any, e: Any, *message_and_args: Any) -> bool:
    """Assert that two values are structurally equal.

    See :func:`tinyassert.compare.structurally_equal` for the rules.
    """
    if not structurally_equal(a, e):
        t.helper()
        t.errorf("** %sgot %s, wanted %s", format_prefix(message_and_args), a, e)
        return False
    return True


def not_deep_equal(t: TB, a: Any, e: Any, *message_and_args: Any) -> bool:
    """Assert that two values are not structurally equal."""
    if structurally_equal(a, e):
        t.helper()
        t.errorf("** %sgot %s, wanted anything else", format_prefix(message_and_args), a)
        return False
    return True


def method_equal(t: TB, a: E, e: E, *message_and_args: Any) -> bool:
    """Assert that two values are equal via their ``equals`` method.

    The method is called on the expected value: ``e.equals(a)``.
    """
    if not e.equals(a):
        t.helper()
        t.errorf("** %sgot %s, wanted %s", format_prefix(message_and_args), a, e)
        return False
    return True


def not_method_equal(t: TB, a: E, e: E, *message_and_args: Any) -> bool:
    """Assert that two values are not equal via their ``equals`` method."""
    if e.equals(a):
        t.helper()
        t.errorf("** %sgot %s, wanted anything else", format_prefix(message_and_args), a)
        return False
    return True
