"""Absence and zero-value assertions.

Absence (``nil``/``non_nil``) and zero values (``zero``/``non_zero``) are
different questions. A value is absent when it is ``None`` or a weak
reference (``weakref.ref`` or ``weakref.proxy``) whose target is gone; a
value is zero when it equals what its type's constructor returns without
arguments.
"""

import weakref
from typing import Any

from tinyassert._base import TB
from tinyassert.compare import zero_value_of
from tinyassert.messages import format_prefix


def _is_absent(a: Any) -> bool:
    if a is None:
        return True
    # isinstance() on a dead proxy raises ReferenceError
    if type(a) in weakref.ProxyTypes:
        try:
            a.__class__
        except ReferenceError:
            return True
        return False
    if issubclass(type(a), weakref.ReferenceType):
        return a() is None
    return False


def _deref(a: Any) -> Any:
    if issubclass(type(a), weakref.ReferenceType):
        return a()
    return a


def nil(t: TB, a: Any, *message_and_args: Any) -> bool:
    """Assert that a reference holds nothing.

    Live weak references are dereferenced in the failure message, so it shows
    what was unexpectedly there.
    """
    if not _is_absent(a):
        t.helper()
        t.errorf("** %sgot &%s, wanted nil", format_prefix(message_and_args), _deref(a))
        return False
    return True


def non_nil(t: TB, a: Any, *message_and_args: Any) -> bool:
    """Assert that a reference holds a value."""
    if _is_absent(a):
        t.helper()
        t.errorf("** %sgot nil %s, wanted non-nil", format_prefix(message_and_args), type(a).__name__)
        return False
    return True


def zero(t: TB, a: Any, *message_and_args: Any) -> bool:
    """Assert that the value equals the zero value for its type using ``==``.

    The zero value comes from calling ``type(a)()``, so the type's constructor
    runs. Types whose constructor needs arguments or fails have zero value
    ``None``.
    """
    z = zero_value_of(a)
    if a != z:
        t.helper()
        t.errorf("** %sgot %s, wanted zero value %s", format_prefix(message_and_args), a, z)
        return False
    return True


def non_zero(t: TB, a: Any, *message_and_args: Any) -> bool:
    """Assert that the value differs from the zero value for its type.

    See :func:`zero` for how the zero value is obtained.
    """
    if a == zero_value_of(a):
        t.helper()
        t.errorf("** %sgot zero value %s, wanted non-zero", format_prefix(message_and_args), a)
        return False
    return True
