"""Structural equality and zero values."""

import pickle
from collections.abc import Mapping
from types import BuiltinFunctionType, FunctionType, MethodType, ModuleType
from typing import Any


_OPAQUE_TYPES = (type, FunctionType, BuiltinFunctionType, MethodType, ModuleType)


def structurally_equal(a: Any, b: Any) -> bool:
    """Report whether two values are deeply equal.

    Rules
    -----
    - Values of different types are never equal.
    - Mappings are equal when they have the same keys and deeply equal values,
      regardless of insertion order.
    - Lists and tuples are equal element by element.
    - Types that define their own ``__eq__`` are compared with it.
    - Functions, classes and modules are equal only to themselves.
    - Other objects are equal when the state they reduce to for copying
      (``__reduce_ex__``: constructor arguments, ``__dict__``, ``__slots__``
      and C-level state such as exception ``args``) is deeply equal. Objects
      that cannot be reduced are equal only to themselves.

    Cyclic structures are handled: a pair of containers already under
    comparison is assumed equal.
    """
    return _equal(a, b, {})


def _equal(a: Any, b: Any, visited: dict[tuple[int, int], tuple[Any, Any]]) -> bool:
    if a is b:
        return True
    if type(a) is not type(b):
        return False
    if isinstance(a, _OPAQUE_TYPES):
        return False

    key = (id(a), id(b))
    if key in visited:
        return True

    if isinstance(a, Mapping):
        if len(a) != len(b):
            return False
        visited[key] = (a, b)
        for k, v in a.items():
            if k not in b or not _equal(v, b[k], visited):
                return False
        return True

    if isinstance(a, (list, tuple)):
        if len(a) != len(b):
            return False
        visited[key] = (a, b)
        return all(_equal(x, y, visited) for x, y in zip(a, b))

    if type(a).__eq__ is not object.__eq__:
        return bool(a == b)

    state_a = _reduced_state(a)
    state_b = _reduced_state(b)
    if state_a is None or state_b is None:
        return False
    # visited holds the objects too, so their ids stay unique for the whole comparison
    visited[key] = (a, b)
    return _equal(state_a, state_b, visited)


def _reduced_state(obj: Any) -> tuple[Any, ...] | None:
    try:
        reduced = obj.__reduce_ex__(4)
    except (TypeError, pickle.PicklingError):
        return None
    if not isinstance(reduced, tuple):
        return None
    # list and dict item iterators become lists so they compare element-wise
    return tuple(
        list(part) if i in (3, 4) and part is not None else part
        for i, part in enumerate(reduced)
    )


def zero_value_of(value: Any) -> Any:
    """Return the zero value for the type of ``value``.

    The zero value is what the type's constructor returns without arguments
    (``0``, ``""``, ``False``, ``[]`` ...), so the constructor is invoked.
    Types whose constructor cannot be called that way, or fails when it is,
    have ``None`` as their zero value.
    """
    try:
        return type(value)()
    except Exception:
        return None
