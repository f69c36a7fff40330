"""Demonstrates tinyassert in a pytest test module.

Run with ``pytest examples/example_assertions.py``. Every assertion takes
the ``t`` fixture, reports failures without stopping the test and returns
whether it passed, so later checks can depend on earlier ones.
"""

import weakref

from tinyassert import (
    capture_panic,
    deep_equal,
    empty_map,
    empty_slice,
    eq,
    error,
    error_msg,
    false,
    nil,
    non_empty_map,
    non_empty_slice,
    non_nil,
    non_zero,
    not_deep_equal,
    not_eq,
    ok,
    panic_msg,
    success,
    zero,
)


class Inventory:
    def __init__(self):
        self.items: dict[str, int] = {}

    def add(self, name: str, count: int) -> None:
        if count <= 0:
            raise ValueError(f"count must be positive, got {count}")
        self.items[name] = self.items.get(name, 0) + count

    def take(self, name: str) -> int:
        return self.items.pop(name)


def test_inventory(t):
    inv = Inventory()
    empty_map(t, inv.items)

    inv.add("apple", 3)
    if non_empty_map(t, inv.items, "after adding apples"):
        eq(t, inv.items["apple"], 3)
        not_eq(t, inv.items["apple"], 0)
        deep_equal(t, inv.items, {"apple": 3})
        not_deep_equal(t, inv.items, {"apple": 4})

    ok(t, "apple" in inv.items)
    false(t, "pear" in inv.items)

    eq(t, inv.take("apple"), 3)
    empty_slice(t, list(inv.items))
    non_empty_slice(t, ["apple"])


def test_inventory_errors(t):
    inv = Inventory()
    success(t, capture_panic(lambda: inv.add("apple", 1)))
    error(t, capture_panic(lambda: inv.take("pear")), KeyError)
    error_msg(t, capture_panic(lambda: inv.add("pear", 0)), "count must be positive, got 0")
    panic_msg(t, lambda: inv.add("pear", -1), "count must be positive, got -1")


def test_values(t):
    inv = Inventory()
    ref = weakref.ref(inv)
    non_nil(t, ref)
    nil(t, None)
    zero(t, len(inv.items))
    inv.add("apple", 1)
    non_zero(t, len(inv.items))
