"""Tests for absence and zero-value assertions."""

import gc
import weakref
from datetime import datetime

from tinyassert import nil, non_nil, non_zero, zero


class Node:
    def __str__(self) -> str:
        return "node"


def test_nil(noerr, fake):
    assert nil(noerr, None) is True
    assert nil(fake("** got &42, wanted nil"), 42) is False


def test_nil_dereferences_weakref(noerr, fake):
    node = Node()
    ref = weakref.ref(node)
    assert not nil(fake("** got &node, wanted nil"), ref)

    del node
    gc.collect()
    assert nil(noerr, ref)


def test_non_nil(noerr, fake):
    assert non_nil(noerr, 42) is True
    assert non_nil(noerr, 0)
    assert non_nil(fake("** got nil NoneType, wanted non-nil"), None) is False


def test_non_nil_dead_weakref(fake):
    ref = weakref.ref(Node())
    gc.collect()
    assert not non_nil(fake(f"** got nil {type(ref).__name__}, wanted non-nil"), ref)


def test_zero(noerr, fake):
    assert zero(noerr, 0)
    assert zero(noerr, 0.0)
    assert zero(noerr, False)
    assert zero(noerr, "")
    assert zero(noerr, [])
    assert zero(noerr, None)
    assert not zero(fake("** got 42, wanted zero value 0"), 42)
    assert not zero(fake("** got 42.2, wanted zero value 0.0"), 42.2)
    assert not zero(fake("** got True, wanted zero value False"), True)
    assert not zero(fake("** got abc, wanted zero value "), "abc")
    assert not zero(
        fake("** got 2023-02-05 00:00:00, wanted zero value None"), datetime(2023, 2, 5)
    )


def test_non_zero(noerr, fake):
    assert non_zero(noerr, 42)
    assert non_zero(noerr, 42.2)
    assert non_zero(noerr, True)
    assert non_zero(noerr, "abc")
    assert non_zero(noerr, datetime(2023, 2, 5))
    assert not non_zero(fake("** got zero value 0, wanted non-zero"), 0)
    assert not non_zero(fake("** got zero value 0.0, wanted non-zero"), 0.0)
    assert not non_zero(fake("** got zero value False, wanted non-zero"), False)
    assert not non_zero(fake("** got zero value , wanted non-zero"), "")
    assert not non_zero(fake("** got zero value None, wanted non-zero"), None)


def test_absence_and_zero_are_distinct(noerr, fake):
    # 0 is a zero value but not absent
    assert non_nil(noerr, 0)
    assert zero(noerr, 0)
    assert not nil(fake("** got &0, wanted nil"), 0)


class FileConfig:
    """Constructible without arguments, but the default path does not exist."""

    def __init__(self, path="/nonexistent/tinyassert/config.toml"):
        with open(path) as fh:
            self.text = fh.read()

    def __str__(self) -> str:
        return "config"


def test_zero_with_failing_constructor(noerr, fake):
    cfg = object.__new__(FileConfig)
    assert non_zero(noerr, cfg)
    assert not zero(fake("** got config, wanted zero value None"), cfg)


def test_nil_weak_proxy(noerr, fake):
    node = Node()
    proxy = weakref.proxy(node)
    assert not nil(fake("** got &node, wanted nil"), proxy)
    assert non_nil(noerr, proxy)

    del node
    gc.collect()
    assert nil(noerr, proxy)
    assert not non_nil(fake(f"** got nil {type(proxy).__name__}, wanted non-nil"), proxy)
