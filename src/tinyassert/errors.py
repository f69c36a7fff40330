"""Assertions about exceptions."""

from collections.abc import Callable, Iterator
from typing import Any

from tinyassert._base import TB
from tinyassert.capture import capture_panic
from tinyassert.messages import format_prefix


ExpectedError = BaseException | type[BaseException]


def success(t: TB, a: BaseException | None, *message_and_args: Any) -> bool:
    """Assert that no exception occurred."""
    if a is not None:
        t.helper()
        t.errorf("** %sfailed: %s", format_prefix(message_and_args), describe_error(a))
        return False
    return True


def error(t: TB, a: BaseException | None, e: ExpectedError | None, *message_and_args: Any) -> bool:
    """Assert that the actual exception matches the expected one.

    ``e`` matches when it appears anywhere in the chain of ``a`` (see
    :func:`error_chain`). An exception instance matches by identity, an
    exception class matches any instance of it.

    If the expected exception is ``None``, behaves exactly like :func:`success`.
    """
    if e is None:
        return success(t, a, *message_and_args)
    if a is None:
        t.helper()
        t.errorf("** %ssucceeded, wanted to fail with: %s", format_prefix(message_and_args), describe_error(e))
        return False
    if not error_matches(a, e):
        t.helper()
        t.errorf(
            "** %sfailed with: %s, wanted: %s",
            format_prefix(message_and_args),
            describe_error(a),
            describe_error(e),
        )
        return False
    return True


def error_msg(t: TB, a: BaseException | None, e: str, *message_and_args: Any) -> bool:
    """Assert that the actual exception's message equals the expected one.

    If the expected message is empty, behaves exactly like :func:`success`.
    """
    if e == "":
        return success(t, a, *message_and_args)
    if a is None:
        t.helper()
        t.errorf("** %ssucceeded, wanted to fail with: %s", format_prefix(message_and_args), e)
        return False
    s = str(a)
    if s != e:
        t.helper()
        t.errorf("** %sfailed with: %s, wanted: %s", format_prefix(message_and_args), s, e)
        return False
    return True


def panic_msg(t: TB, f: Callable[[], Any], e: str, *message_and_args: Any) -> bool:
    """Assert that calling ``f`` raises an exception with the given message."""
    actual = capture_panic(f)
    if actual is None:
        t.helper()
        t.errorf("** %ssucceeded, wanted to panic with: %s", format_prefix(message_and_args), e)
        return False
    a = str(actual)
    if a != e:
        t.helper()
        t.errorf("** %spaniced with: %s, wanted: %s", format_prefix(message_and_args), a, e)
        return False
    return True


def error_chain(exc: BaseException) -> Iterator[BaseException]:
    """Yield ``exc`` and every exception it wraps.

    Follows ``__cause__``, ``__context__`` (unless suppressed by
    ``raise ... from``) and the members of exception groups. Each exception
    is yielded once.
    """
    seen: set[int] = set()
    stack = [exc]
    while stack:
        current = stack.pop()
        if id(current) in seen:
            continue
        seen.add(id(current))
        yield current

        wrapped: list[BaseException] = []
        if isinstance(current, BaseExceptionGroup):
            wrapped.extend(current.exceptions)
        if current.__cause__ is not None:
            wrapped.append(current.__cause__)
        if current.__context__ is not None and not current.__suppress_context__:
            wrapped.append(current.__context__)
        stack.extend(reversed(wrapped))


def error_matches(a: BaseException, e: ExpectedError) -> bool:
    """Report whether ``e`` appears in the chain of ``a``."""
    if isinstance(e, type):
        return any(isinstance(x, e) for x in error_chain(a))
    return any(x is e for x in error_chain(a))


def describe_error(e: ExpectedError) -> str:
    """Render an exception (or exception class) for a failure message."""
    if isinstance(e, type):
        return e.__name__
    return str(e) or type(e).__name__
