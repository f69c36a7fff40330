"""Building the optional prefix of assertion failure messages."""

from collections.abc import Sequence
from typing import Any

from tinyassert._base import MessageFormatError


def format_prefix(message_and_args: Sequence[Any]) -> str:
    """Return a prefix for assertion failure messages.

    Parameters
    ----------
    message_and_args : Sequence[Any]
        Extra arguments of an assertion call. When non-empty, the first one
        must be a ``%``-style format string and the rest are its arguments.

    Returns
    -------
    str
        ``""`` for no extra arguments, otherwise the formatted message
        followed by ``": "``.

    Raises
    ------
    MessageFormatError
        If the first extra argument is not a string, or its placeholders do
        not match the remaining arguments.

    Examples
    --------
    >>> format_prefix([])
    ''
    >>> format_prefix(["x=%s", 7])
    'x=7: '
    """
    if not message_and_args:
        return ""
    msg = message_and_args[0]
    if not isinstance(msg, str):
        raise MessageFormatError(
            "when passing message_and_args to assertion funcs, the first extra argument "
            f"must be a format string, got {type(msg).__name__} {msg}"
        )
    args = tuple(message_and_args[1:])
    if args:
        try:
            msg = msg % args
        except (TypeError, ValueError) as exc:
            raise MessageFormatError(
                f"message format {msg!r} does not match its arguments {args!r}: {exc}"
            ) from exc
    return msg + ": "


def add_prefix(message_and_args: Sequence[Any], prefix: str, *args: Any) -> list[Any]:
    """Add a prefix to an assertion call's extra arguments.

    Meant for custom assertions that wrap the built-in ones and want to
    put their own context in front of whatever the caller passed.

    Examples
    --------
    >>> add_prefix(["bar %s", "boz"], "foo.%d", 42)
    ['foo.%d: bar %s', 42, 'boz']
    >>> add_prefix([1, 2, 3], "foo.%d", 42)
    ['foo.%d', 42, 1, 2, 3]
    """
    rest = list(message_and_args)
    if rest and isinstance(rest[0], str):
        prefix = prefix + ": " + rest.pop(0)
    return [prefix, *args, *rest]
