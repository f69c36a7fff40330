"""Base protocols and error types shared by every assertion."""

from typing import Any, Protocol, TypeVar, runtime_checkable


_T = TypeVar("_T")


@runtime_checkable
class TB(Protocol):
    """The parts of a test object that assertions actually need.

    Pass :class:`tinyassert.testing.T` (the ``t`` fixture), or any object
    exposing these two methods, wherever an argument of type ``TB`` is expected.

    Methods
    -------
    helper()
        Mark the calling function as a test helper, so that failure locations
        point at its caller instead.
    errorf(format, *args)
        Record a non-fatal failure. ``format`` is a ``%``-style template
        interpolated with ``args``. Execution continues after the call.
    """

    def helper(self) -> None: ...

    def errorf(self, format: str, *args: Any) -> None: ...


class SupportsEquals(Protocol[_T]):
    """Values that define their own equivalence, compared via ``expected.equals(actual)``."""

    def equals(self, other: _T) -> bool: ...


class MessageFormatError(TypeError):
    """Raised when the extra arguments of an assertion call are malformed.

    This signals a broken call site, not a failed assertion, so it is raised
    immediately instead of being reported through ``TB``.
    """
