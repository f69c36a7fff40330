"""tinyassert - a tiny assertion library for pytest.

Every assertion takes a ``TB`` (usually the ``t`` fixture), its operands and
optional ``%``-style message arguments, reports failures without stopping
the test, and returns whether it succeeded.
"""

from ._base import TB, MessageFormatError, SupportsEquals
from .basic import deep_equal, eq, false, method_equal, not_deep_equal, not_eq, not_method_equal, ok
from .capture import capture_panic
from .containers import empty_map, empty_slice, non_empty_map, non_empty_slice
from .errors import error, error_msg, panic_msg, success
from .messages import add_prefix, format_prefix
from .values import nil, non_nil, non_zero, zero
from .version import __version__


__all__ = [
    # Protocols and errors
    "TB",
    "SupportsEquals",
    "MessageFormatError",
    # Truth and equality
    "ok",
    "false",
    "eq",
    "not_eq",
    "deep_equal",
    "not_deep_equal",
    "method_equal",
    "not_method_equal",
    # Absence and zero values
    "nil",
    "non_nil",
    "zero",
    "non_zero",
    # Containers
    "empty_slice",
    "non_empty_slice",
    "empty_map",
    "non_empty_map",
    # Exceptions
    "success",
    "error",
    "error_msg",
    "panic_msg",
    "capture_panic",
    # Custom assertions
    "format_prefix",
    "add_prefix",
    "__version__",
]
