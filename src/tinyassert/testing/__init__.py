"""pytest integration: the ``T`` reporter and its settings."""

from .models import Failure
from .settings import AssertSettings, get_settings
from .t import T


__all__ = [
    "AssertSettings",
    "Failure",
    "T",
    "get_settings",
]
