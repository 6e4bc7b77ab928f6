"""Diagnostics and debugging utilities for adjgraph."""

from .core import assert_degree_cache, check_degree_cache
from .debug_mode import (
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)

__all__ = [
    "check_degree_cache",
    "assert_degree_cache",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
]
