# deployment_catalog/utils/__init__.py
"""Utility functions for deployment-catalog"""

from .async_utils import (
    run_async,
    gather_all,
)

from .formatting import (
    format_size,
    format_timestamp,
)

__all__ = [
    # Async utilities
    "run_async",
    "gather_all",

    # Formatting utilities
    "format_size",
    "format_timestamp",
]
