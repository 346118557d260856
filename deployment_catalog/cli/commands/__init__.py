"""CLI commands"""

from . import listing
from . import show
from . import paths

__all__ = [
    "listing",
    "show",
    "paths",
]
