"""Filesystem backends for deployment-catalog"""

from .base import EntryStat, FilesystemBackend
from .filesystem import LocalFilesystem

__all__ = [
    "EntryStat",
    "FilesystemBackend",
    "LocalFilesystem",
]
