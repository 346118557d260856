# deployment_catalog/storage/base.py
"""Filesystem backend abstract base class"""

import os
import stat as stat_module
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Union

PathLike = Union[str, Path]


@dataclass(frozen=True)
class EntryStat:
    """Filesystem metadata for a single entry"""
    is_dir: bool
    size: int
    modified: datetime

    @classmethod
    def from_stat_result(cls, result: os.stat_result) -> 'EntryStat':
        """Create from an ``os.stat_result``"""
        return cls(
            is_dir=stat_module.S_ISDIR(result.st_mode),
            size=result.st_size,
            modified=datetime.fromtimestamp(result.st_mtime, tz=timezone.utc)
        )


class FilesystemBackend(ABC):
    """Abstract base class for the filesystem operations the catalog needs

    Every method raises ``OSError`` (``FileNotFoundError``,
    ``PermissionError``, ``NotADirectoryError``...) on failure.
    """

    @abstractmethod
    async def stat(self, path: PathLike) -> EntryStat:
        """
        Get entry metadata without blocking the event loop

        Args:
            path: Full path to a file or directory

        Returns:
            Entry metadata
        """
        pass

    @abstractmethod
    def stat_sync(self, path: PathLike) -> EntryStat:
        """
        Get entry metadata synchronously

        Args:
            path: Full path to a file or directory

        Returns:
            Entry metadata
        """
        pass

    @abstractmethod
    async def listdir(self, path: PathLike) -> List[str]:
        """
        List the names of the direct children of a directory

        Args:
            path: Full path to a directory

        Returns:
            Child names in filesystem enumeration order
        """
        pass

    async def is_dir(self, path: PathLike) -> bool:
        """Check whether an entry is a directory, raising if it cannot be probed"""
        return (await self.stat(path)).is_dir
