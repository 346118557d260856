"""Local filesystem backend implementation"""

import os
from typing import List

import aiofiles.os

from .base import EntryStat, FilesystemBackend, PathLike


class LocalFilesystem(FilesystemBackend):
    """Local filesystem access

    Async operations go through ``aiofiles.os``, which runs the blocking
    call in the loop's default executor and suspends the caller until it
    completes.
    """

    async def stat(self, path: PathLike) -> EntryStat:
        """Stat an entry asynchronously"""
        result = await aiofiles.os.stat(path)
        return EntryStat.from_stat_result(result)

    def stat_sync(self, path: PathLike) -> EntryStat:
        """Stat an entry synchronously"""
        return EntryStat.from_stat_result(os.stat(path))

    async def listdir(self, path: PathLike) -> List[str]:
        """List a directory asynchronously"""
        return await aiofiles.os.listdir(path)
