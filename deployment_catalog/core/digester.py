"""Deployment directory digestion"""

import logging
import os
from typing import Optional, Sequence

from .path_resolver import PathResolver
from .url_builder import UrlBuilder
from ..constants import FILE_KINDS, MANIFEST_FILE, MSG_MANIFEST_MISSING
from ..models.context import RequestContext
from ..models.deployment import DeploymentDescriptor, FileEntry
from ..storage.base import FilesystemBackend

logger = logging.getLogger(__name__)


def file_extension(name: str) -> str:
    """Extension of a file name without the leading dot

    Follows ``os.path.splitext``: the text after the last dot, empty for
    names without one and for dotfiles such as ``.osm``.
    """
    return os.path.splitext(name)[1][1:]


class DeploymentDigester:
    """Turns a deployment directory listing into a descriptor

    Children are stat'ed one at a time with the synchronous probe. The
    digester runs inside a per-directory unit of work that has already been
    dispatched, so the listing of one deployment is processed sequentially.
    """

    def __init__(self,
                 path_resolver: PathResolver,
                 backend: FilesystemBackend,
                 url_builder: Optional[UrlBuilder] = None):
        self.path_resolver = path_resolver
        self.backend = backend
        self.url_builder = url_builder or UrlBuilder()

    def digest(self,
               context: RequestContext,
               name: str,
               contents: Sequence[str]) -> DeploymentDescriptor:
        """
        Describe one deployment directory

        Args:
            context: Request context used for locators
            name: Deployment directory name
            contents: Names of the directory's direct children

        Returns:
            Deployment descriptor

        Raises:
            OSError: If a child listed in ``contents`` cannot be stat'ed
        """
        if MANIFEST_FILE not in contents:
            logger.info(f"Deployment {name} has no {MANIFEST_FILE}")
            return DeploymentDescriptor.invalid(name, MSG_MANIFEST_MISSING)

        deployments_dir = self.path_resolver.deployments_dir_name
        relative_dir = self.path_resolver.get_deployment_relative_dir(name)
        descriptor = DeploymentDescriptor.create_valid(
            name=name,
            url=self.url_builder.api_url(context, relative_dir),
            listing_url=self.url_builder.public_dir_file_url(context, deployments_dir, name)
        )

        for item in contents:
            entry_stat = self.backend.stat_sync(self.path_resolver.get_entry_path(name, item))

            # Deployments are not scanned recursively
            if entry_stat.is_dir:
                continue

            kind = file_extension(item)
            if kind not in FILE_KINDS:
                continue

            descriptor.add_file(kind, FileEntry(
                name=item,
                download_url=self.url_builder.public_dir_file_url(context, relative_dir, item),
                size=entry_stat.size,
                last_modified=entry_stat.modified
            ))

        logger.debug(f"Deployment {name}: {descriptor.file_count} data file(s)")
        return descriptor
