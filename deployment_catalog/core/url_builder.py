"""Locator construction for deployments and their files"""

from urllib.parse import quote

from ..constants import API_PATH_SEGMENT
from ..models.context import RequestContext


def _quote_segment(segment: str) -> str:
    # Undecodable bytes from os.listdir come back as surrogates
    return quote(segment, errors="surrogateescape")


def _quote_path(path: str) -> str:
    return "/".join(_quote_segment(segment) for segment in path.strip("/").split("/"))


class UrlBuilder:
    """Builds absolute URLs from a request context

    Both methods are pure string construction and never fail.
    """

    def __init__(self, api_segment: str = API_PATH_SEGMENT):
        self.api_segment = api_segment.strip("/")

    def api_url(self, context: RequestContext, relative_path: str) -> str:
        """
        URL of an API resource

        Args:
            context: Request context
            relative_path: Resource path below the API root

        Returns:
            Absolute URL
        """
        return f"{context.base_url}/{self.api_segment}/{_quote_path(relative_path)}"

    def public_dir_file_url(self, context: RequestContext, relative_dir: str, name: str) -> str:
        """
        URL of an entry in the public directory

        Args:
            context: Request context
            relative_dir: Directory relative to the public directory
            name: Entry name inside ``relative_dir``

        Returns:
            Absolute URL
        """
        return f"{context.base_url}/{_quote_path(relative_dir)}/{_quote_segment(name)}"
