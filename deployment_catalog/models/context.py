"""Request context model"""

from dataclasses import dataclass

from .config import UrlConfig


@dataclass(frozen=True)
class RequestContext:
    """The parts of an incoming request that locators are built from"""
    scheme: str
    host: str
    path_prefix: str = ""

    @property
    def base_url(self) -> str:
        """Scheme, host and prefix without a trailing slash"""
        return f"{self.scheme}://{self.host}{self.path_prefix}"

    @classmethod
    def from_url_config(cls, url_config: UrlConfig) -> 'RequestContext':
        """Build a context from configured URL settings"""
        return cls(
            scheme=url_config.scheme,
            host=url_config.host,
            path_prefix=url_config.path_prefix
        )
