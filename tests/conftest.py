"""Shared fixtures for deployment-catalog tests"""

from pathlib import Path
from typing import Iterable, Optional

import pytest

from deployment_catalog.core import DeploymentCatalog
from deployment_catalog.models import CatalogConfig, RequestContext, UrlConfig


def make_deployment(root: Path, name: str, files: Iterable[str] = (),
                    dirs: Iterable[str] = (), manifest: bool = True,
                    content: Optional[bytes] = None) -> Path:
    """Create a deployment directory with the given children"""
    path = root / name
    path.mkdir(parents=True)
    if manifest:
        (path / "manifest.json").write_text("{}")
    for file_name in files:
        (path / file_name).write_bytes(content if content is not None else file_name.encode())
    for dir_name in dirs:
        (path / dir_name).mkdir()
    return path


@pytest.fixture
def public_dir(tmp_path):
    path = tmp_path / "public"
    path.mkdir()
    return path


@pytest.fixture
def deployments_root(public_dir):
    path = public_dir / "deployments"
    path.mkdir()
    return path


@pytest.fixture
def config(public_dir):
    return CatalogConfig(
        public_dir=public_dir,
        url=UrlConfig(scheme="http", host="posm.local")
    )


@pytest.fixture
def catalog(config):
    return DeploymentCatalog(config)


@pytest.fixture
def context():
    return RequestContext(scheme="http", host="posm.local")
