"""Tests for the synchronous query API"""

import pytest

from deployment_catalog.api.exceptions import DeploymentNotFoundError
from deployment_catalog.api.query import CatalogQuery

from .conftest import make_deployment


@pytest.fixture
def catalog_query(catalog, context):
    return CatalogQuery(catalog=catalog, context=context)


class TestCatalogQuery:

    def test_list_deployments(self, catalog_query, deployments_root):
        make_deployment(deployments_root, "b")
        make_deployment(deployments_root, "a")

        assert [d.name for d in catalog_query.list_deployments()] == ["a", "b"]

    def test_get_deployment(self, catalog_query, deployments_root):
        make_deployment(deployments_root, "nepal", files=["a.osm"])

        deployment = catalog_query.get_deployment("nepal")

        assert deployment.files["osm"][0].download_url == \
            "http://posm.local/deployments/nepal/a.osm"

    def test_get_missing(self, catalog_query, deployments_root):
        with pytest.raises(DeploymentNotFoundError):
            catalog_query.get_deployment("missing")

    def test_summary(self, catalog_query, deployments_root):
        make_deployment(deployments_root, "nepal", files=["a.osm", "b.osm", "c.mbtiles"],
                        content=b"1234")
        make_deployment(deployments_root, "haiti", files=["d.osm"], manifest=False)

        assert catalog_query.summary() == {
            'total': 2,
            'valid': 1,
            'invalid': 1,
            'files': {'osm': 2, 'mbtiles': 1},
            'total_size': 12,
        }

    def test_summary_missing_root(self, catalog_query):
        assert catalog_query.summary()['total'] == 0

    def test_context_from_config(self, config):
        query = CatalogQuery(config=config)

        assert query.context.base_url == "http://posm.local"
