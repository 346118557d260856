"""Tests for data models and locators"""

from datetime import datetime, timezone, timedelta

import pytest

from deployment_catalog.api.exceptions import ConfigError
from deployment_catalog.core import UrlBuilder
from deployment_catalog.models import (
    CatalogConfig,
    DeploymentDescriptor,
    FileEntry,
    RequestContext,
    UrlConfig,
)


class TestDeploymentDescriptor:

    def test_valid_to_dict_shape(self):
        descriptor = DeploymentDescriptor.create_valid("nepal", "u", "l")
        descriptor.add_file("osm", FileEntry(
            name="a.osm",
            download_url="d",
            size=3,
            last_modified=datetime(2016, 5, 3, 17, 21, 9, 123000, tzinfo=timezone.utc)
        ))

        assert descriptor.to_dict() == {
            "name": "nepal",
            "valid": True,
            "files": {
                "osm": [{
                    "name": "a.osm",
                    "downloadUrl": "d",
                    "size": 3,
                    "last_modified": "2016-05-03T17:21:09.123Z",
                }],
                "mbtiles": [],
            },
            "url": "u",
            "listingUrl": "l",
        }
        assert descriptor.file_count == 1
        assert descriptor.total_size == 3

    def test_invalid_has_no_files(self):
        descriptor = DeploymentDescriptor.invalid("nepal", "Unable to find manifest file.")

        assert set(descriptor.to_dict()) == {"name", "valid", "message"}
        assert descriptor.file_count == 0
        with pytest.raises(ValueError):
            descriptor.add_file("osm", FileEntry("a.osm", "d", 1, datetime.now(timezone.utc)))

    def test_last_modified_is_utc(self):
        tz = timezone(timedelta(hours=5, minutes=45))
        entry = FileEntry("a.osm", "d", 1, datetime(2016, 5, 3, 23, 6, 9, tzinfo=tz))

        assert entry.to_dict()["last_modified"] == "2016-05-03T17:21:09.000Z"

    def test_from_dict(self):
        data = {
            "name": "nepal",
            "valid": True,
            "files": {"osm": [{
                "name": "a.osm",
                "downloadUrl": "d",
                "size": 3,
                "last_modified": "2016-05-03T17:21:09.000Z",
            }]},
            "url": "u",
            "listingUrl": "l",
        }

        descriptor = DeploymentDescriptor.from_dict(data)

        assert descriptor.files["mbtiles"] == []
        assert descriptor.files["osm"][0].last_modified == datetime(
            2016, 5, 3, 17, 21, 9, tzinfo=timezone.utc)


class TestUrlBuilder:

    def test_api_url(self):
        context = RequestContext(scheme="https", host="posm.local:8080")

        assert UrlBuilder().api_url(context, "deployments/nepal") == \
            "https://posm.local:8080/api/deployments/nepal"

    def test_public_dir_file_url_quotes(self):
        context = RequestContext(scheme="http", host="posm.local", path_prefix="/posm")

        url = UrlBuilder().public_dir_file_url(context, "deployments/my map", "a b.osm")

        assert url == "http://posm.local/posm/deployments/my%20map/a%20b.osm"


class TestCatalogConfig:

    def test_defaults(self, tmp_path):
        config = CatalogConfig(public_dir=tmp_path)

        assert config.deployments_root == tmp_path.resolve() / "deployments"
        assert config.url.scheme == "http"

    @pytest.mark.parametrize("value", ["", ".", "..", "a/b"])
    def test_invalid_deployments_dir(self, tmp_path, value):
        with pytest.raises(ConfigError):
            CatalogConfig(public_dir=tmp_path, deployments_dir=value)

    def test_from_dict_relative_public_dir(self, tmp_path):
        config = CatalogConfig.from_dict({"public_dir": "srv"}, base_dir=tmp_path)

        assert config.public_dir == tmp_path.resolve() / "srv"

    def test_url_prefix_normalized(self):
        assert UrlConfig(path_prefix="posm/").path_prefix == "/posm"

    def test_bad_scheme(self):
        with pytest.raises(ConfigError):
            UrlConfig(scheme="ftp")

    def test_round_trip(self, tmp_path):
        config = CatalogConfig(public_dir=tmp_path, url=UrlConfig(host="posm.local"))

        assert CatalogConfig.from_dict(config.to_dict()) == config
