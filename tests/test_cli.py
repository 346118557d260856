"""Tests for the command line interface via CliRunner"""

import json

import pytest
from click.testing import CliRunner

from deployment_catalog.cli.main import cli

from .conftest import make_deployment


@pytest.fixture
def runner():
    return CliRunner()


def invoke(runner, public_dir, *args):
    return runner.invoke(cli, ["--public-dir", str(public_dir), *args], env={
        "DEPLOYMENT_CATALOG_CONFIG": None,
    })


class TestListCommand:

    def test_json(self, runner, public_dir, deployments_root):
        make_deployment(deployments_root, "b", files=["x.osm"])
        make_deployment(deployments_root, "a", manifest=False)

        result = invoke(runner, public_dir, "list", "--json")

        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert [d["name"] for d in data] == ["a", "b"]
        assert data[0] == {"name": "a", "valid": False, "message": "Unable to find manifest file."}
        assert data[1]["files"]["osm"][0]["name"] == "x.osm"
        assert data[1]["url"] == "http://localhost:3000/api/deployments/b"

    def test_valid_only(self, runner, public_dir, deployments_root):
        make_deployment(deployments_root, "b")
        make_deployment(deployments_root, "a", manifest=False)

        result = invoke(runner, public_dir, "list", "--json", "--valid-only")

        assert [d["name"] for d in json.loads(result.output)] == ["b"]

    def test_all_is_default(self, runner, public_dir, deployments_root):
        make_deployment(deployments_root, "b")
        make_deployment(deployments_root, "a", manifest=False)

        result = invoke(runner, public_dir, "list", "--json", "--all")

        assert [d["name"] for d in json.loads(result.output)] == ["a", "b"]

    def test_missing_root(self, runner, public_dir):
        result = invoke(runner, public_dir, "list", "--json")

        assert result.exit_code == 0
        assert json.loads(result.output) == []

    def test_table(self, runner, public_dir, deployments_root):
        make_deployment(deployments_root, "nepal", files=["a.osm"])

        result = invoke(runner, public_dir, "list")

        assert result.exit_code == 0
        assert "nepal" in result.output

    def test_empty_table(self, runner, public_dir, deployments_root):
        result = invoke(runner, public_dir, "list")

        assert result.exit_code == 0
        assert "No deployments found" in result.output


class TestShowCommand:

    def test_json(self, runner, public_dir, deployments_root):
        make_deployment(deployments_root, "nepal", files=["a.osm", "b.mbtiles", "c.txt"])

        result = invoke(runner, public_dir, "show", "nepal", "--json")

        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["valid"] is True
        assert [f["name"] for f in data["files"]["mbtiles"]] == ["b.mbtiles"]
        assert data["listingUrl"] == "http://localhost:3000/deployments/nepal"

    def test_detail(self, runner, public_dir, deployments_root):
        make_deployment(deployments_root, "nepal", files=["a.osm"])

        result = invoke(runner, public_dir, "show", "nepal")

        assert result.exit_code == 0
        assert "Valid deployment" in result.output

    def test_missing(self, runner, public_dir, deployments_root):
        result = invoke(runner, public_dir, "show", "missing")

        assert result.exit_code == 1
        assert "Deployment not found: missing" in result.output

    def test_invalid_name(self, runner, public_dir, deployments_root):
        result = invoke(runner, public_dir, "show", "..")

        assert result.exit_code == 1
        assert "Invalid deployment name" in result.output


class TestPathsCommand:

    def test_shows_paths(self, runner, public_dir, deployments_root):
        result = invoke(runner, public_dir, "paths")

        assert result.exit_code == 0
        assert "Deployments" in result.output
        assert "http://localhost:3000" in result.output
