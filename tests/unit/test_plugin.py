"""Tests for AssetsPlugin functionality and integration."""

from pathlib import Path

import pytest
from click import Group
from litestar import get
from litestar.datastructures import CacheControlHeader
from litestar.testing import create_test_client

from litestar_assets.config import AssetsConfig
from litestar_assets.exceptions import AmbiguousPrefixError
from litestar_assets.plugin import AssetsPlugin, StaticFilesConfig


@get("/api/ping", sync_to_thread=False)
def ping() -> dict[str, str]:
    return {"status": "ok"}


class TestAssetsPlugin:
    def test_plugin_initialization_default_config(self) -> None:
        plugin = AssetsPlugin()

        assert isinstance(plugin.config, AssetsConfig)
        assert plugin._static_files_config == {}

    def test_plugin_initialization_with_static_files_config(self) -> None:
        plugin = AssetsPlugin(static_files_config=StaticFilesConfig(tags=["assets"]))

        assert plugin._static_files_config == {"tags": ["assets"]}

    def test_derived_values(self, assets_config: AssetsConfig, public_dir: Path) -> None:
        plugin = AssetsPlugin(config=assets_config)

        assert plugin.content_base == str(public_dir)
        assert plugin.manifest_key_prefix == "build/"

    def test_manifest_key_prefix_propagates_error(self, tmp_path: Path) -> None:
        plugin = AssetsPlugin(
            config=AssetsConfig(root=tmp_path, output_path="public/build", public_path="/subdirectory/build")
        )

        with pytest.raises(AmbiguousPrefixError):
            _ = plugin.manifest_key_prefix

    def test_on_cli_init_registers_group(self) -> None:
        cli = Group(name="litestar")
        AssetsPlugin().on_cli_init(cli)

        assert "assets" in cli.commands
        assert "paths" in cli.commands["assets"].commands  # type: ignore[attr-defined]


class TestStaticServing:
    def test_dev_mode_serves_content_base(self, assets_config: AssetsConfig) -> None:
        assets_config.dev_mode = True

        with create_test_client(route_handlers=[ping], plugins=[AssetsPlugin(config=assets_config)]) as client:
            response = client.get("/build/app.js")
            assert response.status_code == 200
            assert response.text == "console.log('built')"

            # files outside the output directory live in the document root too
            response = client.get("/robots.txt")
            assert response.status_code == 200

            assert client.get("/api/ping").json() == {"status": "ok"}

    def test_dev_mode_content_url(self, assets_config: AssetsConfig) -> None:
        assets_config.dev_mode = True
        assets_config.content_url = "/dev"

        with create_test_client(plugins=[AssetsPlugin(config=assets_config)]) as client:
            assert client.get("/dev/build/app.js").status_code == 200

    def test_dev_mode_uses_manifest_key_prefix_override(self, tmp_path: Path, public_dir: Path) -> None:
        config = AssetsConfig(
            root=tmp_path,
            output_path="public/build",
            public_path="/subdirectory/build",
            manifest_key_prefix="/build/",
            dev_mode=True,
        )

        with create_test_client(plugins=[AssetsPlugin(config=config)]) as client:
            assert client.get("/build/app.js").status_code == 200

    def test_production_serves_output_path_at_public_path(self, assets_config: AssetsConfig) -> None:
        with create_test_client(plugins=[AssetsPlugin(config=assets_config)]) as client:
            response = client.get("/build/app.js")
            assert response.status_code == 200
            assert response.text == "console.log('built')"

            assert client.get("/build/missing.js").status_code == 404

    def test_production_external_public_path_is_not_served(self, assets_config: AssetsConfig) -> None:
        assets_config.set_public_path("https://cdn.example.com/build/")

        with create_test_client(plugins=[AssetsPlugin(config=assets_config)]) as client:
            assert client.get("/build/app.js").status_code == 404

    def test_set_static_folders_disabled(self, assets_config: AssetsConfig) -> None:
        assets_config.set_static_folders = False

        with create_test_client(plugins=[AssetsPlugin(config=assets_config)]) as client:
            assert client.get("/build/app.js").status_code == 404

    def test_static_files_config_is_applied(self, assets_config: AssetsConfig) -> None:
        plugin = AssetsPlugin(
            config=assets_config,
            static_files_config=StaticFilesConfig(cache_control=CacheControlHeader(max_age=3600)),
        )

        with create_test_client(plugins=[plugin]) as client:
            response = client.get("/build/app.js")
            assert response.status_code == 200
            assert "max-age=3600" in response.headers["cache-control"]
