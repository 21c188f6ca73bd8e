"""Assets Plugin for Litestar.

This module provides the AssetsPlugin class for serving bundler output from a
Litestar application. The plugin handles:

- Serving the content base (the development document root) in dev mode
- Serving the output directory under the public path in production
- Registering the ``assets`` CLI group

Example::

    from litestar import Litestar
    from litestar_assets import AssetsConfig, AssetsPlugin

    app = Litestar(
        plugins=[AssetsPlugin(config=AssetsConfig(dev_mode=True))],
    )
"""

import logging
from typing import TYPE_CHECKING, Any

from litestar.exceptions import NotFoundException
from litestar.plugins import CLIPlugin, InitPluginProtocol
from litestar.static_files import create_static_files_router  # pyright: ignore[reportUnknownVariableType]

from litestar_assets.paths import is_external_url, split_url_path
from litestar_assets.plugin._static import StaticFilesConfig
from litestar_assets.plugin._utils import static_not_found_handler

if TYPE_CHECKING:
    from click import Group
    from litestar.config.app import AppConfig

    from litestar_assets.config import AssetsConfig

__all__ = ("AssetsPlugin", "StaticFilesConfig")

logger = logging.getLogger("litestar_assets")


class AssetsPlugin(InitPluginProtocol, CLIPlugin):
    """Asset serving plugin for Litestar.

    Example::

        from litestar import Litestar
        from litestar_assets import AssetsConfig, AssetsPlugin

        app = Litestar(
            plugins=[
                AssetsPlugin(
                    config=AssetsConfig(
                        output_path="public/build",
                        public_path="/build/",
                        dev_mode=True,
                    )
                )
            ],
        )
    """

    __slots__ = ("_config", "_static_files_config")

    def __init__(
        self,
        config: "AssetsConfig | None" = None,
        static_files_config: "StaticFilesConfig | None" = None,
    ) -> None:
        """Initialize the Assets plugin.

        Args:
            config: Asset configuration. Defaults to AssetsConfig() if not provided.
            static_files_config: Optional configuration for static file serving.
        """
        from litestar_assets.config import AssetsConfig

        if config is None:
            config = AssetsConfig()
        self._config = config
        self._static_files_config: dict[str, Any] = (
            static_files_config.to_router_kwargs() if static_files_config else {}
        )

    @property
    def config(self) -> "AssetsConfig":
        """Get the asset configuration.

        Returns:
            The AssetsConfig instance.
        """
        return self._config

    @property
    def content_base(self) -> str:
        """Directory a development server should use as its document root.

        Returns:
            The content base for the current configuration.
        """
        return self._config.content_base

    @property
    def manifest_key_prefix(self) -> str:
        """Prefix for keys in the manifest.

        Raises:
            AmbiguousPrefixError: If no prefix is configured and none can be derived.

        Returns:
            The manifest key prefix.
        """
        return self._config.resolve_manifest_key_prefix()

    def on_cli_init(self, cli: "Group") -> None:
        """Register CLI commands.

        Args:
            cli: The Click command group to add commands to.
        """
        from litestar_assets.cli import assets_group

        cli.add_command(assets_group)

    def _resolve_static_mount(self) -> "tuple[str, str] | None":
        """Pick the directory and URL path to serve.

        Returns:
            ``(directory, path)`` or ``None`` when nothing should be mounted.
        """
        if self._config.dev_mode:
            return self._config.content_base, self._config.content_url

        public_path = self._config.public_path
        if is_external_url(public_path):
            logger.debug("Public path %r is external, not serving %s", public_path, self._config.output_dir)
            return None
        return self._config.output_dir, "/" + "/".join(split_url_path(public_path))

    def _configure_static_files(self, app_config: "AppConfig") -> None:
        """Configure static file serving for built assets.

        Args:
            app_config: The Litestar application configuration.
        """
        mount = self._resolve_static_mount()
        if mount is None:
            return
        directory, path = mount

        base_config: dict[str, Any] = {
            "directories": [directory],
            "path": path,
            "name": "assets",
            "html_mode": False,
            "include_in_schema": False,
            "exception_handlers": {NotFoundException: static_not_found_handler},
        }
        static_files_config: dict[str, Any] = {**base_config, **self._static_files_config}
        app_config.route_handlers.append(create_static_files_router(**static_files_config))
        logger.info("Serving %s at %s", directory, path)

    def on_app_init(self, app_config: "AppConfig") -> "AppConfig":
        """Configure the Litestar application to serve built assets.

        Args:
            app_config: The Litestar application configuration.

        Returns:
            The modified application configuration.
        """
        if self._config.set_static_folders:
            self._configure_static_files(app_config)
        return app_config
