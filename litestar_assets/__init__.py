"""Litestar-Assets: serve and index bundler output from Litestar.

Given where a bundler writes its output and the public path the files are
served from, this package works out the development document root
("content base") and the prefix for keys in ``manifest.json``.

Basic usage:
    from litestar import Litestar
    from litestar_assets import AssetsPlugin, AssetsConfig

    app = Litestar(
        plugins=[AssetsPlugin(config=AssetsConfig(dev_mode=True))],
    )

Using the path calculations directly:
    from litestar_assets import BuildConfig, get_content_base, generate_manifest_key_prefix

    config = BuildConfig(output_path="/srv/app/public/build", public_path="/build/")
    get_content_base(config)  # "/srv/app/public"
    generate_manifest_key_prefix(config)  # "build/"
"""

from litestar_assets.config import AssetsConfig, BuildConfig
from litestar_assets.exceptions import AmbiguousPrefixError, LitestarAssetsError
from litestar_assets.paths import generate_manifest_key_prefix, get_content_base
from litestar_assets.plugin import AssetsPlugin, StaticFilesConfig

__all__ = (
    "AmbiguousPrefixError",
    "AssetsConfig",
    "AssetsPlugin",
    "BuildConfig",
    "LitestarAssetsError",
    "StaticFilesConfig",
    "generate_manifest_key_prefix",
    "get_content_base",
)
