"""Litestar-Assets Configuration.

The configuration is split into two objects:

- AssetsConfig: Mutable application-level settings, including environment defaults
- BuildConfig: Immutable snapshot of the values the path calculations read

Example usage::

    # Defaults: public/build served from /build/
    AssetsPlugin(config=AssetsConfig())

    # Assets deployed to a CDN, keys in manifest.json still prefixed with build/
    AssetsPlugin(
        config=AssetsConfig(
            output_path="public/build",
            public_path="https://cdn.example.com/build/",
            manifest_key_prefix="build/",
        )
    )
"""

import os
from dataclasses import dataclass, field
from pathlib import Path, PureWindowsPath

from litestar_assets.config._build import BuildConfig  # pyright: ignore[reportPrivateUsage]
from litestar_assets.config._constants import TRUE_VALUES  # pyright: ignore[reportPrivateUsage]
from litestar_assets.paths import generate_manifest_key_prefix, get_content_base

__all__ = (
    "TRUE_VALUES",
    "AssetsConfig",
    "BuildConfig",
)


def _env_manifest_key_prefix() -> "str | None":
    return os.getenv("ASSETS_MANIFEST_KEY_PREFIX") or None


def _to_root_path(root_dir: Path, path: "str | Path") -> str:
    """Resolve a path relative to the configured root directory.

    Windows paths with a drive or share are absolute on every host and are kept
    as written.

    Args:
        root_dir: Application root directory.
        path: Path to resolve.

    Returns:
        Absolute path rooted at ``root_dir`` when ``path`` is relative, otherwise ``path`` unchanged.
    """
    value = str(path)
    if PureWindowsPath(value).is_absolute() or Path(value).is_absolute():
        return value
    return str(root_dir / value)


@dataclass
class AssetsConfig:
    """Root asset build configuration.

    The path fields may be changed between queries (``set_public_path`` and
    ``set_manifest_key_prefix``); every derived value is computed from a fresh
    :class:`BuildConfig` snapshot.

    Attributes:
        root: The root directory of the project. Defaults to current working directory.
        output_path: Directory the bundler writes built assets to. Relative paths
            are resolved against ``root``.
        public_path: URL path or absolute URL built assets are served from.
        manifest_key_prefix: Explicit prefix for manifest keys. Required when the
            public path is an external URL or does not end ``output_path``.
        manifest_name: Name of the manifest file inside ``output_path``.
        dev_mode: Serve the content base from the application.
        content_url: URL path the content base is mounted at in dev mode.
        set_static_folders: Automatically configure static file serving.
    """

    root: "str | Path" = field(default_factory=Path.cwd)
    output_path: "str | Path" = field(default_factory=lambda: os.getenv("ASSETS_OUTPUT_PATH", "public/build"))
    public_path: str = field(default_factory=lambda: os.getenv("ASSETS_PUBLIC_PATH", "/build/"))
    manifest_key_prefix: "str | None" = field(default_factory=_env_manifest_key_prefix)
    manifest_name: str = "manifest.json"
    dev_mode: bool = field(default_factory=lambda: os.getenv("ASSETS_DEV_MODE", "False") in TRUE_VALUES)
    content_url: str = field(default_factory=lambda: os.getenv("ASSETS_CONTENT_URL", "/"))
    set_static_folders: bool = True

    def __post_init__(self) -> None:
        """Normalize paths and validate the output directory.

        Raises:
            ValueError: If ``output_path`` is empty.
        """
        if not str(self.output_path):
            msg = "output_path must not be empty"
            raise ValueError(msg)
        root = Path(self.root)
        self.root = root if root.is_absolute() else Path.cwd() / root
        if not self.content_url.startswith("/"):
            self.content_url = f"/{self.content_url}"

    @property
    def output_dir(self) -> str:
        """Absolute output directory as a string in its native separator convention.

        Returns:
            The resolved output path.
        """
        return _to_root_path(Path(self.root), self.output_path)

    @property
    def manifest_path(self) -> Path:
        """Location of the manifest file.

        Returns:
            ``output_dir / manifest_name``.
        """
        return Path(self.output_dir) / self.manifest_name

    def set_public_path(self, public_path: str) -> None:
        self.public_path = public_path

    def set_manifest_key_prefix(self, manifest_key_prefix: "str | None") -> None:
        self.manifest_key_prefix = manifest_key_prefix

    def build_config(self) -> BuildConfig:
        """Take a snapshot of the current path settings.

        Returns:
            A frozen :class:`BuildConfig`.
        """
        return BuildConfig(
            output_path=self.output_dir,
            public_path=self.public_path,
            manifest_key_prefix=self.manifest_key_prefix,
        )

    @property
    def content_base(self) -> str:
        """Directory a development server should use as its document root.

        Returns:
            The content base for the current settings.
        """
        return get_content_base(self.build_config())

    def resolve_manifest_key_prefix(self) -> str:
        """Prefix for keys in the manifest for the current settings.

        Raises:
            AmbiguousPrefixError: If no prefix is set and none can be derived.

        Returns:
            The manifest key prefix.
        """
        return generate_manifest_key_prefix(self.build_config())
