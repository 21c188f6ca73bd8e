from typing import TYPE_CHECKING

from click import group, option
from litestar.cli._utils import LitestarGroup  # pyright: ignore[reportPrivateImportUsage]

if TYPE_CHECKING:
    from litestar import Litestar


@group(cls=LitestarGroup, name="assets")
def assets_group() -> None:
    """Manage built assets."""


@assets_group.command(
    name="paths",
    help="Show the content base and manifest key prefix for the current configuration.",
)
@option("--json", "as_json", type=bool, help="Print the values as a JSON object.", default=False, is_flag=True)
def assets_paths(app: "Litestar", as_json: "bool") -> None:
    """Show the derived asset paths."""
    from litestar.cli._utils import LitestarCLIException, console  # pyright: ignore[reportPrivateImportUsage]
    from litestar.serialization import encode_json

    from litestar_assets.exceptions import AmbiguousPrefixError
    from litestar_assets.plugin import AssetsPlugin
    from litestar_assets.plugin._utils import log_fail, log_info, log_success, log_warn

    plugin = app.plugins.get(AssetsPlugin)
    config = plugin.config

    error: "AmbiguousPrefixError | None" = None
    manifest_key_prefix: "str | None" = None
    try:
        manifest_key_prefix = config.resolve_manifest_key_prefix()
    except AmbiguousPrefixError as e:
        error = e

    if as_json:
        payload = {
            "output_path": config.output_dir,
            "public_path": config.public_path,
            "content_base": config.content_base,
            "manifest_key_prefix": manifest_key_prefix,
            "manifest_path": str(config.manifest_path),
            "error": str(error) if error is not None else None,
        }
        console.print(encode_json(payload).decode(), markup=False, highlight=False, emoji=False, soft_wrap=True)
    else:
        console.rule("[yellow]Asset Paths[/]", align="left")
        log_info(f"Output Path: {config.output_dir}")
        log_info(f"Public Path: {config.public_path}")
        log_info(f"Content Base: {config.content_base}")
        if error is None:
            log_success(f"Manifest Key Prefix: {manifest_key_prefix!r}")
        else:
            log_fail(f"Manifest Key Prefix: {error!s}")
        if config.manifest_path.exists():
            log_success(f"Manifest found at {config.manifest_path}")
        else:
            log_warn(f"Manifest not found at {config.manifest_path}")

    if error is not None:
        raise LitestarCLIException(str(error)) from error
