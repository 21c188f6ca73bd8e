"""Static files configuration dataclass."""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Sequence

    from litestar.datastructures import CacheControlHeader
    from litestar.types import (
        ExceptionHandlersMap,
        Guard,  # pyright: ignore[reportUnknownVariableType]
        Middleware,
    )


@dataclass
class StaticFilesConfig:
    """Extra options for the router serving built assets.

    Values that are set are passed through to Litestar's static files router and
    override the plugin's defaults.
    """

    cache_control: "CacheControlHeader | None" = None
    exception_handlers: "ExceptionHandlersMap | None" = None
    guards: "list[Guard] | None" = None  # pyright: ignore[reportUnknownVariableType]
    middleware: "Sequence[Middleware] | None" = None
    opt: "dict[str, Any] | None" = None
    tags: "Sequence[str] | None" = None

    def to_router_kwargs(self) -> "dict[str, Any]":
        """Collect the options that were set.

        Returns:
            Keyword arguments for ``create_static_files_router``.
        """
        return {key: value for key, value in self.__dict__.items() if value is not None}
