"""Console helpers and static route handlers."""

__all__ = (
    "console",
    "log_fail",
    "log_info",
    "log_success",
    "log_warn",
    "static_not_found_handler",
)

from typing import TYPE_CHECKING, Any

from litestar.cli._utils import console  # pyright: ignore[reportPrivateImportUsage]

if TYPE_CHECKING:
    from litestar import Response
    from litestar.connection import Request
    from litestar.exceptions import NotFoundException

_TICK = "[bold green]✓[/]"
_INFO = "[cyan]•[/]"
_WARN = "[yellow]![/]"
_FAIL = "[red]x[/]"


def log_success(message: str) -> None:
    """Print a success message with consistent styling."""

    console.print(f"{_TICK} {message}")


def log_info(message: str) -> None:
    """Print an informational message with consistent styling."""

    console.print(f"{_INFO} {message}")


def log_warn(message: str) -> None:
    """Print a warning message with consistent styling."""

    console.print(f"{_WARN} {message}")


def log_fail(message: str) -> None:
    """Print an error message with consistent styling."""

    console.print(f"{_FAIL} {message}")


def static_not_found_handler(
    _request: "Request[Any, Any, Any]", _exc: "NotFoundException"
) -> "Response[bytes]":  # pragma: no cover - trivial
    """Return an empty 404 response for static files routing misses.

    Returns:
        An empty 404 response.
    """
    from litestar import Response

    return Response(status_code=404, content=b"")
