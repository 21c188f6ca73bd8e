"""Reconcile the build output directory with the public path.

Two values are derived from a :class:`~litestar_assets.config.BuildConfig`:

- the *content base*, the directory a development server exposes as its
  document root (``output_path`` minus the trailing segments named by the
  public path), and
- the *manifest key prefix*, the relative prefix applied to keys written into
  ``manifest.json``.

Public paths and manifest key prefixes are always ``/``-delimited. The output
path is split with its own separator convention, so ``C:\\app\\public\\build``
is handled the same way on every host.
"""

import logging
import re
from typing import TYPE_CHECKING
from urllib.parse import urlsplit

from litestar_assets.exceptions import AmbiguousPrefixError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from litestar_assets.config import BuildConfig

__all__ = (
    "generate_manifest_key_prefix",
    "get_content_base",
    "is_external_url",
    "segments_end_with",
    "split_output_path",
    "split_url_path",
)

logger = logging.getLogger("litestar_assets")

_WINDOWS_DRIVE = re.compile(r"^(?P<anchor>[A-Za-z]:)(?=[\\/]|$)")
_WINDOWS_UNC = re.compile(r"^(?P<anchor>\\\\[^\\/]+\\[^\\/]+)")
_WINDOWS_SEPARATORS = re.compile(r"[\\/]+")
_QUERY_OR_FRAGMENT = re.compile(r"[?#]")


def is_external_url(value: str) -> bool:
    """Check whether a public path points at another host.

    Args:
        value: The configured public path.

    Returns:
        ``True`` for ``https://cdn.example.com/...`` or ``//cdn.example.com/...``.
    """
    return bool(urlsplit(value).netloc)


def split_url_path(value: str) -> "tuple[str, ...]":
    """Split a ``/``-delimited path into its non-empty segments.

    Returns:
        The segments, e.g. ``("build",)`` for ``"/build/"``.
    """
    return tuple(segment for segment in value.split("/") if segment)


def split_output_path(value: str) -> "tuple[str, tuple[str, ...], str]":
    """Split a filesystem path using the separator convention it is written in.

    A leading drive letter (``C:``) or UNC share (``\\\\server\\share``) marks a
    Windows path; anything else is treated as a POSIX path.

    Args:
        value: An absolute filesystem path.

    Returns:
        A ``(anchor, segments, separator)`` tuple. ``anchor`` is the drive or share
        (the leading run of ``/`` for POSIX paths) and ``separator`` is the one used when rejoining.
    """
    match = _WINDOWS_DRIVE.match(value) or _WINDOWS_UNC.match(value)
    if match is None:
        anchor = value[: len(value) - len(value.lstrip("/"))]
        return anchor, split_url_path(value), "/"
    anchor = match.group("anchor")
    rest = value[match.end() :]
    separator = "/" if "/" in rest and "\\" not in rest else "\\"
    segments = tuple(segment for segment in _WINDOWS_SEPARATORS.split(rest) if segment)
    return anchor, segments, separator


def segments_end_with(segments: "Sequence[str]", suffix: "Sequence[str]") -> bool:
    """Check whether ``suffix`` is exactly the trailing run of ``segments``.

    Comparison is case-sensitive and ``.``/``..`` are not collapsed. An empty
    suffix always matches.

    Returns:
        ``True`` when the last ``len(suffix)`` segments equal ``suffix``.
    """
    if not suffix:
        return True
    if len(suffix) > len(segments):
        return False
    return tuple(segments[-len(suffix) :]) == tuple(suffix)


def _public_path_segments(public_path: str) -> "tuple[str, ...]":
    """Segments of the path portion of a public path, without query or fragment."""
    if is_external_url(public_path):
        return split_url_path(urlsplit(public_path).path)
    return split_url_path(_QUERY_OR_FRAGMENT.split(public_path, maxsplit=1)[0])


def _strip_trailing_segments(value: str, count: int, separators: str) -> str:
    """Remove the last ``count`` segments and their separators from ``value`` as written."""
    separator_class = re.escape(separators)
    pattern = rf"(?:[{separator_class}]+[^{separator_class}]+){{{count}}}[{separator_class}]*$"
    return re.sub(pattern, "", value, count=1)


def get_content_base(config: "BuildConfig") -> str:
    """Calculate the document root a development server should serve.

    The selector is ``manifest_key_prefix`` when set, otherwise the path portion
    of ``public_path``. When its segments are the trailing segments of
    ``output_path`` they are removed; in every other case ``output_path`` is
    returned unchanged.

    Args:
        config: The build configuration snapshot.

    Returns:
        An absolute filesystem path in the output path's separator convention.
    """
    if config.manifest_key_prefix is not None:
        selector = split_url_path(config.manifest_key_prefix)
    else:
        selector = _public_path_segments(config.public_path)
    if not selector:
        return config.output_path

    anchor, segments, separator = split_output_path(config.output_path)
    if not segments_end_with(segments, selector):
        logger.debug(
            "Public path %r is not a suffix of %r, serving the output path as content base",
            "/".join(selector),
            config.output_path,
        )
        return config.output_path

    separators = "/" if anchor[:1] in {"", "/"} else "\\/"
    content_base = _strip_trailing_segments(config.output_path, len(selector), separators)
    if len(content_base) <= len(anchor):
        return anchor if anchor.endswith(("/", "\\")) else anchor + separator
    return content_base


def generate_manifest_key_prefix(config: "BuildConfig") -> str:
    """Calculate the prefix for keys written to ``manifest.json``.

    An explicit ``manifest_key_prefix`` always wins. Otherwise the prefix is
    derived from ``public_path``, which only works when the public path is a
    local path whose segments end ``output_path``.

    Args:
        config: The build configuration snapshot.

    Raises:
        AmbiguousPrefixError: If ``public_path`` is an external URL, or it does not
            line up with ``output_path``.

    Returns:
        A relative prefix such as ``"build/"``, or ``""`` for a root selector.
    """
    if config.manifest_key_prefix is not None:
        return _join_prefix(split_url_path(config.manifest_key_prefix))

    if is_external_url(config.public_path):
        raise AmbiguousPrefixError(config.output_path, config.public_path)

    selector = _public_path_segments(config.public_path)
    _, segments, _ = split_output_path(config.output_path)
    if not segments_end_with(segments, selector):
        raise AmbiguousPrefixError(config.output_path, config.public_path)
    return _join_prefix(selector)


def _join_prefix(segments: "Sequence[str]") -> str:
    """Join segments into a relative prefix with one trailing slash."""
    if not segments:
        return ""
    return "/".join(segments) + "/"
