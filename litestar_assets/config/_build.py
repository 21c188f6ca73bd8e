"""Build configuration snapshot."""

from dataclasses import dataclass
from pathlib import PurePath

__all__ = ("BuildConfig",)


@dataclass(frozen=True)
class BuildConfig:
    """Immutable view of the values the path calculations read.

    Attributes:
        output_path: Absolute directory the bundler writes to.
        public_path: URL path or absolute URL the built assets are served from.
        manifest_key_prefix: Explicit prefix for manifest keys. Takes precedence over
            anything derived from ``public_path``.
    """

    output_path: str
    public_path: str
    manifest_key_prefix: "str | None" = None

    def __post_init__(self) -> None:
        if isinstance(self.output_path, PurePath):
            object.__setattr__(self, "output_path", str(self.output_path))
        if not self.output_path:
            msg = "output_path must not be empty"
            raise ValueError(msg)
