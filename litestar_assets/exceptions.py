"""Litestar-Assets exception classes."""

__all__ = [
    "AmbiguousPrefixError",
    "LitestarAssetsError",
]


class LitestarAssetsError(Exception):
    """Base exception for Litestar-Assets related errors."""


class AmbiguousPrefixError(LitestarAssetsError):
    """Raised when the manifest key prefix cannot be derived from the public path."""

    def __init__(self, output_path: str, public_path: str) -> None:
        """Initialize the exception.

        Args:
            output_path: The configured build output directory.
            public_path: The configured public path that could not be reconciled.
        """
        super().__init__(
            "Cannot determine how to prefix the keys in manifest.json. "
            "Set manifest_key_prefix on AssetsConfig (or ASSETS_MANIFEST_KEY_PREFIX) "
            "to choose what path (e.g. build/) to use"
        )
        self.output_path = output_path
        self.public_path = public_path
