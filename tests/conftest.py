from collections.abc import Generator
from pathlib import Path

import pytest

from litestar_assets.config import AssetsConfig

# Environment variables that may affect test behavior - clear before each test
_ASSETS_ENV_VARS = [
    "ASSETS_OUTPUT_PATH",
    "ASSETS_PUBLIC_PATH",
    "ASSETS_MANIFEST_KEY_PREFIX",
    "ASSETS_DEV_MODE",
    "ASSETS_CONTENT_URL",
]


@pytest.fixture(autouse=True)
def clean_assets_env(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Clear asset-related environment variables before each test for isolation."""
    for var in _ASSETS_ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    yield


@pytest.fixture
def public_dir(tmp_path: Path) -> Path:
    """A ``public/`` document root with a built ``build/app.js`` inside it."""
    build_dir = tmp_path / "public" / "build"
    build_dir.mkdir(parents=True)
    (build_dir / "app.js").write_text("console.log('built')")
    (tmp_path / "public" / "robots.txt").write_text("User-agent: *")
    return tmp_path / "public"


@pytest.fixture
def assets_config(tmp_path: Path, public_dir: Path) -> Generator[AssetsConfig, None, None]:
    yield AssetsConfig(root=tmp_path, output_path="public/build", public_path="/build/")
