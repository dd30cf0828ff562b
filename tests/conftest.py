"""Pytest configuration and fixtures."""

from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest
from dotenv import load_dotenv

from execbridge.lib.config import get_settings

# Load .env file before running tests
env_path = Path(__file__).parent.parent / ".env"
if env_path.exists():
    load_dotenv(env_path)


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Give every test freshly loaded settings."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def mock_process():
    """Factory for a finished asyncio subprocess mock."""

    def _make(return_code: int = 0, stdout: bytes = b"", stderr: bytes = b"") -> MagicMock:
        process = MagicMock()
        process.returncode = return_code
        process.communicate = AsyncMock(return_value=(stdout, stderr))
        process.wait = AsyncMock(return_value=return_code)
        process.kill = MagicMock()
        return process

    return _make


@pytest.fixture
def project_dir(tmp_path):
    """Create a Node project directory with a Gruntfile and package.json."""
    (tmp_path / "package.json").write_text('{"name": "webapp", "version": "1.0.0"}')
    (tmp_path / "Gruntfile.js").write_text("module.exports = function (grunt) {};\n")
    return tmp_path
