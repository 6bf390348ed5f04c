"""Test configuration and fixtures for the entire test suite."""

import logging
import sys
from pathlib import Path

import pytest
from dotenv import load_dotenv


# Add the project root to the Python path
@pytest.fixture(scope="session", autouse=True)
def setup_path() -> None:
    """Add the project root to the Python path."""
    project_root = Path(__file__).parent.parent
    sys.path.insert(0, str(project_root))

    # Load environment variables from .env file
    load_dotenv()


@pytest.fixture(autouse=True)
def stream_debug_logging(caplog: pytest.LogCaptureFixture) -> None:
    """Capture dispatcher debug logs so dropped frames show up on failures."""
    caplog.set_level(logging.DEBUG, logger="src.binance_stream")
