"""Fixtures for integration tests."""

import os
from collections.abc import Iterator
from unittest.mock import patch

import pytest


@pytest.fixture(autouse=True)
def clean_env() -> Iterator[None]:
    """Run without .env files or SUITEGEN_* variables from the host."""
    env = {k: v for k, v in os.environ.items() if not k.startswith("SUITEGEN_")}
    with patch("suitegen.utils.config.load_dotenv"):
        with patch.dict(os.environ, env, clear=True):
            yield
