"""Shared fixtures for integration tests."""

import os

import pytest

# Skip all integration tests unless RUN_PARCL_NETWORK_TESTS=1 and a key is set
pytestmark = pytest.mark.skipif(
    os.environ.get("RUN_PARCL_NETWORK_TESTS") != "1" or not os.environ.get("PARCL_LABS_API_KEY"),
    reason="Requires network access and PARCL_LABS_API_KEY. Set RUN_PARCL_NETWORK_TESTS=1 to run",
)
