"""Shared fixtures."""

import pytest

from core.errors import ProviderError


@pytest.fixture
def provider_down():
    return ProviderError("OpenAI request failed: Connection error.")
