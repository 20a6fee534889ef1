"""
Pytest Fixtures for media resolution tests
"""
import pytest

from storefront_media.core.config import MediaConfig
from storefront_media.media.resolver import MediaResolver

ORIGIN = "https://shop.example.com"


@pytest.fixture
def config() -> MediaConfig:
    """Config with a CDN cloud configured."""
    return MediaConfig(cloud="demo", origin=ORIGIN, protocol="https:")


@pytest.fixture
def bare_config() -> MediaConfig:
    """Config without a CDN cloud: descriptors cannot be resolved."""
    return MediaConfig(cloud=None, origin=ORIGIN, protocol="https:")


@pytest.fixture
def resolver(config: MediaConfig) -> MediaResolver:
    return MediaResolver(config)
