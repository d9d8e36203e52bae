"""
Pytest configuration and fixtures for product-feed tests

This module provides shared fixtures for unit, integration, and E2E tests.
"""
import pytest

from product_feed.core.deserializers import ProductRecordDeserializer
from product_feed.core.models import PRODUCT_MODULE

from feed_lines import GENERIC_SODA_LINE, KIMCHI_RICE_LINE, build_line


# =======================
# PYTEST CONFIGURATION
# =======================

def pytest_configure(config):
    """Configure pytest with custom markers"""
    config.addinivalue_line(
        "markers", "unit: Unit tests of a single module"
    )
    config.addinivalue_line(
        "markers", "integration: Tests running the batch pipeline over real files"
    )
    config.addinivalue_line(
        "markers", "e2e: End-to-end tests through the command-line interface"
    )


# =======================
# PRODUCT FIXTURES
# =======================

@pytest.fixture
def product_module():
    """The shared product record module"""
    return PRODUCT_MODULE


@pytest.fixture
def deserializer():
    """Product line deserializer"""
    return ProductRecordDeserializer()


@pytest.fixture
def sample_lines():
    """Two well-formed lines taken from a real feed"""
    return [KIMCHI_RICE_LINE, GENERIC_SODA_LINE]


@pytest.fixture
def product_file(tmp_path):
    """
    Feed file mixing good and malformed lines

    Lines 1, 3 and 5 parse; line 2 has a bad product id, line 4 is too short.
    """
    lines = [
        KIMCHI_RICE_LINE,
        build_line(product_id="1x2d34cc"),
        GENERIC_SODA_LINE,
        "too short",
        build_line(product_id=42, description="Bananas", regular_singular=69, flags="NNYNNNNNN", size="lb"),
    ]
    path = tmp_path / "products.txt"
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path
