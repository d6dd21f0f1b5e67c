"""
Shared pytest fixtures and configuration for the feed proxy test suite.

This module provides:
- Hypothesis configuration for property-based testing
- Metadata fetcher and snapshot storage doubles
- Ready-made stores and feed documents
"""

import pytest
from hypothesis import HealthCheck, settings

from feedproxy.domain.video_metadata import VideoMetadataStore
from tests.fixtures.doubles import InMemorySnapshotStorage, StubMetadataFetcher
from tests.fixtures.feeds import build_feed_xml

# Hypothesis configuration
settings.register_profile(
    "default",
    max_examples=100,
    deadline=None,
    suppress_health_check=[HealthCheck.too_slow, HealthCheck.function_scoped_fixture],
)
settings.register_profile(
    "ci",
    max_examples=200,
    deadline=None,
    suppress_health_check=[HealthCheck.too_slow, HealthCheck.function_scoped_fixture],
)
settings.register_profile(
    "dev",
    max_examples=10,
    deadline=None,
    suppress_health_check=[HealthCheck.too_slow, HealthCheck.function_scoped_fixture],
)
settings.load_profile("default")


# =============================================================================
# Collaborator Fixtures
# =============================================================================

@pytest.fixture
def fetcher() -> StubMetadataFetcher:
    """
    Provide a metadata fetcher with four canned videos.

    - ``short1``: 2 minute portrait video (Short)
    - ``short2``: 45 second square video (Short)
    - ``long1``: 3:20 portrait video (not a Short, too long)
    - ``wide1``: 2 minute landscape video (not a Short, landscape)
    """
    return StubMetadataFetcher({
        "short1": (120, 1080, 1920),
        "short2": (45, 720, 720),
        "long1": (200, 1080, 1920),
        "wide1": (125, 1920, 1080),
    })


@pytest.fixture
def storage() -> InMemorySnapshotStorage:
    return InMemorySnapshotStorage()


@pytest.fixture
def store(fetcher, storage) -> VideoMetadataStore:
    return VideoMetadataStore(fetcher, storage)


@pytest.fixture
def mixed_feed_xml() -> bytes:
    """Feed with entries A (short), B (not short), C (short)."""
    return build_feed_xml([
        {"video_id": "short1", "title": "A"},
        {"video_id": "long1", "title": "B"},
        {"video_id": "short2", "title": "C"},
    ])


# =============================================================================
# Pytest Configuration Hooks
# =============================================================================

def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests (fast, no external dependencies)"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests (whole application, no network)"
    )
    config.addinivalue_line(
        "markers", "property: Property-based tests using Hypothesis"
    )


def pytest_collection_modifyitems(config, items):
    """
    Automatically mark tests based on their location.

    - tests/unit/* -> @pytest.mark.unit
    - tests/integration/* -> @pytest.mark.integration
    - tests/property/* -> @pytest.mark.property
    """
    for item in items:
        test_path = str(item.fspath)

        if "/unit/" in test_path or "\\unit\\" in test_path:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in test_path or "\\integration\\" in test_path:
            item.add_marker(pytest.mark.integration)
        elif "/property/" in test_path or "\\property\\" in test_path:
            item.add_marker(pytest.mark.property)
