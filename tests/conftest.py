"""
Pytest configuration and shared fixtures for the SAM hello world application.

This module provides common test fixtures and configuration used across
unit and end-to-end tests.
"""

import os
import pytest


# Test environment configuration
@pytest.fixture(scope="session", autouse=True)
def test_environment():
    """Set up test environment variables."""
    os.environ.update({
        "AWS_DEFAULT_REGION": "us-east-1",
        "ENVIRONMENT": "test",
        "POWERTOOLS_SERVICE_NAME": "test-hello-world",
        "POWERTOOLS_METRICS_NAMESPACE": "TestSamHelloWorld",
        "LOG_LEVEL": "DEBUG",
        "POWERTOOLS_TRACE_DISABLED": "true",  # Disable X-Ray in tests
        # Re-read environment models on every call so monkeypatched values apply
        "LAMBDA_ENV_MODELER_DISABLE_CACHE": "true",
    })


# Integration test fixtures
@pytest.fixture
def integration_client():
    """HTTP client for a running API (``sam local start-api`` or a deployed stage)."""
    import httpx

    base_url = os.environ.get("API_BASE_URL")
    if not base_url:
        pytest.skip("API_BASE_URL is not set")

    with httpx.Client(base_url=base_url, timeout=30.0) as client:
        yield client


# Pytest configuration
def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "e2e: End-to-end tests")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "e2e" in str(item.fspath):
            item.add_marker(pytest.mark.e2e)
