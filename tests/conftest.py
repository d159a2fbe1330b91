"""Pytest configuration and fixtures."""

import pytest
from formpart.part import MultipartPart


@pytest.fixture
def text_part():
    """Create a plain text form field part."""
    return MultipartPart(b"hello", "field1", None, "text/plain")


@pytest.fixture
def file_part():
    """Create a file upload part."""
    return MultipartPart(b"hello", "field1", "a.txt", "text/plain")
