"""Pytest configuration and fixtures."""

import pytest
import tempfile
import json
from pathlib import Path


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def person_record():
    """Single input record for mapping tests."""
    return {
        "id": "123",
        "firstName": "John",
        "lastName": "Doe",
        "person": {"nationality": "GB"},
        "contacts": [
            {"email": "john@example.com", "primary": True},
            {"email": "jd@work.example", "primary": False}
        ]
    }


@pytest.fixture
def person_batch():
    """List of input records for batch mapping tests."""
    return [
        {"id": "1", "firstName": "A", "lastName": "X"},
        {"id": "2", "firstName": "B", "lastName": "Y"},
    ]


@pytest.fixture
def profile_mapping():
    """Mapping spec from flat person records to nested profiles."""
    return {
        "id": "id",
        "personalInformation.forename": "firstName",
        "personalInformation.surname": "lastName"
    }


@pytest.fixture
def write_json(temp_dir):
    """Write a JSON document into the temporary directory and return its path."""
    def _write(name, data):
        path = temp_dir / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path
    return _write
