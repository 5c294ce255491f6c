"""Pytest configuration and fixtures for geocalc tests."""

import pytest


@pytest.fixture
def berlin():
    return [52.5075419, 13.4251364]


@pytest.fixture
def paris():
    return [48.8588589, 2.3475569]


@pytest.fixture
def london():
    return [51.5286416, -0.1015987]


@pytest.fixture
def minsk():
    return {"lat": 53.8838884, "lon": 27.5949741}


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep GEOCALC_* variables from the outer environment out of tests."""
    import os

    for key in list(os.environ):
        if key.startswith("GEOCALC_"):
            monkeypatch.delenv(key)
