"""Shared test fixtures."""

import json
from collections.abc import Callable
from typing import Any
from unittest.mock import MagicMock

import pytest
import requests

from open_rando.config import Settings

ResponseFactory = Callable[..., requests.Response]


@pytest.fixture
def settings() -> Settings:
    """Create test settings pointing at fake provider hosts."""
    return Settings(
        osrm_base_url="http://osrm.test",
        osrm_profile="walking",
        match_profile="foot",
        graphhopper_base_url="http://graphhopper.test/api/1",
        graphhopper_profile="foot",
        graphhopper_api_key=None,
        elevation_base_url="http://elevation.test",
        nominatim_base_url="http://nominatim.test",
        user_agent="OpenRando-tests/0.1",
        accept_language="fr",
        request_timeout_seconds=5.0,
        max_elevation_samples=150,
    )


@pytest.fixture
def session() -> MagicMock:
    """A mocked requests session; tests set ``get`` return values."""
    return MagicMock(spec=requests.Session)


@pytest.fixture
def make_response() -> ResponseFactory:
    """Build real ``requests.Response`` objects with a JSON or raw body."""

    def factory(
        status_code: int = 200, payload: Any = None, *, body: bytes | None = None
    ) -> requests.Response:
        response = requests.Response()
        response.status_code = status_code
        response.encoding = "utf-8"
        response._content = body if body is not None else json.dumps(payload).encode()
        return response

    return factory
