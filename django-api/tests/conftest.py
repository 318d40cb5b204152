"""Pytest configuration and shared fixtures."""

import pytest
from payloads import FakeTransport
from rest_framework.test import APIClient


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def fake_transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def cms(monkeypatch, settings, fake_transport) -> FakeTransport:
    """Route every view's CMS client to the fake transport."""
    settings.STRAPI_URL = "https://cms.example.com"
    monkeypatch.setattr("content.handlers.views.build_client", lambda: fake_transport)
    return fake_transport
