"""Shared test fixtures for IP Map Navigator tests."""

import json

import httpx
import pytest
from fastapi.testclient import TestClient

from api import create_app
from common.auth import OpaqueSessionTokenCodec, PasswordHasher
from ipmap.client.auth_client import AuthClient
from ipmap.client.geo_client import GeoLookupClient
from ipmap.client.session import ClientSession
from ipmap.client.storage import MemoryStorage
from ipmap.config import Settings
from ipmap.services.auth import AuthService, CredentialStore


GEO_PAYLOADS = {
    "/geo": {
        "ip": "203.0.113.7",
        "city": "Manila",
        "region": "Metro Manila",
        "country": "PH",
        "loc": "14.6042,120.9822",
    },
    "/8.8.8.8/geo": {
        "ip": "8.8.8.8",
        "city": "Mountain View",
        "region": "California",
        "country": "US",
        "loc": "37.4056,-122.0775",
    },
    "/1.1.1.1/geo": {
        "ip": "1.1.1.1",
        "city": "Brisbane",
        "region": "Queensland",
        "country": "AU",
        "loc": "-27.4820,153.0136",
    },
}


def geo_provider_handler(request: httpx.Request) -> httpx.Response:
    """Fake ipinfo.io: known paths answer, anything else is a 404 like the real provider."""
    payload = GEO_PAYLOADS.get(request.url.path)
    if payload is None:
        return httpx.Response(404, json={"status": 404, "error": {"title": "Wrong ip"}})
    return httpx.Response(200, json=payload)


@pytest.fixture
def hasher():
    # Lowest bcrypt cost keeps the suite fast
    return PasswordHasher(rounds=4)


@pytest.fixture
def credential_store(hasher):
    return CredentialStore.seeded(hasher)


@pytest.fixture
def auth_service(credential_store, hasher):
    return AuthService(
        store=credential_store,
        hasher=hasher,
        token_codec=OpaqueSessionTokenCodec(),
        clock=lambda: 1700000000000,
    )


@pytest.fixture
def settings():
    return Settings(BCRYPT_ROUNDS=4, ENVIRONMENT="testing", LOG_LEVEL="WARNING")


@pytest.fixture
def api_client(settings):
    with TestClient(create_app(settings)) as client:
        yield client


@pytest.fixture
def signed_api_client():
    signed_settings = Settings(
        BCRYPT_ROUNDS=4,
        ENVIRONMENT="testing",
        LOG_LEVEL="WARNING",
        TOKEN_SIGNING_SECRET="test-signing-secret",
    )
    with TestClient(create_app(signed_settings)) as client:
        yield client


@pytest.fixture
def storage():
    return MemoryStorage()


@pytest.fixture
def geo_transport():
    return httpx.MockTransport(geo_provider_handler)


@pytest.fixture
def geo_client(geo_transport):
    return GeoLookupClient("https://geo.test", transport=geo_transport)


def login_handler(request: httpx.Request) -> httpx.Response:
    """Fake /api/login accepting only the demo account."""
    body = json.loads(request.content)
    if body == {"email": "test@email.com", "password": "password123"}:
        return httpx.Response(200, json={
            "token": "dGVzdEBlbWFpbC5jb206MTcwMDAwMDAwMDAwMA==",
            "user": {"id": 1, "email": "test@email.com", "name": "Juan Cruz"},
        })
    return httpx.Response(401, json={"message": "Invalid credentials"})


@pytest.fixture
def auth_client():
    return AuthClient("https://api.test", transport=httpx.MockTransport(login_handler))


@pytest.fixture
def client_session(storage, auth_client, geo_client):
    session = ClientSession(
        storage=storage,
        auth_client=auth_client,
        geo_client=geo_client,
        notice_seconds=0.05,
    )
    return session.hydrate()
