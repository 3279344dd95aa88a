"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
"""

import time
from typing import Optional

import jwt  # PyJWT
import pytest

from logistics_console.container import reset_container
from logistics_console.modules.auth.session import SessionManager
from logistics_console.modules.auth.token_store import TokenStore
from logistics_console.shared.config import get_settings
from logistics_console.shared.http import ApiClient
from logistics_console.shared.storage import MemoryStorage

from tests.fakes import BASE_URL, FakeBackend, envelope


# The console never verifies signatures; any secret works
TEST_JWT_SECRET = "test-secret-key-for-testing-only"

ADMIN_EMAIL = "admin@logistique.ma"
OPERATOR_EMAIL = "operateur@logistique.ma"


def create_test_token(
    email: str = ADMIN_EMAIL,
    role: Optional[str] = "ADMIN",
    expired: bool = False,
    expires_in: int = 3600,
) -> str:
    """
    Create a JWT like the backend's.

    Args:
        email: Subject of the token
        role: Role claim, omitted when None
        expired: If True, the token expired one second ago
        expires_in: Lifetime in seconds for non-expired tokens
    """
    now = int(time.time())
    payload = {
        "sub": email,
        "iat": now,
        "exp": now - 1 if expired else now + expires_in,
    }
    if role is not None:
        payload["role"] = role
    return jwt.encode(payload, TEST_JWT_SECRET, algorithm="HS256")


def user_payload(email: str = ADMIN_EMAIL, role: str = "ADMIN", role_id: int = 1) -> dict:
    """A current-user response body, with the password hash the backend leaks."""
    return {
        "email": email,
        "mot_passe": "$2a$10$hash",
        "role": {"id_role": role_id, "nom": role},
        "employe": {
            "empCin": "AB123456",
            "nom_emp": "Alaoui",
            "prenom_emp": "Sara",
            "emp_phone": "0600000000",
            "emp_adresse": "Casablanca",
        },
    }


@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset cached settings and the container before and after each test."""
    get_settings.cache_clear()
    reset_container()
    yield
    get_settings.cache_clear()
    reset_container()


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture
async def api(backend: FakeBackend):
    client = ApiClient(base_url=BASE_URL, transport=backend.transport())
    yield client
    await client.aclose()


@pytest.fixture
def storage() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture
def token_store(storage: MemoryStorage) -> TokenStore:
    return TokenStore(storage)


@pytest.fixture
def session_manager(api: ApiClient, token_store: TokenStore) -> SessionManager:
    return SessionManager(api, token_store)


@pytest.fixture
def admin_token() -> str:
    return create_test_token()


@pytest.fixture
def logged_in_backend(backend: FakeBackend, admin_token: str) -> FakeBackend:
    """Backend answering the login and current-user calls for the admin."""
    backend.on("POST", "/utilisateur/login", {"token": admin_token})
    backend.on("GET", f"/utilisateur/{ADMIN_EMAIL}", user_payload())
    return backend


@pytest.fixture
def authenticated_api(api: ApiClient, token_store: TokenStore, admin_token: str) -> ApiClient:
    """ApiClient whose requests carry the admin token."""
    token_store.save(admin_token)
    api.set_token_provider(token_store.read)
    return api

