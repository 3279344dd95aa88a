"""Tests for the session manager state machine."""

import asyncio

import httpx

import pytest

from logistics_console.modules.auth.exceptions import (
    ExpiredTokenError,
    MissingTokenError,
    RoleMismatchError,
)
from logistics_console.modules.auth.models import SessionState, User
from logistics_console.modules.auth.session import SessionManager
from logistics_console.shared.exceptions import (
    AuthenticationError,
    NetworkError,
    ServerError,
    UnauthorizedError,
)

from tests.conftest import ADMIN_EMAIL, OPERATOR_EMAIL, create_test_token, user_payload
from tests.fakes import json_body


def assert_consistent(manager: SessionManager, token_store) -> None:
    """Token and user are held together or not at all."""
    assert manager.is_authenticated == (manager.token is not None and manager.user is not None)
    assert (token_store.read() is None) == (token_store.read_user() is None)


class TestLogin:
    @pytest.mark.asyncio
    async def test_login_success(self, session_manager, logged_in_backend, token_store, admin_token):
        user = await session_manager.login(ADMIN_EMAIL, "secret1")

        assert user.email == ADMIN_EMAIL
        assert session_manager.state is SessionState.AUTHENTICATED
        assert session_manager.token == admin_token
        assert token_store.read() == admin_token
        assert token_store.read_user() == user
        assert_consistent(session_manager, token_store)

    @pytest.mark.asyncio
    async def test_login_sends_credentials_without_token(self, session_manager, logged_in_backend):
        await session_manager.login(ADMIN_EMAIL, "secret1")

        login_request = logged_in_backend.calls("POST", "/utilisateur/login")[0]
        assert json_body(login_request) == {"email": ADMIN_EMAIL, "mot_passe": "secret1"}
        assert "Authorization" not in login_request.headers

    @pytest.mark.asyncio
    async def test_profile_fetched_with_new_token(self, session_manager, logged_in_backend, admin_token):
        await session_manager.login(ADMIN_EMAIL, "secret1")

        profile_request = logged_in_backend.calls("GET", f"/utilisateur/{ADMIN_EMAIL}")[0]
        assert profile_request.headers["Authorization"] == f"Bearer {admin_token}"

    @pytest.mark.asyncio
    async def test_token_in_envelope(self, session_manager, backend, admin_token):
        backend.on("POST", "/utilisateur/login", {"success": True, "data": {"token": admin_token}})
        backend.on("GET", f"/utilisateur/{ADMIN_EMAIL}", user_payload())

        await session_manager.login(ADMIN_EMAIL, "secret1")

        assert session_manager.is_authenticated

    @pytest.mark.asyncio
    async def test_role_mismatch_rejected(self, session_manager, backend, token_store):
        """Token says ADMIN, profile says OPERATEUR: nothing is kept."""
        backend.on("POST", "/utilisateur/login", {"token": create_test_token(email="a@b.com", role="ADMIN")})
        backend.on("GET", "/utilisateur/a@b.com", user_payload(email="a@b.com", role="OPERATEUR", role_id=2))

        with pytest.raises(RoleMismatchError):
            await session_manager.login("a@b.com", "secret1")

        assert session_manager.state is SessionState.UNAUTHENTICATED
        assert token_store.read() is None
        assert token_store.read_user() is None
        assert_consistent(session_manager, token_store)

    @pytest.mark.asyncio
    async def test_token_without_role_claim_accepted(self, session_manager, backend):
        backend.on("POST", "/utilisateur/login", {"token": create_test_token(role=None)})
        backend.on("GET", f"/utilisateur/{ADMIN_EMAIL}", user_payload())

        await session_manager.login(ADMIN_EMAIL, "secret1")

        assert session_manager.is_authenticated

    @pytest.mark.asyncio
    async def test_bad_credentials(self, session_manager, backend, token_store):
        backend.on("POST", "/utilisateur/login", {"message": "Identifiants invalides"}, status=401)

        with pytest.raises(AuthenticationError) as exc_info:
            await session_manager.login(ADMIN_EMAIL, "wrong")

        assert exc_info.value.message == "Identifiants invalides"
        assert session_manager.state is SessionState.UNAUTHENTICATED
        assert token_store.read() is None

    @pytest.mark.asyncio
    async def test_response_without_token(self, session_manager, backend):
        backend.on("POST", "/utilisateur/login", {"success": True, "message": "ok"})

        with pytest.raises(MissingTokenError):
            await session_manager.login(ADMIN_EMAIL, "secret1")
        assert session_manager.state is SessionState.UNAUTHENTICATED

    @pytest.mark.asyncio
    async def test_expired_token_from_login(self, session_manager, backend):
        backend.on("POST", "/utilisateur/login", {"token": create_test_token(expired=True)})

        with pytest.raises(ExpiredTokenError):
            await session_manager.login(ADMIN_EMAIL, "secret1")
        assert not backend.called("GET", f"/utilisateur/{ADMIN_EMAIL}")

    @pytest.mark.asyncio
    async def test_profile_fetch_failure_rolls_back(self, session_manager, backend, token_store, admin_token):
        backend.on("POST", "/utilisateur/login", {"token": admin_token})
        backend.on("GET", f"/utilisateur/{ADMIN_EMAIL}", status=500)

        with pytest.raises(ServerError):
            await session_manager.login(ADMIN_EMAIL, "secret1")

        assert session_manager.state is SessionState.UNAUTHENTICATED
        assert token_store.read() is None

    @pytest.mark.asyncio
    async def test_login_replaces_previous_session(self, session_manager, logged_in_backend, backend):
        await session_manager.login(ADMIN_EMAIL, "secret1")

        operator_token = create_test_token(email=OPERATOR_EMAIL, role="OPERATEUR")
        backend.on("POST", "/utilisateur/login", {"token": operator_token})
        backend.on("GET", f"/utilisateur/{OPERATOR_EMAIL}", user_payload(OPERATOR_EMAIL, "OPERATEUR", 2))

        user = await session_manager.login(OPERATOR_EMAIL, "secret2")

        assert user.role.name == "OPERATEUR"
        assert session_manager.token == operator_token


class TestBootstrap:
    @pytest.mark.asyncio
    async def test_no_token(self, session_manager, backend):
        state = await session_manager.bootstrap()
        assert state is SessionState.UNAUTHENTICATED
        assert backend.requests == []

    @pytest.mark.asyncio
    async def test_orphan_profile_cleared(self, session_manager, storage, backend):
        storage.set_item("auth_user", '{"email": "x@logistique.ma"}')
        await session_manager.bootstrap()
        assert storage.keys() == []

    @pytest.mark.asyncio
    async def test_expired_token_cleared_without_fetch(self, session_manager, token_store, backend):
        token_store.save(create_test_token(expired=True))
        token_store.save_user(User.model_validate(user_payload()))

        state = await session_manager.bootstrap()

        assert state is SessionState.UNAUTHENTICATED
        assert token_store.read() is None
        assert token_store.read_user() is None
        assert backend.requests == []

    @pytest.mark.asyncio
    async def test_garbage_token_cleared(self, session_manager, token_store, backend):
        token_store.save("garbage")
        await session_manager.bootstrap()
        assert token_store.read() is None
        assert backend.requests == []

    @pytest.mark.asyncio
    async def test_valid_token_restores_session(self, session_manager, token_store, logged_in_backend, admin_token):
        token_store.save(admin_token)

        state = await session_manager.bootstrap()

        assert state is SessionState.AUTHENTICATED
        assert session_manager.user.email == ADMIN_EMAIL
        assert token_store.read_user() == session_manager.user
        assert_consistent(session_manager, token_store)

    @pytest.mark.asyncio
    async def test_profile_failure_clears(self, session_manager, token_store, backend, admin_token):
        token_store.save(admin_token)
        backend.on("GET", f"/utilisateur/{ADMIN_EMAIL}", status=500)

        state = await session_manager.bootstrap()

        assert state is SessionState.UNAUTHENTICATED
        assert token_store.read() is None

    @pytest.mark.asyncio
    async def test_network_failure_clears(self, session_manager, token_store, backend, admin_token):
        def refuse(request):
            raise httpx.ConnectError("down", request=request)

        token_store.save(admin_token)
        backend.on("GET", f"/utilisateur/{ADMIN_EMAIL}", handler=refuse)

        assert await session_manager.bootstrap() is SessionState.UNAUTHENTICATED


class TestLogout:
    @pytest.mark.asyncio
    async def test_logout_clears(self, session_manager, logged_in_backend, token_store):
        await session_manager.login(ADMIN_EMAIL, "secret1")

        await session_manager.logout()

        assert session_manager.state is SessionState.UNAUTHENTICATED
        assert session_manager.session is None
        assert token_store.read() is None
        assert token_store.read_user() is None

    @pytest.mark.asyncio
    async def test_logout_twice(self, session_manager, logged_in_backend):
        await session_manager.login(ADMIN_EMAIL, "secret1")

        await session_manager.logout()
        assert session_manager.state is SessionState.UNAUTHENTICATED
        await session_manager.logout()
        assert session_manager.state is SessionState.UNAUTHENTICATED

    @pytest.mark.asyncio
    async def test_remote_logout_failure_still_clears(self, api, token_store, logged_in_backend):
        async def failing_remote_logout():
            raise NetworkError()

        manager = SessionManager(api, token_store, remote_logout=failing_remote_logout)
        await manager.login(ADMIN_EMAIL, "secret1")

        await manager.logout()

        assert manager.state is SessionState.UNAUTHENTICATED
        assert token_store.read() is None


class TestUnauthorized:
    @pytest.mark.asyncio
    async def test_401_tears_session_down(self, api, session_manager, logged_in_backend, token_store):
        await session_manager.login(ADMIN_EMAIL, "secret1")
        logged_in_backend.on("GET", "/roles", status=401)

        with pytest.raises(UnauthorizedError):
            await api.get("/roles")

        assert session_manager.state is SessionState.UNAUTHENTICATED
        assert token_store.read() is None
        assert session_manager.consume_redirect() == "/login"
        assert session_manager.consume_redirect() is None

    @pytest.mark.asyncio
    async def test_requests_carry_session_token(self, api, session_manager, logged_in_backend, admin_token):
        await session_manager.login(ADMIN_EMAIL, "secret1")
        logged_in_backend.on("GET", "/roles", [])

        await api.get("/roles")

        assert logged_in_backend.requests[-1].headers["Authorization"] == f"Bearer {admin_token}"


class TestRefreshProfile:
    @pytest.mark.asyncio
    async def test_without_session(self, session_manager):
        with pytest.raises(MissingTokenError):
            await session_manager.refresh_profile()

    @pytest.mark.asyncio
    async def test_refreshes(self, session_manager, logged_in_backend):
        await session_manager.login(ADMIN_EMAIL, "secret1")
        payload = user_payload()
        payload["employe"]["nom_emp"] = "Bennani"
        logged_in_backend.on("GET", f"/utilisateur/{ADMIN_EMAIL}", payload)

        profile = await session_manager.refresh_profile()

        assert profile.employee_profile.name == "Bennani"
        assert session_manager.user.employee_profile.name == "Bennani"

    @pytest.mark.asyncio
    async def test_role_change_tears_down(self, session_manager, logged_in_backend):
        await session_manager.login(ADMIN_EMAIL, "secret1")
        logged_in_backend.on("GET", f"/utilisateur/{ADMIN_EMAIL}", user_payload(role="OPERATEUR", role_id=2))

        with pytest.raises(RoleMismatchError):
            await session_manager.refresh_profile()
        assert not session_manager.is_authenticated


class TestSubscribe:
    @pytest.mark.asyncio
    async def test_listeners_see_transitions(self, session_manager, logged_in_backend):
        states = []
        session_manager.subscribe(states.append)

        await session_manager.login(ADMIN_EMAIL, "secret1")
        await session_manager.logout()

        assert states == [
            SessionState.AUTHENTICATING,
            SessionState.AUTHENTICATED,
            SessionState.AUTHENTICATING,
            SessionState.UNAUTHENTICATED,
        ]

    @pytest.mark.asyncio
    async def test_unsubscribe(self, session_manager, logged_in_backend):
        states = []
        unsubscribe = session_manager.subscribe(states.append)
        unsubscribe()
        unsubscribe()

        await session_manager.login(ADMIN_EMAIL, "secret1")

        assert states == []

    @pytest.mark.asyncio
    async def test_failing_listener_does_not_break_login(self, session_manager, logged_in_backend):
        def broken(state):
            raise RuntimeError("listener bug")

        session_manager.subscribe(broken)

        await session_manager.login(ADMIN_EMAIL, "secret1")

        assert session_manager.is_authenticated


class TestCancellation:
    @pytest.mark.asyncio
    async def test_cancelled_login_leaves_nothing(self, session_manager, backend, token_store, admin_token):
        """A login cancelled mid-flight never leaves a token without a profile."""
        started = asyncio.Event()
        release = asyncio.Event()
        backend.on("POST", "/utilisateur/login", {"token": admin_token})

        async def slow_profile(request):
            started.set()
            await release.wait()
            raise AssertionError("unreachable")

        backend.on("GET", f"/utilisateur/{ADMIN_EMAIL}", handler=slow_profile)

        task = asyncio.create_task(session_manager.login(ADMIN_EMAIL, "secret1"))
        await started.wait()
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task

        assert session_manager.state is SessionState.UNAUTHENTICATED
        assert token_store.read() is None
