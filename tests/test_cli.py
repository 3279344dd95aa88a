"""Tests for the command-line entry point."""

import pytest

from logistics_console.cli import SCREENS, build_parser, run
from logistics_console.container import ServiceContainer
from logistics_console.modules.auth.token_store import TokenStore
from logistics_console.shared.config import Settings

from tests.conftest import ADMIN_EMAIL, create_test_token, user_payload
from tests.fakes import BASE_URL, envelope


@pytest.fixture
def container(backend, storage) -> ServiceContainer:
    settings = Settings(_env_file=None, api_base_url=BASE_URL)
    return ServiceContainer(settings=settings, storage=storage, transport=backend.transport())


@pytest.fixture
def signed_in(backend, storage):
    """A stored admin token the backend still accepts."""
    TokenStore(storage).save(create_test_token())
    backend.on("GET", f"/utilisateur/{ADMIN_EMAIL}", user_payload())


class TestParser:
    def test_list_command(self):
        args = build_parser().parse_args(["list", "agencies", "-s", "centre"])
        assert args.command == "list"
        assert args.entity == "agencies"
        assert args.search == "centre"

    def test_every_screen_listable(self):
        parser = build_parser()
        for entity in SCREENS:
            assert parser.parse_args(["list", entity]).entity == entity

    def test_unknown_entity_rejected(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["list", "clients"])

    def test_version_reports_app_name_and_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            build_parser().parse_args(["--version"])

        assert exc_info.value.code == 0
        assert capsys.readouterr().out.strip() == "Logistics Console 0.1.0"

    def test_app_name_in_help(self):
        assert build_parser().description.startswith("Logistics Console")

    def test_login_password_optional(self):
        args = build_parser().parse_args(["login", ADMIN_EMAIL])
        assert args.password is None

    def test_command_required(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])


class TestCommands:
    @pytest.mark.asyncio
    async def test_login(self, container, logged_in_backend, storage, capsys):
        args = build_parser().parse_args(["login", ADMIN_EMAIL, "--password", "secret1"])

        assert await run(args, container) == 0

        output = capsys.readouterr().out
        assert "Connexion réussie" in output
        assert "/admin" in output
        assert TokenStore(storage).read() is not None

    @pytest.mark.asyncio
    async def test_login_rejected(self, container, backend, capsys):
        backend.on("POST", "/utilisateur/login", {"message": "Identifiants invalides"}, status=401)
        args = build_parser().parse_args(["login", ADMIN_EMAIL, "--password", "wrong1"])

        assert await run(args, container) == 1
        assert "Identifiants invalides" in capsys.readouterr().out

    @pytest.mark.asyncio
    async def test_whoami_signed_out(self, container, capsys):
        args = build_parser().parse_args(["whoami"])

        assert await run(args, container) == 1
        assert "Non connecté" in capsys.readouterr().out

    @pytest.mark.asyncio
    async def test_list_agencies(self, container, backend, signed_in, capsys):
        backend.on("GET", "/agence/all", envelope(["A", "B"]))
        backend.on("GET", "/agence/details/A", envelope({"nomAgence": "Centre"}))
        backend.on("GET", "/agence/details/B", envelope({"nomAgence": "Maarif"}))
        args = build_parser().parse_args(["list", "agencies", "--search", "maarif"])

        assert await run(args, container) == 0

        output = capsys.readouterr().out
        assert "Maarif" in output
        assert "Centre" not in output

    @pytest.mark.asyncio
    async def test_list_requires_session(self, container, backend, capsys):
        args = build_parser().parse_args(["list", "vehicles"])

        assert await run(args, container) == 1
        assert not backend.called("GET", "/vehicule/getAll")

    @pytest.mark.asyncio
    async def test_logout_clears_storage(self, container, signed_in, storage):
        args = build_parser().parse_args(["logout"])

        assert await run(args, container) == 0
        assert TokenStore(storage).read() is None
