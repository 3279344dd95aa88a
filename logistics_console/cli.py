"""
Logistics console: command-line access to the logistics backend.

Signs in against the backend, keeps the session in a local file, and
lists every entity the way the management screens hold them.
"""

import argparse
import asyncio
import getpass
import logging
import sys
from typing import Optional

from logistics_console.container import ServiceContainer
from logistics_console.display import TABLES, ConsoleNotifier, console, print_user
from logistics_console.shared.config import get_settings
from logistics_console.shared.exceptions import LogisticsError

logger = logging.getLogger(__name__)

SCREENS = {
    "agencies": "agency_screen",
    "vehicles": "vehicle_screen",
    "employees": "employee_screen",
    "courriers": "courier_screen",
    "deliveries": "delivery_screen",
    "invoices": "invoice_screen",
}


async def login(container: ServiceContainer, email: str, password: str) -> int:
    try:
        user = await container.session.login(email, password)
    except LogisticsError as e:
        console.print(f"[red]Erreur:[/red] {e.message}")
        return 1
    console.print("[green]Connexion réussie[/green]")
    print_user(user)
    console.print(f"[dim]Espace : {container.access.redirect_target_for(container.session.session)}[/dim]")
    return 0


async def logout(container: ServiceContainer) -> int:
    await container.session.logout()
    console.print("[green]Déconnecté[/green]")
    return 0


async def whoami(container: ServiceContainer) -> int:
    await container.session.bootstrap()
    if container.session.user is None:
        console.print("[yellow]Non connecté[/yellow]")
        return 1
    print_user(container.session.user)
    return 0


async def list_entities(container: ServiceContainer, entity: str, query: Optional[str]) -> int:
    """Load one entity screen and print its (optionally searched) list."""
    await container.session.bootstrap()
    if not container.session.is_authenticated:
        console.print("[yellow]Non connecté : lancez d'abord `logistics-console login`[/yellow]")
        return 1

    screen = getattr(container, SCREENS[entity])()
    if not await screen.load():
        return 1

    items = screen.search(query) if query else screen.items
    console.print(TABLES[entity](items))
    return 0


async def run(args: argparse.Namespace, container: Optional[ServiceContainer] = None) -> int:
    container = container or ServiceContainer(notifier=ConsoleNotifier())
    async with container:
        if args.command == "login":
            password = args.password or getpass.getpass("Mot de passe : ")
            return await login(container, args.email, password)
        if args.command == "logout":
            return await logout(container)
        if args.command == "whoami":
            return await whoami(container)
        return await list_entities(container, args.entity, args.search)


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(
        prog="logistics-console",
        description=f"{settings.app_name}: admin and operator console for the logistics backend",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"{settings.app_name} {settings.app_version}",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    login_parser = subparsers.add_parser("login", help="Sign in and keep the session")
    login_parser.add_argument("email", help="Account email")
    login_parser.add_argument(
        "--password",
        help="Password (prompted when omitted)",
    )

    subparsers.add_parser("logout", help="Sign out and clear the stored session")
    subparsers.add_parser("whoami", help="Show the signed-in user")

    list_parser = subparsers.add_parser("list", help="List an entity")
    list_parser.add_argument("entity", choices=sorted(SCREENS))
    list_parser.add_argument(
        "--search", "-s",
        help="Case-insensitive filter over the entity's searchable fields",
    )
    return parser


def main(argv: Optional[list[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.debug(f"Using backend at {settings.api_base_url}")
    sys.exit(asyncio.run(run(args)))


if __name__ == "__main__":
    main()
