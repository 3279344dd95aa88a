"""Rich terminal rendering for the console commands."""

from typing import Any, Callable, Iterable, Optional

from rich.console import Console
from rich.table import Table

from logistics_console.modules.agencies import Agency
from logistics_console.modules.auth import User
from logistics_console.modules.courriers import STATUS_LABELS, Courier
from logistics_console.modules.deliveries import Delivery
from logistics_console.modules.employees import Employee
from logistics_console.modules.invoices import Invoice, PaymentStatus
from logistics_console.modules.vehicles import Vehicle

console = Console()


class ConsoleNotifier:
    """Notifier printing action outcomes to the terminal."""

    def __init__(self, target: Optional[Console] = None):
        self._console = target or console

    def success(self, message: str) -> None:
        self._console.print(f"[green]{message}[/green]")

    def error(self, message: str) -> None:
        self._console.print(f"[red]Erreur:[/red] {message}")


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def _table(title: str, columns: Iterable[str], rows: Iterable[Iterable[Any]]) -> Table:
    table = Table(title=title, header_style="bold blue")
    for column in columns:
        table.add_column(column)
    for row in rows:
        table.add_row(*(_text(cell) for cell in row))
    return table


def agencies_table(agencies: list[Agency]) -> Table:
    """Agencies with their employee and vehicle counts.

    Placeholders (details unavailable) are dimmed.
    """
    table = _table(
        "Agences",
        ("ID", "Nom", "Adresse", "Employés", "Véhicules"),
        [],
    )
    for agency in agencies:
        table.add_row(
            agency.record_id or agency.id,
            agency.name,
            agency.address,
            str(len(agency.employees)),
            str(len(agency.vehicles)),
            style="dim" if agency.is_placeholder else None,
        )
    return table


def vehicles_table(vehicles: list[Vehicle]) -> Table:
    return _table(
        "Véhicules",
        ("Immatriculation", "Type", "Capacité", "Agence", "Transporteur"),
        (
            (
                v.immatriculation,
                v.type,
                f"{v.capacity:g}",
                v.agency.name if v.agency else None,
                f"{v.assigned_transporter.surname} {v.assigned_transporter.name}"
                if v.assigned_transporter
                else "Disponible",
            )
            for v in vehicles
        ),
    )


def employees_table(employees: list[Employee]) -> Table:
    return _table(
        "Employés",
        ("CIN", "Nom", "Prénom", "Téléphone", "Agence", "Rôle"),
        (
            (
                e.cin,
                e.name,
                e.surname,
                e.phone,
                e.agency.name if e.agency else None,
                e.role.name if e.role else None,
            )
            for e in employees
        ),
    )


def couriers_table(couriers: list[Courier]) -> Table:
    return _table(
        "Courriers",
        ("ID", "Expéditeur", "Destinataire", "Poids", "Statut", "Prix"),
        (
            (
                c.id,
                c.sender.full_name if c.sender else None,
                c.recipient_name,
                f"{c.weight:g} kg",
                STATUS_LABELS[c.status],
                c.price,
            )
            for c in couriers
        ),
    )


def deliveries_table(deliveries: list[Delivery]) -> Table:
    return _table(
        "Livraisons",
        ("ID", "Courrier", "Date d'envoi", "Véhicule", "Transporteur"),
        ((d.id, d.courier_id, d.ship_date, d.vehicle_id, d.transporter_id) for d in deliveries),
    )


def invoices_table(invoices: list[Invoice]) -> Table:
    return _table(
        "Factures",
        ("ID", "Courrier", "Montant", "Émise le", "Paiement"),
        (
            (
                i.id,
                i.courier_id,
                i.amount,
                i.issue_date.date() if i.issue_date else None,
                "Payée" if i.payment_status is PaymentStatus.PAID else "Non payée",
            )
            for i in invoices
        ),
    )


TABLES: dict[str, Callable[[list[Any]], Table]] = {
    "agencies": agencies_table,
    "vehicles": vehicles_table,
    "employees": employees_table,
    "courriers": couriers_table,
    "deliveries": deliveries_table,
    "invoices": invoices_table,
}


def print_user(user: User) -> None:
    """Print the signed-in user's profile."""
    console.print(f"[bold]{user.email}[/bold] ({user.role.name})")
    if user.employee_profile:
        profile = user.employee_profile
        console.print(f"[dim]{profile.full_name}, CIN {profile.cin}[/dim]")
