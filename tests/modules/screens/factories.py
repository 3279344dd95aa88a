"""Model factories and a recording notifier for screen tests."""

from typing import Optional

from logistics_console.modules.agencies import Agency
from logistics_console.modules.courriers import Courier
from logistics_console.modules.deliveries import Delivery
from logistics_console.modules.employees import Employee
from logistics_console.modules.invoices import Invoice
from logistics_console.modules.vehicles import Vehicle


class RecordingNotifier:
    def __init__(self) -> None:
        self.successes: list[str] = []
        self.errors: list[str] = []

    def success(self, message: str) -> None:
        self.successes.append(message)

    def error(self, message: str) -> None:
        self.errors.append(message)


def make_agency(agency_id: str = "1", name: str = "Centre", **overrides) -> Agency:
    return Agency(id=agency_id, name=name, address=f"{name} adresse", **overrides)


def make_vehicle(immatriculation: str = "12345-A-6", transporter: Optional[str] = None) -> Vehicle:
    data = {"immatriculation": immatriculation, "type": "Camion", "capacite": 3500}
    if transporter:
        data["transporteurVehicule"] = {"trs_Cin": transporter}
    return Vehicle.model_validate(data)


def make_employee(cin: str = "CD42", role: str = "TRANSPORTEUR", name: str = "Bennani") -> Employee:
    return Employee.model_validate(
        {"empCin": cin, "nom_emp": name, "prenom_emp": "Omar", "role": {"id_role": 3, "nom": role}}
    )


def make_courier(courier_id: int = 5, status: str = "depose", sender: str = "Alaoui") -> Courier:
    return Courier.model_validate(
        {
            "id": courier_id,
            "poids": 2.5,
            "statut": status,
            "cin_dest": "EF77",
            "nom_complet_dest": "Karim Idrissi",
            "client": {"cin": "AB1", "nom_clt": sender, "prenom_clt": "Sara"},
        }
    )


def make_delivery(delivery_id: int = 11, courier_id: int = 5) -> Delivery:
    return Delivery.model_validate(
        {
            "id": delivery_id,
            "courrierId": courier_id,
            "dateEnvoi": "2024-03-02",
            "vehiculeId": "12345-A-6",
            "transporteurId": "CD42",
        }
    )


def make_invoice(invoice_id: int = 3, courier_id: int = 5, status: str = "NON_PAYE") -> Invoice:
    return Invoice.model_validate(
        {"id": invoice_id, "courrierId": courier_id, "montant": 45.5, "statutPaiement": status}
    )
