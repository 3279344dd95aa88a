"""Tests for the courier service and lifecycle."""

from datetime import date
from decimal import Decimal

import pytest

from logistics_console.modules.courriers import (
    Courier,
    CourierPayload,
    CourierService,
    CourierStatus,
    ICourierService,
    InvalidStatusTransitionError,
    next_status,
)

from tests.fakes import envelope, json_body


def courier(courier_id: int = 5, status: str = "depose", **overrides) -> dict:
    body = {
        "id": courier_id,
        "dateEnvoie": "2024-03-01",
        "poids": 2.5,
        "statut": status,
        "prixTransmission": 45.5,
        "agenceExped": "Centre",
        "agenceDest": "Maarif",
        "nom_complet_dest": "Karim Idrissi",
        "adresse_dest": "Fès",
        "cin_dest": "EF77",
        "client": {"cin": "AB1", "nom_clt": "Alaoui", "prenom_clt": "Sara"},
    }
    body.update(overrides)
    return body


@pytest.fixture
def service(authenticated_api) -> CourierService:
    return CourierService(authenticated_api)


class TestLifecycle:
    def test_next_status(self):
        assert next_status(CourierStatus.DEPOSITED) is CourierStatus.IN_DELIVERY
        assert next_status(CourierStatus.IN_DELIVERY) is CourierStatus.DELIVERED
        assert next_status(CourierStatus.DELIVERED) is None

    def test_parsing(self):
        parsed = Courier.model_validate(courier())

        assert parsed.status is CourierStatus.DEPOSITED
        assert parsed.ship_date == date(2024, 3, 1)
        assert parsed.price == Decimal("45.5")
        assert parsed.sender.full_name == "Sara Alaoui"

    def test_unknown_status_rejected(self):
        with pytest.raises(ValueError):
            Courier.model_validate(courier(status="perdu"))

    def test_status_defaults_to_deposited(self):
        body = courier()
        del body["statut"]
        assert Courier.model_validate(body).status is CourierStatus.DEPOSITED

    def test_payload_is_flat(self):
        payload = CourierPayload(
            sender_cin="AB1",
            sender_name="Alaoui",
            sender_surname="Sara",
            ship_date=date(2024, 3, 1),
            weight=2.5,
            recipient_cin="EF77",
            recipient_name="Karim Idrissi",
            recipient_address="Fès",
            origin_agency="Centre",
            destination_agency="Maarif",
            price=45.5,
        )

        wire = payload.to_wire()

        assert wire["cin"] == "AB1"
        assert wire["nom_clt"] == "Alaoui"
        assert wire["dateEnvoie"] == "2024-03-01"
        assert wire["prixTransmission"] == 45.5
        assert "statut" not in wire


class TestQueries:
    @pytest.mark.asyncio
    async def test_list(self, service, backend):
        backend.on("GET", "/courriers/all", [courier(1), courier(2, "livre")])
        couriers = await service.list()
        assert [c.status for c in couriers] == [CourierStatus.DEPOSITED, CourierStatus.DELIVERED]

    @pytest.mark.asyncio
    async def test_list_by_status(self, service, backend):
        backend.on("GET", "/courriers/statut/livre", envelope([courier(2, "livre")]))
        couriers = await service.list_by_status(CourierStatus.DELIVERED)
        assert couriers[0].id == 2

    @pytest.mark.asyncio
    async def test_get_by_id(self, service, backend):
        backend.on("GET", "/courriers/5", courier())
        assert (await service.get_by_id(5)).recipient_cin == "EF77"


class TestMutations:
    @pytest.mark.asyncio
    async def test_create(self, service, backend):
        backend.on("POST", "/courriers/create-with-client", envelope(courier()))
        payload = CourierPayload(
            sender_cin="AB1",
            sender_name="Alaoui",
            sender_surname="Sara",
            weight=2.5,
            recipient_cin="EF77",
            recipient_name="Karim Idrissi",
            recipient_address="Fès",
            origin_agency="Centre",
            destination_agency="Maarif",
        )

        created = await service.create(payload)

        assert created.id == 5
        assert json_body(backend.requests[-1])["agenceDest"] == "Maarif"

    @pytest.mark.asyncio
    async def test_delete(self, service, backend):
        backend.on("DELETE", "/courriers/5", None)
        await service.delete(5)
        assert backend.called("DELETE", "/courriers/5")


class TestStatus:
    @pytest.mark.asyncio
    async def test_change_status_sends_query_parameter(self, service, backend):
        backend.on("PUT", "/courriers/status/5", courier(status="en_cours_de_livraison"))

        updated = await service.change_status(5, CourierStatus.IN_DELIVERY)

        request = backend.requests[-1]
        assert request.url.params["newStatus"] == "en_cours_de_livraison"
        assert updated.status is CourierStatus.IN_DELIVERY

    @pytest.mark.asyncio
    async def test_change_status_is_unguarded(self, service, backend):
        """Compensating moves (back to deposited) go through change_status."""
        backend.on("PUT", "/courriers/status/5", courier(status="depose"))

        updated = await service.change_status(5, CourierStatus.DEPOSITED)

        assert updated.status is CourierStatus.DEPOSITED

    @pytest.mark.asyncio
    async def test_change_status_can_skip_forward(self, service, backend):
        """A deposited courier can be marked delivered directly."""
        backend.on("GET", "/courriers/5", courier(status="depose"))
        backend.on("PUT", "/courriers/status/5", courier(status="livre"))

        updated = await service.change_status(5, CourierStatus.DELIVERED)

        assert backend.requests[-1].url.params["newStatus"] == "livre"
        assert not backend.called("GET", "/courriers/5")
        assert updated.status is CourierStatus.DELIVERED

    @pytest.mark.asyncio
    async def test_advance_to_next_step(self, service, backend):
        backend.on("GET", "/courriers/5", courier(status="en_cours_de_livraison"))
        backend.on("PUT", "/courriers/status/5", courier(status="livre"))

        updated = await service.advance_status(5, CourierStatus.DELIVERED)

        assert updated.status is CourierStatus.DELIVERED

    @pytest.mark.asyncio
    async def test_advance_cannot_skip(self, service, backend):
        backend.on("GET", "/courriers/5", courier(status="depose"))

        with pytest.raises(InvalidStatusTransitionError) as exc_info:
            await service.advance_status(5, CourierStatus.DELIVERED)

        assert exc_info.value.details["expected"] == "en_cours_de_livraison"
        assert not backend.called("PUT", "/courriers/status/5")

    @pytest.mark.asyncio
    async def test_advance_cannot_go_back(self, service, backend):
        backend.on("GET", "/courriers/5", courier(status="livre"))

        with pytest.raises(InvalidStatusTransitionError) as exc_info:
            await service.advance_status(5, CourierStatus.IN_DELIVERY)

        assert exc_info.value.details["expected"] is None


class TestInterface:
    @pytest.mark.asyncio
    async def test_implements_interface(self, service):
        assert isinstance(service, ICourierService)
