"""Tests for the insert path and the seeder."""

from decimal import Decimal

import pytest
from pydantic import ValidationError as SchemaError

from consultas.data.seed import seed
from consultas.domain.errors import ValidationError
from consultas.domain.schemas import PedidoCreate
from consultas.services.consulta_service import ConsultaService
from consultas.services.pedido_service import PedidoService


def test_inserted_order_is_returned_once_by_orders_by_user(session):
    created = PedidoService(session).create_order(
        PedidoCreate(producto="Impresora", cantidad=3, total=Decimal("199.99"), id_usuario=3)
    )

    ids = [o.id for o in ConsultaService(session).orders_by_user(3)]
    assert ids.count(created.id) == 1
    assert created.total == Decimal("199.99")


def test_create_order_rejects_unknown_user(session):
    with pytest.raises(ValidationError):
        PedidoService(session).create_order(
            PedidoCreate(producto="Impresora", cantidad=1, total=Decimal("10"), id_usuario=42)
        )


@pytest.mark.parametrize("cantidad,total", [(0, "10"), (1, "-0.01")])
def test_order_payload_enforces_quantity_and_total(cantidad, total):
    with pytest.raises(SchemaError):
        PedidoCreate(producto="X", cantidad=cantidad, total=Decimal(total), id_usuario=1)


def test_seed_only_runs_on_empty_database(empty_session):
    assert seed(empty_session) is True
    assert seed(empty_session) is False
    assert len(ConsultaService(empty_session).orders_with_user_info()) == 7
