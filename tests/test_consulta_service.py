"""Tests for the query facade over the seeded data."""

from collections import Counter
from decimal import Decimal

import pytest

from consultas.domain.errors import DataAccessError, ValidationError
from consultas.domain.schemas import PedidoCreate
from consultas.services.consulta_service import ConsultaService
from consultas.services.pedido_service import PedidoService


def test_orders_by_user_returns_only_that_users_orders(session):
    svc = ConsultaService(session)
    orders = svc.orders_by_user(2)

    assert [o.producto for o in orders] == ["Laptop Dell", "Mouse Logitech", "Auriculares Bluetooth"]
    assert all(o.id_usuario == 2 for o in orders)


def test_orders_by_user_is_idempotent_and_empty_for_unknown_user(session):
    svc = ConsultaService(session)

    assert [o.id for o in svc.orders_by_user(2)] == [o.id for o in svc.orders_by_user(2)]
    assert svc.orders_by_user(999) == []


def test_orders_by_user_rejects_non_positive_id(session):
    with pytest.raises(ValidationError):
        ConsultaService(session).orders_by_user(0)


def test_orders_with_user_info_joins_name_and_email(session):
    rows = ConsultaService(session).orders_with_user_info()

    assert len(rows) == 7
    first = rows[0]
    assert set(first) == {"producto", "cantidad", "total", "nombre_usuario", "correo_usuario"}
    assert first["producto"] == "Laptop Dell"
    assert first["nombre_usuario"] == "María López"
    assert first["correo_usuario"] == "maria@example.com"


def test_orders_in_price_range_is_inclusive(session):
    orders = ConsultaService(session).orders_in_price_range(100, 250)

    assert [o.producto for o in orders] == ["Laptop Dell", "Teclado Mecánico", "Auriculares Bluetooth"]
    assert all(Decimal("100") <= o.total <= Decimal("250") for o in orders)


@pytest.mark.parametrize("minimum,maximum", [(300, 100), (-1, 50), ("abc", 10)])
def test_orders_in_price_range_validates_bounds(session, minimum, maximum):
    with pytest.raises(ValidationError):
        ConsultaService(session).orders_in_price_range(minimum, maximum)


def test_users_starting_with_r_is_case_insensitive_and_name_ordered(session):
    svc = ConsultaService(session)

    upper = [u.nombre for u in svc.users_starting_with("R")]
    lower = [u.nombre for u in svc.users_starting_with("r")]

    assert upper == ["Ricardo Fernández", "Roberto García"]
    assert lower == upper


def test_users_starting_with_matches_wildcards_literally(session):
    assert ConsultaService(session).users_starting_with("%") == []


def test_users_starting_with_rejects_empty_prefix(session):
    with pytest.raises(ValidationError):
        ConsultaService(session).users_starting_with("  ")


def test_count_orders_for_user(session):
    svc = ConsultaService(session)

    assert svc.count_orders_for_user(5) == 1
    assert svc.count_orders_for_user(2) == 3
    assert svc.count_orders_for_user(999) == 0


def test_orders_sorted_desc_embeds_user(session):
    orders = ConsultaService(session).orders_sorted_desc_with_user()

    assert [o.total for o in orders] == [Decimal(t) for t in ("300", "250", "150", "120", "95", "80", "50")]
    assert orders[0].usuario.nombre == "Ricardo Fernández"
    assert all(o.usuario.id == o.id_usuario for o in orders)


def test_sum_all_order_totals(session):
    assert ConsultaService(session).sum_all_order_totals() == Decimal("1045.00")


def test_cheapest_order_with_user(session):
    order = ConsultaService(session).cheapest_order_with_user()

    assert order.producto == "Mouse Logitech"
    assert order.total == Decimal("50.00")
    assert order.usuario.id == 2


def test_cheapest_order_tie_keeps_lowest_id(session):
    PedidoService(session).create_order(
        PedidoCreate(producto="Cable USB", cantidad=1, total=Decimal("50.00"), id_usuario=3)
    )

    assert ConsultaService(session).cheapest_order_with_user().producto == "Mouse Logitech"


def test_grouped_by_user_name_partitions_joined_rows(session):
    svc = ConsultaService(session)
    grouped = svc.orders_grouped_by_user_name()

    assert list(grouped) == [
        "Ana Rodríguez",
        "Carlos Martínez",
        "María López",
        "Ricardo Fernández",
        "Roberto García",
    ]
    assert [r["producto"] for r in grouped["María López"]] == [
        "Laptop Dell",
        "Mouse Logitech",
        "Auriculares Bluetooth",
    ]
    for nombre, rows in grouped.items():
        assert all(r["nombre"] == nombre for r in rows)

    flattened = Counter(
        (r["nombre"], r["producto"], r["cantidad"], r["total"]) for rows in grouped.values() for r in rows
    )
    joined = Counter(
        (r["nombre_usuario"], r["producto"], r["cantidad"], r["total"]) for r in svc.orders_with_user_info()
    )
    assert flattened == joined


def test_empty_tables_give_empty_results(empty_session):
    svc = ConsultaService(empty_session)

    assert svc.orders_by_user() == []
    assert svc.orders_with_user_info() == []
    assert svc.count_orders_for_user() == 0
    assert svc.sum_all_order_totals() == Decimal("0.00")
    assert svc.cheapest_order_with_user() is None
    assert svc.orders_grouped_by_user_name() == {}


def test_storage_failure_raises_data_access_error():
    from sqlalchemy.orm import sessionmaker

    from consultas.data.database import build_engine

    engine = build_engine("sqlite://")
    db = sessionmaker(bind=engine)()
    try:
        with pytest.raises(DataAccessError):
            ConsultaService(db).sum_all_order_totals()
    finally:
        db.close()
        engine.dispose()


@pytest.mark.parametrize("user_id", [2**31, 2**70])
def test_user_id_above_integer_range_is_rejected(session, user_id):
    svc = ConsultaService(session)

    with pytest.raises(ValidationError):
        svc.count_orders_for_user(user_id)
    with pytest.raises(ValidationError):
        svc.orders_by_user(user_id)
