# consultas/repos/pedido_repo.py
from decimal import Decimal

from sqlalchemy import select, func
from sqlalchemy.orm import selectinload

from consultas.data.models.pedido import PedidoModel
from consultas.data.models.usuario import UsuarioModel
from consultas.repos.base import BaseRepo, storage_errors


class PedidoRepo(BaseRepo):
    @storage_errors
    def create_order(self, order: PedidoModel) -> PedidoModel:
        self.db.add(order)
        self.db.commit()
        self.db.refresh(order)
        return order

    @storage_errors
    def list_by_user(self, user_id: int) -> list[PedidoModel]:
        stmt = (
            select(PedidoModel)
            .where(PedidoModel.id_usuario == user_id)
            .order_by(PedidoModel.id)
        )
        return list(self.db.execute(stmt).scalars().all())

    @storage_errors
    def list_in_total_range(self, minimum: Decimal, maximum: Decimal) -> list[PedidoModel]:
        stmt = (
            select(PedidoModel)
            .where(PedidoModel.total.between(minimum, maximum))
            .order_by(PedidoModel.id)
        )
        return list(self.db.execute(stmt).scalars().all())

    @storage_errors
    def count_by_user(self, user_id: int) -> int:
        stmt = select(func.count(PedidoModel.id)).where(PedidoModel.id_usuario == user_id)
        return self.db.execute(stmt).scalar_one()

    @storage_errors
    def sum_totals(self) -> Decimal:
        stmt = select(func.coalesce(func.sum(PedidoModel.total), 0))
        return self.db.execute(stmt).scalar_one()

    @storage_errors
    def list_with_user_by_total_desc(self) -> list[PedidoModel]:
        stmt = (
            select(PedidoModel)
            .options(selectinload(PedidoModel.usuario))
            .order_by(PedidoModel.total.desc(), PedidoModel.id)
        )
        return list(self.db.execute(stmt).scalars().all())

    @storage_errors
    def first_cheapest_with_user(self) -> PedidoModel | None:
        stmt = (
            select(PedidoModel)
            .options(selectinload(PedidoModel.usuario))
            .order_by(PedidoModel.total.asc(), PedidoModel.id)
            .limit(1)
        )
        return self.db.execute(stmt).scalars().first()

    @storage_errors
    def list_joined_user_info(self) -> list[dict]:
        stmt = (
            select(
                PedidoModel.producto,
                PedidoModel.cantidad,
                PedidoModel.total,
                UsuarioModel.nombre.label("nombre_usuario"),
                UsuarioModel.correo.label("correo_usuario"),
            )
            .join(UsuarioModel, PedidoModel.id_usuario == UsuarioModel.id)
            .order_by(PedidoModel.id)
        )
        return [dict(row) for row in self.db.execute(stmt).mappings().all()]

    @storage_errors
    def list_joined_by_user_name(self) -> list[dict]:
        stmt = (
            select(
                UsuarioModel.nombre,
                PedidoModel.producto,
                PedidoModel.cantidad,
                PedidoModel.total,
            )
            .join(UsuarioModel, PedidoModel.id_usuario == UsuarioModel.id)
            .order_by(UsuarioModel.nombre, PedidoModel.id)
        )
        return [dict(row) for row in self.db.execute(stmt).mappings().all()]
