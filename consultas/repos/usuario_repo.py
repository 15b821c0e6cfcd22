# consultas/repos/usuario_repo.py
from sqlalchemy import select

from consultas.data.models.usuario import UsuarioModel
from consultas.repos.base import BaseRepo, storage_errors


class UsuarioRepo(BaseRepo):
    @storage_errors
    def get_user(self, user_id: int) -> UsuarioModel | None:
        return self.db.get(UsuarioModel, user_id)

    @storage_errors
    def has_users(self) -> bool:
        return self.db.execute(select(UsuarioModel.id).limit(1)).first() is not None

    @storage_errors
    def list_by_name_prefix(self, prefix: str) -> list[UsuarioModel]:
        # istartswith -> lower(nombre) LIKE lower(:prefix) || '%', comodines escapados
        stmt = (
            select(UsuarioModel)
            .where(UsuarioModel.nombre.istartswith(prefix, autoescape=True))
            .order_by(UsuarioModel.nombre, UsuarioModel.id)
        )
        return list(self.db.execute(stmt).scalars().all())

    @storage_errors
    def create_user(self, user: UsuarioModel) -> UsuarioModel:
        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)
        return user
