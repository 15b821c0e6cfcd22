from sqlalchemy.orm import Session
from consultas.data.models.usuario import UsuarioModel
from consultas.repos.usuario_repo import UsuarioRepo
from consultas.domain.schemas import UsuarioCreate, UsuarioOut


class UsuarioService:
    def __init__(self, db: Session):
        self.repo = UsuarioRepo(db)

    def create_user(self, payload: UsuarioCreate) -> UsuarioOut:
        user = UsuarioModel(
            nombre=payload.nombre,
            correo=payload.correo,
            telefono=payload.telefono,
        )
        created = self.repo.create_user(user)
        return UsuarioOut.model_validate(created)

    def has_users(self) -> bool:
        return self.repo.has_users()
