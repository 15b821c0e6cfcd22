# consultas/services/pedido_service.py
from sqlalchemy.orm import Session

from consultas.data.models.pedido import PedidoModel
from consultas.domain.errors import ValidationError
from consultas.domain.schemas import PedidoCreate, PedidoOut
from consultas.repos.pedido_repo import PedidoRepo
from consultas.repos.usuario_repo import UsuarioRepo
from consultas.utils.logging import get_logger

logger = get_logger(__name__)


class PedidoService:
    """
    Alta de pedidos. Solo la usa el seeder: la API HTTP no expone escrituras.
    """

    def __init__(self, db: Session):
        self.repo = PedidoRepo(db)
        self.usuarios = UsuarioRepo(db)

    def create_order(self, payload: PedidoCreate) -> PedidoOut:
        """
        Use Case: crear un pedido.

        Validación:
        - cantidad >= 1 y total >= 0 (schema)
        - el usuario dueño existe
        """
        if not self.usuarios.get_user(payload.id_usuario):
            raise ValidationError(f"El usuario {payload.id_usuario} no existe")

        order = self.repo.create_order(
            PedidoModel(
                producto=payload.producto,
                cantidad=payload.cantidad,
                total=payload.total,
                id_usuario=payload.id_usuario,
            )
        )

        logger.info(f"Pedido {order.id} creado para usuario {order.id_usuario}")

        return PedidoOut.model_validate(order)
