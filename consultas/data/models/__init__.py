#importa todos los modelos para que SQLAlchemy los registre en Base.metadata

from consultas.data.models.usuario import UsuarioModel
from consultas.data.models.pedido import PedidoModel

__all__ = ["UsuarioModel", "PedidoModel"]
