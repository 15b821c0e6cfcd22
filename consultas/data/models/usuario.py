from datetime import datetime, timezone

from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import relationship

from consultas.data.database import Base


def _now():
    return datetime.now(timezone.utc)


class UsuarioModel(Base):
    __tablename__ = "usuarios"

    id = Column(Integer, primary_key=True)
    nombre = Column(String(255), nullable=False)
    correo = Column(String(255), nullable=False)
    telefono = Column(String(50), nullable=False)

    created_at = Column(DateTime(timezone=True), nullable=False, default=_now)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=_now, onupdate=_now)

    # solo lectura: el usuario no es dueño exclusivo de sus pedidos
    pedidos = relationship("PedidoModel", back_populates="usuario", order_by="PedidoModel.id")
