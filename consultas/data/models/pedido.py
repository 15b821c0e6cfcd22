from sqlalchemy import Column, Integer, ForeignKey, String, DateTime, Numeric, CheckConstraint
from sqlalchemy.orm import relationship

from consultas.data.database import Base
from consultas.data.models.usuario import _now


class PedidoModel(Base):
    __tablename__ = "pedidos"

    id = Column(Integer, primary_key=True)
    producto = Column(String(255), nullable=False)
    cantidad = Column(Integer, nullable=False)
    total = Column(Numeric(10, 2), nullable=False)
    id_usuario = Column(Integer, ForeignKey("usuarios.id"), nullable=False, index=True)

    created_at = Column(DateTime(timezone=True), nullable=False, default=_now)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=_now, onupdate=_now)

    usuario = relationship("UsuarioModel", back_populates="pedidos")

    __table_args__ = (
        CheckConstraint("cantidad >= 1", name="ck_pedidos_cantidad_positiva"),
        CheckConstraint("total >= 0", name="ck_pedidos_total_no_negativo"),
    )
