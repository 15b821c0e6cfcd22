# consultas/domain/schemas.py
from pydantic import BaseModel, Field, ConfigDict
from typing import List, Optional
from decimal import Decimal
from datetime import datetime


class UsuarioOut(BaseModel):
    """Schema de usuario (response)."""

    id: int
    nombre: str
    correo: str
    telefono: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class PedidoOut(BaseModel):
    """Schema de pedido (response)."""

    id: int
    producto: str
    cantidad: int
    total: Decimal
    id_usuario: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class PedidoConUsuarioOut(PedidoOut):
    """Pedido con su usuario embebido (eager loading)."""

    usuario: UsuarioOut


class PedidoUsuarioInfoOut(BaseModel):
    """Fila del JOIN pedidos x usuarios."""

    producto: str
    cantidad: int
    total: Decimal
    nombre_usuario: str
    correo_usuario: str


class PedidoAgrupadoOut(BaseModel):
    """Fila dentro de un grupo por nombre de usuario."""

    nombre: str
    producto: str
    cantidad: int
    total: Decimal


class ConteoPedidosOut(BaseModel):
    usuario_id: int
    total_pedidos: int


class SumaTotalOut(BaseModel):
    suma_total: Decimal
    mensaje: str


class ConsultaOut(BaseModel):
    id: int
    nombre: str
    descripcion: str
    url: str


class CatalogoOut(BaseModel):
    mensaje: str
    total_consultas: int
    consultas: List[ConsultaOut]


class PedidoCreate(BaseModel):
    """Schema para insertar un pedido (seeder)."""

    producto: str = Field(..., min_length=1, max_length=255, description="Nombre del producto")
    cantidad: int = Field(..., ge=1, description="Cantidad (>= 1)")
    total: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2, description="Total (>= 0)")
    id_usuario: int = Field(..., gt=0, description="ID del usuario dueño")


class UsuarioCreate(BaseModel):
    """Schema para insertar un usuario (seeder)."""

    nombre: str = Field(..., min_length=1, max_length=255)
    correo: str = Field(..., min_length=3, max_length=255)
    telefono: str = Field(..., min_length=1, max_length=50)
