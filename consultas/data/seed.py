# consultas/data/seed.py
from decimal import Decimal

from sqlalchemy.orm import Session

from consultas.domain.schemas import PedidoCreate, UsuarioCreate
from consultas.services.pedido_service import PedidoService
from consultas.services.usuario_service import UsuarioService
from consultas.utils.logging import get_logger

logger = get_logger(__name__)

# incluye dos nombres con R (Roberto y Ricardo)
USUARIOS = [
    {"nombre": "Roberto García", "correo": "roberto@example.com", "telefono": "2452-0101"},
    {"nombre": "María López", "correo": "maria@example.com", "telefono": "7458-0102"},
    {"nombre": "Carlos Martínez", "correo": "carlos@example.com", "telefono": "2365-0103"},
    {"nombre": "Ana Rodríguez", "correo": "ana@example.com", "telefono": "7496-0104"},
    {"nombre": "Ricardo Fernández", "correo": "ricardo@example.com", "telefono": "2147-0105"},
]

# posicion en USUARIOS (desde 1) -> dueño del pedido
PEDIDOS = [
    {"producto": "Laptop Dell", "cantidad": 1, "total": Decimal("250.00"), "usuario": 2},
    {"producto": "Mouse Logitech", "cantidad": 2, "total": Decimal("50.00"), "usuario": 2},
    {"producto": "Teclado Mecánico", "cantidad": 1, "total": Decimal("150.00"), "usuario": 1},
    {"producto": "Monitor Samsung", "cantidad": 1, "total": Decimal("300.00"), "usuario": 5},
    {"producto": "Webcam HD", "cantidad": 1, "total": Decimal("80.00"), "usuario": 3},
    {"producto": "Auriculares Bluetooth", "cantidad": 1, "total": Decimal("120.00"), "usuario": 2},
    {"producto": "Disco Duro Externo", "cantidad": 1, "total": Decimal("95.00"), "usuario": 4},
]


def seed(db: Session) -> bool:
    """Inserta usuarios y pedidos de ejemplo. No hace nada si ya hay usuarios."""
    usuarios = UsuarioService(db)
    if usuarios.has_users():
        logger.info("Seed skipped: usuarios already populated")
        return False

    ids = [usuarios.create_user(UsuarioCreate(**data)).id for data in USUARIOS]

    pedidos = PedidoService(db)
    for data in PEDIDOS:
        pedidos.create_order(
            PedidoCreate(
                producto=data["producto"],
                cantidad=data["cantidad"],
                total=data["total"],
                id_usuario=ids[data["usuario"] - 1],
            )
        )

    logger.info(f"Seeded {len(USUARIOS)} usuarios and {len(PEDIDOS)} pedidos")
    return True


if __name__ == "__main__":
    from consultas.data.database import SessionLocal, init_db

    init_db()
    db = SessionLocal()
    try:
        seed(db)
    finally:
        db.close()
