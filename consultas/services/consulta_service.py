# consultas/services/consulta_service.py
from decimal import Decimal, InvalidOperation

from sqlalchemy.orm import Session

from consultas.domain.errors import ValidationError
from consultas.repos.pedido_repo import PedidoRepo
from consultas.repos.usuario_repo import UsuarioRepo
from consultas.utils.logging import get_logger

logger = get_logger(__name__)

CENTAVOS = Decimal("0.01")
# rango de la columna Integer (id)
MAX_ID = 2**31 - 1


def _as_amount(value, name: str) -> Decimal:
    try:
        amount = Decimal(str(value))
    except (InvalidOperation, ValueError):
        raise ValidationError(f"{name} debe ser numérico")
    if not amount.is_finite():
        raise ValidationError(f"{name} debe ser finito")
    if amount < 0:
        raise ValidationError(f"{name} no puede ser negativo")
    return amount


def _check_user_id(user_id: int):
    if user_id < 1:
        raise ValidationError("El ID de usuario debe ser mayor que 0")
    if user_id > MAX_ID:
        raise ValidationError(f"El ID de usuario no puede superar {MAX_ID}")


class ConsultaService:
    """
    Fachada de las nueve consultas de solo lectura sobre usuarios y pedidos.
    Los valores por defecto reproducen las consultas fijas del catálogo.
    Cada método puede lanzar DataAccessError si la base no responde.
    """

    def __init__(self, db: Session):
        self.pedidos = PedidoRepo(db)
        self.usuarios = UsuarioRepo(db)

    # =====================================================
    # FILTROS
    # =====================================================
    def orders_by_user(self, user_id: int = 2):
        """Consulta 1: pedidos con id_usuario = user_id (lista vacía si no tiene)."""
        _check_user_id(user_id)
        logger.info(f"orders_by_user user_id={user_id}")
        return self.pedidos.list_by_user(user_id)

    def orders_in_price_range(self, minimum=100, maximum=250):
        """Consulta 3: pedidos con minimum <= total <= maximum."""
        low = _as_amount(minimum, "minimo")
        high = _as_amount(maximum, "maximo")
        if low > high:
            raise ValidationError("El mínimo no puede ser mayor que el máximo")
        logger.info(f"orders_in_price_range [{low}, {high}]")
        return self.pedidos.list_in_total_range(low, high)

    def users_starting_with(self, prefix: str = "R"):
        """Consulta 4: usuarios cuyo nombre empieza con prefix, sin distinguir mayúsculas."""
        if not prefix or not prefix.strip():
            raise ValidationError("El prefijo no puede estar vacío")
        logger.info(f"users_starting_with prefix={prefix!r}")
        return self.usuarios.list_by_name_prefix(prefix)

    # =====================================================
    # JOINS
    # =====================================================
    def orders_with_user_info(self):
        """Consulta 2: JOIN pedidos x usuarios con producto, cantidad, total, nombre y correo."""
        logger.info("orders_with_user_info")
        return self.pedidos.list_joined_user_info()

    def orders_sorted_desc_with_user(self):
        """Consulta 6: todos los pedidos con su usuario, total descendente."""
        logger.info("orders_sorted_desc_with_user")
        return self.pedidos.list_with_user_by_total_desc()

    def cheapest_order_with_user(self):
        """
        Consulta 8: pedido de menor total con su usuario, o None si no hay pedidos.
        Empates: gana el de menor id.
        """
        logger.info("cheapest_order_with_user")
        return self.pedidos.first_cheapest_with_user()

    def orders_grouped_by_user_name(self):
        """
        Consulta 9: JOIN ordenado por nombre y agrupado por nombre de usuario.

        Devuelve {nombre: [{nombre, producto, cantidad, total}, ...]}; las claves
        y las filas de cada grupo conservan el orden de la consulta.
        """
        logger.info("orders_grouped_by_user_name")
        grouped = {}
        for row in self.pedidos.list_joined_by_user_name():
            grouped.setdefault(row["nombre"], []).append(row)
        return grouped

    # =====================================================
    # AGREGADOS
    # =====================================================
    def count_orders_for_user(self, user_id: int = 5) -> int:
        """Consulta 5: número de pedidos del usuario (0 si no tiene)."""
        _check_user_id(user_id)
        logger.info(f"count_orders_for_user user_id={user_id}")
        return self.pedidos.count_by_user(user_id)

    def sum_all_order_totals(self) -> Decimal:
        """Consulta 7: suma de todos los totales (0.00 con la tabla vacía)."""
        logger.info("sum_all_order_totals")
        total = self.pedidos.sum_totals()
        return Decimal(str(total or 0)).quantize(CENTAVOS)
