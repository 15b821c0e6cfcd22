# consultas/api/routers/consultas.py
from decimal import Decimal
from typing import Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from sqlalchemy.orm import Session

from consultas.data.database import get_db
from consultas.domain.catalogo import CONSULTAS, MENSAJE_CATALOGO
from consultas.domain.schemas import (
    CatalogoOut,
    ConteoPedidosOut,
    PedidoAgrupadoOut,
    PedidoConUsuarioOut,
    PedidoOut,
    PedidoUsuarioInfoOut,
    SumaTotalOut,
    UsuarioOut,
)
from consultas.services.consulta_service import ConsultaService

router = APIRouter(prefix="/consultas", tags=["consultas"])


def get_service(db: Session):
    return ConsultaService(db)


@router.get("", response_model=CatalogoOut)
def index(request: Request):
    """Lista las nueve consultas disponibles con su URL absoluta."""
    consultas = [
        {
            "id": c["id"],
            "nombre": c["nombre"],
            "descripcion": c["descripcion"],
            "url": str(request.url_for(c["ruta"])),
        }
        for c in CONSULTAS
    ]
    return {
        "mensaje": MENSAJE_CATALOGO,
        "total_consultas": len(consultas),
        "consultas": consultas,
    }


@router.get("/pedidos-usuario-2", response_model=List[PedidoOut])
def pedidos_usuario_2(db: Session = Depends(get_db)):
    return get_service(db).orders_by_user(2)


@router.get("/pedidos-con-usuarios", response_model=List[PedidoUsuarioInfoOut])
def pedidos_con_usuarios(db: Session = Depends(get_db)):
    return get_service(db).orders_with_user_info()


@router.get("/pedidos-rango-precio", response_model=List[PedidoOut])
def pedidos_rango_precio(
    minimo: Decimal = Query(Decimal("100")),
    maximo: Decimal = Query(Decimal("250")),
    db: Session = Depends(get_db),
):
    try:
        return get_service(db).orders_in_price_range(minimo, maximo)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/usuarios-con-r", response_model=List[UsuarioOut])
def usuarios_con_r(db: Session = Depends(get_db)):
    return get_service(db).users_starting_with("R")


@router.get("/contar-pedidos-usuario-5", response_model=ConteoPedidosOut)
def contar_pedidos_usuario_5(db: Session = Depends(get_db)):
    return {"usuario_id": 5, "total_pedidos": get_service(db).count_orders_for_user(5)}


@router.get("/pedidos-ordenados-desc", response_model=List[PedidoConUsuarioOut])
def pedidos_ordenados_desc(db: Session = Depends(get_db)):
    return get_service(db).orders_sorted_desc_with_user()


@router.get("/suma-total-pedidos", response_model=SumaTotalOut)
def suma_total_pedidos(db: Session = Depends(get_db)):
    return {
        "suma_total": get_service(db).sum_all_order_totals(),
        "mensaje": "Suma total de todos los pedidos en el sistema",
    }


@router.get("/pedido-mas-economico", response_model=Optional[PedidoConUsuarioOut])
def pedido_mas_economico(db: Session = Depends(get_db)):
    return get_service(db).cheapest_order_with_user()


@router.get("/pedidos-agrupados", response_model=Dict[str, List[PedidoAgrupadoOut]])
def pedidos_agrupados(db: Session = Depends(get_db)):
    return get_service(db).orders_grouped_by_user_name()


# =====================================================
# variantes con parametros (fuera del catalogo)
# =====================================================
@router.get("/pedidos-usuario/{usuario_id}", response_model=List[PedidoOut])
def pedidos_usuario(usuario_id: int, db: Session = Depends(get_db)):
    try:
        return get_service(db).orders_by_user(usuario_id)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/contar-pedidos-usuario/{usuario_id}", response_model=ConteoPedidosOut)
def contar_pedidos_usuario(usuario_id: int, db: Session = Depends(get_db)):
    try:
        total = get_service(db).count_orders_for_user(usuario_id)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"usuario_id": usuario_id, "total_pedidos": total}


@router.get("/usuarios-por-prefijo/{prefijo}", response_model=List[UsuarioOut])
def usuarios_por_prefijo(prefijo: str, db: Session = Depends(get_db)):
    try:
        return get_service(db).users_starting_with(prefijo)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
