# consultas/domain/catalogo.py
"""
Catalogo estatico de las nueve consultas expuestas en /consultas.

`ruta` es el nombre del endpoint en el router; la URL absoluta se arma
con la URL base de cada request.
"""

MENSAJE_CATALOGO = "Sistema de Consultas - FastAPI y SQLAlchemy ORM"

CONSULTAS = [
    {
        "id": 1,
        "nombre": "Pedidos del usuario con ID 2",
        "descripcion": "Recupera todos los pedidos asociados al usuario con ID 2",
        "ruta": "pedidos_usuario_2",
    },
    {
        "id": 2,
        "nombre": "Pedidos con información de usuarios",
        "descripcion": "Muestra pedidos con datos completos de los usuarios (JOIN)",
        "ruta": "pedidos_con_usuarios",
    },
    {
        "id": 3,
        "nombre": "Pedidos entre $100 y $250",
        "descripcion": "Filtra pedidos dentro del rango de precio especificado",
        "ruta": "pedidos_rango_precio",
    },
    {
        "id": 4,
        "nombre": 'Usuarios que comienzan con "R"',
        "descripcion": "Busca usuarios cuyo nombre inicia con la letra R",
        "ruta": "usuarios_con_r",
    },
    {
        "id": 5,
        "nombre": "Contar pedidos del usuario con ID 5",
        "descripcion": "Cuenta el número total de pedidos del usuario con ID 5",
        "ruta": "contar_pedidos_usuario_5",
    },
    {
        "id": 6,
        "nombre": "Pedidos ordenados por total descendente",
        "descripcion": "Lista todos los pedidos ordenados de mayor a menor precio",
        "ruta": "pedidos_ordenados_desc",
    },
    {
        "id": 7,
        "nombre": "Suma total de todos los pedidos",
        "descripcion": "Calcula el valor total de todos los pedidos en el sistema",
        "ruta": "suma_total_pedidos",
    },
    {
        "id": 8,
        "nombre": "Pedido más económico con usuario",
        "descripcion": "Encuentra el pedido de menor valor con información del usuario",
        "ruta": "pedido_mas_economico",
    },
    {
        "id": 9,
        "nombre": "Pedidos agrupados por usuario",
        "descripcion": "Agrupa todos los pedidos organizados por usuario",
        "ruta": "pedidos_agrupados",
    },
]
