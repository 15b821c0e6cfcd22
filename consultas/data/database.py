# consultas/data/database.py
from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from consultas.utils.retry import db_retry
from consultas.utils.settings import DATABASE_URL, QUERY_TIMEOUT_SECONDS
from consultas.utils.logging import get_logger

logger = get_logger(__name__)

Base = declarative_base()


def _enable_sqlite_fks(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(url: str, timeout: float = QUERY_TIMEOUT_SECONDS) -> Engine:
    """
    Crea el engine aplicando el limite de tiempo por consulta.

    - PostgreSQL: statement_timeout en milisegundos para cada conexion.
    - SQLite: timeout de bloqueo; las bases en memoria comparten una sola conexion.
    """
    backend = make_url(url).get_backend_name()

    if backend == "sqlite":
        kwargs = {"connect_args": {"check_same_thread": False, "timeout": timeout}}
        if url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
        engine = create_engine(url, **kwargs)
        event.listen(engine, "connect", _enable_sqlite_fks)
        return engine

    if backend == "postgresql":
        options = f"-c statement_timeout={int(timeout * 1000)}"
        return create_engine(url, pool_pre_ping=True, connect_args={"options": options})

    return create_engine(url, pool_pre_ping=True)


engine = build_engine(DATABASE_URL)

SessionLocal = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@db_retry()
def wait_for_db(bind: Engine = engine):
    with bind.connect() as conn:
        conn.execute(text("SELECT 1"))
    logger.info("Database reachable")


def init_db(bind: Engine = engine):
    # importa los modelos para registrarlos en Base.metadata
    import consultas.data.models  # noqa: F401

    wait_for_db(bind)
    Base.metadata.create_all(bind=bind)
    logger.info(f"Tables ready: {list(Base.metadata.tables.keys())}")
