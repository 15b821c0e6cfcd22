# consultas/main.py
import uvicorn

from consultas.api import create_app
from consultas.data.database import SessionLocal, init_db
from consultas.data.seed import seed
from consultas.utils.settings import SEED_ON_STARTUP
from consultas.utils.logging import get_logger

logger = get_logger(__name__)

app = create_app()


@app.on_event("startup")
def startup():
    logger.info("Initializing database")
    init_db()

    if not SEED_ON_STARTUP:
        return

    db = SessionLocal()
    try:
        seed(db)
    finally:
        db.close()


if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8000)
