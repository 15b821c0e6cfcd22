# consultas/utils/retry.py
from tenacity import retry, stop_after_attempt, wait_exponential, retry_if_exception_type
from sqlalchemy.exc import OperationalError

from consultas.utils.settings import DB_CONNECT_ATTEMPTS


def db_retry(attempts: int | None = None):
    # solo al arrancar: la base en el contenedor puede no aceptar conexiones todavia
    return retry(
        reraise=True,
        stop=stop_after_attempt(attempts or DB_CONNECT_ATTEMPTS),
        wait=wait_exponential(multiplier=0.5, min=0.5, max=5),
        retry=retry_if_exception_type(OperationalError),
    )
