# consultas/repos/base.py
import functools

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from consultas.domain.errors import DataAccessError
from consultas.utils.logging import get_logger

logger = get_logger(__name__)


def storage_errors(fn):
    """Convierte cualquier fallo de SQLAlchemy en DataAccessError."""

    @functools.wraps(fn)
    def wrapper(self, *args, **kwargs):
        try:
            return fn(self, *args, **kwargs)
        except SQLAlchemyError as e:
            logger.error(f"{type(self).__name__}.{fn.__name__} failed: {e}")
            try:
                self.db.rollback()
            except SQLAlchemyError as rollback_error:
                logger.warning(f"Rollback failed: {rollback_error}")
            raise DataAccessError(f"{fn.__name__}: {e.__class__.__name__}") from e

    return wrapper


class BaseRepo:
    def __init__(self, db: Session):
        self.db = db
