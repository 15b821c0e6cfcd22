# consultas/domain/errors.py


class DataAccessError(RuntimeError):
    """La base de datos no responde o la consulta fallo."""


class ValidationError(ValueError):
    """Parametro de consulta o de insercion fuera de rango."""
