class LedgerError(Exception):
    """Error de dominio que se traduce a una respuesta ``{"error": ...}``."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(LedgerError):
    """Campos faltantes o inválidos en la petición."""

    status_code = 400


class NotFoundError(LedgerError):
    """La deuda referenciada no existe."""

    status_code = 404
