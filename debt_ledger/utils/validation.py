import math
from typing import Any, Optional

from debt_ledger.core.errors import ValidationError
from debt_ledger.models.enums import DebtType


def parse_amount(value: Any) -> float:
    """
    Convierte el monto recibido (número o texto numérico) a float.
    Solo se aceptan valores finitos mayores a cero.
    """
    if value is None or isinstance(value, bool):
        raise ValidationError("amount inválido")

    if isinstance(value, str):
        value = value.strip()

    try:
        amount = float(value)
    except (TypeError, ValueError):
        raise ValidationError("amount inválido")

    if not math.isfinite(amount) or amount <= 0:
        raise ValidationError("amount inválido")
    return amount


def parse_debt_type(value: Optional[str]) -> DebtType:
    try:
        return DebtType(value)
    except ValueError:
        allowed = ", ".join(t.value for t in DebtType)
        raise ValidationError(f"type inválido: debe ser uno de {allowed}")


def require_debt_fields(name: Optional[str], amount: Any, type_: Optional[str]) -> None:
    if not name or not name.strip() or amount is None or not type_:
        raise ValidationError("Faltan campos: name, amount, type")
