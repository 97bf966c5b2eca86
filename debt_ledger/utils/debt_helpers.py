import datetime as dt
import math
from typing import Optional

from sqlalchemy import func
from sqlmodel import Session, select

from debt_ledger.core.errors import NotFoundError, ValidationError
from debt_ledger.models.debt import Debt
from debt_ledger.models.enums import DebtType, TransactionKind
from debt_ledger.models.transaction import Transaction


def get_debt_or_404(session: Session, debt_id: int, *, for_update: bool = False) -> Debt:
    """
    Busca la deuda por id. Con ``for_update`` la fila queda bloqueada hasta el
    commit, así dos operaciones sobre la misma deuda no pisan el saldo.
    """
    statement = select(Debt).where(Debt.id == debt_id)
    if for_update:
        statement = statement.with_for_update()

    debt = session.exec(statement).first()
    if not debt:
        raise NotFoundError("Deuda no encontrada")
    return debt


def find_debt_by_person(session: Session, person: str, type_: DebtType) -> Optional[Debt]:
    # Ambos lados se pasan a minúsculas en la base de datos
    return session.exec(
        select(Debt)
        .where(func.lower(Debt.person) == func.lower(person), Debt.type == type_)
        .order_by(Debt.id)
        .limit(1)
        .with_for_update()
    ).first()


def set_debt_amount(session: Session, debt: Debt, new_amount: float) -> None:
    if not math.isfinite(new_amount):
        raise ValidationError("amount inválido")

    debt.amount = max(new_amount, 0.0)
    debt.updated_at = dt.datetime.now(dt.timezone.utc)
    session.add(debt)


def record_transaction(
    session: Session,
    debt: Debt,
    kind: TransactionKind,
    amount: float,
    note: str,
) -> Transaction:
    """Agrega el movimiento al historial; se confirma junto con la deuda."""
    tx = Transaction(debt_id=debt.id, kind=kind, amount=amount, note=note)
    session.add(tx)
    return tx
