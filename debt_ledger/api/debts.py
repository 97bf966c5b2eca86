import logging
from fastapi import APIRouter, Depends, Query, Response, status
from sqlmodel import Session, col, select
from typing import List

from debt_ledger.database import get_session
from debt_ledger.models.debt import Debt
from debt_ledger.models.enums import DebtType, TransactionKind
from debt_ledger.models.transaction import Transaction
from debt_ledger.schemas.debt import AmountUpdate, DebtCreate, DebtRead
from debt_ledger.schemas.transaction import TransactionRead
from debt_ledger.utils.debt_helpers import (
    find_debt_by_person,
    get_debt_or_404,
    record_transaction,
    set_debt_amount,
)
from debt_ledger.utils.validation import parse_amount, parse_debt_type, require_debt_fields

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/debts", tags=["debts"])


# Listar (filtro por tipo y búsqueda por nombre)
@router.get("", response_model=List[DebtRead])
@router.get("/", response_model=List[DebtRead])
def list_debts(
    type_: str = Query("me_deben", alias="type"),
    q: str = Query(""),
    session: Session = Depends(get_session),
):
    try:
        debt_type = DebtType(type_ or "me_deben")
    except ValueError:
        return []  # ninguna deuda puede tener otro tipo

    statement = select(Debt).where(Debt.type == debt_type)
    if q:
        statement = statement.where(col(Debt.person).icontains(q, autoescape=True))

    return session.exec(statement.order_by(Debt.person)).all()


@router.get("/{debt_id}", response_model=DebtRead)
def get_debt(debt_id: int, session: Session = Depends(get_session)):
    return get_debt_or_404(session, debt_id)


# Crear o sumar si ya existe la misma persona con el mismo tipo
@router.post("", response_model=DebtRead)
@router.post("/", response_model=DebtRead)
def create_or_accumulate_debt(
    debt_data: DebtCreate,
    response: Response,
    session: Session = Depends(get_session),
):
    require_debt_fields(debt_data.name, debt_data.amount, debt_data.type)
    amount = parse_amount(debt_data.amount)
    debt_type = parse_debt_type(debt_data.type)
    person = debt_data.name.strip()

    debt = find_debt_by_person(session, person, debt_type)
    if debt:
        set_debt_amount(session, debt, debt.amount + amount)
        record_transaction(session, debt, TransactionKind.aumento, amount, "Aumento mediante API")
        session.commit()
        session.refresh(debt)
        logger.info("Deuda %s (%s) aumentada en %s", debt.id, debt.person, amount)
        return debt

    debt = Debt(person=person, type=debt_type, amount=amount)
    session.add(debt)
    session.flush()  # asigna debt.id para el movimiento

    record_transaction(session, debt, TransactionKind.creacion, amount, "Creación mediante API")
    session.commit()
    session.refresh(debt)
    logger.info("Deuda %s creada para %s (%s) por %s", debt.id, debt.person, debt.type.value, amount)

    response.status_code = status.HTTP_201_CREATED
    return debt


@router.put("/{debt_id}/increase", response_model=DebtRead)
def increase_debt(debt_id: int, data: AmountUpdate, session: Session = Depends(get_session)):
    amount = parse_amount(data.amount)
    debt = get_debt_or_404(session, debt_id, for_update=True)

    set_debt_amount(session, debt, debt.amount + amount)
    record_transaction(session, debt, TransactionKind.aumento, amount, "Aumento por endpoint /increase")
    session.commit()
    session.refresh(debt)

    logger.info("Deuda %s aumentada en %s", debt_id, amount)
    return debt


# Pago parcial: el saldo nunca queda negativo, el exceso se descarta
@router.put("/{debt_id}/pay", response_model=DebtRead)
def pay_debt(debt_id: int, data: AmountUpdate, session: Session = Depends(get_session)):
    amount = parse_amount(data.amount)
    debt = get_debt_or_404(session, debt_id, for_update=True)

    set_debt_amount(session, debt, debt.amount - amount)
    # Se registra el monto recibido, no la diferencia aplicada
    record_transaction(session, debt, TransactionKind.pago, amount, "Pago parcial")
    session.commit()
    session.refresh(debt)

    logger.info("Pago de %s sobre la deuda %s, saldo %s", amount, debt_id, debt.amount)
    return debt


@router.put("/{debt_id}/payall", response_model=DebtRead)
def pay_all_debt(debt_id: int, session: Session = Depends(get_session)):
    debt = get_debt_or_404(session, debt_id, for_update=True)

    previous_amount = debt.amount
    if previous_amount == 0:
        return debt  # ya estaba en 0, no se registra movimiento

    set_debt_amount(session, debt, 0.0)
    record_transaction(session, debt, TransactionKind.pago_total, previous_amount, "Pago total")
    session.commit()
    session.refresh(debt)

    logger.info("Deuda %s pagada por completo (%s)", debt_id, previous_amount)
    return debt


# Eliminar: el historial de movimientos se conserva
@router.delete("/{debt_id}")
def delete_debt(debt_id: int, session: Session = Depends(get_session)):
    debt = session.get(Debt, debt_id)
    if debt:
        session.delete(debt)
        session.commit()
        logger.info("Deuda %s eliminada", debt_id)
    return {"ok": True}


@router.get("/{debt_id}/transactions", response_model=List[TransactionRead])
def get_debt_transactions(debt_id: int, session: Session = Depends(get_session)):
    get_debt_or_404(session, debt_id)

    return session.exec(
        select(Transaction)
        .where(Transaction.debt_id == debt_id)
        .order_by(col(Transaction.created_at).desc(), col(Transaction.id).desc())
    ).all()
