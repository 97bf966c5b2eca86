# debt_ledger/models/transaction.py

from sqlmodel import SQLModel, Field
from typing import Optional
from datetime import datetime, timezone

from debt_ledger.models.enums import TransactionKind

class Transaction(SQLModel, table=True):
    __tablename__ = "transactions"

    id: Optional[int] = Field(default=None, primary_key=True)
    # Sin foreign key: al borrar una deuda su historial se conserva
    debt_id: int = Field(index=True)
    kind: TransactionKind
    amount: float
    note: Optional[str] = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
