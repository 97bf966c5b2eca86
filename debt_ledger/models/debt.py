# debt_ledger/models/debt.py

from sqlmodel import SQLModel, Field
from typing import Optional
from datetime import datetime, timezone

from debt_ledger.models.enums import DebtType

class Debt(SQLModel, table=True):
    __tablename__ = "debts"

    id: Optional[int] = Field(default=None, primary_key=True)
    person: str = Field(index=True)  # Ej: "Ana", "Juan Pérez"
    type: DebtType = Field(index=True)
    amount: float = 0.0  # Saldo pendiente, nunca negativo
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
