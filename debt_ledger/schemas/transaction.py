# debt_ledger/schemas/transaction.py

from pydantic import BaseModel, ConfigDict
from datetime import datetime
from typing import Optional

from debt_ledger.models.enums import TransactionKind

class TransactionRead(BaseModel):
    id: int
    debt_id: int
    kind: TransactionKind
    amount: float
    note: Optional[str] = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
