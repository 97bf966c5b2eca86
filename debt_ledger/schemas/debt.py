# debt_ledger/schemas/debt.py

from pydantic import BaseModel, ConfigDict
from typing import Any, Optional
from datetime import datetime

from debt_ledger.models.enums import DebtType

class DebtCreate(BaseModel):
    # Se validan a mano en utils.validation para responder 400 con el mensaje propio
    name: Optional[str] = None
    amount: Any = None
    type: Optional[str] = None

class DebtRead(BaseModel):
    id: int
    person: str
    type: DebtType
    amount: float
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)

class AmountUpdate(BaseModel):
    amount: Any = None
