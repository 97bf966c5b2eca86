from debt_ledger.models.debt import Debt
from debt_ledger.models.enums import DebtType, TransactionKind
from debt_ledger.models.transaction import Transaction

__all__ = ["Debt", "DebtType", "Transaction", "TransactionKind"]
