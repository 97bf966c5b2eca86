from enum import Enum

class DebtType(str, Enum):
    me_deben = "me_deben"  # me deben a mí
    yo_debo = "yo_debo"    # yo le debo a otra persona

class TransactionKind(str, Enum):
    creacion = "creacion"
    aumento = "aumento"
    pago = "pago"
    pago_total = "pago_total"
