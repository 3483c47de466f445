from enum import Enum


class PaymentMethod(Enum):
    CASH = 'CASH'
    CARD = 'CARD'
