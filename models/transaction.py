import datetime
from dataclasses import dataclass
from enum import Enum


class PaymentMethod(Enum):
    CASH = "Cash"
    DIGITAL = "Digital"

    @classmethod
    def parse(cls, value):
        """Accept a PaymentMethod or its case-insensitive name ("cash", "Digital")."""
        if isinstance(value, cls):
            return value
        text = str(value or "").strip().lower()
        for method in cls:
            if method.value.lower() == text:
                return method
        return None


@dataclass(frozen=True)
class Transaction:
    transaction_id: int
    user_id: int
    amount: float           # final amount charged
    liters: float
    payment_method: PaymentMethod
    fee: float
    discount: float
    timestamp: datetime.datetime

    def to_dict(self):
        return {
            "transaction_id": self.transaction_id,
            "user_id": self.user_id,
            "amount": self.amount,
            "liters": self.liters,
            "payment_method": self.payment_method.value,
            "fee": self.fee,
            "discount": self.discount,
            "timestamp": self.timestamp.isoformat(),
        }
