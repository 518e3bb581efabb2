# services/ledger.py
import logging

from models.transaction import Transaction
from services.errors import LedgerFull
from services.rates import DEFAULT_MAX_TRANSACTIONS

logger = logging.getLogger(__name__)


class TransactionLedger:
    """Append-only transaction history. Once full it refuses new entries."""

    def __init__(self, capacity: int = DEFAULT_MAX_TRANSACTIONS):
        self.capacity = capacity
        self._entries = []

    def __len__(self):
        return len(self._entries)

    def __iter__(self):
        return iter(self._entries)

    @property
    def is_full(self) -> bool:
        return len(self._entries) >= self.capacity

    def ensure_capacity(self):
        if self.is_full:
            logger.warning(f"Ledger full ({self.capacity} transactions)")
            raise LedgerFull(f"Transaction ledger is full ({self.capacity} entries)")

    def record(self, user_id, amount, liters, payment_method, fee, discount, timestamp) -> Transaction:
        self.ensure_capacity()
        txn = Transaction(
            transaction_id=len(self._entries) + 1,
            user_id=user_id,
            amount=amount,
            liters=liters,
            payment_method=payment_method,
            fee=fee,
            discount=discount,
            timestamp=timestamp,
        )
        self._entries.append(txn)
        return txn

    def for_user(self, user_id):
        return [t for t in self._entries if t.user_id == user_id]

    def entries(self):
        return list(self._entries)
