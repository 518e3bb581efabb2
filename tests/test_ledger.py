"""Tests for the bounded transaction ledger."""

import pytest

from models.transaction import PaymentMethod
from services.errors import LedgerFull
from services.kiosk import Kiosk
from services.ledger import TransactionLedger


def test_ids_are_sequential(clock):
    ledger = TransactionLedger(capacity=3)
    first = ledger.record(1, 2.0, 1, PaymentMethod.CASH, 0.0, 0.0, clock.now)
    second = ledger.record(2, 3.0, 1, PaymentMethod.DIGITAL, 1.0, 0.0, clock.now)
    assert (first.transaction_id, second.transaction_id) == (1, 2)
    assert ledger.for_user(2) == [second]


def test_transactions_are_immutable(clock):
    ledger = TransactionLedger()
    txn = ledger.record(1, 2.0, 1, PaymentMethod.CASH, 0.0, 0.0, clock.now)
    with pytest.raises(AttributeError):
        txn.amount = 0.0


def test_full_ledger_rejects_purchase(clock):
    """Once full, purchases fail with LedgerFull and nothing else moves."""
    kiosk = Kiosk(max_transactions=2, clock=clock)
    user_id = kiosk.register_user("Asha", "9876543210")
    kiosk.top_up_wallet(user_id, 100)
    kiosk.purchase_water(user_id, 1, "cash")
    kiosk.purchase_water(user_id, 1, "digital")
    before = kiosk.get_transactions()
    user = kiosk.users.get(user_id)
    wallet, points, count = user.wallet_balance, user.loyalty_points, user.transaction_count

    with pytest.raises(LedgerFull):
        kiosk.purchase_water(user_id, 1, "digital")

    assert kiosk.get_transactions() == before
    assert (user.wallet_balance, user.loyalty_points, user.transaction_count) == (wallet, points, count)
    assert kiosk.get_analytics().total_transactions == 2
    assert kiosk.get_analytics().totals.total_revenue == pytest.approx(4.0)


def test_direct_record_when_full(clock):
    ledger = TransactionLedger(capacity=1)
    ledger.record(1, 2.0, 1, PaymentMethod.CASH, 0.0, 0.0, clock.now)
    with pytest.raises(LedgerFull):
        ledger.record(1, 2.0, 1, PaymentMethod.CASH, 0.0, 0.0, clock.now)
    assert len(ledger) == 1
