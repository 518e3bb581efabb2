# services/kiosk.py
"""
The kiosk core. One Kiosk instance owns the user store, the transaction
ledger and the analytics counters; the bot and the admin panel only go
through the methods below.

Operations raise a KioskError subclass on rejection and leave state
untouched when they do. There is no locking here: callers on several
threads must serialize access themselves.
"""
import datetime
import math
from dataclasses import dataclass
from typing import Optional

from models.pass_type import PassType
from models.transaction import PaymentMethod
from services.analytics import AnalyticsAggregator, AnalyticsReport
from services.errors import InvalidPassType, InvalidPaymentMethod, InvalidQuantity
from services.ledger import TransactionLedger
from services.passes import PassManager, PassReceipt, active_pass, days_remaining
from services.pricing import PricingOptimizer, PricingInfo, Receipt, pricing_table
from services.rates import DEFAULT_MAX_TRANSACTIONS, DEFAULT_MAX_USERS, DIGITAL_FEE, WATER_PRICE_PER_LITER
from services.users import UserStore


def utc_now():
    return datetime.datetime.now(datetime.timezone.utc)


@dataclass(frozen=True)
class TopUpResult:
    user_id: int
    amount: float
    bonus: float
    wallet_balance: float

    def to_dict(self):
        return dict(self.__dict__)


@dataclass(frozen=True)
class ProfileView:
    user_id: int
    name: str
    phone: str
    is_student: bool
    wallet_balance: float
    total_spent: float
    transaction_count: int
    loyalty_points: int
    active_pass: Optional[str]
    pass_days_remaining: int
    potential_monthly_fees: float
    pass_savings: float             # > 0 when a monthly pass would pay off

    def to_dict(self):
        return dict(self.__dict__)


class Kiosk:
    def __init__(self, max_users=DEFAULT_MAX_USERS, max_transactions=DEFAULT_MAX_TRANSACTIONS, clock=utc_now):
        self.clock = clock
        self.users = UserStore(max_users)
        self.ledger = TransactionLedger(max_transactions)
        self.analytics = AnalyticsAggregator()
        self.passes = PassManager(self.analytics)
        self.pricing = PricingOptimizer(self.ledger, self.analytics)

    @classmethod
    def from_settings(cls, settings, clock=utc_now):
        return cls(max_users=settings.max_users, max_transactions=settings.max_transactions, clock=clock)

    # --- users ---

    def register_user(self, name: str, phone: str, is_student: bool = False) -> int:
        return self.users.register(name, phone, is_student, now=self.clock())

    def top_up_wallet(self, user_id, amount: float) -> TopUpResult:
        balance, bonus = self.users.top_up(user_id, amount)
        return TopUpResult(user_id=user_id, amount=amount, bonus=bonus, wallet_balance=balance)

    def get_user_profile(self, user_id) -> ProfileView:
        user = self.users.get(user_id)
        now = self.clock()
        current = active_pass(user, now)
        monthly_fees = user.transaction_count * DIGITAL_FEE
        return ProfileView(
            user_id=user.user_id,
            name=user.name,
            phone=user.phone,
            is_student=user.is_student,
            wallet_balance=user.wallet_balance,
            total_spent=user.total_spent,
            transaction_count=user.transaction_count,
            loyalty_points=user.loyalty_points,
            active_pass=current.label if current else None,
            pass_days_remaining=days_remaining(user, now),
            potential_monthly_fees=monthly_fees,
            pass_savings=max(0.0, monthly_fees - PassType.MONTHLY.cost),
        )

    def list_users(self):
        return list(self.users)

    # --- purchases ---

    def purchase_water(self, user_id, liters: float, method) -> Receipt:
        user = self.users.get(user_id)
        if liters is None or liters <= 0 or not math.isfinite(liters * WATER_PRICE_PER_LITER):
            raise InvalidQuantity(f"Liters must be a positive finite number, got {liters}")
        payment_method = PaymentMethod.parse(method)
        if payment_method is None:
            raise InvalidPaymentMethod(f"Unknown payment method {method!r}")
        return self.pricing.purchase(user, liters, payment_method, self.clock())

    def purchase_pass(self, user_id, pass_type) -> PassReceipt:
        user = self.users.get(user_id)
        selected = PassType.parse(pass_type)
        if selected is None:
            raise InvalidPassType(f"Unknown pass type {pass_type!r}")
        return self.passes.purchase(user, selected, self.clock())

    # --- reporting ---

    def get_transactions(self, user_id=None):
        if user_id is None:
            return self.ledger.entries()
        self.users.get(user_id)
        return self.ledger.for_user(user_id)

    def get_analytics(self) -> AnalyticsReport:
        return self.analytics.report(total_users=len(self.users), total_transactions=len(self.ledger))

    @staticmethod
    def get_pricing_info() -> PricingInfo:
        return pricing_table()
