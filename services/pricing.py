# services/pricing.py
import logging
from dataclasses import dataclass, field

from models.pass_type import PassType
from models.transaction import PaymentMethod, Transaction
from models.user import User
from services.discounts import NO_DISCOUNT, DiscountBreakdown, apply_redemption, compute_discount
from services.errors import InsufficientFunds
from services import rates
from services.passes import is_pass_valid
from services.rates import DIGITAL_FEE, MIN_BULK_LITERS, WATER_PRICE_PER_LITER

logger = logging.getLogger(__name__)

# fee waiver reasons
WAIVER_PASS = "pass"
WAIVER_BULK = "bulk"
WAIVER_DISCOUNT = "discount"


@dataclass(frozen=True)
class Quote:
    liters: float
    method: PaymentMethod
    base_cost: float
    discount: float
    fee: float
    amount: float
    breakdown: DiscountBreakdown = field(default=NO_DISCOUNT)
    fee_waiver: str = ""


@dataclass(frozen=True)
class Receipt:
    transaction: Transaction
    quote: Quote
    wallet_balance: float
    points_earned: int
    loyalty_points: int

    def to_dict(self):
        return {
            "transaction": self.transaction.to_dict(),
            "base_cost": self.quote.base_cost,
            "discount": self.quote.discount,
            "discounts": self.quote.breakdown.to_dict(),
            "fee": self.quote.fee,
            "fee_waiver": self.quote.fee_waiver or None,
            "amount": self.quote.amount,
            "wallet_balance": self.wallet_balance,
            "points_earned": self.points_earned,
            "loyalty_points": self.loyalty_points,
        }


def digital_fee(liters: float, discount: float):
    """Returns (fee, waiver reason) for a digital payment without a pass."""
    if liters >= MIN_BULK_LITERS:
        return 0.0, WAIVER_BULK
    if discount >= DIGITAL_FEE:
        return 0.0, WAIVER_DISCOUNT
    return max(0.0, DIGITAL_FEE - discount), ""


def quote(user: User, liters: float, method: PaymentMethod, now) -> Quote:
    """Price a purchase without changing anything."""
    base_cost = liters * WATER_PRICE_PER_LITER

    if method is PaymentMethod.CASH:
        breakdown = compute_discount(user, liters)
        return Quote(liters, method, base_cost, breakdown.total, 0.0,
                     base_cost - breakdown.total, breakdown)

    if is_pass_valid(user, now):
        # pass holders skip every other discount
        return Quote(liters, method, base_cost, 0.0, 0.0, base_cost,
                     NO_DISCOUNT, WAIVER_PASS)

    breakdown = compute_discount(user, liters)
    fee, waiver = digital_fee(liters, breakdown.total)
    return Quote(liters, method, base_cost, breakdown.total, fee,
                 base_cost - breakdown.total + fee, breakdown, waiver)


class PricingOptimizer:
    def __init__(self, ledger, analytics):
        self.ledger = ledger
        self.analytics = analytics

    def purchase(self, user: User, liters: float, method: PaymentMethod, now) -> Receipt:
        q = quote(user, liters, method, now)
        points = int(q.base_cost)

        # every check happens before the first mutation
        self.ledger.ensure_capacity()
        if method is PaymentMethod.DIGITAL and user.wallet_balance < q.amount:
            logger.warning(f"User {user.user_id} short of funds: {user.wallet_balance:.2f} < {q.amount:.2f}")
            raise InsufficientFunds(q.amount, user.wallet_balance)

        if method is PaymentMethod.DIGITAL:
            user.wallet_balance -= q.amount
        apply_redemption(user, q.breakdown)

        user.transaction_count += 1
        user.total_spent += q.base_cost
        user.loyalty_points += points

        txn = self.ledger.record(user.user_id, q.amount, liters, method, q.fee, q.discount, now)
        self.analytics.record_purchase(q.base_cost, q.fee, q.discount, method, liters)

        logger.info(
            f"Txn {txn.transaction_id}: user {user.user_id} bought {liters}L "
            f"({method.value}) for {q.amount:.2f}, discount {q.discount:.2f}, fee {q.fee:.2f}"
        )
        return Receipt(
            transaction=txn,
            quote=q,
            wallet_balance=user.wallet_balance,
            points_earned=points,
            loyalty_points=user.loyalty_points,
        )


@dataclass(frozen=True)
class PricingInfo:
    price_per_liter: float
    digital_fee: float
    weekly_pass_cost: float
    weekly_pass_days: int
    monthly_pass_cost: float
    monthly_pass_days: int
    min_bulk_liters: int
    bulk_tiers: tuple
    student_rate: float
    loyalty_threshold: float
    loyalty_rate: float
    topup_bonus_threshold: float
    topup_bonus_rate: float
    points_per_redemption: int
    points_redemption_value: float
    comparison: dict

    def to_dict(self):
        data = dict(self.__dict__)
        data["bulk_tiers"] = [{"min_liters": l, "discount": d} for l, d in self.bulk_tiers]
        return data


def monthly_comparison(daily_liters=5, days=30):
    """What a daily purchase costs over a month, cash vs digital with and without a pass."""
    water = days * daily_liters * WATER_PRICE_PER_LITER
    return {
        "daily_liters": daily_liters,
        "days": days,
        "cash": water,
        "digital_no_pass": days * (daily_liters * WATER_PRICE_PER_LITER + DIGITAL_FEE),
        "digital_monthly_pass": PassType.MONTHLY.cost + water,
        "pass_savings": days * DIGITAL_FEE - PassType.MONTHLY.cost,
    }


def pricing_table() -> PricingInfo:
    return PricingInfo(
        price_per_liter=WATER_PRICE_PER_LITER,
        digital_fee=DIGITAL_FEE,
        weekly_pass_cost=PassType.WEEKLY.cost,
        weekly_pass_days=PassType.WEEKLY.days,
        monthly_pass_cost=PassType.MONTHLY.cost,
        monthly_pass_days=PassType.MONTHLY.days,
        min_bulk_liters=MIN_BULK_LITERS,
        bulk_tiers=tuple(rates.BULK_TIERS),
        student_rate=rates.STUDENT_RATE,
        loyalty_threshold=rates.LOYALTY_THRESHOLD,
        loyalty_rate=rates.LOYALTY_RATE,
        topup_bonus_threshold=rates.TOPUP_BONUS_THRESHOLD,
        topup_bonus_rate=rates.TOPUP_BONUS_RATE,
        points_per_redemption=rates.POINTS_PER_REDEMPTION,
        points_redemption_value=rates.POINTS_REDEMPTION_VALUE,
        comparison=monthly_comparison(),
    )
