# services/discounts.py
"""
Discount rules for a water purchase. Each rule is evaluated independently and
the amounts are summed; nothing caps the total, so it can exceed the base cost.

Rules, in order:
  - student: 10% of the base cost
  - bulk: flat amount by liters tier (10L/15L/20L)
  - loyalty: 5% of lifetime spend once it reaches 50 (spend before this purchase)
  - points: flat 5 for every purchase made while holding 100+ points,
    redeeming exactly 100 points

compute_discount() does not touch the user; the points redemption it reports
is applied with apply_redemption() after the purchase succeeds.
"""
from dataclasses import dataclass

from models.user import User
from services.rates import (
    BULK_TIERS, LOYALTY_RATE, LOYALTY_THRESHOLD, MIN_BULK_LITERS,
    POINTS_PER_REDEMPTION, POINTS_REDEMPTION_VALUE, STUDENT_RATE,
    WATER_PRICE_PER_LITER,
)


@dataclass(frozen=True)
class DiscountBreakdown:
    student: float = 0.0
    bulk: float = 0.0
    loyalty: float = 0.0
    points: float = 0.0
    points_redeemed: int = 0

    @property
    def total(self) -> float:
        return self.student + self.bulk + self.loyalty + self.points

    def to_dict(self):
        return {
            "student": self.student,
            "bulk": self.bulk,
            "loyalty": self.loyalty,
            "points": self.points,
            "points_redeemed": self.points_redeemed,
            "total": self.total,
        }


NO_DISCOUNT = DiscountBreakdown()


def bulk_discount(liters: float) -> float:
    for min_liters, amount in BULK_TIERS:
        if liters >= min_liters:
            return amount
    return 0.0


def loyalty_discount(user: User) -> float:
    return user.total_spent * LOYALTY_RATE


def compute_discount(user: User, liters: float) -> DiscountBreakdown:
    student = bulk = loyalty = points = 0.0
    redeemed = 0

    if user.is_student:
        student = liters * WATER_PRICE_PER_LITER * STUDENT_RATE

    if liters >= MIN_BULK_LITERS:
        bulk = bulk_discount(liters)

    if user.total_spent >= LOYALTY_THRESHOLD:
        loyalty = loyalty_discount(user)

    # one redemption per purchase, however many points are banked
    if user.loyalty_points >= POINTS_PER_REDEMPTION:
        points = POINTS_REDEMPTION_VALUE
        redeemed = POINTS_PER_REDEMPTION

    return DiscountBreakdown(student=student, bulk=bulk, loyalty=loyalty,
                             points=points, points_redeemed=redeemed)


def apply_redemption(user: User, breakdown: DiscountBreakdown):
    user.loyalty_points -= breakdown.points_redeemed
