# services/passes.py
import datetime
import logging
from dataclasses import dataclass

from models.pass_type import PassType
from models.user import User
from services.errors import InsufficientFunds

logger = logging.getLogger(__name__)

SECONDS_PER_DAY = 24 * 60 * 60


@dataclass(frozen=True)
class PassReceipt:
    user_id: int
    pass_type: PassType
    cost: float
    expiry: datetime.datetime
    wallet_balance: float

    def to_dict(self):
        return {
            "user_id": self.user_id,
            "pass_type": self.pass_type.label,
            "days": self.pass_type.days,
            "cost": self.cost,
            "expiry": self.expiry.isoformat(),
            "wallet_balance": self.wallet_balance,
        }


def is_pass_valid(user: User, now) -> bool:
    if not (user.has_weekly_pass or user.has_monthly_pass):
        return False
    return user.pass_expiry is not None and now < user.pass_expiry


def active_pass(user: User, now):
    """PassType currently in force, or None. Monthly wins when both flags are set."""
    if not is_pass_valid(user, now):
        return None
    return PassType.MONTHLY if user.has_monthly_pass else PassType.WEEKLY


def days_remaining(user: User, now) -> int:
    if not is_pass_valid(user, now):
        return 0
    return int((user.pass_expiry - now).total_seconds()) // SECONDS_PER_DAY


class PassManager:
    def __init__(self, analytics):
        self.analytics = analytics

    def purchase(self, user: User, pass_type: PassType, now) -> PassReceipt:
        cost = pass_type.cost
        if user.wallet_balance < cost:
            logger.warning(f"User {user.user_id} cannot afford {pass_type.label} pass")
            raise InsufficientFunds(cost, user.wallet_balance)

        user.wallet_balance -= cost
        if pass_type is PassType.WEEKLY:
            user.has_weekly_pass = True
        else:
            user.has_monthly_pass = True
        # a new pass replaces the expiry, it does not extend it
        user.pass_expiry = now + pass_type.duration

        self.analytics.record_pass_purchase()
        logger.info(f"User {user.user_id} bought {pass_type.label} pass until {user.pass_expiry}")
        return PassReceipt(
            user_id=user.user_id,
            pass_type=pass_type,
            cost=cost,
            expiry=user.pass_expiry,
            wallet_balance=user.wallet_balance,
        )
