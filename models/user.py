import datetime
from dataclasses import dataclass, field
from typing import Optional


@dataclass
class User:
    user_id: int
    name: str
    phone: str
    is_student: bool = False
    wallet_balance: float = 0.0
    total_spent: float = 0.0              # lifetime base cost, feeds the loyalty discount
    transaction_count: int = 0
    loyalty_points: int = 0               # 1 point per currency unit spent
    has_weekly_pass: bool = False
    has_monthly_pass: bool = False
    pass_expiry: Optional[datetime.datetime] = None
    created_at: datetime.datetime = field(
        default_factory=lambda: datetime.datetime.now(datetime.timezone.utc))

    def to_dict(self):
        return {
            "user_id": self.user_id,
            "name": self.name,
            "phone": self.phone,
            "is_student": self.is_student,
            "wallet_balance": self.wallet_balance,
            "total_spent": self.total_spent,
            "transaction_count": self.transaction_count,
            "loyalty_points": self.loyalty_points,
            "has_weekly_pass": self.has_weekly_pass,
            "has_monthly_pass": self.has_monthly_pass,
            "pass_expiry": self.pass_expiry.isoformat() if self.pass_expiry else None,
            "created_at": self.created_at.isoformat(),
        }
