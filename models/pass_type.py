import datetime
from enum import Enum


class PassType(Enum):
    """Fee-waiver passes: (label, days valid, cost)."""

    WEEKLY = ("Weekly", 7, 15.0)
    MONTHLY = ("Monthly", 30, 50.0)

    def __init__(self, label, days, cost):
        self.label = label
        self.days = days
        self.cost = cost

    @property
    def duration(self) -> datetime.timedelta:
        return datetime.timedelta(days=self.days)

    @classmethod
    def parse(cls, value):
        if isinstance(value, cls):
            return value
        text = str(value or "").strip().lower()
        for pass_type in cls:
            if pass_type.label.lower() == text:
                return pass_type
        return None
