# services/analytics.py
from dataclasses import dataclass, field, replace
from typing import List

from models.analytics import Analytics
from models.transaction import PaymentMethod
from services.rates import MIN_BULK_LITERS

PASS_ADOPTION_TARGET = 0.3


@dataclass(frozen=True)
class AnalyticsReport:
    totals: Analytics
    total_users: int
    total_transactions: int
    recommendations: List[str] = field(default_factory=list)

    @property
    def net_revenue(self) -> float:
        t = self.totals
        return t.total_revenue + t.total_fees_collected - t.total_discounts_given

    def share(self, count: int) -> float:
        """Percentage of all transactions, 0 when there are none."""
        if not self.total_transactions:
            return 0.0
        return count * 100.0 / self.total_transactions

    @property
    def cash_share(self) -> float:
        return self.share(self.totals.cash_transactions)

    @property
    def digital_share(self) -> float:
        return self.share(self.totals.digital_transactions)

    def to_dict(self):
        data = self.totals.to_dict()
        data.update(
            total_users=self.total_users,
            total_transactions=self.total_transactions,
            cash_share=self.cash_share,
            digital_share=self.digital_share,
            net_revenue=self.net_revenue,
            recommendations=list(self.recommendations),
        )
        return data


class AnalyticsAggregator:
    def __init__(self):
        self._totals = Analytics()

    def record_purchase(self, base_cost, fee, discount, method: PaymentMethod, liters):
        t = self._totals
        t.total_revenue += base_cost
        t.total_fees_collected += fee
        t.total_discounts_given += discount
        if method is PaymentMethod.CASH:
            t.cash_transactions += 1
        else:
            t.digital_transactions += 1
        if liters >= MIN_BULK_LITERS:
            t.bulk_purchases += 1

    def record_pass_purchase(self):
        self._totals.pass_holders += 1

    def snapshot(self) -> Analytics:
        return replace(self._totals)

    def report(self, total_users: int = 0, total_transactions: int = 0) -> AnalyticsReport:
        totals = self.snapshot()
        return AnalyticsReport(
            totals=totals,
            total_users=total_users,
            total_transactions=total_transactions,
            recommendations=recommendations(totals, total_users),
        )


def recommendations(totals: Analytics, total_users: int):
    tips = []
    if totals.digital_transactions < totals.cash_transactions:
        tips.append("Consider promoting passes to increase digital adoption")
        tips.append("Bulk purchase incentives are working well")
    if totals.pass_holders < total_users * PASS_ADOPTION_TARGET:
        tips.append("Low pass adoption - consider promotional pricing")
    return tips
