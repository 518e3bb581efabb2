from dataclasses import asdict, dataclass


@dataclass
class Analytics:
    total_revenue: float = 0.0          # sum of base costs
    total_fees_collected: float = 0.0
    total_discounts_given: float = 0.0
    cash_transactions: int = 0
    digital_transactions: int = 0
    bulk_purchases: int = 0
    pass_holders: int = 0               # one per pass purchase, repeats included

    def to_dict(self):
        return asdict(self)
