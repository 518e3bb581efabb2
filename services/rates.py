# services/rates.py
WATER_PRICE_PER_LITER = 2.0
DIGITAL_FEE = 1.0

MIN_BULK_LITERS = 10
# (min liters, flat discount), checked top-down
BULK_TIERS = [
    (20, 4.0),
    (15, 3.0),
    (10, 2.0),
]

STUDENT_RATE = 0.10
LOYALTY_THRESHOLD = 50.0
LOYALTY_RATE = 0.05

POINTS_PER_REDEMPTION = 100
POINTS_REDEMPTION_VALUE = 5.0

TOPUP_BONUS_THRESHOLD = 100.0
TOPUP_BONUS_RATE = 0.02

DEFAULT_MAX_USERS = 1000
DEFAULT_MAX_TRANSACTIONS = 5000
