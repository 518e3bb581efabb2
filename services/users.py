# services/users.py
import logging
import math

from models.user import User
from services.errors import CapacityExceeded, InvalidAmount, UserNotFound
from services.rates import DEFAULT_MAX_USERS, TOPUP_BONUS_RATE, TOPUP_BONUS_THRESHOLD

logger = logging.getLogger(__name__)


class UserStore:
    """Registered users keyed by their sequential id."""

    def __init__(self, max_users: int = DEFAULT_MAX_USERS):
        self.max_users = max_users
        self._users = {}

    def __len__(self):
        return len(self._users)

    def __iter__(self):
        return iter(self._users.values())

    def register(self, name: str, phone: str, is_student: bool = False, now=None) -> int:
        if len(self._users) >= self.max_users:
            logger.warning(f"Registration rejected, user limit {self.max_users} reached")
            raise CapacityExceeded(f"Maximum user limit ({self.max_users}) reached")

        user_id = len(self._users) + 1
        user = User(user_id=user_id, name=name, phone=phone, is_student=bool(is_student))
        if now is not None:
            user.created_at = now
        self._users[user_id] = user
        logger.info(f"Registered user {user_id} (student={user.is_student})")
        return user_id

    def find(self, user_id):
        return self._users.get(user_id)

    def get(self, user_id) -> User:
        user = self.find(user_id)
        if user is None:
            raise UserNotFound(user_id)
        return user

    def top_up(self, user_id, amount: float):
        """
        Credit `amount` to the wallet. Deposits of 100 or more earn a 2% bonus,
        computed on the deposit. Returns (new_balance, bonus).
        """
        user = self.get(user_id)
        if not math.isfinite(amount) or amount <= 0:
            raise InvalidAmount(f"Top-up amount must be a positive finite number, got {amount}")

        bonus = amount * TOPUP_BONUS_RATE if amount >= TOPUP_BONUS_THRESHOLD else 0.0
        user.wallet_balance += amount + bonus
        logger.info(f"User {user_id} topped up {amount:.2f} (+{bonus:.2f} bonus)")
        return user.wallet_balance, bonus
