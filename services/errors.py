# services/errors.py


class KioskError(Exception):
    """Base for every rejection the kiosk core raises. `code` is a stable tag."""

    code = "KioskError"

    def __init__(self, message=""):
        super().__init__(message or self.code)
        self.message = message or self.code

    def to_dict(self):
        return {"error": self.code, "message": self.message}


class CapacityExceeded(KioskError):
    code = "CapacityExceeded"


class UserNotFound(KioskError):
    code = "UserNotFound"

    def __init__(self, user_id):
        super().__init__(f"User {user_id} not found")
        self.user_id = user_id


class InvalidAmount(KioskError):
    code = "InvalidAmount"


class InvalidQuantity(KioskError):
    code = "InvalidQuantity"


class InsufficientFunds(KioskError):
    code = "InsufficientFunds"

    def __init__(self, required: float, available: float):
        super().__init__(f"Required: {required:.2f}, Available: {available:.2f}")
        self.required = required
        self.available = available

    def to_dict(self):
        data = super().to_dict()
        data.update(required=self.required, available=self.available)
        return data


class InvalidPassType(KioskError):
    code = "InvalidPassType"


class InvalidPaymentMethod(KioskError):
    code = "InvalidPaymentMethod"


class LedgerFull(KioskError):
    code = "LedgerFull"
