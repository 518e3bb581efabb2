import os
from dataclasses import dataclass, field
from typing import FrozenSet

from dotenv import load_dotenv

from services.rates import DEFAULT_MAX_TRANSACTIONS, DEFAULT_MAX_USERS

load_dotenv()


def get_config(key: str, default=None):
    value = os.getenv(key)
    return value if value not in (None, "") else default


def _get_int(key: str, default: int) -> int:
    raw = get_config(key)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        raise RuntimeError(f"{key} must be an integer, got {raw!r}")


def _parse_ids(raw) -> FrozenSet[str]:
    return frozenset(part.strip() for part in (raw or "").split(",") if part.strip())


@dataclass(frozen=True)
class Settings:
    bot_token: str = ""
    secret_key: str = ""
    max_users: int = DEFAULT_MAX_USERS
    max_transactions: int = DEFAULT_MAX_TRANSACTIONS
    admin_ids: FrozenSet[str] = field(default_factory=frozenset)
    support_url: str = ""
    log_level: str = "INFO"


def load_settings() -> Settings:
    return Settings(
        bot_token=get_config("BOT_TOKEN", ""),
        secret_key=get_config("SECRET_KEY", ""),
        max_users=_get_int("MAX_USERS", DEFAULT_MAX_USERS),
        max_transactions=_get_int("MAX_TRANSACTIONS", DEFAULT_MAX_TRANSACTIONS),
        admin_ids=_parse_ids(get_config("ADMIN_IDS")),
        support_url=get_config("SUPPORT_URL", ""),
        log_level=get_config("LOG_LEVEL", "INFO").upper(),
    )
