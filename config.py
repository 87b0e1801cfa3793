"""
config.py
---------
Central configuration module. Loads all environment variables
from the .env file and exposes them as typed constants.
"""

import os
from datetime import time
from decimal import Decimal

from dotenv import load_dotenv

load_dotenv()


def _clock_time(raw: str) -> time:
    hour, _, minute = raw.partition(":")
    return time(hour=int(hour), minute=int(minute or 0))


# ── Telegram ──────────────────────────────────────────────
TELEGRAM_BOT_TOKEN: str = os.getenv("TELEGRAM_BOT_TOKEN", "")

# ── Storage ───────────────────────────────────────────────
# 'postgres' for the real bot, 'memory' for local experiments (state is lost on exit)
STORAGE_BACKEND: str = os.getenv("STORAGE_BACKEND", "postgres").lower()

# ── PostgreSQL ────────────────────────────────────────────
DB_HOST: str = os.getenv("DB_HOST", "localhost")
DB_PORT: int = int(os.getenv("DB_PORT", "5432"))
DB_NAME: str = os.getenv("DB_NAME", "money_pet")
DB_USER: str = os.getenv("DB_USER", "moneypet_user")
DB_PASS: str = os.getenv("DB_PASS", "")

DATABASE_URL: str = (
    f"postgresql://{DB_USER}:{DB_PASS}@{DB_HOST}:{DB_PORT}/{DB_NAME}"
)

# ── Security ──────────────────────────────────────────────
_raw_ids = os.getenv("ALLOWED_USER_IDS", "")
ALLOWED_USER_IDS: list[int] = (
    [int(uid.strip()) for uid in _raw_ids.split(",") if uid.strip()]
    if _raw_ids
    else []
)

# ── Rate Limiting ─────────────────────────────────────────
RATE_LIMIT_MESSAGES: int = int(os.getenv("RATE_LIMIT_MESSAGES", "30"))
RATE_LIMIT_WINDOW_SECONDS: int = int(os.getenv("RATE_LIMIT_WINDOW_SECONDS", "60"))

# ── Currency ──────────────────────────────────────────────
DEFAULT_CURRENCY: str = os.getenv("DEFAULT_CURRENCY", "KRW")

# ── Pet & budget ──────────────────────────────────────────
DEFAULT_PET_NAME: str = os.getenv("DEFAULT_PET_NAME", "Money Pet")
DEFAULT_WEEKLY_TARGET: Decimal = Decimal(os.getenv("DEFAULT_WEEKLY_TARGET", "100000"))

# ── Experience awards ─────────────────────────────────────
# One experience point per divisor of money saved, at least 1, at most the cap.
WEEKLY_EXP_DIVISOR: int = int(os.getenv("WEEKLY_EXP_DIVISOR", "1000"))
DAILY_EXP_DIVISOR: int = int(os.getenv("DAILY_EXP_DIVISOR", "5000"))
WEEKLY_EXP_CAP: int = int(os.getenv("WEEKLY_EXP_CAP", "500"))
DAILY_EXP_CAP: int = int(os.getenv("DAILY_EXP_CAP", "100"))

# ── Scheduled checks ──────────────────────────────────────
DAILY_CHECK_TIME: time = _clock_time(os.getenv("DAILY_CHECK_TIME", "23:00"))
WEEKLY_CHECK_TIME: time = _clock_time(os.getenv("WEEKLY_CHECK_TIME", "20:00"))
