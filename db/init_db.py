"""
db/init_db.py
-------------
Creates the database schema (tables) if they do not already exist.
Run this module directly to initialize a fresh database:
    python -m db.init_db
"""

from db.connection import pooled_cursor
from utils.logger import get_logger

logger = get_logger(__name__)

SCHEMA_SQL = """
-- Users table: one row per Telegram user, the key for all other tables
CREATE TABLE IF NOT EXISTS users (
    telegram_id     BIGINT PRIMARY KEY,
    first_name      VARCHAR(100),
    created_at      TIMESTAMPTZ DEFAULT NOW()
);

-- Ledger: income and expense entries, never edited, only deleted
CREATE TABLE IF NOT EXISTS transactions (
    user_id         BIGINT NOT NULL REFERENCES users(telegram_id) ON DELETE CASCADE,
    id              VARCHAR(16) NOT NULL,
    description     TEXT NOT NULL,
    amount          NUMERIC(14,2) NOT NULL CHECK (amount > 0),
    kind            VARCHAR(10) NOT NULL CHECK (kind IN ('expense', 'income')),
    occurred_at     TIMESTAMP NOT NULL,
    PRIMARY KEY (user_id, id)
);

-- Budgets: the single current weekly target per user
CREATE TABLE IF NOT EXISTS budgets (
    user_id         BIGINT PRIMARY KEY REFERENCES users(telegram_id) ON DELETE CASCADE,
    target_amount   NUMERIC(14,2) NOT NULL CHECK (target_amount >= 0),
    start_date      DATE NOT NULL,
    end_date        DATE NOT NULL,
    updated_at      TIMESTAMP,
    CHECK (start_date <= end_date)
);

-- Characters: the pet, created on first access
CREATE TABLE IF NOT EXISTS characters (
    user_id         BIGINT PRIMARY KEY REFERENCES users(telegram_id) ON DELETE CASCADE,
    name            VARCHAR(100) NOT NULL,
    experience      INTEGER NOT NULL DEFAULT 0 CHECK (experience >= 0),
    stage           VARCHAR(20) NOT NULL DEFAULT 'EGG',
    created_at      TIMESTAMP,
    last_evolution  TIMESTAMP
);

-- Award grants: windows that already paid out experience
CREATE TABLE IF NOT EXISTS award_grants (
    user_id         BIGINT NOT NULL REFERENCES users(telegram_id) ON DELETE CASCADE,
    window_key      VARCHAR(64) NOT NULL,
    PRIMARY KEY (user_id, window_key)
);

-- Indexes for faster queries
CREATE INDEX IF NOT EXISTS idx_transactions_user_time ON transactions(user_id, occurred_at);
"""


def create_tables() -> None:
    """
    Execute the schema SQL to create all tables.
    Safe to call multiple times (uses IF NOT EXISTS).
    """
    with pooled_cursor("initialize schema") as cur:
        cur.execute(SCHEMA_SQL)
    logger.info("Database schema initialized successfully.")


if __name__ == "__main__":
    from db.connection import init_pool
    init_pool()
    create_tables()
    print("✅ Database schema created successfully.")
