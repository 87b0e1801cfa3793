"""
main.py
-------
Entry point for the MoneyPet Telegram bot.

Responsibilities:
    - Initialize the database connection pool and schema (postgres backend).
    - Configure and start the Telegram bot with all handlers.
    - Schedule the automatic daily and weekly savings checks.
"""

from telegram import BotCommand
from telegram.ext import Application, CommandHandler, ContextTypes

from config import (
    ALLOWED_USER_IDS,
    DAILY_CHECK_TIME,
    STORAGE_BACKEND,
    TELEGRAM_BOT_TOKEN,
    WEEKLY_CHECK_TIME,
)
from db.connection import close_pool, init_pool
from db.init_db import create_tables
from handlers import messages
from handlers.analytics_handler import analytics_command
from handlers.budget_handler import budget_command
from handlers.pet_handler import (
    check_today_command,
    check_week_command,
    pet_command,
    status_command,
)
from handlers.start_handler import help_command, myid_command, start_command
from handlers.transaction_handler import (
    delete_command,
    earn_command,
    list_command,
    spend_command,
)
from services.pet_service import get_pet_service
from utils.logger import get_logger

logger = get_logger(__name__)

COMMANDS = [
    ("start", "🚀 Meet your pet", start_command),
    ("help", "📖 Show help", help_command),
    ("spend", "💸 Record an expense", spend_command),
    ("earn", "💰 Record income", earn_command),
    ("list", "📒 Recent transactions", list_command),
    ("delete", "🗑️ Delete a transaction", delete_command),
    ("budget", "🎯 Show or set the weekly target", budget_command),
    ("status", "📊 Savings status and mission", status_command),
    ("check_week", "🔎 Claim weekly XP", check_week_command),
    ("check_today", "🔎 Claim daily XP", check_today_command),
    ("pet", "🐾 Show your pet", pet_command),
    ("analytics", "📈 Spending trends", analytics_command),
    ("myid", "🆔 Your Telegram ID", myid_command),
]


async def _run_checks(context: ContextTypes.DEFAULT_TYPE, weekly: bool) -> None:
    service = get_pet_service()
    title = "Weekly check" if weekly else "Daily check"
    for user_id in ALLOWED_USER_IDS:
        try:
            result = service.check_weekly_savings(user_id) if weekly else service.check_daily_savings(user_id)
            if result.experience_gained:
                await context.bot.send_message(
                    chat_id=user_id,
                    text=messages.check_result(result, title),
                    parse_mode="Markdown",
                )
            logger.info(f"{title} for user {user_id}: +{result.experience_gained} XP")
        except Exception as e:
            logger.error(f"{title} failed for user {user_id}: {e}")


async def run_daily_checks(context: ContextTypes.DEFAULT_TYPE) -> None:
    """Scheduled job: daily savings check for every whitelisted user."""
    await _run_checks(context, weekly=False)


async def run_weekly_checks(context: ContextTypes.DEFAULT_TYPE) -> None:
    """Scheduled job: weekly savings check, Sundays."""
    await _run_checks(context, weekly=True)


async def set_bot_commands(application: Application) -> None:
    """Register bot commands menu in Telegram on startup."""
    await application.bot.set_my_commands([BotCommand(name, desc) for name, desc, _ in COMMANDS])
    logger.info("Bot commands menu registered successfully.")


def main() -> None:
    """Initialize and run the bot."""

    # ── 1. Storage setup ──────────────────────────────────
    if STORAGE_BACKEND == "postgres":
        logger.info("Initializing database...")
        init_pool()
        create_tables()
    get_pet_service()

    # ── 2. Build the Telegram application ─────────────────
    logger.info("Starting Telegram bot...")
    app = Application.builder().token(TELEGRAM_BOT_TOKEN).post_init(set_bot_commands).build()

    # ── 3. Register command handlers ──────────────────────
    for name, _, handler in COMMANDS:
        app.add_handler(CommandHandler(name, handler))

    # ── 4. Schedule jobs ──────────────────────────────────
    job_queue = app.job_queue
    if job_queue and ALLOWED_USER_IDS:
        job_queue.run_daily(run_daily_checks, time=DAILY_CHECK_TIME, name="daily_checks")
        job_queue.run_daily(
            run_weekly_checks,
            time=WEEKLY_CHECK_TIME,
            days=(0,),  # Sunday
            name="weekly_checks",
        )
        logger.info(f"Scheduled daily checks ({DAILY_CHECK_TIME:%H:%M}) "
                    f"+ weekly checks (Sunday {WEEKLY_CHECK_TIME:%H:%M})")

    # ── 5. Start polling ──────────────────────────────────
    logger.info("🚀 MoneyPet is running! Press Ctrl+C to stop.")
    app.run_polling(drop_pending_updates=True, allowed_updates=["message"])

    # ── 6. Cleanup on shutdown ────────────────────────────
    if STORAGE_BACKEND == "postgres":
        close_pool()
    logger.info("MoneyPet stopped.")


if __name__ == "__main__":
    main()
