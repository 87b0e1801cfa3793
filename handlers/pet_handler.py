"""
handlers/pet_handler.py
-----------------------
Handles the pet and savings-check commands: /pet, /status, /check_week, /check_today.
"""

from telegram import Update
from telegram.ext import ContextTypes

from handlers import messages
from security.auth import authorized_only
from security.rate_limiter import rate_limited
from services.pet_service import get_pet_service
from utils.logger import get_logger

logger = get_logger(__name__)


@authorized_only
@rate_limited
async def pet_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /pet - show the pet's stage, level and experience."""
    character = get_pet_service().get_character(update.effective_user.id)
    await update.message.reply_text(messages.character_card(character), parse_mode="Markdown")


@authorized_only
@rate_limited
async def status_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /status - weekly and daily savings plus the current mission."""
    status = get_pet_service().get_saving_status(update.effective_user.id)
    await update.message.reply_text(messages.saving_status(status), parse_mode="Markdown")


@authorized_only
@rate_limited
async def check_week_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /check_week - award XP if this week's target is kept."""
    result = get_pet_service().check_weekly_savings(update.effective_user.id)
    await update.message.reply_text(messages.check_result(result, "Weekly check"), parse_mode="Markdown")


@authorized_only
@rate_limited
async def check_today_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /check_today - award XP if today's share of the target is kept."""
    result = get_pet_service().check_daily_savings(update.effective_user.id)
    await update.message.reply_text(messages.check_result(result, "Daily check"), parse_mode="Markdown")
