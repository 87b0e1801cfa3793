"""
handlers/budget_handler.py
---------------------------
Handles the weekly target command.
"""

from telegram import Update
from telegram.ext import ContextTypes

from errors import MoneyPetError
from handlers import messages
from security.auth import authorized_only
from security.rate_limiter import rate_limited
from services.pet_service import get_pet_service
from utils.logger import get_logger

logger = get_logger(__name__)


@authorized_only
@rate_limited
async def budget_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """
    Handle /budget command.

    Usage:
        /budget          → show the current weekly target
        /budget 70000    → start a new week with that target
    """
    user = update.effective_user
    service = get_pet_service()

    if not context.args:
        period = service.get_budget(user.id)
        await update.message.reply_text(
            f"💰 Weekly target: {messages.money(period.target_amount)}\n"
            f"📅 {period.start_date} → {period.end_date}\n\n"
            f"💡 Use `/budget <amount>` to set a new one.",
            parse_mode="Markdown",
        )
        return

    try:
        period = service.set_budget_target(user.id, context.args[0])
    except MoneyPetError as e:
        await update.message.reply_text(f"⚠️ {e}")
        return
    await update.message.reply_text(messages.budget_set(period))
