"""
handlers/analytics_handler.py
-----------------------------
Handles /analytics: weekly totals, category split and trend.
"""

from telegram import Update
from telegram.ext import ContextTypes

from handlers import messages
from security.auth import authorized_only
from security.rate_limiter import rate_limited
from services.pet_service import get_pet_service


@authorized_only
@rate_limited
async def analytics_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /analytics - spending report for the last few weeks."""
    report = get_pet_service().get_analytics(update.effective_user.id)
    await update.message.reply_text(messages.spending_report(report), parse_mode="Markdown")
