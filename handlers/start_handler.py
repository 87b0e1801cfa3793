"""
handlers/start_handler.py
--------------------------
Handles /start and /help commands.
Hatches the user's pet and shows available commands.
"""

from telegram import Update
from telegram.ext import ContextTypes

from handlers import messages
from security.auth import authorized_only
from security.rate_limiter import rate_limited
from services.pet_service import get_pet_service
from utils.logger import get_logger

logger = get_logger(__name__)

HELP_TEXT = """
🐾 *Welcome to MoneyPet!*
Save money and your pet grows 🥚 → 🐣 → 🦆 → 💎 → 👑

*📝 Log money:*
/spend <amount> <description> - record an expense
/earn <amount> <description> - record income
/list \\[YYYY-MM-DD] - recent transactions (or one day)
/delete <id> - delete a transaction

*🎯 Budget & pet:*
/budget \\[amount] - show or set the weekly target
/status - weekly and daily savings + mission
/check\\_week - claim XP for this week's savings
/check\\_today - claim XP for today's savings
/pet - show your pet
/analytics - spending trends
/myid - show your Telegram ID
"""


@authorized_only
@rate_limited
async def start_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /start command - create the pet and show welcome message."""
    user = update.effective_user
    character = get_pet_service().get_character(user.id)
    logger.info(f"User {user.id} ({user.first_name}) started the bot.")

    await update.message.reply_text(
        f"Hi {user.first_name}! 👋\n"
        f"Meet your pet:\n\n{messages.character_card(character)}\n\n"
        f"Type /help to see all commands.",
        parse_mode="Markdown",
    )


@authorized_only
@rate_limited
async def help_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /help command - show all available commands."""
    await update.message.reply_text(HELP_TEXT, parse_mode="Markdown")


@authorized_only
async def myid_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /myid command - show user's Telegram ID for whitelisting."""
    user = update.effective_user
    await update.message.reply_text(
        f"🆔 Your Telegram ID: `{user.id}`\n"
        f"Add it to `ALLOWED_USER_IDS` in `.env` to lock the bot to you.",
        parse_mode="Markdown",
    )
