"""
handlers/transaction_handler.py
-------------------------------
Handles ledger commands: /spend, /earn, /list, /delete.
Delegates all logic to SavePetService.
"""

from telegram import Update
from telegram.ext import ContextTypes

from errors import MoneyPetError
from handlers import messages
from models.transaction import TransactionKind
from security.auth import authorized_only
from security.rate_limiter import rate_limited
from services.pet_service import get_pet_service
from utils.logger import get_logger

logger = get_logger(__name__)


async def _record(update: Update, context: ContextTypes.DEFAULT_TYPE, kind: TransactionKind) -> None:
    command = "spend" if kind is TransactionKind.EXPENSE else "earn"
    if not context.args or len(context.args) < 2:
        await update.message.reply_text(
            f"⚠️ Usage: `/{command} <amount> <description>`\n"
            f"Example: `/{command} 4500 coffee`",
            parse_mode="Markdown",
        )
        return

    amount, description = context.args[0], " ".join(context.args[1:])
    try:
        tx = get_pet_service().add_transaction(update.effective_user.id, description, amount, kind)
    except MoneyPetError as e:
        await update.message.reply_text(f"⚠️ {e}")
        return
    await update.message.reply_text(messages.transaction_added(tx), parse_mode="Markdown")


@authorized_only
@rate_limited
async def spend_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /spend <amount> <description>."""
    await _record(update, context, TransactionKind.EXPENSE)


@authorized_only
@rate_limited
async def earn_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /earn <amount> <description>."""
    await _record(update, context, TransactionKind.INCOME)


@authorized_only
@rate_limited
async def list_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """
    Handle /list command.

    Usage:
        /list              → the 20 most recent transactions
        /list 2026-10-17   → every transaction of that day
    """
    user = update.effective_user
    on_date = context.args[0] if context.args else None
    try:
        transactions = get_pet_service().list_transactions(user.id, on_date=on_date)
    except MoneyPetError as e:
        await update.message.reply_text(f"⚠️ {e}")
        return

    if on_date is None:
        text = messages.transaction_list(transactions[:20], "(most recent)")
    else:
        text = messages.transaction_list(transactions, f"on {on_date}")
    await update.message.reply_text(text, parse_mode="Markdown")


@authorized_only
@rate_limited
async def delete_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /delete <id>."""
    if not context.args:
        await update.message.reply_text("⚠️ Usage: `/delete <id>` (see /list for IDs)", parse_mode="Markdown")
        return

    tx_id = context.args[0].lstrip("#")
    try:
        get_pet_service().delete_transaction(update.effective_user.id, tx_id)
    except MoneyPetError as e:
        await update.message.reply_text(f"⚠️ {e}")
        return
    await update.message.reply_text(f"🗑️ Transaction `{tx_id}` deleted.", parse_mode="Markdown")
