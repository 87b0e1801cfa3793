"""
security/auth.py
-----------------
Whitelist gate for bot handlers.

Pets are keyed by Telegram user id, so the id is the only identity needed.
An empty ALLOWED_USER_IDS opens the bot to everyone (dev mode).
"""

from functools import wraps
from typing import Callable

from telegram import Update
from telegram.ext import ContextTypes

from config import ALLOWED_USER_IDS
from utils.logger import get_logger

logger = get_logger(__name__)

DENIED_REPLY = "⛔ Sorry, this pet belongs to someone else."


def is_allowed(user_id: int) -> bool:
    return not ALLOWED_USER_IDS or user_id in ALLOWED_USER_IDS


def authorized_only(func: Callable):
    """Run the wrapped handler only for whitelisted users; reply and log otherwise."""

    @wraps(func)
    async def wrapper(update: Update, context: ContextTypes.DEFAULT_TYPE, *args, **kwargs):
        user = update.effective_user
        if user is None:
            return None
        if is_allowed(user.id):
            return await func(update, context, *args, **kwargs)

        logger.warning(f"🚫 Denied /{func.__name__.removesuffix('_command')} for user_id={user.id} (@{user.username})")
        await update.message.reply_text(DENIED_REPLY)
        return None

    return wrapper
