from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest

from handlers import budget_handler, pet_handler, transaction_handler
from security import auth, rate_limiter

USER = 42


@pytest.fixture(autouse=True)
def open_bot(monkeypatch, service):
    monkeypatch.setattr(auth, "ALLOWED_USER_IDS", [])
    rate_limiter._user_timestamps.clear()
    for module in (budget_handler, pet_handler, transaction_handler):
        monkeypatch.setattr(module, "get_pet_service", lambda: service)


def make_update(user_id=USER):
    user = SimpleNamespace(id=user_id, username="saver", first_name="Sam")
    return SimpleNamespace(effective_user=user, message=MagicMock(reply_text=AsyncMock()))


async def reply_to(handler, *args, user_id=USER):
    update = make_update(user_id)
    await handler(update, SimpleNamespace(args=list(args)))
    return update.message.reply_text.await_args.args[0]


@pytest.mark.asyncio
async def test_spend_records_expense(service):
    reply = await reply_to(transaction_handler.spend_command, "4500", "iced", "coffee")

    [tx] = service.list_transactions(USER)
    assert tx.description == "iced coffee"
    assert tx.id in reply


@pytest.mark.asyncio
async def test_spend_without_args_shows_usage(service):
    reply = await reply_to(transaction_handler.spend_command)
    assert "Usage" in reply
    assert service.list_transactions(USER) == []


@pytest.mark.asyncio
async def test_invalid_amount_is_reported(service):
    reply = await reply_to(transaction_handler.earn_command, "-10", "refund")
    assert reply.startswith("⚠️")
    assert service.list_transactions(USER) == []


@pytest.mark.asyncio
async def test_delete_unknown_id_is_reported():
    reply = await reply_to(transaction_handler.delete_command, "#nope")
    assert reply.startswith("⚠️")


@pytest.mark.asyncio
async def test_list_with_bad_date_is_reported():
    reply = await reply_to(transaction_handler.list_command, "yesterday")
    assert reply.startswith("⚠️")


@pytest.mark.asyncio
async def test_budget_then_weekly_check(service):
    await reply_to(budget_handler.budget_command, "70000")
    await reply_to(transaction_handler.spend_command, "20000", "groceries")
    await reply_to(transaction_handler.spend_command, "15000", "dinner")

    reply = await reply_to(pet_handler.check_week_command)

    assert "+35 XP" in reply
    assert service.get_character(USER).experience == 35


@pytest.mark.asyncio
async def test_pet_command_shows_stage():
    reply = await reply_to(pet_handler.pet_command)
    assert "Egg" in reply


@pytest.mark.asyncio
async def test_unlisted_user_is_rejected(monkeypatch, service):
    monkeypatch.setattr(auth, "ALLOWED_USER_IDS", [1])
    reply = await reply_to(transaction_handler.spend_command, "100", "gum")
    assert "⛔" in reply
    assert service.list_transactions(USER) == []


@pytest.mark.asyncio
async def test_rate_limit(monkeypatch):
    monkeypatch.setattr(rate_limiter, "RATE_LIMIT_MESSAGES", 2)
    await reply_to(pet_handler.pet_command)
    await reply_to(pet_handler.pet_command)
    assert "Slow down" in await reply_to(pet_handler.pet_command)
