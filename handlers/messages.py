"""
handlers/messages.py
--------------------
Turns engine results into Telegram (Markdown) message text.
"""

from decimal import Decimal

from config import DEFAULT_CURRENCY
from models.budget import BudgetPeriod
from models.character import Character
from models.mission import MissionProgress
from models.saving import CheckResult, SavingStatus, SavingSummary
from models.transaction import Transaction
from services.analytics_service import SpendingReport
from services.progression_service import experience_to_next
from utils.money import format_amount


def money(amount: Decimal) -> str:
    return format_amount(amount, DEFAULT_CURRENCY)


def progress_bar(pct: float, length: int = 15) -> str:
    """Generate a text progress bar."""
    filled = int(min(max(pct, 0), 100) / 100 * length)
    empty = length - filled
    if pct >= 100:
        return "█" * length + " ⚠️"
    elif pct >= 80:
        return "█" * filled + "░" * empty + " ⚡"
    else:
        return "█" * filled + "░" * empty


def transaction_line(tx: Transaction) -> str:
    sign = "🔴" if tx.is_expense() else "🟢"
    return f"{sign} `{tx.id}` | {tx.occurred_at:%m/%d %H:%M} | {money(tx.amount)} | {tx.description}"


def transaction_added(tx: Transaction) -> str:
    emoji = "💸" if tx.is_expense() else "💰"
    return (
        f"{emoji} Recorded {tx.kind.value}:\n"
        f"  💶 Amount: {money(tx.amount)}\n"
        f"  📝 {tx.description}\n"
        f"  🔖 ID: `{tx.id}`"
    )


def transaction_list(transactions: list[Transaction], title: str) -> str:
    if not transactions:
        return f"📭 No transactions {title}."
    lines = [f"📒 Transactions {title}:\n"]
    lines.extend(transaction_line(t) for t in transactions)
    spent = sum((t.amount for t in transactions if t.is_expense()), Decimal("0"))
    earned = sum((t.amount for t in transactions if t.is_income()), Decimal("0"))
    lines.append(f"\n💸 Spent: {money(spent)} | 💰 Earned: {money(earned)}")
    return "\n".join(lines)


def budget_set(period: BudgetPeriod) -> str:
    return (
        f"✅ Weekly target set to {money(period.target_amount)}\n"
        f"📅 {period.start_date} → {period.end_date}"
    )


def _summary_block(title: str, summary: SavingSummary) -> str:
    pct = float(summary.expenses / summary.target * 100) if summary.target > 0 else (100.0 if summary.expenses else 0.0)
    icon = "🟢" if summary.saved >= 0 else "🔴"
    verb = "Saved" if summary.saved >= 0 else "Over by"
    return (
        f"{icon} *{title}*: {money(summary.expenses)} / {money(summary.target)} ({pct:.0f}%)\n"
        f"  {progress_bar(pct)}\n"
        f"  {verb}: {money(abs(summary.saved))}"
    )


def mission_block(progress: MissionProgress) -> str:
    status = "✅ on track" if progress.completed else "❌ not yet"
    return (
        f"🎯 *Mission*: {progress.description}\n"
        f"  {money(progress.current)} / {money(progress.target)} | {status}"
    )


def saving_status(status: SavingStatus) -> str:
    return "\n\n".join([
        _summary_block("This week", status.weekly),
        _summary_block("Today", status.daily),
        mission_block(status.mission),
    ])


def character_card(character: Character) -> str:
    remaining = experience_to_next(character)
    next_line = (
        f"⬆️ {remaining} XP to {character.stage.next.label}"
        if remaining is not None
        else "🏆 Final stage reached!"
    )
    return (
        f"*{character.name}* {character.stage.label}\n"
        f"⭐ Level {character.level} | {character.experience} XP\n"
        f"{next_line}"
    )


def check_result(result: CheckResult, title: str) -> str:
    lines = [f"🔎 *{title}*\n"]
    if result.summary is None:
        lines.append("⚠️ No weekly target yet. Use `/budget <amount>` first.")
    elif not result.summary.goal_met:
        lines.append(f"😿 Over budget by {money(-result.summary.saved)}. No XP this time.")
    elif result.experience_gained == 0:
        lines.append(f"👍 Goal met ({money(result.summary.saved)} saved), already rewarded for this period.")
    else:
        lines.append(f"🎉 Saved {money(result.summary.saved)}! +{result.experience_gained} XP")
    if result.evolved:
        lines.append(f"✨ Your pet evolved: {result.before.stage.label} → {result.after.stage.label}!")
    lines.append("")
    lines.append(character_card(result.after))
    lines.append("")
    lines.append(mission_block(result.mission_progress))
    return "\n".join(lines)


def spending_report(report: SpendingReport) -> str:
    lines = ["📊 *Weekly spending*"]
    lines.extend(f"  • {label}: {money(total)}" for label, total in report.weekly_expenses.items())

    lines.append("\n📂 *Last 4 weeks by category*")
    total = sum(report.category_expenses.values(), Decimal("0"))
    for name, amount in sorted(report.category_expenses.items(), key=lambda x: -x[1]):
        if amount > 0:
            pct = float(amount / total * 100)
            lines.append(f"  • {name}: {money(amount)} ({pct:.0f}%)")
    if total == 0:
        lines.append("  (no expenses)")

    trend = "📉 Spending is going down, keep it up!" if report.trend.improving else "📈 Spending is not trending down yet."
    lines.append(f"\n{trend}\n🎯 Weekly target: {money(report.trend.target)}")
    return "\n".join(lines)
