"""Render records and aggregates as chat text in the user's language."""

from tally.commands.keywords import EntityType, Language
from tally.i18n import entity_name, t
from tally.models.schemas import (
    Action,
    CategoryTotal,
    Contribution,
    Expense,
    Habit,
    HabitLog,
    HabitStats,
    Investment,
    KeyResult,
    Objective,
)
from tally.timeutil import format_day

HABIT_EMOJIS = {
    "treino": "🏋️",
    "treinar": "🏋️",
    "workout": "🏋️",
    "ler": "📚",
    "leitura": "📚",
    "read": "📚",
    "agua": "💧",
    "água": "💧",
    "water": "💧",
    "sono": "😴",
    "sleep": "😴",
}

OkrTree = list[tuple[KeyResult, list[Action]]]


def format_money(amount: float, symbol: str = "R$") -> str:
    return f"{symbol} {amount:,.2f}"


def format_number(value: float) -> str:
    if value == int(value):
        return str(int(value))
    return f"{value:g}"


def habit_emoji(name: str) -> str:
    lowered = name.lower()
    for key, emoji in HABIT_EMOJIS.items():
        if key in lowered:
            return emoji
    return "✅"


def _return_line(invested: float, value: float, lang: Language, symbol: str) -> str:
    gain = value - invested
    pct = gain / invested * 100 if invested else 0.0
    return f"{t(lang, 'labels.return')}: {format_money(gain, symbol)} ({pct:.2f}%)"


def money_added(record: Expense, kind: EntityType, lang: Language, symbol: str) -> str:
    header = t(lang, "messages.income_added" if kind is EntityType.INCOME else "messages.expense_added")
    return (
        f"{header}\n\n"
        f"💰 {t(lang, 'labels.amount')}: {format_money(record.amount, symbol)}\n"
        f"📝 {t(lang, 'labels.description')}: {record.description}\n"
        f"🏷️ {t(lang, 'labels.category')}: {record.category}\n"
        f"🆔 ID: {record.id}"
    )


def investment_added(inv: Investment, lang: Language, symbol: str) -> str:
    lines = [
        t(lang, "messages.investment_added"),
        "",
        f"📈 {t(lang, 'labels.name')}: {inv.name}",
        f"🏷️ {t(lang, 'labels.type')}: {inv.type}",
        f"💰 {t(lang, 'labels.amount')}: {format_money(inv.amount, symbol)}",
    ]
    if inv.current_value is not None:
        lines.append(f"📊 {t(lang, 'labels.current_value')}: {format_money(inv.current_value, symbol)}")
    lines.append(f"📅 {t(lang, 'labels.purchase_date')}: {format_day(inv.purchase_date)}")
    if inv.notes:
        lines.append(f"📝 {t(lang, 'labels.notes')}: {inv.notes}")
    lines.append(f"🆔 ID: {inv.id}")
    return "\n".join(lines)


def investment_updated(inv: Investment, lang: Language, symbol: str) -> str:
    value = inv.current_value if inv.current_value is not None else inv.amount
    return (
        f"{t(lang, 'messages.investment_updated')}\n\n"
        f"📈 {inv.name}\n"
        f"💰 {t(lang, 'labels.current_value')}: {format_money(value, symbol)}\n"
        f"📊 {_return_line(inv.amount, value, lang, symbol)}"
    )


def contribution_added(contribution: Contribution, inv: Investment, lang: Language, symbol: str) -> str:
    return (
        f"{t(lang, 'messages.contribution_added')}\n\n"
        f"📈 {inv.name} ({inv.type})\n"
        f"💰 {t(lang, 'labels.amount')}: {format_money(contribution.amount, symbol)}\n"
        f"📅 {t(lang, 'labels.date')}: {format_day(contribution.date)}\n"
        f"🏦 {t(lang, 'labels.invested')}: {format_money(inv.amount, symbol)}"
    )


def investment_list(
    investments: list[Investment], invested: float, value: float, lang: Language, symbol: str
) -> str:
    if not investments:
        return t(lang, "messages.no_investments")

    lines = [f"📈 {t(lang, 'labels.investments_title')}:", ""]
    for inv in investments:
        lines.append(f"  • #{inv.id} {inv.name} ({inv.type})")
        lines.append(f"    {t(lang, 'labels.invested')}: {format_money(inv.amount, symbol)}")
        if inv.current_value is not None:
            lines.append(f"    {t(lang, 'labels.current')}: {format_money(inv.current_value, symbol)}")
            lines.append(f"    {_return_line(inv.amount, inv.current_value, lang, symbol)}")
        lines.append(f"    {t(lang, 'labels.date')}: {format_day(inv.purchase_date)}")
        lines.append("")

    lines.append(f"💰 {t(lang, 'labels.total_invested')}: {format_money(invested, symbol)}")
    lines.append(f"📊 {t(lang, 'labels.total_value')}: {format_money(value, symbol)}")
    gain = value - invested
    pct = gain / invested * 100 if invested else 0.0
    lines.append(f"📈 {t(lang, 'labels.total_return')}: {format_money(gain, symbol)} ({pct:.2f}%)")
    return "\n".join(lines)


def category_breakdown(by_category: list[CategoryTotal], total: float, symbol: str) -> list[str]:
    lines = []
    for cat in by_category:
        pct = cat.total / total * 100 if total else 0.0
        lines.append(f"  • {cat.category}: {format_money(cat.total, symbol)} ({pct:.1f}%)")
    return lines


def monthly_report(
    period: str,
    total: float,
    count: int,
    by_category: list[CategoryTotal],
    insight: str | None,
    lang: Language,
    symbol: str,
) -> str:
    lines = [
        f"📊 {t(lang, 'labels.monthly_report', period=period)}",
        "",
        f"💰 {t(lang, 'labels.total')}: {format_money(total, symbol)}",
        f"📝 {t(lang, 'labels.transactions')}: {count}",
        "",
        f"📈 {t(lang, 'labels.by_category')}:",
        *category_breakdown(by_category, total, symbol),
    ]
    if insight:
        lines += ["", f"🤖 {t(lang, 'labels.ai_insight')}:", insight]
    return "\n".join(lines)


def incomes_report(period: str, total: float, count: int, by_category: list[CategoryTotal], lang: Language, symbol: str) -> str:
    lines = [
        f"💰 {t(lang, 'labels.incomes_title', period=period)}",
        "",
        f"{t(lang, 'labels.total')}: {format_money(total, symbol)}",
        f"{t(lang, 'labels.transactions')}: {count}",
        "",
        f"{t(lang, 'labels.by_category')}:",
        *category_breakdown(by_category, total, symbol),
    ]
    return "\n".join(lines)


def categories_report(period: str, by_category: list[CategoryTotal], lang: Language, symbol: str) -> str:
    lines = [f"🏷️ {t(lang, 'labels.categories_title', period=period)}:", ""]
    for cat in by_category:
        lines.append(f"  • {cat.category}: {format_money(cat.total, symbol)} ({cat.count} {t(lang, 'labels.transactions').lower()})")
    return "\n".join(lines)


def objective_added(objective: Objective, lang: Language) -> str:
    return f"{t(lang, 'messages.objective_added')}\n\n🎯 {objective.title}\nID: {objective.id}"


def key_result_added(kr: KeyResult, lang: Language) -> str:
    lines = [t(lang, "messages.key_result_added"), "", f"📊 {kr.title}"]
    if kr.target_value is not None:
        lines.append(f"{t(lang, 'labels.target')}: {format_number(kr.target_value)}")
    lines.append(f"ID: {kr.id}")
    return "\n".join(lines)


def key_result_updated(kr: KeyResult, lang: Language) -> str:
    line = f"📊 {kr.title}: {format_number(kr.current_value or 0)}"
    if kr.target_value is not None:
        line += f" / {format_number(kr.target_value)}"
    return f"{t(lang, 'messages.key_result_updated')}\n\n{line}"


def action_added(action: Action, lang: Language) -> str:
    return f"{t(lang, 'messages.action_added')}\n\n📝 {action.description}\nID: {action.id}"


def progress_updated(action: Action, lang: Language) -> str:
    return (
        f"{t(lang, 'messages.progress_updated')}\n\n"
        f"📝 {action.description}\n"
        f"📊 {t(lang, 'labels.progress')}: {action.progress}"
    )


def _kr_line(kr: KeyResult, lang: Language) -> str:
    line = f"📊 {kr.title} (ID: {kr.id})"
    if kr.target_value is not None:
        line += f" - {t(lang, 'labels.target')}: {format_number(kr.target_value)}"
        if kr.current_value is not None:
            line += f" / {t(lang, 'labels.current')}: {format_number(kr.current_value)}"
    return line


def _action_line(action: Action) -> str:
    line = f"📝 {action.description} (ID: {action.id})"
    if action.progress:
        line += f" - {action.progress}"
    return line


def okr_list(tree: list[tuple[Objective, OkrTree]], lang: Language) -> str:
    if not tree:
        return t(lang, "messages.no_okrs")

    lines = [f"📊 {t(lang, 'labels.okrs_title')}:", ""]
    for objective, key_results in tree:
        lines.append(f"🎯 {objective.title} (ID: {objective.id})")
        for kr, actions in key_results:
            lines.append(f"  {_kr_line(kr, lang)}")
            lines.extend(f"    {_action_line(action)}" for action in actions)
        lines.append("")
    return "\n".join(lines).rstrip()


def okr_detail(objective: Objective, key_results: OkrTree, lang: Language) -> str:
    lines = [f"🎯 {objective.title} (ID: {objective.id})"]
    if objective.description:
        lines.append(objective.description)
    if objective.target_date:
        lines.append(f"📅 {format_day(objective.target_date)}")
    lines.append("")
    for kr, actions in key_results:
        lines.append(_kr_line(kr, lang))
        lines.extend(f"   {_action_line(action)}" for action in actions)
        lines.append("")
    return "\n".join(lines).rstrip()


def _frequency(habit: Habit, lang: Language) -> str:
    if habit.frequency_type == "weekly":
        return t(lang, "labels.weekly", count=habit.frequency_value or "N/A")
    return t(lang, "labels.daily")


def habit_added(habit: Habit, lang: Language) -> str:
    return (
        f"{t(lang, 'messages.habit_added')}\n\n"
        f"{habit_emoji(habit.name)} {habit.name}\n"
        f"📅 {t(lang, 'labels.frequency')}: {_frequency(habit, lang)}"
    )


def habit_logged(habit: Habit, log: HabitLog, lang: Language) -> str:
    lines = [
        t(lang, "messages.habit_logged"),
        "",
        f"{habit_emoji(habit.name)} {habit.name}",
        f"📅 {t(lang, 'labels.date')}: {format_day(log.date)}",
    ]
    if log.value is not None:
        lines.append(f"📊 {t(lang, 'labels.value')}: {format_number(log.value)}{habit.unit or ''}")
    lines += ["", t(lang, "messages.counted_as_day")]
    return "\n".join(lines)


def habit_list(stats: list[tuple[Habit, HabitStats]], lang: Language) -> str:
    if not stats:
        return t(lang, "messages.no_habits")

    lines = [f"📊 {t(lang, 'labels.habits_title')}:", ""]
    for habit, s in stats:
        lines.append(f"{habit_emoji(habit.name)} {habit.name} (ID: {habit.id})")
        lines.append(f"   📅 {t(lang, 'labels.days_this_year', days=s.completed_days, percentage=f'{s.percentage:.1f}')}")
        if s.streak > 0:
            lines.append(f"   🔥 {t(lang, 'labels.streak', days=s.streak)}")
        lines.append("")
    return "\n".join(lines).rstrip()


def habit_progress(stats: list[tuple[Habit, HabitStats]], year: int, lang: Language) -> str:
    if not stats:
        return t(lang, "messages.no_habits")

    lines = [f"📊 {t(lang, 'labels.habit_progress', year=year)}:", ""]
    for habit, s in stats:
        lines.append(f"{habit_emoji(habit.name)} {habit.name}")
        lines.append(f"   {s.completed_days}/{s.total_days} ({s.percentage:.1f}%)")
        if s.streak > 0:
            lines.append(f"   🔥 {t(lang, 'labels.streak', days=s.streak)}")
        lines.append("")
    return "\n".join(lines).rstrip()


def habit_review(review: list[tuple[Habit, int]], year: int, lang: Language) -> str:
    if not review:
        return t(lang, "messages.no_habits")
    lines = [f"📊 {t(lang, 'labels.habit_review', year=year)}:", ""]
    for habit, count in review:
        lines.append(f"{habit_emoji(habit.name)} {habit.name}: {count}")
    return "\n".join(lines)


def habit_stats(habit: Habit, s: HabitStats, year: int, lang: Language) -> str:
    lines = [
        f"📊 {habit.name} - {t(lang, 'labels.statistics')}",
        "",
        f"📅 {t(lang, 'labels.year')}: {year}",
        f"✅ {t(lang, 'labels.completed', days=s.completed_days)}",
        f"📈 {t(lang, 'labels.total_days', days=s.total_days)}",
        f"📊 {t(lang, 'labels.percentage', percentage=f'{s.percentage:.1f}')}",
    ]
    if s.streak > 0:
        lines.append(f"🔥 {t(lang, 'labels.streak', days=s.streak)}")
    return "\n".join(lines)


def habit_linked(habit: Habit, action: Action, lang: Language) -> str:
    return (
        f"{t(lang, 'messages.habit_linked')}\n\n"
        f"{habit_emoji(habit.name)} {habit.name}\n"
        f"📝 {action.description} ({t(lang, 'labels.action_id')}: {action.id})"
    )


def record_label(entity_type: EntityType, record, symbol: str) -> str:
    """One line per record, used by generic list and delete replies."""
    if entity_type in (EntityType.EXPENSE, EntityType.INCOME):
        return f"#{record.id} {format_day(record.date)} {record.description} - {format_money(record.amount, symbol)} ({record.category})"
    if entity_type is EntityType.INVESTMENT:
        return f"#{record.id} {record.name} ({record.type}) - {format_money(record.amount, symbol)}"
    if entity_type is EntityType.CONTRIBUTION:
        return f"#{record.id} {format_day(record.date)} {format_money(record.amount, symbol)} → #{record.investment_id}"
    if entity_type is EntityType.HABIT:
        return f"#{record.id} {record.name}"
    if entity_type in (EntityType.OBJECTIVE, EntityType.KEY_RESULT):
        return f"#{record.id} {record.title}"
    return f"#{record.id} {record.description}" + (f" - {record.progress}" if record.progress else "")


def record_list(entity_type: EntityType, records: list, lang: Language, symbol: str) -> str:
    if not records:
        return t(lang, "messages.no_records")
    lines = [f"📋 {t(lang, 'labels.list_title', entity=entity_name(entity_type, lang))}:", ""]
    lines.extend(record_label(entity_type, record, symbol) for record in records)
    return "\n".join(lines)


def deleted(entity_type: EntityType, record, lang: Language, symbol: str) -> str:
    label = record_label(entity_type, record, symbol).split(" ", 1)[1]
    return t(lang, "messages.deleted", entity=entity_name(entity_type, lang), id=record.id, name=label)
