"""Turn the residual arguments of a classified command into typed fields.

Every extractor raises ``ExtractionError`` rather than returning a partial
record, so callers never write half-parsed data.
"""

import re
from datetime import date
from decimal import Decimal

from tally.commands.amounts import is_amount_token, is_date_token, parse_amount, parse_amount_value, parse_date
from tally.commands.errors import ExtractionError, ExtractionReason
from tally.commands.keywords import EntityType
from tally.models.commands import (
    ActionFields,
    ContributionFields,
    HabitFields,
    HabitLogFields,
    InvestmentFields,
    KeyResultFields,
    LinkFields,
    MoneyFields,
    ObjectiveFields,
    ProgressFields,
    ValueUpdateFields,
)

WEEKLY_WORDS = ("semana", "semanal", "week", "weekly")
HABIT_VALUE = re.compile(r"(\d+\.?\d*)")


def _find_date(args: list[str]) -> tuple[date | None, int]:
    """Last date-shaped token and its index, or (None, -1)."""
    for index in range(len(args) - 1, -1, -1):
        if is_date_token(args[index]):
            parsed = parse_date(args[index])
            if parsed is None:
                raise ExtractionError(ExtractionReason.INVALID_DATE, args[index])
            return parsed, index
    return None, -1


def _collect_numbers(args: list[str], end: int) -> list[tuple[Decimal, int]]:
    """(value, index) for every amount token before ``end``, last one first."""
    numbers = []
    for index in range(end - 1, -1, -1):
        if is_amount_token(args[index]):
            value = parse_amount_value(args[index])
            if value is not None:
                numbers.append((value, index))
    return numbers


def _notes_after(args: list[str], date_index: int, amount_index: int) -> str | None:
    if date_index > amount_index:
        notes = " ".join(args[date_index + 1:]).strip()
        return notes or None
    return None


def extract_money(args: list[str], amount_first: bool = False) -> MoneyFields:
    """Description plus amount.

    The amount is the last token, except for the bare ``<amount> <description>``
    shorthand where it is the first one.
    """
    if not args:
        raise ExtractionError(ExtractionReason.INVALID_AMOUNT)
    if amount_first:
        token, rest = args[0], args[1:]
    else:
        token, rest = args[-1], args[:-1]

    amount = parse_amount(token)
    if amount is None or amount <= 0:
        raise ExtractionError(ExtractionReason.INVALID_AMOUNT, token)
    description = " ".join(rest).strip()
    if not description:
        raise ExtractionError(ExtractionReason.MISSING_NAME_OR_TYPE)
    return MoneyFields(description=description, amount=amount)


def extract_investment(args: list[str], today: date | None = None) -> InvestmentFields:
    """``<name...> <type> <amount> [current_value] [YYYY-MM-DD] [notes...]``

    Numbers are collected scanning backwards from the date (or the end); the
    first one found is the amount. The token right before the amount is the
    current value when it is a number too; any other number belongs to the
    name (``Tesouro 2029 IPCA 1000``).
    """
    found_date, date_index = _find_date(args)
    end = date_index if date_index >= 0 else len(args)

    numbers = _collect_numbers(args, end)
    if not numbers:
        raise ExtractionError(ExtractionReason.INVALID_AMOUNT)
    amount, amount_index = numbers[0]
    if amount <= 0:
        raise ExtractionError(ExtractionReason.INVALID_AMOUNT, args[amount_index])

    current_value = None
    region_end = amount_index
    if len(numbers) > 1 and numbers[1][1] == amount_index - 1:
        current_value, region_end = numbers[1]

    name_and_type = args[:region_end]
    if len(name_and_type) < 2:
        raise ExtractionError(ExtractionReason.MISSING_NAME_OR_TYPE)

    return InvestmentFields(
        name=" ".join(name_and_type[:-1]),
        type=name_and_type[-1],
        amount=amount,
        current_value=current_value,
        date=found_date or today,
        notes=_notes_after(args, date_index, amount_index),
    )


def extract_contribution(args: list[str], today: date | None = None) -> ContributionFields:
    """``<investment...> <amount> [YYYY-MM-DD] [notes...]``"""
    found_date, date_index = _find_date(args)
    end = date_index if date_index >= 0 else len(args)

    numbers = _collect_numbers(args, end)
    if not numbers:
        raise ExtractionError(ExtractionReason.INVALID_AMOUNT)
    amount, amount_index = numbers[0]
    if amount <= 0:
        raise ExtractionError(ExtractionReason.INVALID_AMOUNT, args[amount_index])

    investment = " ".join(args[:amount_index]).strip()
    if not investment:
        raise ExtractionError(ExtractionReason.MISSING_NAME_OR_TYPE)

    return ContributionFields(
        investment=investment,
        amount=amount,
        date=found_date or today,
        notes=_notes_after(args, date_index, amount_index),
    )


def extract_habit(args: list[str]) -> HabitFields:
    """``<name> [frequency...]`` where frequency is daily or ``4x por semana``."""
    if not args:
        raise ExtractionError(ExtractionReason.MISSING_NAME_OR_TYPE)
    frequency = " ".join(args[1:]).lower()

    if any(word in frequency for word in WEEKLY_WORDS):
        match = re.search(r"(\d+)", frequency)
        return HabitFields(
            name=args[0],
            frequency_type="weekly",
            frequency_value=int(match.group(1)) if match else None,
        )
    return HabitFields(name=args[0])


def extract_habit_log(args: list[str], today: date | None = None) -> HabitLogFields:
    """``<name> [value] [YYYY-MM-DD]``; a value like ``2L`` keeps its number."""
    if not args:
        raise ExtractionError(ExtractionReason.MISSING_NAME_OR_TYPE)

    raw_value = None
    raw_date = None
    if len(args) >= 2:
        if is_date_token(args[1]):
            raw_date = args[1]
        else:
            raw_value = args[1]
            if len(args) >= 3 and is_date_token(args[2]):
                raw_date = args[2]

    log_date = today
    if raw_date is not None:
        log_date = parse_date(raw_date)
        if log_date is None:
            raise ExtractionError(ExtractionReason.INVALID_DATE, raw_date)

    value = None
    if raw_value is not None:
        match = HABIT_VALUE.search(raw_value.replace(",", "."))
        if match:
            value = float(match.group(1))

    return HabitLogFields(name=args[0], value=value, date=log_date)


def extract_objective(args: list[str]) -> ObjectiveFields:
    title = " ".join(args).strip()
    if not title:
        raise ExtractionError(ExtractionReason.MISSING_NAME_OR_TYPE)
    return ObjectiveFields(title=title)


def extract_key_result(args: list[str]) -> KeyResultFields:
    """``<objective> <title...> [target]``; the target must be numeric."""
    if len(args) < 2:
        raise ExtractionError(ExtractionReason.MISSING_NAME_OR_TYPE)
    rest = args[1:]
    target = None
    if len(rest) >= 2 and is_amount_token(rest[-1]):
        target = parse_amount(rest[-1])
        rest = rest[:-1]
    return KeyResultFields(objective=args[0], title=" ".join(rest), target=target)


def extract_action(args: list[str]) -> ActionFields:
    if len(args) < 2:
        raise ExtractionError(ExtractionReason.MISSING_NAME_OR_TYPE)
    return ActionFields(key_result=args[0], description=" ".join(args[1:]))


def extract_value_update(args: list[str]) -> ValueUpdateFields:
    """``<identifier...> <value>``; zero is allowed, negatives never parse."""
    if len(args) < 2:
        raise ExtractionError(ExtractionReason.MISSING_NAME_OR_TYPE)
    value = parse_amount(args[-1])
    if value is None:
        raise ExtractionError(ExtractionReason.INVALID_AMOUNT, args[-1])
    return ValueUpdateFields(identifier=" ".join(args[:-1]), value=value)


def extract_progress(args: list[str]) -> ProgressFields:
    """``<identifier> <text...>``; also used for renames."""
    if len(args) < 2:
        raise ExtractionError(ExtractionReason.MISSING_NAME_OR_TYPE)
    return ProgressFields(identifier=args[0], progress=" ".join(args[1:]))


def extract_link(args: list[str]) -> LinkFields:
    if len(args) < 2:
        raise ExtractionError(ExtractionReason.MISSING_NAME_OR_TYPE)
    return LinkFields(habit=args[0], action=args[1])


def extract(
    entity_type: EntityType,
    residual_args: list[str],
    amount_first: bool = False,
    today: date | None = None,
):
    """Fields for creating an ``entity_type`` record from ``residual_args``."""
    if entity_type in (EntityType.EXPENSE, EntityType.INCOME):
        return extract_money(residual_args, amount_first=amount_first)
    if entity_type is EntityType.INVESTMENT:
        return extract_investment(residual_args, today=today)
    if entity_type is EntityType.CONTRIBUTION:
        return extract_contribution(residual_args, today=today)
    if entity_type is EntityType.HABIT:
        return extract_habit(residual_args)
    if entity_type is EntityType.OBJECTIVE:
        return extract_objective(residual_args)
    if entity_type is EntityType.KEY_RESULT:
        return extract_key_result(residual_args)
    if entity_type is EntityType.ACTION:
        return extract_action(residual_args)
    raise ValueError(f"no extractor for {entity_type!r}")
