"""Transient values produced while interpreting a single command."""

from datetime import date as Date
from decimal import Decimal
from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, computed_field

from tally.commands.keywords import EntityType, Verb


class ParsedCommand(BaseModel):
    verb: Verb
    entity_type: EntityType | None = None
    residual_args: list[str] = []
    original_text: str = ""
    # Entity inferred from a leading amount ("/add 50 coffee")
    amount_first: bool = False


class IdentifierQuery(BaseModel):
    raw: str

    @computed_field
    @property
    def as_integer(self) -> int | None:
        text = self.raw.strip()
        if text.isascii() and text.isdigit() and int(text) > 0:
            return int(text)
        return None


class ResolutionMethod(str, Enum):
    EXACT_ID = "exactId"
    EXACT_NAME_MATCH = "exactNameMatch"
    PARTIAL_NAME_MATCH = "partialNameMatch"


class ResolvedEntity(BaseModel):
    entity_type: EntityType
    record: Any
    method: ResolutionMethod

    @property
    def id(self) -> int:
        return self.record.id


class MoneyFields(BaseModel):
    """Expense or income: a description and a positive amount."""

    description: str
    amount: Decimal


class InvestmentFields(BaseModel):
    name: str
    type: str
    amount: Decimal
    current_value: Decimal | None = None
    date: Date | None = None
    notes: str | None = None


class ContributionFields(BaseModel):
    investment: str
    amount: Decimal
    date: Date | None = None
    notes: str | None = None


class HabitFields(BaseModel):
    name: str
    frequency_type: Literal["daily", "weekly"] = "daily"
    frequency_value: int | None = None


class HabitLogFields(BaseModel):
    name: str
    value: float | None = None
    date: Date | None = None


class ObjectiveFields(BaseModel):
    title: str


class KeyResultFields(BaseModel):
    objective: str
    title: str
    target: Decimal | None = None


class ActionFields(BaseModel):
    key_result: str
    description: str


class ValueUpdateFields(BaseModel):
    identifier: str
    value: Decimal


class ProgressFields(BaseModel):
    identifier: str
    progress: str


class LinkFields(BaseModel):
    habit: str
    action: str
