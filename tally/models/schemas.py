from datetime import date, datetime
from typing import Any, Literal

from pydantic import BaseModel, Field

from tally.commands.keywords import EntityType, Language, Verb


class User(BaseModel):
    id: int | None = None
    telegram_id: str
    username: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    referral_code: str
    referred_by: str | None = None
    language: Language = Language.PT
    timezone: str = "America/Sao_Paulo"
    created_at: datetime = Field(default_factory=datetime.now)


class Expense(BaseModel):
    id: int | None = None
    user_id: int
    amount: float
    description: str
    category: str = "Other"
    date: date
    created_at: datetime = Field(default_factory=datetime.now)


class Income(Expense):
    pass


class Investment(BaseModel):
    id: int | None = None
    user_id: int
    name: str
    type: str
    amount: float
    current_value: float | None = None
    purchase_date: date
    notes: str | None = None
    created_at: datetime = Field(default_factory=datetime.now)


class Contribution(BaseModel):
    id: int | None = None
    user_id: int
    investment_id: int
    amount: float
    date: date
    notes: str | None = None
    created_at: datetime = Field(default_factory=datetime.now)


class Habit(BaseModel):
    id: int | None = None
    user_id: int
    name: str
    description: str | None = None
    frequency_type: Literal["daily", "weekly"] = "daily"
    frequency_value: int | None = None
    unit: str | None = None
    linked_action_id: int | None = None
    created_at: datetime = Field(default_factory=datetime.now)


class HabitLog(BaseModel):
    id: int | None = None
    user_id: int
    habit_id: int
    date: date
    value: float | None = None
    notes: str | None = None
    created_at: datetime = Field(default_factory=datetime.now)


class Objective(BaseModel):
    id: int | None = None
    user_id: int
    title: str
    description: str | None = None
    target_date: date | None = None
    created_at: datetime = Field(default_factory=datetime.now)


class KeyResult(BaseModel):
    id: int | None = None
    user_id: int
    objective_id: int
    title: str
    target_value: float | None = None
    current_value: float | None = None
    unit: str | None = None
    created_at: datetime = Field(default_factory=datetime.now)


class Action(BaseModel):
    id: int | None = None
    user_id: int
    key_result_id: int
    description: str
    progress: str | None = None
    created_at: datetime = Field(default_factory=datetime.now)


class CategoryTotal(BaseModel):
    category: str
    total: float
    count: int


class HabitStats(BaseModel):
    total_days: int
    completed_days: int
    percentage: float
    streak: int


class ParseRequest(BaseModel):
    message: str
    language: Language = Language.PT


class ParseResponse(BaseModel):
    tokens: list[str]
    verb: Verb
    entity_type: EntityType | None = None
    residual_args: list[str]
    fields: dict[str, Any] | None = None
    error: str | None = None
