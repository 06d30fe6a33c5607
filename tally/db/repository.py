import calendar
import secrets
import string
import threading
from datetime import date, timedelta

from loguru import logger
from pydantic import BaseModel
from tinydb import Query, TinyDB
from tinydb.storages import MemoryStorage

from tally.commands.errors import CollaboratorError
from tally.commands.keywords import EntityType
from tally.models.schemas import (
    Action,
    CategoryTotal,
    Contribution,
    Expense,
    Habit,
    HabitLog,
    HabitStats,
    Income,
    Investment,
    KeyResult,
    Objective,
    User,
)

MODELS: dict[EntityType, type[BaseModel]] = {
    EntityType.EXPENSE: Expense,
    EntityType.INCOME: Income,
    EntityType.INVESTMENT: Investment,
    EntityType.CONTRIBUTION: Contribution,
    EntityType.HABIT: Habit,
    EntityType.OBJECTIVE: Objective,
    EntityType.KEY_RESULT: KeyResult,
    EntityType.ACTION: Action,
}

TABLES: dict[EntityType, str] = {
    EntityType.EXPENSE: "expenses",
    EntityType.INCOME: "incomes",
    EntityType.INVESTMENT: "investments",
    EntityType.CONTRIBUTION: "contributions",
    EntityType.HABIT: "habits",
    EntityType.OBJECTIVE: "objectives",
    EntityType.KEY_RESULT: "key_results",
    EntityType.ACTION: "actions",
}

# Field searched by name lookups and used for ordering.
NAME_FIELDS: dict[EntityType, str] = {
    EntityType.EXPENSE: "description",
    EntityType.INCOME: "description",
    EntityType.INVESTMENT: "name",
    EntityType.CONTRIBUTION: "notes",
    EntityType.HABIT: "name",
    EntityType.OBJECTIVE: "title",
    EntityType.KEY_RESULT: "title",
    EntityType.ACTION: "description",
}

# Children removed together with their parent.
CHILDREN: dict[EntityType, tuple[tuple[EntityType, str], ...]] = {
    EntityType.OBJECTIVE: ((EntityType.KEY_RESULT, "objective_id"),),
    EntityType.KEY_RESULT: ((EntityType.ACTION, "key_result_id"),),
    EntityType.INVESTMENT: ((EntityType.CONTRIBUTION, "investment_id"),),
}

REFERRAL_ALPHABET = string.ascii_uppercase + string.digits


def generate_referral_code(length: int = 8) -> str:
    return "".join(secrets.choice(REFERRAL_ALPHABET) for _ in range(length))


class TallyRepository:
    """TinyDB-backed store. Every entity row carries the owning ``user_id``."""

    def __init__(self, db_path: str = "tally.json"):
        if db_path == ":memory:":
            self.db = TinyDB(storage=MemoryStorage)
        else:
            self.db = TinyDB(db_path)
        self.users = self.db.table("users")
        self.habit_logs = self.db.table("habit_logs")
        self._lock = threading.RLock()

    def table(self, entity_type: EntityType):
        return self.db.table(TABLES[entity_type])

    def _load(self, entity_type: EntityType, doc) -> BaseModel:
        return MODELS[entity_type](id=doc.doc_id, **doc)

    # Users

    def add_user(self, user: User) -> User:
        data = user.model_dump(mode="json")
        data.pop("id", None)
        with self._lock:
            user.id = self.users.insert(data)
        logger.info("Registered user #{} (telegram {})", user.id, user.telegram_id)
        return user

    def get_user(self, id: int) -> User | None:
        doc = self.users.get(doc_id=id)
        if doc is None:
            return None
        return User(id=doc.doc_id, **doc)

    def get_user_by_telegram_id(self, telegram_id: str) -> User | None:
        U = Query()
        docs = self.users.search(U.telegram_id == str(telegram_id))
        return User(id=docs[0].doc_id, **docs[0]) if docs else None

    def get_user_by_referral_code(self, code: str) -> User | None:
        U = Query()
        docs = self.users.search(U.referral_code.test(lambda val: val.upper() == code.upper()))
        return User(id=docs[0].doc_id, **docs[0]) if docs else None

    def update_user(self, id: int, **fields) -> User | None:
        if self.users.get(doc_id=id) is None:
            return None
        updates = {k: getattr(v, "value", v) for k, v in fields.items() if v is not None}
        if updates:
            with self._lock:
                self.users.update(updates, doc_ids=[id])
        return self.get_user(id)

    # Entities

    def add(self, entity_type: EntityType, record: BaseModel) -> BaseModel:
        data = record.model_dump(mode="json")
        data.pop("id", None)
        with self._lock:
            record.id = self.table(entity_type).insert(data)
        logger.info("Created {} #{} for user #{}", entity_type.value, record.id, record.user_id)
        return record

    def get(self, entity_type: EntityType, id: int, owner_id: int) -> BaseModel | None:
        doc = self.table(entity_type).get(doc_id=id)
        if doc is None or doc.get("user_id") != owner_id:
            return None
        return self._load(entity_type, doc)

    def get_all(self, entity_type: EntityType, owner_id: int, **filters) -> list[BaseModel]:
        """Owner's rows matching ``filters`` by equality, in insertion order."""
        R = Query()
        condition = R.user_id == owner_id
        for field, value in filters.items():
            condition &= R[field] == value
        docs = self.table(entity_type).search(condition)
        return [self._load(entity_type, doc) for doc in sorted(docs, key=lambda d: d.doc_id)]

    def list_between(
        self, entity_type: EntityType, owner_id: int, start: date, end: date, field: str = "date"
    ) -> list[BaseModel]:
        """Rows whose ``field`` falls in [start, end], newest first."""
        R = Query()
        lo, hi = start.isoformat(), end.isoformat()
        docs = self.table(entity_type).search(
            (R.user_id == owner_id) & R[field].test(lambda val: val is not None and lo <= val[:10] <= hi)
        )
        records = [self._load(entity_type, doc) for doc in docs]
        return sorted(records, key=lambda r: (getattr(r, field), r.id), reverse=True)

    def search_by_name(self, entity_type: EntityType, owner_id: int, text: str, limit: int = 10) -> list[BaseModel]:
        """Case-insensitive containment search, exact matches first, then by name."""
        field = NAME_FIELDS[entity_type]
        needle = text.lower()
        R = Query()
        docs = self.table(entity_type).search(
            (R.user_id == owner_id) & R[field].test(lambda val: val is not None and needle in val.lower())
        )
        records = [self._load(entity_type, doc) for doc in docs]
        records.sort(key=lambda r: (getattr(r, field).lower() != needle, getattr(r, field).lower(), r.id))
        return records[:limit]

    def update(self, entity_type: EntityType, id: int, owner_id: int, **fields) -> BaseModel | None:
        if self.get(entity_type, id, owner_id) is None:
            return None
        # Filter out None values so we only update provided fields
        updates = {
            k: v.isoformat() if isinstance(v, date) else v
            for k, v in fields.items()
            if v is not None
        }
        if updates:
            with self._lock:
                self.table(entity_type).update(updates, doc_ids=[id])
        return self.get(entity_type, id, owner_id)

    def delete(self, entity_type: EntityType, id: int, owner_id: int) -> bool:
        if self.get(entity_type, id, owner_id) is None:
            return False
        with self._lock:
            for child_type, foreign_key in CHILDREN.get(entity_type, ()):
                for child in self.get_all(child_type, owner_id, **{foreign_key: id}):
                    self.delete(child_type, child.id, owner_id)
            if entity_type is EntityType.HABIT:
                H = Query()
                self.habit_logs.remove(H.habit_id == id)
            if entity_type is EntityType.ACTION:
                H = Query()
                self.table(EntityType.HABIT).update({"linked_action_id": None}, H.linked_action_id == id)
            self.table(entity_type).remove(doc_ids=[id])
        logger.info("Deleted {} #{} for user #{}", entity_type.value, id, owner_id)
        return True

    # Money

    def category_totals(self, entity_type: EntityType, owner_id: int, start: date, end: date) -> list[CategoryTotal]:
        totals: dict[str, CategoryTotal] = {}
        for record in self.list_between(entity_type, owner_id, start, end):
            bucket = totals.setdefault(record.category, CategoryTotal(category=record.category, total=0, count=0))
            bucket.total += record.amount
            bucket.count += 1
        return sorted(totals.values(), key=lambda c: c.total, reverse=True)

    # Investments

    def investment_totals(self, owner_id: int) -> tuple[float, float]:
        """(total invested, total current value); unvalued items count at cost."""
        investments = self.get_all(EntityType.INVESTMENT, owner_id)
        invested = sum(inv.amount for inv in investments)
        value = sum(inv.current_value if inv.current_value is not None else inv.amount for inv in investments)
        return invested, value

    def add_contribution(self, contribution: Contribution) -> tuple[Contribution, Investment]:
        """Record a contribution and raise the investment's amount in one step.

        A current value, when set, grows by the same amount. If the investment
        update fails the contribution row is removed again.
        """
        with self._lock:
            investment = self.get(EntityType.INVESTMENT, contribution.investment_id, contribution.user_id)
            if investment is None:
                raise CollaboratorError(f"investment #{contribution.investment_id} disappeared")
            self.add(EntityType.CONTRIBUTION, contribution)
            try:
                updates = {"amount": investment.amount + contribution.amount}
                if investment.current_value is not None:
                    updates["current_value"] = investment.current_value + contribution.amount
                self.table(EntityType.INVESTMENT).update(updates, doc_ids=[investment.id])
            except Exception as e:
                self.table(EntityType.CONTRIBUTION).remove(doc_ids=[contribution.id])
                logger.error("Rolled back contribution #{}: {}", contribution.id, e)
                raise CollaboratorError("could not apply contribution") from e
            return contribution, self.get(EntityType.INVESTMENT, investment.id, contribution.user_id)

    # Habits

    def log_habit(self, habit: Habit, day: date, value: float | None = None, notes: str | None = None) -> HabitLog:
        """One log per habit per day; logging again updates value/notes."""
        H = Query()
        with self._lock:
            existing = self.habit_logs.search((H.habit_id == habit.id) & (H.date == day.isoformat()))
            if existing:
                doc = existing[0]
                updates = {k: v for k, v in {"value": value, "notes": notes}.items() if v is not None}
                if updates:
                    self.habit_logs.update(updates, doc_ids=[doc.doc_id])
                doc = self.habit_logs.get(doc_id=doc.doc_id)
                return HabitLog(id=doc.doc_id, **doc)

            log = HabitLog(user_id=habit.user_id, habit_id=habit.id, date=day, value=value, notes=notes)
            data = log.model_dump(mode="json")
            data.pop("id", None)
            log.id = self.habit_logs.insert(data)
            return log

    def habit_log_dates(self, habit_id: int, year: int | None = None) -> set[date]:
        H = Query()
        docs = self.habit_logs.search(H.habit_id == habit_id)
        days = {date.fromisoformat(doc["date"]) for doc in docs}
        if year is not None:
            days = {d for d in days if d.year == year}
        return days

    def habit_stats(self, habit_id: int, year: int, today: date) -> HabitStats:
        """Days logged in ``year`` and the streak of consecutive days ending today."""
        total_days = 366 if calendar.isleap(year) else 365
        days = self.habit_log_dates(habit_id, year)
        streak = 0
        if year == today.year:
            check = today
            while check.year == year and check in days:
                streak += 1
                check -= timedelta(days=1)
        return HabitStats(
            total_days=total_days,
            completed_days=len(days),
            percentage=round(len(days) / total_days * 100, 2),
            streak=streak,
        )

    def habits_yearly_review(self, owner_id: int, year: int) -> list[tuple[Habit, int]]:
        review = [
            (habit, len(self.habit_log_dates(habit.id, year)))
            for habit in self.get_all(EntityType.HABIT, owner_id)
        ]
        return sorted(review, key=lambda item: item[1], reverse=True)
