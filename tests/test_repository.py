"""Tests for the TinyDB repository."""

from datetime import date

import pytest

from tally.commands.errors import CollaboratorError
from tally.commands.keywords import EntityType, Language
from tally.db.repository import TallyRepository, generate_referral_code
from tally.models.schemas import (
    Action,
    Contribution,
    Expense,
    Habit,
    Income,
    Investment,
    KeyResult,
    Objective,
)


def expense(user, amount, description, day, category="Other"):
    return Expense(user_id=user.id, amount=amount, description=description, category=category, date=day)


class TestUsers:
    def test_lookup_by_telegram_id_and_referral_code(self, repo: TallyRepository, user):
        assert repo.get_user_by_telegram_id("1001").id == user.id
        assert repo.get_user_by_referral_code(user.referral_code.lower()).id == user.id
        assert repo.get_user_by_telegram_id("nope") is None

    def test_update_language(self, repo: TallyRepository, user):
        updated = repo.update_user(user.id, language=Language.PT)
        assert updated.language is Language.PT

    def test_referral_codes(self):
        code = generate_referral_code()
        assert len(code) == 8
        assert code.isalnum() and code.upper() == code


class TestEntities:
    """Test owner-scoped CRUD."""

    def test_add_assigns_ids(self, repo: TallyRepository, user):
        first = repo.add(EntityType.EXPENSE, expense(user, 10, "coffee", date(2024, 3, 1)))
        second = repo.add(EntityType.EXPENSE, expense(user, 20, "lunch", date(2024, 3, 2)))
        assert (first.id, second.id) == (1, 2)
        assert repo.get(EntityType.EXPENSE, 2, user.id).description == "lunch"

    def test_get_is_scoped_to_owner(self, repo: TallyRepository, user, pt_user):
        record = repo.add(EntityType.EXPENSE, expense(user, 10, "coffee", date(2024, 3, 1)))
        assert repo.get(EntityType.EXPENSE, record.id, pt_user.id) is None
        assert repo.update(EntityType.EXPENSE, record.id, pt_user.id, amount=1) is None
        assert repo.delete(EntityType.EXPENSE, record.id, pt_user.id) is False

    def test_update_skips_missing_values(self, repo: TallyRepository, user):
        record = repo.add(EntityType.EXPENSE, expense(user, 10, "coffee", date(2024, 3, 1)))
        updated = repo.update(EntityType.EXPENSE, record.id, user.id, amount=12.5, description=None)
        assert updated.amount == 12.5
        assert updated.description == "coffee"

    def test_list_between_is_newest_first(self, repo: TallyRepository, user):
        repo.add(EntityType.EXPENSE, expense(user, 10, "old", date(2024, 2, 28)))
        repo.add(EntityType.EXPENSE, expense(user, 10, "early", date(2024, 3, 1)))
        repo.add(EntityType.EXPENSE, expense(user, 10, "late", date(2024, 3, 20)))

        records = repo.list_between(EntityType.EXPENSE, user.id, date(2024, 3, 1), date(2024, 3, 31))
        assert [r.description for r in records] == ["late", "early"]

    def test_search_by_name_respects_limit(self, repo: TallyRepository, user):
        for i in range(5):
            repo.add(EntityType.EXPENSE, expense(user, 10, f"uber {i}", date(2024, 3, 1)))
        assert len(repo.search_by_name(EntityType.EXPENSE, user.id, "UBER", limit=3)) == 3

    def test_category_totals(self, repo: TallyRepository, user):
        day = date(2024, 3, 5)
        repo.add(EntityType.EXPENSE, expense(user, 30, "market", day, "Food"))
        repo.add(EntityType.EXPENSE, expense(user, 20, "bakery", day, "Food"))
        repo.add(EntityType.EXPENSE, expense(user, 100, "bus pass", day, "Transport"))

        totals = repo.category_totals(EntityType.EXPENSE, user.id, date(2024, 3, 1), date(2024, 3, 31))
        assert [(c.category, c.total, c.count) for c in totals] == [("Transport", 100, 1), ("Food", 50, 2)]

    def test_incomes_live_in_their_own_table(self, repo: TallyRepository, user):
        repo.add(EntityType.INCOME, Income(user_id=user.id, amount=5000, description="salary", date=date(2024, 3, 5)))
        assert repo.get_all(EntityType.EXPENSE, user.id) == []
        assert len(repo.get_all(EntityType.INCOME, user.id)) == 1


class TestCascades:
    def test_deleting_objective_removes_its_tree(self, repo: TallyRepository, user):
        objective = repo.add(EntityType.OBJECTIVE, Objective(user_id=user.id, title="Health"))
        kr = repo.add(EntityType.KEY_RESULT, KeyResult(user_id=user.id, objective_id=objective.id, title="runs"))
        action = repo.add(EntityType.ACTION, Action(user_id=user.id, key_result_id=kr.id, description="train"))
        habit = repo.add(EntityType.HABIT, Habit(user_id=user.id, name="treino", linked_action_id=action.id))

        assert repo.delete(EntityType.OBJECTIVE, objective.id, user.id) is True
        assert repo.get_all(EntityType.KEY_RESULT, user.id) == []
        assert repo.get_all(EntityType.ACTION, user.id) == []
        assert repo.get(EntityType.HABIT, habit.id, user.id).linked_action_id is None

    def test_deleting_habit_removes_logs(self, repo: TallyRepository, user):
        habit = repo.add(EntityType.HABIT, Habit(user_id=user.id, name="treino"))
        repo.log_habit(habit, date(2024, 3, 1))
        repo.delete(EntityType.HABIT, habit.id, user.id)
        assert repo.habit_log_dates(habit.id) == set()


class TestInvestments:
    def _investment(self, repo, user, current_value=None):
        return repo.add(EntityType.INVESTMENT, Investment(
            user_id=user.id, name="reserva", type="CDB", amount=1000,
            current_value=current_value, purchase_date=date(2024, 1, 1),
        ))

    def test_contribution_raises_amount_and_value(self, repo: TallyRepository, user):
        investment = self._investment(repo, user, current_value=1100)
        contribution, updated = repo.add_contribution(Contribution(
            user_id=user.id, investment_id=investment.id, amount=500, date=date(2024, 3, 1),
        ))
        assert contribution.id == 1
        assert updated.amount == 1500
        assert updated.current_value == 1600

    def test_contribution_leaves_unset_value_alone(self, repo: TallyRepository, user):
        investment = self._investment(repo, user)
        _, updated = repo.add_contribution(Contribution(
            user_id=user.id, investment_id=investment.id, amount=500, date=date(2024, 3, 1),
        ))
        assert updated.current_value is None

    def test_contribution_to_missing_investment(self, repo: TallyRepository, user):
        with pytest.raises(CollaboratorError):
            repo.add_contribution(Contribution(user_id=user.id, investment_id=99, amount=1, date=date(2024, 3, 1)))
        assert repo.get_all(EntityType.CONTRIBUTION, user.id) == []

    def test_failed_investment_update_rolls_back_contribution(self, repo: TallyRepository, user, monkeypatch):
        investment = self._investment(repo, user, current_value=1100)

        def fail(*args, **kwargs):
            raise OSError("disk full")

        monkeypatch.setattr(repo.table(EntityType.INVESTMENT), "update", fail)
        with pytest.raises(CollaboratorError):
            repo.add_contribution(Contribution(
                user_id=user.id, investment_id=investment.id, amount=500, date=date(2024, 3, 1),
            ))
        monkeypatch.undo()

        assert repo.get_all(EntityType.CONTRIBUTION, user.id) == []
        unchanged = repo.get(EntityType.INVESTMENT, investment.id, user.id)
        assert unchanged.amount == 1000
        assert unchanged.current_value == 1100

    def test_totals_count_unvalued_at_cost(self, repo: TallyRepository, user):
        self._investment(repo, user, current_value=1200)
        self._investment(repo, user)
        assert repo.investment_totals(user.id) == (2000, 2200)


class TestHabits:
    def test_one_log_per_day(self, repo: TallyRepository, user):
        habit = repo.add(EntityType.HABIT, Habit(user_id=user.id, name="agua"))
        repo.log_habit(habit, date(2024, 3, 1), value=1)
        log = repo.log_habit(habit, date(2024, 3, 1), value=2)
        assert log.value == 2
        assert repo.habit_log_dates(habit.id) == {date(2024, 3, 1)}

    def test_stats_and_streak(self, repo: TallyRepository, user):
        habit = repo.add(EntityType.HABIT, Habit(user_id=user.id, name="treino"))
        for day in (date(2023, 12, 31), date(2024, 3, 10), date(2024, 3, 14), date(2024, 3, 15)):
            repo.log_habit(habit, day)

        stats = repo.habit_stats(habit.id, 2024, date(2024, 3, 15))
        assert stats.total_days == 366
        assert stats.completed_days == 3
        assert stats.streak == 2
        assert stats.percentage == round(3 / 366 * 100, 2)

    def test_yearly_review_orders_by_days(self, repo: TallyRepository, user):
        reading = repo.add(EntityType.HABIT, Habit(user_id=user.id, name="leitura"))
        workout = repo.add(EntityType.HABIT, Habit(user_id=user.id, name="treino"))
        repo.log_habit(workout, date(2024, 1, 1))
        repo.log_habit(workout, date(2024, 1, 2))
        repo.log_habit(reading, date(2024, 1, 1))

        review = repo.habits_yearly_review(user.id, 2024)
        assert [(h.name, days) for h, days in review] == [("treino", 2), ("leitura", 1)]
