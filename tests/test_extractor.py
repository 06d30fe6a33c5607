"""Tests for field extraction from residual arguments."""

from datetime import date
from decimal import Decimal

import pytest

from tally.commands.classifier import classify
from tally.commands.errors import ExtractionError, ExtractionReason
from tally.commands.extractor import (
    extract,
    extract_habit,
    extract_habit_log,
    extract_key_result,
    extract_link,
    extract_money,
    extract_progress,
    extract_value_update,
)
from tally.commands.keywords import EntityType, Language
from tally.commands.tokenizer import tokenize

TODAY = date(2024, 3, 15)


class TestMoney:
    """Test two-field extraction for expenses and incomes."""

    @pytest.mark.parametrize("token", ["50,00", "50.00"])
    def test_both_decimal_separators(self, token):
        fields = extract(EntityType.EXPENSE, ["coffee", token])
        assert fields.amount == Decimal("50.00")
        assert fields.description == "coffee"

    def test_amount_is_last_token(self):
        fields = extract(EntityType.INCOME, ["bonus", "2023", "1500"])
        assert fields.description == "bonus 2023"
        assert fields.amount == Decimal("1500")

    def test_amount_first_shorthand(self):
        fields = extract_money(["50", "café", "da", "manhã"], amount_first=True)
        assert fields.amount == Decimal("50")
        assert fields.description == "café da manhã"

    def test_currency_prefix_is_rejected(self):
        """Test that R$50 fails the format test even though its digits parse."""
        with pytest.raises(ExtractionError) as exc:
            extract(EntityType.EXPENSE, ["lunch", "R$50"])
        assert exc.value.reason is ExtractionReason.INVALID_AMOUNT
        assert exc.value.token == "R$50"

    @pytest.mark.parametrize("token", ["0", "0,00", "-5", "abc"])
    def test_non_positive_or_garbage_amount(self, token):
        with pytest.raises(ExtractionError) as exc:
            extract(EntityType.EXPENSE, ["lunch", token])
        assert exc.value.reason is ExtractionReason.INVALID_AMOUNT

    def test_empty_arguments(self):
        with pytest.raises(ExtractionError):
            extract_money([])

    def test_empty_description(self):
        with pytest.raises(ExtractionError) as exc:
            extract_money(["50"])
        assert exc.value.reason is ExtractionReason.MISSING_NAME_OR_TYPE

    def test_blank_quoted_description(self):
        with pytest.raises(ExtractionError) as exc:
            extract_money(["50", "  "], amount_first=True)
        assert exc.value.reason is ExtractionReason.MISSING_NAME_OR_TYPE


class TestInvestment:
    """Test the backward numeric scan used for investments."""

    def test_name_type_amount(self):
        fields = extract(EntityType.INVESTMENT, ["reserva", "de", "emergencia", "CDB", "1000"])
        assert fields.name == "reserva de emergencia"
        assert fields.type == "CDB"
        assert fields.amount == Decimal("1000")
        assert fields.current_value is None

    def test_two_numbers_last_one_is_amount(self):
        fields = extract(EntityType.INVESTMENT, ["Tesouro", "Direto", "RendaFixa", "1000", "13200"])
        assert fields.name == "Tesouro Direto"
        assert fields.type == "RendaFixa"
        assert fields.amount == Decimal("13200")
        assert fields.current_value == Decimal("1000")

    def test_number_inside_name(self):
        fields = extract(EntityType.INVESTMENT, ["Tesouro", "2029", "IPCA", "1000"])
        assert fields.name == "Tesouro 2029"
        assert fields.type == "IPCA"
        assert fields.amount == Decimal("1000")
        assert fields.current_value is None

    def test_number_inside_name_with_current_value(self):
        fields = extract(EntityType.INVESTMENT, ["Tesouro", "2029", "IPCA", "1000", "1100"])
        assert fields.name == "Tesouro 2029"
        assert fields.type == "IPCA"
        assert fields.amount == Decimal("1100")
        assert fields.current_value == Decimal("1000")

    def test_date_and_notes(self):
        fields = extract(
            EntityType.INVESTMENT,
            ["Bitcoin", "Crypto", "1000.00", "2024-01-15", "bought", "the", "dip"],
            today=TODAY,
        )
        assert fields.name == "Bitcoin"
        assert fields.type == "Crypto"
        assert fields.amount == Decimal("1000.00")
        assert fields.date == date(2024, 1, 15)
        assert fields.notes == "bought the dip"

    def test_date_defaults_to_today(self):
        fields = extract(EntityType.INVESTMENT, ["Bitcoin", "Crypto", "1000"], today=TODAY)
        assert fields.date == TODAY
        assert fields.notes is None

    def test_no_number(self):
        with pytest.raises(ExtractionError) as exc:
            extract(EntityType.INVESTMENT, ["Bitcoin", "Crypto"])
        assert exc.value.reason is ExtractionReason.INVALID_AMOUNT

    def test_zero_amount(self):
        with pytest.raises(ExtractionError) as exc:
            extract(EntityType.INVESTMENT, ["Bitcoin", "Crypto", "0"])
        assert exc.value.reason is ExtractionReason.INVALID_AMOUNT

    def test_missing_type(self):
        with pytest.raises(ExtractionError) as exc:
            extract(EntityType.INVESTMENT, ["Bitcoin", "1000"])
        assert exc.value.reason is ExtractionReason.MISSING_NAME_OR_TYPE

    def test_impossible_calendar_date(self):
        with pytest.raises(ExtractionError) as exc:
            extract(EntityType.INVESTMENT, ["Bitcoin", "Crypto", "1000", "2024-02-30"])
        assert exc.value.reason is ExtractionReason.INVALID_DATE

    def test_end_to_end_from_command_text(self):
        tokens = tokenize('addinvestment "reserva de emergencia" CDB 84203,72')
        assert tokens == ["addinvestment", "reserva de emergencia", "CDB", "84203,72"]

        fields = extract(EntityType.INVESTMENT, tokens[1:], today=TODAY)
        assert fields.name == "reserva de emergencia"
        assert fields.type == "CDB"
        assert fields.amount == Decimal("84203.72")
        assert fields.current_value is None
        assert fields.date == TODAY


class TestContribution:
    def test_investment_amount_and_date(self):
        fields = extract(EntityType.CONTRIBUTION, ["reserva", "500", "2024-03-01", "bonus"], today=TODAY)
        assert fields.investment == "reserva"
        assert fields.amount == Decimal("500")
        assert fields.date == date(2024, 3, 1)
        assert fields.notes == "bonus"

    def test_missing_investment(self):
        with pytest.raises(ExtractionError) as exc:
            extract(EntityType.CONTRIBUTION, ["500"])
        assert exc.value.reason is ExtractionReason.MISSING_NAME_OR_TYPE


class TestHabits:
    def test_daily_by_default(self):
        fields = extract_habit(["leitura"])
        assert fields.frequency_type == "daily"
        assert fields.frequency_value is None

    def test_weekly_frequency(self):
        fields = extract_habit(tokenize('treino "4x por semana"'))
        assert fields.name == "treino"
        assert fields.frequency_type == "weekly"
        assert fields.frequency_value == 4

    def test_log_with_value_and_date(self):
        fields = extract_habit_log(["agua", "2L", "2024-03-10"], today=TODAY)
        assert fields.value == 2.0
        assert fields.date == date(2024, 3, 10)

    def test_log_with_only_date(self):
        fields = extract_habit_log(["treino", "2024-03-10"], today=TODAY)
        assert fields.value is None
        assert fields.date == date(2024, 3, 10)

    def test_log_defaults_to_today(self):
        assert extract_habit_log(["treino"], today=TODAY).date == TODAY


class TestGoalsAndUpdates:
    def test_key_result_with_target(self):
        fields = extract_key_result(["1", "long", "runs", "42"])
        assert fields.objective == "1"
        assert fields.title == "long runs"
        assert fields.target == Decimal("42")

    def test_key_result_numeric_title_without_target(self):
        fields = extract_key_result(["1", "42"])
        assert fields.title == "42"
        assert fields.target is None

    def test_value_update_allows_zero(self):
        fields = extract_value_update(["reserva", "de", "emergencia", "0"])
        assert fields.identifier == "reserva de emergencia"
        assert fields.value == Decimal("0")

    def test_value_update_rejects_garbage(self):
        with pytest.raises(ExtractionError) as exc:
            extract_value_update(["reserva", "lots"])
        assert exc.value.reason is ExtractionReason.INVALID_AMOUNT

    def test_progress_keeps_free_text(self):
        fields = extract_progress(["3", "2/52", "weeks"])
        assert fields.identifier == "3"
        assert fields.progress == "2/52 weeks"

    def test_link_needs_both_sides(self):
        assert extract_link(["treino", "4"]).action == "4"
        with pytest.raises(ExtractionError):
            extract_link(["treino"])

    def test_objective_title(self):
        parsed = classify(tokenize('add objective "Run a marathon"'), Language.EN)
        assert extract(parsed.entity_type, parsed.residual_args).title == "Run a marathon"
