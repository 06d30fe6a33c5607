"""Tests for verb and entity classification."""

from tally.commands.classifier import classify
from tally.commands.keywords import EntityType, Language, Verb
from tally.commands.tokenizer import tokenize


def parse(text: str, language: Language = Language.EN):
    return classify(tokenize(text), language, original_text=text)


class TestClassify:
    """Test the classification rules in order."""

    def test_empty_tokens(self):
        parsed = classify([], Language.EN)
        assert parsed.verb is Verb.UNKNOWN
        assert parsed.entity_type is None
        assert parsed.residual_args == []

    def test_verb_and_entity_are_consumed(self):
        parsed = parse("delete kr peso")
        assert parsed.verb is Verb.DELETE
        assert parsed.entity_type is EntityType.KEY_RESULT
        assert parsed.residual_args == ["peso"]
        assert parsed.original_text == "delete kr peso"

    def test_portuguese_keywords(self):
        parsed = parse('adicionar investimento "reserva de emergencia" CDB 1000', Language.PT)
        assert parsed.verb is Verb.ADD
        assert parsed.entity_type is EntityType.INVESTMENT
        assert parsed.residual_args == ["reserva de emergencia", "CDB", "1000"]

    def test_missing_verb_defaults_to_list(self):
        parsed = parse("investments")
        assert parsed.verb is Verb.LIST
        assert parsed.entity_type is EntityType.INVESTMENT
        assert parsed.residual_args == []

    def test_two_word_entity_keyword(self):
        parsed = parse("update key result 3 10")
        assert parsed.entity_type is EntityType.KEY_RESULT
        assert parsed.residual_args == ["3", "10"]

    def test_unknown_entity_keeps_all_tokens(self):
        parsed = parse("add banana split")
        assert parsed.verb is Verb.ADD
        assert parsed.entity_type is None
        assert parsed.residual_args == ["banana", "split"]

    def test_entity_only_matches_first_token(self):
        parsed = parse("add coffee expense")
        assert parsed.entity_type is None


class TestAmountShorthand:
    """Test the bare '<amount> <description>' expense form."""

    def test_leading_amount_is_expense(self):
        parsed = parse("50 café", Language.PT)
        assert parsed.verb is Verb.LIST
        assert parsed.entity_type is EntityType.EXPENSE
        assert parsed.amount_first is True
        assert parsed.residual_args == ["50", "café"]

    def test_leading_amount_after_verb(self):
        parsed = parse("add 12,50 lunch")
        assert parsed.verb is Verb.ADD
        assert parsed.entity_type is EntityType.EXPENSE
        assert parsed.amount_first is True

    def test_zero_is_not_shorthand(self):
        parsed = parse("add 0 lunch")
        assert parsed.entity_type is None
        assert parsed.amount_first is False

    def test_currency_prefix_is_not_shorthand(self):
        parsed = parse("add R$50 lunch")
        assert parsed.entity_type is None

    def test_keyword_wins_over_shorthand(self):
        parsed = parse("add expense uber 50")
        assert parsed.entity_type is EntityType.EXPENSE
        assert parsed.amount_first is False
