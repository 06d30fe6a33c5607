from tally.commands.amounts import is_positive_amount
from tally.commands.keywords import EntityType, Language, Verb, detect_verb, match_entity_token
from tally.models.commands import ParsedCommand


def _match_entity(tokens: list[str], language: Language) -> tuple[EntityType | None, int]:
    """Return the entity named at the head of ``tokens`` and how many tokens name it."""
    if len(tokens) >= 2:
        entity_type = match_entity_token(f"{tokens[0]} {tokens[1]}", language)
        if entity_type is not None:
            return entity_type, 2
    if tokens:
        entity_type = match_entity_token(tokens[0], language)
        if entity_type is not None:
            return entity_type, 1
    return None, 0


def classify(tokens: list[str], language: Language, original_text: str | None = None) -> ParsedCommand:
    """Work out the verb and entity a tokenized command refers to.

    A missing verb defaults to ``list``. A command with no entity keyword whose
    first remaining token is a positive number is the expense shorthand
    (``50 coffee``). Never raises: anything unrecognised comes back with
    ``entity_type=None`` for the caller to answer with usage text.
    """
    if original_text is None:
        original_text = " ".join(tokens)
    if not tokens:
        return ParsedCommand(verb=Verb.UNKNOWN, original_text=original_text)

    verb = detect_verb(tokens[0], language)
    if verb is not None:
        working = tokens[1:]
    else:
        verb = Verb.LIST
        working = list(tokens)

    entity_type, consumed = _match_entity(working, language)
    working = working[consumed:]

    amount_first = False
    if entity_type is None and working and is_positive_amount(working[0]):
        entity_type = EntityType.EXPENSE
        amount_first = True

    return ParsedCommand(
        verb=verb,
        entity_type=entity_type,
        residual_args=working,
        original_text=original_text,
        amount_first=amount_first,
    )
