"""Command processing independent of the chat transport.

Every entry point returns exactly one ``Reply``: a success message, a
validation message, a not-found message or the generic error text.
"""

import csv
import io
from datetime import date

from loguru import logger
from pydantic import BaseModel

from tally.bot import formatting as fmt
from tally.commands.classifier import classify
from tally.commands.errors import (
    CollaboratorError,
    ExtractionError,
    ExtractionReason,
    ResolutionError,
)
from tally.commands.extractor import (
    extract,
    extract_habit_log,
    extract_link,
    extract_money,
    extract_progress,
    extract_value_update,
)
from tally.commands.keywords import (
    EntityType,
    Language,
    Verb,
    detect_entity_type,
    detect_verb,
    normalize_language,
)
from tally.commands.resolver import EntityResolver
from tally.commands.tokenizer import tokenize
from tally.config import Settings
from tally.db.repository import TallyRepository, generate_referral_code
from tally.i18n import LIST_ALIASES, entity_name, t
from tally.llm.service import AIService
from tally.models.commands import ParsedCommand
from tally.models.schemas import (
    Action,
    Contribution,
    Expense,
    Habit,
    Income,
    Investment,
    KeyResult,
    Objective,
    User,
)
from tally.timeutil import format_period, month_bounds, today_in_timezone

# Slash commands named after a verb; the rest of the message is classified
# for the entity only, so they work whatever the user's language.
COMMAND_VERBS = {
    "add": Verb.ADD,
    "adicionar": Verb.ADD,
    "list": Verb.LIST,
    "listar": Verb.LIST,
    "show": Verb.SHOW,
    "mostrar": Verb.SHOW,
    "view": Verb.VIEW,
    "ver": Verb.VIEW,
    "update": Verb.UPDATE,
    "atualizar": Verb.UPDATE,
    "edit": Verb.EDIT,
    "editar": Verb.EDIT,
    "delete": Verb.DELETE,
    "deletar": Verb.DELETE,
    "link": Verb.LINK,
    "vincular": Verb.LINK,
}

USAGE_KEYS = {
    "add": "add",
    "adicionar": "add",
    "income": "income",
    "addinvestment": "addinvestment",
    "updateinvestment": "updateinvestment",
    "addobjective": "addobjective",
    "addkr": "addkr",
    "addaction": "addaction",
    "updateprogress": "updateprogress",
    "okr": "okr",
    "addhabit": "addhabit",
    "habit": "habit",
    "habitstats": "habitstats",
    "linkhabit": "linkhabit",
}

LANGUAGE_WORDS = {
    "en": Language.EN,
    "english": Language.EN,
    "inglês": Language.EN,
    "ingles": Language.EN,
    "pt": Language.PT,
    "pt-br": Language.PT,
    "portuguese": Language.PT,
    "português": Language.PT,
    "portugues": Language.PT,
}


class Reply(BaseModel):
    text: str
    document: bytes | None = None
    filename: str | None = None


class CommandProcessor:
    def __init__(self, repo: TallyRepository, ai: AIService, settings: Settings):
        self.repo = repo
        self.ai = ai
        self.resolver = EntityResolver(repo)
        self.symbol = settings.currency_symbol
        self.default_language = normalize_language(settings.default_language)
        self.default_timezone = settings.default_timezone

    # Users

    def start(
        self,
        telegram_id: str,
        username: str | None = None,
        first_name: str | None = None,
        last_name: str | None = None,
        language_code: str | None = None,
        referral_code: str | None = None,
    ) -> Reply:
        existing = self.repo.get_user_by_telegram_id(telegram_id)
        if existing:
            lang = existing.language
            return Reply(text=(
                f"{t(lang, 'messages.welcome_back', name=first_name or existing.first_name or 'User')}\n\n"
                f"{t(lang, 'messages.referral_code', code=existing.referral_code)}\n\n"
                f"{t(lang, 'messages.use_help')}"
            ))

        referred_by = None
        if referral_code:
            referrer = self.repo.get_user_by_referral_code(referral_code)
            if referrer and referrer.telegram_id != telegram_id:
                referred_by = referrer.telegram_id

        user = self.repo.add_user(User(
            telegram_id=telegram_id,
            username=username,
            first_name=first_name,
            last_name=last_name,
            referral_code=generate_referral_code(),
            referred_by=referred_by,
            language=normalize_language(language_code, self.default_language),
            timezone=self.default_timezone,
        ))
        lang = user.language
        parts = [t(lang, "messages.welcome"), t(lang, "messages.referral_code", code=user.referral_code)]
        if referred_by:
            parts.append(t(lang, "messages.referred_by_friend"))
        parts.append(t(lang, "help.text"))
        return Reply(text="\n\n".join(parts))

    def refer(self, user: User, bot_username: str | None) -> Reply:
        link = f"https://t.me/{bot_username or 'your_bot'}?start={user.referral_code}"
        return Reply(text=t(user.language, "messages.referral_link", link=link))

    def set_language(self, user: User, text: str) -> Reply:
        choice = LANGUAGE_WORDS.get(text.strip().lower())
        if choice is None:
            return Reply(text=t(user.language, "messages.current_language"))
        self.repo.update_user(user.id, language=choice)
        logger.info("User #{} switched language to {}", user.id, choice.value)
        return Reply(text=t(choice, "messages.language_set"))

    # Entry point

    def run(self, user: User, command: str | None, text: str) -> Reply:
        """Handle ``/<command> <text>``; ``command`` is None for plain messages."""
        lang = user.language
        command = (command or "").lower()
        usage_key = USAGE_KEYS.get(command, "generic")
        logger.info("User #{} /{} {}", user.id, command or "-", text)

        try:
            return self._run(user, command, text)
        except ExtractionError as e:
            logger.warning("Extraction failed for /{} {!r}: {}", command, text, e)
            return Reply(text=self._extraction_message(e, lang, usage_key))
        except ResolutionError as e:
            alias = LIST_ALIASES[e.entity_type]
            return Reply(text=t(
                lang,
                "messages.not_found",
                entity=entity_name(e.entity_type, lang).capitalize(),
                identifier=e.identifier,
                alias=alias,
            ))
        except CollaboratorError as e:
            logger.error("Collaborator failure for /{}: {}", command, e)
            return Reply(text=t(lang, "errors.generic"))
        except Exception as e:
            logger.error("Error handling /{} {!r}: {}", command, text, e)
            return Reply(text=t(lang, "errors.generic"))

    def _extraction_message(self, error: ExtractionError, lang: Language, usage_key: str) -> str:
        if error.reason is ExtractionReason.INVALID_AMOUNT:
            return t(lang, "messages.invalid_amount")
        if error.reason is ExtractionReason.INVALID_DATE:
            return t(lang, "messages.invalid_date")
        if usage_key == "addinvestment":
            return t(lang, "messages.missing_name_or_type")
        return f"{t(lang, 'messages.missing_details')}\n\n{t(lang, f'usage.{usage_key}')}"

    def _run(self, user: User, command: str, text: str) -> Reply:
        lang = user.language
        args = tokenize(text)

        if not command:
            return self.handle_text(user, text)
        if command in COMMAND_VERBS:
            if not args:
                return Reply(text=t(lang, f"usage.{USAGE_KEYS.get(command, 'generic')}"))
            return self.handle_text(user, text, verb=COMMAND_VERBS[command])

        handler = getattr(self, f"cmd_{command}", None)
        if handler is None:
            return Reply(text=t(lang, "usage.generic"))
        return handler(user, args)

    def today(self, user: User) -> date:
        return today_in_timezone(user.timezone)

    # Generic verb/entity commands

    def handle_text(self, user: User, text: str, verb: Verb | None = None) -> Reply:
        """Classify ``text`` and run it; ``verb`` comes from a verb-named slash command."""
        lang = user.language
        tokens = tokenize(text)
        parsed = classify(tokens, lang, original_text=text)
        if verb is not None:
            parsed = parsed.model_copy(update={"verb": verb})
            explicit_verb = True
        else:
            explicit_verb = bool(tokens) and detect_verb(tokens[0], lang) is not None

        if parsed.entity_type is None and parsed.verb in (Verb.LIST, Verb.SHOW, Verb.VIEW) and parsed.residual_args:
            guessed = detect_entity_type(" ".join(parsed.residual_args), lang)
            if guessed is not None:
                parsed = parsed.model_copy(update={"entity_type": guessed, "residual_args": []})

        # "/add <amount> <description>" whose amount does not parse
        if parsed.entity_type is None and verb is Verb.ADD and len(parsed.residual_args) >= 2:
            return self.add_money(user, EntityType.EXPENSE, parsed.residual_args, amount_first=True)

        if parsed.entity_type is None:
            return Reply(text=t(lang, "usage.generic"))

        if parsed.amount_first and (parsed.verb is Verb.ADD or not explicit_verb):
            return self.add_money(user, EntityType.EXPENSE, parsed.residual_args, amount_first=True)

        if parsed.verb is Verb.ADD:
            return self.add_entity(user, parsed)
        if parsed.verb in (Verb.LIST, Verb.SHOW, Verb.VIEW):
            if parsed.residual_args:
                return self.show_entity(user, parsed.entity_type, " ".join(parsed.residual_args))
            return self.list_entity(user, parsed.entity_type)
        if parsed.verb in (Verb.UPDATE, Verb.EDIT):
            return self.update_entity(user, parsed.entity_type, parsed.residual_args)
        if parsed.verb is Verb.DELETE:
            return self.delete_entity(user, parsed.entity_type, parsed.residual_args)
        if parsed.verb is Verb.LINK and parsed.entity_type is EntityType.HABIT:
            return self.link_habit(user, parsed.residual_args)
        return Reply(text=t(lang, "messages.not_supported", entity=entity_name(parsed.entity_type, lang)))

    def add_entity(self, user: User, parsed: ParsedCommand) -> Reply:
        entity_type = parsed.entity_type
        args = parsed.residual_args
        if entity_type in (EntityType.EXPENSE, EntityType.INCOME):
            return self.add_money(user, entity_type, args)
        if entity_type is EntityType.INVESTMENT:
            return self.cmd_addinvestment(user, args)
        if entity_type is EntityType.CONTRIBUTION:
            return self.add_contribution(user, args)
        if entity_type is EntityType.HABIT:
            return self.cmd_addhabit(user, args)
        if entity_type is EntityType.OBJECTIVE:
            return self.cmd_addobjective(user, args)
        if entity_type is EntityType.KEY_RESULT:
            return self.cmd_addkr(user, args)
        return self.cmd_addaction(user, args)

    def show_entity(self, user: User, entity_type: EntityType, identifier: str) -> Reply:
        lang = user.language
        record = self.resolver.resolve(entity_type, identifier, user.id).record
        if entity_type is EntityType.OBJECTIVE:
            return Reply(text=fmt.okr_detail(record, self._key_results(user, record), lang))
        if entity_type is EntityType.INVESTMENT:
            value = record.current_value if record.current_value is not None else record.amount
            return Reply(text=fmt.investment_list([record], record.amount, value, lang, self.symbol))
        if entity_type is EntityType.HABIT:
            year = self.today(user).year
            stats = self.repo.habit_stats(record.id, year, self.today(user))
            return Reply(text=fmt.habit_stats(record, stats, year, lang))
        return Reply(text=fmt.record_label(entity_type, record, self.symbol))

    def list_entity(self, user: User, entity_type: EntityType) -> Reply:
        lang = user.language
        if entity_type in (EntityType.EXPENSE, EntityType.INCOME):
            start, end = month_bounds(self.today(user))
            records = self.repo.list_between(entity_type, user.id, start, end)
            return Reply(text=fmt.record_list(entity_type, records, lang, self.symbol))
        if entity_type is EntityType.INVESTMENT:
            return self.cmd_investments(user, [])
        if entity_type is EntityType.HABIT:
            return self.cmd_habits(user, [])
        if entity_type in (EntityType.OBJECTIVE, EntityType.KEY_RESULT, EntityType.ACTION):
            return self.cmd_okrs(user, [])
        records = self.repo.get_all(entity_type, user.id)
        return Reply(text=fmt.record_list(entity_type, records, lang, self.symbol))

    def update_entity(self, user: User, entity_type: EntityType, args: list[str]) -> Reply:
        lang = user.language
        if entity_type is EntityType.INVESTMENT:
            return self.cmd_updateinvestment(user, args)
        if entity_type is EntityType.ACTION:
            return self.cmd_updateprogress(user, args)

        if entity_type is EntityType.KEY_RESULT:
            fields = extract_value_update(args)
            kr = self.resolver.resolve(entity_type, fields.identifier, user.id).record
            kr = self.repo.update(entity_type, kr.id, user.id, current_value=float(fields.value))
            return Reply(text=fmt.key_result_updated(kr, lang))

        if entity_type in (EntityType.EXPENSE, EntityType.INCOME):
            fields = extract_value_update(args)
            if fields.value <= 0:
                raise ExtractionError(ExtractionReason.INVALID_AMOUNT, args[-1])
            record = self.resolver.resolve(entity_type, fields.identifier, user.id).record
            self.repo.update(entity_type, record.id, user.id, amount=float(fields.value))
            return Reply(text=t(lang, "messages.amount_updated", amount=fmt.format_money(float(fields.value), self.symbol)))

        if entity_type in (EntityType.OBJECTIVE, EntityType.HABIT):
            fields = extract_progress(args)
            record = self.resolver.resolve(entity_type, fields.identifier, user.id).record
            key = "title" if entity_type is EntityType.OBJECTIVE else "name"
            self.repo.update(entity_type, record.id, user.id, **{key: fields.progress})
            return Reply(text=t(lang, "messages.renamed", name=fields.progress))

        return Reply(text=t(lang, "messages.not_supported", entity=entity_name(entity_type, lang)))

    def delete_entity(self, user: User, entity_type: EntityType, args: list[str]) -> Reply:
        lang = user.language
        if not args:
            return Reply(text=t(lang, "usage.generic"))
        record = self.resolver.resolve(entity_type, " ".join(args), user.id).record
        self.repo.delete(entity_type, record.id, user.id)
        return Reply(text=fmt.deleted(entity_type, record, lang, self.symbol))

    # Expenses and incomes

    def add_money(self, user: User, kind: EntityType, args: list[str], amount_first: bool = False) -> Reply:
        fields = extract_money(args, amount_first=amount_first)
        category = self.ai.categorize(fields.description, kind)
        model = Income if kind is EntityType.INCOME else Expense
        record = self.repo.add(kind, model(
            user_id=user.id,
            amount=float(fields.amount),
            description=fields.description,
            category=category,
            date=self.today(user),
        ))
        return Reply(text=fmt.money_added(record, kind, user.language, self.symbol))

    def cmd_income(self, user: User, args: list[str]) -> Reply:
        if len(args) < 2:
            return Reply(text=t(user.language, "usage.income"))
        return self.add_money(user, EntityType.INCOME, args, amount_first=True)

    def cmd_incomes(self, user: User, args: list[str]) -> Reply:
        lang = user.language
        today = self.today(user)
        start, end = month_bounds(today)
        incomes = self.repo.list_between(EntityType.INCOME, user.id, start, end)
        if not incomes:
            return Reply(text=t(lang, "messages.no_incomes"))
        total = sum(i.amount for i in incomes)
        by_category = self.repo.category_totals(EntityType.INCOME, user.id, start, end)
        return Reply(text=fmt.incomes_report(format_period(today), total, len(incomes), by_category, lang, self.symbol))

    def cmd_report(self, user: User, args: list[str]) -> Reply:
        lang = user.language
        today = self.today(user)
        start, end = month_bounds(today)
        expenses = self.repo.list_between(EntityType.EXPENSE, user.id, start, end)
        if not expenses:
            return Reply(text=t(lang, "messages.no_expenses"))
        total = sum(e.amount for e in expenses)
        by_category = self.repo.category_totals(EntityType.EXPENSE, user.id, start, end)
        insight = self.ai.insight(by_category, total, lang)
        return Reply(text=fmt.monthly_report(format_period(today), total, len(expenses), by_category, insight, lang, self.symbol))

    def cmd_categories(self, user: User, args: list[str]) -> Reply:
        lang = user.language
        today = self.today(user)
        start, end = month_bounds(today)
        by_category = self.repo.category_totals(EntityType.EXPENSE, user.id, start, end)
        if not by_category:
            return Reply(text=t(lang, "messages.no_expenses"))
        return Reply(text=fmt.categories_report(format_period(today), by_category, lang, self.symbol))

    def cmd_reportcsv(self, user: User, args: list[str]) -> Reply:
        lang = user.language
        today = self.today(user)
        start, end = month_bounds(today)
        expenses = self.repo.list_between(EntityType.EXPENSE, user.id, start, end)
        incomes = self.repo.list_between(EntityType.INCOME, user.id, start, end)
        if not expenses and not incomes:
            return Reply(text=t(lang, "messages.no_transactions"))

        total_incomes = sum(i.amount for i in incomes)
        total_expenses = sum(e.amount for e in expenses)
        buffer = io.StringIO()
        writer = csv.writer(buffer)
        writer.writerow([
            t(lang, "labels.type"),
            t(lang, "labels.date"),
            t(lang, "labels.amount"),
            t(lang, "labels.category"),
            t(lang, "labels.description"),
        ])
        for label, records in ((t(lang, "labels.income_row"), incomes), (t(lang, "labels.expense_row"), expenses)):
            for record in records:
                writer.writerow([label, fmt.format_day(record.date), f"{record.amount:.2f}", record.category, record.description])
        writer.writerow(["SUMMARY", "", "", "", ""])
        writer.writerow(["SUMMARY", t(lang, "labels.total_income"), f"{total_incomes:.2f}", "", ""])
        writer.writerow(["SUMMARY", t(lang, "labels.total_expenses"), f"{total_expenses:.2f}", "", ""])
        writer.writerow(["SUMMARY", t(lang, "labels.balance"), f"{total_incomes - total_expenses:.2f}", "", ""])

        return Reply(
            text=t(lang, "messages.report_sent"),
            document=buffer.getvalue().encode("utf-8"),
            filename=f"report_{today.year}_{today.month:02d}.csv",
        )

    # Investments

    def cmd_investments(self, user: User, args: list[str]) -> Reply:
        investments = sorted(
            self.repo.get_all(EntityType.INVESTMENT, user.id),
            key=lambda inv: (inv.purchase_date, inv.id),
            reverse=True,
        )
        invested, value = self.repo.investment_totals(user.id)
        return Reply(text=fmt.investment_list(investments, invested, value, user.language, self.symbol))

    def cmd_addinvestment(self, user: User, args: list[str]) -> Reply:
        if len(args) < 3:
            return Reply(text=t(user.language, "usage.addinvestment"))
        fields = extract(EntityType.INVESTMENT, args, today=self.today(user))
        investment = self.repo.add(EntityType.INVESTMENT, Investment(
            user_id=user.id,
            name=fields.name,
            type=fields.type,
            amount=float(fields.amount),
            current_value=float(fields.current_value) if fields.current_value is not None else None,
            purchase_date=fields.date,
            notes=fields.notes,
        ))
        return Reply(text=fmt.investment_added(investment, user.language, self.symbol))

    def cmd_updateinvestment(self, user: User, args: list[str]) -> Reply:
        if len(args) < 2:
            return Reply(text=t(user.language, "usage.updateinvestment"))
        fields = extract_value_update(args)
        investment = self.resolver.resolve(EntityType.INVESTMENT, fields.identifier, user.id).record
        investment = self.repo.update(EntityType.INVESTMENT, investment.id, user.id, current_value=float(fields.value))
        return Reply(text=fmt.investment_updated(investment, user.language, self.symbol))

    def add_contribution(self, user: User, args: list[str]) -> Reply:
        fields = extract(EntityType.CONTRIBUTION, args, today=self.today(user))
        investment = self.resolver.resolve(EntityType.INVESTMENT, fields.investment, user.id).record
        contribution, investment = self.repo.add_contribution(Contribution(
            user_id=user.id,
            investment_id=investment.id,
            amount=float(fields.amount),
            date=fields.date,
            notes=fields.notes,
        ))
        return Reply(text=fmt.contribution_added(contribution, investment, user.language, self.symbol))

    # OKRs

    def _key_results(self, user: User, objective: Objective) -> fmt.OkrTree:
        return [
            (kr, self.repo.get_all(EntityType.ACTION, user.id, key_result_id=kr.id))
            for kr in self.repo.get_all(EntityType.KEY_RESULT, user.id, objective_id=objective.id)
        ]

    def cmd_okrs(self, user: User, args: list[str]) -> Reply:
        tree = [(objective, self._key_results(user, objective)) for objective in self.repo.get_all(EntityType.OBJECTIVE, user.id)]
        return Reply(text=fmt.okr_list(tree, user.language))

    def cmd_okr(self, user: User, args: list[str]) -> Reply:
        if not args:
            return Reply(text=t(user.language, "usage.okr"))
        return self.show_entity(user, EntityType.OBJECTIVE, " ".join(args))

    def cmd_addobjective(self, user: User, args: list[str]) -> Reply:
        fields = extract(EntityType.OBJECTIVE, args)
        objective = self.repo.add(EntityType.OBJECTIVE, Objective(user_id=user.id, title=fields.title))
        return Reply(text=fmt.objective_added(objective, user.language))

    def cmd_addkr(self, user: User, args: list[str]) -> Reply:
        fields = extract(EntityType.KEY_RESULT, args)
        objective = self.resolver.resolve(EntityType.OBJECTIVE, fields.objective, user.id).record
        kr = self.repo.add(EntityType.KEY_RESULT, KeyResult(
            user_id=user.id,
            objective_id=objective.id,
            title=fields.title,
            target_value=float(fields.target) if fields.target is not None else None,
        ))
        return Reply(text=fmt.key_result_added(kr, user.language))

    def cmd_addaction(self, user: User, args: list[str]) -> Reply:
        fields = extract(EntityType.ACTION, args)
        kr = self.resolver.resolve(EntityType.KEY_RESULT, fields.key_result, user.id).record
        action = self.repo.add(EntityType.ACTION, Action(
            user_id=user.id,
            key_result_id=kr.id,
            description=fields.description,
        ))
        return Reply(text=fmt.action_added(action, user.language))

    def cmd_updateprogress(self, user: User, args: list[str]) -> Reply:
        fields = extract_progress(args)
        action = self.resolver.resolve(EntityType.ACTION, fields.identifier, user.id).record
        action = self.repo.update(EntityType.ACTION, action.id, user.id, progress=fields.progress)
        return Reply(text=fmt.progress_updated(action, user.language))

    # Habits

    def _habit_stats(self, user: User):
        today = self.today(user)
        return [
            (habit, self.repo.habit_stats(habit.id, today.year, today))
            for habit in sorted(self.repo.get_all(EntityType.HABIT, user.id), key=lambda h: h.name.lower())
        ]

    def cmd_habits(self, user: User, args: list[str]) -> Reply:
        return Reply(text=fmt.habit_list(self._habit_stats(user), user.language))

    def cmd_habitprogress(self, user: User, args: list[str]) -> Reply:
        return Reply(text=fmt.habit_progress(self._habit_stats(user), self.today(user).year, user.language))

    def cmd_addhabit(self, user: User, args: list[str]) -> Reply:
        fields = extract(EntityType.HABIT, args)
        habit = self.repo.add(EntityType.HABIT, Habit(
            user_id=user.id,
            name=fields.name,
            frequency_type=fields.frequency_type,
            frequency_value=fields.frequency_value,
        ))
        return Reply(text=fmt.habit_added(habit, user.language))

    def cmd_habit(self, user: User, args: list[str]) -> Reply:
        lang = user.language
        if not args:
            return Reply(text=t(lang, "usage.habit"))
        if args[0].lower() == "review":
            year = self.today(user).year
            return Reply(text=fmt.habit_review(self.repo.habits_yearly_review(user.id, year), year, lang))

        fields = extract_habit_log(args, today=self.today(user))
        habit = self.resolver.resolve(EntityType.HABIT, fields.name, user.id).record
        log = self.repo.log_habit(habit, fields.date, value=fields.value)
        return Reply(text=fmt.habit_logged(habit, log, lang))

    def cmd_habitstats(self, user: User, args: list[str]) -> Reply:
        if not args:
            return Reply(text=t(user.language, "usage.habitstats"))
        return self.show_entity(user, EntityType.HABIT, " ".join(args))

    def cmd_linkhabit(self, user: User, args: list[str]) -> Reply:
        return self.link_habit(user, args)

    def link_habit(self, user: User, args: list[str]) -> Reply:
        fields = extract_link(args)
        habit = self.resolver.resolve(EntityType.HABIT, fields.habit, user.id).record
        action = self.resolver.resolve(EntityType.ACTION, fields.action, user.id).record
        habit = self.repo.update(EntityType.HABIT, habit.id, user.id, linked_action_id=action.id)
        return Reply(text=fmt.habit_linked(habit, action, user.language))

    def cmd_help(self, user: User, args: list[str]) -> Reply:
        return Reply(text=t(user.language, "help.text"))
