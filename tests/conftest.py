"""Shared fixtures: in-memory storage, a scripted AI client and a registered user."""

from datetime import date
from types import SimpleNamespace

import pytest

from tally.bot.commands import CommandProcessor
from tally.commands.keywords import Language
from tally.config import Settings
from tally.db.repository import TallyRepository
from tally.llm.service import AIService
from tally.models.schemas import User

TODAY = date(2024, 3, 15)


class FakeCompletions:
    """Stands in for ``client.chat.completions``; replays queued answers."""

    def __init__(self, answers=None, error: Exception | None = None):
        self.answers = list(answers or [])
        self.error = error
        self.calls = []

    def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        content = self.answers.pop(0) if self.answers else None
        message = SimpleNamespace(content=content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


def fake_client(answers=None, error: Exception | None = None):
    completions = FakeCompletions(answers, error)
    return SimpleNamespace(chat=SimpleNamespace(completions=completions))


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        telegram_bot_token="",
        openai_api_key="",
        db_path=":memory:",
        default_language="pt",
        currency_symbol="R$",
    )


@pytest.fixture
def repo() -> TallyRepository:
    """Create an empty in-memory repository."""
    return TallyRepository(":memory:")


@pytest.fixture
def ai() -> AIService:
    """AI service without credentials: every call takes the fallback path."""
    return AIService(api_key="", model="test-model")


@pytest.fixture
def processor(repo: TallyRepository, ai: AIService, settings: Settings, monkeypatch) -> CommandProcessor:
    processor = CommandProcessor(repo, ai, settings)
    monkeypatch.setattr(processor, "today", lambda user: TODAY)
    return processor


def _register(repo: TallyRepository, telegram_id: str, language: Language) -> User:
    return repo.add_user(User(
        telegram_id=telegram_id,
        first_name="Ana",
        referral_code=f"CODE{telegram_id}",
        language=language,
    ))


@pytest.fixture
def user(repo: TallyRepository) -> User:
    """A registered English-speaking user."""
    return _register(repo, "1001", Language.EN)


@pytest.fixture
def pt_user(repo: TallyRepository) -> User:
    """A registered Portuguese-speaking user."""
    return _register(repo, "1002", Language.PT)


@pytest.fixture
def scripted_ai():
    """Build an AIService whose client answers from a queue or raises ``error``."""

    def make(answers=None, error: Exception | None = None) -> AIService:
        return AIService(api_key="", model="test-model", client=fake_client(answers, error))

    return make
