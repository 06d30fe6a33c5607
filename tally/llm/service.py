from loguru import logger
from openai import OpenAI

from tally.commands.keywords import EntityType, Language
from tally.llm.prompts import (
    CATEGORIZE_PROMPT,
    DEFAULT_CATEGORY,
    EXPENSE_CATEGORIES,
    INCOME_CATEGORIES,
    INSIGHT_PROMPT,
    LANGUAGE_NAMES,
)
from tally.models.schemas import CategoryTotal


class AIService:
    """Categorization and spending insights from an OpenAI-compatible endpoint.

    Neither call is allowed to fail a command: errors are logged and replaced
    by ``DEFAULT_CATEGORY`` or ``None``.
    """

    def __init__(self, api_key: str, model: str, base_url: str | None = None, client=None):
        if client is None and api_key:
            client = OpenAI(base_url=base_url, api_key=api_key)
        self.client = client
        self.model = model

    def categories(self, kind: EntityType) -> list[str]:
        return INCOME_CATEGORIES if kind is EntityType.INCOME else EXPENSE_CATEGORIES

    def _complete(self, messages: list[dict], temperature: float, max_tokens: int) -> str | None:
        response = self.client.chat.completions.create(
            model=self.model,
            messages=messages,
            temperature=temperature,
            max_tokens=max_tokens,
        )
        content = response.choices[0].message.content
        return content.strip() if content else None

    def categorize(self, description: str, kind: EntityType = EntityType.EXPENSE) -> str:
        allowed = self.categories(kind)
        if self.client is None or not description:
            return DEFAULT_CATEGORY

        messages = [
            {
                "role": "system",
                "content": CATEGORIZE_PROMPT.format(kind=kind.value, categories=", ".join(allowed)),
            },
            {"role": "user", "content": f'Categorize this {kind.value}: "{description}"'},
        ]
        try:
            raw = self._complete(messages, temperature=0.3, max_tokens=10)
        except Exception as e:
            logger.error("AI categorization failed: {}", e)
            return DEFAULT_CATEGORY

        logger.debug("LLM category for {!r}: {}", description, raw)
        if raw:
            cleaned = raw.strip(" .\"'").lower()
            for category in allowed:
                if category.lower() == cleaned:
                    return category
        return DEFAULT_CATEGORY

    def insight(self, by_category: list[CategoryTotal], total: float, language: Language) -> str | None:
        if self.client is None or not by_category:
            return None

        breakdown = ", ".join(f"{c.category}: {c.total:.2f}" for c in by_category)
        messages = [
            {"role": "system", "content": INSIGHT_PROMPT.format(language_name=LANGUAGE_NAMES[language.value])},
            {"role": "user", "content": f"Total expenses: {total:.2f}. Breakdown: {breakdown}. Provide insights."},
        ]
        try:
            return self._complete(messages, temperature=0.7, max_tokens=150)
        except Exception as e:
            logger.error("AI insight generation failed: {}", e)
            return None
