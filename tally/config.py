from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    telegram_bot_token: str = ""
    webhook_url: str = ""
    openai_api_key: str = ""
    llm_base_url: str = "https://openrouter.ai/api/v1"
    llm_model: str = "openai/gpt-4o-mini"
    db_path: str = "tally.json"
    default_language: str = "pt"
    default_timezone: str = "America/Sao_Paulo"
    currency_symbol: str = "R$"
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    return Settings()
