from tally.bot.commands import CommandProcessor
from tally.config import get_settings
from tally.db.repository import TallyRepository
from tally.llm.service import AIService

settings = get_settings()

repo = TallyRepository(settings.db_path)
ai = AIService(api_key=settings.openai_api_key, model=settings.llm_model, base_url=settings.llm_base_url)
processor = CommandProcessor(repo, ai, settings)
