from fastapi import APIRouter, HTTPException, Request
from loguru import logger
from telegram import Update

from tally.commands.classifier import classify
from tally.commands.errors import ExtractionError
from tally.commands.extractor import extract
from tally.commands.keywords import Verb
from tally.commands.tokenizer import tokenize
from tally.models.schemas import ParseRequest, ParseResponse

router = APIRouter()


@router.get("/health")
def health():
    return {"status": "ok"}


@router.post("/parse", response_model=ParseResponse)
def parse_message(request: ParseRequest):
    """Dry-run a command through tokenizer, classifier and extractor. Nothing is stored."""
    logger.info("Parsing message: {}", request.message)
    tokens = tokenize(request.message)
    parsed = classify(tokens, request.language, original_text=request.message)

    fields = None
    error = None
    creates = parsed.verb is Verb.ADD or parsed.amount_first
    if parsed.entity_type is not None and parsed.residual_args and creates:
        try:
            extracted = extract(parsed.entity_type, parsed.residual_args, amount_first=parsed.amount_first)
            fields = extracted.model_dump(mode="json")
        except ExtractionError as e:
            error = e.reason.value

    return ParseResponse(
        tokens=tokens,
        verb=parsed.verb,
        entity_type=parsed.entity_type,
        residual_args=parsed.residual_args,
        fields=fields,
        error=error,
    )


@router.post("/webhook")
async def telegram_webhook(request: Request):
    bot_app = getattr(request.app.state, "bot", None)
    if bot_app is None:
        raise HTTPException(status_code=503, detail="Bot is not running")
    update = Update.de_json(await request.json(), bot_app.bot)
    await bot_app.process_update(update)
    return {"ok": True}
