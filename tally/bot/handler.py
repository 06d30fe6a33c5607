from loguru import logger
from telegram import Update
from telegram.ext import Application, CommandHandler, ContextTypes, MessageHandler, filters

from tally.bot.commands import COMMAND_VERBS, Reply
from tally.commands.keywords import normalize_language
from tally.config import get_settings
from tally.deps import processor, repo
from tally.i18n import t

settings = get_settings()

COMMANDS = sorted(set(COMMAND_VERBS) | {
    "help", "income", "incomes", "report", "categories", "reportcsv",
    "investments", "addinvestment", "updateinvestment",
    "addobjective", "addkr", "addaction", "updateprogress", "okrs", "okr",
    "habits", "addhabit", "habit", "habitstats", "habitprogress", "linkhabit",
})


def _split_command(text: str) -> tuple[str, str]:
    """'/add@tally_bot 50 café' -> ('add', '50 café')."""
    head, _, rest = text.partition(" ")
    return head.lstrip("/").split("@")[0].lower(), rest.strip()


async def _send(update: Update, reply: Reply) -> None:
    if reply.document is not None:
        await update.message.reply_document(
            document=reply.document,
            filename=reply.filename,
            caption=reply.text,
        )
        return
    await update.message.reply_text(reply.text)


async def _current_user(update: Update):
    tg_user = update.effective_user
    user = repo.get_user_by_telegram_id(str(tg_user.id))
    if user is None:
        lang = normalize_language(tg_user.language_code, normalize_language(settings.default_language))
        await update.message.reply_text(t(lang, "messages.please_start"))
    return user


async def start_command(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Handle /start [referral code]."""
    tg_user = update.effective_user
    referral_code = context.args[0] if context.args else None
    try:
        reply = processor.start(
            telegram_id=str(tg_user.id),
            username=tg_user.username,
            first_name=tg_user.first_name,
            last_name=tg_user.last_name,
            language_code=tg_user.language_code,
            referral_code=referral_code,
        )
    except Exception as e:
        logger.error("Error in /start: {}", e)
        reply = Reply(text=t(normalize_language(tg_user.language_code), "errors.generic"))
    await _send(update, reply)


async def refer_command(update: Update, context: ContextTypes.DEFAULT_TYPE):
    user = await _current_user(update)
    if user is None:
        return
    await _send(update, processor.refer(user, context.bot.username))


async def language_command(update: Update, context: ContextTypes.DEFAULT_TYPE):
    user = await _current_user(update)
    if user is None:
        return
    try:
        reply = processor.set_language(user, " ".join(context.args or []))
    except Exception as e:
        logger.error("Error in /language: {}", e)
        reply = Reply(text=t(user.language, "errors.generic"))
    await _send(update, reply)


async def command_handler(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Every other slash command goes through the command processor."""
    user = await _current_user(update)
    if user is None:
        return
    command, text = _split_command(update.message.text)
    await update.message.chat.send_action("typing")
    await _send(update, processor.run(user, command, text))


async def handle_message(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Plain text: shorthand like '50 café' or 'delete kr peso'."""
    user = await _current_user(update)
    if user is None:
        return
    user_text = update.message.text.strip()
    logger.info("Telegram message from #{}: {}", user.id, user_text)
    await _send(update, processor.run(user, None, user_text))


def build_bot_app() -> Application:
    """Build and return the Telegram bot application."""
    app = Application.builder().token(settings.telegram_bot_token).build()

    app.add_handler(CommandHandler("start", start_command))
    app.add_handler(CommandHandler("refer", refer_command))
    app.add_handler(CommandHandler("language", language_command))
    app.add_handler(CommandHandler(COMMANDS, command_handler))

    app.add_handler(MessageHandler(filters.TEXT & ~filters.COMMAND, handle_message))

    return app
