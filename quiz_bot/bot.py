"""Main entry point for Quiz Bot."""
import asyncio
import logging
import sys

from aiogram import Bot, Dispatcher
from aiogram.fsm.storage.memory import MemoryStorage
from aiogram.types import BotCommand

from quiz_bot.config import settings
from quiz_bot.core.exceptions import InvalidDataset
from quiz_bot.data.loader import get_questions

# Import handlers
from quiz_bot.handlers import start, quiz


# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.StreamHandler(sys.stdout)
    ]
)

logger = logging.getLogger(__name__)


async def main():
    """Main function to start the bot."""
    if not settings.BOT_TOKEN:
        logger.error("BOT_TOKEN is not set. Create a .env file based on .env.example")
        sys.exit(1)

    # Quiz dataset is loaded once and injected into handlers
    try:
        questions = get_questions(settings.QUIZ_FILE)
    except InvalidDataset as e:
        logger.error(f"Invalid quiz dataset: {e}")
        sys.exit(1)

    bot = Bot(token=settings.BOT_TOKEN)
    dp = Dispatcher(storage=MemoryStorage(), questions=questions)

    # Register routers
    dp.include_router(start.router)
    dp.include_router(quiz.router)

    logger.info("Bot handlers registered successfully")

    await bot.set_my_commands([
        BotCommand(command="start", description="Main menu"),
    ])

    try:
        logger.info("Starting bot polling...")
        await dp.start_polling(
            bot,
            allowed_updates=dp.resolve_used_update_types()
        )
    finally:
        await bot.session.close()
        logger.info("Bot stopped")


def run():
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("Bot stopped by user")


if __name__ == "__main__":
    run()
