import logging

from featurebot.bot.telegram_bot import TelegramBot
from featurebot.config.config import get_settings
from featurebot.logger import setup_logger


def main():
    settings = get_settings()
    level = getattr(logging, settings.log_level.upper(), logging.INFO)
    logger = setup_logger("featurebot", level, log_dir=settings.log_dir or None)

    bot = TelegramBot(settings=settings)
    try:
        bot.start_polling()
    except KeyboardInterrupt:
        logger.info("🛑 Stopping bot gracefully...")
        bot.stop()
        logger.info("Bot stopped.")


if __name__ == "__main__":
    main()
