from .telegram_bot import TelegramBot, split_command

__all__ = ["TelegramBot", "split_command"]
