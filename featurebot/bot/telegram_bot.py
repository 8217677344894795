import logging
from typing import Optional, Tuple

import telebot

from featurebot.commands.command_manager import CommandManager
from featurebot.config.config import Settings, get_settings
from featurebot.database.database_manager import DatabaseManager
from featurebot.modules.feature_management import FeatureManagement

logger = logging.getLogger(__name__)

SECURITY_MESSAGE = "⚠️ This command either doesn't exist or you don't have permission to use it."


def split_command(text: str, prefix: str) -> Optional[Tuple[str, str]]:
    """
    Split a chat message into (command, argument text).
    Returns None when the message is not a command.
    """
    if not prefix or not text.startswith(prefix):
        return None
    body = text[len(prefix):]
    command, _, argument = body.partition(" ")
    if not command:
        return None
    if '@' in command:  # Handle commands like /ListRoles@botname
        command = command.split('@')[0]
    return command, argument


class TelegramBot:
    """Relays chat commands to the command manager and sends back its response lines."""

    def __init__(self, settings: Optional[Settings] = None, command_manager: Optional[CommandManager] = None,
                 client: Optional[telebot.TeleBot] = None):
        self.settings = settings or get_settings()
        self.bot = client or telebot.TeleBot(self.settings.bot_token)

        if command_manager is None:
            if self.settings.database_path:
                store = DatabaseManager(self.settings.database_path)
            else:
                store = DatabaseManager.for_bot(self.settings.bot_name)
            command_manager = CommandManager(
                store, allow_case_variant_roles=self.settings.allow_case_variant_roles
            )
            logger.info(f"Role database loaded for bot {self.settings.bot_name}")
        self.command_manager = command_manager

        # Initialize modules in order of dependency
        self.feature_management = FeatureManagement(self.command_manager)
        self.command_manager.load_modules(self.feature_management)
        self.command_manager.load_roles()
        self.command_manager.bootstrap_admins(
            [str(a) for a in self.settings.admin_ids], self.settings.admin_role_name
        )

        self._register_basic_handlers()
        logger.info("✅ Message routing and feature management initialized")

    def _register_basic_handlers(self):
        """Register core message handler to process all text messages."""
        @self.bot.message_handler(func=lambda _: True, content_types=['text'])
        def handle_all_messages(message):
            self.handle_message(message)

    @staticmethod
    def user_of(message) -> str:
        """Roles store Telegram user IDs; usernames can be changed or re-registered."""
        return str(message.from_user.id)

    def handle_message(self, message) -> None:
        """Route a command message through permission checks to its handler."""
        parsed = split_command(message.text or "", self.settings.command_prefix)
        if parsed is None:
            return

        command, argument = parsed
        user = self.user_of(message)
        try:
            if command.lower() == "help":
                self.send_message(message.chat.id, self.feature_management.help_text())
                return
            if not self.command_manager.command_registry.has_command(command):
                logger.warning(f"Command '{command}' not found in registry. User: {user}")
                self.send_message(message.chat.id, SECURITY_MESSAGE)
                return
            if not self.command_manager.can_user_execute(user, command):
                logger.warning(f"Access denied: {user} (@{message.from_user.username}) tried {command}")
                self.send_message(message.chat.id, SECURITY_MESSAGE)
                return

            lines = self.command_manager.process_command(command, argument, user)
            self.send_message(message.chat.id, "\n".join(lines))
        except Exception as e:
            logger.error(f"Error handling command {command}: {e}", exc_info=True)
            self.send_message(message.chat.id, "⚠️ Sorry, something went wrong processing that request.")

    def send_message(self, chat_id, text, **kwargs):
        try:
            return self.bot.send_message(chat_id, text, **kwargs)
        except Exception as e:
            logger.error(f"Error sending message to {chat_id}: {e}")
            return None

    def start_polling(self):
        logger.info("🤖 Bot polling started...")
        self.bot.infinity_polling()

    def stop(self):
        logger.info("Stopping...")
        self.bot.stop_polling()
        logger.info("Stopped.")
