"""
Tests for relaying chat messages to the command manager.
"""
from unittest.mock import MagicMock

from featurebot.bot.telegram_bot import SECURITY_MESSAGE, TelegramBot, split_command
from featurebot.commands.command_catalog import CommandCatalog
from featurebot.commands.command_manager import CommandManager
from featurebot.config.config import Settings

from conftest import RecordingStore

ADMIN_ID = 1001


def _message(text, user_id=ADMIN_ID, username="alice", chat_id=42):
    message = MagicMock()
    message.text = text
    message.chat.id = chat_id
    message.from_user.id = user_id
    message.from_user.username = username
    return message


class TestSplitCommand:

    def test_not_a_command(self):
        assert split_command("hello", "!") is None
        assert split_command("!", "!") is None

    def test_command_without_arguments(self):
        assert split_command("!ListRoles", "!") == ("ListRoles", "")

    def test_argument_text_is_verbatim(self):
        assert split_command("!enroll-user bob Senior Mods", "!") == ("enroll-user", "bob Senior Mods")

    def test_bot_mention_is_stripped(self):
        assert split_command("/ListRoles@featurebot", "/") == ("ListRoles", "")


class TestTelegramBot:

    def setup_method(self):
        self.store = RecordingStore()
        self.manager = CommandManager(self.store, catalog=CommandCatalog(["fun.roll"]))
        settings = Settings(_env_file=None, bot_token="123:abc", admin_ids=[ADMIN_ID])
        self.client = MagicMock()
        self.bot = TelegramBot(settings=settings, command_manager=self.manager, client=self.client)

    def _sent(self):
        return self.client.send_message.call_args[0][1]

    def test_bootstraps_admin_role(self):
        assert [r.name for r in self.manager.roles] == ["Administrators"]
        assert self.manager.roles[0].users == ["1001"]

    def test_admin_runs_command(self):
        self.bot.handle_message(_message("!create-role Mods"))
        assert self._sent() == 'Role "Mods" created successfully!'

    def test_multi_line_response(self):
        self.bot.handle_message(_message("!DescribeRole Administrators"))
        assert self._sent() == (
            'Role "Administrators" contains the following commands: FeatureManagement.*\n'
            'Role "Administrators" contains the following users: 1001'
        )

    def test_non_member_is_refused(self):
        self.bot.handle_message(_message("!create-role Mods", user_id=2002, username="mallory"))
        assert self._sent() == SECURITY_MESSAGE
        assert [r.name for r in self.manager.roles] == ["Administrators"]

    def test_admin_keeps_access_after_username_change(self):
        self.bot.handle_message(_message("!create-role Mods", username="Alice"))
        assert self._sent() == 'Role "Mods" created successfully!'

        self.bot.handle_message(_message("!create-role Helpers", username=None))
        assert self._sent() == 'Role "Helpers" created successfully!'

    def test_claimed_username_does_not_inherit_role(self):
        self.bot.handle_message(_message("!create-role Mods", user_id=3003, username="alice"))
        assert self._sent() == SECURITY_MESSAGE
        assert [r.name for r in self.manager.roles] == ["Administrators"]

    def test_enrolled_user_id_gains_access(self):
        self.bot.handle_message(_message("!enroll-user 2002 Administrators"))
        assert self.manager.roles[0].users == ["1001", "2002"]

        self.bot.handle_message(_message("!create-role Mods", user_id=2002, username="mallory"))
        assert self._sent() == 'Role "Mods" created successfully!'

    def test_empty_role_name_is_rejected(self):
        self.bot.handle_message(_message("!create-role"))
        assert self._sent().startswith("Error: ")
        assert [r.name for r in self.manager.roles] == ["Administrators"]

    def test_unknown_command(self):
        self.bot.handle_message(_message("!Dance"))
        assert self._sent() == SECURITY_MESSAGE

    def test_plain_text_ignored(self):
        self.bot.handle_message(_message("hello there"))
        self.client.send_message.assert_not_called()

    def test_help(self):
        self.bot.handle_message(_message("!help", user_id=2002, username="mallory"))
        assert "FeatureManagement" in self._sent()

    def test_user_is_identified_by_id(self):
        assert TelegramBot.user_of(_message("!ListRoles", user_id=7, username="bob")) == "7"
