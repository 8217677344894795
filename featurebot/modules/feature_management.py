"""
Feature management commands: roles, enrollment and command restrictions.
"""
import functools
import logging
from enum import Enum
from typing import Callable, Dict, List

from featurebot.commands.argument_parser import parse_argument_pair
from featurebot.commands.command_manager import CommandManager
from featurebot.commands.command_registry import CommandHandler
from featurebot.errors import FeatureBotError
from featurebot.modules.module_base import CommandModule

logger = logging.getLogger(__name__)


class FeatureCommand(Enum):
    """Every operation of the feature management module: (canonical name, alias, usage)."""
    LIST_ROLES = ("ListRoles", "list-roles", "")
    CREATE_ROLE = ("CreateRole", "create-role", "<role name>")
    DESCRIBE_ROLE = ("DescribeRole", "describe-role", "<role name>")
    DELETE_ROLE = ("DeleteRole", "delete-role", "<role name>")
    ENROLL_USER = ("EnrollUser", "enroll-user", "<username> <role name>")
    UNENROLL_USER = ("UnenrollUser", "unenroll-user", "<username> <role name>")
    LIST_COMMANDS = ("ListCommands", "list-commands", "")
    RESTRICT_COMMAND = ("RestrictCommand", "restrict-command", "<command name> <role name>")
    UNRESTRICT_COMMAND = ("UnrestrictCommand", "unrestrict-command", "<command name> <role name>")

    @property
    def canonical_name(self) -> str:
        return self.value[0]

    @property
    def alias(self) -> str:
        return self.value[1]

    @property
    def usage(self) -> str:
        return self.value[2]


def _responds_with_errors(func):
    """Render registry and parsing failures as a single `Error:` line."""

    @functools.wraps(func)
    def wrapper(self, data: str, user: str) -> List[str]:
        try:
            return func(self, data, user)
        except FeatureBotError as e:
            logger.warning(f"{func.__name__} failed for {user}: {e}")
            return [f"Error: {e}"]
        except Exception as e:
            logger.error(f"Error in {func.__name__}: {e}", exc_info=True)
            return ["Error: Something went wrong processing that request."]

    return wrapper


class FeatureManagement(CommandModule):
    """Module of commands for managing access to commands."""

    def __init__(self, command_manager: CommandManager):
        self.command_manager = command_manager
        self._executors: Dict[FeatureCommand, Callable[[str, str], List[str]]] = {
            FeatureCommand.LIST_ROLES: self.list_roles,
            FeatureCommand.CREATE_ROLE: self.create_role,
            FeatureCommand.DESCRIBE_ROLE: self.describe_role,
            FeatureCommand.DELETE_ROLE: self.delete_role,
            FeatureCommand.ENROLL_USER: self.enroll_user,
            FeatureCommand.UNENROLL_USER: self.unenroll_user,
            FeatureCommand.LIST_COMMANDS: self.list_commands,
            FeatureCommand.RESTRICT_COMMAND: self.restrict_command,
            FeatureCommand.UNRESTRICT_COMMAND: self.unrestrict_command,
        }
        self._handlers = [
            CommandHandler(kind.canonical_name, self._executors[kind], (kind.alias,), kind.usage)
            for kind in FeatureCommand
        ]

    def name(self) -> str:
        return "FeatureManagement"

    def description(self) -> str:
        return "Create roles, enroll users and restrict commands to roles."

    def commands(self) -> List[CommandHandler]:
        return list(self._handlers)

    def execute(self, kind: FeatureCommand, data: str, user: str) -> List[str]:
        """Run an operation by its enum member."""
        return self._executors[kind](data, user)

    # -------------------------------------------------------------------------
    # Roles
    # -------------------------------------------------------------------------
    @_responds_with_errors
    def list_roles(self, data: str, user: str) -> List[str]:
        roles = self.command_manager.list_roles()
        if not roles:
            return ["There are 0 roles."]
        return [f"There are {len(roles)} roles: {', '.join(role.name for role in roles)}"]

    @_responds_with_errors
    def create_role(self, data: str, user: str) -> List[str]:
        self.command_manager.create_role(data)
        return [f'Role "{data}" created successfully!']

    @_responds_with_errors
    def describe_role(self, data: str, user: str) -> List[str]:
        commands, users = self.command_manager.describe_role(data)
        return [
            f'Role "{data}" contains the following commands: {", ".join(commands)}',
            f'Role "{data}" contains the following users: {", ".join(users)}',
        ]

    @_responds_with_errors
    def delete_role(self, data: str, user: str) -> List[str]:
        self.command_manager.delete_role(data)
        return [f'Role "{data}" removed successfully!']

    # -------------------------------------------------------------------------
    # Enrollment
    # -------------------------------------------------------------------------
    @_responds_with_errors
    def enroll_user(self, data: str, user: str) -> List[str]:
        username, role_name = parse_argument_pair(data, "Username", "Role name")
        role = self.command_manager.enroll_user(username, role_name)
        return [f'User "{username}" was added to role "{role.name}" successfully!']

    @_responds_with_errors
    def unenroll_user(self, data: str, user: str) -> List[str]:
        username, role_name = parse_argument_pair(data, "Username", "Role name")
        role = self.command_manager.unenroll_user(username, role_name)
        return [f'User "{username}" was removed from role "{role.name}" successfully!']

    # -------------------------------------------------------------------------
    # Commands
    # -------------------------------------------------------------------------
    @_responds_with_errors
    def list_commands(self, data: str, user: str) -> List[str]:
        catalog = self.command_manager.commands
        with self.command_manager.lock:
            modules, ungrouped = catalog.group_by_module()
            total = len(catalog)

        response = [f"There are {total} commands across {len(modules)} modules."]
        for module, members in modules.items():
            response.append(f"{module} ({len(members)}): {', '.join(members)}")
        if ungrouped:
            response.append(f"Ungrouped ({len(ungrouped)}): {', '.join(ungrouped)}")
        return response

    @_responds_with_errors
    def restrict_command(self, data: str, user: str) -> List[str]:
        command_id, role_name = parse_argument_pair(data, "Command name", "Role name")
        role = self.command_manager.restrict_command(command_id, role_name)
        return [f'Command "{command_id}" was added to the role "{role.name}" successfully!']

    @_responds_with_errors
    def unrestrict_command(self, data: str, user: str) -> List[str]:
        command_id, role_name = parse_argument_pair(data, "Command name", "Role name")
        role = self.command_manager.unrestrict_command(command_id, role_name)
        return [f'Command "{command_id}" was removed from the role "{role.name}" successfully!']
