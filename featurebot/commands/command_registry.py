"""
Command registration and lookup.
"""
import logging
from typing import Callable, Dict, List, NamedTuple, Optional, Tuple

logger = logging.getLogger(__name__)

# (argument_text, invoking_user) -> response lines
CommandExecutor = Callable[[str, str], List[str]]


class CommandHandler(NamedTuple):
    """A named operation of a command module."""
    name: str
    executor: CommandExecutor
    aliases: Tuple[str, ...] = ()
    usage: str = ""


class CommandRegistry:
    """Maps canonical command names and their aliases to handlers."""

    def __init__(self):
        self.commands: Dict[str, Dict] = {}
        self.aliases: Dict[str, str] = {}

    def register(self, module_name: str, handler: CommandHandler):
        """
        Register a handler under its canonical name and every alias.

        Args:
            module_name: Name of the module owning the command
            handler: Command definition
        """
        key = handler.name.lower()
        if key in self.commands or key in self.aliases:
            raise ValueError(f"Command '{handler.name}' is already registered.")
        for alias in handler.aliases:
            alias_key = alias.lower()
            if alias_key in self.commands or alias_key in self.aliases:
                raise ValueError(f"Alias '{alias}' is already registered.")

        self.commands[key] = {
            'name': handler.name,
            'module': module_name,
            'handler': handler,
        }
        for alias in handler.aliases:
            self.aliases[alias.lower()] = key
        logger.debug(f"Registered command {module_name}.{handler.name} with aliases: {', '.join(handler.aliases)}")

    def resolve(self, command: str) -> Optional[str]:
        """Return the canonical key for a command name or alias."""
        key = command.lower()
        if key in self.commands:
            return key
        return self.aliases.get(key)

    def get_handler(self, command: str) -> Optional[CommandHandler]:
        key = self.resolve(command)
        return self.commands[key]['handler'] if key else None

    def get_command_id(self, command: str) -> Optional[str]:
        """Return the `<module>.<command>` identifier of a command name or alias."""
        key = self.resolve(command)
        if key is None:
            return None
        info = self.commands[key]
        return f"{info['module']}.{info['name']}"

    def has_command(self, command: str) -> bool:
        return self.resolve(command) is not None
