from abc import ABC, abstractmethod
from typing import List

from featurebot.commands.command_registry import CommandHandler


class CommandModule(ABC):
    """
    Interface for a self-contained group of commands.
    Command identifiers are built as `<module name>.<command name>`.
    """

    @abstractmethod
    def name(self) -> str:
        """Prefix applied to the identifiers of this module's commands."""
        pass

    @abstractmethod
    def description(self) -> str:
        """Short description of what this module does."""
        pass

    @abstractmethod
    def commands(self) -> List[CommandHandler]:
        """The commands this module exposes."""
        pass

    def command_ids(self) -> List[str]:
        return [f"{self.name()}.{handler.name}" for handler in self.commands()]

    def help_text(self) -> str:
        """Return a formatted help text for this module."""
        lines = [f"📦 *{self.name()}*", self.description(), "", "Available commands:"]
        for handler in self.commands():
            names = " | ".join((handler.name,) + handler.aliases)
            usage = f" {handler.usage}" if handler.usage else ""
            lines.append(f"  {names}{usage}")
        return "\n".join(lines)
