"""
Catalog of every command identifier known to the bot.
"""
from typing import Dict, Iterable, Iterator, List, Tuple


class CommandCatalog:
    """
    Ordered set of `<module>.<command>` identifiers. The module prefix is the
    text before the first `.`; identifiers without one are ungrouped.
    """

    def __init__(self, command_ids: Iterable[str] = ()):
        self._commands: Dict[str, None] = {}
        self.extend(command_ids)

    def add(self, command_id: str) -> None:
        self._commands[command_id] = None

    def extend(self, command_ids: Iterable[str]) -> None:
        for command_id in command_ids:
            self.add(command_id)

    def __contains__(self, command_id: str) -> bool:
        return command_id in self._commands

    def __iter__(self) -> Iterator[str]:
        return iter(self._commands)

    def __len__(self) -> int:
        return len(self._commands)

    @staticmethod
    def module_of(command_id: str) -> str | None:
        index = command_id.find(".")
        if index == -1:
            return None
        return command_id[:index]

    def is_valid_command(self, command_id: str) -> bool:
        """
        True for an exact catalog entry, or for a `module.*` wildcard naming a
        module that has at least one command.
        """
        if command_id in self._commands:
            return True
        if command_id.endswith(".*"):
            module = command_id[:-2]
            return bool(module) and "." not in module and module in self.group_by_module()[0]
        return False

    def group_by_module(self) -> Tuple[Dict[str, List[str]], List[str]]:
        """
        Returns:
            (modules, ungrouped): module name -> member ids, both in first-seen order.
        """
        modules: Dict[str, List[str]] = {}
        ungrouped: List[str] = []
        for command_id in self._commands:
            module = self.module_of(command_id)
            if module is None:
                ungrouped.append(command_id)
            else:
                modules.setdefault(module, []).append(command_id)
        return modules, ungrouped
