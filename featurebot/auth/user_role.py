from dataclasses import dataclass, field
from typing import List, NamedTuple


class RoleSummary(NamedTuple):
    """Read-only view of a role used for listings."""
    name: str
    command_count: int
    user_count: int


@dataclass
class UserRole:
    """
    A named group owning the command identifiers it may invoke and the
    users enrolled in it. Both collections keep insertion order and never
    hold duplicates.
    """

    name: str
    commands: List[str] = field(default_factory=list)
    users: List[str] = field(default_factory=list)

    def matches(self, name: str) -> bool:
        """Case-insensitive name comparison."""
        return self.name.casefold() == name.casefold()

    # -------------------------------------------------------------------------
    # Commands
    # -------------------------------------------------------------------------
    def add_command(self, command_id: str) -> bool:
        if command_id in self.commands:
            return False
        self.commands.append(command_id)
        return True

    def remove_command(self, command_id: str) -> bool:
        if command_id not in self.commands:
            return False
        self.commands.remove(command_id)
        return True

    def covers_command(self, command_id: str) -> bool:
        """True if the role lists the command directly or through a `module.*` entry."""
        for entry in self.commands:
            if entry == command_id:
                return True
            if entry.endswith(".*") and command_id.startswith(entry[:-1]):
                return True
        return False

    # -------------------------------------------------------------------------
    # Users
    # -------------------------------------------------------------------------
    def add_user(self, user: str) -> bool:
        if user in self.users:
            return False
        self.users.append(user)
        return True

    def remove_user(self, user: str) -> bool:
        if user not in self.users:
            return False
        self.users.remove(user)
        return True

    def summary(self) -> RoleSummary:
        return RoleSummary(self.name, len(self.commands), len(self.users))
