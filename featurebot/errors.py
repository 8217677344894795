"""
Error taxonomy for the role/command registry.

Every error carries a human-readable message; the command module layer
renders it as a single ``Error:`` response line.
"""


class FeatureBotError(Exception):
    """Base class for all registry and parsing failures."""


class DuplicateRole(FeatureBotError):
    def __init__(self, role_name: str):
        self.role_name = role_name
        super().__init__(f'Unable to create role, "{role_name}" already exists.')


class InvalidRoleName(FeatureBotError):
    def __init__(self, role_name: str):
        self.role_name = role_name
        super().__init__("Role name cannot be empty.")


class RoleNotFound(FeatureBotError):
    def __init__(self, role_name: str, message: str | None = None):
        self.role_name = role_name
        super().__init__(message or f'Role "{role_name}" not found.')


class RoleHasCommands(FeatureBotError):
    def __init__(self, role_name: str):
        self.role_name = role_name
        super().__init__("Unable to delete role, please remove all commands first.")


class InvalidCommand(FeatureBotError):
    def __init__(self, command_id: str):
        self.command_id = command_id
        super().__init__(f"Command {command_id} does not match any commands.")


class UnknownCommand(FeatureBotError):
    def __init__(self, command: str):
        self.command = command
        super().__init__(f'Unknown command "{command}".')


class ArgumentError(FeatureBotError):
    """Raised when free-form argument text cannot be split into a pair."""


class MalformedArguments(ArgumentError):
    def __init__(self, first_label: str, second_label: str):
        super().__init__(
            f"Invalid number of parameters. Expected parameters: "
            f"{{{first_label.lower()}}} {{{second_label.lower()}}}."
        )


class EmptyFirstArgument(ArgumentError):
    def __init__(self, label: str):
        super().__init__(f"{label} cannot be empty.")


class EmptySecondArgument(ArgumentError):
    def __init__(self, label: str):
        super().__init__(f"{label} cannot be empty.")
