"""
Command manager: ties the role registry, the command catalog and the
command registry together and commits role changes to storage.
"""
import logging
import threading
from collections import deque
from typing import Iterable, List, Optional, Sequence, Tuple

from featurebot.auth.role_manager import RoleManager
from featurebot.auth.user_role import RoleSummary, UserRole
from featurebot.commands.command_catalog import CommandCatalog
from featurebot.commands.command_registry import CommandRegistry
from featurebot.errors import InvalidCommand, UnknownCommand

logger = logging.getLogger(__name__)


class CommandManager:
    """
    Registry state shared by every command module.

    Each mutation runs validate -> mutate -> update_roles() under a single
    lock. Persistence failures never undo the in-memory change; they are
    logged and queued on `persistence_faults`.
    """

    def __init__(self, store=None, catalog: Optional[CommandCatalog] = None,
                 roles: Optional[Iterable[UserRole]] = None, allow_case_variant_roles: bool = False):
        self.store = store
        self.catalog = catalog or CommandCatalog()
        self.role_manager = RoleManager(roles, allow_case_variant_roles=allow_case_variant_roles)
        self.command_registry = CommandRegistry()
        self.lock = threading.RLock()
        self.persistence_faults = deque(maxlen=20)

    # -------------------------------------------------------------------------
    # State
    # -------------------------------------------------------------------------
    @property
    def roles(self) -> List[UserRole]:
        return self.role_manager.roles

    @property
    def commands(self) -> CommandCatalog:
        return self.catalog

    def is_valid_command(self, command_id: str) -> bool:
        return self.catalog.is_valid_command(command_id)

    def update_roles(self) -> None:
        """Inform storage that the role registry changed."""
        if self.store is None:
            return
        try:
            self.store.save_roles(self.roles)
        except Exception as e:
            logger.error(f"Failed to persist roles: {e}", exc_info=True)
            self.persistence_faults.append(e)

    def load_roles(self) -> int:
        """Replace in-memory roles with the stored ones. Returns the number loaded."""
        if self.store is None:
            return 0
        with self.lock:
            self.roles[:] = self.store.load_roles()
            logger.info(f"Loaded {len(self.roles)} roles from storage.")
            return len(self.roles)

    # -------------------------------------------------------------------------
    # Modules
    # -------------------------------------------------------------------------
    def load_modules(self, *modules) -> None:
        """Register every command of each module and add its ids to the catalog."""
        with self.lock:
            for module in modules:
                for handler in module.commands():
                    self.command_registry.register(module.name(), handler)
                self.catalog.extend(module.command_ids())
                logger.info(f"Loaded module {module.name()} with {len(module.commands())} commands")

    def process_command(self, command: str, argument_text: str, user: str) -> List[str]:
        """
        Run a command by canonical name or alias and return its response lines.
        Permission checks are left to the caller (see `can_user_execute`).
        """
        handler = self.command_registry.get_handler(command)
        if handler is None:
            logger.warning(f"Command '{command}' not found in registry. User: {user}")
            return [f"Error: {UnknownCommand(command)}"]
        return handler.executor(argument_text, user)

    def can_user_execute(self, user: str, command: str) -> bool:
        command_id = self.command_registry.get_command_id(command) or command
        with self.lock:
            return self.role_manager.can_user_execute(user, command_id)

    # -------------------------------------------------------------------------
    # Role Queries
    # -------------------------------------------------------------------------
    def list_roles(self) -> Tuple[RoleSummary, ...]:
        with self.lock:
            return self.role_manager.list_roles()

    def describe_role(self, name: str) -> Tuple[List[str], List[str]]:
        with self.lock:
            return self.role_manager.describe_role(name)

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------
    def create_role(self, name: str) -> UserRole:
        with self.lock:
            role = self.role_manager.create_role(name)
            self.update_roles()
            return role

    def delete_role(self, name: str) -> UserRole:
        with self.lock:
            role = self.role_manager.delete_role(name)
            self.update_roles()
            return role

    def enroll_user(self, user: str, role_name: str) -> UserRole:
        with self.lock:
            role = self.role_manager.enroll_user(user, role_name)
            self.update_roles()
            return role

    def unenroll_user(self, user: str, role_name: str) -> UserRole:
        with self.lock:
            role = self.role_manager.unenroll_user(user, role_name)
            self.update_roles()
            return role

    def restrict_command(self, command_id: str, role_name: str) -> UserRole:
        with self.lock:
            if not self.is_valid_command(command_id):
                raise InvalidCommand(command_id)
            role = self.role_manager.restrict_command(command_id, role_name)
            self.update_roles()
            return role

    def unrestrict_command(self, command_id: str, role_name: str) -> UserRole:
        with self.lock:
            if not self.is_valid_command(command_id):
                raise InvalidCommand(command_id)
            role = self.role_manager.unrestrict_command(command_id, role_name)
            self.update_roles()
            return role

    # -------------------------------------------------------------------------
    # Startup
    # -------------------------------------------------------------------------
    def bootstrap_admins(self, users: Sequence[str], role_name: str = "Administrators",
                         command_id: str = "FeatureManagement.*") -> bool:
        """
        Seed an administrator role when the registry is empty so the first
        admins can manage roles from chat. Returns True if anything was created.
        """
        with self.lock:
            if self.roles or not users:
                return False
            role = self.role_manager.create_role(role_name)
            if self.is_valid_command(command_id):
                role.add_command(command_id)
            else:
                logger.warning(f"Bootstrap command {command_id} is not in the catalog; role left unrestricted.")
            for user in users:
                role.add_user(user)
            self.update_roles()
            logger.info(f"Bootstrapped role {role_name} with users: {', '.join(users)}")
            return True
