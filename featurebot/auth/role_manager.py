import logging
from typing import Iterable, List, Optional, Tuple

from featurebot.auth.user_role import RoleSummary, UserRole
from featurebot.errors import DuplicateRole, InvalidRoleName, RoleHasCommands, RoleNotFound

logger = logging.getLogger(__name__)


class RoleManager:
    """
    Owns the ordered collection of roles and the users/commands attached to them.
    Does not persist anything itself; callers commit changes afterwards.
    """

    def __init__(self, roles: Optional[Iterable[UserRole]] = None, allow_case_variant_roles: bool = False):
        self.roles: List[UserRole] = list(roles or [])
        self.allow_case_variant_roles = allow_case_variant_roles

    # -------------------------------------------------------------------------
    # Role Queries
    # -------------------------------------------------------------------------
    def get_role(self, name: str) -> Optional[UserRole]:
        """
        Find a role by name. An exact-case match wins; otherwise the first
        case-insensitive match is returned.
        """
        fallback = None
        for role in self.roles:
            if role.name == name:
                return role
            if fallback is None and role.matches(name):
                fallback = role
        return fallback

    def require_role(self, name: str, message: Optional[str] = None) -> UserRole:
        role = self.get_role(name)
        if role is None:
            raise RoleNotFound(name, message)
        return role

    def list_roles(self) -> Tuple[RoleSummary, ...]:
        return tuple(role.summary() for role in self.roles)

    def describe_role(self, name: str) -> Tuple[List[str], List[str]]:
        """Return copies of the role's command and user lists."""
        role = self.require_role(name)
        return list(role.commands), list(role.users)

    def can_user_execute(self, user: str, command_id: str) -> bool:
        """
        A command that no role restricts is open to everyone. A restricted
        command may only be run by users enrolled in a restricting role.
        """
        restricting = [role for role in self.roles if role.covers_command(command_id)]
        if not restricting:
            return True
        return any(user in role.users for role in restricting)

    # -------------------------------------------------------------------------
    # Role Management
    # -------------------------------------------------------------------------
    def create_role(self, name: str) -> UserRole:
        if not name.strip():
            raise InvalidRoleName(name)
        if self.allow_case_variant_roles:
            existing = next((r for r in self.roles if r.name == name), None)
        else:
            existing = next((r for r in self.roles if r.matches(name)), None)
        if existing is not None:
            raise DuplicateRole(name)

        role = UserRole(name=name)
        self.roles.append(role)
        logger.info(f"Role created: {name}")
        return role

    def delete_role(self, name: str) -> UserRole:
        role = self.require_role(name, f'Unable to delete role, "{name}" does not exist.')
        if role.commands:
            raise RoleHasCommands(role.name)
        self.roles.remove(role)
        logger.info(f"Role removed: {role.name}")
        return role

    # -------------------------------------------------------------------------
    # Enrollment
    # -------------------------------------------------------------------------
    def enroll_user(self, user: str, role_name: str) -> UserRole:
        role = self.require_role(role_name, f'No role with name "{role_name}" was found.')
        if role.add_user(user):
            logger.info(f"User {user} enrolled in {role.name}")
        return role

    def unenroll_user(self, user: str, role_name: str) -> UserRole:
        role = self.require_role(role_name, f'No role with name "{role_name}" was found.')
        if role.remove_user(user):
            logger.info(f"User {user} unenrolled from {role.name}")
        return role

    # -------------------------------------------------------------------------
    # Restrictions
    # -------------------------------------------------------------------------
    def restrict_command(self, command_id: str, role_name: str) -> UserRole:
        role = self.require_role(role_name, f'Role "{role_name}" does not exist.')
        if role.add_command(command_id):
            logger.info(f"Command {command_id} restricted to {role.name}")
        return role

    def unrestrict_command(self, command_id: str, role_name: str) -> UserRole:
        role = self.require_role(role_name, f'Role "{role_name}" does not exist.')
        if role.remove_command(command_id):
            logger.info(f"Command {command_id} unrestricted from {role.name}")
        return role
