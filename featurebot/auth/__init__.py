from .user_role import UserRole, RoleSummary
from .role_manager import RoleManager

__all__ = ["UserRole", "RoleSummary", "RoleManager"]
