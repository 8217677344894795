from .role_store import RoleStore
from .database_manager import DatabaseManager

__all__ = ["RoleStore", "DatabaseManager"]
