from abc import ABC, abstractmethod
from typing import List, Sequence

from featurebot.auth.user_role import UserRole


class RoleStore(ABC):
    """
    Persistence port for the role registry. The command manager calls
    `save_roles` after every successful mutation.
    """

    @abstractmethod
    def load_roles(self) -> List[UserRole]:
        """Return the stored roles in their saved order."""
        pass

    @abstractmethod
    def save_roles(self, roles: Sequence[UserRole]) -> None:
        """Replace the stored roles with `roles`."""
        pass
