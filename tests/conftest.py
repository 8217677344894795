import pytest

from featurebot.commands.command_catalog import CommandCatalog
from featurebot.commands.command_manager import CommandManager
from featurebot.database.role_store import RoleStore
from featurebot.modules.feature_management import FeatureManagement


class RecordingStore(RoleStore):
    """Role store stub that records every save instead of writing anywhere."""

    def __init__(self, roles=None, fail=False):
        self.saved = []
        self.initial = list(roles or [])
        self.fail = fail

    @property
    def save_count(self):
        return len(self.saved)

    def load_roles(self):
        return list(self.initial)

    def save_roles(self, roles):
        if self.fail:
            raise IOError("disk full")
        self.saved.append([(r.name, list(r.commands), list(r.users)) for r in roles])


@pytest.fixture
def store():
    return RecordingStore()


@pytest.fixture
def catalog():
    return CommandCatalog(["mod.kick", "mod.ban", "fun.roll"])


@pytest.fixture
def manager(store, catalog):
    return CommandManager(store, catalog=catalog)


@pytest.fixture
def feature(manager):
    return FeatureManagement(manager)
