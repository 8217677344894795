from featurebot.commands.command_catalog import CommandCatalog


class TestCommandCatalog:

    def setup_method(self):
        self.catalog = CommandCatalog(["mod.kick", "mod.ban", "fun.roll", "help"])

    def test_membership_and_length(self):
        assert "mod.kick" in self.catalog
        assert "mod.mute" not in self.catalog
        assert len(self.catalog) == 4

    def test_duplicates_are_ignored(self):
        self.catalog.add("mod.kick")
        assert len(self.catalog) == 4

    def test_iteration_keeps_insertion_order(self):
        assert list(self.catalog) == ["mod.kick", "mod.ban", "fun.roll", "help"]

    def test_module_of(self):
        assert CommandCatalog.module_of("mod.kick") == "mod"
        assert CommandCatalog.module_of("a.b.c") == "a"
        assert CommandCatalog.module_of("help") is None

    def test_group_by_module(self):
        modules, ungrouped = self.catalog.group_by_module()
        assert modules == {"mod": ["mod.kick", "mod.ban"], "fun": ["fun.roll"]}
        assert ungrouped == ["help"]

    def test_grouping_uses_exact_module_prefix(self):
        catalog = CommandCatalog(["mod.kick", "moderation.warn"])
        modules, _ = catalog.group_by_module()
        assert modules == {"mod": ["mod.kick"], "moderation": ["moderation.warn"]}

    def test_is_valid_command_exact(self):
        assert self.catalog.is_valid_command("fun.roll")
        assert self.catalog.is_valid_command("help")
        assert not self.catalog.is_valid_command("bogus.cmd")
        assert not self.catalog.is_valid_command("")

    def test_is_valid_command_wildcard(self):
        assert self.catalog.is_valid_command("mod.*")
        assert not self.catalog.is_valid_command("bogus.*")
        assert not self.catalog.is_valid_command(".*")
        assert not self.catalog.is_valid_command("*")
