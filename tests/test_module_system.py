"""Tests for module registration and loading."""

from cms.core import ModuleConfig, ModuleRegistry
from cms.core.module_loader import ModuleLoader
from cms.modules.core.provider import CoreProvider


class TestModuleRegistry:

    def test_find_ignores_case(self, stub_module):
        registry = ModuleRegistry()
        registry.register(stub_module("blog"))

        assert registry.find("Blog").name == "blog"
        assert registry.find("BLOG").name == "blog"
        assert registry.find("shop") is None
        assert registry.find(None) is None

    def test_enabled_sorted_by_priority(self, stub_module):
        registry = ModuleRegistry()
        registry.register(stub_module("late", ModuleConfig(priority=50)))
        registry.register(stub_module("early", ModuleConfig(priority=5)))
        registry.register(stub_module("off", ModuleConfig(enabled=False)))

        assert [m.name for m in registry.get_enabled()] == ["early", "late"]

    def test_module_info(self, stub_module):
        registry = ModuleRegistry()
        registry.register(stub_module("blog"))

        info = registry.get_module_info()[0]
        assert info["name"] == "blog"
        assert info["display_name"] == "Blog"
        assert info["enabled"] is True


class TestModuleLoader:

    def test_discovers_bundled_modules(self):
        loader = ModuleLoader(ModuleRegistry())

        assert "core" in loader.get_available_modules()

    def test_load_all(self):
        registry = ModuleRegistry()
        loader = ModuleLoader(registry, {"modules": {"core": {"priority": 10}}})

        assert loader.load_all_modules() is True

        core = registry.get("core")
        assert core.config.priority == 10
        assert core.get_provider() is CoreProvider
        assert len(core.get_routers()) == 2

    def test_disabled_module_skipped(self):
        registry = ModuleRegistry()
        loader = ModuleLoader(registry, {"modules": {"core": {"enabled": False}}})

        assert loader.load_all_modules() is True
        assert registry.get("core") is None

    def test_unknown_module_fails_to_load(self):
        loader = ModuleLoader(ModuleRegistry())

        assert loader.load_module("does_not_exist", {}) is False
