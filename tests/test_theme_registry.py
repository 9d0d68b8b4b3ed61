"""Tests for theme discovery."""

import pytest
import yaml

from cms.themes import ThemeDescriptor, ThemeRegistry


class TestThemeRegistry:
    """Scanning the themes directory."""

    def test_only_directories_with_config_are_registered(self, themes_dir):
        themes = ThemeRegistry(str(themes_dir)).all()

        assert sorted(t.dir for t in themes.values()) == ["admin", "default"]

    def test_keyed_by_absolute_directory(self, themes_dir):
        themes = ThemeRegistry(str(themes_dir)).all()

        assert str((themes_dir / "default").resolve()) in themes

    def test_descriptor_fields_are_whitelisted(self, themes_dir):
        registry = ThemeRegistry(str(themes_dir))
        theme = registry.find("default")

        assert theme == ThemeDescriptor(
            name="Default",
            author="Test Author",
            site="https://default.example",
            type="frontend",
            dir="default",
            version="1.0.0",
        )
        assert not hasattr(theme, "colors")

    def test_frontend_and_backend_partition(self, themes_dir):
        registry = ThemeRegistry(str(themes_dir))

        frontend = registry.get_frontend()
        backend = registry.get_backend()

        assert [t.dir for t in frontend.values()] == ["default"]
        assert [t.dir for t in backend.values()] == ["admin"]
        assert set(frontend) | set(backend) == set(registry.all())

    def test_untyped_theme_in_neither_partition(self, themes_dir):
        (themes_dir / "plain").mkdir()
        (themes_dir / "plain" / "config.yaml").write_text(yaml.safe_dump({"name": "Plain"}))

        registry = ThemeRegistry(str(themes_dir))

        assert len(registry.all()) == 3
        assert "plain" not in [t.dir for t in registry.get_frontend().values()]
        assert "plain" not in [t.dir for t in registry.get_backend().values()]

    def test_scan_is_cached(self, themes_dir):
        registry = ThemeRegistry(str(themes_dir))
        assert len(registry.all()) == 2

        (themes_dir / "late").mkdir()
        (themes_dir / "late" / "config.yaml").write_text(yaml.safe_dump({"name": "Late", "type": "frontend"}))

        assert len(registry.all()) == 2
        assert registry.find("late") is None
        assert len(ThemeRegistry(str(themes_dir)).all()) == 3

    def test_one_theme_with_and_one_without_config(self, tmp_path):
        (tmp_path / "with").mkdir()
        (tmp_path / "with" / "config.yaml").write_text(yaml.safe_dump({"name": "With", "type": "backend"}))
        (tmp_path / "without").mkdir()

        themes = ThemeRegistry(str(tmp_path)).all()

        assert len(themes) == 1
        assert list(themes.values())[0].dir == "with"

    @pytest.mark.parametrize("content", [
        "- just\n- a list\n",
        "plain scalar\n",
        "name: [unclosed\n",
    ])
    def test_unreadable_config_is_skipped(self, tmp_path, content):
        (tmp_path / "good").mkdir()
        (tmp_path / "good" / "config.yaml").write_text(yaml.safe_dump({"name": "Good", "type": "frontend"}))
        (tmp_path / "odd").mkdir()
        (tmp_path / "odd" / "config.yaml").write_text(content)

        registry = ThemeRegistry(str(tmp_path))

        assert [t.dir for t in registry.all().values()] == ["good"]
        assert [t.dir for t in registry.get_frontend().values()] == ["good"]

    def test_missing_directory_is_empty(self, tmp_path):
        registry = ThemeRegistry(str(tmp_path / "nowhere"))

        assert registry.all() == {}
        assert registry.get_frontend() == {}
