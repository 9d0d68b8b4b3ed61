"""Tests for the service container."""

import pytest

from cms.core import Container
from cms.services import ConfigStore, DatabaseConfigStore


class Widget:
    pass


class TestContainer:

    def test_bind_dotted_path(self):
        container = Container()
        container.bind("store", "cms.services.config_store.DatabaseConfigStore")

        assert isinstance(container.make("store"), DatabaseConfigStore)

    def test_bind_by_class_key(self):
        container = Container()
        container.bind(ConfigStore, DatabaseConfigStore)

        assert isinstance(container.make("cms.services.config_store.ConfigStore"), DatabaseConfigStore)
        assert isinstance(container[ConfigStore], DatabaseConfigStore)

    def test_factory_builds_each_time(self):
        container = Container()
        container.bind("widget", lambda c: Widget())

        assert container.make("widget") is not container.make("widget")

    def test_share_builds_once(self):
        container = Container()
        calls = []

        def factory(c):
            calls.append(c)
            return Widget()

        container.share("widget", factory)
        assert calls == []

        first = container.make("widget")
        assert container.make("widget") is first
        assert calls == [container]

    def test_instance(self):
        container = Container()
        widget = Widget()
        container.instance("widget", widget)

        assert container.make("widget") is widget
        assert container.bound("widget")

    def test_unbound_class_is_instantiated(self):
        assert isinstance(Container().make(Widget), Widget)

    def test_unbound_key_raises(self):
        with pytest.raises(KeyError):
            Container().make("nothing")

    def test_bad_class_path_raises(self):
        container = Container()
        container.bind("broken", "cms.services.config_store.NoSuchStore")

        with pytest.raises(ImportError):
            container.make("broken")
