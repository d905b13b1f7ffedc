"""Tests for component capabilities."""

import pytest

from termgrid.component import (
    Renderable,
    Resizable,
    TextItem,
    ensure_renderable,
    is_renderable,
    is_resizable,
)
from termgrid.style import strip_ansi


class _OnlyResize:
    def resize(self, width, height):
        return self


class TestCapabilityProbes:
    """Tests for structural capability detection."""

    @pytest.mark.unit
    def test_text_item_is_renderable_only(self):
        item = TextItem("x")
        assert is_renderable(item)
        assert not is_resizable(item)
        assert isinstance(item, Renderable)
        assert not isinstance(item, Resizable)

    @pytest.mark.unit
    def test_resizable_component(self, sized_recorder):
        recorder = sized_recorder("x")
        assert is_resizable(recorder)
        assert isinstance(recorder, Resizable)

    @pytest.mark.unit
    def test_resize_without_render_is_not_resizable(self):
        assert not is_resizable(_OnlyResize())

    @pytest.mark.unit
    def test_ensure_renderable_rejects_plain_objects(self):
        with pytest.raises(TypeError, match="no render"):
            ensure_renderable("just a string")

    @pytest.mark.unit
    def test_ensure_renderable_passes_through(self):
        item = TextItem("x")
        assert ensure_renderable(item) is item


class TestTextItem:
    """Tests for the text leaf widget."""

    @pytest.mark.unit
    def test_render_plain(self):
        assert TextItem("Item 1").render() == "Item 1"

    @pytest.mark.unit
    def test_render_multiline(self):
        assert TextItem("a\nb").render() == "a\nb"

    @pytest.mark.unit
    def test_background_applied_when_colour_enabled(self, monkeypatch):
        monkeypatch.setenv("TERMGRID_COLOR", "1")
        rendered = TextItem("Item 1", background="#874BFD").render()
        assert rendered != "Item 1"
        assert strip_ansi(rendered) == "Item 1"
