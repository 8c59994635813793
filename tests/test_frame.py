import pytest
from pydantic import ValidationError

from models.frame import FrameConfig


def test_default_frame():
    frame = FrameConfig()
    assert frame.enabled is True
    assert frame.text == "SCAN ME"
    assert frame.style == "scanme"
    assert frame.color == frame.bg_color == "#000000"


def test_select_simple_disables_frame():
    frame = FrameConfig().select_style("simple")
    assert frame.enabled is False
    assert frame.style == "simple"
    assert frame.background() == "#ffffff"


def test_select_scanme_resets_text():
    frame = FrameConfig(text="EIGENER", style="custom").select_style("scanme")
    assert frame.enabled is True
    assert frame.text == "SCAN ME"


def test_select_custom_keeps_text_or_falls_back():
    assert FrameConfig().select_style("custom").text == "SCAN ME"
    assert FrameConfig(text="").select_style("custom").text == "SCANNEN"


def test_custom_text_is_capped_at_twenty_chars():
    frame = FrameConfig().select_style("custom").with_text("x" * 30)
    assert frame.text == "x" * 20


def test_frame_is_immutable_copy():
    base = FrameConfig()
    changed = base.with_colors(color="#ff0000")
    assert base.color == "#000000"
    assert changed.color == "#ff0000"
    assert changed.with_colors().bg_color == "#000000"


def test_label_color_rules():
    assert FrameConfig().label_color() == "#ffffff"
    assert FrameConfig(color="#FF0000", bg_color="#FFFFFF").label_color() == "#FF0000"
    assert FrameConfig(color="#ff0000", bg_color="#123456").label_color() == "#ffffff"


def test_background_when_enabled():
    assert FrameConfig(bg_color="#123456").background() == "#123456"


@pytest.mark.parametrize(
    "values",
    [
        {"text": "x" * 21},
        {"color": "red"},
        {"bg_color": "#12345"},
        {"color": "nope"},
    ],
)
def test_invalid_frame_values_are_rejected(values):
    with pytest.raises(ValidationError):
        FrameConfig(**values)


def test_twenty_char_text_and_hex_colors_are_accepted():
    frame = FrameConfig(text="x" * 20, color="#FF00aa", bg_color="#ffffff")
    assert frame.text == "x" * 20
    assert frame.label_color() == "#FF00aa"
