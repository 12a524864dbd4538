from __future__ import annotations

import pytest

from webvtt_codec.vtt.errors import InvalidSetting
from webvtt_codec.vtt.export import format_settings
from webvtt_codec.vtt.model import Align, LineAuto, LineNumber, LinePercentage, Settings, Vertical
from webvtt_codec.vtt.parse import parse_settings


def test_parse_common_settings():
    s = parse_settings("line:90% position:50% align:middle")
    assert s.line == LinePercentage(90)
    assert s.position == 50
    assert s.align is Align.MIDDLE
    assert s.vertical is None
    assert s.size is None


@pytest.mark.parametrize(
    "text, expected",
    [
        ("vertical:rl", Settings(vertical=Vertical.RIGHT_TO_LEFT)),
        ("vertical:lr", Settings(vertical=Vertical.LEFT_TO_RIGHT)),
        ("line:auto", Settings(line=LineAuto())),
        ("line:0%", Settings(line=LinePercentage(0))),
        ("line:-3", Settings(line=LineNumber(-3))),
        ("line:7", Settings(line=LineNumber(7))),
        ("size:100%", Settings(size=100)),
        ("align:left", Settings(align=Align.LEFT)),
        ("", Settings()),
        ("   ", Settings()),
    ],
)
def test_parse_each_key(text, expected):
    assert parse_settings(text) == expected


def test_last_duplicate_wins():
    assert parse_settings("align:start position:10% align:end").align is Align.END


def test_extra_whitespace_between_tokens():
    s = parse_settings("  size:40%\t\tvertical:lr ")
    assert s == Settings(vertical=Vertical.LEFT_TO_RIGHT, size=40)


class TestInvalidSettings:
    """
    Unknown keys and malformed values are hard errors.

    (Some older WebVTT readers silently skip them instead; this codec never
    drops a setting without telling the caller.)
    """

    @pytest.mark.parametrize(
        "text, token",
        [
            ("foo:bar", "foo:bar"),
            ("align", "align"),
            ("align:middle region:r1", "region:r1"),
            ("vertical:up", "vertical:up"),
            ("line:abc", "line:abc"),
            ("line:150%", "line:150%"),
            ("line:1.5", "line:1.5"),
            ("line:", "line:"),
            ("position:50", "position:50"),
            ("position:-5%", "position:-5%"),
            ("size:101%", "size:101%"),
            ("size:%", "size:%"),
            ("align:center", "align:center"),
            ("Align:start", "Align:start"),
        ],
    )
    def test_rejected_with_offending_token(self, text, token):
        with pytest.raises(InvalidSetting) as exc_info:
            parse_settings(text)
        assert exc_info.value.fragment == token
        assert exc_info.value.kind == "invalid_setting"

    def test_missing_percent_is_not_ignored(self):
        with pytest.raises(InvalidSetting):
            parse_settings("size:40 align:start")


def test_format_fixed_order():
    s = Settings(
        vertical=Vertical.LEFT_TO_RIGHT,
        line=LinePercentage(90),
        position=50,
        size=40,
        align=Align.MIDDLE,
    )
    assert format_settings(s) == "vertical:lr line:90% position:50% size:40% align:middle"


def test_format_line_variants():
    assert format_settings(Settings(line=LineNumber(-1))) == "line:-1"
    assert format_settings(Settings(line=LineAuto())) == "line:auto"
    assert format_settings(Settings()) == ""


def test_format_normalizes_token_order():
    assert format_settings(parse_settings("align:end size:10% vertical:rl")) == "vertical:rl size:10% align:end"


@pytest.mark.parametrize(
    "record",
    [
        Settings(),
        Settings(vertical=Vertical.RIGHT_TO_LEFT, line=LineAuto()),
        Settings(line=LineNumber(0), position=0, size=0),
        Settings(line=LineNumber(-12), align=Align.RIGHT),
        Settings(line=LinePercentage(100), position=100, size=100, align=Align.START),
        Settings(
            vertical=Vertical.LEFT_TO_RIGHT,
            line=LinePercentage(5),
            position=25,
            size=75,
            align=Align.END,
        ),
    ],
)
def test_parse_format_round_trip(record):
    assert parse_settings(format_settings(record)) == record


def test_is_empty():
    assert Settings().is_empty()
    assert not Settings(size=1).is_empty()


def test_oversized_number_is_an_invalid_setting():
    token = "position:" + "1" * 5000 + "%"
    with pytest.raises(InvalidSetting) as exc:
        parse_settings(token)
    assert exc.value.fragment == token

    with pytest.raises(InvalidSetting):
        parse_settings("line:-" + "1" * 5000)


class TestSettingsRecord:
    """Records only hold values the text form can carry."""

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"position": 150},
            {"position": -1},
            {"size": -1},
            {"size": 101},
        ],
    )
    def test_percent_out_of_range(self, kwargs):
        with pytest.raises(ValueError):
            Settings(**kwargs)

    @pytest.mark.parametrize("value", [-5, 101])
    def test_line_percentage_out_of_range(self, value):
        with pytest.raises(ValueError):
            LinePercentage(value)

    @pytest.mark.parametrize("value", [True, 50.0, "50"])
    def test_percent_must_be_int(self, value):
        with pytest.raises(TypeError):
            Settings(position=value)
        with pytest.raises(TypeError):
            LinePercentage(value)

    def test_bounds_are_inclusive(self):
        rec = Settings(line=LinePercentage(0), position=0, size=100)
        assert parse_settings(format_settings(rec)) == rec
