import os

import pytest

from oiview.message_formatter import (
    DEFAULT_VALUE_COLOR,
    FormatArgs,
    ValueObject,
    decompose_path,
    format_file_path,
    format_meta_text,
    format_number,
    format_texel_info,
    format_value,
    format_values,
    pick_channel_color,
)
from oiview.texel import Channel, ChannelDataType, ChannelSemantic, TexelInfo, pick_color


def test_format_number_integer_with_commas():
    assert format_number(1234567, 2) == "1,234,567"


@pytest.mark.parametrize("value", [0, 999, 1000, -1234567, 10**12])
def test_format_number_integer_round_trip_and_grouping(value):
    text = format_number(value, 2)
    assert int(text.replace(",", "")) == value
    groups = text.lstrip("-").split(",")
    assert 1 <= len(groups[0]) <= 3
    assert all(len(group) == 3 for group in groups[1:])


@pytest.mark.parametrize("precision", [0, 1, 3, 6])
def test_format_number_float_precision(precision):
    value = 98765.4321
    text = format_number(value, precision)
    assert float(text.replace(",", "")) == pytest.approx(value, abs=10 ** -precision)
    assert "," in text
    if precision:
        assert len(text.split(".")[1]) == precision


def test_format_number_negative_precision_raises():
    with pytest.raises(ValueError):
        format_number(1.5, -1)


def test_format_value_string_passthrough():
    assert format_value(ValueObject("px")) == "px"


def test_format_values_concatenates():
    values = [ValueObject("1:"), ValueObject(2.5, 3)]
    assert format_values(values) == "1:" + format_value(ValueObject(2.5, 3))


def test_meta_text_aligns_values():
    args = FormatArgs(
        message_values=[
            ("A", [ValueObject(1)]),
            ("Longer key", [ValueObject(2)]),
        ]
    )
    lines = format_meta_text(args).split("\n")
    assert len(lines) == 2
    assert lines[0].index(DEFAULT_VALUE_COLOR) == lines[1].index(DEFAULT_VALUE_COLOR)
    assert lines[0].endswith("1")
    assert lines[1].endswith("2")


def test_meta_text_columns():
    args = FormatArgs(
        message_values=[(f"k{i}", [ValueObject(i)]) for i in range(5)],
        max_lines=2,
    )
    text = format_meta_text(args)
    lines = text.split("\n")
    assert len(lines) == args.max_lines
    for line in lines:
        assert line.count(args.columns_separator) == 2
    assert not text.endswith("\n")


def test_meta_text_empty():
    assert format_meta_text(FormatArgs()) == ""


def test_meta_text_zero_lines_raises():
    args = FormatArgs(message_values=[("a", [ValueObject(1)])], max_lines=0)
    with pytest.raises(ValueError):
        format_meta_text(args)


def test_pick_channel_color():
    assert pick_channel_color(ChannelSemantic.RED) == pick_color(ChannelSemantic.RED)
    with pytest.raises(ValueError):
        pick_channel_color(ChannelSemantic.NONE)


def test_format_texel_info_rg():
    info = TexelInfo(
        [
            Channel(ChannelSemantic.RED, ChannelDataType.UNSIGNED_INT, 8),
            Channel(ChannelSemantic.GREEN, ChannelDataType.UNSIGNED_INT, 8),
        ]
    )
    assert format_texel_info(info) == "<textcolor=#ff1c21>R:8 <textcolor=#00ff00>G:8 "


def test_format_texel_info_monochrome_shows_data_type():
    info = TexelInfo([Channel(ChannelSemantic.MONOCHROME, ChannelDataType.UNSIGNED_INT, 16)])
    result = format_texel_info(info)
    assert "(unsigned)" in result
    assert result.startswith(pick_color(ChannelSemantic.MONOCHROME) + "Monochrome:")


def test_format_texel_info_rejects_missing_semantic():
    info = TexelInfo([Channel(ChannelSemantic.NONE, ChannelDataType.UNSIGNED_INT, 8)])
    with pytest.raises(ValueError):
        format_texel_info(info)


def test_decompose_root_file():
    decomposed = decompose_path(os.sep + "name.png")
    assert decomposed.parent_path == os.sep
    assert decomposed.file_name == "name"


def test_decompose_multiple_dots_and_hidden():
    assert decompose_path("archive.tar.gz").extension == ".gz"
    assert decompose_path("archive.tar.gz").file_name == "archive.tar"
    hidden = decompose_path(".hidden")
    assert hidden.file_name == ".hidden"
    assert hidden.extension == ""


def test_format_file_path():
    result = format_file_path(os.path.join("dir", "name.png"))
    assert result.startswith("<textcolor=#808080>")
    assert "<textcolor=#7672ff>name" in result
    assert result.endswith("<textcolor=#ff00ff>.png")