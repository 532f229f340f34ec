"""Texel layouts and the text shown for the value of a single texel."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterable, Optional, Tuple


class ChannelSemantic(Enum):
    NONE = auto()
    RED = auto()
    GREEN = auto()
    BLUE = auto()
    OPACITY = auto()
    MONOCHROME = auto()
    FLOAT = auto()


class ChannelDataType(Enum):
    NONE = auto()
    UNSIGNED_INT = auto()
    SIGNED_INT = auto()
    FLOAT = auto()


@dataclass(frozen=True)
class Channel:
    """One channel of a texel: what it means, how it is stored, its width in bits."""

    semantic: ChannelSemantic
    data_type: ChannelDataType
    width: int


@dataclass(frozen=True)
class TexelInfo:
    """The channels of a texel, from the lowest bit upwards."""

    channels: Tuple[Channel, ...] = ()

    def __init__(self, channels: Iterable[Channel] = ()) -> None:
        object.__setattr__(self, "channels", tuple(channels))

    @property
    def texel_size(self) -> int:
        """Size of the texel in bits."""
        return sum(channel.width for channel in self.channels)


_BLUE = "<textcolor=#006dff>"
_GREEN = "<textcolor=#00ff00>"
_RED = "<textcolor=#ff1c21>"
_WHITE = "<textcolor=#ffffff>"
_OTHER = "<textcolor=#ff8930>"

_CHANNEL_COLORS = {
    ChannelSemantic.RED: _RED,
    ChannelSemantic.GREEN: _GREEN,
    ChannelSemantic.BLUE: _BLUE,
    ChannelSemantic.OPACITY: _WHITE,
}

_SEMANTIC_NAMES = {
    ChannelSemantic.RED: "R",
    ChannelSemantic.GREEN: "G",
    ChannelSemantic.BLUE: "B",
    ChannelSemantic.OPACITY: "A",
    ChannelSemantic.MONOCHROME: "Monochrome",
    ChannelSemantic.FLOAT: "Float",
}

_DATA_TYPE_NAMES = {
    ChannelDataType.FLOAT: "float",
    ChannelDataType.SIGNED_INT: "signed",
    ChannelDataType.UNSIGNED_INT: "unsigned",
}

_FLOAT_PRECISION = 6
_FLOAT_FIELD_WIDTH = _FLOAT_PRECISION + 4


def pick_color(semantic: ChannelSemantic) -> str:
    """Colour tag for a channel; anything but R, G, B and A gets the default colour."""
    return _CHANNEL_COLORS.get(semantic, _OTHER)


def format_semantic(semantic: ChannelSemantic) -> str:
    return _SEMANTIC_NAMES.get(semantic, "Undefined")


def format_data_type(data_type: ChannelDataType) -> str:
    return _DATA_TYPE_NAMES.get(data_type, "undefined")


def _int_at(data: bytes, offset: int, size: int, signed: bool) -> int:
    return int.from_bytes(data[offset:offset + size], "little", signed=signed)


def _float_text(value: float) -> str:
    return f"{value:.{_FLOAT_PRECISION}f}"


def _read_channel(
    data: bytes, channel: Channel, bit_offset: int, texel_size: int
) -> Optional[Tuple[str, int]]:
    """Text of a channel value and its field width (0: the stream's default)."""
    dtype = channel.data_type
    offset = bit_offset // 8
    unsigned = dtype is ChannelDataType.UNSIGNED_INT
    signed = dtype is ChannelDataType.SIGNED_INT
    is_float = dtype is ChannelDataType.FLOAT
    width = channel.width

    if width in (5, 6):
        if unsigned and texel_size == 16:
            whole = _int_at(data, 0, 2, False)
            mask = (((1 << width) - 1) << bit_offset) & 0xFFFF
            return str(((whole & mask) >> bit_offset) & 0xFF), 2
    elif width == 8:
        if unsigned or signed:
            return str(_int_at(data, offset, 1, signed)), 3
    elif width == 16:
        if unsigned or signed:
            return str(_int_at(data, offset, 2, signed)), 5
        if is_float:
            (value,) = struct.unpack_from("<e", data, offset)
            return _float_text(value), 0
    elif width == 24:
        if is_float or unsigned:
            return "N/A", 0
        if signed:
            return str(_int_at(data, offset, 3, True)), 8
    elif width == 32:
        if is_float:
            (value,) = struct.unpack_from("<f", data, offset)
            return _float_text(value), 0
        if signed:
            return str(_int_at(data, offset, 4, False)), 10
    elif width == 64:
        if unsigned:
            return str(_int_at(data, offset, 8, True)), 20
    return None


def _format_channel(
    data: bytes, channel: Channel, bit_offset: int, texel_size: int
) -> str:
    semantic, dtype = channel.semantic, channel.data_type
    if dtype is ChannelDataType.NONE:
        raise ValueError(f"channel {semantic.name} has no data type")

    label = pick_color(semantic)
    if dtype is ChannelDataType.SIGNED_INT:
        label += "(signed)"
    label += format_semantic(semantic)
    if channel.width != 8 or semantic in (ChannelSemantic.MONOCHROME, ChannelSemantic.FLOAT):
        label += f"({channel.width})"
    label += ":"

    pending_width = _FLOAT_FIELD_WIDTH if dtype is ChannelDataType.FLOAT else 0
    read = _read_channel(data, channel, bit_offset, texel_size)
    if read is None:
        return label + " ".rjust(pending_width)
    text, field_width = read
    return label + text.rjust(field_width or pending_width) + " "


def parse_texel_value(data: bytes, info: TexelInfo) -> str:
    """Describe the channel values of the texel stored little-endian at the start of ``data``."""
    data = bytes(data)
    if len(data) * 8 < info.texel_size:
        raise ValueError(
            f"texel needs {info.texel_size} bits but only {len(data) * 8} were given"
        )
    parts = []
    position = 0
    for channel in info.channels:
        if channel.semantic is not ChannelSemantic.NONE:
            parts.append(_format_channel(data, channel, position, info.texel_size))
        position += channel.width
    return "".join(parts)[:-1]