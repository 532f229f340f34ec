"""Formatting of key/value messages, texel layouts and file paths as coloured text."""

from __future__ import annotations

import math
import os
from dataclasses import dataclass, field
from pathlib import PurePath
from typing import Iterable, List, Tuple, Union

from .texel import ChannelSemantic, TexelInfo, format_data_type, format_semantic, pick_color

DEFAULT_KEY_COLOR = "<textcolor=#ff8930>"
DEFAULT_VALUE_COLOR = "<textcolor=#98f733>"
DEFAULT_HEADER_COLOR = "<textcolor=#ff00ff>"

_SEPARATOR_COLOR = "<textcolor=#444444>"
_PARENT_PATH_COLOR = "<textcolor=#808080>"
_FILE_NAME_COLOR = "<textcolor=#7672ff>"
_EXTENSION_COLOR = "<textcolor=#ff00ff>"

Value = Union[int, float, str]


@dataclass(frozen=True)
class ValueObject:
    """A value to show; numbers use ``precision`` digits after the point."""

    value: Value
    precision: int = 2


@dataclass
class FormatArgs:
    message_values: List[Tuple[str, List[ValueObject]]] = field(default_factory=list)
    key_color: str = DEFAULT_KEY_COLOR
    value_color: str = DEFAULT_VALUE_COLOR
    max_lines: int = 24
    min_space_from_value: int = 3
    double_width: int = 2
    space_between_columns: int = 3
    columns_separator: str = "|"
    spacer: str = "."


@dataclass(frozen=True)
class DecomposedPath:
    parent_path: str
    file_name: str
    extension: str


def format_number(value: Union[int, float], precision: int = 2) -> str:
    """Number with comma thousands separators; floats get ``precision`` decimals."""
    if precision < 0:
        raise ValueError("precision must not be negative")
    if isinstance(value, int):
        return f"{value:,}"
    return f"{value:,.{precision}f}"


def format_value(value: Union[ValueObject, Value]) -> str:
    if not isinstance(value, ValueObject):
        value = ValueObject(value)
    if isinstance(value.value, str):
        return value.value
    return format_number(value.value, value.precision)


def format_values(values: Iterable[Union[ValueObject, Value]]) -> str:
    return "".join(format_value(value) for value in values)


def format_meta_text(args: FormatArgs) -> str:
    """Lay out key/value pairs in aligned columns of at most ``max_lines`` lines."""
    if args.max_lines <= 0:
        raise ValueError("max_lines must be positive")
    entries = [(key, format_values(values)) for key, values in args.message_values]
    if not entries:
        return ""

    max_lines = args.max_lines
    total_columns = math.ceil(len(entries) / max_lines)
    key_widths = [0] * total_columns
    value_widths = [0] * total_columns
    for index, (key, value) in enumerate(entries):
        column = index // max_lines
        key_widths[column] = max(key_widths[column], len(key))
        value_widths[column] = max(value_widths[column], len(value))

    half_space = args.space_between_columns // 2
    tail_space = max(0, args.space_between_columns - 1 - half_space)
    lines = [""] * min(len(entries), max_lines)
    for index, (key, value) in enumerate(entries):
        column, line = divmod(index, max_lines)
        parts = [
            args.key_color,
            key,
            args.spacer * (key_widths[column] - len(key)),
            args.spacer * max(0, args.min_space_from_value - 1),
            " ",
            args.value_color,
            value,
        ]
        if column < total_columns - 1:
            parts += [
                " " * (value_widths[column] - len(value)),
                " " * half_space,
                _SEPARATOR_COLOR,
                args.columns_separator,
                " " * tail_space,
            ]
        lines[line] += "".join(parts)
    return "\n".join(lines)


def pick_channel_color(semantic: ChannelSemantic) -> str:
    """Colour tag for a channel that must have a semantic."""
    if semantic is ChannelSemantic.NONE:
        raise ValueError("channel has no semantic")
    return pick_color(semantic)


def format_texel_info(info: TexelInfo) -> str:
    """Describe each channel as its name and width, e.g. ``R:8``, each followed by a space."""
    parts = []
    for channel in info.channels:
        text = pick_channel_color(channel.semantic) + format_semantic(channel.semantic) + ":"
        if channel.semantic is ChannelSemantic.MONOCHROME:
            text += f"({format_data_type(channel.data_type)})"
        parts.append(f"{text}{channel.width} ")
    return "".join(parts)


def _stem_and_extension(name: str) -> Tuple[str, str]:
    if name in (".", ".."):
        return name, ""
    dot = name.rfind(".")
    if dot <= 0:
        return name, ""
    return name[:dot], name[dot:]


def decompose_path(path: Union[str, "os.PathLike[str]"]) -> DecomposedPath:
    """Split a path into its folder (ending in a separator), stem and extension."""
    pure = PurePath(os.fspath(path))
    parent = pure.parent
    parent_text = parent.drive + os.sep
    relative = str(parent.relative_to(parent.anchor)) if parent.anchor else str(parent)
    if relative and relative != ".":
        parent_text += relative + os.sep
    stem, extension = _stem_and_extension(pure.name)
    return DecomposedPath(parent_text, stem, extension)


def format_file_path(path: Union[str, "os.PathLike[str]"]) -> str:
    decomposed = decompose_path(path)
    return (
        _PARENT_PATH_COLOR
        + decomposed.parent_path
        + _FILE_NAME_COLOR
        + decomposed.file_name
        + _EXTENSION_COLOR
        + decomposed.extension
    )