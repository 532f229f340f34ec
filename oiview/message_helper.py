"""Texts shown to the user: image source names, key bindings and file times."""

from __future__ import annotations

import os
from datetime import datetime
from enum import Enum, auto
from typing import Union

from .configuration import PathLike, load_command_groups, load_key_bindings
from .message_formatter import (
    DEFAULT_KEY_COLOR,
    DEFAULT_VALUE_COLOR,
    FormatArgs,
    ValueObject,
    format_meta_text,
)

FILE_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


class ImageSource(Enum):
    NONE = auto()
    FILE = auto()
    CLIPBOARD = auto()
    INTERNAL_TEXT = auto()
    GENERATED_BY_LIB = auto()


_SOURCE_NAMES = {
    ImageSource.NONE: "none",
    ImageSource.FILE: "file",
    ImageSource.CLIPBOARD: "clipboard",
    ImageSource.INTERNAL_TEXT: "internal text",
    ImageSource.GENERATED_BY_LIB: "auto generated",
}


def describe_image_source(source: ImageSource) -> str:
    return _SOURCE_NAMES.get(source, "unknown")


def create_key_bindings_message(folder: PathLike) -> str:
    """List each key binding with the display name of the command group it runs.

    Bindings whose group is not among the command groups are left out.
    """
    bindings = load_key_bindings(folder)
    groups = load_command_groups(folder)
    args = FormatArgs(
        key_color=DEFAULT_KEY_COLOR,
        value_color=DEFAULT_VALUE_COLOR,
        max_lines=24,
        min_space_from_value=3,
        spacer=".",
        space_between_columns=3,
    )
    for binding in bindings:
        group = next(
            (g for g in groups if g.command_group_id == binding.group_id), None
        )
        if group is not None:
            args.message_values.append(
                (binding.key_combination, [ValueObject(group.display_name)])
            )
    return format_meta_text(args)


def file_time(path: Union[str, "os.PathLike[str]"]) -> str:
    """Last modification time of ``path`` in local time."""
    mtime = os.stat(path).st_mtime
    return datetime.fromtimestamp(mtime).strftime(FILE_TIME_FORMAT)