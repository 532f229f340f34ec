"""Loading of command groups, key bindings and settings from JSON files."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterator, List, Mapping, Tuple, Union

PathLike = Union[str, Path]

COMMANDS_FILE = "Commands.json"
KEY_BINDINGS_FILE = "KeyBindings.json"
SETTINGS_FILE = "Settings.json"
SEPARATOR = "/"

_log = logging.getLogger(__name__)


class ConfigurationError(ValueError):
    """Raised when a configuration file does not have the expected contents."""


@dataclass(frozen=True)
class CommandGroup:
    command_group_id: str
    display_name: str
    command_name: str
    arguments: str


@dataclass(frozen=True)
class KeyBinding:
    key_combination: str
    group_id: str


def _read_json(path: Path) -> Any:
    text = path.read_text(encoding="utf-8")
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"{path}: {exc}") from exc


def _top_level_array(data: Any, key: str) -> List[Any]:
    if not isinstance(data, Mapping):
        raise ConfigurationError("File contents mismatch")
    value = data.get(key)
    if not isinstance(value, list):
        raise ConfigurationError("File contents mismatch")
    return value


def _string_field(entry: Any, key: str) -> str:
    value = entry.get(key) if isinstance(entry, Mapping) else None
    if not isinstance(value, str):
        raise ConfigurationError(f"field {key!r} must be a string")
    return value


def load_command_groups(folder: PathLike) -> List[CommandGroup]:
    """Read the command groups listed under ``commands`` in Commands.json."""
    data = _read_json(Path(folder) / COMMANDS_FILE)
    return [
        CommandGroup(
            _string_field(entry, "GroupID"),
            _string_field(entry, "DisplayName"),
            _string_field(entry, "Name"),
            _string_field(entry, "arguments"),
        )
        for entry in _top_level_array(data, "commands")
    ]


def load_key_bindings(folder: PathLike) -> List[KeyBinding]:
    """Read the bindings listed under ``KeyBindings`` in KeyBindings.json.

    Within each listed object the bindings come in key order.
    """
    data = _read_json(Path(folder) / KEY_BINDINGS_FILE)
    bindings: List[KeyBinding] = []
    for entry in _top_level_array(data, "KeyBindings"):
        if not isinstance(entry, Mapping):
            raise ConfigurationError("key binding entry must be an object")
        for key, value in sorted(entry.items()):
            if not isinstance(value, str):
                raise ConfigurationError(f"binding for {key!r} must be a string")
            bindings.append(KeyBinding(key, value))
    return bindings


def _flatten(node: Mapping[str, Any], namespace: str) -> Iterator[Tuple[str, str]]:
    for key, value in node.items():
        name = f"{namespace}{SEPARATOR}{key}" if namespace else key
        if isinstance(value, Mapping):
            yield from _flatten(value, name)
        elif isinstance(value, str):
            yield name, value
        else:
            yield name, json.dumps(value, indent=0, ensure_ascii=False, sort_keys=True)


def flatten_settings(data: Any) -> Dict[str, str]:
    """Flatten nested settings into ``a/b/c`` names mapped to text values.

    Strings are kept as they are; other values are stored as their JSON text.
    """
    if not isinstance(data, Mapping):
        raise ConfigurationError("settings root must be an object")
    return dict(sorted(_flatten(data, "")))


def load_settings(folder: PathLike) -> Dict[str, str]:
    """Read Settings.json; a missing or unreadable file yields no settings."""
    path = Path(folder) / SETTINGS_FILE
    try:
        return flatten_settings(_read_json(path))
    except (ConfigurationError, ValueError) as exc:
        _log.warning("%s", exc)
    except OSError:
        pass
    return {}