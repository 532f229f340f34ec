"""Ordering of file paths by name, extension or modification date."""

from __future__ import annotations

import os
from enum import Enum, auto
from pathlib import PurePath
from typing import Any, Callable, Dict, Iterable, List, Tuple


class SortType(Enum):
    NAME = auto()
    DATE = auto()
    EXTENSION = auto()


class SortDirection(Enum):
    ASCENDING = auto()
    DESCENDING = auto()


def _stem_and_extension(path: str) -> Tuple[str, str]:
    name = PurePath(path.lower()).name
    if name in (".", ".."):
        return name, ""
    dot = name.rfind(".")
    if dot <= 0:
        return name, ""
    return name[:dot], name[dot:]


def _name_key(path: str) -> Tuple[str, str]:
    return _stem_and_extension(path)


def _extension_key(path: str) -> Tuple[str, str]:
    stem, ext = _stem_and_extension(path)
    return ext, stem


def _date_key(path: str) -> float:
    return os.path.getmtime(path)


_KEYS: Dict[SortType, Callable[[str], Any]] = {
    SortType.NAME: _name_key,
    SortType.DATE: _date_key,
    SortType.EXTENSION: _extension_key,
}


class FileSorter:
    """Compares and sorts paths by the active sort type and its direction.

    Each sort type remembers its own direction; by default dates sort
    newest first and the others ascending. Names compare case-insensitively.
    """

    def __init__(self, sort_type: SortType = SortType.NAME) -> None:
        self.sort_type = sort_type
        self._directions: Dict[SortType, SortDirection] = {
            SortType.NAME: SortDirection.ASCENDING,
            SortType.DATE: SortDirection.DESCENDING,
            SortType.EXTENSION: SortDirection.ASCENDING,
        }

    def active_sort_direction(self) -> SortDirection:
        return self._directions[self.sort_type]

    def set_sort_direction(self, sort_type: SortType, direction: SortDirection) -> None:
        self._directions[sort_type] = direction

    def set_active_sort_direction(self, direction: SortDirection) -> None:
        self.set_sort_direction(self.sort_type, direction)

    def _key(self) -> Callable[[str], Any]:
        try:
            return _KEYS[self.sort_type]
        except KeyError:
            raise ValueError(f"unexpected sort type {self.sort_type!r}") from None

    def less(self, a: str, b: str) -> bool:
        """Whether ``a`` goes before ``b`` in the active order."""
        key = self._key()
        ka, kb = key(a), key(b)
        if self.active_sort_direction() is SortDirection.ASCENDING:
            return ka < kb
        return kb < ka

    def sort(self, paths: Iterable[str]) -> List[str]:
        """Return the paths in the active order."""
        descending = self.active_sort_direction() is SortDirection.DESCENDING
        return sorted(paths, key=self._key(), reverse=descending)