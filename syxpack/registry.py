"""
Manufacturer registry.

Read-only table mapping SysEx manufacturer IDs to names and geographic
groups. Build one with ``ManufacturerRegistry(entries)`` or use the shared
instance from ``default_registry()``; either can be passed wherever a
registry is accepted.
"""

from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import TYPE_CHECKING, Dict, Iterable, Iterator, Mapping, Optional, Tuple, Union

from syxpack.errors import ManufacturerNotFoundError
from syxpack.utils.manufacturer_ids import (
    EXTENDED_GROUP_RANGES,
    MANUFACTURER_IDS,
    STANDARD_GROUP_RANGES,
)

if TYPE_CHECKING:
    from syxpack.manufacturer import Manufacturer

UNKNOWN_NAME = "Unknown"

CodeLike = Union[bytes, bytearray, Iterable[int]]


class ManufacturerGroup(Enum):
    """Geographic group of a manufacturer ID."""

    AMERICAN = "American"
    EUROPEAN = "European"
    JAPANESE = "Japanese"
    OTHER = "Other"
    SPECIAL = "Special"

    def __str__(self) -> str:
        return self.value


def group_for_code(code: CodeLike) -> ManufacturerGroup:
    """
    Classify a manufacturer ID by its byte range.

    Args:
        code: 1-byte standard or 3-byte extended ID

    Returns:
        The group the ID falls in. IDs outside every range are OTHER.
    """
    code = bytes(code)
    if len(code) == 3:
        key, ranges = code[1], EXTENDED_GROUP_RANGES
    else:
        key, ranges = code[0], STANDARD_GROUP_RANGES

    for start, end, name in ranges:
        if start <= key <= end:
            return ManufacturerGroup(name)
    return ManufacturerGroup.OTHER


@dataclass(frozen=True)
class RegistryEntry:
    """A single registry row."""

    code: bytes
    name: str
    group: ManufacturerGroup


class ManufacturerRegistry:
    """
    Static manufacturer table.

    Example:
        registry = default_registry()
        registry.name_for(b"\\x43")         # "Yamaha"
        registry.lookup_by_name("Rol")      # Manufacturer(code=b"\\x41")
    """

    def __init__(self, entries: Mapping[Tuple[int, ...], str]):
        self._entries: Dict[bytes, RegistryEntry] = {}
        for key, name in entries.items():
            code = bytes(key)
            self._entries[code] = RegistryEntry(code, name, group_for_code(code))

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[RegistryEntry]:
        return iter(self._entries.values())

    def __contains__(self, code: object) -> bool:
        if not isinstance(code, (bytes, bytearray)):
            return False
        return bytes(code) in self._entries

    def lookup_by_code(self, code: CodeLike) -> Optional[RegistryEntry]:
        """Exact match on the ID bytes."""
        return self._entries.get(bytes(code))

    def name_for(self, code: CodeLike) -> str:
        """Name for an ID, or ``UNKNOWN_NAME`` if it is not in the table."""
        entry = self.lookup_by_code(code)
        return entry.name if entry is not None else UNKNOWN_NAME

    def lookup_by_name(self, prefix: str) -> "Manufacturer":
        """
        Find a manufacturer by name or name prefix.

        Matching is case-sensitive. An exact name match wins; otherwise the
        first entry in table order whose name starts with ``prefix``.
        Special-group IDs (non-commercial and universal) are not returned.

        Raises:
            ManufacturerNotFoundError: If nothing matches
        """
        from syxpack.manufacturer import Manufacturer

        if prefix:
            candidates = [e for e in self._entries.values() if e.group != ManufacturerGroup.SPECIAL]
            for entry in candidates:
                if entry.name == prefix:
                    return Manufacturer(entry.code, registry=self)
            for entry in candidates:
                if entry.name.startswith(prefix):
                    return Manufacturer(entry.code, registry=self)

        raise ManufacturerNotFoundError(f"No manufacturer found matching '{prefix}'")


@lru_cache(maxsize=None)
def default_registry() -> ManufacturerRegistry:
    """Registry built from the bundled ID table, created once."""
    return ManufacturerRegistry(MANUFACTURER_IDS)
