"""
Icon Set Entries

An icon set stores three kinds of named entries:

- IconEntry: icon with SVG body and its own properties
- AliasEntry: another name for an existing entry, without own properties
- VariationEntry: alias with properties that are merged onto the parent

Entries reference each other by name only. Categories are referenced by
category id, see category.py.
"""

from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, NoReturn, Set, Union


class IconSetError(Exception):
    """Base exception for icon set operations"""
    pass


class EntryValidationError(IconSetError):
    """Raised when an entry is created with invalid data"""
    pass


def _check_parent(parent: Any) -> None:
    if not isinstance(parent, str) or not parent:
        raise EntryValidationError("Parent must be a non-empty string")


@dataclass
class IconEntry:
    """
    Icon with its own SVG body.

    Properties with default values are not stored in props. Category ids
    point to records in the icon set's CategoryStore.
    """
    type: ClassVar[str] = "icon"

    body: str
    props: Dict[str, Any] = field(default_factory=dict)
    chars: Set[str] = field(default_factory=set)
    categories: Set[str] = field(default_factory=set)

    def __post_init__(self):
        if not isinstance(self.body, str):
            raise EntryValidationError("Icon body must be a string")

    def to_dict(self) -> Dict[str, Any]:
        """Serialize icon to the document format"""
        return {"body": self.body, **self.props}


@dataclass
class AliasEntry:
    """Alias without own properties"""
    type: ClassVar[str] = "alias"

    parent: str
    chars: Set[str] = field(default_factory=set)

    def __post_init__(self):
        _check_parent(self.parent)

    def to_dict(self) -> Dict[str, Any]:
        return {"parent": self.parent}


@dataclass
class VariationEntry:
    """Alias with properties that modify the parent icon"""
    type: ClassVar[str] = "variation"

    parent: str
    props: Dict[str, Any] = field(default_factory=dict)
    chars: Set[str] = field(default_factory=set)

    def __post_init__(self):
        _check_parent(self.parent)

    def to_dict(self) -> Dict[str, Any]:
        return {"parent": self.parent, **self.props}


IconSetEntry = Union[IconEntry, AliasEntry, VariationEntry]


def unknown_entry(item: Any) -> NoReturn:
    """Called in the final branch of every match over entry types"""
    raise TypeError(f"Unknown icon set entry type: {type(item).__name__}")
