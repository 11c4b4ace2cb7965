"""
Icon Set Tools

In-memory repository for icon sets: icons, aliases and variations identified
by name, with categories, characters map and themes derived from entries.

- icon_set: IconSet class - loading, resolving, mutations and export
- entry: entry types stored in an icon set
- category: category records referenced by icons
- themes: matching icon names against theme prefixes and suffixes
- svg: parsing SVG and rendering icons
- minify: post-processing of exported documents
- validation: document schema validation and reference integrity checks
"""

from .category import Category, CategoryStore
from .config import MAX_ITERATION, THEME_KEYS
from .entry import (
    AliasEntry,
    EntryValidationError,
    IconEntry,
    IconSetEntry,
    IconSetError,
    VariationEntry,
)
from .icon_set import IconSet, blank_icon_set
from .minify import convert_info, minify_icon_set
from .props import (
    DEFAULT_COMMON_PROPS,
    DEFAULT_ICON_DIMENSIONS,
    DEFAULT_ICON_PROPS,
    filter_props,
)
from .svg import SVG, SVGError, icon_to_svg
from .themes import CheckThemeResult, sort_theme_keys
from .validation import (
    DocumentValidationError,
    ValidationResult,
    check_references,
    validate_document,
)

__version__ = "0.1.0"

__all__ = [
    # Icon set
    "IconSet",
    "blank_icon_set",

    # Entries and categories
    "IconEntry",
    "AliasEntry",
    "VariationEntry",
    "IconSetEntry",
    "Category",
    "CategoryStore",

    # Exceptions
    "IconSetError",
    "EntryValidationError",
    "DocumentValidationError",
    "SVGError",

    # Properties
    "DEFAULT_ICON_DIMENSIONS",
    "DEFAULT_ICON_PROPS",
    "DEFAULT_COMMON_PROPS",
    "filter_props",

    # Themes
    "CheckThemeResult",
    "sort_theme_keys",

    # SVG and export helpers
    "SVG",
    "icon_to_svg",
    "minify_icon_set",
    "convert_info",

    # Validation
    "ValidationResult",
    "validate_document",
    "check_references",

    # Constants
    "MAX_ITERATION",
    "THEME_KEYS",
]
