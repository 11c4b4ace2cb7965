"""
Theme Matching

Themes group icon names by a naming convention: a prefix ("baseline-home")
or a suffix ("home-outline"). An empty token matches every icon that was not
matched by a longer token.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional


@dataclass
class CheckThemeResult:
    """Icon names grouped by theme token, plus icons without a theme"""
    valid: Dict[str, List[str]] = field(default_factory=dict)
    invalid: List[str] = field(default_factory=list)


def sort_theme_keys(keys: Iterable[str]) -> List[str]:
    """
    Sort theme keys: long keys first, keys of same length alphabetically.

    Longer keys must be tested first, otherwise "baseline" would be matched
    before "baseline-outline". Empty key always ends up last.

    Example:
        >>> sort_theme_keys(["", "outline", "baseline-outline", "round"])
        ['baseline-outline', 'outline', 'round', '']
    """
    return sorted(keys, key=lambda key: (-len(key), key))


def match_theme(name: str, sorted_keys: List[str], prefix: bool) -> Optional[str]:
    """
    Find first theme key that matches icon name.

    Args:
        name: Icon name
        sorted_keys: Keys sorted with sort_theme_keys()
        prefix: True to test prefixes, False to test suffixes

    Returns:
        Matching key or None if icon does not belong to any theme
    """
    for key in sorted_keys:
        if key == "":
            return key
        if prefix:
            if name.startswith(key + "-"):
                return key
        elif name.endswith("-" + key):
            return key
    return None
