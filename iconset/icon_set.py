"""
Icon Set

In-memory icon set, loaded from an icon set JSON document and exported back
to the same format.

The IconSet class keeps all entries in one name -> entry mapping and provides:
- Resolving aliases and variations to icon data
- Categories, characters map and themes derived from entries
- Mutations (add, remove, rename) that keep aliases pointing to valid parents
- Export to a minified document, dropping aliases that cannot be resolved

Example:
    >>> icon_set = IconSet({
    ...     "prefix": "demo",
    ...     "icons": {"home": {"body": "<path d=\\"M0 0h16v16z\\"/>"}},
    ...     "aliases": {"house": {"parent": "home", "rotate": 1}},
    ... })
    >>> icon_set.resolve("house")["rotate"]
    1
"""

import copy
import inspect
import logging
from typing import Any, Awaitable, Callable, Dict, Iterable, List, Optional, Set, Union

from .category import Category, CategoryStore
from .config import ENTRY_TYPES, MAX_ITERATION, THEME_KEYS
from .entry import (
    AliasEntry,
    IconEntry,
    IconSetEntry,
    VariationEntry,
    unknown_entry,
)
from .minify import convert_info, minify_icon_set
from .props import (
    DEFAULT_COMMON_PROPS,
    DEFAULT_ICON_DIMENSIONS,
    DEFAULT_ICON_PROPS,
    filter_props,
)
from .svg import SVG, build_svg, icon_to_svg
from .themes import CheckThemeResult, match_theme, sort_theme_keys
from .validation import DocumentValidationError, validate_document

logger = logging.getLogger(__name__)

ForEachCallback = Callable[[str, str], Union[Optional[bool], Awaitable[Optional[bool]]]]
FilterCallback = Callable[[str, IconSetEntry, Optional[Dict[str, Any]]], bool]


class IconSet:
    """
    Icon set.

    Attributes can be read directly. Avoid writing to 'entries' and
    'categories', use methods instead: they keep aliases and category
    counts consistent.
    """

    prefix: str
    entries: Dict[str, IconSetEntry]
    info: Optional[Dict[str, Any]]
    categories: CategoryStore
    prefixes: Dict[str, str]
    suffixes: Dict[str, str]

    def __init__(self, data: Dict[str, Any]):
        self.load(data)

    def load(self, data: Dict[str, Any]) -> None:
        """
        Load icon set document, replacing current content.

        Raises:
            DocumentValidationError: If document does not match icon set schema
        """
        result = validate_document(data)
        if not result.is_valid:
            logger.error(f"Icon set document failed to validate: {'; '.join(result.errors)}")
            raise DocumentValidationError("Invalid icon set document", result.errors)

        self.prefix = data["prefix"]

        # Icon set level dimensions
        default_props = filter_props(data, DEFAULT_ICON_DIMENSIONS, True)

        # Icons
        self.entries = {}
        entries = self.entries
        for name, item in data["icons"].items():
            entries[name] = IconEntry(
                body=item["body"],
                props=filter_props({**default_props, **item}, DEFAULT_COMMON_PROPS, True),
            )

        # Aliases
        for name, item in data.get("aliases", {}).items():
            if name in entries:
                # Icon and alias with same name: icon wins
                logger.debug(f"Skipping alias '{name}': icon with same name exists")
                continue
            props = filter_props(item, DEFAULT_COMMON_PROPS, False)
            if props:
                entries[name] = VariationEntry(parent=item["parent"], props=props)
            else:
                entries[name] = AliasEntry(parent=item["parent"])

        # Info
        self.info = convert_info(data["info"]) if "info" in data else None

        # Characters map
        for char, name in data.get("chars", {}).items():
            item = entries.get(name)
            if item is not None:
                item.chars.add(char)

        # Categories
        self.categories = CategoryStore()
        for title, names in data.get("categories", {}).items():
            category = self.categories.add(title)
            for icon_name in names:
                item = entries.get(icon_name)
                if isinstance(item, IconEntry):
                    item.categories.add(category.id)
            self.list_category(category)

        # Themes: legacy format first, current format overwrites it
        self.prefixes = {}
        self.suffixes = {}
        for item in data.get("themes", {}).values():
            prefix = item.get("prefix")
            if isinstance(prefix, str) and prefix.endswith("-"):
                self.prefixes[prefix[:-1]] = item["title"]
            suffix = item.get("suffix")
            if isinstance(suffix, str) and suffix.startswith("-"):
                self.suffixes[suffix[1:]] = item["title"]
        for prop in THEME_KEYS:
            getattr(self, prop).update(data.get(prop, {}))

        logger.info(
            f"Loaded icon set '{self.prefix}': {len(entries)} entries, "
            f"{len(self.categories)} categories"
        )

    # ------------------------------------------------------------------
    # Listing
    # ------------------------------------------------------------------

    def list(self, types: Iterable[str] = ("icon", "variation")) -> List[str]:
        """List names of entries of given types, in store order"""
        types = tuple(types)
        return [name for name, item in self.entries.items() if item.type in types]

    async def for_each(self, callback: ForEachCallback,
                       types: Iterable[str] = ENTRY_TYPES) -> None:
        """
        Call callback for each entry, one entry at a time.

        Callback receives entry name and type and can be a coroutine function.
        Returning False stops the loop.
        """
        for name in self.list(types):
            item = self.entries.get(name)
            if item is None:
                # Removed by previous callback
                continue
            result = callback(name, item.type)
            if inspect.isawaitable(result):
                result = await result
            if result is False:
                return

    def exists(self, name: str) -> bool:
        return name in self.entries

    def _filter(self, callback: FilterCallback) -> List[str]:
        """
        Filter entries.

        Aliases and variations are passed to callback with resolved icon,
        entries that cannot be resolved are skipped.
        """
        names = []
        for name, item in self.entries.items():
            if isinstance(item, IconEntry):
                if callback(name, item, None):
                    names.append(name)
            elif isinstance(item, (AliasEntry, VariationEntry)):
                icon = self.resolve(name)
                if icon is not None and callback(name, item, icon):
                    names.append(name)
            else:
                unknown_entry(item)
        return names

    @staticmethod
    def _is_visible(item: IconSetEntry, icon: Optional[Dict[str, Any]]) -> bool:
        """Check if entry counts as a separate icon: not an alias, not hidden"""
        if isinstance(item, AliasEntry):
            return False
        if item.props.get("hidden") or (icon is not None and icon.get("hidden")):
            return False
        return True

    def count(self) -> int:
        """Count visible icons. Aliases and hidden icons are not counted"""
        return len(self._filter(lambda _name, item, icon: self._is_visible(item, icon)))

    # ------------------------------------------------------------------
    # Resolving
    # ------------------------------------------------------------------

    def resolve(self, name: str, full: bool = False) -> Optional[Dict[str, Any]]:
        """
        Resolve icon, alias or variation to icon data.

        Args:
            name: Entry name
            full: If True, missing properties are filled with default values

        Returns:
            Icon data (body and properties) or None if entry is missing,
            its parent is missing, or the chain is too deep or loops
        """
        entries = self.entries

        def get_icon(name: str, iteration: int, visited: Set[str]) -> Optional[Dict[str, Any]]:
            if name not in entries or iteration > MAX_ITERATION or name in visited:
                return None
            visited.add(name)

            item = entries[name]
            if isinstance(item, IconEntry):
                return {"body": item.body, **item.props}

            if isinstance(item, AliasEntry):
                return get_icon(item.parent, iteration + 1, visited)

            if isinstance(item, VariationEntry):
                parent = get_icon(item.parent, iteration + 1, visited)
                if parent is None:
                    return None

                for attr, value in item.props.items():
                    if not value:
                        continue
                    if attr not in parent:
                        parent[attr] = value
                    elif attr == "rotate":
                        parent[attr] = (parent[attr] + value) % 4
                    elif attr in ("hFlip", "vFlip"):
                        parent[attr] = not parent[attr]
                    else:
                        parent[attr] = value
                return parent

            unknown_entry(item)

        result = get_icon(name, 0, set())
        if result is not None and full:
            return {**DEFAULT_ICON_PROPS, **result}
        return result

    def to_string(self, name: str,
                  customisations: Optional[Dict[str, Any]] = None) -> Optional[str]:
        """
        Generate SVG markup for icon.

        Args:
            name: Entry name
            customisations: Size and transformations, defaults to size of viewBox
        """
        icon = self.resolve(name, True)
        if icon is None:
            return None
        if customisations is None:
            customisations = {"width": "auto", "height": "auto"}
        return build_svg(icon_to_svg(icon, customisations))

    def to_svg(self, name: str) -> Optional[SVG]:
        """Get SVG instance for icon"""
        markup = self.to_string(name)
        return SVG(markup) if markup is not None else None

    # ------------------------------------------------------------------
    # Export
    # ------------------------------------------------------------------

    def export(self, validate: bool = True) -> Dict[str, Any]:
        """
        Export icon set to document.

        Args:
            validate: If True, aliases that cannot be resolved are skipped

        Returns:
            Minified icon set document
        """
        icons: Dict[str, Any] = {}
        aliases: Dict[str, Any] = {}

        for name in sorted(self.entries):
            item = self.entries[name]
            if isinstance(item, IconEntry):
                icons[name] = item.to_dict()
            elif isinstance(item, (AliasEntry, VariationEntry)):
                if validate and self.resolve(name) is None:
                    logger.warning(f"Skipping alias '{name}' in export: cannot resolve parent '{item.parent}'")
                    continue
                aliases[name] = item.to_dict()
            else:
                unknown_entry(item)

        result: Dict[str, Any] = {"prefix": self.prefix}

        if self.info is not None:
            self.info["total"] = self.count()
            result["info"] = copy.deepcopy(self.info)

        result["icons"] = icons
        if aliases:
            result["aliases"] = aliases

        chars = self.character_map(list(icons) + list(aliases))
        if chars:
            result["chars"] = chars

        categories: Dict[str, List[str]] = {}
        for category in sorted(self.categories, key=lambda item: item.title):
            names = self.list_category(category)
            if names:
                categories[category.title] = sorted(names)
        if categories:
            result["categories"] = categories

        for prop in THEME_KEYS:
            items: Dict[str, str] = getattr(self, prop)
            if not items:
                continue
            tested = self.check_theme(prop == "prefixes")
            themes = {key: title for key, title in items.items() if tested.valid[key]}
            if themes:
                result[prop] = themes

        minify_icon_set(result)
        return result

    # ------------------------------------------------------------------
    # Characters
    # ------------------------------------------------------------------

    def character_map(self, names: Optional[Iterable[str]] = None) -> Dict[str, str]:
        """Get characters map for entries, all entries by default"""
        chars: Dict[str, str] = {}
        if names is None:
            names = list(self.entries)
        for name in names:
            item = self.entries.get(name)
            if item is None:
                continue
            for char in item.chars:
                chars[char] = name
        return chars

    def toggle_character(self, name: str, char: str, add: bool) -> bool:
        """
        Add or remove character for entry.

        Returns:
            True if entry was changed, False if entry is missing or already
            is in requested state
        """
        item = self.entries.get(name)
        if item is None:
            return False
        if (char in item.chars) == add:
            return False
        if add:
            item.chars.add(char)
        else:
            item.chars.discard(char)
        return True

    # ------------------------------------------------------------------
    # Categories
    # ------------------------------------------------------------------

    def find_category(self, title: str, add: bool) -> Optional[Category]:
        """Find category by title, optionally creating it"""
        category = self.categories.find(title)
        if category is not None:
            return category
        if add:
            return self.categories.add(title)
        return None

    def list_category(self, category: Union[Category, str]) -> Optional[List[str]]:
        """
        List icons in category, remove category if it is empty.

        Hidden icons, aliases and variations do not belong to categories.
        Updates category count.

        Returns:
            Icon names or None if category does not exist or is empty
        """
        if isinstance(category, str):
            category = self.find_category(category, False)
        if category is None or category.id not in self.categories:
            return None

        category_id = category.id
        icons = self._filter(
            lambda _name, item, _icon: (
                isinstance(item, IconEntry)
                and not item.props.get("hidden")
                and category_id in item.categories
            )
        )

        category.count = len(icons)
        if not icons:
            logger.warning(f"Removing empty category '{category.title}'")
            self.categories.remove(category_id)
            return None
        return icons

    def toggle_category(self, name: str, title: str, add: bool) -> bool:
        """
        Add icon to category or remove it.

        Category is created when adding icon to a missing category.

        Returns:
            True if icon was changed
        """
        item = self.entries.get(name)
        if not isinstance(item, IconEntry):
            return False

        category = self.find_category(title, add)
        if category is None:
            return False

        if (category.id in item.categories) == add:
            return False

        if add:
            category.count += 1
            item.categories.add(category.id)
        else:
            category.count -= 1
            item.categories.discard(category.id)
        return True

    # ------------------------------------------------------------------
    # Themes
    # ------------------------------------------------------------------

    def check_theme(self, prefix: bool) -> CheckThemeResult:
        """
        Find icons that belong to each theme.

        Args:
            prefix: True to check prefixes, False to check suffixes

        Returns:
            Icon names for each theme key and names of icons without theme
        """
        themes = self.prefixes if prefix else self.suffixes
        keys = sort_theme_keys(themes)

        result = CheckThemeResult(valid={key: [] for key in keys})

        def check(name: str, item: IconSetEntry, icon: Optional[Dict[str, Any]]) -> bool:
            if not self._is_visible(item, icon):
                return False
            key = match_theme(name, keys, prefix)
            if key is None:
                return True
            result.valid[key].append(name)
            return False

        result.invalid = self._filter(check)
        return result

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def _depends_on(self, name: str, ancestor: str) -> bool:
        """Check if parent chain of entry leads to ancestor"""
        current = name
        visited = set()
        while current not in visited:
            visited.add(current)
            item = self.entries.get(current)
            if not isinstance(item, (AliasEntry, VariationEntry)):
                return False
            if item.parent == ancestor:
                return True
            current = item.parent
        return False

    def remove(self, name: str, dependents: Union[bool, str] = True) -> int:
        """
        Remove entry.

        Args:
            name: Entry name
            dependents: What to do with aliases and variations of the entry:
                True removes them recursively, False leaves them broken,
                string is the name of new parent for direct dependents

        Returns:
            Number of removed entries, 0 on failure. When removing dependents
            recursively hits the depth limit or a loop, nothing is removed.
        """
        entries = self.entries
        if name not in entries:
            return 0

        if isinstance(dependents, str):
            new_parent = dependents
            if new_parent == name or new_parent not in entries:
                logger.warning(f"Cannot remove '{name}': invalid new parent '{new_parent}'")
                return 0
            if self._depends_on(new_parent, name):
                logger.warning(f"Cannot remove '{name}': new parent '{new_parent}' depends on it")
                return 0

            reparented = 0
            for item in entries.values():
                if isinstance(item, (AliasEntry, VariationEntry)) and item.parent == name:
                    item.parent = new_parent
                    reparented += 1
            del entries[name]
            logger.info(f"Removed '{name}', moved {reparented} aliases to '{new_parent}'")
            return 1

        if not dependents:
            del entries[name]
            logger.info(f"Removed '{name}'")
            return 1

        names: Set[str] = set()

        def collect(name: str, iteration: int) -> bool:
            if iteration > MAX_ITERATION:
                return False
            names.add(name)
            for key, item in entries.items():
                if isinstance(item, IconEntry):
                    continue
                if not isinstance(item, (AliasEntry, VariationEntry)):
                    unknown_entry(item)
                if item.parent != name:
                    continue
                if key in names:
                    # Loop
                    return False
                if not collect(key, iteration + 1):
                    return False
            return True

        if not collect(name, 0):
            logger.warning(f"Cannot remove '{name}': dependencies are too deep or form a loop")
            return 0

        for key in names:
            del entries[key]
        logger.info(f"Removed '{name}' and {len(names) - 1} dependent aliases")
        return len(names)

    def rename(self, old_name: str, new_name: str) -> bool:
        """
        Rename entry, updating parent of its aliases.

        If entry with new name exists, it is removed with its dependents.
        """
        entries = self.entries
        if old_name not in entries:
            return False
        if old_name == new_name:
            return True

        if new_name in entries:
            if self._depends_on(old_name, new_name):
                # Entry would be removed with its new name
                logger.warning(f"Cannot rename '{old_name}' to '{new_name}': entry depends on '{new_name}'")
                return False
            if not self.remove(new_name):
                return False

        entries[new_name] = entries.pop(old_name)

        for item in entries.values():
            if isinstance(item, IconEntry):
                continue
            if not isinstance(item, (AliasEntry, VariationEntry)):
                unknown_entry(item)
            if item.parent == old_name:
                item.parent = new_name

        logger.info(f"Renamed '{old_name}' to '{new_name}'")
        return True

    def set_item(self, name: str, item: IconSetEntry) -> bool:
        """
        Add or replace entry.

        Aliases and variations are rejected if parent does not exist.
        """
        if isinstance(item, (AliasEntry, VariationEntry)):
            if item.parent not in self.entries:
                logger.warning(f"Cannot add '{name}': parent '{item.parent}' does not exist")
                return False
        elif not isinstance(item, IconEntry):
            unknown_entry(item)
        self.entries[name] = item
        return True

    def set_icon(self, name: str, icon: Dict[str, Any]) -> bool:
        """Add or replace icon. Icon is a dictionary with body and properties"""
        return self.set_item(name, IconEntry(
            body=icon["body"],
            props=filter_props(icon, DEFAULT_COMMON_PROPS, True),
        ))

    def set_alias(self, name: str, parent: str) -> bool:
        """Add or replace alias without properties"""
        return self.set_item(name, AliasEntry(parent=parent))

    def set_variation(self, name: str, parent: str, props: Dict[str, Any]) -> bool:
        """Add or replace alias with properties"""
        return self.set_item(name, VariationEntry(
            parent=parent,
            props=filter_props(props, DEFAULT_COMMON_PROPS, False),
        ))

    def from_svg(self, name: str, svg: SVG) -> bool:
        """
        Add icon from SVG, replacing existing entry.

        Characters of existing icon or variation are kept, categories are
        kept only when replacing an icon.
        """
        props = filter_props(svg.view_box, DEFAULT_COMMON_PROPS, True)
        body = svg.get_body()

        item = self.entries.get(name)
        if isinstance(item, (IconEntry, VariationEntry)):
            return self.set_item(name, IconEntry(
                body=body,
                props=props,
                chars=item.chars,
                categories=item.categories if isinstance(item, IconEntry) else set(),
            ))

        return self.set_icon(name, {"body": body, **props})


def blank_icon_set(prefix: str) -> IconSet:
    """Create empty icon set"""
    return IconSet({"prefix": prefix, "icons": {}})
