"""
Document Post-Processing

Helpers applied to exported icon set documents:

- minify_icon_set: moves the most common icon dimensions to the root of the
  document and removes redundant values
- convert_info: normalizes the free-form info block
"""

import logging
from collections import Counter
from typing import Any, Dict, Optional

from .props import DEFAULT_ICON_DIMENSIONS

logger = logging.getLogger(__name__)

# Properties that can be moved to root of document
MINIFY_PROPS = ("width", "height", "top", "left")


def minify_icon_set(data: Dict[str, Any]) -> None:
    """
    Minify icon set document in place.

    For each dimension, the value shared by most icons becomes the root level
    default. Icons matching the default lose the property, other icons keep
    or receive an explicit value.
    """
    icons = data.get("icons", {})

    for prop in MINIFY_PROPS:
        default_value = DEFAULT_ICON_DIMENSIONS[prop]
        old_default = data.get(prop, default_value)

        values = {
            name: icon.get(prop, old_default)
            for name, icon in icons.items()
        }
        counters = Counter(values.values())

        new_default = old_default
        if counters:
            common_value, common_count = counters.most_common(1)[0]
            if common_count > 1:
                new_default = common_value

        if new_default == default_value:
            data.pop(prop, None)
        else:
            data[prop] = new_default

        for name, icon in icons.items():
            value = values[name]
            if value == new_default:
                icon.pop(prop, None)
            else:
                icon[prop] = value


def _to_object(value: Any, key: str) -> Optional[Dict[str, Any]]:
    if isinstance(value, str):
        return {key: value}
    if isinstance(value, dict):
        return dict(value)
    return None


def convert_info(info: Any) -> Optional[Dict[str, Any]]:
    """
    Normalize icon set info block.

    Supports legacy format where author and license are strings and name is
    stored as 'title'.

    Returns:
        Normalized info or None if info block does not have a name
    """
    if not isinstance(info, dict):
        return None

    name = info.get("name", info.get("title"))
    if not isinstance(name, str) or not name:
        logger.warning("Icon set info block has no name, ignoring it")
        return None

    result: Dict[str, Any] = {"name": name}

    author = _to_object(info.get("author"), "name")
    if author is not None:
        if "url" not in author and isinstance(info.get("url"), str):
            author["url"] = info["url"]
        result["author"] = author

    license_info = _to_object(info.get("license"), "title")
    if license_info is not None:
        if "spdx" not in license_info and isinstance(info.get("licenseID"), str):
            license_info["spdx"] = info["licenseID"]
        result["license"] = license_info

    total = info.get("total")
    if isinstance(total, int) and not isinstance(total, bool):
        result["total"] = total

    for key in ("version", "category"):
        if isinstance(info.get(key), str):
            result[key] = info[key]

    samples = info.get("samples")
    if isinstance(samples, list):
        result["samples"] = [sample for sample in samples if isinstance(sample, str)]

    height = info.get("height")
    if isinstance(height, (int, list)) and not isinstance(height, bool):
        result["height"] = height

    if isinstance(info.get("displayHeight"), int):
        result["displayHeight"] = info["displayHeight"]

    tags = info.get("tags")
    if isinstance(tags, list):
        result["tags"] = [tag for tag in tags if isinstance(tag, str)]

    if isinstance(info.get("palette"), bool):
        result["palette"] = info["palette"]

    return result
