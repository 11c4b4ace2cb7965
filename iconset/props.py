"""
Icon Property Defaults and Filtering

Icons, aliases and variations share a small set of optional properties:
dimensions of the viewBox, transformations and a hidden flag. Values equal to
their defaults are never stored, so that exported documents stay compact.
"""

from typing import Any, Dict, Mapping

# Icon dimensions
DEFAULT_ICON_DIMENSIONS: Dict[str, Any] = {
    "left": 0,
    "top": 0,
    "width": 16,
    "height": 16,
}

# Transformations
DEFAULT_ICON_TRANSFORMATIONS: Dict[str, Any] = {
    "rotate": 0,
    "vFlip": False,
    "hFlip": False,
}

# All icon properties used when resolving icon in full mode
DEFAULT_ICON_PROPS: Dict[str, Any] = {
    **DEFAULT_ICON_DIMENSIONS,
    **DEFAULT_ICON_TRANSFORMATIONS,
}

# Properties that are not used for rendering
DEFAULT_EXTRA_PROPS: Dict[str, Any] = {
    "hidden": False,
}

# Everything an icon, alias or variation can carry besides body/parent
DEFAULT_COMMON_PROPS: Dict[str, Any] = {
    **DEFAULT_ICON_PROPS,
    **DEFAULT_EXTRA_PROPS,
}


def _same_kind(value: Any, reference: Any) -> bool:
    """Check if value can replace reference value. Booleans are not numbers"""
    if isinstance(reference, bool):
        return isinstance(value, bool)
    if isinstance(reference, (int, float)):
        return isinstance(value, (int, float)) and not isinstance(value, bool)
    return isinstance(value, type(reference))


def filter_props(data: Mapping[str, Any], reference: Mapping[str, Any],
                 compare_values: bool) -> Dict[str, Any]:
    """
    Extract known properties from data.

    Args:
        data: Source dictionary, usually an icon or alias from a document
        reference: Default values; only keys present here are copied
        compare_values: If True, values equal to defaults are skipped

    Returns:
        New dictionary with properties that passed the filter

    Example:
        >>> filter_props({"width": 24, "height": 16, "body": ""}, DEFAULT_ICON_DIMENSIONS, True)
        {'width': 24}
    """
    result = {}
    for key, default_value in reference.items():
        if key not in data:
            continue
        value = data[key]
        if not _same_kind(value, default_value):
            continue
        if compare_values and value == default_value:
            continue
        result[key] = value
    return result
