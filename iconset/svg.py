"""
SVG Parsing and Rendering

Minimal SVG support needed by icon sets:

- SVG: parses SVG markup, exposes viewBox and body (content inside <svg>)
- icon_to_svg: converts resolved icon data to SVG attributes and body,
  applying rotation, flip and size customisations
"""

import logging
import math
import re
import xml.etree.ElementTree as ET
from typing import Any, Dict, Optional, Union

from .entry import IconSetError
from .props import DEFAULT_ICON_DIMENSIONS, DEFAULT_ICON_PROPS

logger = logging.getLogger(__name__)

SVG_NAMESPACE = "http://www.w3.org/2000/svg"
XLINK_NAMESPACE = "http://www.w3.org/1999/xlink"

Size = Union[int, float, str, None]

# Default customisations for icon_to_svg()
DEFAULT_CUSTOMISATIONS: Dict[str, Any] = {
    "width": None,
    "height": None,
    "rotate": 0,
    "hFlip": False,
    "vFlip": False,
}

_BODY_PATTERN = re.compile(
    r"^\s*(?:<\?xml[^>]*\?>\s*)?(?:<!--.*?-->\s*)*<svg\b[^>]*?(?:/>|>(.*)</svg>)\s*$",
    re.DOTALL | re.IGNORECASE,
)
_NUMBER_PATTERN = re.compile(r"(-?[0-9.]*[0-9]+[0-9.]*)")


class SVGError(IconSetError):
    """Raised when SVG cannot be parsed"""
    pass


def format_number(value: Union[int, float]) -> str:
    """Convert number to string without trailing '.0'"""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _parse_number(value: Optional[str]) -> Optional[Union[int, float]]:
    if value is None:
        return None
    value = value.strip()
    if value.endswith("px"):
        value = value[:-2]
    try:
        number = float(value)
    except ValueError:
        return None
    return int(number) if number.is_integer() else number


class SVG:
    """
    Parsed SVG document.

    Example:
        >>> svg = SVG('<svg viewBox="0 0 24 24"><path d="M0 0h24v24z"/></svg>')
        >>> svg.view_box["width"]
        24
        >>> svg.get_body()
        '<path d="M0 0h24v24z"/>'
    """

    def __init__(self, content: str):
        if not isinstance(content, str):
            raise SVGError("SVG content must be a string")
        self.content = content.strip()

        try:
            self._root = ET.fromstring(self.content)
        except ET.ParseError as e:
            logger.error(f"Failed to parse SVG: {e}")
            raise SVGError(f"Invalid SVG: {e}") from e

        tag = self._root.tag.rsplit("}", 1)[-1]
        if tag != "svg":
            raise SVGError(f"Root element must be <svg>, got <{tag}>")

        self.view_box = self._parse_view_box()

    def _parse_view_box(self) -> Dict[str, Union[int, float]]:
        view_box = self._root.get("viewBox")
        if view_box is not None:
            parts = [_parse_number(part) for part in re.split(r"[\s,]+", view_box.strip())]
            if len(parts) == 4 and None not in parts:
                left, top, width, height = parts
                return {"left": left, "top": top, "width": width, "height": height}
            raise SVGError(f"Invalid viewBox: '{view_box}'")

        # No viewBox: use width and height
        width = _parse_number(self._root.get("width"))
        height = _parse_number(self._root.get("height"))
        if width is None or height is None:
            raise SVGError("SVG is missing viewBox and dimensions")
        return {"left": 0, "top": 0, "width": width, "height": height}

    def get_body(self) -> str:
        """Get content of <svg> element, without the element itself"""
        match = _BODY_PATTERN.match(self.content)
        if not match:
            raise SVGError("Cannot extract SVG body")
        return (match.group(1) or "").strip()

    def __str__(self) -> str:
        return self.content


def calculate_size(size: Size, ratio: float, precision: int = 100) -> Size:
    """
    Scale size by ratio. Strings with units are scaled by their numeric parts.

    Example:
        >>> calculate_size("1em", 1.5)
        '1.5em'
    """
    if ratio == 1 or size is None:
        return size

    if isinstance(size, (int, float)):
        return math.ceil(size * ratio * precision) / precision

    parts = _NUMBER_PATTERN.split(size)
    for index in range(1, len(parts), 2):
        try:
            number = float(parts[index])
        except ValueError:
            return size
        parts[index] = format_number(math.ceil(number * ratio * precision) / precision)
    return "".join(parts)


def _custom_size(value: Size, box_size: Union[int, float]) -> Size:
    return box_size if value == "auto" else value


def icon_to_svg(icon: Dict[str, Any],
                customisations: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Generate SVG attributes and body for resolved icon.

    Args:
        icon: Resolved icon, as returned by IconSet.resolve()
        customisations: Optional width, height, rotate, hFlip, vFlip

    Returns:
        Dictionary with 'attributes' and 'body' keys
    """
    full_icon = {**DEFAULT_ICON_PROPS, **icon}
    custom = {**DEFAULT_CUSTOMISATIONS, **(customisations or {})}

    box = {key: full_icon[key] for key in DEFAULT_ICON_DIMENSIONS}
    body = full_icon["body"]
    transformations = []

    h_flip = bool(full_icon["hFlip"]) != bool(custom["hFlip"])
    v_flip = bool(full_icon["vFlip"]) != bool(custom["vFlip"])
    rotation = full_icon["rotate"] + custom["rotate"]

    if h_flip:
        if v_flip:
            rotation += 2
        else:
            transformations.append(
                f"translate({format_number(box['width'] + box['left'])} {format_number(0 - box['top'])})"
            )
            transformations.append("scale(-1 1)")
            box["top"] = box["left"] = 0
    elif v_flip:
        transformations.append(
            f"translate({format_number(0 - box['left'])} {format_number(box['height'] + box['top'])})"
        )
        transformations.append("scale(1 -1)")
        box["top"] = box["left"] = 0

    rotation %= 4
    if rotation == 1:
        center = format_number(box["height"] / 2 + box["top"])
        transformations.insert(0, f"rotate(90 {center} {center})")
    elif rotation == 2:
        transformations.insert(
            0,
            f"rotate(180 {format_number(box['width'] / 2 + box['left'])} "
            f"{format_number(box['height'] / 2 + box['top'])})",
        )
    elif rotation == 3:
        center = format_number(box["width"] / 2 + box["left"])
        transformations.insert(0, f"rotate(-90 {center} {center})")

    if rotation % 2 == 1:
        # Swap width and height
        box["left"], box["top"] = box["top"], box["left"]
        box["width"], box["height"] = box["height"], box["width"]

    if transformations:
        body = f'<g transform="{" ".join(transformations)}">{body}</g>'

    box_width = box["width"]
    box_height = box["height"]
    custom_width = custom["width"]
    custom_height = custom["height"]

    if custom_width is None:
        height = "1em" if custom_height is None else _custom_size(custom_height, box_height)
        width = calculate_size(height, box_width / box_height)
    else:
        width = _custom_size(custom_width, box_width)
        if custom_height is None:
            height = calculate_size(width, box_height / box_width)
        else:
            height = _custom_size(custom_height, box_height)

    attributes = {}
    for attr, value in (("width", width), ("height", height)):
        if value is None or value == "unset":
            continue
        attributes[attr] = format_number(value) if isinstance(value, (int, float)) else value
    attributes["viewBox"] = " ".join(
        format_number(box[key]) for key in ("left", "top", "width", "height")
    )

    return {"attributes": attributes, "body": body}


def build_svg(result: Dict[str, Any]) -> str:
    """Convert result of icon_to_svg() to SVG markup"""
    attributes = "".join(
        f' {key}="{value}"' for key, value in result["attributes"].items()
    )
    return (
        f'<svg xmlns="{SVG_NAMESPACE}" xmlns:xlink="{XLINK_NAMESPACE}"{attributes}>'
        f"{result['body']}</svg>"
    )
