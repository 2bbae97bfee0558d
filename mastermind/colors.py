"""
Text -> Color lookup.
Stateless functions; the scorer takes parse_color as an injectable collaborator.
"""

from typing import Iterable, List, Union

from .errors import InvalidColor
from .types import Code, Color

COLOR_NAMES = tuple(color.value for color in Color)

_BY_NAME = {color.value: color for color in Color}


def parse_color(text: str) -> Color:
    """
    Case-insensitive: "RED", "red" and "Red" all give Color.RED.
    Raises InvalidColor for anything outside the six known names.
    """
    if isinstance(text, Color):
        return text
    if not isinstance(text, str):
        raise InvalidColor(text)

    color = _BY_NAME.get(text.lower())
    if color is None:
        raise InvalidColor(text)
    return color


def parse_code(items: Iterable[Union[str, Color]]) -> Code:
    """Resolve every item; the first bad name aborts the whole conversion."""
    resolved: List[Color] = []
    for item in items:
        resolved.append(parse_color(item))
    return resolved
