# portfolio/web/formatting.py
"""
Display helpers registered as Jinja2 filters.

All of them are pure functions of their arguments.
"""

from typing import List

COLOR_CLASSES = {
    "cyan": "cyan-400",
    "pink": "pink-400",
    "yellow": "yellow-400",
    "lime": "lime-400",
    "orange": "orange-400",
    "purple": "purple-400",
    "red": "red-400",
    "blue": "blue-400",
    "green": "green-400",
    "indigo": "indigo-400",
    "gray": "gray-400",
    "black": "gray-800",
}

LIGHT_COLOR_CLASSES = {
    "cyan": "cyan-100",
    "pink": "pink-100",
    "yellow": "yellow-100",
    "lime": "lime-100",
    "orange": "orange-100",
    "purple": "purple-100",
    "red": "red-100",
    "blue": "blue-100",
    "green": "green-100",
    "indigo": "indigo-100",
    "gray": "gray-100",
    "black": "gray-200",
}


def color_class(color: str) -> str:
    """Tailwind shade for a stored color name, e.g. ``cyan`` -> ``cyan-400``."""
    return COLOR_CLASSES.get(color, "gray-400")


def color_class_light(color: str) -> str:
    return LIGHT_COLOR_CLASSES.get(color, "gray-100")


def format_year(year: int) -> str:
    # 0 is the stored "unknown" year
    return str(year) if year else ""


def split(value: str, sep: str = ",") -> List[str]:
    """Split a delimited field such as ``tech_stack``, dropping blanks."""
    if not value:
        return []
    return [part.strip() for part in value.split(sep) if part.strip()]


FILTERS = {
    "color_class": color_class,
    "color_class_light": color_class_light,
    "format_year": format_year,
    "split": split,
}
