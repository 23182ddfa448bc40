"""Style tags attached to every piece of text the renderer draws."""

from enum import Enum
from typing import NamedTuple, Optional


class StyleSpec(NamedTuple):
    """How a style tag looks: a foreground color name plus weight attributes."""

    color: Optional[str]
    bold: bool = False
    dim: bool = False


class Style(Enum):
    """Style tags used by the console renderer."""

    PLAIN = "plain"
    SUNDAY_HEADER = "sunday_header"
    WEEKDAY_HEADER = "weekday_header"
    SUNDAY = "sunday"
    HIGHLIGHT = "highlight"
    YEAR = "year"
    MONTH_CURRENT = "month_current"
    MONTH_OTHER = "month_other"


STYLE_SPECS = {
    Style.PLAIN: StyleSpec(None),
    Style.SUNDAY_HEADER: StyleSpec("red", bold=True),
    Style.WEEKDAY_HEADER: StyleSpec("yellow", bold=True),
    Style.SUNDAY: StyleSpec("red"),
    Style.HIGHLIGHT: StyleSpec("blue", bold=True),
    Style.YEAR: StyleSpec("yellow", bold=True),
    Style.MONTH_CURRENT: StyleSpec("green", bold=True),
    Style.MONTH_OTHER: StyleSpec("grey", dim=True),
}


def spec_for(style: Style, use_colors: bool = True) -> StyleSpec:
    """Return the look of ``style``; without colors only the weight survives.

    Args:
        style: Style tag
        use_colors: Whether the terminal output may use colors

    Returns:
        StyleSpec for the tag
    """
    spec = STYLE_SPECS[style]
    if use_colors:
        return spec
    return spec._replace(color=None)


__all__ = ["STYLE_SPECS", "Style", "StyleSpec", "spec_for"]
