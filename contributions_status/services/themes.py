"""Static palettes for the contribution graph.

The set of themes is closed. Any selector outside it resolves to
`Theme.DEFAULT`; an unknown theme is never an error.
"""

from enum import StrEnum
from types import MappingProxyType

from pydantic import BaseModel
from pydantic import ConfigDict


THEME_SET_VERSION = 2


class Theme(StrEnum):
    DEFAULT = "default"
    GITLAB = "gitlab"
    BLUE = "blue"
    PURPLE = "purple"
    ORANGE = "orange"
    RED = "red"
    PINK = "pink"


class ThemeColors(BaseModel):
    """Five intensity colors, darkest (no activity) first."""

    model_config = ConfigDict(frozen=True)

    level0: str
    level1: str
    level2: str
    level3: str
    level4: str

    @property
    def levels(self) -> tuple[str, str, str, str, str]:
        return (self.level0, self.level1, self.level2, self.level3, self.level4)


THEMES = MappingProxyType(
    {
        Theme.DEFAULT: ThemeColors(
            level0="#151b23",
            level1="#033a16",
            level2="#196c2e",
            level3="#2ea043",
            level4="#56d364",
        ),
        Theme.GITLAB: ThemeColors(
            level0="#28272d",
            level1="#303470",
            level2="#4e65cd",
            level3="#7992f5",
            level4="#d2dcff",
        ),
        Theme.BLUE: ThemeColors(
            level0="#151b23",
            level1="#0a3069",
            level2="#0969da",
            level3="#218bff",
            level4="#54aeff",
        ),
        Theme.PURPLE: ThemeColors(
            level0="#151b23",
            level1="#3c1e70",
            level2="#6639ba",
            level3="#8250df",
            level4="#c297ff",
        ),
        Theme.ORANGE: ThemeColors(
            level0="#151b23",
            level1="#8b3515",
            level2="#cc5522",
            level3="#ff6b35",
            level4="#ff6347",
        ),
        Theme.RED: ThemeColors(
            level0="#151b23",
            level1="#5a0f0f",
            level2="#8b1a1a",
            level3="#cc2d2d",
            level4="#ff4444",
        ),
        Theme.PINK: ThemeColors(
            level0="#151b23",
            level1="#5a1f3d",
            level2="#8b2d5a",
            level3="#cc4d7a",
            level4="#ff6bb5",
        ),
    }
)


def resolve_theme(selector: str | None) -> Theme:
    """Normalize a user supplied selector, falling back to the default theme."""

    if not isinstance(selector, str):
        return Theme.DEFAULT
    try:
        return Theme(selector.strip().lower())
    except ValueError:
        return Theme.DEFAULT


def lookup_theme(selector: str | None) -> ThemeColors:
    return THEMES[resolve_theme(selector)]
