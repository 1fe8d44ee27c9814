import logging
from collections.abc import Iterable
from pathlib import Path
from typing import NamedTuple

from PIL import ImageFont


logger = logging.getLogger(__name__)

GraphFont = ImageFont.FreeTypeFont | ImageFont.ImageFont


class FontLoadResult(NamedTuple):
    font: GraphFont
    path: str | None

    @property
    def available(self) -> bool:
        """True when a configured font file was loaded."""
        return self.path is not None


def fallback_font(size: int) -> GraphFont:
    """Pillow's bundled font; scalable when Pillow was built with FreeType."""

    try:
        return ImageFont.load_default(size=size)
    except (ImportError, OSError):
        # Sized default needs FreeType; fall back to the bitmap font.
        return ImageFont.load_default()


def load_graph_font(candidates: Iterable[str], size: int = 12) -> FontLoadResult:
    """Load the first readable font among `candidates`.

    Missing fonts are never fatal: when nothing loads the Pillow default font
    is returned and the result reports the font as unavailable.
    """

    tried: list[str] = []
    for candidate in candidates:
        tried.append(candidate)
        path = Path(candidate)
        if not path.is_file():
            continue
        try:
            font = ImageFont.truetype(str(path), size)
        except OSError:
            logger.exception("Failed to load font from %s", path)
            continue
        logger.info("Font loaded from %s", path)
        return FontLoadResult(font=font, path=str(path))

    logger.warning(
        "No font found in any of: %s; using default font", ", ".join(tried) or "-"
    )
    return FontLoadResult(font=fallback_font(size), path=None)
