import logging
from collections.abc import Iterable
from collections.abc import Mapping
from datetime import datetime

from contributions_status.core.calendar import today_in_calendar
from contributions_status.services.fonts import GraphFont
from contributions_status.services.fonts import fallback_font
from contributions_status.services.graph_renderer import render_graph
from contributions_status.services.heatmap_service import build_week_columns
from contributions_status.services.heatmap_service import merge_contributions
from contributions_status.services.themes import THEMES
from contributions_status.services.themes import resolve_theme


logger = logging.getLogger(__name__)

DEFAULT_FONT_SIZE = 12


def generate_graph(
    github_records: Iterable[Mapping[str, object]],
    gitlab_records: Iterable[Mapping[str, object]],
    theme: str | None = "default",
    font: GraphFont | None = None,
    now: datetime | None = None,
) -> bytes:
    """Render the combined contribution graph for both providers as PNG bytes.

    `now` pins the moment of rendering; it defaults to the current time and
    is interpreted in the UTC+9 calendar reference.
    """

    selected_theme = resolve_theme(theme)
    if font is None:
        font = fallback_font(DEFAULT_FONT_SIZE)

    today = today_in_calendar(now)
    days = merge_contributions(github_records, gitlab_records, today=today)
    weeks = build_week_columns(days)
    logger.debug(
        "Rendering %d days in %d week columns with theme %s",
        len(days),
        len(weeks),
        selected_theme,
    )
    return render_graph(weeks, THEMES[selected_theme], today, font)
