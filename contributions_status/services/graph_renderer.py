"""Rasterize week columns into the contribution graph PNG.

The canvas has a fixed size: 53 week columns are always provisioned, so a
short timeline simply leaves trailing columns blank.
"""

from collections.abc import Iterator
from datetime import date
from io import BytesIO

from PIL import Image
from PIL import ImageDraw
from PIL import ImageFont

from contributions_status.models import ContributionDay
from contributions_status.models import WeekColumn
from contributions_status.services.fonts import GraphFont
from contributions_status.services.heatmap_service import DAYS_PER_WEEK
from contributions_status.services.heatmap_service import classify
from contributions_status.services.themes import ThemeColors


SQUARE_SIZE = 11
SQUARE_GAP = 2
GRID_WEEKS = 53
PADDING = 20
LABEL_MARGIN = 50
CELL_RADIUS = 2
LEGEND_RADIUS = 3

CELL_STEP = SQUARE_SIZE + SQUARE_GAP
CANVAS_WIDTH = GRID_WEEKS * CELL_STEP + PADDING * 2 + LABEL_MARGIN
CANVAS_HEIGHT = DAYS_PER_WEEK * CELL_STEP + PADDING * 2 + LABEL_MARGIN

BACKGROUND_COLOR = "#0d1117"
LABEL_COLOR = "#8b949e"

WEEKDAY_LABELS = {1: "M", 3: "W", 5: "F"}
MONTH_LABELS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

WEEKDAY_LABEL_X = PADDING + 35
MONTH_LABEL_Y = PADDING - 5
LEGEND_Y = CANVAS_HEIGHT - 20
LEGEND_X = CANVAS_WIDTH - 150
LEGEND_SWATCH_X = LEGEND_X + 30
CAPTION_Y = LEGEND_Y + 10


def cell_origin(week: int, day: int) -> tuple[int, int]:
    """Top-left pixel of the cell for (week column, weekday row)."""

    return (PADDING + LABEL_MARGIN + week * CELL_STEP, PADDING + day * CELL_STEP)


def is_visible(day: ContributionDay, today: date) -> bool:
    """Only days strictly before today are drawn."""

    return day.date < today


def iter_visible_cells(
    weeks: list[WeekColumn], today: date
) -> Iterator[tuple[int, int, ContributionDay]]:
    """Yield (week, weekday, day) for every cell that gets drawn."""

    for week_index, column in enumerate(weeks[:GRID_WEEKS]):
        for weekday, day in enumerate(column):
            if day is None or not is_visible(day, today):
                continue
            yield week_index, weekday, day


def visible_total(weeks: list[WeekColumn], today: date) -> int:
    """Sum of counts over the drawn cells, shown in the caption."""

    return sum(day.count for _, _, day in iter_visible_cells(weeks, today))


def caption_text(total: int) -> str:
    return f"{total:,} contributions in the last year"


def month_label_positions(weeks: list[WeekColumn]) -> list[tuple[int, str]]:
    """Return (week index, month name) for columns that start a new month.

    The first column is always labeled.
    """

    labels: list[tuple[int, str]] = []
    last_month: int | None = None
    for week_index, column in enumerate(weeks[:GRID_WEEKS]):
        first_day = next((day for day in column if day is not None), None)
        if first_day is None:
            continue
        month = first_day.date.month
        if week_index == 0 or month != last_month:
            labels.append((week_index, MONTH_LABELS[month - 1]))
            last_month = month
    return labels


def _draw_text(
    draw: ImageDraw.ImageDraw, x: float, baseline: float, text: str, font: GraphFont
) -> None:
    # Coordinates are baselines; bitmap fonts only support top-left anchoring.
    if isinstance(font, ImageFont.FreeTypeFont):
        draw.text((x, baseline), text, fill=LABEL_COLOR, font=font, anchor="ls")
    else:
        draw.text((x, baseline - SQUARE_SIZE), text, fill=LABEL_COLOR, font=font)


def render_graph(
    weeks: list[WeekColumn],
    colors: ThemeColors,
    today: date,
    font: GraphFont,
) -> bytes:
    """Draw the graph and return it encoded as PNG."""

    image = Image.new("RGB", (CANVAS_WIDTH, CANVAS_HEIGHT), BACKGROUND_COLOR)
    draw = ImageDraw.Draw(image)

    for weekday, label in WEEKDAY_LABELS.items():
        baseline = PADDING + weekday * CELL_STEP + SQUARE_SIZE / 2 + 4
        _draw_text(draw, WEEKDAY_LABEL_X, baseline, label, font)

    for week_index, weekday, day in iter_visible_cells(weeks, today):
        x, y = cell_origin(week_index, weekday)
        draw.rounded_rectangle(
            (x, y, x + SQUARE_SIZE - 1, y + SQUARE_SIZE - 1),
            radius=CELL_RADIUS,
            fill=classify(day.count, colors),
        )

    for week_index, month_name in month_label_positions(weeks):
        x, _ = cell_origin(week_index, 0)
        _draw_text(draw, x, MONTH_LABEL_Y, month_name, font)

    _draw_text(draw, LEGEND_X, LEGEND_Y, "Less", font)
    _draw_text(draw, LEGEND_X + 100, LEGEND_Y, "More", font)
    for level, color in enumerate(colors.levels):
        x = LEGEND_SWATCH_X + level * CELL_STEP
        y = LEGEND_Y - 10
        draw.rounded_rectangle(
            (x, y, x + SQUARE_SIZE - 1, y + SQUARE_SIZE - 1),
            radius=LEGEND_RADIUS,
            fill=color,
        )

    caption = caption_text(visible_total(weeks, today))
    _draw_text(draw, PADDING, CAPTION_Y, caption, font)

    out = BytesIO()
    image.save(out, format="PNG")
    return out.getvalue()
