"""Month grid and year/month index layout for the full-screen console."""

from typing import TYPE_CHECKING, List, NamedTuple

from ..utils.dates import DAYS_IN_WEEK
from ..utils.logging import get_logger
from .renderer_protocol import ScreenProtocol
from .styles import Style

if TYPE_CHECKING:
    from ..ui.navigation import CalendarState

logger = get_logger(__name__)

WEEKDAYS = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")

MONTHS = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

# Columns reserved on the left for the year label and month index
INDEX_WIDTH = 12
INDEX_COLUMN = 1


class Cell(NamedTuple):
    """One piece of styled text at a screen position."""

    x: int
    y: int
    text: str
    style: Style


def column_x(width: int, column: int, index_width: int = INDEX_WIDTH) -> int:
    """Return the screen column where weekday column ``column`` (0 = Sunday) starts.

    The area right of the index strip is split into seven equal slots and
    each cell starts half a slot in.

    Args:
        width: Terminal width
        column: Weekday column, 0-6
        index_width: Columns reserved for the month index

    Returns:
        Zero-based screen column
    """
    usable = max(0, width - index_width)
    return index_width + usable // 14 + usable // 7 * column


def row_y(height: int, row: int) -> int:
    """Return the screen row of grid row ``row`` (0 = weekday header).

    Args:
        height: Terminal height
        row: Grid row

    Returns:
        Zero-based screen row
    """
    return height // 14 + height // 7 * row


def index_top(height: int) -> int:
    """Return the screen row of the year label; the 12 month names follow one row below it."""
    return max(0, (height - 14) // 2)


class ConsoleRenderer:
    """Lays out the calendar for the current terminal size and draws it on a screen."""

    def __init__(self, index_width: int = INDEX_WIDTH) -> None:
        """Initialize console renderer.

        Args:
            index_width: Columns reserved on the left for the year and month index
        """
        self.index_width = index_width

        logger.debug("Console renderer initialized")

    def layout(self, state: "CalendarState", width: int, height: int) -> List[Cell]:
        """Compute every cell of a frame. Pure: depends only on the arguments.

        Args:
            state: Calendar state to show
            width: Terminal width
            height: Terminal height

        Returns:
            Cells in drawing order
        """
        cells = self._weekday_header(width, height)
        cells.extend(self._day_grid(state, width, height))
        cells.extend(self._month_index(state, height))
        return cells

    def render(self, state: "CalendarState", screen: ScreenProtocol) -> None:
        """Draw one full frame and flush it in a single write.

        Args:
            state: Calendar state to show
            screen: Drawing surface
        """
        width, height = screen.size()
        cells = self.layout(state, width, height)

        screen.clear()
        for cell in cells:
            screen.print(cell.x, cell.y, cell.text, cell.style)
        screen.flush()

        logger.verbose(  # type: ignore[attr-defined]
            f"Rendered {state} at {width}x{height} ({len(cells)} cells)"
        )

    def _weekday_header(self, width: int, height: int) -> List[Cell]:
        y = row_y(height, 0)
        return [
            Cell(
                column_x(width, column, self.index_width),
                y,
                name,
                Style.SUNDAY_HEADER if column == 0 else Style.WEEKDAY_HEADER,
            )
            for column, name in enumerate(WEEKDAYS)
        ]

    def _day_grid(self, state: "CalendarState", width: int, height: int) -> List[Cell]:
        cells = []
        row = 1
        column = state.first_weekday
        for day in range(1, state.days_in_month + 1):
            if state.is_highlighted(day):
                style = Style.HIGHLIGHT
            elif column == 0:
                style = Style.SUNDAY
            else:
                style = Style.PLAIN
            cells.append(
                Cell(column_x(width, column, self.index_width), row_y(height, row), str(day), style)
            )

            column += 1
            if column == DAYS_IN_WEEK:
                column = 0
                row += 1
        return cells

    def _month_index(self, state: "CalendarState", height: int) -> List[Cell]:
        top = index_top(height)
        cells = [Cell(INDEX_COLUMN, top, str(state.year), Style.YEAR)]
        for index, name in enumerate(MONTHS):
            style = Style.MONTH_CURRENT if index == state.month - 1 else Style.MONTH_OTHER
            cells.append(Cell(INDEX_COLUMN, top + 2 + index, name, style))
        return cells


__all__ = [
    "INDEX_WIDTH",
    "MONTHS",
    "WEEKDAYS",
    "Cell",
    "ConsoleRenderer",
    "column_x",
    "index_top",
    "row_y",
]
