"""Plain-text rendering of presenter states and sections."""

from __future__ import annotations

from presenter.state import Errored, Idle, Loaded, Loading, ViewState
from presenter.views import NO_DATA_MESSAGE, SectionView, build_sections

IDLE_MESSAGE = "Press fetch to load the dashboard."
LOADING_MESSAGE = "Loading dashboard data..."

GRID_COLUMNS = 2
_CARD_GAP = "   "


def render_table(section: SectionView) -> list[str]:
    widths = [len(column) for column in section.columns]
    for row in section.rows:
        widths = [max(width, len(cell)) for width, cell in zip(widths, row)]

    def _line(cells: tuple[str, ...]) -> str:
        return " | ".join(cell.ljust(width) for cell, width in zip(cells, widths)).rstrip()

    lines = [_line(section.columns), "-+-".join("-" * width for width in widths)]
    lines.extend(_line(row) for row in section.rows)
    return lines


def render_card(columns: tuple[str, ...], row: tuple[str, ...]) -> list[str]:
    label_width = max(len(column) for column in columns)
    return [f"{column.ljust(label_width)}  {cell}" for column, cell in zip(columns, row)]


def render_cards(section: SectionView, *, per_line: int = 1) -> list[str]:
    cards = [render_card(section.columns, row) for row in section.rows]
    card_width = max(len(line) for card in cards for line in card)

    lines: list[str] = []
    for start in range(0, len(cards), per_line):
        chunk = cards[start : start + per_line]
        for line_index in range(len(section.columns)):
            lines.append(
                _CARD_GAP.join(card[line_index].ljust(card_width) for card in chunk).rstrip()
            )
        lines.append("")
    return lines[:-1]


def render_section(section: SectionView) -> list[str]:
    """Render one section under its title; empty sections get a placeholder only."""
    lines = [f"== {section.title} ({len(section.rows)}) =="]
    if section.is_empty:
        lines.append(NO_DATA_MESSAGE)
    elif section.layout == "table":
        lines.extend(render_table(section))
    elif section.layout == "grid":
        lines.extend(render_cards(section, per_line=GRID_COLUMNS))
    else:
        lines.extend(render_cards(section))
    return lines


def render_dashboard(state: ViewState) -> list[str]:
    """Render the whole view for the current presenter state."""
    if isinstance(state, Idle):
        return [IDLE_MESSAGE]
    if isinstance(state, Loading):
        return [LOADING_MESSAGE]
    if isinstance(state, Errored):
        return [f"Error: {state.message}"]

    lines: list[str] = []
    for section in build_sections(state.document):
        if lines:
            lines.append("")
        lines.extend(render_section(section))
    return lines
