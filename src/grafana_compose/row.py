"""Rows: self-attaching groups of panels on a dashboard."""

from __future__ import annotations

import copy
import logging
from typing import Callable, Optional

from .alert.builder import AlertBuilder
from .dashboard.models import Board, Panel, Row, Target
from .options import apply_options

LOGGER = logging.getLogger(__name__)

RowOption = Callable[["RowBuilder"], None]


class RowBuilder:
    """Mutable context handed to row options.

    Panels are numbered against the whole board so ids stay unique across rows.
    """

    def __init__(self, board: Board, row: Row) -> None:
        self.board = board
        self.row = row

    def add_panel(self, panel: Panel) -> None:
        panel.id = self.board.next_panel_id()
        self.row.panels.append(panel)


def new_row(board: Board, title: str, *options: RowOption) -> Row:
    """Create a row titled *title*, apply *options* and attach it to *board*."""

    row = Row(title=title)
    board.rows.append(row)
    apply_options(RowBuilder(board, row), options)
    LOGGER.debug("Attached row %r with %d panels", title, len(row.panels))
    return row


def show_title() -> RowOption:
    def _apply(builder: RowBuilder) -> None:
        builder.row.show_title = True

    return _apply


def hide_title() -> RowOption:
    def _apply(builder: RowBuilder) -> None:
        builder.row.show_title = False

    return _apply


def collapse() -> RowOption:
    def _apply(builder: RowBuilder) -> None:
        builder.row.collapse = True

    return _apply


def repeat_for(variable: str) -> RowOption:
    """Repeat the row once per value of the templating *variable*."""

    def _apply(builder: RowBuilder) -> None:
        builder.row.repeat = variable

    return _apply


def with_panel(panel: Panel) -> RowOption:
    """Attach a copy of a ready-made *panel*; its id is reassigned."""

    def _apply(builder: RowBuilder) -> None:
        builder.add_panel(
            Panel(
                title=panel.title,
                type=panel.type,
                span=panel.span,
                content=panel.content,
                targets=copy.deepcopy(panel.targets),
                alert=copy.deepcopy(panel.alert),
            )
        )

    return _apply


def with_text(title: str, content: str) -> RowOption:
    def _apply(builder: RowBuilder) -> None:
        builder.add_panel(Panel(title=title, type="text", content=content))

    return _apply


def with_graph(title: str, *targets: Target, alert: Optional[AlertBuilder] = None) -> RowOption:
    """Add a graph panel plotting *targets*, optionally carrying an alert."""

    def _apply(builder: RowBuilder) -> None:
        builder.add_panel(
            Panel(
                title=title,
                type="graph",
                targets=list(targets),
                alert=alert.build() if alert is not None else None,
            )
        )

    return _apply
