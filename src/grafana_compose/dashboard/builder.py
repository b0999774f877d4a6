"""Dashboard builder and the options it understands."""

from __future__ import annotations

import copy
import json
import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence

from ..config import DashboardDefaults
from ..options import apply_options
from ..row import RowOption, new_row
from .models import Annotation, Board, TimePicker, TimeRange, slugify

LOGGER = logging.getLogger(__name__)

DashboardOption = Callable[["DashboardBuilder"], None]


@dataclass(frozen=True)
class TagAnnotation:
    """Annotation source matching events by tag.

    See https://grafana.com/docs/grafana/latest/reference/annotations/#query-by-tag
    """

    name: str
    datasource: str
    icon_color: str = ""
    tags: Sequence[str] = field(default_factory=tuple)


class DashboardBuilder:
    """Build a :class:`Board` from an ordered list of options.

    Defaults (time picker, time range, shared cross-hair) are applied first so
    any caller option touching the same field wins.
    """

    def __init__(
        self,
        title: str,
        *options: DashboardOption,
        defaults: Optional[DashboardDefaults] = None,
    ) -> None:
        self.board = Board(title=title, id=0, slug=slugify(title), timezone="")
        seeded = dashboard_defaults(defaults or DashboardDefaults())
        LOGGER.debug("Building dashboard %r with %d caller options", title, len(options))
        apply_options(self, [*seeded, *options])

    def build(self) -> Board:
        """Return a snapshot of the board that does not alias the builder."""
        return copy.deepcopy(self.board)

    def to_dict(self) -> dict:
        return self.board.to_dict()

    def to_json(self, indent: Optional[int] = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)


def dashboard_defaults(defaults: DashboardDefaults) -> List[DashboardOption]:
    seeded: List[DashboardOption] = [
        refresh_intervals(defaults.refresh_intervals),
        time_options(defaults.time_options),
        time_range(defaults.time_from, defaults.time_to),
    ]
    if defaults.shared_crosshair:
        seeded.append(with_shared_cross_hair())
    else:
        seeded.append(without_shared_cross_hair())
    return seeded


def with_row(title: str, *options: RowOption) -> DashboardOption:
    """Add a row to the dashboard."""

    def _apply(builder: DashboardBuilder) -> None:
        new_row(builder.board, title, *options)

    return _apply


def with_tags_annotation(annotation: TagAnnotation) -> DashboardOption:
    """Add a new source of annotations to the dashboard."""

    def _apply(builder: DashboardBuilder) -> None:
        builder.board.annotations.append(
            Annotation(
                name=annotation.name,
                datasource=annotation.datasource,
                icon_color=annotation.icon_color,
                enable=True,
                tags=list(annotation.tags),
                type="tags",
            )
        )

    return _apply


def editable() -> DashboardOption:
    def _apply(builder: DashboardBuilder) -> None:
        builder.board.editable = True

    return _apply


def read_only() -> DashboardOption:
    def _apply(builder: DashboardBuilder) -> None:
        builder.board.editable = False

    return _apply


def with_shared_cross_hair() -> DashboardOption:
    """Share the graph tooltip across panels."""

    def _apply(builder: DashboardBuilder) -> None:
        builder.board.shared_crosshair = True

    return _apply


def without_shared_cross_hair() -> DashboardOption:
    def _apply(builder: DashboardBuilder) -> None:
        builder.board.shared_crosshair = False

    return _apply


def with_tags(tags: Sequence[str]) -> DashboardOption:
    """Replace the dashboard's tags."""

    def _apply(builder: DashboardBuilder) -> None:
        builder.board.tags = list(tags)

    return _apply


def time_range(from_: str, to: str) -> DashboardOption:
    """Set the default time range, e.g. ``time_range("now-6h", "now")``."""

    def _apply(builder: DashboardBuilder) -> None:
        builder.board.time = TimeRange(from_=from_, to=to)

    return _apply


def auto_refresh(interval: str) -> DashboardOption:
    def _apply(builder: DashboardBuilder) -> None:
        builder.board.refresh = interval

    return _apply


def refresh_intervals(intervals: Sequence[str]) -> DashboardOption:
    def _apply(builder: DashboardBuilder) -> None:
        builder.board.timepicker = TimePicker(
            refresh_intervals=list(intervals),
            time_options=list(builder.board.timepicker.time_options),
        )

    return _apply


def time_options(options: Sequence[str]) -> DashboardOption:
    def _apply(builder: DashboardBuilder) -> None:
        builder.board.timepicker = TimePicker(
            refresh_intervals=list(builder.board.timepicker.refresh_intervals),
            time_options=list(options),
        )

    return _apply


def timezone(name: str) -> DashboardOption:
    """Set the display timezone, e.g. ``"utc"`` or ``"browser"``."""

    def _apply(builder: DashboardBuilder) -> None:
        builder.board.timezone = name

    return _apply
