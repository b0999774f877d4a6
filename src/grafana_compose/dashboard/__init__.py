"""Dashboard definitions assembled from options."""

from .builder import (
    DashboardBuilder,
    DashboardOption,
    TagAnnotation,
    auto_refresh,
    editable,
    read_only,
    refresh_intervals,
    time_options,
    time_range,
    timezone,
    with_row,
    with_shared_cross_hair,
    with_tags,
    with_tags_annotation,
    without_shared_cross_hair,
)
from .models import Annotation, Board, Panel, Row, Target, TimePicker, TimeRange

__all__ = [
    "Annotation",
    "Board",
    "DashboardBuilder",
    "DashboardOption",
    "Panel",
    "Row",
    "TagAnnotation",
    "Target",
    "TimePicker",
    "TimeRange",
    "auto_refresh",
    "editable",
    "read_only",
    "refresh_intervals",
    "time_options",
    "time_range",
    "timezone",
    "with_row",
    "with_shared_cross_hair",
    "with_tags",
    "with_tags_annotation",
    "without_shared_cross_hair",
]
