"""Dashboard document models and their platform serialization."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from ..alert.models import AlertDefinition

_SLUG_STRIP = re.compile(r"[^\w\s-]")
_SLUG_SPACES = re.compile(r"[-\s]+")


def slugify(title: str) -> str:
    """Return the URL slug the platform derives from a dashboard title."""

    cleaned = _SLUG_STRIP.sub("", title.strip().lower())
    return _SLUG_SPACES.sub("-", cleaned).strip("-")


@dataclass(slots=True)
class TimeRange:
    from_: str = ""
    to: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {"from": self.from_, "to": self.to}

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "TimeRange":
        return cls(from_=payload.get("from", ""), to=payload.get("to", ""))


@dataclass(slots=True)
class TimePicker:
    """Choices offered by the refresh and zoom drop-downs."""

    refresh_intervals: List[str] = field(default_factory=list)
    time_options: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "refresh_intervals": list(self.refresh_intervals),
            "time_options": list(self.time_options),
        }

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "TimePicker":
        return cls(
            refresh_intervals=list(payload.get("refresh_intervals", [])),
            time_options=list(payload.get("time_options", [])),
        )


@dataclass(slots=True)
class Annotation:
    """Source of annotations displayed on the dashboard's graphs."""

    name: str
    datasource: str
    icon_color: str = ""
    enable: bool = True
    tags: List[str] = field(default_factory=list)
    type: str = "tags"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "datasource": self.datasource,
            "iconColor": self.icon_color,
            "enable": self.enable,
            "tags": list(self.tags),
            "type": self.type,
        }

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "Annotation":
        return cls(
            name=payload.get("name", ""),
            datasource=payload.get("datasource", ""),
            icon_color=payload.get("iconColor", ""),
            enable=payload.get("enable", True),
            tags=list(payload.get("tags", [])),
            type=payload.get("type", "tags"),
        )


@dataclass(slots=True)
class Target:
    """Query feeding a graph panel."""

    ref_id: str
    expr: str
    legend_format: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {"refId": self.ref_id, "expr": self.expr, "legendFormat": self.legend_format}

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "Target":
        return cls(
            ref_id=payload.get("refId", ""),
            expr=payload.get("expr", ""),
            legend_format=payload.get("legendFormat", ""),
        )


@dataclass(slots=True)
class Panel:
    """A single panel placed inside a row."""

    title: str
    type: str = "graph"
    id: int = 0
    span: int = 12
    content: str = ""
    targets: List[Target] = field(default_factory=list)
    alert: Optional[AlertDefinition] = None

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "id": self.id,
            "type": self.type,
            "title": self.title,
            "span": self.span,
        }
        if self.type == "text":
            payload["mode"] = "markdown"
            payload["content"] = self.content
        elif self.content:
            payload["content"] = self.content
        if self.type != "text" or self.targets:
            payload["targets"] = [target.to_dict() for target in self.targets]
        if self.alert is not None:
            payload["alert"] = self.alert.to_dict()
        return payload

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "Panel":
        alert = payload.get("alert")
        return cls(
            title=payload.get("title", ""),
            type=payload.get("type", "graph"),
            id=payload.get("id", 0),
            span=payload.get("span", 12),
            content=payload.get("content", ""),
            targets=[Target.from_dict(item) for item in payload.get("targets", [])],
            alert=AlertDefinition.from_dict(alert) if alert is not None else None,
        )


@dataclass(slots=True)
class Row:
    """Horizontal group of panels."""

    title: str
    show_title: bool = True
    collapse: bool = False
    repeat: Optional[str] = None
    panels: List[Panel] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "title": self.title,
            "showTitle": self.show_title,
            "collapse": self.collapse,
            "panels": [panel.to_dict() for panel in self.panels],
        }
        if self.repeat is not None:
            payload["repeat"] = self.repeat
        return payload

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "Row":
        return cls(
            title=payload.get("title", ""),
            show_title=payload.get("showTitle", True),
            collapse=payload.get("collapse", False),
            repeat=payload.get("repeat"),
            panels=[Panel.from_dict(item) for item in payload.get("panels", [])],
        )


@dataclass(slots=True)
class Board:
    """Dashboard document as submitted to the platform.

    ``id``, ``uid`` and ``url`` are assigned by the platform once the
    dashboard is saved and stay zero-valued while it is being built.
    """

    title: str
    id: int = 0
    uid: str = ""
    url: str = ""
    slug: str = ""
    editable: bool = False
    shared_crosshair: bool = False
    timezone: str = ""
    refresh: Optional[str] = None
    tags: List[str] = field(default_factory=list)
    time: TimeRange = field(default_factory=TimeRange)
    timepicker: TimePicker = field(default_factory=TimePicker)
    annotations: List[Annotation] = field(default_factory=list)
    rows: List[Row] = field(default_factory=list)

    def next_panel_id(self) -> int:
        """Return the id for the next panel added anywhere on the board."""

        highest = max((panel.id for row in self.rows for panel in row.panels), default=0)
        return highest + 1

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "id": self.id,
            "uid": self.uid,
            "url": self.url,
            "title": self.title,
            "slug": self.slug,
            "editable": self.editable,
            "sharedCrosshair": self.shared_crosshair,
            "timezone": self.timezone,
            "tags": list(self.tags),
            "time": self.time.to_dict(),
            "timepicker": self.timepicker.to_dict(),
            "annotations": {"list": [annotation.to_dict() for annotation in self.annotations]},
            "rows": [row.to_dict() for row in self.rows],
        }
        if self.refresh is not None:
            payload["refresh"] = self.refresh
        return payload

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "Board":
        return cls(
            title=payload.get("title", ""),
            id=payload.get("id", 0),
            uid=payload.get("uid", ""),
            url=payload.get("url", ""),
            slug=payload.get("slug", ""),
            editable=payload.get("editable", False),
            shared_crosshair=payload.get("sharedCrosshair", False),
            timezone=payload.get("timezone", ""),
            refresh=payload.get("refresh"),
            tags=list(payload.get("tags", [])),
            time=TimeRange.from_dict(payload.get("time", {})),
            timepicker=TimePicker.from_dict(payload.get("timepicker", {})),
            annotations=[Annotation.from_dict(item) for item in payload.get("annotations", {}).get("list", [])],
            rows=[Row.from_dict(item) for item in payload.get("rows", [])],
        )
