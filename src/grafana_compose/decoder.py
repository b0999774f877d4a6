"""Load dashboards from YAML definitions.

The decoder only translates YAML into the options a Python caller would pass
to :class:`~grafana_compose.dashboard.DashboardBuilder`, so a decoded board is
built by exactly the same fold. Structural problems (wrong container types,
unknown keys, unknown panel kinds, ambiguous conditions) raise
:class:`~grafana_compose.errors.DashboardDefinitionError`; scalar values are
passed through untouched.

Example::

    title: Payments
    tags: [prod]
    rows:
      - name: Traffic
        panels:
          - graph:
              title: Requests
              targets:
                - expr: sum(rate(http_requests_total[5m]))
              alert:
                name: too-many-requests
                evaluate_every: 1m
                if:
                  - operator: and
                    avg: [A, 5m, now]
                    above: 1000
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Set, Union

import yaml

from . import row as row_options
from .alert import builder as alert_options
from .alert import condition as condition_options
from .alert.builder import AlertBuilder, AlertOption
from .alert.condition import ConditionOption
from .alert.models import Channel
from .config import DashboardDefaults
from .dashboard import builder as dashboard_options
from .dashboard.builder import DashboardBuilder, DashboardOption, TagAnnotation
from .dashboard.models import Target
from .errors import DashboardDefinitionError
from .row import RowOption

LOGGER = logging.getLogger(__name__)

_REDUCERS: Dict[str, Callable[[str, str, str], ConditionOption]] = {
    "avg": condition_options.avg,
    "sum": condition_options.sum_,
    "count": condition_options.count,
    "last": condition_options.last,
    "min": condition_options.min_,
    "max": condition_options.max_,
    "median": condition_options.median,
    "diff": condition_options.diff,
    "percent_diff": condition_options.percent_diff,
}


def _has_no_value(flag: Any) -> ConditionOption:
    if flag is not True:
        raise DashboardDefinitionError(f"has_no_value only accepts true, got {flag!r}")
    return condition_options.has_no_value()


_EVALUATORS: Dict[str, Callable[[Any], ConditionOption]] = {
    "above": condition_options.is_above,
    "below": condition_options.is_below,
    "outside_range": lambda bounds: condition_options.is_outside_range(*_pair("outside_range", bounds)),
    "within_range": lambda bounds: condition_options.is_within_range(*_pair("within_range", bounds)),
    "has_no_value": _has_no_value,
}

_DASHBOARD_KEYS = {
    "title",
    "editable",
    "shared_crosshair",
    "tags",
    "time",
    "auto_refresh",
    "timezone",
    "tags_annotations",
    "rows",
}
_ANNOTATION_KEYS = {"name", "datasource", "color", "tags"}
_ROW_KEYS = {"name", "collapse", "show_title", "repeat_for", "panels"}
_PANEL_KEYS = {
    "text": {"title", "content"},
    "graph": {"title", "targets", "alert"},
}
_TARGET_KEYS = {"ref", "expr", "legend"}
_ALERT_KEYS = {
    "name",
    "message",
    "evaluate_every",
    "for",
    "on_no_data",
    "on_execution_error",
    "notifications",
    "if",
}
_CHANNEL_KEYS = {"id", "uid", "name", "type"}
_CONDITION_KEYS = {"operator", *_REDUCERS, *_EVALUATORS}


def _mapping(where: str, value: Any, allowed: Optional[Set[str]] = None) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise DashboardDefinitionError(f"{where} must be a mapping, got {type(value).__name__}")
    if allowed is not None:
        unknown = set(value) - allowed
        if unknown:
            raise DashboardDefinitionError(
                f"{where} has unknown keys: {', '.join(sorted(str(key) for key in unknown))}"
            )
    return value


def _list(where: str, value: Any) -> List[Any]:
    if value is None:
        return []
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
        raise DashboardDefinitionError(f"{where} must be a list, got {type(value).__name__}")
    return list(value)


def _pair(where: str, value: Any) -> Sequence[Any]:
    items = _list(where, value)
    if len(items) != 2:
        raise DashboardDefinitionError(f"{where} expects exactly two values, got {len(items)}")
    return items


def _condition(index: int, definition: Any) -> AlertOption:
    where = f"condition #{index}"
    fields = _mapping(where, definition, _CONDITION_KEYS)
    operator = fields.get("operator", "and")

    options: List[ConditionOption] = []
    reducers = [key for key in fields if key in _REDUCERS]
    if len(reducers) > 1:
        raise DashboardDefinitionError(f"{where} declares several reducers: {', '.join(reducers)}")
    for key in reducers:
        query = _list(f"{where}.{key}", fields[key])
        if len(query) != 3:
            raise DashboardDefinitionError(f"{where}.{key} expects [ref, from, to], got {query!r}")
        options.append(_REDUCERS[key](*(str(item) for item in query)))

    evaluators = [key for key in fields if key in _EVALUATORS]
    if len(evaluators) > 1:
        raise DashboardDefinitionError(f"{where} declares several evaluators: {', '.join(evaluators)}")
    for key in evaluators:
        options.append(_EVALUATORS[key](fields[key]))

    return alert_options.when(operator, *options)


def _alert(definition: Any) -> AlertBuilder:
    fields = _mapping("alert", definition, _ALERT_KEYS)
    if "name" not in fields:
        raise DashboardDefinitionError("alert requires a name")

    options: List[AlertOption] = []
    if "message" in fields:
        options.append(alert_options.message(fields["message"]))
    if "evaluate_every" in fields:
        options.append(alert_options.evaluate_every(fields["evaluate_every"]))
    if "for" in fields:
        options.append(alert_options.for_duration(fields["for"]))
    if "on_no_data" in fields:
        options.append(alert_options.on_no_data(fields["on_no_data"]))
    if "on_execution_error" in fields:
        options.append(alert_options.on_execution_error(fields["on_execution_error"]))
    for channel in _list("alert.notifications", fields.get("notifications")):
        channel_fields = _mapping("alert.notifications[]", channel, _CHANNEL_KEYS)
        options.append(
            alert_options.notification(
                Channel(
                    id=channel_fields.get("id", 0),
                    uid=channel_fields.get("uid", ""),
                    name=channel_fields.get("name", ""),
                    type=channel_fields.get("type", ""),
                )
            )
        )
    for index, condition in enumerate(_list("alert.if", fields.get("if")), start=1):
        options.append(_condition(index, condition))

    return AlertBuilder(fields["name"], *options)


def _panel(definition: Any) -> RowOption:
    fields = _mapping("panel", definition)
    if len(fields) != 1:
        raise DashboardDefinitionError(f"panel must declare exactly one kind, got {sorted(fields)}")
    kind, body = next(iter(fields.items()))
    body = _mapping(f"{kind} panel", body, _PANEL_KEYS.get(kind))

    if kind == "text":
        return row_options.with_text(body.get("title", ""), body.get("content", ""))
    if kind == "graph":
        targets = []
        for index, target in enumerate(_list("graph.targets", body.get("targets"))):
            target_fields = _mapping("graph.targets[]", target, _TARGET_KEYS)
            targets.append(
                Target(
                    ref_id=target_fields.get("ref", chr(ord("A") + index)),
                    expr=target_fields.get("expr", ""),
                    legend_format=target_fields.get("legend", ""),
                )
            )
        alert = _alert(body["alert"]) if "alert" in body else None
        return row_options.with_graph(body.get("title", ""), *targets, alert=alert)
    raise DashboardDefinitionError(f"unknown panel kind {kind!r}")


def _row(definition: Any) -> DashboardOption:
    fields = _mapping("row", definition, _ROW_KEYS)
    options: List[RowOption] = []
    if "show_title" in fields:
        options.append(row_options.show_title() if fields["show_title"] else row_options.hide_title())
    if fields.get("collapse"):
        options.append(row_options.collapse())
    if "repeat_for" in fields:
        options.append(row_options.repeat_for(fields["repeat_for"]))
    options.extend(_panel(panel) for panel in _list("row.panels", fields.get("panels")))
    return dashboard_options.with_row(fields.get("name", ""), *options)


def _dashboard_options(fields: Mapping[str, Any]) -> List[DashboardOption]:
    options: List[DashboardOption] = []
    if "editable" in fields:
        options.append(dashboard_options.editable() if fields["editable"] else dashboard_options.read_only())
    if "shared_crosshair" in fields:
        options.append(
            dashboard_options.with_shared_cross_hair()
            if fields["shared_crosshair"]
            else dashboard_options.without_shared_cross_hair()
        )
    if "tags" in fields:
        options.append(dashboard_options.with_tags([str(tag) for tag in _list("tags", fields["tags"])]))
    if "time" in fields:
        options.append(dashboard_options.time_range(*_pair("time", fields["time"])))
    if "auto_refresh" in fields:
        options.append(dashboard_options.auto_refresh(fields["auto_refresh"]))
    if "timezone" in fields:
        options.append(dashboard_options.timezone(fields["timezone"]))
    for annotation in _list("tags_annotations", fields.get("tags_annotations")):
        annotation_fields = _mapping("tags_annotations[]", annotation, _ANNOTATION_KEYS)
        options.append(
            dashboard_options.with_tags_annotation(
                TagAnnotation(
                    name=annotation_fields.get("name", ""),
                    datasource=annotation_fields.get("datasource", ""),
                    icon_color=annotation_fields.get("color", ""),
                    tags=tuple(_list("tags_annotations[].tags", annotation_fields.get("tags"))),
                )
            )
        )
    options.extend(_row(row) for row in _list("rows", fields.get("rows")))
    return options


def load_dashboard(
    source: Union[str, Mapping[str, Any]],
    *,
    defaults: Optional[DashboardDefaults] = None,
) -> DashboardBuilder:
    """Build a dashboard from a YAML document or an already parsed mapping."""

    if isinstance(source, str):
        try:
            parsed = yaml.safe_load(source)
        except yaml.YAMLError as exc:
            raise DashboardDefinitionError(f"invalid YAML: {exc}") from exc
    else:
        parsed = source

    fields = _mapping("dashboard", parsed, _DASHBOARD_KEYS)
    if "title" not in fields:
        raise DashboardDefinitionError("dashboard requires a title")
    return DashboardBuilder(str(fields["title"]), *_dashboard_options(fields), defaults=defaults)


def load_dashboard_file(path: Union[str, Path], *, defaults: Optional[DashboardDefaults] = None) -> DashboardBuilder:
    """Build a dashboard from the YAML file at *path*."""

    dashboard_path = Path(path)
    builder = load_dashboard(dashboard_path.read_text(encoding="utf-8"), defaults=defaults)
    LOGGER.info("Loaded dashboard %r from %s", builder.board.title, dashboard_path)
    return builder
