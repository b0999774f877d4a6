from __future__ import annotations

import pytest

from grafana_compose.config import DEFAULT_REFRESH_INTERVALS, DEFAULT_TIME_OPTIONS, DashboardDefaults
from grafana_compose.dashboard import (
    DashboardBuilder,
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
from grafana_compose.row import with_text


def test_dashboard_without_options_gets_defaults() -> None:
    board = DashboardBuilder("svc").board

    assert board.title == "svc"
    assert board.slug == "svc"
    assert (board.id, board.uid, board.url) == (0, "", "")
    assert board.time.from_ == "now-3h"
    assert board.time.to == "now"
    assert board.shared_crosshair is True
    assert board.timepicker.refresh_intervals == list(DEFAULT_REFRESH_INTERVALS)
    assert board.timepicker.time_options == list(DEFAULT_TIME_OPTIONS)
    assert board.timezone == ""
    assert board.refresh is None


def test_tags_and_editable_keep_default_time_range() -> None:
    board = DashboardBuilder("svc", with_tags(["prod"]), editable()).board

    assert board.tags == ["prod"]
    assert board.editable is True
    assert board.time.to_dict() == {"from": "now-3h", "to": "now"}


def test_caller_options_override_seeded_fields() -> None:
    board = DashboardBuilder(
        "svc",
        time_range("now-24h", "now-1h"),
        without_shared_cross_hair(),
        refresh_intervals(["1m"]),
        time_options(["1h"]),
        auto_refresh("30s"),
        timezone("utc"),
    ).board

    assert board.time.from_ == "now-24h"
    assert board.time.to == "now-1h"
    assert board.shared_crosshair is False
    assert board.timepicker.refresh_intervals == ["1m"]
    assert board.timepicker.time_options == ["1h"]
    assert board.refresh == "30s"
    assert board.timezone == "utc"


def test_reordering_scalar_options_changes_the_result() -> None:
    assert DashboardBuilder("a", editable(), read_only()).board.editable is False
    assert DashboardBuilder("a", read_only(), editable()).board.editable is True
    assert DashboardBuilder("a", without_shared_cross_hair(), with_shared_cross_hair()).board.shared_crosshair
    assert not DashboardBuilder("a", with_shared_cross_hair(), without_shared_cross_hair()).board.shared_crosshair


def test_with_tags_overwrites_previous_tags() -> None:
    board = DashboardBuilder("svc", with_tags(["a", "b"]), with_tags(["c"])).board

    assert board.tags == ["c"]


def test_tag_annotations_accumulate() -> None:
    deploys = TagAnnotation(name="Deploys", datasource="-- Grafana --", icon_color="#5794F2", tags=["deploy"])
    incidents = TagAnnotation(name="Incidents", datasource="loki", tags=("incident", "sev1"))
    board = DashboardBuilder(
        "svc",
        with_tags_annotation(deploys),
        with_tags_annotation(incidents),
        with_tags_annotation(deploys),
    ).board

    assert [annotation.name for annotation in board.annotations] == ["Deploys", "Incidents", "Deploys"]
    assert board.to_dict()["annotations"]["list"][1] == {
        "name": "Incidents",
        "datasource": "loki",
        "iconColor": "",
        "enable": True,
        "tags": ["incident", "sev1"],
        "type": "tags",
    }


def test_rows_accumulate_in_call_order() -> None:
    board = DashboardBuilder(
        "svc",
        with_row("Overview", with_text("Notes", "hello")),
        with_row("Details"),
        with_row("Overview"),
    ).board

    assert [row.title for row in board.rows] == ["Overview", "Details", "Overview"]
    assert board.rows[0].panels[0].content == "hello"


def test_custom_defaults_are_overridden_by_caller_options() -> None:
    defaults = DashboardDefaults(time_from="now-1h", shared_crosshair=False)
    board = DashboardBuilder("svc", with_shared_cross_hair(), defaults=defaults).board

    assert board.time.from_ == "now-1h"
    assert board.shared_crosshair is True


def test_build_snapshot_is_not_aliased() -> None:
    builder = DashboardBuilder("svc", with_tags(["prod"]))
    snapshot = builder.build()
    with_row("Late")(builder)
    builder.board.tags.append("mutated")

    assert snapshot.rows == []
    assert snapshot.tags == ["prod"]


def test_slug_is_derived_from_title() -> None:
    assert DashboardBuilder("Payments Overview!").board.slug == "payments-overview"


@pytest.mark.parametrize(
    "option",
    [
        editable(),
        read_only(),
        with_tags(["prod", "api"]),
        time_range("now-6h", "now"),
        without_shared_cross_hair(),
        auto_refresh("1m"),
        timezone("utc"),
    ],
)
def test_scalar_dashboard_option_applied_twice_is_idempotent(option) -> None:
    once = DashboardBuilder("a", option)
    twice = DashboardBuilder("a", option, option)

    assert twice.to_dict() == once.to_dict()
