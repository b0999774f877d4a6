"""Tests for the seeded defaults configuration."""

from __future__ import annotations

import pytest

from grafana_compose.alert import AlertBuilder, ErrorMode, NoDataMode
from grafana_compose.config import AlertDefaults, DashboardDefaults
from grafana_compose.errors import InvalidDefaultsError


def test_from_mapping_keeps_builtins_for_missing_keys() -> None:
    defaults = DashboardDefaults.from_mapping({"time_from": "now-6h"})

    assert defaults.time_from == "now-6h"
    assert defaults.time_to == "now"
    assert defaults.shared_crosshair is True
    assert defaults == DashboardDefaults(time_from="now-6h")


def test_from_mapping_parses_csv_and_boolean_words() -> None:
    defaults = DashboardDefaults.from_mapping(
        {"refresh_intervals": "10s, 1m,,5m", "time_options": ["1h", "6h"], "shared_crosshair": "off"}
    )

    assert defaults.refresh_intervals == ("10s", "1m", "5m")
    assert defaults.time_options == ("1h", "6h")
    assert defaults.shared_crosshair is False


def test_from_mapping_rejects_unknown_keys() -> None:
    with pytest.raises(InvalidDefaultsError, match="refresh"):
        DashboardDefaults.from_mapping({"refresh": "5s"})


def test_from_mapping_rejects_bad_boolean() -> None:
    with pytest.raises(InvalidDefaultsError):
        DashboardDefaults.from_mapping({"shared_crosshair": "maybe"})


def test_alert_defaults_from_mapping() -> None:
    assert AlertDefaults.from_mapping() == AlertDefaults()
    defaults = AlertDefaults.from_mapping({"no_data_state": "ok"})

    assert defaults.no_data_state == "ok"
    assert defaults.execution_error_state == "keep_state"

    with pytest.raises(InvalidDefaultsError):
        AlertDefaults.from_mapping({"handler": 2})


def test_enum_members_are_stored_as_their_platform_value() -> None:
    defaults = AlertDefaults.from_mapping(
        {"no_data_state": NoDataMode.OK, "execution_error_state": ErrorMode.ALERTING}
    )

    assert defaults.no_data_state == "ok"
    assert defaults.execution_error_state == "alerting"
    alert = AlertBuilder("x", defaults=defaults).alert
    assert alert.to_dict()["noDataState"] == "ok"
    assert alert.to_dict()["executionErrorState"] == "alerting"


@pytest.mark.parametrize("key", ["execution_error_state", "no_data_state"])
@pytest.mark.parametrize("value", ["", "   "])
def test_alert_policies_cannot_be_seeded_empty(key, value) -> None:
    with pytest.raises(InvalidDefaultsError, match=key):
        AlertDefaults.from_mapping({key: value})


@pytest.mark.parametrize(
    "mapping",
    [
        {"time_from": ""},
        {"time_to": " "},
        {"refresh_intervals": ""},
        {"refresh_intervals": " , ,"},
        {"refresh_intervals": []},
        {"time_options": ""},
        {"time_options": []},
    ],
)
def test_dashboard_time_settings_cannot_be_seeded_empty(mapping) -> None:
    with pytest.raises(InvalidDefaultsError, match=next(iter(mapping))):
        DashboardDefaults.from_mapping(mapping)
