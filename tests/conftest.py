"""Shared fixtures for the grafana_compose test-suite."""

from __future__ import annotations

import pytest

from grafana_compose.alert import AlertBuilder, Channel, Operator, avg, is_above, when


@pytest.fixture
def pager_channel() -> Channel:
    return Channel(id=7, uid="pager-uid", name="Pager", type="pagerduty")


@pytest.fixture
def cpu_alert() -> AlertBuilder:
    return AlertBuilder("cpu-high", when(Operator.AND, avg("A", "5m", "now"), is_above(90)))
