"""Alert builder and the options it understands.

See https://grafana.com/docs/grafana/latest/alerting/rules/
"""

from __future__ import annotations

import copy
import json
import logging
from typing import Callable, List, Optional, Union

from ..config import AlertDefaults
from ..options import apply_options
from .condition import ConditionBuilder, ConditionOption
from .models import AlertDefinition, Channel, ErrorMode, NoDataMode, Notification, Operator, enum_value

LOGGER = logging.getLogger(__name__)

AlertOption = Callable[["AlertBuilder"], None]


class AlertBuilder:
    """Build an :class:`AlertDefinition` from an ordered list of options.

    The execution-error and no-data policies are seeded before *options* are
    applied, so they are always set and any caller option overrides them.
    """

    def __init__(self, name: str, *options: AlertOption, defaults: Optional[AlertDefaults] = None) -> None:
        self.alert = AlertDefinition(name=name, handler=1)
        seeded = alert_defaults(defaults or AlertDefaults())
        LOGGER.debug("Building alert %r with %d caller options", name, len(options))
        apply_options(self, [*seeded, *options])

    def build(self) -> AlertDefinition:
        """Return a snapshot of the alert that does not alias the builder."""
        return copy.deepcopy(self.alert)

    def to_dict(self) -> dict:
        return self.alert.to_dict()

    def to_json(self, indent: Optional[int] = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)


def alert_defaults(defaults: AlertDefaults) -> List[AlertOption]:
    return [
        on_execution_error(defaults.execution_error_state),
        on_no_data(defaults.no_data_state),
    ]


def notification(channel: Channel) -> AlertOption:
    """Notify *channel* when the alert fires. Repeated calls accumulate."""

    def _apply(builder: AlertBuilder) -> None:
        builder.alert.notifications.append(Notification(id=channel.id, uid=channel.uid))

    return _apply


def message(content: str) -> AlertOption:
    def _apply(builder: AlertBuilder) -> None:
        builder.alert.message = content

    return _apply


def for_duration(duration: str) -> AlertOption:
    """How long the threshold must be violated before the alert fires.

    See https://grafana.com/docs/grafana/latest/alerting/rules/#for
    """

    def _apply(builder: AlertBuilder) -> None:
        builder.alert.for_duration = duration

    return _apply


def evaluate_every(interval: str) -> AlertOption:
    def _apply(builder: AlertBuilder) -> None:
        builder.alert.frequency = interval

    return _apply


def on_execution_error(mode: Union[ErrorMode, str]) -> AlertOption:
    """See https://grafana.com/docs/grafana/latest/alerting/rules/#execution-errors-or-timeouts"""

    def _apply(builder: AlertBuilder) -> None:
        builder.alert.execution_error_state = enum_value(mode)

    return _apply


def on_no_data(mode: Union[NoDataMode, str]) -> AlertOption:
    """See https://grafana.com/docs/grafana/latest/alerting/rules/#no-data-null-values"""

    def _apply(builder: AlertBuilder) -> None:
        builder.alert.no_data_state = enum_value(mode)

    return _apply


def when(operator: Union[Operator, str], *options: ConditionOption) -> AlertOption:
    """Add a condition that can trigger the alert.

    The condition is built from *options* each time the returned option is
    applied and *operator* is stamped onto it before it is appended.
    """

    def _apply(builder: AlertBuilder) -> None:
        condition = ConditionBuilder(*options).condition
        condition.operator = enum_value(operator)
        builder.alert.conditions.append(condition)

    return _apply
