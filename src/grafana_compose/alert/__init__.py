"""Alert definitions: conditions, notification bindings and policies."""

from .builder import (
    AlertBuilder,
    AlertOption,
    evaluate_every,
    for_duration,
    message,
    notification,
    on_execution_error,
    on_no_data,
    when,
)
from .condition import (
    ConditionBuilder,
    ConditionOption,
    avg,
    count,
    diff,
    has_no_value,
    is_above,
    is_below,
    is_outside_range,
    is_within_range,
    last,
    max_,
    median,
    min_,
    percent_diff,
    sum_,
)
from .models import (
    AlertDefinition,
    Channel,
    Condition,
    ErrorMode,
    Evaluator,
    NoDataMode,
    Notification,
    Operator,
    Query,
    Reducer,
)

__all__ = [
    "AlertBuilder",
    "AlertDefinition",
    "AlertOption",
    "Channel",
    "Condition",
    "ConditionBuilder",
    "ConditionOption",
    "ErrorMode",
    "Evaluator",
    "NoDataMode",
    "Notification",
    "Operator",
    "Query",
    "Reducer",
    "avg",
    "count",
    "diff",
    "evaluate_every",
    "for_duration",
    "has_no_value",
    "is_above",
    "is_below",
    "is_outside_range",
    "is_within_range",
    "last",
    "max_",
    "median",
    "message",
    "min_",
    "notification",
    "on_execution_error",
    "on_no_data",
    "percent_diff",
    "sum_",
    "when",
]
