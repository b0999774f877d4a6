"""Options assembling a single alert condition.

A condition pairs a query/reducer option (``avg``, ``sum_``, ...) with an
evaluator option (``is_above``, ``is_within_range``, ...). Options within a
group overwrite each other, so the last one applied wins. The combination
operator is not a condition option: :func:`grafana_compose.alert.builder.when`
stamps it when the condition is attached to an alert.

See https://grafana.com/docs/grafana/latest/alerting/rules/#conditions
"""

from __future__ import annotations

from typing import Callable

from ..options import apply_options
from .models import Condition, Evaluator, Query, Reducer

ConditionOption = Callable[["ConditionBuilder"], None]


class ConditionBuilder:
    """Fold condition options into a fresh :class:`Condition`."""

    def __init__(self, *options: ConditionOption) -> None:
        self.condition = Condition(type="query")
        apply_options(self, options)


def _reduce(reducer_type: str, ref_id: str, from_: str, to: str) -> ConditionOption:
    def _apply(builder: ConditionBuilder) -> None:
        builder.condition.query = Query(params=[ref_id, from_, to])
        builder.condition.reducer = Reducer(type=reducer_type, params=[])

    return _apply


def avg(ref_id: str, from_: str, to: str) -> ConditionOption:
    """Average of the series *ref_id* over ``[from_, to]``."""
    return _reduce("avg", ref_id, from_, to)


def sum_(ref_id: str, from_: str, to: str) -> ConditionOption:
    return _reduce("sum", ref_id, from_, to)


def count(ref_id: str, from_: str, to: str) -> ConditionOption:
    return _reduce("count", ref_id, from_, to)


def last(ref_id: str, from_: str, to: str) -> ConditionOption:
    return _reduce("last", ref_id, from_, to)


def min_(ref_id: str, from_: str, to: str) -> ConditionOption:
    return _reduce("min", ref_id, from_, to)


def max_(ref_id: str, from_: str, to: str) -> ConditionOption:
    return _reduce("max", ref_id, from_, to)


def median(ref_id: str, from_: str, to: str) -> ConditionOption:
    return _reduce("median", ref_id, from_, to)


def diff(ref_id: str, from_: str, to: str) -> ConditionOption:
    """Difference between the first and last points of the range."""
    return _reduce("diff", ref_id, from_, to)


def percent_diff(ref_id: str, from_: str, to: str) -> ConditionOption:
    return _reduce("percent_diff", ref_id, from_, to)


def _evaluate(evaluator_type: str, *params: float) -> ConditionOption:
    def _apply(builder: ConditionBuilder) -> None:
        builder.condition.evaluator = Evaluator(type=evaluator_type, params=list(params))

    return _apply


def has_no_value() -> ConditionOption:
    return _evaluate("no_value")


def is_above(value: float) -> ConditionOption:
    return _evaluate("gt", value)


def is_below(value: float) -> ConditionOption:
    return _evaluate("lt", value)


def is_outside_range(min_value: float, max_value: float) -> ConditionOption:
    return _evaluate("outside_range", min_value, max_value)


def is_within_range(min_value: float, max_value: float) -> ConditionOption:
    return _evaluate("within_range", min_value, max_value)
