"""Alert document models and their platform serialization."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Union


class Operator(str, Enum):
    """How a condition combines with the conditions before it."""

    AND = "and"
    OR = "or"


class ErrorMode(str, Enum):
    """Behavior when evaluating the alert fails."""

    ALERTING = "alerting"
    LAST_STATE = "keep_state"


class NoDataMode(str, Enum):
    """Behavior when the alert query returns no data."""

    NO_DATA = "no_data"
    ERROR = "alerting"
    KEEP_LAST_STATE = "keep_state"
    OK = "ok"


def enum_value(value: Union[str, Enum]) -> str:
    """Return the raw string behind an enum member; other values pass through."""

    if isinstance(value, Enum):
        return value.value
    return value


def _omit_empty(payload: Dict[str, Any]) -> Dict[str, Any]:
    return {key: value for key, value in payload.items() if value not in ("", [], None)}


@dataclass(slots=True)
class Evaluator:
    """Threshold test applied to the reduced series."""

    type: str = ""
    params: List[float] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return _omit_empty({"params": list(self.params), "type": self.type})

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "Evaluator":
        return cls(type=payload.get("type", ""), params=list(payload.get("params", [])))


@dataclass(slots=True)
class Query:
    """Reference to the queried series and the time range to look at."""

    params: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return _omit_empty({"params": list(self.params)})

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "Query":
        return cls(params=list(payload.get("params", [])))


@dataclass(slots=True)
class Reducer:
    """Aggregation applied to the queried series."""

    type: str = ""
    params: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return _omit_empty({"params": list(self.params), "type": self.type})

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "Reducer":
        return cls(type=payload.get("type", ""), params=list(payload.get("params", [])))


@dataclass(slots=True)
class Condition:
    """One query/reducer/evaluator tuple of an alert."""

    type: str = "query"
    query: Query = field(default_factory=Query)
    reducer: Reducer = field(default_factory=Reducer)
    evaluator: Evaluator = field(default_factory=Evaluator)
    operator: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type,
            "query": self.query.to_dict(),
            "reducer": self.reducer.to_dict(),
            "evaluator": self.evaluator.to_dict(),
            "operator": _omit_empty({"type": self.operator}),
        }

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "Condition":
        return cls(
            type=payload.get("type", "query"),
            query=Query.from_dict(payload.get("query", {})),
            reducer=Reducer.from_dict(payload.get("reducer", {})),
            evaluator=Evaluator.from_dict(payload.get("evaluator", {})),
            operator=payload.get("operator", {}).get("type", ""),
        )


@dataclass(slots=True, frozen=True)
class Channel:
    """Reference to a notification channel owned by the platform."""

    id: int
    uid: str
    name: str = ""
    type: str = ""


@dataclass(slots=True)
class Notification:
    """Binding of an alert to a notification channel."""

    id: int
    uid: str

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "uid": self.uid}

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "Notification":
        return cls(id=payload.get("id", 0), uid=payload.get("uid", ""))


@dataclass(slots=True)
class AlertDefinition:
    """Alert document as submitted to the platform."""

    name: str
    message: str = ""
    for_duration: str = ""
    frequency: str = ""
    handler: int = 1
    execution_error_state: str = ""
    no_data_state: str = ""
    notifications: List[Notification] = field(default_factory=list)
    conditions: List[Condition] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "message": self.message,
            "for": self.for_duration,
            "frequency": self.frequency,
            "handler": self.handler,
            "executionErrorState": self.execution_error_state,
            "noDataState": self.no_data_state,
            "notifications": [notification.to_dict() for notification in self.notifications],
            "conditions": [condition.to_dict() for condition in self.conditions],
        }

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "AlertDefinition":
        return cls(
            name=payload.get("name", ""),
            message=payload.get("message", ""),
            for_duration=payload.get("for", ""),
            frequency=payload.get("frequency", ""),
            handler=payload.get("handler", 1),
            execution_error_state=payload.get("executionErrorState", ""),
            no_data_state=payload.get("noDataState", ""),
            notifications=[Notification.from_dict(item) for item in payload.get("notifications", [])],
            conditions=[Condition.from_dict(item) for item in payload.get("conditions", [])],
        )
