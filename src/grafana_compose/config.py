"""Default values seeded into every dashboard and alert."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping, Optional, Sequence

from .errors import InvalidDefaultsError

DEFAULT_REFRESH_INTERVALS = ("5s", "10s", "30s", "1m", "5m", "15m", "30m", "1h", "2h", "1d")
DEFAULT_TIME_OPTIONS = ("5m", "15m", "1h", "6h", "12h", "24h", "2d", "7d", "30d")


def _str_to_bool(name: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    normalized = str(value).strip().lower()
    if normalized in {"true", "1", "yes", "y", "on"}:
        return True
    if normalized in {"false", "0", "no", "n", "off"}:
        return False
    raise InvalidDefaultsError(f"Cannot interpret {name}={value!r} as boolean")


def _csv(name: str, value: Any) -> tuple[str, ...]:
    if isinstance(value, str):
        items = tuple(item.strip() for item in value.split(",") if item.strip())
    elif isinstance(value, Sequence):
        items = tuple(str(item) for item in value if str(item).strip())
    else:
        raise InvalidDefaultsError(f"{name} must be a list or a comma separated string, got {value!r}")
    if not items:
        raise InvalidDefaultsError(f"{name} must not be empty")
    return items


def _text(name: str, value: Any) -> str:
    if isinstance(value, Enum):
        value = value.value
    if not isinstance(value, (str, int, float)) or isinstance(value, bool):
        raise InvalidDefaultsError(f"{name} must be a string, got {value!r}")
    text = str(value).strip()
    if not text:
        raise InvalidDefaultsError(f"{name} must not be empty")
    return text


@dataclass(frozen=True)
class DashboardDefaults:
    """Values applied to a dashboard before any caller option.

    The defaults give every dashboard a trailing three hour window, the usual
    refresh/zoom ladders and a shared cross-hair.
    """

    time_from: str = "now-3h"
    time_to: str = "now"
    refresh_intervals: tuple[str, ...] = field(default=DEFAULT_REFRESH_INTERVALS)
    time_options: tuple[str, ...] = field(default=DEFAULT_TIME_OPTIONS)
    shared_crosshair: bool = True

    @classmethod
    def from_mapping(cls, mapping: Optional[Mapping[str, Any]] = None) -> "DashboardDefaults":
        """Build defaults from a plain mapping, keeping built-ins for missing keys.

        Recognised keys are ``time_from``, ``time_to``, ``refresh_intervals``,
        ``time_options`` and ``shared_crosshair``. List values may be given as
        sequences or comma separated strings.
        """

        values = dict(mapping or {})
        unknown = set(values) - {
            "time_from",
            "time_to",
            "refresh_intervals",
            "time_options",
            "shared_crosshair",
        }
        if unknown:
            raise InvalidDefaultsError(f"Unknown dashboard defaults: {', '.join(sorted(unknown))}")

        base = cls()
        return cls(
            time_from=_text("time_from", values["time_from"]) if "time_from" in values else base.time_from,
            time_to=_text("time_to", values["time_to"]) if "time_to" in values else base.time_to,
            refresh_intervals=(
                _csv("refresh_intervals", values["refresh_intervals"])
                if "refresh_intervals" in values
                else base.refresh_intervals
            ),
            time_options=(
                _csv("time_options", values["time_options"]) if "time_options" in values else base.time_options
            ),
            shared_crosshair=(
                _str_to_bool("shared_crosshair", values["shared_crosshair"])
                if "shared_crosshair" in values
                else base.shared_crosshair
            ),
        )


@dataclass(frozen=True)
class AlertDefaults:
    """Policies seeded into every alert so the platform never sees them unset."""

    execution_error_state: str = "keep_state"
    no_data_state: str = "keep_state"

    @classmethod
    def from_mapping(cls, mapping: Optional[Mapping[str, Any]] = None) -> "AlertDefaults":
        values = dict(mapping or {})
        unknown = set(values) - {"execution_error_state", "no_data_state"}
        if unknown:
            raise InvalidDefaultsError(f"Unknown alert defaults: {', '.join(sorted(unknown))}")
        base = cls()
        return cls(
            execution_error_state=_text(
                "execution_error_state", values.get("execution_error_state", base.execution_error_state)
            ),
            no_data_state=_text("no_data_state", values.get("no_data_state", base.no_data_state)),
        )
