"""grafana_compose: build Grafana dashboards and alerts from ordered options.

Every document is produced by folding a list of small options over a builder:
defaults first, then the caller's options in order. The resulting board or
alert serializes to the JSON shape expected by Grafana's HTTP API.
"""

from .alert import AlertBuilder, AlertDefinition, Channel, ErrorMode, NoDataMode, Operator
from .config import AlertDefaults, DashboardDefaults
from .dashboard import Board, DashboardBuilder, TagAnnotation, Target
from .decoder import load_dashboard, load_dashboard_file
from .errors import DashboardDefinitionError, GrafanaComposeError, InvalidDefaultsError
from .options import apply_options, compose
from .row import RowBuilder, new_row

__all__ = [
    "AlertBuilder",
    "AlertDefaults",
    "AlertDefinition",
    "Board",
    "Channel",
    "DashboardBuilder",
    "DashboardDefaults",
    "DashboardDefinitionError",
    "ErrorMode",
    "GrafanaComposeError",
    "InvalidDefaultsError",
    "NoDataMode",
    "Operator",
    "RowBuilder",
    "TagAnnotation",
    "Target",
    "apply_options",
    "compose",
    "load_dashboard",
    "load_dashboard_file",
    "new_row",
]

__version__ = "0.1.0"
