"""Exceptions raised at the edges of the composition layer.

Options themselves never raise; these errors only come from configuration
parsing and from decoding YAML dashboard definitions.
"""

from __future__ import annotations


class GrafanaComposeError(Exception):
    """Base class for all grafana_compose errors."""


class InvalidDefaultsError(GrafanaComposeError, ValueError):
    """Raised when a defaults mapping cannot be parsed into the expected type."""


class DashboardDefinitionError(GrafanaComposeError, ValueError):
    """Raised when a YAML dashboard definition is structurally invalid."""
