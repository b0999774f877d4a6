"""Deferred configuration changes applied to a builder in order.

An option is a single-argument callable that mutates the builder it is given
and returns nothing. Builders seed their defaults as options too, so the whole
construction of a document is one left-to-right fold over
``defaults + caller options``: the last option touching a scalar field wins and
list-appending options accumulate.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, TypeVar

LOGGER = logging.getLogger(__name__)

T = TypeVar("T")

Option = Callable[[T], None]


def apply_options(target: T, options: Iterable[Option[T]]) -> T:
    """Apply every option to *target*, strictly in iteration order."""

    applied = 0
    for option in options:
        option(target)
        applied += 1
    LOGGER.debug("Applied %d options to %s", applied, type(target).__name__)
    return target


def compose(*options: Option[T]) -> Option[T]:
    """Bundle *options* into a single option applying them in the given order."""

    bundled = tuple(options)

    def _apply(target: T) -> None:
        apply_options(target, bundled)

    return _apply
