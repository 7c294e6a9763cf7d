"""Translation of domain errors into CLI failures.

Each error kind carries the status code an HTTP transport would use, so
the message tells the caller which class of failure occurred.
"""

from __future__ import annotations

import click

from catalog.domain.exceptions import (
    DomainException,
    DuplicateProductCodeError,
    EntityNotFoundError,
    InsufficientStockError,
    ProductNotAvailableError,
    ValidationError,
)

# Most specific first; the first isinstance match wins.
STATUS_BY_ERROR: tuple[tuple[type[DomainException], int], ...] = (
    (DuplicateProductCodeError, 409),
    (EntityNotFoundError, 404),
    (InsufficientStockError, 400),
    (ProductNotAvailableError, 400),
    (ValidationError, 400),
)

DEFAULT_STATUS = 400


def status_for(exc: DomainException) -> int:
    for error_type, status in STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return status
    return DEFAULT_STATUS


def to_click_error(exc: DomainException) -> click.ClickException:
    return click.ClickException(f"[{status_for(exc)}] {exc}")
