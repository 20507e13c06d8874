# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Stac screen exceptions."""

from __future__ import annotations


class StacScreenError(Exception):
    """Base exception for stac_screen errors."""

    pass


class InvalidArgumentError(StacScreenError, ValueError):
    """Raised when a setter or tree operation receives malformed input."""

    pass


class UnsupportedKindError(StacScreenError):
    """Raised when a node kind is not registered."""

    pass


class UnknownOperationError(StacScreenError, AttributeError):
    """Raised when a builder short name does not resolve to a factory operation."""

    pass


class FrozenRegistryError(StacScreenError):
    """Raised when a frozen registry is mutated."""

    pass


class ValidationFailedError(StacScreenError):
    """Raised when validation collected one or more errors.

    Attributes:
        errors: The complete list of collected error messages.
    """

    def __init__(self, errors: list[str], prefix: str = 'Validation failed') -> None:
        self.errors = list(errors)
        super().__init__(f"{prefix}: {', '.join(self.errors)}")
