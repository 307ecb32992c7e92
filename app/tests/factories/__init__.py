"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    make_catalog,
    make_locale,
    make_registry,
    make_service,
)

__all__ = [
    "make_catalog",
    "make_locale",
    "make_registry",
    "make_service",
]
