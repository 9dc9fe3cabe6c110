"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    make_translator,
    make_validation_messages,
    write_source,
)

__all__ = [
    "make_translator",
    "make_validation_messages",
    "write_source",
]
