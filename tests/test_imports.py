"""Tests for simpledatetime package imports.

These tests verify that the package structure is correct and all
modules are importable.
"""

from __future__ import annotations


def test_import_simpledatetime() -> None:
    """Import simpledatetime package succeeds."""
    import simpledatetime

    assert hasattr(simpledatetime, "__version__")
    assert simpledatetime.__version__ == "0.1.0"


def test_import_core_module() -> None:
    """Import simpledatetime.core submodule succeeds."""
    from simpledatetime import core

    assert hasattr(core, "__all__")


def test_import_validate_module() -> None:
    """Import simpledatetime.validate submodule succeeds."""
    from simpledatetime import validate

    assert hasattr(validate, "__all__")


def test_import_convert_module() -> None:
    """Import simpledatetime.convert submodule succeeds."""
    from simpledatetime import convert

    assert hasattr(convert, "__all__")


def test_import_internal_module() -> None:
    """Import simpledatetime._internal submodule succeeds."""
    from simpledatetime import _internal

    assert hasattr(_internal, "__all__")


def test_import_errors() -> None:
    """Error hierarchy is exported from the top-level package."""
    from simpledatetime import (
        ParseError,
        RangeError,
        SimpleDateTimeError,
        StructuralViolation,
    )

    assert issubclass(ParseError, SimpleDateTimeError)
    assert issubclass(RangeError, SimpleDateTimeError)
    assert issubclass(RangeError, ValueError)
    assert issubclass(StructuralViolation, SimpleDateTimeError)
    assert not issubclass(StructuralViolation, ValueError)


def test_public_classes() -> None:
    from simpledatetime import Date, DateImmutable, Dimension, Time, TimeImmutable

    assert Date.dimension is Dimension.DATE
    assert DateImmutable.dimension is Dimension.DATE
    assert Time.dimension is Dimension.TIME
    assert TimeImmutable.dimension is Dimension.TIME
