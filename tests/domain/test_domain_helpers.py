"""Tests for normalization, validation and Decimal helpers."""

from decimal import Decimal
from unittest.mock import MagicMock

from ledger_insights.domain.services.normalization import (
    normalize_account_type,
    normalize_label,
    normalize_optional_label,
)
from ledger_insights.domain.services.validation import validate_balance_sign
from ledger_insights.utils.decimal_utils import coerce_decimal, round_money


def test_normalize_label() -> None:
    assert normalize_label(None) == "Other"
    assert normalize_label("   ") == "Other"
    assert normalize_label(" Food ") == "Food"
    assert normalize_label("", fallback="Unknown") == "Unknown"


def test_normalize_optional_label() -> None:
    assert normalize_optional_label(" ") is None
    assert normalize_optional_label(" Cafe") == "Cafe"


def test_normalize_account_type() -> None:
    assert normalize_account_type(" Credit ") == "credit"
    assert normalize_account_type(None) == ""


def test_validate_balance_sign_only_checks_assets() -> None:
    logger = MagicMock()

    validate_balance_sign("credit", Decimal("-10"), logger)
    validate_balance_sign("savings", Decimal("10"), logger)
    logger.warning.assert_not_called()

    validate_balance_sign("savings", Decimal("-10"), logger)
    logger.warning.assert_called_once()


def test_coerce_decimal_collapses_missing_and_non_finite() -> None:
    assert coerce_decimal(None) == Decimal("0")
    assert coerce_decimal(float("nan")) == Decimal("0")
    assert coerce_decimal(Decimal("Infinity")) == Decimal("0")
    assert coerce_decimal("not a number") == Decimal("0")
    assert coerce_decimal(1.5) == Decimal("1.5")


def test_round_money_half_up() -> None:
    assert round_money(Decimal("2.345")) == Decimal("2.35")
    assert round_money(Decimal("-2.345")) == Decimal("-2.35")
    assert round_money(None) == Decimal("0.00")
