"""Domain normalization helpers."""

from ledger_insights.domain.constants import OTHER_LABEL


def normalize_label(value: str | None, fallback: str = OTHER_LABEL) -> str:
    """Normalize a grouping label, substituting the sentinel when blank.

    Args:
        value: Raw category or merchant label.
        fallback: Label used when the value is missing or blank.

    Returns:
        str: Cleaned label.
    """
    if not value:
        return fallback
    cleaned = value.strip()
    return cleaned if cleaned else fallback


def normalize_optional_label(value: str | None) -> str | None:
    """Strip a label, returning None when nothing remains."""
    if not value:
        return None
    cleaned = value.strip()
    return cleaned or None


def normalize_account_type(account_type: str | None) -> str:
    """Lower-case an account type for comparisons."""
    if not account_type:
        return ""
    return account_type.strip().lower()


__all__ = [
    "normalize_label",
    "normalize_optional_label",
    "normalize_account_type",
]
