"""Settings for ledger queries and report generation."""

import os
from dataclasses import dataclass
from typing import Optional

import dotenv

from ledger_insights.domain.services.timeframe import normalize_timeframe_token
from ledger_insights.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class LedgerSettings:
    """Runtime settings for report generation.

    Attributes:
        query_timeout: Deadline in seconds for a batch of ledger reads.
        query_retries: Attempts per read on transient store failures.
        max_workers: Thread pool size for concurrent reads.
        default_timeframe: Timeframe used when the caller gives none.
        random_seed: Optional seed for the net worth projection.
        dashboard_user_id: User rendered by the CLI and Streamlit adapters.
    """

    query_timeout: float = 10.0
    query_retries: int = 3
    max_workers: int = 6
    default_timeframe: str = "30d"
    random_seed: Optional[int] = None
    dashboard_user_id: Optional[str] = None

    @classmethod
    def from_env(cls) -> "LedgerSettings":
        """Build settings from environment variables.

        Returns:
            LedgerSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        defaults = cls()
        raw_seed = os.getenv("LEDGER_RANDOM_SEED")
        return cls(
            query_timeout=cls._read_number(
                "LEDGER_QUERY_TIMEOUT", defaults.query_timeout, float, logger
            ),
            query_retries=cls._read_number(
                "LEDGER_QUERY_RETRIES", defaults.query_retries, int, logger
            ),
            max_workers=cls._read_number(
                "LEDGER_MAX_WORKERS", defaults.max_workers, int, logger
            ),
            default_timeframe=normalize_timeframe_token(
                os.getenv("LEDGER_DEFAULT_TIMEFRAME")
            ),
            random_seed=(
                cls._read_number("LEDGER_RANDOM_SEED", None, int, logger)
                if raw_seed
                else None
            ),
            dashboard_user_id=os.getenv("DASHBOARD_USER_ID") or None,
        )

    @staticmethod
    def _read_number(name: str, default, cast, logger):
        """Parse a numeric environment variable, keeping the default on error.

        Args:
            name: Environment variable name.
            default: Value used when missing or invalid.
            cast: ``int`` or ``float``.
            logger: Logger used for warnings.

        Returns:
            Parsed value or the default.
        """
        raw = os.getenv(name)
        if raw is None or not raw.strip():
            return default
        try:
            value = cast(raw.strip())
        except ValueError:
            logger.warning(f"Invalid value for {name}: {raw!r}; using {default}")
            return default
        if value is not None and value < 0:
            logger.warning(f"Negative value for {name}: {raw!r}; using {default}")
            return default
        return value


__all__ = ["LedgerSettings"]
