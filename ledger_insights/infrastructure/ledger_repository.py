"""SQLAlchemy-backed ledger store."""

from datetime import date, datetime, time
from decimal import Decimal

from sqlalchemy import bindparam, text
from sqlalchemy.exc import SQLAlchemyError

from ledger_insights.application.ports.database import DatabaseEnginePort
from ledger_insights.application.ports.ledger_store import LedgerStorePort
from ledger_insights.domain.errors import StoreFailure
from ledger_insights.domain.models import (
    Account,
    AmountDirection,
    DateRange,
    NetWorthSnapshot,
    Transaction,
    TransactionFilters,
)
from ledger_insights.utils.decimal_utils import coerce_decimal

_DIRECTION_CLAUSES = {
    "income": "t.amount > 0",
    "expense": "t.amount < 0",
}


class SqlAlchemyLedgerStore(LedgerStorePort):
    """Ledger store reading the accounts and transactions tables."""

    def __init__(
        self,
        db_port: DatabaseEnginePort,
        statement_timeout_ms: int | None = None,
    ) -> None:
        """Initialize the store.

        Args:
            db_port: Port providing access to the ledger engine.
            statement_timeout_ms: Optional server-side limit for each read.
                Applied on PostgreSQL only; other dialects run unbounded.
        """
        self._db_port = db_port
        self._statement_timeout_ms = statement_timeout_ms

    def get_active_accounts(self, user_id: str) -> list[Account]:
        query = text(
            """
            SELECT id, user_id, account_name, account_type,
                   current_balance, is_active
            FROM accounts
            WHERE user_id = :user_id AND is_active = TRUE
            ORDER BY account_type, account_name
            """
        )
        rows = self._fetch_all(query, {"user_id": user_id})
        return [
            Account(
                account_id=str(row.id),
                user_id=str(row.user_id),
                name=row.account_name,
                account_type=(row.account_type or "").lower(),
                current_balance=coerce_decimal(row.current_balance),
                is_active=bool(row.is_active),
            )
            for row in rows
        ]

    def get_transactions(
        self,
        user_id: str,
        date_range: DateRange | None = None,
        filters: TransactionFilters | None = None,
    ) -> list[Transaction]:
        query, params = self._build_transactions_query(
            user_id, date_range, filters
        )
        rows = self._fetch_all(query, params)
        return [
            Transaction(
                transaction_id=str(row.id),
                account_id=str(row.account_id),
                amount=coerce_decimal(row.amount),
                occurred_at=_to_datetime(row.date),
                category=row.category_primary,
                merchant=row.merchant_name,
                description=row.name,
            )
            for row in rows
        ]

    def sum_transactions(
        self,
        account_ids: list[str],
        date_range: DateRange,
        direction: AmountDirection | None = None,
    ) -> Decimal:
        if not account_ids:
            return Decimal("0")
        sql = """
            SELECT COALESCE(SUM(t.amount), 0) AS total
            FROM transactions t
            JOIN accounts a ON a.id = t.account_id
            WHERE t.account_id IN :account_ids
              AND a.is_active = TRUE
              AND t.date >= :start_date
              AND t.date < :end_date
            """
        if direction in _DIRECTION_CLAUSES:
            sql += f" AND {_DIRECTION_CLAUSES[direction]}"
        query = text(sql).bindparams(bindparam("account_ids", expanding=True))
        params = {
            "account_ids": list(account_ids),
            "start_date": date_range.start,
            "end_date": date_range.end,
        }
        rows = self._fetch_all(query, params)
        if not rows:
            return Decimal("0")
        return coerce_decimal(rows[0].total)

    def get_net_worth_snapshots(
        self,
        user_id: str,
        date_range: DateRange,
    ) -> list[NetWorthSnapshot]:
        query = text(
            """
            SELECT snapshot_date, total_assets, total_liabilities, net_worth
            FROM net_worth_snapshots
            WHERE user_id = :user_id
              AND snapshot_date >= :start_date
              AND snapshot_date <= :end_date
            ORDER BY snapshot_date
            """
        )
        params = {
            "user_id": user_id,
            "start_date": date_range.start.date(),
            "end_date": date_range.end.date(),
        }
        rows = self._fetch_all(query, params)
        return [
            NetWorthSnapshot(
                snapshot_date=_to_date(row.snapshot_date),
                total_assets=coerce_decimal(row.total_assets),
                total_liabilities=coerce_decimal(row.total_liabilities),
                net_worth=coerce_decimal(row.net_worth),
            )
            for row in rows
        ]

    def _fetch_all(self, query, params: dict) -> list:
        engine = self._db_port.get_ledger_engine()
        try:
            with engine.connect() as conn:
                self._apply_statement_timeout(conn, engine)
                return conn.execute(query, params).all()
        except SQLAlchemyError as exc:
            raise StoreFailure(f"Ledger query failed: {exc}") from exc

    def _apply_statement_timeout(self, conn, engine) -> None:
        if not self._statement_timeout_ms:
            return
        if engine.dialect.name != "postgresql":
            return
        # SET LOCAL lasts until the implicit transaction of this read ends.
        conn.exec_driver_sql(
            f"SET LOCAL statement_timeout = {int(self._statement_timeout_ms)}"
        )

    @staticmethod
    def _build_transactions_query(
        user_id: str,
        date_range: DateRange | None,
        filters: TransactionFilters | None,
    ):
        filters = filters or TransactionFilters()
        clauses = ["a.user_id = :user_id", "a.is_active = TRUE"]
        params: dict = {"user_id": user_id}
        expanding = []

        if date_range is not None:
            clauses.append("t.date >= :start_date")
            clauses.append("t.date < :end_date")
            params["start_date"] = date_range.start
            params["end_date"] = date_range.end
        if filters.account_ids:
            clauses.append("t.account_id IN :account_ids")
            params["account_ids"] = list(filters.account_ids)
            expanding.append(bindparam("account_ids", expanding=True))
        if filters.category:
            clauses.append("t.category_primary = :category")
            params["category"] = filters.category
        if filters.direction in _DIRECTION_CLAUSES:
            clauses.append(_DIRECTION_CLAUSES[filters.direction])
        if filters.search:
            clauses.append(
                "(LOWER(t.name) LIKE :search "
                "OR LOWER(COALESCE(t.merchant_name, '')) LIKE :search "
                "OR LOWER(COALESCE(t.category_primary, '')) LIKE :search)"
            )
            params["search"] = f"%{filters.search.lower()}%"

        sql = (
            "SELECT t.id, t.account_id, t.amount, t.date, t.name, "
            "t.category_primary, t.merchant_name "
            "FROM transactions t "
            "JOIN accounts a ON a.id = t.account_id "
            f"WHERE {' AND '.join(clauses)} "
            "ORDER BY t.date DESC, t.id DESC"
        )
        if filters.limit is not None and filters.limit > 0:
            sql += " LIMIT :limit"
            params["limit"] = int(filters.limit)
        query = text(sql)
        if expanding:
            query = query.bindparams(*expanding)
        return query, params


def _to_datetime(value) -> datetime:
    if isinstance(value, datetime):
        return value
    return datetime.combine(value, time.min)


def _to_date(value) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value


__all__ = ["SqlAlchemyLedgerStore"]
