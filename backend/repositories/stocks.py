"""
Stock repository backed by SQLAlchemy.

Increments and decrements are single conditional UPDATE statements, so the
bound check and the write happen atomically in the database.
"""
from typing import Optional
from sqlalchemy import update
from sqlalchemy.orm import Session

from domain.models import Stock
from repositories.base import ResourceRepository
from repositories.models import StockORM


class StocksRepository(ResourceRepository[Stock]):
    """CRUD operations for stocks, one stock per media."""

    orm_class = StockORM
    natural_key = ("media_id",)

    def to_domain(self, orm: StockORM) -> Stock:
        return Stock(
            id=orm.id,
            media_id=orm.media_id,
            initial_stock=orm.initial_stock,
            current_stock=orm.current_stock,
        )

    def to_columns(self, stock: Stock) -> dict:
        return {
            "media_id": stock.media_id,
            "initial_stock": stock.initial_stock,
            "current_stock": stock.current_stock,
        }

    def increment(self, session: Session, stock_id: int) -> Optional[Stock]:
        """Add one copy unless the stock is already full.

        Returns the updated stock, or None when the row is missing or full.
        """
        stmt = (
            update(StockORM)
            .where(StockORM.id == stock_id, StockORM.current_stock < StockORM.initial_stock)
            .values(current_stock=StockORM.current_stock + 1)
        )
        return self._adjust(session, stock_id, stmt)

    def decrement(self, session: Session, stock_id: int) -> Optional[Stock]:
        """Remove one copy unless the stock is already empty.

        Returns the updated stock, or None when the row is missing or empty.
        """
        stmt = (
            update(StockORM)
            .where(StockORM.id == stock_id, StockORM.current_stock > 0)
            .values(current_stock=StockORM.current_stock - 1)
        )
        return self._adjust(session, stock_id, stmt)

    def _adjust(self, session: Session, stock_id: int, stmt) -> Optional[Stock]:
        result = session.execute(stmt.execution_options(synchronize_session=False))
        session.commit()
        if result.rowcount != 1:
            return None
        return self.get(session, stock_id)
