from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from fx_mock_api.db.models import OrderOrm, QuoteOrm
from fx_mock_api.errors import OrderConflictError, StoreError
from fx_mock_api.schemas.order import OrderRecord
from fx_mock_api.schemas.quote import Quote


def _driver_message(exc: Exception) -> str:
    orig = getattr(exc, "orig", None)
    return str(orig) if orig is not None else str(exc)


class QuoteRepository:
    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory

    def latest(self) -> Quote | None:
        stmt = select(QuoteOrm).order_by(QuoteOrm.timestamp.desc()).limit(1)
        try:
            with self._session_factory() as session:
                row = session.scalars(stmt).first()
                return self._to_schema(row) if row is not None else None
        except (SQLAlchemyError, OverflowError) as exc:
            raise StoreError(_driver_message(exc)) from exc

    def get(self, quote_id: int) -> Quote | None:
        try:
            with self._session_factory() as session:
                row = session.get(QuoteOrm, quote_id)
                return self._to_schema(row) if row is not None else None
        except (SQLAlchemyError, OverflowError) as exc:
            raise StoreError(_driver_message(exc)) from exc

    def create(
        self,
        *,
        symbol: str,
        offer: float,
        bid: float,
        last: float,
        timestamp: str,
        low_price: float,
        high_price: float,
        open_price: float,
        close_price: float,
    ) -> Quote:
        row = QuoteOrm(
            symbol=symbol,
            offer=offer,
            bid=bid,
            last=last,
            timestamp=timestamp,
            low_price=low_price,
            high_price=high_price,
            open_price=open_price,
            close_price=close_price,
        )
        try:
            with self._session_factory() as session:
                session.add(row)
                session.commit()
                session.refresh(row)
                return self._to_schema(row)
        except (SQLAlchemyError, OverflowError) as exc:
            raise StoreError(_driver_message(exc)) from exc

    @staticmethod
    def _to_schema(row: QuoteOrm) -> Quote:
        return Quote(
            id=row.id,
            symbol=row.symbol,
            offer=row.offer,
            bid=row.bid,
            last=row.last,
            timestamp=row.timestamp,
            low_price=row.low_price,
            high_price=row.high_price,
            open_price=row.open_price,
            close_price=row.close_price,
        )


class OrderRepository:
    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory

    def create(self, record: OrderRecord) -> OrderRecord:
        row = OrderOrm(
            id=record.id,
            amount=record.amount,
            currency=record.currency,
            quote_id=record.quote_id,
            side=record.side,
            valuta=record.valuta,
            created_at=record.created_at,
        )
        try:
            with self._session_factory() as session:
                session.add(row)
                session.commit()
        except IntegrityError as exc:
            # primary key on orders.id is the only duplicate-submission guard
            raise OrderConflictError(_driver_message(exc)) from exc
        except (SQLAlchemyError, OverflowError) as exc:
            raise StoreError(_driver_message(exc)) from exc
        return record

    def get(self, order_id: str) -> OrderRecord | None:
        try:
            with self._session_factory() as session:
                row = session.get(OrderOrm, order_id)
                if row is None:
                    return None
                return OrderRecord(
                    id=row.id,
                    amount=row.amount,
                    currency=row.currency,
                    quote_id=row.quote_id,
                    side=row.side,
                    valuta=row.valuta,
                    created_at=row.created_at,
                )
        except (SQLAlchemyError, OverflowError) as exc:
            raise StoreError(_driver_message(exc)) from exc
