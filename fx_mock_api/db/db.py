from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import Engine, create_engine, select
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from fx_mock_api.db.models import Base, QuoteOrm

SEED_QUOTE = {
    "symbol": "USD",
    "offer": 150.50,
    "bid": 149.50,
    "last": 150.00,
    "low_price": 148.00,
    "high_price": 151.00,
    "open_price": 149.00,
    "close_price": 150.50,
}


def utc_now_iso() -> str:
    # millisecond precision, trailing Z
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def create_store_engine(url: str, echo: bool = False) -> Engine:
    if url in ("sqlite://", "sqlite:///:memory:"):
        # one shared connection, otherwise every pooled connection gets its own empty db
        return create_engine(
            url,
            echo=echo,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    if url.startswith("sqlite"):
        return create_engine(url, echo=echo, connect_args={"check_same_thread": False})
    return create_engine(url, echo=echo)


def init_db(engine: Engine, now: str | None = None) -> int | None:
    """Create tables and insert the seed quote when `quotes` is empty.

    Returns the id of the inserted seed quote, or None if quotes already existed.
    """
    Base.metadata.create_all(engine)
    factory: sessionmaker[Session] = sessionmaker(engine)
    with factory() as session:
        if session.scalars(select(QuoteOrm.id).limit(1)).first() is not None:
            return None
        row = QuoteOrm(timestamp=now or utc_now_iso(), **SEED_QUOTE)
        session.add(row)
        session.commit()
        print(f"[DB][seed_quote_inserted] id={row.id}", flush=True)
        return row.id
