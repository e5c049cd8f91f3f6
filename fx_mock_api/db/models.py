from __future__ import annotations

from sqlalchemy import Float, Integer, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    pass


class QuoteOrm(Base):
    __tablename__ = "quotes"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    symbol: Mapped[str | None] = mapped_column(String)
    offer: Mapped[float | None] = mapped_column(Float)
    bid: Mapped[float | None] = mapped_column(Float)
    last: Mapped[float | None] = mapped_column(Float)
    timestamp: Mapped[str | None] = mapped_column(String, index=True)
    low_price: Mapped[float | None] = mapped_column("lowPrice", Float)
    high_price: Mapped[float | None] = mapped_column("highPrice", Float)
    open_price: Mapped[float | None] = mapped_column("openPrice", Float)
    close_price: Mapped[float | None] = mapped_column("closePrice", Float)


class OrderOrm(Base):
    __tablename__ = "orders"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    amount: Mapped[float | None] = mapped_column(Float)
    currency: Mapped[str | None] = mapped_column(String)
    quote_id: Mapped[int | None] = mapped_column("quoteId", Integer)
    side: Mapped[str | None] = mapped_column(String)
    valuta: Mapped[int | None] = mapped_column(Integer)
    created_at: Mapped[str | None] = mapped_column("createdAt", String)
