from __future__ import annotations

import re
from typing import Any, Callable

from pydantic import ValidationError

from fx_mock_api.db.db import utc_now_iso
from fx_mock_api.db.repositories import OrderRepository, QuoteRepository
from fx_mock_api.errors import (
    InvalidIdentifierError,
    InvalidParameterError,
    MissingParameterError,
    QuoteNotFoundError,
)
from fx_mock_api.schemas.order import (
    SQLITE_INT_MAX,
    SQLITE_INT_MIN,
    OrderAccepted,
    OrderRecord,
    OrderRequest,
)

_UUID_RE = re.compile(
    r"^(?:[0-9a-f]{8}-[0-9a-f]{4}-[1-8][0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}"
    r"|00000000-0000-0000-0000-000000000000"
    r"|ffffffff-ffff-ffff-ffff-ffffffffffff)$",
    re.IGNORECASE,
)


def is_valid_order_id(value: Any) -> bool:
    return isinstance(value, str) and _UUID_RE.match(value) is not None


def _non_empty_str(value: Any) -> bool:
    return isinstance(value, str) and value != ""


def has_required_parameters(
    *,
    amount: Any,
    currency: Any,
    quote_id: Any,
    side: Any,
    valuta: Any,
) -> bool:
    # per-field rules differ on purpose: amount/valuta only need to be present
    # (0 passes), quote_id must be truthy (0 and "" count as missing)
    if amount is None:
        return False
    if not _non_empty_str(currency):
        return False
    if not quote_id:
        return False
    if not _non_empty_str(side):
        return False
    if valuta is None:
        return False
    return True


class OrderService:
    def __init__(
        self,
        quote_repository: QuoteRepository,
        order_repository: OrderRepository,
        clock: Callable[[], str] = utc_now_iso,
    ) -> None:
        self.quote_repository = quote_repository
        self.order_repository = order_repository
        self.clock = clock

    def create_order(
        self,
        order_id: Any,
        amount: Any,
        currency: Any,
        quote_id: Any,
        side: Any,
        valuta: Any,
    ) -> OrderAccepted:
        if not is_valid_order_id(order_id):
            raise InvalidIdentifierError()

        if not has_required_parameters(
            amount=amount,
            currency=currency,
            quote_id=quote_id,
            side=side,
            valuta=valuta,
        ):
            raise MissingParameterError()

        try:
            req = OrderRequest(
                amount=amount,
                currency=currency,
                quote_id=quote_id,
                side=side,
                valuta=valuta,
            )
        except ValidationError as exc:
            raise InvalidParameterError() from exc

        # ids outside the INTEGER column range can never have been stored
        if not SQLITE_INT_MIN <= req.quote_id <= SQLITE_INT_MAX:
            raise QuoteNotFoundError()
        if self.quote_repository.get(req.quote_id) is None:
            raise QuoteNotFoundError()

        record = OrderRecord(id=order_id, created_at=self.clock(), **req.model_dump())
        self.order_repository.create(record)
        return OrderAccepted()
