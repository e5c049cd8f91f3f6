from __future__ import annotations

import random
import threading

from fx_mock_api.db.repositories import QuoteRepository
from fx_mock_api.errors import NotFoundError
from fx_mock_api.schemas.quote import JITTERED_FIELDS, Quote


class QuoteCounter:
    """Process-wide response id sequence. In memory only; restarts at `start`."""

    def __init__(self, start: int = 1) -> None:
        self._lock = threading.Lock()
        self._next = start

    def next(self) -> int:
        with self._lock:
            value = self._next
            self._next += 1
            return value

    def peek(self) -> int:
        with self._lock:
            return self._next


def random_offset(rng: random.Random) -> int:
    return -1 if rng.random() < 0.5 else 1


class QuoteService:
    def __init__(
        self,
        quote_repository: QuoteRepository,
        counter: QuoteCounter | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.quote_repository = quote_repository
        self.counter = counter or QuoteCounter()
        self.rng = rng or random.Random()

    def get_latest_quote(self) -> Quote:
        row = self.quote_repository.latest()
        if row is None:
            raise NotFoundError()

        # derived view; the stored row is left untouched
        updates = {name: getattr(row, name) + random_offset(self.rng) for name in JITTERED_FIELDS}
        updates["id"] = self.counter.next()
        return row.model_copy(update=updates)
