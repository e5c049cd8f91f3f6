from __future__ import annotations

from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.orm import sessionmaker

from fx_mock_api.api.routes import router
from fx_mock_api.config.settings import Settings, get_settings
from fx_mock_api.db.db import create_store_engine, init_db
from fx_mock_api.db.repositories import OrderRepository, QuoteRepository
from fx_mock_api.errors import InvalidParameterError, MockApiError
from fx_mock_api.services.order_service import OrderService
from fx_mock_api.services.quote_service import QuoteCounter, QuoteService


def _bind_services(app: FastAPI, session_factory: sessionmaker) -> None:
    quote_repository = QuoteRepository(session_factory)
    order_repository = OrderRepository(session_factory)
    app.state.quote_repository = quote_repository
    app.state.order_repository = order_repository
    app.state.quote_service = QuoteService(quote_repository, counter=app.state.quote_counter)
    app.state.order_service = OrderService(quote_repository, order_repository)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = app.state.get_settings()
    engine = create_store_engine(settings.DATABASE_URL)
    print(f"[DB][connected] url={settings.DATABASE_URL}", flush=True)
    try:
        init_db(engine)
        _bind_services(app, sessionmaker(engine))
        yield
    finally:
        engine.dispose()
        print("[DB][disposed]", flush=True)


async def _mock_api_error_handler(request: Request, exc: MockApiError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={'error': exc.message})


async def _request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(status_code=400, content={'error': InvalidParameterError.default_message})


def create_app(settings: Settings | None = None) -> FastAPI:
    app = FastAPI(title="Mock FX Quote API", version="0.1.0", lifespan=lifespan)
    app.include_router(router, prefix="/v1")
    app.add_exception_handler(MockApiError, _mock_api_error_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)

    # NOTE: lazy-loaded so app import does not require env during tests.
    app.state.get_settings = (lambda: settings) if settings is not None else get_settings
    app.state.quote_counter = QuoteCounter()
    return app


app = create_app()


def main() -> None:
    settings = get_settings()
    print(f"[HTTP][server_start] host={settings.HOST} port={settings.PORT}", flush=True)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
