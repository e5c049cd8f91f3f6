from typing import Any

from fastapi import APIRouter, Body, Depends, Request

from fx_mock_api.api.auth import require_credentials

router = APIRouter()


@router.get('/quote')
def get_quote(request: Request):
    service = request.app.state.quote_service
    return service.get_latest_quote().model_dump(by_alias=True)


@router.put('/order/{order_id}', status_code=201, dependencies=[Depends(require_credentials)])
def put_order(order_id: str, request: Request, body: Any = Body(default=None)):
    payload = body if isinstance(body, dict) else {}
    service = request.app.state.order_service
    accepted = service.create_order(
        order_id,
        amount=payload.get('amount'),
        currency=payload.get('currency'),
        quote_id=payload.get('quoteId'),
        side=payload.get('side'),
        valuta=payload.get('valuta'),
    )
    return accepted.model_dump()
