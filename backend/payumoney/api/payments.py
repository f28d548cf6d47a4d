"""
PayUMoney API Endpoints

Checkout, processor callback and status query.

Flow:
- POST /checkout returns an HTML page that auto-posts the signed form to PayU
- PayU redirects the browser back to POST /response (surl/furl)
- POST /status/{txnid} asks PayU directly when the callback never arrived
"""
from html import escape
from typing import Any, Dict, Iterator

from fastapi import APIRouter, Body, Depends, Request
from fastapi.responses import HTMLResponse
import logging

from ..config import Settings, get_settings
from ..models.payments import PaymentRedirect
from ..services.gateway import PayUMoneyGateway

logger = logging.getLogger(__name__)

router = APIRouter()


def get_gateway(settings: Settings = Depends(get_settings)) -> Iterator[PayUMoneyGateway]:
    """One gateway per HTTP request, so every checkout gets its own txnid."""
    gateway = PayUMoneyGateway(settings)
    try:
        yield gateway
    finally:
        gateway.close()


def render_redirect_form(redirect: PaymentRedirect) -> str:
    """
    Render a page whose form posts itself to PayU on load.

    Every parameter becomes a hidden input, plus the request hash.
    """
    fields = {**redirect.parameters, "hash": redirect.hash}
    inputs = "\n".join(
        f'    <input type="hidden" name="{escape(str(name))}" value="{escape("" if value is None else str(value))}">'
        for name, value in fields.items()
    )
    return (
        "<!DOCTYPE html>\n"
        "<html>\n"
        "<head><title>Redirecting to PayUMoney</title></head>\n"
        '<body onload="document.forms[\'payumoney\'].submit()">\n'
        f'  <form name="payumoney" method="post" action="{escape(redirect.end_point)}">\n'
        f"{inputs}\n"
        '    <noscript><button type="submit">Continue to payment</button></noscript>\n'
        "  </form>\n"
        "</body>\n"
        "</html>\n"
    )


@router.post("/checkout", response_class=HTMLResponse)
async def checkout(
    parameters: Dict[str, Any] = Body(..., description="Payment fields (amount, firstname, email, ...)"),
    gateway: PayUMoneyGateway = Depends(get_gateway)
) -> HTMLResponse:
    """
    Sign a payment request and hand the browser off to PayU.

    Request Body:
        {
            "amount": "100.00",
            "productinfo": str,
            "firstname": str,
            "email": str,
            "phone": str,
            "udf1": str  # optional, udf1..udf10
        }

    Returns:
        HTML page with an auto-submitting form

    Errors:
        422 payu:request:parameters_missing
    """
    redirect = gateway.request(parameters).send()
    return HTMLResponse(content=render_redirect_form(redirect))


@router.post("/response")
async def payment_response(
    request: Request,
    gateway: PayUMoneyGateway = Depends(get_gateway)
) -> Dict[str, Any]:
    """
    Handle the success/failure redirect from PayU.

    The posted fields are only returned once their hash checks out;
    a mismatch becomes a 400 payu:response:hash_mismatch.
    """
    form = await request.form()
    data = {name: value for name, value in form.items() if isinstance(value, str)}

    response = gateway.response(data)

    return {
        "verified": True,
        "txnid": response.get("txnid"),
        "status": response.get("status"),
        "response": response,
    }


@router.post("/status/{txnid}")
def payment_status(
    txnid: str,
    gateway: PayUMoneyGateway = Depends(get_gateway)
) -> Dict[str, Any]:
    """
    Ask PayU for the stored result of a transaction.

    Errors:
        502 payu:verify:request_failed
    """
    logger.info(f"Status query requested for txnid {txnid}")
    result = gateway.verify({"txnid": txnid})
    return {"txnid": txnid, "result": result}
