import logging
from typing import Iterator, Optional

from fastapi import Depends, FastAPI, HTTPException, Query, Request
from fastapi.responses import JSONResponse

from stripe_invoices import config
from stripe_invoices.client import Client, get_client
from stripe_invoices.errors import (
    ApiError,
    ConfigurationError,
    DecodeError,
    EncodeError,
    MissingSecretKeyError,
    TransportError,
)
from stripe_invoices.invoices import (
    Invoice,
    InvoiceItem,
    InvoiceItemParams,
    InvoiceListParams,
    InvoiceParams,
)
from stripe_invoices.models import ListObject

logging.basicConfig(level=config.get_log_level())
logger = logging.getLogger(__name__)

app = FastAPI(title="Stripe Invoices API")


def stripe_client() -> Iterator[Client]:
    """
    Dependency that builds a Stripe client from the environment
    and closes its session once the request is done
    """
    try:
        client = get_client()
    except MissingSecretKeyError as e:
        logger.warning(f"Stripe client unavailable: {e}")
        raise HTTPException(status_code=401, detail="Not authenticated")
    try:
        yield client
    finally:
        client.close()


@app.exception_handler(ConfigurationError)
async def configuration_error_handler(request: Request, exc: ConfigurationError):
    logger.error(f"Stripe client misconfigured: {exc.message}")
    return JSONResponse(status_code=500, content={"error": {"message": exc.message}})


@app.exception_handler(ApiError)
async def api_error_handler(request: Request, exc: ApiError):
    return JSONResponse(status_code=exc.http_status, content=exc.to_dict())


@app.exception_handler(TransportError)
@app.exception_handler(DecodeError)
async def upstream_error_handler(request: Request, exc):
    logger.error(f"Stripe request for {request.url.path} failed: {exc.message}")
    return JSONResponse(status_code=502, content={"error": {"message": exc.message}})


@app.exception_handler(EncodeError)
async def encode_error_handler(request: Request, exc: EncodeError):
    return JSONResponse(status_code=400, content={"error": {"message": exc.message}})


@app.get("/")
def root():
    """
    Root endpoint that returns a welcome message
    """
    return {
        "message": "Welcome to Stripe Invoices API",
        "authenticated": bool(config.get_secret_key()),
    }


@app.post("/invoices/create", response_model=Invoice)
def create_invoice(params: InvoiceParams, client: Client = Depends(stripe_client)):
    """
    Endpoint to create a new invoice in Stripe
    """
    return Invoice.create(client, params)


@app.get("/invoices", response_model=ListObject[Invoice])
def list_invoices(
    limit: Optional[int] = Query(default=None, ge=0),
    customer: Optional[str] = None,
    client: Client = Depends(stripe_client),
):
    """
    Endpoint to list invoices, optionally for a single customer
    """
    return Invoice.list(client, InvoiceListParams(limit=limit, customer=customer))


@app.get("/invoices/{invoice_id}", response_model=Invoice)
def retrieve_invoice(invoice_id: str, client: Client = Depends(stripe_client)):
    return Invoice.retrieve(client, invoice_id)


@app.post("/invoices/{invoice_id}", response_model=Invoice)
def update_invoice(invoice_id: str, params: InvoiceParams, client: Client = Depends(stripe_client)):
    return Invoice.update(client, invoice_id, params)


@app.post("/invoices/{invoice_id}/pay", response_model=Invoice)
def pay_invoice(invoice_id: str, client: Client = Depends(stripe_client)):
    """
    Endpoint to pay an open invoice
    """
    return Invoice.pay(client, invoice_id)


@app.post("/invoiceitems/create", response_model=InvoiceItem)
def create_invoice_item(params: InvoiceItemParams, client: Client = Depends(stripe_client)):
    """
    Endpoint to add a line item to a customer's upcoming or draft invoice
    """
    return InvoiceItem.create(client, params)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=True)
