"""
Invoice dashboard routes.

Form posts from the dashboard land here and are handed to the invoices
component. Successful create/update answer with a 303 redirect to the
listing; failures answer with the form state ``{errors?, message}``.
"""

from typing import Annotated, Any

from fastapi import APIRouter, Depends, Form, status
from fastapi.responses import JSONResponse, RedirectResponse
from pydantic import BaseModel

from src.adapters.clock import SystemClock
from src.adapters.navigation import RecordingNavigator
from src.adapters.page_cache import InMemoryPageCache
from src.adapters.sqlite.repos import SQLiteInvoiceRepo
from src.api.deps import get_clock, get_invoice_repo, get_mutation_config, get_page_cache
from src.components.invoices import (
    CreateInvoiceInput,
    DeleteInvoiceInput,
    InvoiceMutationConfig,
    MutationOutput,
    UpdateInvoiceInput,
    run_create,
    run_delete,
    run_update,
)
from src.domain.entities import InvoiceListing

router = APIRouter()


# --- Request/Response Models ---


class InvoiceListResponse(BaseModel):
    items: list[InvoiceListing]
    total: int


class FormStateResponse(BaseModel):
    message: str | None
    errors: dict[str, list[str]] | None = None


# --- Helpers ---


def _failure_response(result: MutationOutput) -> JSONResponse:
    """Validation problems are the client's to fix; anything else is ours."""
    code = status.HTTP_400_BAD_REQUEST if result.errors else status.HTTP_500_INTERNAL_SERVER_ERROR
    return JSONResponse(status_code=code, content=result.to_state())


def _navigate(navigator: RecordingNavigator, fallback: str) -> RedirectResponse:
    return RedirectResponse(
        url=navigator.location or fallback,
        status_code=status.HTTP_303_SEE_OTHER,
    )


# --- Routes ---


@router.get("", response_model=InvoiceListResponse)
def list_invoices(
    repo: SQLiteInvoiceRepo = Depends(get_invoice_repo),
    cache: InMemoryPageCache = Depends(get_page_cache),
    config: InvoiceMutationConfig = Depends(get_mutation_config),
) -> Any:
    """Invoice listing, served from the page cache until a mutation invalidates it."""
    cached = cache.get(config.listing_path)
    if cached is not None:
        return cached

    generation = cache.generation(config.listing_path)
    items = repo.list_with_customers()
    payload = InvoiceListResponse(items=items, total=len(items)).model_dump(mode="json")
    cache.put_if_fresh(config.listing_path, payload, generation)
    return payload


@router.post(
    "",
    responses={
        303: {"description": "Created; redirect to the listing"},
        400: {"model": FormStateResponse, "description": "Field validation errors"},
        500: {"model": FormStateResponse, "description": "Database error"},
    },
)
def create_invoice(
    customer_id: Annotated[str | None, Form(alias="customerId")] = None,
    amount: Annotated[str | None, Form()] = None,
    invoice_status: Annotated[str | None, Form(alias="status")] = None,
    repo: SQLiteInvoiceRepo = Depends(get_invoice_repo),
    cache: InMemoryPageCache = Depends(get_page_cache),
    clock: SystemClock = Depends(get_clock),
    config: InvoiceMutationConfig = Depends(get_mutation_config),
) -> Any:
    """Create an invoice from the dashboard form."""
    navigator = RecordingNavigator()
    result = run_create(
        CreateInvoiceInput(customer_id=customer_id, amount=amount, status=invoice_status),
        repo=repo,
        cache=cache,
        navigator=navigator,
        clock=clock,
        config=config,
    )
    if not result.success:
        return _failure_response(result)
    return _navigate(navigator, config.listing_path)


@router.post(
    "/{invoice_id}/edit",
    responses={
        303: {"description": "Updated; redirect to the listing"},
        400: {"model": FormStateResponse, "description": "Field validation errors"},
        500: {"model": FormStateResponse, "description": "Database error"},
    },
)
def update_invoice(
    invoice_id: str,
    customer_id: Annotated[str | None, Form(alias="customerId")] = None,
    amount: Annotated[str | None, Form()] = None,
    invoice_status: Annotated[str | None, Form(alias="status")] = None,
    repo: SQLiteInvoiceRepo = Depends(get_invoice_repo),
    cache: InMemoryPageCache = Depends(get_page_cache),
    config: InvoiceMutationConfig = Depends(get_mutation_config),
) -> Any:
    """Update an invoice from the edit form."""
    navigator = RecordingNavigator()
    result = run_update(
        UpdateInvoiceInput(
            invoice_id=invoice_id,
            customer_id=customer_id,
            amount=amount,
            status=invoice_status,
        ),
        repo=repo,
        cache=cache,
        navigator=navigator,
        config=config,
    )
    if not result.success:
        return _failure_response(result)
    return _navigate(navigator, config.listing_path)


@router.post(
    "/{invoice_id}/delete",
    response_model=FormStateResponse,
    responses={500: {"model": FormStateResponse, "description": "Database error"}},
)
def delete_invoice(
    invoice_id: str,
    repo: SQLiteInvoiceRepo = Depends(get_invoice_repo),
    cache: InMemoryPageCache = Depends(get_page_cache),
    config: InvoiceMutationConfig = Depends(get_mutation_config),
) -> Any:
    """Delete an invoice. The client stays on the current view."""
    result = run_delete(
        DeleteInvoiceInput(invoice_id=invoice_id),
        repo=repo,
        cache=cache,
        config=config,
    )
    if not result.success:
        return _failure_response(result)
    return result.to_state()
