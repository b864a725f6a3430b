import datetime
from typing import Literal

from pydantic import BaseModel, Field

# --- Enums / Literals ---
InvoiceStatus = Literal["pending", "paid"]

# --- Customers ---

class Customer(BaseModel):
    id: str
    name: str
    email: str
    image_url: str = ""

# --- Invoices ---

class Invoice(BaseModel):
    id: str
    customer_id: str
    amount: int = Field(ge=0)  # minor currency units (cents)
    status: InvoiceStatus
    date: datetime.date

class InvoiceListing(BaseModel):
    """Invoice row joined with its customer, as shown on the listing view."""

    id: str
    customer_id: str
    name: str
    email: str
    amount: int
    status: InvoiceStatus
    date: datetime.date
