from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.domain.entities import InvoiceStatus


class FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class ProjectRules(FrozenModel):
    slug: str
    rules_version: str


class ListingRules(FrozenModel):
    path: str = Field(pattern=r"^/")


class FieldMessages(FrozenModel):
    customer_id: str
    amount: str
    amount_too_large: str
    status: str


class InvoiceFormRules(FrozenModel):
    # Each status must also pass the invoices.status CHECK constraint.
    statuses: tuple[InvoiceStatus, ...]
    field_messages: FieldMessages

    @field_validator("statuses")
    @classmethod
    def statuses_not_empty(cls, v: tuple[InvoiceStatus, ...]) -> tuple[InvoiceStatus, ...]:
        if not v:
            raise ValueError("at least one invoice status is required")
        if len(set(v)) != len(v):
            raise ValueError("invoice statuses must be unique")
        return v


class MessageRules(FrozenModel):
    create_invalid: str
    update_invalid: str
    create_failed: str
    update_failed: str
    delete_failed: str
    deleted: str


class InvoiceRules(FrozenModel):
    project: ProjectRules
    listing: ListingRules
    invoice_form: InvoiceFormRules
    messages: MessageRules
