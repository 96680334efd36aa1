"""Structured action payloads the assistant can embed in its replies"""
from typing import Annotated, List, Literal, Optional, Union
from pydantic import BaseModel, ConfigDict, Field, field_validator


class TaskPayload(BaseModel):
    """Task suggested by the assistant"""
    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(min_length=1)
    description: str = ""
    due_date: Optional[str] = Field(None, alias="dueDate")
    priority: Literal["low", "medium", "high"] = "medium"
    status: Literal["todo", "in_progress", "done"] = "todo"

    @field_validator("priority", "status", mode="before")
    @classmethod
    def _normalize_case(cls, value):
        if isinstance(value, str):
            return value.strip().lower()
        return value


class ClientPayload(BaseModel):
    """Client record suggested by the assistant"""
    name: str = Field(min_length=1)
    email: Optional[str] = None
    phone: Optional[str] = None
    country: Optional[str] = None
    address: Optional[str] = None
    notes: Optional[str] = None


class CarrierPayload(BaseModel):
    """Carrier record suggested by the assistant"""
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(min_length=1)
    contact_person: Optional[str] = Field(None, alias="contactPerson")
    email: Optional[str] = None
    phone: Optional[str] = None
    service_type: Optional[str] = Field(None, alias="serviceType")  # Road|Air|Sea|Rail
    notes: Optional[str] = None


class InvoiceItem(BaseModel):
    description: str
    quantity: float = Field(gt=0)
    price: float = Field(ge=0)


class InvoicePayload(BaseModel):
    """Invoice draft suggested by the assistant"""
    model_config = ConfigDict(populate_by_name=True)

    client_name: str = Field(alias="clientName", min_length=1)
    items: List[InvoiceItem] = Field(min_length=1)
    total_amount: float = Field(alias="totalAmount", ge=0)
    date: str
    due_date: str = Field(alias="dueDate")


class CreateTaskAction(BaseModel):
    action: Literal["createTask"]
    task: TaskPayload

    @property
    def payload(self) -> TaskPayload:
        return self.task


class CreateClientAction(BaseModel):
    action: Literal["createClient"]
    client: ClientPayload

    @property
    def payload(self) -> ClientPayload:
        return self.client


class CreateCarrierAction(BaseModel):
    action: Literal["createCarrier"]
    carrier: CarrierPayload

    @property
    def payload(self) -> CarrierPayload:
        return self.carrier


class CreateInvoiceAction(BaseModel):
    action: Literal["createInvoice"]
    invoice: InvoicePayload

    @property
    def payload(self) -> InvoicePayload:
        return self.invoice


AssistantAction = Annotated[
    Union[CreateTaskAction, CreateClientAction, CreateCarrierAction, CreateInvoiceAction],
    Field(discriminator="action"),
]
