from typing import Optional
from pydantic import EmailStr, Field
from yachtquote.schemas.base import ContractModel


class Lead(ContractModel):
    id: str
    tenant_id: str
    email: EmailStr
    name: Optional[str] = None
    notes: str
    party_size: int
    location: Optional[str] = None
    dates: Optional[str] = None
    budget: Optional[float] = None
    status: str
    created_at: str
    updated_at: str


class CreateLeadRequest(ContractModel):
    email: EmailStr
    name: Optional[str] = None
    notes: str
    party_size: int
    location: Optional[str] = None
    dates: Optional[str] = None
    budget: Optional[float] = None


class IngestEmailRequest(ContractModel):
    from_: EmailStr = Field(alias="from")
    subject: str
    body: str
    received_at: Optional[str] = None
