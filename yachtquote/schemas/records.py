from typing import Optional
from yachtquote.schemas.base import ContractModel
from yachtquote.core.enums import DeadLetterType


class Event(ContractModel):
    id: str
    tenant_id: str
    type: str
    entity_id: Optional[str] = None
    payload: str
    created_at: str


class AuditLog(ContractModel):
    id: str
    tenant_id: str
    user_id: Optional[str] = None
    action: str
    resource: str
    resource_id: Optional[str] = None
    old_values: Optional[str] = None
    new_values: Optional[str] = None
    ip_address: Optional[str] = None
    user_agent: Optional[str] = None
    created_at: str


class DeadLetter(ContractModel):
    id: str
    tenant_id: str
    type: DeadLetterType
    payload: str
    error: str
    attempts: int
    last_attempt: str
    created_at: str


class MailLog(ContractModel):
    id: str
    tenant_id: str
    lead_id: Optional[str] = None
    to_email: str
    cc: Optional[str] = None
    subject: str
    sent: bool
    error: Optional[str] = None
    created_at: str


class IdempotencyKey(ContractModel):
    key: str
    tenant_id: str
    resource: str
    resource_id: str
    response: str
    expires_at: str
    created_at: str


class Migration(ContractModel):
    version: int
    name: str
    executed_at: str
