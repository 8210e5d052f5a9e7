from typing import Optional
from yachtquote.schemas.base import ContractModel


class Tenant(ContractModel):
    id: str
    name: str
    smtp_host: Optional[str] = None
    smtp_port: Optional[int] = None
    smtp_user: Optional[str] = None
    smtp_pass: Optional[str] = None
    from_name: Optional[str] = None
    from_email: Optional[str] = None
    created_at: str
    updated_at: str


class CreateTenantRequest(ContractModel):
    id: str
    name: str
    smtp_host: Optional[str] = None
    smtp_port: Optional[int] = None
    smtp_user: Optional[str] = None
    smtp_pass: Optional[str] = None
    from_name: Optional[str] = None
    from_email: Optional[str] = None
