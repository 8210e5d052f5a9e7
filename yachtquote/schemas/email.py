from typing import Optional, Union
from yachtquote.schemas.base import ContractModel


class EmailJob(ContractModel):
    tenant_id: str
    # system emails carry no lead
    lead_id: Optional[Union[str, int]] = None
    to: str
    cc: Optional[str] = None
    subject: str
    body: str
