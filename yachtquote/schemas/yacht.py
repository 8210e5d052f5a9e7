from typing import Optional
from pydantic import Field
from yachtquote.schemas.base import ContractModel, FrozenContractModel


class Yacht(ContractModel):
    id: str
    tenant_id: str
    name: str
    builder: str
    type: str
    length: float
    area: str
    cabins: int
    guests: int
    weekly_rate: float
    currency: str
    created_at: str
    updated_at: str


class SearchYachtsRequest(ContractModel):
    area: Optional[str] = None
    q: Optional[str] = None
    type: Optional[str] = None
    guests: Optional[int] = None
    strict_guests: bool = True
    min_length: Optional[float] = None
    max_length: Optional[float] = None
    max_price: Optional[float] = None
    limit: int = Field(20, ge=1, le=50)
    offset: int = Field(0, ge=0)


class MatchResult(FrozenContractModel):
    yacht: Yacht
    score: float
