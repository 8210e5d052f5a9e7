from typing import List, Optional, Tuple
from pydantic import Field
from yachtquote.schemas.base import ContractModel, FrozenContractModel
from yachtquote.schemas.yacht import Yacht


class LineItem(FrozenContractModel):
    label: str
    amount: float


class Quote(ContractModel):
    """Persisted quote: a flat projection of a QuoteBreakdown."""

    id: str
    tenant_id: str
    lead_id: Optional[str] = None
    yacht_id: str
    base_price: float
    apa: float
    vat: float
    extras: float
    total: float
    currency: str
    created_at: str
    updated_at: str


class CalculateQuoteRequest(ContractModel):
    yacht_id: str
    weeks: float = 1
    apa_pct: float = 25
    # None means "derive from the yacht's area"; an explicit 0 is kept as 0.
    vat_pct: Optional[float] = None
    gratuity_pct: float = 0
    delivery_fee: float = 0
    extras: List[LineItem] = Field(default_factory=list)


class QuoteBreakdown(FrozenContractModel):
    currency: str
    weeks: float
    base: float
    apa_pct: float
    apa_amount: int
    vat_pct: float
    vat_amount: int
    gratuity_pct: float
    gratuity_amount: int
    delivery_fee: float
    extras_total: float
    total: float
    breakdown: Tuple[LineItem, ...]


class YachtQuote(FrozenContractModel):
    yacht: Yacht
    quote: QuoteBreakdown
