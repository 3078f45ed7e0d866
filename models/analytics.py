"""Analytics overview models."""

from pydantic import BaseModel


class AmountBucket(BaseModel):
    """Loan count with its total amount in cents."""
    count: int
    amountCents: int


class AnalyticsTrends(BaseModel):
    totalLoansChangePercent: float
    totalDisbursedChangePercent: float
    totalClientsChangePercent: float
    defaultRateChangePercent: float


class AnalyticsOverview(BaseModel):
    """Portfolio summary shown on the analytics page."""
    totalLoans: int
    totalDisbursedCents: int
    totalClients: int
    defaultRatePercent: float
    activeLoans: AmountBucket
    pendingApprovals: AmountBucket
    defaulted: AmountBucket
    trends: AnalyticsTrends
