"""Placeholder analytics until the backend exposes a real endpoint."""

import asyncio

from models.analytics import AmountBucket, AnalyticsOverview, AnalyticsTrends


async def fetch_mock_analytics(delay: float = 0.08) -> AnalyticsOverview:
    """Return a fixed portfolio summary after a simulated network delay."""
    await asyncio.sleep(delay)

    return AnalyticsOverview(
        totalLoans=1234,
        totalDisbursedCents=4_520_000_000,  # KES 45,200,000.00
        totalClients=3456,
        defaultRatePercent=2.4,
        activeLoans=AmountBucket(count=856, amountCents=3_240_000_000),
        pendingApprovals=AmountBucket(count=142, amountCents=580_000_000),
        defaulted=AmountBucket(count=29, amountCents=120_000_000),
        trends=AnalyticsTrends(
            totalLoansChangePercent=12,
            totalDisbursedChangePercent=8,
            totalClientsChangePercent=5,
            defaultRateChangePercent=-0.3,
        ),
    )
