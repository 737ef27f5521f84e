"""Stats router for the dashboard."""

from fastapi import APIRouter

from fintrack.application.queries.stats import MonthlyStatsQuery, MonthlyTrendQuery
from fintrack.presentation.api.dependencies import RepoFactory
from fintrack.presentation.api.schemas.stats import (
    CategoryBreakdownResponse,
    MonthlySummary,
    StatsResponse,
    TransactionCounts,
    TrendPointResponse,
    TrendResponse,
    WeeklySummary,
)

router = APIRouter()


@router.get("", summary="Current month budget and category breakdown")
async def get_stats(factory: RepoFactory) -> StatsResponse:
    result = await MonthlyStatsQuery.from_factory(factory).execute()
    return StatsResponse(
        monthly=MonthlySummary(
            income=result.income,
            expenses=result.expenses,
            available=result.available,
            spent_percentage=result.spent_percentage,
            transaction_count=TransactionCounts(
                income=result.income_count,
                expenses=result.expense_count,
            ),
        ),
        weekly=WeeklySummary(expenses=result.weekly_expenses),
        categories=[
            CategoryBreakdownResponse(
                category=item.category,
                amount=item.amount,
                count=item.count,
                percentage=item.percentage,
            )
            for item in result.categories
        ],
    )


@router.get("/trend", summary="Monthly income and expenses, last six months")
async def get_trend(factory: RepoFactory) -> TrendResponse:
    result = await MonthlyTrendQuery.from_factory(factory).execute()
    return TrendResponse(
        trend=[
            TrendPointResponse(
                month=point.month,
                income=point.income,
                expenses=point.expenses,
                savings=point.savings,
            )
            for point in result.trend
        ],
    )
