from fintrack.application.dtos.stats import (
    CategoryBreakdownItem,
    CategoryUsage,
    MonthlyStatsResult,
    MonthlyTrendResult,
    TrendPoint,
)

__all__ = [
    "CategoryBreakdownItem",
    "CategoryUsage",
    "MonthlyStatsResult",
    "MonthlyTrendResult",
    "TrendPoint",
]
