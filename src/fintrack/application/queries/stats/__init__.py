from fintrack.application.queries.stats.monthly_stats_query import (
    MonthlyStatsQuery,
    percentage_of,
    start_of_week,
)
from fintrack.application.queries.stats.monthly_trend_query import MonthlyTrendQuery

__all__ = [
    "MonthlyStatsQuery",
    "MonthlyTrendQuery",
    "percentage_of",
    "start_of_week",
]
