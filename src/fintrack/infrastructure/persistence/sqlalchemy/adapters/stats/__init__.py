from fintrack.infrastructure.persistence.sqlalchemy.adapters.stats.sqlalchemy_stats_read_adapter import (  # NOQA: E501
    SqlAlchemyStatsReadAdapter,
)

__all__ = ["SqlAlchemyStatsReadAdapter"]
