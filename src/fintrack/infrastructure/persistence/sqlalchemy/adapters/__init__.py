from fintrack.infrastructure.persistence.sqlalchemy.adapters.stats import (
    SqlAlchemyStatsReadAdapter,
)

__all__ = ["SqlAlchemyStatsReadAdapter"]
