from fintrack.application.ports.stats_read_port import LedgerRow, StatsReadPort
from fintrack.application.ports.unit_of_work import UnitOfWork

__all__ = ["LedgerRow", "StatsReadPort", "UnitOfWork"]
