from fintrack.domain.recurring.services.recurrence_calculator import (
    compute_next_run,
    recurrence_step,
)

__all__ = ["compute_next_run", "recurrence_step"]
