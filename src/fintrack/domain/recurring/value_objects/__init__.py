from fintrack.domain.recurring.value_objects.frequency import Frequency

__all__ = ["Frequency"]
