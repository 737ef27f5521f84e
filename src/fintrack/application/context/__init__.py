from fintrack.application.context.user_context import UserContext

__all__ = ["UserContext"]
