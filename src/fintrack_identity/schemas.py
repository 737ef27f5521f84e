"""Identity data structures."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class TokenPayload:
    """Decoded JWT token payload.

    Attributes
    ----------
    user_id
        The unique identifier of the user
    email
        The user's email address
    exp
        Token expiration timestamp
    token_type
        Token purpose, currently always "access"
    """

    user_id: UUID
    email: str
    exp: datetime
    token_type: str

    def is_expired(self) -> bool:
        return datetime.now(tz=self.exp.tzinfo) > self.exp

    def is_access_token(self) -> bool:
        return self.token_type == "access"
