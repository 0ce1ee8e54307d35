from typing import Optional


class UserNotFoundError(LookupError):
    """Raised when a user that must exist has no record for its email."""

    def __init__(self, email: Optional[str], message: str = "User not found"):
        super().__init__(message)
        self.email = email
        self.message = message
