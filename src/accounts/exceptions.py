"""Errors raised by the auth service."""


class AccountError(Exception):
    """Base class for account errors."""


class DuplicateUser(AccountError):
    """An account with this email already exists."""

    def __init__(self, email: str):
        self.email = email
        super().__init__("User already exists")


class InvalidCredentials(AccountError):
    """Unknown email or wrong password."""

    def __init__(self):
        super().__init__("Invalid credentials")


class UserNotFound(AccountError):
    def __init__(self, user_id: str):
        self.user_id = user_id
        super().__init__(f"User {user_id} not found")
