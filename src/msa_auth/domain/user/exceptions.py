"""User domain exceptions."""


class InvalidUserError(ValueError):
    """Raised when a User would be constructed with invalid field values."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class UserAlreadyExistsError(Exception):
    """A store rejected a user because its username or email is taken.

    ``field`` is either ``"username"`` or ``"email"``.
    """

    USERNAME = "username"
    EMAIL = "email"

    def __init__(self, field: str, value: str | None = None) -> None:
        self.field = field
        self.value = value
        super().__init__(f"User with this {field} already exists")


class UserIdAlreadyAssignedError(Exception):
    """The identity of a persisted user cannot change."""

    def __init__(self, user_id: int) -> None:
        self.user_id = user_id
        super().__init__(f"User already has id {user_id}")
