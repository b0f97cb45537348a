"""User domain entity and its validation rule."""

from dataclasses import dataclass


class UserValidationError(ValueError):
    """Raised when a user fails domain validation."""

    pass


@dataclass
class UserData:
    """A user as seen by the service and repository layers.

    ``id`` is 0 until the store assigns one on create.
    """

    name: str
    email: str
    id: int = 0

    def validate(self) -> None:
        # Only emptiness is checked; email format and uniqueness are not enforced.
        if self.name == "":
            raise UserValidationError("name is required")
        if self.email == "":
            raise UserValidationError("email is required")
