"""Authentication context model for typed user authentication."""

from dataclasses import dataclass

from yardtrack.database.models.users import UserRole


@dataclass
class AuthenticatedUserContext:
    """Identity carried by a verified access token."""

    user_id: int
    email: str
    name: str
    role: UserRole
    status: str
    yard_id: int | None = None

    def __post_init__(self):
        """Ensure all required fields are present and valid."""
        if not self.user_id:
            raise ValueError("User id is required in authentication context")
        if not self.email:
            raise ValueError("Email is required in authentication context")
        self.role = UserRole(self.role)

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN
