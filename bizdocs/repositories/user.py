"""User repository."""

from bizdocs.models.user import User
from bizdocs.repositories.access_token import AccessTokenRepository
from bizdocs.repositories.base import Repository


class UserRepository(Repository[User]):
    """Persistence for user accounts."""

    model = User
    unique_fields = ("email",)

    def find_by_username(self, username: str) -> User | None:
        return self._find_one_by("name", username)

    def find_by_email(self, email: str) -> User | None:
        return self._find_one_by("email", email)

    def delete_tokens(self, user: User) -> int:
        """Delete every access token issued to the user."""
        return AccessTokenRepository(self.db).delete_for_user(user.id)
