"""Access token repository."""

from datetime import UTC, datetime

from bizdocs.models.access_token import PersonalAccessToken
from bizdocs.repositories.base import Repository


class AccessTokenRepository(Repository[PersonalAccessToken]):
    """Persistence for revocable bearer tokens."""

    model = PersonalAccessToken
    unique_fields = ("token_digest",)

    def find_by_digest(self, digest: str) -> PersonalAccessToken | None:
        return self._find_one_by("token_digest", digest)

    def touch(self, token: PersonalAccessToken) -> None:
        token.last_used_at = datetime.now(UTC)
        self._commit()

    def delete_for_user(self, user_id: int) -> int:
        deleted = (
            self.db.query(PersonalAccessToken)
            .filter(PersonalAccessToken.user_id == user_id)
            .delete(synchronize_session=False)
        )
        self._commit()
        return deleted
