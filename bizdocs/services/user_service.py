"""User account operations."""

import logging
from contextlib import ExitStack

from sqlalchemy.orm import Session

from bizdocs.exceptions import NotFound
from bizdocs.models.user import User
from bizdocs.repositories.company import CompanyRepository
from bizdocs.repositories.user import UserRepository
from bizdocs.schemas.user import UserRegister, UserUpdate
from bizdocs.services.file_service import FileService
from bizdocs.services.locks import company_locks
from bizdocs.services.security import get_password_hash
from bizdocs.services.storage import ObjectStorage

logger = logging.getLogger(__name__)


class UserService:
    """Registration, lookup and self-service changes to accounts."""

    def __init__(self, db: Session, storage: ObjectStorage):
        self.db = db
        self.storage = storage
        self.users = UserRepository(db)

    def register(self, data: UserRegister) -> User:
        user = self.users.create(
            {
                "name": data.name,
                "email": data.email,
                "password_hash": get_password_hash(data.password),
            }
        )
        logger.info(f"Registered user {user.id}")
        return user

    def find_by_id(self, user_id: int) -> User:
        user = self.users.find_by_id(user_id)
        if user is None:
            raise NotFound("User")
        return user

    def update(self, user_id: int, data: UserUpdate, caller: User) -> User:
        """Merge the sent fields into the caller's own account."""
        user = self._self_only(user_id, caller)
        changes = data.model_dump(exclude_unset=True, exclude_none=True)
        if "password" in changes:
            changes["password_hash"] = get_password_hash(changes.pop("password"))
        if changes:
            self.users.update(user_id, changes)
            self.db.refresh(user)
        return user

    def delete(self, user_id: int, caller: User) -> bool:
        """Delete the caller's account, its companies, files and blobs."""
        self._self_only(user_id, caller)
        files = FileService(self.db, self.storage)
        company_ids = [c.id for c in CompanyRepository(self.db).find_all_by_user_id(user_id)]
        with ExitStack() as held:
            # Uploads into these companies wait until the account row is gone.
            for company_id in sorted(company_ids):
                held.enter_context(company_locks.hold(company_id))
            for company_id in company_ids:
                files.delete_all_for_company(company_id)
            deleted = self.users.delete(user_id)
        logger.info(f"User {user_id} deleted")
        return deleted

    def find_by_username(self, username: str) -> User:
        user = self.users.find_by_username(username)
        if user is None:
            raise NotFound("User")
        return user

    def find_by_email(self, email: str) -> User:
        user = self.users.find_by_email(email)
        if user is None:
            raise NotFound("User")
        return user

    @staticmethod
    def _self_only(user_id: int, caller: User) -> User:
        # Other accounts are reported as missing rather than forbidden.
        if user_id != caller.id:
            raise NotFound("User")
        return caller
