"""Authentication session management: login, token checks and logout."""

import logging

from sqlalchemy.orm import Session

from bizdocs.exceptions import AuthenticationFailure
from bizdocs.models.user import User
from bizdocs.repositories.access_token import AccessTokenRepository
from bizdocs.repositories.user import UserRepository
from bizdocs.services.security import (
    create_access_token,
    decode_access_token,
    new_token_id,
    token_digest,
    token_expiry,
    verify_password,
)

logger = logging.getLogger(__name__)

FAILED_LOGIN_MESSAGE = "These credentials do not match our records."


class AuthService:
    """Issues, checks and revokes bearer tokens.

    Every token is a signed JWT whose ``jti`` must still have a row in
    ``personal_access_tokens``; deleting the rows revokes the tokens on the
    very next request.
    """

    def __init__(self, db: Session):
        self.db = db
        self.users = UserRepository(db)
        self.tokens = AccessTokenRepository(db)

    def login(self, email: str, password: str) -> str:
        """Check credentials and mint a new token.

        Unknown email and wrong password fail identically. Existing tokens of
        the user are left alone, so several sessions can be live at once.
        """
        user = self.users.find_by_email(email)
        if user is None or not verify_password(password, user.password_hash):
            logger.info("Rejected login attempt")
            raise AuthenticationFailure(FAILED_LOGIN_MESSAGE)

        token = self.issue_token(user)
        logger.info(f"User {user.id} logged in")
        return token

    def issue_token(self, user: User) -> str:
        token_id = new_token_id()
        expire = token_expiry()
        self.tokens.create(
            {
                "user_id": user.id,
                "name": f"auth_token_{user.id}",
                "token_digest": token_digest(token_id),
                "expires_at": expire,
            }
        )
        return create_access_token(user.id, token_id, expire)

    def authenticate(self, token: str) -> User:
        """Resolve the user behind a bearer token or fail."""
        payload = decode_access_token(token)
        if payload is None or "sub" not in payload or "jti" not in payload:
            raise AuthenticationFailure()

        record = self.tokens.find_by_digest(token_digest(payload["jti"]))
        if record is None or str(record.user_id) != payload["sub"]:
            raise AuthenticationFailure()

        self.tokens.touch(record)
        return record.user

    def logout(self, caller: User) -> int:
        """Revoke every token of the caller, not only the one presented."""
        revoked = self.users.delete_tokens(caller)
        logger.info(f"User {caller.id} logged out, revoked {revoked} token(s)")
        return revoked
